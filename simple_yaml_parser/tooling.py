# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, The simple_yaml_parser authors
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


NEWLINE = '\n'


def offset_to_lineno_colno(source, offset):
    '''
    Convert a code point offset within `source` into a 1-based line number
    and column number.  An offset at the end of the source (one past the last
    code point) is valid, and refers to the position after the final code
    point.
    '''
    if offset < 0 or offset > len(source):
        raise ValueError('Offset {0} is outside the source'.format(offset))
    lineno = source.count(NEWLINE, 0, offset) + 1
    line_start = source.rfind(NEWLINE, 0, offset) + 1
    return lineno, offset - line_start + 1


def format_key_path(key_path, path_separator='.'):
    '''
    Format a key path for display:  named keys are joined with `.`, and
    indices are appended in brackets, as in `places.list[0]`.
    '''
    parts = []
    for key in key_path:
        if key.kind == 'index':
            parts.append('[{0}]'.format(key.index))
        elif parts:
            parts.append(path_separator + key.text)
        else:
            parts.append(key.text)
    return ''.join(parts)
