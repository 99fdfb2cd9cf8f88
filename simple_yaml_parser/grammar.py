# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, The simple_yaml_parser authors
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


# pylint: disable=C0301, C0330

import itertools




# Non-textual general parameters
PARAMS = {'indent_size': 2}




# Assemble literal grammar
_RAW_LIT_GRAMMAR = [# Whitespace
                    ('tab', '\t'),
                    ('space', '\x20'),
                    ('indent', '{tab}{space}'),
                    ('newline', '\n'),
                    ('whitespace', '{indent}{newline}'),
                    # Keywords
                    ('bool_true', 'true'),
                    ('bool_false', 'false'),
                    ('none_type', 'null'),
                    ('none_alias', '~'),
                    # Other
                    ('bom', '\uFEFF')]

_RAW_LIT_SPECIAL = [# Special code points
                    ('assign_key_val', ':'),
                    ('open_indentation_list', '-'),
                    ('start_inline_list', '['),
                    ('end_inline_list', ']'),
                    ('inline_element_separator', ','),
                    ('block_literal', '|'),
                    ('block_folded', '>'),
                    ('block_keep', '+'),
                    ('block_strip', '-'),
                    ('singlequote_delim', "'"),
                    ('doublequote_delim', '"'),
                    ('path_separator', '.'),
                    # Combinations
                    ('quote_delims', '{singlequote_delim}{doublequote_delim}'),
                    ('inline_list_delims', '{start_inline_list}{end_inline_list}')]
_RAW_LIT_GRAMMAR.extend(_RAW_LIT_SPECIAL)

LIT_GRAMMAR = {}
for k, v in _RAW_LIT_GRAMMAR:
    LIT_GRAMMAR[k] = v.format(**LIT_GRAMMAR)

# Block scalar headers, mapped to `(collapse, preserve_leading_whitespace)`
LIT_GRAMMAR['block_headers'] = {LIT_GRAMMAR['block_literal']: (False, False),
                                LIT_GRAMMAR['block_literal'] + LIT_GRAMMAR['block_strip']: (False, False),
                                LIT_GRAMMAR['block_literal'] + LIT_GRAMMAR['block_keep']: (False, True),
                                LIT_GRAMMAR['block_folded']: (True, False),
                                LIT_GRAMMAR['block_folded'] + LIT_GRAMMAR['block_strip']: (True, False),
                                LIT_GRAMMAR['block_folded'] + LIT_GRAMMAR['block_keep']: (True, True)}




# Reserved words.  Only the all-lowercase booleans are valid values.  Every
# other capitalization of a boolean, and every spelling of null, is invalid
# as an unquoted scalar rather than silently becoming a string.  All
# permutations are generated and put in a set, which avoids a regex.
RESERVED_WORDS = {LIT_GRAMMAR['bool_true']: True,
                  LIT_GRAMMAR['bool_false']: False}

def _capitalization_permutations(*words):
    return set(''.join(perm) for word in words for perm in itertools.product(*zip(word.lower(), word.upper())))

INVALID_RESERVED_WORDS = _capitalization_permutations(LIT_GRAMMAR['bool_true'],
                                                      LIT_GRAMMAR['bool_false'],
                                                      LIT_GRAMMAR['none_type'])
INVALID_RESERVED_WORDS -= set(RESERVED_WORDS)
INVALID_RESERVED_WORDS.add(LIT_GRAMMAR['none_alias'])




# Assemble regex grammar
_RAW_RE_GRAMMAR = [('sign', '[+-]'),
                   ('dec_digits', '[0-9]+(?:_[0-9]+)*'),
                   ('hex_digits', '[0-9a-fA-F]+(?:_[0-9a-fA-F]+)*'),
                   ('oct_digits', '[0-7]+(?:_[0-7]+)*'),
                   ('bin_digits', '[01]+(?:_[01]+)*'),
                   ('dec_exponent', '[eE]{sign}?{dec_digits}'),
                   ('dec_integer', '{sign}?{dec_digits}'),
                   ('hex_integer', '{sign}?0x{hex_digits}'),
                   ('oct_integer', '{sign}?0o{oct_digits}'),
                   ('bin_integer', '{sign}?0b{bin_digits}'),
                   ('dec_float', '{sign}?(?:{dec_digits}\\.(?:{dec_digits})?(?:{dec_exponent})?|\\.{dec_digits}(?:{dec_exponent})?|{dec_digits}{dec_exponent})'),
                   ('number_named_groups', '(?P<float>{dec_float})|(?P<hex_int>{hex_integer})|(?P<oct_int>{oct_integer})|(?P<bin_int>{bin_integer})|(?P<dec_int>{dec_integer})')]

RE_GRAMMAR = {}
for k, v in _RAW_RE_GRAMMAR:
    RE_GRAMMAR[k] = v.format(**RE_GRAMMAR)
