# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, The simple_yaml_parser authors
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Keys and values emitted by the scanner.

The vocabulary is closed.  Keys are `NamedKey` or `IndexedKey`; values are
`PlainString`, `MultilineString`, `Number`, or `Boolean` (the `TRUE` and
`FALSE` constants).  Every object has a `kind` attribute, so that consumers
can dispatch on a fixed set of strings rather than on class hierarchies.

String-bearing objects do not copy text out of the source.  They keep a
reference to the scanned string plus the offsets of their text, and slice
on access.  The offsets can be used to point back into the source.
'''


# pylint: disable=C0301

import re
from . import grammar


NEWLINE = grammar.LIT_GRAMMAR['newline']
INDENT = grammar.LIT_GRAMMAR['indent']
SPACE = grammar.LIT_GRAMMAR['space']

_number_re = re.compile(grammar.RE_GRAMMAR['number_named_groups'])




class SourceSlice(object):
    '''
    View of `source[start:end]`.  When only `source` is given, the view
    covers all of it, so `PlainString('abc')` is a valid standalone value.
    '''
    __slots__ = ['source', 'start', 'end']
    kind = None

    def __init__(self, source, start=None, end=None):
        if not isinstance(source, str):
            raise TypeError('source must be a string')
        if start is None:
            start = 0
        if end is None:
            end = len(source)
        if not all(isinstance(x, int) for x in (start, end)):
            raise TypeError
        if not 0 <= start <= end <= len(source):
            raise ValueError('Invalid slice {0}:{1} for source of length {2}'.format(start, end, len(source)))
        self.source = source
        self.start = start
        self.end = end

    @property
    def text(self):
        return self.source[self.start:self.end]

    def _cmp_key(self):
        return (self.kind, self.text)

    def __eq__(self, other):
        if not isinstance(other, SourceSlice):
            return NotImplemented
        return self._cmp_key() == other._cmp_key()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._cmp_key())

    def __repr__(self):
        return '{0}({1!r})'.format(type(self).__name__, self.text)




class NamedKey(SourceSlice):
    '''
    Mapping key.
    '''
    __slots__ = []
    kind = 'key'


class IndexedKey(object):
    '''
    Position within a list.
    '''
    __slots__ = ['index']
    kind = 'index'

    def __init__(self, index):
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError('index must be an integer')
        if index < 0:
            raise ValueError('index must be >= 0')
        self.index = index

    def __eq__(self, other):
        if not isinstance(other, IndexedKey):
            return NotImplemented
        return self.index == other.index

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.kind, self.index))

    def __repr__(self):
        return 'IndexedKey({0})'.format(self.index)




class PlainString(SourceSlice):
    '''
    Single-line scalar, trimmed, with surrounding quotes removed.
    '''
    __slots__ = []
    kind = 'str'

    @property
    def final_val(self):
        return self.text


class Number(SourceSlice):
    '''
    Numeric scalar.  Only produced when the scanner is created with
    `detect_numbers=True`.
    '''
    __slots__ = []
    kind = 'number'

    @property
    def final_val(self):
        m = _number_re.fullmatch(self.text)
        if m is None:
            raise ValueError('Invalid number literal "{0}"'.format(self.text))
        num_type = m.lastgroup
        num_str = self.text.replace('_', '')
        if num_type == 'float':
            return float(num_str)
        if num_type == 'dec_int':
            return int(num_str)
        return int(num_str, 0)


class MultilineString(SourceSlice):
    '''
    Block scalar introduced by `|` (literal) or `>` (folded).

    `text` is the raw block, including indentation, from the line after the
    header up to the end of the last line belonging to the block.

    collapse:                     Fold newlines into spaces.  Set by `>`.

    preserve_leading_whitespace:  Keep the block's indentation in
                                  `final_val`.  Set by `|+` and `>+`.
    '''
    __slots__ = ['collapse', 'preserve_leading_whitespace']
    kind = 'multiline_str'

    def __init__(self, source, start=None, end=None, collapse=False, preserve_leading_whitespace=False):
        if not all(isinstance(x, bool) for x in (collapse, preserve_leading_whitespace)):
            raise TypeError
        SourceSlice.__init__(self, source, start, end)
        self.collapse = collapse
        self.preserve_leading_whitespace = preserve_leading_whitespace

    def _cmp_key(self):
        return (self.kind, self.text, self.collapse, self.preserve_leading_whitespace)

    def __repr__(self):
        return 'MultilineString({0!r}, collapse={1}, preserve_leading_whitespace={2})'.format(self.text, self.collapse,
                                                                                             self.preserve_leading_whitespace)

    @staticmethod
    def _dedent(lines, indent=INDENT):
        '''
        Remove the indentation common to all non-blank lines.  Blank lines
        do not contribute, and are emptied.
        '''
        min_indent = None
        for line in lines:
            stripped = line.lstrip(indent)
            if not stripped.strip():
                continue
            line_indent = len(line) - len(stripped)
            if min_indent is None or line_indent < min_indent:
                min_indent = line_indent
        if min_indent is None:
            return ['' for line in lines]
        return [line[min_indent:] if line.strip() else '' for line in lines]

    @staticmethod
    def _fold(lines):
        '''
        Join consecutive non-blank lines with a space.  Each blank line
        becomes a newline.
        '''
        folded = []
        for line in lines:
            if not line.strip():
                folded.append(NEWLINE)
            elif folded and folded[-1] != NEWLINE:
                folded.append(SPACE + line)
            else:
                folded.append(line)
        return ''.join(folded)

    @property
    def final_val(self):
        lines = self.text.split(NEWLINE)
        while lines and not lines[-1].strip():
            lines.pop()
        if not self.preserve_leading_whitespace:
            lines = self._dedent(lines)
        if self.collapse:
            return self._fold(lines)
        return NEWLINE.join(lines)




class Boolean(object):
    '''
    `true` or `false`.  Use the `TRUE` and `FALSE` constants.
    '''
    __slots__ = ['value']
    kind = 'bool'

    def __init__(self, value):
        if not isinstance(value, bool):
            raise TypeError
        self.value = value

    @property
    def final_val(self):
        return self.value

    def __eq__(self, other):
        if not isinstance(other, Boolean):
            return NotImplemented
        return self.value == other.value

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        if self.value:
            return 'TRUE'
        return 'FALSE'


TRUE = Boolean(True)
FALSE = Boolean(False)

VALUE_KINDS = frozenset([PlainString.kind, MultilineString.kind, Number.kind, Boolean.kind])
