# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, The simple_yaml_parser authors
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


# pylint: disable=C0301


import re

from . import erring
from . import grammar
from .erring import ParseErrorReason
from .events import NamedKey, IndexedKey, PlainString, MultilineString, Number, TRUE, FALSE


BOM = grammar.LIT_GRAMMAR['bom']
INDENT_SIZE = grammar.PARAMS['indent_size']

TAB = grammar.LIT_GRAMMAR['tab']
SPACE = grammar.LIT_GRAMMAR['space']
NEWLINE = grammar.LIT_GRAMMAR['newline']

ASSIGN_KEY_VAL = grammar.LIT_GRAMMAR['assign_key_val']
OPEN_INDENTATION_LIST = grammar.LIT_GRAMMAR['open_indentation_list']
START_INLINE_LIST = grammar.LIT_GRAMMAR['start_inline_list']
END_INLINE_LIST = grammar.LIT_GRAMMAR['end_inline_list']
INLINE_LIST_DELIMS = grammar.LIT_GRAMMAR['inline_list_delims']
INLINE_ELEMENT_SEPARATOR = grammar.LIT_GRAMMAR['inline_element_separator']
QUOTE_DELIMS = grammar.LIT_GRAMMAR['quote_delims']
BLOCK_HEADERS = grammar.LIT_GRAMMAR['block_headers']

RESERVED_WORDS = grammar.RESERVED_WORDS
INVALID_RESERVED_WORDS = grammar.INVALID_RESERVED_WORDS

# Scanner modes
IDENTIFIER = 'identifier'
VALUE = 'value'
LIST_ITEM = 'list_item'
MULTILINE = 'multiline'
SKIP = 'skip'




class ParseOptions(object):
    '''
    Scanner configuration.

    indent_size:     Number of indentation columns that make up one nesting
                     level.  A tab counts as `indent_size` columns, a space
                     as one.

    detect_numbers:  Emit numeric scalars as `Number` rather than
                     `PlainString`.
    '''
    __slots__ = ['indent_size', 'detect_numbers']
    def __init__(self, *args, **kwargs):
        if args:
            raise TypeError('Explicit keyword arguments are required')
        indent_size = kwargs.pop('indent_size', INDENT_SIZE)
        detect_numbers = kwargs.pop('detect_numbers', False)
        if kwargs:
            raise TypeError('Unexpected keyword argument(s) {0}'.format(', '.join('"{0}"'.format(k) for k in kwargs)))
        if not isinstance(indent_size, int) or isinstance(indent_size, bool):
            raise TypeError('indent_size must be an integer')
        if indent_size < 1:
            raise ValueError('indent_size must be >= 1')
        if not isinstance(detect_numbers, bool):
            raise TypeError('detect_numbers must be True or False')
        self.indent_size = indent_size
        self.detect_numbers = detect_numbers

    def __repr__(self):
        return 'ParseOptions(indent_size={0}, detect_numbers={1})'.format(self.indent_size, self.detect_numbers)




class State(object):
    '''
    Keep track of a data source and everything that changes while it is
    scanned:  the current mode, the key chain, list ordinals, and offsets
    within the current line.

    `key_chain` is the path from the root to the value currently being
    assembled.  Its positions correspond to nesting levels.  A list index
    occupies the level of its `-`, and the first key of a mapping list item
    occupies the next level.

    `ordinals[p]` is the next index for a list whose indices sit at position
    `p` of the key chain.

    `compact_levels` holds the indentation levels of open lists whose `-`
    lines sit at the same column as their owning key.  Everything indented
    past such a level is one key-chain position deeper than its
    indentation alone would give.  `awaiting_nested` is true while the
    last key in the chain has a blank value and nothing nested under it
    yet.
    '''
    __slots__ = ['source', 'source_name',
                 'callback', 'stopped',
                 'mode', 'key_chain', 'ordinals', 'compact_levels',
                 'awaiting_nested', 'quote',
                 'indent', 'start', 'item_level',
                 'block_indent', 'block_collapse', 'block_preserve_leading_whitespace']
    def __init__(self, source, callback, source_name=None):
        if not isinstance(source, str):
            raise TypeError
        if source_name is not None and not isinstance(source_name, str):
            raise TypeError
        if not hasattr(callback, '__call__'):
            raise TypeError('callback must be callable')

        self.source = source
        self.source_name = source_name or '<data>'
        self.callback = callback
        self.stopped = False

        self.mode = SKIP
        self.key_chain = []
        self.ordinals = []
        self.compact_levels = []
        self.awaiting_nested = False
        self.quote = None
        self.indent = 0
        self.start = 0
        self.item_level = 0

        self.block_indent = 0
        self.block_collapse = False
        self.block_preserve_leading_whitespace = False

        if source[:1] == BOM:
            self.start = 1




class YAMLScanner(object):
    '''
    Scan a YAML-like string into `(key_path, value)` events.

    A `YAMLScanner` instance is intended to be static once created.  Each
    string that is scanned has a `State` instance created for it, and all
    mutability is confined within that object.  This allows a single
    scanner to be used for any number of sources.
    '''
    __slots__ = ['options', '_parse_mode', '_number_re']
    def __init__(self, *args, **kwargs):
        if args:
            raise TypeError('Explicit keyword arguments are required')
        options = kwargs.pop('options', None)
        if options is None:
            options = ParseOptions(**kwargs)
        elif kwargs:
            raise TypeError('Cannot combine "options" with individual option keywords')
        elif not isinstance(options, ParseOptions):
            raise TypeError('options must be a ParseOptions instance')
        self.options = options

        self._parse_mode = {IDENTIFIER: self._parse_identifier,
                            VALUE: self._parse_value,
                            LIST_ITEM: self._parse_list_item,
                            MULTILINE: self._parse_multiline,
                            SKIP: self._parse_skip}

        self._number_re = re.compile(grammar.RE_GRAMMAR['number_named_groups'])


    @staticmethod
    def _as_unicode_string(unicode_string_or_bytes):
        '''
        Take an object that may be a Unicode string or bytes, and return
        a Unicode string.
        '''
        if isinstance(unicode_string_or_bytes, str):
            unicode_string = unicode_string_or_bytes
        else:
            try:
                unicode_string = unicode_string_or_bytes.decode('utf8')
            except Exception as e:
                raise erring.SourceDecodeError(e)
        return unicode_string


    def scan(self, unicode_string_or_bytes, callback, source_name=None):
        '''
        Scan the whole source, invoking `callback(key_path, value)` for each
        value.  The callback's return value is ignored.
        '''
        if not hasattr(callback, '__call__'):
            raise TypeError('callback must be callable')
        def callback_without_exit(key_path, value):
            callback(key_path, value)
            return False
        self.scan_with_exit_signal(unicode_string_or_bytes, callback_without_exit, source_name=source_name)


    def scan_with_exit_signal(self, unicode_string_or_bytes, callback, source_name=None):
        '''
        Scan the source, invoking `callback(key_path, value)` for each value.
        When the callback returns a true value, scanning stops immediately
        and no further callbacks are made.

        `key_path` is a tuple of `NamedKey` and `IndexedKey`.  Raises
        `erring.ParseError` on the first malformed construct.
        '''
        source = self._as_unicode_string(unicode_string_or_bytes)
        state = State(source, callback, source_name=source_name)
        parse_mode = self._parse_mode
        for index in range(state.start, len(source)):
            parse_mode[state.mode](state, index, source[index])
            if state.stopped:
                return
        # End of input acts as a final newline, so that a trailing value is
        # flushed and trailing key text without a colon is an error
        parse_mode[state.mode](state, len(source), NEWLINE)


    def _columns(self, text):
        '''
        Width of `text` in columns, with tabs expanded to `indent_size`.
        '''
        indent_size = self.options.indent_size
        return sum(indent_size if c == TAB else 1 for c in text)


    @staticmethod
    def _trim(source, start, end):
        '''
        Shrink `start:end` to exclude surrounding whitespace.
        '''
        while start < end and source[start].isspace():
            start += 1
        while end > start and source[end-1].isspace():
            end -= 1
        return start, end


    @staticmethod
    def _followed_by_whitespace(source, index):
        '''
        List indicators, and keys within list items, must be followed by
        whitespace or the end of the source.
        '''
        next_char = source[index+1:index+2]
        return not next_char or next_char.isspace()


    @staticmethod
    def _truncate(state, level):
        if level < len(state.key_chain):
            del state.key_chain[level:]


    @staticmethod
    def _key_position(state, level):
        '''
        Key-chain position of a key at indentation `level`.  A key at or
        left of a compact list's `-` closes that list.
        '''
        compact_levels = state.compact_levels
        while compact_levels and compact_levels[-1] >= level:
            compact_levels.pop()
        return level + len(compact_levels)


    @staticmethod
    def _item_position(state, level):
        '''
        Key-chain position of the index for a `-` at indentation `level`.
        A `-` at the position of a key still awaiting nested content
        belongs to that key, which opens a compact list.
        '''
        compact_levels = state.compact_levels
        while compact_levels and compact_levels[-1] > level:
            compact_levels.pop()
        position = level + len(compact_levels)
        if (state.awaiting_nested and position == len(state.key_chain) - 1 and
                not (compact_levels and compact_levels[-1] == level)):
            compact_levels.append(level)
            position += 1
        return position


    def _push_key(self, state, level, key):
        '''
        Re-anchor the key chain at `level` and append a named key.  Lists
        below the new key start counting from zero.
        '''
        self._truncate(state, level)
        position = len(state.key_chain)
        state.key_chain.append(key)
        del state.ordinals[position+1:]
        state.awaiting_nested = False


    def _push_index(self, state, level):
        state.awaiting_nested = False
        self._truncate(state, level)
        position = len(state.key_chain)
        ordinals = state.ordinals
        while len(ordinals) <= position:
            ordinals.append(0)
        state.key_chain.append(IndexedKey(ordinals[position]))
        ordinals[position] += 1


    @staticmethod
    def _pop(state, at):
        if not state.key_chain:
            raise erring.Bug('Attempted to leave a value when no key was open', state, at)
        state.key_chain.pop()


    @staticmethod
    def _emit(state, value):
        if state.callback(tuple(state.key_chain), value):
            state.stopped = True


    def _scalar(self, state, start, end):
        '''
        Convert the trimmed text `start:end` into a value.
        '''
        source = state.source
        first_char = source[start]
        if first_char in QUOTE_DELIMS:
            closing_index = source.find(first_char, start+1, end)
            if closing_index < 0:
                raise erring.ParseError(ParseErrorReason.EXPECTED_END_OF_VALUE, end, state,
                                        'Unterminated quoted string; expected closing {0}'.format(first_char))
            if closing_index != end - 1:
                raise erring.ParseError(ParseErrorReason.EXPECTED_END_OF_VALUE, closing_index + 1, state,
                                        'Unexpected text after closing quote')
            return PlainString(source, start+1, closing_index)
        text = source[start:end]
        if text in RESERVED_WORDS:
            if RESERVED_WORDS[text]:
                return TRUE
            return FALSE
        if text in INVALID_RESERVED_WORDS:
            raise erring.ParseError(ParseErrorReason.EXPECTED_TRUE_FALSE_NULL, start, state,
                                    'Invalid literal "{0}"; only "true" and "false" are supported'.format(text))
        if self.options.detect_numbers and self._number_re.fullmatch(text):
            return Number(source, start, end)
        return PlainString(source, start, end)


    def _emit_scalar(self, state, start, end):
        if state.source[start] == START_INLINE_LIST:
            self._emit_inline_list(state, start, end)
        else:
            self._emit(state, self._scalar(state, start, end))


    def _emit_inline_list(self, state, start, end):
        '''
        Emit each element of an inline list `[a, "b", c]` under an extra
        index.  Elements are scalars; nested inline lists are not supported.
        '''
        source = state.source
        closing_index = None
        quote = None
        for index in range(start + 1, end):
            c = source[index]
            if quote is not None:
                if c == quote:
                    quote = None
            elif c in QUOTE_DELIMS:
                quote = c
            elif c in INLINE_LIST_DELIMS:
                if c != END_INLINE_LIST:
                    raise erring.ParseError(ParseErrorReason.EXPECTED_BRACKET, index, state,
                                            'Nested inline lists are not supported')
                closing_index = index
                break
        if closing_index is None:
            raise erring.ParseError(ParseErrorReason.EXPECTED_BRACKET, end, state)
        if closing_index != end - 1:
            raise erring.ParseError(ParseErrorReason.EXPECTED_END_OF_VALUE, closing_index + 1, state,
                                    'Unexpected text after closing "{0}"'.format(END_INLINE_LIST))
        element_start = start + 1
        if not source[element_start:closing_index].strip():
            return
        ordinal = 0
        for index in range(element_start, closing_index + 1):
            # `closing_index` ends the final element
            if index < closing_index:
                c = source[index]
                if quote is not None:
                    if c == quote:
                        quote = None
                    continue
                if c in QUOTE_DELIMS:
                    quote = c
                    continue
                if c != INLINE_ELEMENT_SEPARATOR:
                    continue
            value_start, value_end = self._trim(source, element_start, index)
            if value_start == value_end:
                raise erring.ParseError(ParseErrorReason.EXPECTED_VALUE, index, state,
                                        'Missing inline list element')
            state.key_chain.append(IndexedKey(ordinal))
            self._emit(state, self._scalar(state, value_start, value_end))
            state.key_chain.pop()
            if state.stopped:
                return
            ordinal += 1
            element_start = index + 1


    def _start_block(self, state, index, header, block_indent):
        '''
        Enter a block scalar whose header line ends at `index`.  The block
        may end immediately, if the next line is already dedented.
        '''
        state.block_collapse, state.block_preserve_leading_whitespace = BLOCK_HEADERS[header]
        state.block_indent = block_indent
        state.start = min(index + 1, len(state.source))
        state.mode = MULTILINE
        self._parse_multiline(state, index, NEWLINE)


    def _block_continues(self, state, index):
        '''
        Check whether the line after the newline at `index` belongs to the
        current block.  Blank lines always do.
        '''
        source = state.source
        indent_size = self.options.indent_size
        indent = 0
        position = index + 1
        while position < len(source):
            c = source[position]
            if c == NEWLINE:
                return True
            if c == TAB:
                indent += indent_size
            elif c == SPACE:
                indent += 1
            elif not c.isspace():
                return indent > state.block_indent
            position += 1
        # Trailing whitespace at the end of the source is a blank line
        return position > index + 1


    def _parse_identifier(self, state, index, c):
        if c == ASSIGN_KEY_VAL:
            key_start, key_end = self._trim(state.source, state.start, index)
            level = self._key_position(state, state.indent // self.options.indent_size)
            self._push_key(state, level, NamedKey(state.source, key_start, key_end))
            state.mode = VALUE
            state.start = index + 1
        elif c == NEWLINE:
            raise erring.ParseError(ParseErrorReason.EXPECTED_COLON, index, state)


    def _parse_value(self, state, index, c):
        source = state.source
        if c == OPEN_INDENTATION_LIST:
            if not source[state.start:index].strip() and self._followed_by_whitespace(source, index):
                # The value is itself a list, starting on the key's line
                state.item_level = len(state.key_chain)
                state.quote = None
                state.mode = LIST_ITEM
                state.start = index + 1
        elif c == NEWLINE:
            value_start, value_end = self._trim(source, state.start, index)
            if value_start == value_end:
                # Key with nested content on the following lines
                state.awaiting_nested = True
                state.mode = SKIP
            elif source[value_start:value_end] in BLOCK_HEADERS:
                self._start_block(state, index, source[value_start:value_end], state.indent)
            else:
                self._emit_scalar(state, value_start, value_end)
                self._pop(state, index)
                state.mode = SKIP
            state.indent = 0


    def _parse_list_item(self, state, index, c):
        source = state.source
        if state.quote is not None:
            if c == state.quote:
                state.quote = None
                return
            if c != NEWLINE:
                return
        if c in QUOTE_DELIMS:
            # A quote opens a scalar only where a scalar or inline list
            # element can begin
            preceding = source[state.start:index].strip()
            if not preceding or preceding[-1] in (START_INLINE_LIST, INLINE_ELEMENT_SEPARATOR):
                state.quote = c
        elif c == ASSIGN_KEY_VAL and self._followed_by_whitespace(source, index):
            key_start, key_end = self._trim(source, state.start, index)
            self._push_index(state, state.item_level)
            self._push_key(state, len(state.key_chain), NamedKey(source, key_start, key_end))
            # Anything nested under this key, including the body of a block
            # scalar, is measured against the key's column rather than the `-`
            line_start = source.rfind(NEWLINE, 0, key_start) + 1
            state.indent = self._columns(source[line_start:key_start])
            state.mode = VALUE
            state.start = index + 1
        elif c == NEWLINE:
            # An unterminated quote is reported by the scalar
            state.quote = None
            value_start, value_end = self._trim(source, state.start, index)
            if value_start == value_end:
                raise erring.ParseError(ParseErrorReason.EXPECTED_VALUE, index, state,
                                        'Missing value for list item')
            self._push_index(state, state.item_level)
            if source[value_start:value_end] in BLOCK_HEADERS:
                self._start_block(state, index, source[value_start:value_end], state.indent)
            else:
                self._emit_scalar(state, value_start, value_end)
                self._pop(state, index)
                state.mode = SKIP
            state.indent = 0


    def _parse_multiline(self, state, index, c):
        if c != NEWLINE or self._block_continues(state, index):
            return
        value = MultilineString(state.source, state.start, max(index, state.start),
                                collapse=state.block_collapse,
                                preserve_leading_whitespace=state.block_preserve_leading_whitespace)
        self._emit(state, value)
        self._pop(state, index)
        state.mode = SKIP
        state.indent = 0


    def _parse_skip(self, state, index, c):
        if c == OPEN_INDENTATION_LIST and self._followed_by_whitespace(state.source, index):
            state.item_level = self._item_position(state, state.indent // self.options.indent_size)
            state.quote = None
            state.mode = LIST_ITEM
            state.start = index + 1
        elif c == TAB:
            state.indent += self.options.indent_size
        elif c == SPACE:
            state.indent += 1
        elif c == NEWLINE:
            state.indent = 0
        elif not c.isspace():
            state.mode = IDENTIFIER
            state.start = index
