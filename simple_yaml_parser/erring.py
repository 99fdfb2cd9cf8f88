# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, The simple_yaml_parser authors
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

# pylint:  disable=C0301

from . import tooling


class ParseErrorReason(object):
    '''
    Closed set of reasons a scan can fail.  Each `ParseError` carries exactly
    one of these.
    '''
    EXPECTED_COLON = 'ExpectedColon'
    EXPECTED_END_OF_VALUE = 'ExpectedEndOfValue'
    EXPECTED_BRACKET = 'ExpectedBracket'
    EXPECTED_TRUE_FALSE_NULL = 'ExpectedTrueFalseNull'
    EXPECTED_VALUE = 'ExpectedValue'

    ALL = frozenset([EXPECTED_COLON, EXPECTED_END_OF_VALUE, EXPECTED_BRACKET,
                     EXPECTED_TRUE_FALSE_NULL, EXPECTED_VALUE])


_REASON_MSGS = {ParseErrorReason.EXPECTED_COLON: 'Expected ":" after key',
                ParseErrorReason.EXPECTED_END_OF_VALUE: 'Expected end of value',
                ParseErrorReason.EXPECTED_BRACKET: 'Expected "]" to close inline list',
                ParseErrorReason.EXPECTED_TRUE_FALSE_NULL: 'Expected "true" or "false"; other capitalizations and null are not supported',
                ParseErrorReason.EXPECTED_VALUE: 'Expected a value'}


class SimpleYAMLException(Exception):
    '''
    Base simple_yaml_parser exception.
    '''
    pass


class ScanningException(SimpleYAMLException):
    '''
    Base scanning exception.
    '''
    def fmt_msg_with_traceback(self, msg, state, at):
        lineno, colno = tooling.offset_to_lineno_colno(state.source, at)
        traceback = 'In "{0}" at line {1}:{2}:'.format(state.source_name, lineno, colno)
        return '\n  {0}\n    {1}'.format(traceback, msg)


class Bug(ScanningException):
    '''
    There is a bug in the program, as opposed to invalid user data.

    This exception is used at the end of a sequence of if/elif/else as a
    fallthrough, so that a bug produces an error message with traceback
    information from the data instead of silently wrong output.
    '''
    def __init__(self, msg, state, at):
        self.msg = msg
        self.state = state
        self.at = at
    def __str__(self):
        return self.fmt_msg_with_traceback(self.msg, self.state, self.at)


class SourceDecodeError(ScanningException):
    '''
    Error during decoding of binary source.
    '''
    def __init__(self, err_msg):
        self.err_msg = err_msg
    def __str__(self):
        return 'Could not decode binary source, or received a non-Unicode, non-bytes object:\n  {0}'.format(self.err_msg)


class ParseError(ScanningException):
    '''
    Malformed input.  `at` is the code point offset of the offending
    character within the scanned string, and `reason` is one of the
    `ParseErrorReason` constants.
    '''
    def __init__(self, reason, at, state, msg=None):
        if reason not in ParseErrorReason.ALL:
            raise ValueError('Unknown parse error reason "{0}"'.format(reason))
        self.reason = reason
        self.at = at
        self.state = state
        self.msg = msg or _REASON_MSGS[reason]
        self.lineno, self.colno = tooling.offset_to_lineno_colno(state.source, at)
    def __str__(self):
        return self.fmt_msg_with_traceback('{0} ({1})'.format(self.msg, self.reason), self.state, self.at)
