# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, The simple_yaml_parser authors
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


from .scanning import YAMLScanner, ParseOptions


_DEFAULT_SCANNER = YAMLScanner()


def _scanner_for(options):
    if options is None:
        return _DEFAULT_SCANNER
    if not isinstance(options, ParseOptions):
        raise TypeError('options must be a ParseOptions instance')
    return YAMLScanner(options=options)


def parse(s, callback, source_name=None):
    '''
    Scan a Unicode or byte string with default options, invoking
    `callback(key_path, value)` for every value.
    '''
    _DEFAULT_SCANNER.scan(s, callback, source_name=source_name)


def parse_with_exit_signal(s, callback, options=None, source_name=None):
    '''
    Scan a Unicode or byte string, invoking `callback(key_path, value)` for
    every value until the callback returns a true value.
    '''
    _scanner_for(options).scan_with_exit_signal(s, callback, source_name=source_name)


def parse_events(s, options=None, source_name=None):
    '''
    Scan a Unicode or byte string and return a list of
    `(key_path, value)` tuples in document order.
    '''
    events = []
    def collect(key_path, value):
        events.append((key_path, value))
    _scanner_for(options).scan(s, collect, source_name=source_name)
    return events
