# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, The simple_yaml_parser authors
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Print the events in a file, or in a sample document when no file is given:

    python -m simple_yaml_parser [PATH] [--indent-size N]
'''


import argparse
import io
import sys

from . import erring
from .parsing import parse_with_exit_signal
from .scanning import ParseOptions
from .tooling import format_key_path


SAMPLE = '''\
person:
  name: John Doe
  description: |
    something here
    that spans multiple lines
  age: 30
  something:
    x: true
  address:
    street: 123 Main St
    city: Example City
places:
  list: ["something", "here"]
  inner:
    x: string
'''


def main(argv=None):
    parser = argparse.ArgumentParser(prog='simple_yaml_parser',
                                     description='Print the (key path, value) events of a YAML-like file.')
    parser.add_argument('path', nargs='?', help='file to scan (UTF-8); the sample document is used when omitted')
    parser.add_argument('--indent-size', type=int, default=ParseOptions().indent_size,
                        help='columns per nesting level (default %(default)s)')
    args = parser.parse_args(argv)

    if args.path is None:
        source = SAMPLE
        source_name = '<sample>'
    else:
        with io.open(args.path, encoding='utf8') as f:
            source = f.read()
        source_name = args.path

    try:
        options = ParseOptions(indent_size=args.indent_size)
    except ValueError as e:
        parser.error(str(e))

    def print_event(key_path, value):
        print('{0} -> {1!r}'.format(format_key_path(key_path), value), file=sys.stderr)
        return False

    try:
        parse_with_exit_signal(source, print_event, options=options, source_name=source_name)
    except erring.ParseError as e:
        print('ParseError:{0}'.format(e), file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
