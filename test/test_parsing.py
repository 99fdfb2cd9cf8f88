# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, The simple_yaml_parser authors
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


import sys
import os

if all(os.path.isdir(x) for x in ('simple_yaml_parser', 'test')):
    sys.path.insert(0, '.')

import simple_yaml_parser as syp
import simple_yaml_parser.parsing as mdl
import simple_yaml_parser.__main__ as cli

import pytest




def test_parse():
    events = []
    assert(mdl.parse('a:\n  b: 1\nc: true\n', lambda k, v: events.append((k, v))) is None)
    assert(events == [((syp.NamedKey('a'), syp.NamedKey('b')), syp.PlainString('1')),
                      ((syp.NamedKey('c'),), syp.TRUE)])


def test_parse_ignores_return_value():
    events = []
    mdl.parse('a: 1\nb: 2\n', lambda k, v: events.append(v) or True)
    assert(len(events) == 2)


def test_parse_with_exit_signal():
    events = []
    mdl.parse_with_exit_signal('a: 1\nb: 2\nc: 3\n', lambda k, v: events.append(v) or len(events) == 1)
    assert(events == [syp.PlainString('1')])

    events = []
    mdl.parse_with_exit_signal('a:\n    b: 1\n', lambda k, v: events.append(k) and False,
                               options=syp.ParseOptions(indent_size=4))
    assert(events == [(syp.NamedKey('a'), syp.NamedKey('b'))])

    with pytest.raises(TypeError):
        mdl.parse_with_exit_signal('a: 1\n', lambda k, v: False, options={'indent_size': 4})


def test_parse_events():
    events = mdl.parse_events('a: [x, y]\n')
    assert(events == [((syp.NamedKey('a'), syp.IndexedKey(0)), syp.PlainString('x')),
                      ((syp.NamedKey('a'), syp.IndexedKey(1)), syp.PlainString('y'))])
    assert(mdl.parse_events('a: 1\n', options=syp.ParseOptions(detect_numbers=True)) ==
           [((syp.NamedKey('a'),), syp.Number('1'))])
    with pytest.raises(syp.ParseError) as excinfo:
        mdl.parse_events('a: 1\nb\n', source_name='x.yaml')
    assert(excinfo.value.reason == syp.ParseErrorReason.EXPECTED_COLON)
    assert('"x.yaml"' in str(excinfo.value))


def test_version():
    assert(isinstance(syp.__version__, str))
    assert(syp.__version__ == '.'.join(str(x) for x in syp.__version_info__))




def test_cli_sample(capsys):
    assert(cli.main([]) == 0)
    err = capsys.readouterr().err
    lines = err.splitlines()
    assert(lines[0] == "person.name -> PlainString('John Doe')")
    assert("places.list[1] -> PlainString('here')" in lines)
    assert('person.something.x -> TRUE' in lines)
    assert(len(lines) == 9)


def test_cli_file(tmp_path, capsys):
    path = tmp_path / 'doc.yaml'
    path.write_text('a:\n    b: 1\n', encoding='utf8')
    assert(cli.main([str(path), '--indent-size', '4']) == 0)
    assert(capsys.readouterr().err.splitlines() == ["a.b -> PlainString('1')"])

    path.write_text('a: 1\nb\n', encoding='utf8')
    assert(cli.main([str(path)]) == 1)
    err = capsys.readouterr().err
    assert('ExpectedColon' in err and 'line 2:2' in err)


def test_cli_bad_indent_size(capsys):
    with pytest.raises(SystemExit):
        cli.main(['--indent-size', '0'])
