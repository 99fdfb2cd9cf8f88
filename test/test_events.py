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

import simple_yaml_parser.events as mdl

import pytest




def test_SourceSlice():
    s = 'key: value'
    v = mdl.PlainString(s, 5, 10)
    assert(v.text == 'value' and v.source is s)
    assert(v == mdl.PlainString('value'))
    assert(v != mdl.NamedKey('value'))
    assert(mdl.PlainString(s).text == s)
    assert(repr(v) == "PlainString('value')")
    assert(len(set([v, mdl.PlainString('value'), mdl.Number('value')])) == 2)
    with pytest.raises(ValueError):
        mdl.PlainString(s, 5, 11)
    with pytest.raises(ValueError):
        mdl.PlainString(s, 6, 5)
    with pytest.raises(TypeError):
        mdl.PlainString(b'value')
    with pytest.raises(TypeError):
        mdl.PlainString(s, 1.0, 2)


def test_keys():
    assert(mdl.NamedKey('a').kind == 'key')
    assert(mdl.IndexedKey(3).kind == 'index')
    assert(mdl.IndexedKey(3) == mdl.IndexedKey(3))
    assert(mdl.IndexedKey(3) != mdl.IndexedKey(4))
    assert(mdl.IndexedKey(0) != mdl.NamedKey('0'))
    assert(repr(mdl.IndexedKey(2)) == 'IndexedKey(2)')
    with pytest.raises(TypeError):
        mdl.IndexedKey('0')
    with pytest.raises(TypeError):
        mdl.IndexedKey(True)
    with pytest.raises(ValueError):
        mdl.IndexedKey(-1)


def test_Boolean():
    assert(mdl.TRUE.final_val is True and mdl.FALSE.final_val is False)
    assert(mdl.Boolean(True) == mdl.TRUE)
    assert(mdl.TRUE != mdl.FALSE)
    assert(repr(mdl.TRUE) == 'TRUE' and repr(mdl.FALSE) == 'FALSE')
    with pytest.raises(TypeError):
        mdl.Boolean('true')
    with pytest.raises(TypeError):
        mdl.Boolean(0)
    with pytest.raises(TypeError):
        mdl.Boolean(1)


def test_Number():
    assert(mdl.Number('42').final_val == 42)
    assert(mdl.Number('-7').final_val == -7)
    assert(mdl.Number('1_000_000').final_val == 1000000)
    assert(mdl.Number('0o17').final_val == 15)
    assert(mdl.Number('0b101').final_val == 5)
    assert(mdl.Number('-0x10').final_val == -16)
    assert(mdl.Number('3.5').final_val == 3.5)
    assert(mdl.Number('.5e1').final_val == 5.0)
    assert(mdl.Number('1e3').final_val == 1000.0)
    with pytest.raises(ValueError):
        mdl.Number('12 apples').final_val


def test_kinds():
    assert(mdl.VALUE_KINDS == set(['str', 'multiline_str', 'number', 'bool']))
    assert(mdl.PlainString('x').kind == 'str')
    assert(mdl.MultilineString('x').kind == 'multiline_str')


def test_MultilineString_eq():
    assert(mdl.MultilineString('x') == mdl.MultilineString('x'))
    assert(mdl.MultilineString('x') != mdl.MultilineString('x', collapse=True))
    assert(mdl.MultilineString('x') != mdl.MultilineString('x', preserve_leading_whitespace=True))
    assert(mdl.MultilineString('x') != mdl.PlainString('x'))
    with pytest.raises(TypeError):
        mdl.MultilineString('x', collapse='yes')
    with pytest.raises(TypeError):
        mdl.MultilineString('x', collapse=1)
    with pytest.raises(TypeError):
        mdl.MultilineString('x', preserve_leading_whitespace=0)


def test_MultilineString_final_val():
    s = '    first\n      indented\n\n    last\n\n'
    assert(mdl.MultilineString(s).final_val == 'first\n  indented\n\nlast')
    assert(mdl.MultilineString(s, collapse=True).final_val == 'first   indented\nlast')
    assert(mdl.MultilineString(s, preserve_leading_whitespace=True).final_val == '    first\n      indented\n\n    last')
    assert(mdl.MultilineString('  a\n  b\n\n\n  c', collapse=True).final_val == 'a b\n\nc')
    assert(mdl.MultilineString('').final_val == '')
    assert(mdl.MultilineString('\n  \n').final_val == '')
    assert(mdl.MultilineString('\ta\n\tb').final_val == 'a\nb')
