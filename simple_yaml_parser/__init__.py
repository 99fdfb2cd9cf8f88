# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, The simple_yaml_parser authors
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


from .version import __version__, __version_info__


from .parsing import parse, parse_with_exit_signal, parse_events
from .scanning import YAMLScanner, ParseOptions
from .events import NamedKey, IndexedKey, PlainString, MultilineString, Number, Boolean, TRUE, FALSE
from .erring import ParseError, ParseErrorReason
