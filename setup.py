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
from io import open


if sys.version_info < (3, 6):
    sys.exit('simple_yaml_parser requires Python 3.6+')

from setuptools import setup


# Extract the version from version.py
fname = os.path.join(os.path.dirname(__file__), 'simple_yaml_parser', 'version.py')
with open(fname, 'r', encoding='utf8') as f:
    t = ''.join([line for line in f.readlines() if line.startswith('__version')])
    if not t:
        raise RuntimeError('Failed to extract version from "version.py"')
    c = compile(t, 'simple_yaml_parser/version.py', 'exec')
    exec(c)
version = __version__

fname = os.path.join(os.path.dirname(__file__), 'README.rst')
with open(fname, encoding='utf8') as f:
    long_description = f.read()


setup(name = 'simple_yaml_parser',
      version = version,
      py_modules = [],
      packages = ['simple_yaml_parser'],
      description = 'Single-pass scanner for a line-oriented YAML subset',
      long_description = long_description,
      author = 'The simple_yaml_parser authors',
      license = 'BSD',
      keywords = ['yaml', 'configuration', 'parser', 'scanner'],
      python_requires = '>=3.6',
      extras_require = {'test': ['pytest']},
      # https://pypi.python.org/pypi?:action=list_classifiers
      classifiers = [
          'Development Status :: 4 - Beta',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: BSD License',
          'Operating System :: OS Independent',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
          'Topic :: Software Development :: Libraries',
          'Topic :: Text Processing',
          'Topic :: Utilities',
      ]
)
