#! /usr/bin/env python3

# Copyright (c) 2023, Teriks
#
# findreplace is distributed under the following BSD 3-Clause License
#
# Redistribution and use in source and binary forms, with or without modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice, this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright notice, this list of conditions and the following disclaimer in
#    the documentation and/or other materials provided with the distribution.
#
# 3. Neither the name of the copyright holder nor the names of its contributors may be used to endorse or promote products derived
#    from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT
# HOLDER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON
# ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
import os
import re

from setuptools import setup, find_packages

setup_path = os.path.dirname(os.path.abspath(__file__))


def version_from_file(path: str):
    with open(path, 'r') as f:
        version = re.search(r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]', f.read(), re.MULTILINE).group(1)
    return version


VERSION = version_from_file(os.path.join(setup_path, 'findreplace', 'resources.py'))

if not VERSION:
    raise RuntimeError('version is not set')

with open(os.path.join(setup_path, 'README.rst'), 'r', encoding='utf-8') as _f:
    README = _f.read()

if not README:
    raise RuntimeError('readme is not set')

requires = {
    'PyYAML': '>=6.0',
    'toml': '>=0.10.2'
}

extras: dict[str, list[str]] = {
    'dev': ['pytest>=7.0']
}

setup(name='findreplace',
      python_requires='>=3.10',
      author='Teriks',
      author_email='Teriks@users.noreply.github.com',
      version=VERSION,
      packages=find_packages(exclude=['tests', 'tests.*']),
      license='BSD 3-Clause',
      description='Find / replace control logic over abstract text buffers, '
                  'with in memory, row list and tkinter targets and a command line tool.',
      long_description=README,
      long_description_content_type="text/x-rst",
      install_requires=[name + spec for name, spec in requires.items()],
      extras_require=extras,
      entry_points={
          'console_scripts': [
              'findreplace = findreplace.cli:main'
          ]
      },
      classifiers=[
          'Intended Audience :: Developers',
          'Natural Language :: English',
          'Operating System :: OS Independent',
          'Environment :: Console',
          'Topic :: Text Editors',
          'Topic :: Text Processing',
          'Topic :: Utilities',
      ])
