#!/usr/bin/env python3
#
# BTClimate - library to decode Bluetooth climate sensor advertisements.
#
# Copyright (C) 2022 by Artur Wroblewski <wrobell@riseup.net>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#


"""
Build setup for the BTClimate library.
"""

import ast
from setuptools import setup, find_packages

VERSION = ast.parse(
    next(l for l in open('btclimate/__init__.py') if l.startswith('__version__'))
).body[0].value.value

setup(
    name='btclimate',
    version=VERSION,
    author='Artur Wroblewski',
    author_email='wrobell@riseup.net',
    url='https://github.com/wrobell/btclimate',
    description='BTClimate - library to decode Bluetooth climate sensor advertisements',
    classifiers=[
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Development Status :: 3 - Alpha',
        'Topic :: Software Development :: Libraries',
    ],
    python_requires='>=3.9',
    packages=find_packages('.', exclude=['doc']),
    extras_require={
        'test': ['pytest'],
        'doc': ['sphinx', 'sphinx_rtd_theme'],
    },
    include_package_data=True,
    long_description=open('README').read(),
    long_description_content_type='text/x-rst',
)

# vim: sw=4:et:ai
