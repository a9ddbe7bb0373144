#!/usr/bin/env python3

#    Copyright (C) 2024 Jeremy S. Sanders
#    Email: Jeremy Sanders <jeremy@jeremysanders.net>
#
#    This program is free software; you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation; either version 2 of the License, or
#    (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License along
#    with this program; if not, write to the Free Software Foundation, Inc.,
#    51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
##############################################################################

"""
axisgrid setuptools script
"""

import os.path

from setuptools import setup

def readVersion():
    """Get version from VERSION file in package."""
    filename = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                            'axisgrid', 'VERSION')
    with open(filename) as f:
        return f.readline().strip()

setup(
    name='axisgrid',
    version=readVersion(),
    description='Axis coordinate transforms and grid mark generation',
    license='GPL-2.0-or-later',
    python_requires='>=3.8',
    packages=['axisgrid', 'axisgrid.utils'],
    package_data={'axisgrid': ['VERSION']},
    install_requires=['numpy', 'loguru'],
)
