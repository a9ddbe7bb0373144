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
Return axisgrid's version number
"""

import os.path

# directory containing the VERSION file
resourceDirectory = os.path.abspath(
    os.path.join(os.path.dirname(__file__), '..'))

_ver = None
def version():
    """Return the version number as a string."""

    global _ver
    if _ver:
        return _ver

    filename = os.path.join(resourceDirectory, 'VERSION')
    with open(filename) as f:
        _ver = f.readline().strip()
    return _ver
