# utilfuncs.py
# numeric utility functions

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
###############################################################################

import math
import numpy as N

# base used when rounding step sizes to a power
LOG_BASE = 10.

class AxisGridException(Exception):
    """Base class of errors raised by axisgrid."""

class DegenerateBounds(AxisGridException, ValueError):
    """Axis bounds which do not span a range (min == max)."""

class InvertedInterval(AxisGridException, ValueError):
    """Interval where min is not less than or equal to max."""

class InvalidMagnitude(AxisGridException, ValueError):
    """Zero or non-finite value where a magnitude is required."""

class MarkLimitExceeded(AxisGridException, RuntimeError):
    """Too many grid marks would be generated."""

def cmpFloat(a, b):
    """Compare two floats, giving a total order.

    Returns -1, 0 or 1. NaN values are placed after all other values,
    and two NaNs are equal.
    """
    if a < b:
        return -1
    elif a > b:
        return 1
    elif a == b:
        return 0

    # at least one is NaN
    return int(N.isnan(a)) - int(N.isnan(b))

def _logBase(value, base):
    """Logarithm of value in base.

    Use the specialised routines where possible, so that exact powers
    give exact answers (math.log(1000, 10) is not 3).
    """
    if base == 10:
        return math.log10(value)
    elif base == 2:
        return math.log2(value)
    return math.log(value) / math.log(base)

def nextPower(value, base=LOG_BASE):
    """Return the next bigger (or equal) power of base to abs(value).

    nextPower(0.01, 10) == 0.01
    nextPower(0.02, 10) == 0.1
    nextPower(0.2, 10) == 1.

    The sign of value is ignored (a Y axis often has negative steps).
    Raises InvalidMagnitude if value is zero or not finite.
    """

    if not N.isfinite(base) or base <= 1:
        raise InvalidMagnitude('Bad power base: %s' % repr(base))
    if value == 0 or not N.isfinite(value):
        raise InvalidMagnitude('Cannot round %s to a power of %s' % (
            repr(value), repr(base)))

    return float(base) ** math.ceil(_logBase(abs(value), base))
