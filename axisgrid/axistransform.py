# axistransform.py
# conversion between data and plot coordinates on an axis

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

"""Transformations between data coordinates and normalized plot
coordinates, and the grid marks which go with them."""

import sys

from loguru import logger

from .axisticks import generateMarks
from .utils import nextPower, DegenerateBounds, LOG_BASE

class AxisTransform(object):
    """Base class of axis transformations.

    Subclasses convert data coordinates to normalized plot coordinates
    (0 at the minimum, 1 at the maximum of the bounds) and back, and
    work out where the grid marks should go.
    """

    def dataToPlot(self, bounds, x):
        """Convert data coordinate x to a normalized plot coordinate."""
        raise NotImplementedError

    def plotToData(self, bounds, x):
        """Convert normalized plot coordinate x to a data coordinate."""
        raise NotImplementedError

    def gridMarks(self, request):
        """Return a sorted list of GridMark for the GridInput request."""
        raise NotImplementedError

def _checkBounds(bounds):
    """Return (min, max) from bounds, checking they span a range."""
    try:
        minval, maxval = bounds
    except (TypeError, ValueError):
        raise DegenerateBounds('Bounds should be a (min, max) pair: %s' % (
            repr(bounds),))
    if minval == maxval:
        raise DegenerateBounds('Axis bounds have zero range: %s' % (
            repr(minval),))
    return minval, maxval

# marker for using the class maximum number of marks
_useDefault = object()

class LinearAxisTransform(AxisTransform):
    """Linear transformation, mapping x -> sign*x.

    sign is -1 if the axis is inverted, otherwise 1.
    """

    # maximum number of marks generated for a single step size
    # (None for no limit)
    max_marks = 1000000

    def __init__(self, invert=False, maxmarks=_useDefault):
        """Initialise the transform.

        invert: reverse the direction of the axis
        maxmarks: override max_marks for this transform (None for no limit)
        """
        self._invert = bool(invert)
        if maxmarks is not _useDefault:
            self.max_marks = maxmarks

    @classmethod
    def inverted(klass):
        return klass(invert=True)

    @classmethod
    def normal(klass):
        return klass(invert=False)

    @property
    def invert(self):
        return self._invert

    @property
    def sign(self):
        return -1. if self._invert else 1.

    def __repr__(self):
        return '<%s invert=%s>' % (self.__class__.__name__, self._invert)

    def dataToPlot(self, bounds, x):
        """Convert data coordinate to plot coordinate.

        x can be a number or numpy array. The result is not clipped to
        the bounds.
        """
        minval, maxval = _checkBounds(bounds)
        return self.sign * (x - minval) / (maxval - minval)

    def plotToData(self, bounds, x):
        """Convert plot coordinate back to data coordinate."""
        minval, maxval = _checkBounds(bounds)
        return minval + self.sign * x * (maxval - minval)

    def gridMarks(self, request):
        """Grid marks for the request, at three density levels."""

        if abs(request.base_step_size) < sys.float_info.epsilon:
            logger.debug(
                'Step size {} too small for grid marks', request.base_step_size)
            return []

        # The distance between two of the thinnest grid lines is
        # "rounded" up to the next-bigger power of the base
        smallest = nextPower(request.base_step_size, LOG_BASE)
        step_sizes = [smallest, smallest*LOG_BASE, smallest*LOG_BASE*LOG_BASE]
        logger.debug('Grid step sizes {}', step_sizes)

        return generateMarks(
            step_sizes, request.bounds, maxmarks=self.max_marks)
