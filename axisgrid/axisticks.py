# axisticks.py
# algorithm to work out where grid marks should go on an axis

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

"""Algorithms for working out grid marks.

Candidate marks are generated at several step sizes (tiers), each a
multiple of the last. These overlap, so they are merged into a single
sorted list, where each position is reported once with the coarsest
tier which hits it.
"""

import collections
import functools
import math

import numpy as N
from loguru import logger

from .utils import cmpFloat, InvalidMagnitude, InvertedInterval, \
    MarkLimitExceeded

# a single grid mark and the step size (density tier) which produced it
GridMark = collections.namedtuple('GridMark', ['value', 'step_size'])

# visible range (min, max) and the finest spacing to consider
GridInput = collections.namedtuple('GridInput', ['bounds', 'base_step_size'])

_markKey = functools.cmp_to_key(lambda a, b: cmpFloat(a.value, b.value))

def fillMarksBetween(step_size, minval, maxval, maxmarks=None):
    """Return marks for the multiples of step_size in [minval, maxval).

    A multiple exactly at maxval is not included.

    If maxmarks is given, raise MarkLimitExceeded rather than
    returning more marks than this.
    """

    if not N.isfinite(step_size) or step_size <= 0:
        raise InvalidMagnitude('Bad step size: %s' % repr(step_size))
    if not minval <= maxval:
        raise InvertedInterval(
            'Bad plot bounds: min: %s, max: %s' % (repr(minval), repr(maxval)))

    startmult = minval / step_size
    stopmult = maxval / step_size
    if not (N.isfinite(startmult) and N.isfinite(stopmult)):
        raise MarkLimitExceeded(
            'Unbounded number of marks between %s and %s' % (
                repr(minval), repr(maxval)))

    first = int(math.ceil(startmult))
    last = int(math.ceil(stopmult))
    if maxmarks is not None and last - first > maxmarks:
        raise MarkLimitExceeded(
            '%i marks with step %s exceeds limit of %i' % (
                last - first, repr(step_size), maxmarks))

    values = (N.arange(last - first) + float(first)) * step_size
    return [GridMark(v, step_size) for v in values.tolist()]

def generateMarks(step_sizes, bounds, maxmarks=None):
    """Generate sorted, deduplicated marks for the list of step sizes.

    Where marks from different step sizes coincide, the mark with the
    largest step size is kept.
    """

    if len(step_sizes) == 0:
        return []

    minval, maxval = bounds
    steps = []
    for step_size in step_sizes:
        steps += fillMarksBetween(step_size, minval, maxval, maxmarks=maxmarks)

    # Remove duplicates, which come from overlapping steps, e.g.:
    # step_size 10   => [-10, 0, 10, 20, ..., 90, 100, 110, 120]
    # step_size 100  => [     0,                100               ]
    # step_size 1000 => [     0                                   ]
    steps.sort(key=_markKey)

    # avoid putting two marks too closely together
    eps = 0.1 * min(step_sizes)

    deduplicated = []
    for step in steps:
        if deduplicated and abs(deduplicated[-1].value - step.value) < eps:
            if deduplicated[-1].step_size < step.step_size:
                deduplicated[-1] = step
            continue
        deduplicated.append(step)

    logger.debug(
        'Kept {} of {} candidate marks between {} and {}',
        len(deduplicated), len(steps), minval, maxval)
    return deduplicated

def marksToArrays(marks):
    """Split marks into numpy arrays of values and step sizes."""
    values = N.array([m.value for m in marks], dtype=N.float64)
    stepsizes = N.array([m.step_size for m in marks], dtype=N.float64)
    return values, stepsizes
