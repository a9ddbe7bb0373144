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


import math
import unittest

import numpy as N

from axisgrid.axisticks import GridMark, fillMarksBetween, generateMarks, \
    marksToArrays
from axisgrid.utils import InvalidMagnitude, InvertedInterval, \
    MarkLimitExceeded

# test grid mark generation

class TestFillMarks(unittest.TestCase):
    def testExactMaxExcluded(self):
        self.assertEqual(
            fillMarksBetween(5., 0., 10.),
            [GridMark(0., 5.), GridMark(5., 5.)])

    def testInexactMaxIncluded(self):
        self.assertEqual(
            [m.value for m in fillMarksBetween(5., 0., 11.)],
            [0., 5., 10.])

    def testNegative(self):
        marks = fillMarksBetween(1., -2.5, 1.)
        self.assertEqual([m.value for m in marks], [-2., -1., 0.])
        self.assertTrue(all(m.step_size == 1. for m in marks))

    def testMinRoundedUp(self):
        marks = fillMarksBetween(10., 3., 35.)
        self.assertEqual([m.value for m in marks], [10., 20., 30.])

    def testEmpty(self):
        self.assertEqual(fillMarksBetween(2., 3., 3.), [])
        self.assertEqual(fillMarksBetween(100., 1., 2.), [])

    def testBadInterval(self):
        self.assertRaises(InvertedInterval, fillMarksBetween, 1., 5., 0.)
        self.assertRaises(
            InvertedInterval, fillMarksBetween, 1., float('nan'), 1.)

    def testBadStep(self):
        self.assertRaises(InvalidMagnitude, fillMarksBetween, 0., 0., 1.)
        self.assertRaises(InvalidMagnitude, fillMarksBetween, -1., 0., 1.)
        self.assertRaises(InvalidMagnitude, fillMarksBetween, math.inf, 0., 1.)

    def testLimit(self):
        self.assertRaises(
            MarkLimitExceeded, fillMarksBetween, 1., 0., math.inf)
        self.assertRaises(
            MarkLimitExceeded, fillMarksBetween, 1., 0., 100., maxmarks=10)
        self.assertEqual(len(fillMarksBetween(1., 0., 10., maxmarks=10)), 10)

class TestGenerateMarks(unittest.TestCase):
    def testTiers(self):
        marks = generateMarks([1., 10., 100.], (0., 25.))

        expected = [GridMark(0., 100.)]
        for i in range(1, 25):
            expected.append(GridMark(float(i), 10. if i % 10 == 0 else 1.))
        self.assertEqual(marks, expected)

    def testNegativeRange(self):
        marks = generateMarks([1., 10., 100.], (-15., 5.))
        values = [m.value for m in marks]
        self.assertEqual(values, [float(i) for i in range(-15, 5)])

        steps = dict(marks)
        self.assertEqual(steps[0.], 100.)
        self.assertEqual(steps[-10.], 10.)
        self.assertEqual(steps[-15.], 1.)

    def testCloseMarksMerged(self):
        marks = generateMarks([0.1, 1., 10.], (0., 1.05))
        self.assertEqual(len(marks), 11)
        self.assertEqual(marks[0], GridMark(0., 10.))
        self.assertAlmostEqual(marks[-1].value, 1.)
        self.assertEqual(marks[-1].step_size, 1.)
        for m in marks[1:-1]:
            self.assertEqual(m.step_size, 0.1)

    def testOrdered(self):
        marks = generateMarks([0.01, 0.1, 1.], (-0.73, 1.41))
        values = [m.value for m in marks]
        self.assertEqual(values, sorted(values))
        deltas = N.diff(values)
        self.assertTrue(N.all(deltas >= 0.1*0.01))

    def testNoSteps(self):
        self.assertEqual(generateMarks([], (0., 1.)), [])

    def testBadBounds(self):
        self.assertRaises(
            InvertedInterval, generateMarks, [1., 10., 100.], (25., 0.))

    def testArrays(self):
        marks = generateMarks([1., 10., 100.], (0., 3.))
        values, steps = marksToArrays(marks)
        self.assertEqual(values.dtype, N.float64)
        self.assertTrue(N.all(values == [0., 1., 2.]))
        self.assertTrue(N.all(steps == [100., 1., 1.]))

    def testEmptyArrays(self):
        values, steps = marksToArrays([])
        self.assertEqual(len(values), 0)
        self.assertEqual(len(steps), 0)

if __name__ == '__main__':
    unittest.main()
