import math
import unittest

from ..geometry import orientation, circumcenter, circumcircle, breakpoint_x, parabola_y
from ..site import Site


def S(x, y, i=0):
    return Site(x, y, i)


class TestCircumcircle(unittest.TestCase):

    def test_orientation_sign(self):
        self.assertGreater(orientation(S(0, 0), S(10, 0), S(5, 10)), 0)
        self.assertLess(orientation(S(0, 0), S(5, 10), S(10, 0)), 0)
        self.assertEqual(orientation(S(0, 0), S(5, 5), S(10, 10)), 0)

    def test_three_site_scenario(self):
        cx, cy, r = circumcircle(S(0, 0), S(10, 0), S(5, 10))
        self.assertAlmostEqual(cx, 5.0)
        self.assertAlmostEqual(cy, 3.75)
        self.assertAlmostEqual(r, 6.25)
        self.assertAlmostEqual(cy + r, 10.0)

    def test_clockwise_triple_is_rejected(self):
        self.assertIsNone(circumcircle(S(0, 0), S(5, 10), S(10, 0)))

    def test_collinear_triple_is_rejected(self):
        self.assertIsNone(circumcircle(S(0, 0), S(5, 5), S(10, 10)))
        self.assertIsNone(circumcircle(S(0, 0), S(10, 0), S(20, 0)))
        # 同一个 site 出现在两端
        self.assertIsNone(circumcircle(S(0, 0), S(4, 7), S(0, 0)))

    def test_vertical_chord_is_handled(self):
        sites = (S(0, 10), S(0, 0), S(10, 5))
        cx, cy, r = circumcircle(*sites)
        for s in sites:
            self.assertAlmostEqual(math.hypot(s.x - cx, s.y - cy), r)
        self.assertAlmostEqual(cy, 5.0)

    def test_circumcenter_rejects_colinear(self):
        with self.assertRaises(ValueError):
            circumcenter(S(0, 0), S(1, 1), S(2, 2))

    def test_equidistant_on_irregular_triple(self):
        sites = (S(3, 4), S(0, 0), S(10, 0))
        cx, cy, r = circumcircle(*sites)
        for s in sites:
            self.assertAlmostEqual(math.hypot(s.x - cx, s.y - cy), r)
        self.assertAlmostEqual(cx, 5.0)
        self.assertAlmostEqual(cy, -0.625)


class TestParabola(unittest.TestCase):

    def test_parabola_y_is_equidistant(self):
        site = S(0, 0)
        sweep = 10
        for x in (-7.5, 0.0, 4.0, 12.0):
            y = parabola_y(site, x, sweep)
            self.assertAlmostEqual(math.hypot(x - site.x, y - site.y), sweep - y)
        self.assertAlmostEqual(parabola_y(site, 0, 10), 5.0)

    def test_parabola_y_on_sweep_line_raises(self):
        with self.assertRaises(ValueError):
            parabola_y(S(3, 10), 3, 10)

    def test_breakpoint_same_y_is_midpoint(self):
        self.assertEqual(breakpoint_x(S(0, 0), S(10, 0), 10), 5.0)
        self.assertEqual(breakpoint_x(S(0, 0), S(10, 0), 0), 5.0)

    def test_breakpoint_with_site_on_sweep_line(self):
        self.assertEqual(breakpoint_x(S(0, 0), S(7, 10), 10), 7.0)
        self.assertEqual(breakpoint_x(S(7, 10), S(0, 0), 10), 7.0)

    def test_breakpoint_picks_the_right_intersection(self):
        p, q = S(0, 0), S(10, 5)
        left = breakpoint_x(p, q, 10)
        right = breakpoint_x(q, p, 10)
        self.assertAlmostEqual(left, 20 - math.sqrt(250))
        self.assertAlmostEqual(right, 20 + math.sqrt(250))
        for x in (left, right):
            self.assertAlmostEqual(parabola_y(p, x, 10), parabola_y(q, x, 10))

    def test_breakpoint_order_along_beach_line(self):
        p, q = S(0, 0), S(10, 5)
        # 两交点之间较窄的 q 在上面
        mid = (breakpoint_x(p, q, 10) + breakpoint_x(q, p, 10)) / 2
        self.assertGreater(parabola_y(q, mid, 10), parabola_y(p, mid, 10))


if __name__ == "__main__":
    unittest.main()
