"""
Unit tests for polygon triangulation.

Tests cover the exact output on small polygons, the n - 2 / area-conservation
properties on generated convex, star-shaped and spiky polygons and on
untangled random simple polygons, vertices lying on a diagonal, the integer
variant, and rejection of malformed input.
"""

import unittest
import numpy as np

from gutility.geometry.containment import signed_area
from gutility import (
    MalformedPolygonError,
    Vec2,
    Vec2I,
    point_in_polygon,
    polygon_to_triangles,
    polygon_to_triangles_int,
    reset_config,
    set_config,
    triangulate,
)
from test_fixtures import (
    assert_triangulation,
    convex_polygon,
    is_simple,
    l_shape,
    random_polygon,
    random_simple_polygon,
    rotate_points,
    square,
    star_polygon,
)


class PolygonToTrianglesTests(unittest.TestCase):
    """Tests for the floating point triangulation"""

    def tearDown(self):
        reset_config()

    def testTriangle(self):
        """A triangle comes back unchanged"""
        tri = [(0, 0), (4, 0), (0, 4)]
        self.assertEqual(polygon_to_triangles(tri), [(Vec2(0, 0), Vec2(4, 0), Vec2(0, 4))])

    def testSquare(self):
        """A square splits into two triangles along a diagonal"""
        triangles = polygon_to_triangles(square(4))
        self.assertEqual(triangles, [
            (Vec2(0, 0), Vec2(4, 0), Vec2(4, 4)),
            (Vec2(4, 4), Vec2(0, 4), Vec2(0, 0)),
        ])
        assert_triangulation(self, square(4), triangles)

    def testClockwiseSquare(self):
        """Clockwise input gives clockwise triangles"""
        poly = [(0, 0), (0, 4), (4, 4), (4, 0)]
        triangles = polygon_to_triangles(poly)
        self.assertEqual(triangles, [
            (Vec2(0, 0), Vec2(0, 4), Vec2(4, 4)),
            (Vec2(4, 4), Vec2(4, 0), Vec2(0, 0)),
        ])
        assert_triangulation(self, poly, triangles)

    def testReflexVertexIsNotAnEar(self):
        """The reflex vertex of a dart is never the tip of a triangle"""
        poly = [(0, 0), (4, 2), (8, 0), (4, 6)]
        triangles = polygon_to_triangles(poly)
        self.assertEqual(triangles, [
            (Vec2(4, 2), Vec2(8, 0), Vec2(4, 6)),
            (Vec2(4, 6), Vec2(0, 0), Vec2(4, 2)),
        ])
        assert_triangulation(self, poly, triangles)

    def testConcave(self):
        """L-shape: four triangles covering area 12, none in the notch"""
        triangles = polygon_to_triangles(l_shape())
        assert_triangulation(self, l_shape(), triangles)
        for tri in triangles:
            centroid = (tri[0] + tri[1] + tri[2]) / 3
            self.assertFalse(point_in_polygon(centroid, [(2, 2), (4, 2), (4, 4), (2, 4)]),
                             f"Triangle {tri} lies in the notch")

    def testCollinearVertex(self):
        """A vertex in the middle of an edge is kept and no triangle is flat"""
        poly = [(0, 0), (2, 0), (4, 0), (4, 4), (0, 4)]
        triangles = polygon_to_triangles(poly)
        assert_triangulation(self, poly, triangles)

    def testConvexPolygons(self):
        """Regular n-gons give n - 2 triangles with the polygon's area"""
        for n in (3, 5, 8, 17, 64):
            with self.subTest(n=n):
                poly = convex_polygon(n)
                assert_triangulation(self, poly, polygon_to_triangles(poly), f"{n}-gon")

    def testRandomStarShapedPolygons(self):
        """Random star-shaped polygons in both windings"""
        for seed in range(8):
            for n in (6, 13, 40):
                with self.subTest(seed=seed, n=n):
                    poly = random_polygon(n, seed=seed)
                    assert_triangulation(self, poly, polygon_to_triangles(poly))
                    reverse = list(reversed(poly))
                    assert_triangulation(self, reverse, polygon_to_triangles(reverse))

    def testStarPolygons(self):
        """Stars alternate convex and reflex vertices"""
        for n_pairs in (3, 5, 12):
            for rotation in (0.1, 0.7, 2.3):
                with self.subTest(n_pairs=n_pairs, rotation=rotation):
                    poly = star_polygon(n_pairs, rotation=rotation)
                    assert_triangulation(self, poly, polygon_to_triangles(poly))

    def testTrianglesStayInside(self):
        """Every triangle centroid lies inside the polygon"""
        poly = rotate_points(random_polygon(30, seed=3), 0.4)
        for tri in polygon_to_triangles(poly):
            centroid = (tri[0] + tri[1] + tri[2]) / 3
            self.assertTrue(point_in_polygon(centroid, poly), f"Triangle {tri} is outside")

    def testNumpyInput(self):
        """An (n, 2) array is accepted"""
        poly = np.array(random_polygon(12, seed=1))
        triangles = polygon_to_triangles(poly)
        assert_triangulation(self, poly.tolist(), triangles)
        self.assertIsInstance(triangles[0][0], Vec2)

    def testTooFewVertices(self):
        """Fewer than three vertices is rejected"""
        for poly in ([], [(0, 0)], [(0, 0), (1, 1)]):
            with self.assertRaises(MalformedPolygonError):
                polygon_to_triangles(poly)

    def testZeroArea(self):
        """Collinear points and a symmetric bow-tie have no area"""
        with self.assertRaises(MalformedPolygonError):
            polygon_to_triangles([(0, 0), (1, 1), (2, 2), (3, 3)])
        with self.assertRaises(MalformedPolygonError):
            polygon_to_triangles([(0, 0), (4, 4), (4, 0), (0, 4)])
        # Also a ValueError for callers that only know the builtin
        with self.assertRaises(ValueError):
            polygon_to_triangles([(0, 0), (1, 0), (2, 0)])

    def testFlatTriangleWithoutValidation(self):
        """With validation off, a flat input triangle is returned as-is"""
        set_config(validate_polygons=False)
        self.assertEqual(len(polygon_to_triangles([(0, 0), (1, 0), (2, 0)])), 1)


# Vertices touching a diagonal. Each entry: (polygon, shoelace area)
DIAGONAL_CASES = {
    # Notch tip (2, 2) on the diagonal (0, 0)-(4, 4)
    'notch_on_diagonal': ([(0, 0), (4, 0), (4, 4), (3, 4), (2, 2), (1, 4), (0, 4)], 14),
    # Both notch tips on the diagonal (0, 0)-(12, 12)
    'collinear_notch_tips': ([(0, 0), (12, 0), (12, 12), (10, 12), (8, 8), (6, 12),
                              (5, 12), (4, 4), (3, 12), (0, 12)], 128),
    # Tip on both diagonals, plus a collinear vertex on the bottom edge
    'tip_on_two_diagonals': ([(0, 0), (2, 0), (4, 0), (4, 4), (2, 2), (0, 4)], 12),
    # Reflex vertex on the diagonal of a convex corner at the start of the ring
    'reflex_on_first_diagonal': ([(0, 0), (6, 0), (6, 6), (4, 6), (3, 3), (0, 3)], 25.5),
}


def rotate_quarter(poly):
    """Exact 90 degree rotation of integer points."""
    return [(-y, x) for x, y in poly]


class SimplePolygonTests(unittest.TestCase):
    """Triangulation of general (not star-shaped) simple polygons"""

    def testVertexOnDiagonal(self):
        """No triangle is cut across a vertex lying on its diagonal"""
        for name, (poly, area) in DIAGONAL_CASES.items():
            variants = {
                'ccw': poly,
                'cw': list(reversed(poly)),
                'rotated': rotate_quarter(poly),
                'shifted': poly[3:] + poly[:3],
            }
            for variant, vertices in variants.items():
                with self.subTest(case=name, variant=variant):
                    triangles = polygon_to_triangles(vertices)
                    total = sum(abs(signed_area(tri)) for tri in triangles)
                    self.assertEqual(total, area)
                    assert_triangulation(self, vertices, triangles)
                    assert_triangulation(self, vertices, polygon_to_triangles_int(vertices))

    def testNotchTipIsNotSwallowed(self):
        """The triangle over the square's diagonal is never emitted"""
        poly, _ = DIAGONAL_CASES['notch_on_diagonal']
        for tri in polygon_to_triangles(poly):
            self.assertNotEqual({tuple(p) for p in tri}, {(0.0, 0.0), (4.0, 0.0), (4.0, 4.0)})

    def testRandomSimplePolygons(self):
        """n - 2 triangles and the shoelace area on untangled random polygons"""
        for seed in range(60):
            for n in (5, 9, 16, 28):
                with self.subTest(seed=seed, n=n):
                    poly = random_simple_polygon(n, seed=seed * 100 + n)
                    self.assertTrue(is_simple(poly))
                    assert_triangulation(self, poly, polygon_to_triangles(poly))
                    reverse = list(reversed(poly))
                    assert_triangulation(self, reverse, polygon_to_triangles(reverse))

    def testRandomSimplePolygonsInt(self):
        """The integer variant matches the float variant on untangled polygons"""
        for seed in range(20):
            with self.subTest(seed=seed):
                poly = random_simple_polygon(20, seed=seed)
                int_triangles = polygon_to_triangles_int(poly)
                assert_triangulation(self, poly, int_triangles)
                self.assertEqual(
                    [tuple(p.to_float() for p in tri) for tri in int_triangles],
                    polygon_to_triangles(poly),
                )


class PolygonToTrianglesIntTests(unittest.TestCase):
    """Tests for the integer triangulation"""

    def testSquare(self):
        """Integer square keeps Vec2I vertices"""
        poly = [Vec2I(0, 0), Vec2I(4, 0), Vec2I(4, 4), Vec2I(0, 4)]
        triangles = polygon_to_triangles_int(poly)
        self.assertEqual(triangles, [
            (Vec2I(0, 0), Vec2I(4, 0), Vec2I(4, 4)),
            (Vec2I(4, 4), Vec2I(0, 4), Vec2I(0, 0)),
        ])
        for tri in triangles:
            for p in tri:
                self.assertIsInstance(p, Vec2I)

    def testMatchesFloatVariant(self):
        """Integer and float triangulation produce the same triangle sequence"""
        for seed in range(5):
            with self.subTest(seed=seed):
                poly = [(round(x), round(y)) for x, y in random_polygon(20, radius=1e6, seed=seed)]
                int_triangles = polygon_to_triangles_int(poly)
                float_triangles = polygon_to_triangles(poly)
                self.assertEqual(
                    [tuple(p.to_float() for p in tri) for tri in int_triangles],
                    float_triangles,
                )
                assert_triangulation(self, poly, int_triangles)

    def testTupleInput(self):
        """Integer tuples are converted to Vec2I"""
        triangles = polygon_to_triangles_int(l_shape_int())
        assert_triangulation(self, l_shape_int(), triangles)
        self.assertIsInstance(triangles[0][0], Vec2I)

    def testRejectsFloats(self):
        """Float coordinates need an explicit conversion first"""
        with self.assertRaises(TypeError):
            polygon_to_triangles_int([(0.5, 0), (4, 0), (0, 4)])

    def testTooFewVertices(self):
        with self.assertRaises(MalformedPolygonError):
            polygon_to_triangles_int([Vec2I(0, 0), Vec2I(1, 1)])


class TriangulateTests(unittest.TestCase):
    """Tests for the type-dispatching entry point"""

    def testDispatch(self):
        """Vec2I polygons go to the integer variant, everything else to the float one"""
        int_poly = [Vec2I(p) for p in l_shape_int()]
        self.assertIsInstance(triangulate(int_poly)[0][0], Vec2I)
        self.assertIsInstance(triangulate(l_shape_int())[0][0], Vec2)
        self.assertIsInstance(triangulate(l_shape())[0][0], Vec2)

    def testEmpty(self):
        with self.assertRaises(MalformedPolygonError):
            triangulate([])


def l_shape_int():
    return [(int(x), int(y)) for x, y in l_shape()]


if __name__ == '__main__':
    unittest.main()
