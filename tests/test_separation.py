"""
Tests for the separation core: sorting, candidate generation, the
live-crossing test and commit.
"""

import numpy as np
import pytest

from models import Axis, ConnectivityGraph, Line, Solution, build_points
from separation import (
    commit,
    divide_axis,
    has_live_crossing,
    partition_point,
    sort_points,
    sorted_coordinates,
    split_by_line,
)


SCENARIO = [(1, 10), (2, 6), (3, 8), (4, 1), (5, 3)]


@pytest.fixture
def points():
    return build_points(SCENARIO)


class TestSortPoints:

    def test_scenario_orders(self, points):
        order_x, order_y = sort_points(points)
        assert list(order_x) == [0, 1, 2, 3, 4]
        # y = 1, 3, 6, 8, 10
        assert list(order_y) == [3, 4, 1, 2, 0]

    def test_orders_are_permutations(self):
        pts = build_points([(7, 2), (3, 9), (5, 1), (1, 4)])
        order_x, order_y = sort_points(pts)
        assert sorted(order_x) == [0, 1, 2, 3]
        assert sorted(order_y) == [0, 1, 2, 3]
        assert [pts[i].x for i in order_x] == [1, 3, 5, 7]
        assert [pts[i].y for i in order_y] == [1, 2, 4, 9]

    def test_orders_are_read_only(self, points):
        order_x, _ = sort_points(points)
        with pytest.raises(ValueError):
            order_x[0] = 4

    def test_sorted_coordinates(self, points):
        _, order_y = sort_points(points)
        assert list(sorted_coordinates(points, order_y, Axis.Y)) == [1, 3, 6, 8, 10]


class TestDivideAxis:

    def test_preorder_x(self, points):
        order_x, _ = sort_points(points)
        lines = divide_axis(points, order_x, Axis.X)
        assert [ln.intercept for ln in lines] == [3.5, 2.5, 4.5]
        assert [ln.generation_order for ln in lines] == [0, 1, 2]
        assert all(ln.axis == Axis.X and not ln.committed for ln in lines)

    def test_preorder_y(self, points):
        _, order_y = sort_points(points)
        lines = divide_axis(points, order_y, Axis.Y)
        assert [ln.intercept for ln in lines] == [7.0, 4.5, 9.0]

    def test_single_point_has_no_candidates(self):
        pts = build_points([(4, 4)])
        order_x, _ = sort_points(pts)
        assert divide_axis(pts, order_x, Axis.X) == []

    def test_two_points_have_one_candidate(self):
        pts = build_points([(1, 1), (2, 2)])
        order_x, _ = sort_points(pts)
        assert [ln.intercept for ln in divide_axis(pts, order_x, Axis.X)] == [1.5]

    def test_three_rank_range_is_not_recursed(self):
        pts = build_points([(i, i) for i in range(1, 5)])
        order_x, _ = sort_points(pts)
        # the gap between x = 1 and x = 2 is never offered
        assert [ln.intercept for ln in divide_axis(pts, order_x, Axis.X)] == [2.5, 3.5]

    def test_seven_points(self):
        pts = build_points([(i, 8 - i) for i in range(1, 8)])
        order_x, _ = sort_points(pts)
        lines = divide_axis(pts, order_x, Axis.X)
        assert [ln.intercept for ln in lines] == [4.5, 2.5, 3.5, 5.5, 6.5]

    @pytest.mark.parametrize("n", [2, 3, 4, 7, 8, 16, 33, 100])
    def test_distinct_gaps_at_most_n_minus_one(self, n):
        pts = build_points([(3 * i + 1, 2 * (n - i)) for i in range(n)])
        for axis, order in zip((Axis.X, Axis.Y), sort_points(pts)):
            coords = [pts[i].coordinate(axis) for i in order]
            gaps = {(a + b) / 2 for a, b in zip(coords, coords[1:])}
            intercepts = [ln.intercept for ln in divide_axis(pts, order, axis)]
            assert 1 <= len(intercepts) <= n - 1
            assert len(set(intercepts)) == len(intercepts)
            assert set(intercepts) <= gaps

    def test_intercepts_never_hit_a_coordinate(self, points):
        order_x, order_y = sort_points(points)
        xs = {p.x for p in points}
        ys = {p.y for p in points}
        assert all(ln.intercept not in xs for ln in divide_axis(points, order_x, Axis.X))
        assert all(ln.intercept not in ys for ln in divide_axis(points, order_y, Axis.Y))

    def test_first_candidate_is_root_bisection(self):
        pts = build_points([(i, i) for i in range(1, 9)])
        order_x, _ = sort_points(pts)
        lines = divide_axis(pts, order_x, Axis.X)
        # 8 points: root split between ranks 3 and 4 (x = 4 and 5)
        assert lines[0].intercept == 4.5


class TestSeparationTester:

    def test_partition_point(self):
        coords = np.array([1.0, 3.0, 6.0, 8.0, 10.0])
        assert partition_point(coords, 7.0) == 2
        assert partition_point(coords, 1.5) == 0
        assert partition_point(coords, 9.5) == 3
        assert partition_point(coords, 11.0) == 4

    def test_partition_point_none(self):
        assert partition_point(np.array([2.0, 3.0]), 1.5) is None

    def test_split_by_line(self, points):
        _, order_y = sort_points(points)
        coords = sorted_coordinates(points, order_y, Axis.Y)
        left, right = split_by_line(order_y, coords, Line(Axis.Y, 7.0))
        assert list(left) == [3, 4, 1]
        assert list(right) == [2, 0]

    def test_has_live_crossing(self, points):
        graph = ConnectivityGraph(points)
        order_x, _ = sort_points(points)
        coords = sorted_coordinates(points, order_x, Axis.X)
        line = Line(Axis.X, 1.5)
        assert has_live_crossing(graph, order_x, coords, line)
        for j in range(1, 5):
            graph.disconnect(0, j)
        assert not has_live_crossing(graph, order_x, coords, line)


class TestCommit:

    def test_commit_disconnects_across_line(self, points):
        graph = ConnectivityGraph(points)
        order_x, _ = sort_points(points)
        coords = sorted_coordinates(points, order_x, Axis.X)
        solution = Solution()
        line = Line(Axis.X, 3.5)

        removed = commit(graph, order_x, coords, line, solution)

        assert removed == 12
        assert line.committed
        assert solution.lines == [line]
        assert graph.remaining_total() == 8
        for i in (0, 1, 2):
            for j in (3, 4):
                assert not graph.connected(i, j)
        assert graph.connected(0, 1)
        assert graph.connected(3, 4)

    def test_commit_keeps_call_order(self, points):
        graph = ConnectivityGraph(points)
        order_x, order_y = sort_points(points)
        cx = sorted_coordinates(points, order_x, Axis.X)
        cy = sorted_coordinates(points, order_y, Axis.Y)
        solution = Solution()
        a = Line(Axis.Y, 7.0)
        b = Line(Axis.X, 1.5)
        commit(graph, order_y, cy, a, solution)
        commit(graph, order_x, cx, b, solution)
        assert solution.lines == [a, b]
