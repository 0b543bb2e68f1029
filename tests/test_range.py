# -*- coding: utf-8 -*-
# ------------------------------------------------------------------------------
#
#   Copyright 2025 Jannik Hehemann
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
# ------------------------------------------------------------------------------

"""Tests for range enumeration on the LLRB ordered map"""
# pylint: skip-file

import unittest

from llrb_map import OrderedMap, default_compare
from llrb_map.factory import make_ordered_map_class
from tests.test_ordered_map import TreeTestCase
from tests.stats_ordered_map import random_map_of_size


class TestKeysRange(TreeTestCase):
    def setUp(self):
        super().setUp()
        for k in range(0, 100, 5):
            self.tree.put(k, k)

    def test_inclusive_bounds(self):
        self.assertEqual(self.tree.keys(10, 25), [10, 15, 20, 25])

    def test_bounds_between_keys(self):
        self.assertEqual(self.tree.keys(11, 24), [15, 20])

    def test_reversed_bounds_empty(self):
        self.assertEqual(self.tree.keys(50, 10), [])
        self.assertEqual(list(self.tree.iter_keys(50, 10)), [])

    def test_single_point(self):
        self.assertEqual(self.tree.keys(35, 35), [35])
        self.assertEqual(self.tree.keys(36, 36), [])

    def test_min_max_range_equals_all(self):
        self.assertEqual(self.tree.keys(self.tree.min(), self.tree.max()), self.tree.keys())

    def test_open_bounds(self):
        self.assertEqual(self.tree.keys(lo=90), [90, 95])
        self.assertEqual(self.tree.keys(hi=5), [0, 5])

    def test_range_outside_keys(self):
        self.assertEqual(self.tree.keys(200, 300), [])
        self.assertEqual(self.tree.keys(-10, -1), [])

    def test_empty_map_range(self):
        self.assertEqual(OrderedMap().keys(1, 2), [])


class TestRangePruning(unittest.TestCase):
    def test_visits_are_output_sensitive(self):
        calls = []

        def counting(a, b):
            calls.append((a, b))
            return default_compare(a, b)

        CountingMap = make_ordered_map_class(counting)
        m = CountingMap(random_map_of_size(1024, "random", seed=5))
        calls.clear()
        keys = m.keys(500, 503)
        self.assertEqual(keys, [500, 501, 502, 503])
        # Two comparisons per visited node; a full walk would need ~2048.
        self.assertLess(len(calls), 2 * (4 + 4 * (m.height() + 1)) + 2)


if __name__ == "__main__":
    unittest.main()
