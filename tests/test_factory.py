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

"""Tests for comparator-specialised ordered maps built by the factory"""
# pylint: skip-file

import unittest
import functools

from llrb_map import OrderedMap, default_compare
from llrb_map.factory import make_ordered_map_class, create_ordered_map
from llrb_map.llrb_tree import tree_stats_
from tests.utils import assert_tree_invariants_tc


def reverse_compare(a, b):
    return default_compare(b, a)


def casefold_compare(a, b):
    return default_compare(a.casefold(), b.casefold())


class TestMakeOrderedMapClass(unittest.TestCase):
    def test_default_comparator_returns_base_class(self):
        self.assertIs(make_ordered_map_class(default_compare), OrderedMap)
        self.assertIs(type(create_ordered_map()), OrderedMap)

    def test_classes_are_cached(self):
        cls1 = make_ordered_map_class(reverse_compare)
        cls2 = make_ordered_map_class(reverse_compare)
        self.assertIs(cls1, cls2)
        self.assertTrue(issubclass(cls1, OrderedMap))
        self.assertEqual(cls1.__name__, "OrderedMap_reverse_compare")

    def test_lambda_gets_generic_name(self):
        cls = make_ordered_map_class(lambda a, b: default_compare(a, b))
        self.assertEqual(cls.__name__, "OrderedMap_custom")

    def test_instances_do_not_share_state(self):
        MapClass = make_ordered_map_class(reverse_compare)
        m1, m2 = MapClass(), MapClass()
        m1.put(1, "a")
        self.assertTrue(m2.is_empty())


class TestCustomOrder(unittest.TestCase):
    def test_reverse_order(self):
        m = create_ordered_map(reverse_compare, [(k, k) for k in range(10)])
        self.assertEqual(m.keys(), list(range(9, -1, -1)))
        self.assertEqual(m.min(), 9)
        self.assertEqual(m.max(), 0)
        self.assertEqual(m.keys(7, 4), [7, 6, 5, 4])
        self.assertEqual(m.keys(4, 7), [])
        self.assertEqual(m.delete_min(), (9, 9))
        self.assertEqual(m.delete_max(), (0, 0))
        assert_tree_invariants_tc(self, m, tree_stats_(m))

    def test_case_insensitive_keys_collapse(self):
        m = create_ordered_map(casefold_compare)
        m.put("Apple", 1)
        m.put("apple", 2)
        m.put("BANANA", 3)
        self.assertEqual(m.size(), 2)
        self.assertEqual(m.get("APPLE"), 2)
        self.assertTrue(m.delete("banana"))
        self.assertEqual(m.keys(), ["Apple"])

    def test_cmp_to_key_style_comparator(self):
        by_length = functools.partial(lambda a, b: default_compare(len(a), len(b)))
        m = create_ordered_map(by_length)
        for word in ["ccc", "a", "bb", "dddd"]:
            m.put(word, len(word))
        self.assertEqual(m.keys(), ["a", "bb", "ccc", "dddd"])
        self.assertEqual(m.items("xx", "yyy"), [("bb", 2), ("ccc", 3)])


if __name__ == "__main__":
    unittest.main()
