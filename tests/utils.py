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

"""Utility functions for testing LLRB map invariants."""

import math
import logging

from llrb_map.llrb_tree import (
    OrderedMap,
    Stats,
    TREE_FLAGS,
)


def height_bound(n: int) -> float:
    """Upper bound on the height of an LLRB tree holding n keys."""
    return 2 * math.log2(n + 1)


def assert_tree_invariants_tc(tc, t: OrderedMap, stats: Stats) -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False\n{t.print_structure()}"
        )

    tc.assertEqual(
        t.size(), stats.size,
        f"Invariant failed: size()={t.size()} ≠ counted nodes={stats.size}"
    )
    tc.assertLessEqual(
        t.height(), height_bound(stats.size),
        f"Invariant failed: height={t.height()} exceeds bound for n={stats.size}"
    )

    if not t.is_empty():
        tc.assertIsNotNone(t.root)
        tc.assertEqual(
            t.root.size, stats.size,
            f"Invariant failed: root size={t.root.size} ≠ counted nodes={stats.size}"
        )
        tc.assertEqual(t.min(), stats.least_key)
        tc.assertEqual(t.max(), stats.greatest_key)
    else:
        tc.assertIsNone(t.root)
        tc.assertEqual(stats.height, -1)


def log_tree_invariants(t: OrderedMap, stats: Stats) -> bool:
    """Check all invariants, logging the first failure instead of raising."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            logging.error(f"Invariant failed: {flag} is False")
            return False

    if t.size() != stats.size:
        logging.error(f"Invariant failed: size()={t.size()} ≠ counted nodes={stats.size}")
        return False
    if t.height() > height_bound(stats.size):
        logging.error(f"Invariant failed: height={t.height()} exceeds bound for n={stats.size}")
        return False
    return True
