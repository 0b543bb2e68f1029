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

"""
Ordered map backed by a left-leaning red-black tree.

The map keeps its keys sorted and supports O(log n) lookup, insertion,
deletion by key, deletion of the minimum and maximum, and output-sensitive
range enumeration.
"""

from llrb_map.base import (
    AbstractOrderedMap,
    EmptyMapError,
    RED,
    BLACK,
    default_compare,
)
from llrb_map.llrb_tree import (
    OrderedMap,
    LLRBNode,
    InvariantError,
    Stats,
    tree_stats_,
    check_invariants,
    collect_keys,
)
from llrb_map.factory import (
    make_ordered_map_class,
    create_ordered_map,
)

__all__ = [
    'AbstractOrderedMap',
    'EmptyMapError',
    'RED',
    'BLACK',
    'default_compare',
    'OrderedMap',
    'LLRBNode',
    'InvariantError',
    'Stats',
    'tree_stats_',
    'check_invariants',
    'collect_keys',
    'make_ordered_map_class',
    'create_ordered_map',
]
