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

"""Factory for ordered maps with a custom key order"""

from typing import Any, Callable, Dict, Optional, Type
import logging

from llrb_map.base import default_compare
from llrb_map.llrb_tree import OrderedMap

# Configure logging
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

Comparator = Callable[[Any, Any], int]

# Classes already built, keyed by comparator identity
_class_cache: Dict[Comparator, Type[OrderedMap]] = {}


def make_ordered_map_class(compare: Comparator) -> Type[OrderedMap]:
    """
    Build an OrderedMap subclass whose keys are ordered by compare.

    Parameters:
        compare: A three-way comparator returning a negative number, zero or
            a positive number when its first argument is less than, equal to
            or greater than the second.

    Returns:
        Type[OrderedMap]: The specialised class. Repeated calls with the same
            comparator return the same class.
    """
    if compare is default_compare:
        return OrderedMap

    if compare in _class_cache:
        logger.debug(f"Using cached class for comparator {compare!r}")
        return _class_cache[compare]

    name = getattr(compare, "__name__", "custom")
    if not name.isidentifier():
        name = "custom"
    OrderedMapC = type(
        f"OrderedMap_{name}",
        (OrderedMap,),
        {
            "COMPARE": staticmethod(compare),
            "__slots__": (),
        }
    )
    logger.debug(f"Created {OrderedMapC.__name__} for comparator {compare!r}")

    _class_cache[compare] = OrderedMapC
    return OrderedMapC


def create_ordered_map(compare: Optional[Comparator] = None, items=None) -> OrderedMap:
    """
    Create a new ordered map.

    Args:
        compare: Optional three-way comparator; the keys' natural order is
            used when omitted.
        items: Optional mapping or iterable of (key, value) pairs to load.

    Returns:
        A new OrderedMap (or comparator-specialised subclass) instance.
    """
    MapClass = make_ordered_map_class(compare or default_compare)
    m = MapClass(items)
    logger.debug(f"Created map instance of type {type(m).__name__}")
    return m
