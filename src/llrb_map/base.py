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

"""Shared definitions for ordered maps"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional, TypeVar, Generic

# Link colors. A node's color is the color of the link from its parent.
RED = True
BLACK = False

K = TypeVar("K")
V = TypeVar("V")


class EmptyMapError(LookupError):
    """Raised when a delete operation is attempted on an empty map."""


def default_compare(a: Any, b: Any) -> int:
    """
    Three-way comparison derived from the keys' natural ordering.

    Returns:
        int: A negative number if a < b, zero if they are equal and a
            positive number if a > b.
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


class AbstractOrderedMap(ABC, Generic[K, V]):
    """
    Abstract base class for a map that keeps its keys in sorted order.
    """

    @abstractmethod
    def put(self, key: K, value: V) -> None:
        """
        Associate value with key, replacing any previous value.

        Parameters:
            key: The key to insert.
            value: The value to store under the key.
        """
        pass

    @abstractmethod
    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """
        Return the value stored under key, or default if the key is absent.
        """
        pass

    @abstractmethod
    def delete(self, key: K) -> bool:
        """
        Remove key from the map.

        Returns:
            bool: True if the key was present and has been removed.

        Raises:
            EmptyMapError: If the map is empty.
        """
        pass

    @abstractmethod
    def iter_keys(self, lo: Optional[K] = None, hi: Optional[K] = None) -> Iterator[K]:
        """
        Lazily yield the keys within [lo, hi] in ascending order.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def contains(self, key: K) -> bool:
        sentinel = object()
        return self.get(key, sentinel) is not sentinel

    def keys(self, lo: Optional[K] = None, hi: Optional[K] = None) -> list:
        """Return a snapshot list of the keys within [lo, hi]."""
        return list(self.iter_keys(lo, hi))
