"""Concatenation of nested lists."""

from __future__ import annotations

from itertools import chain
from typing import Iterable, TypeVar

T = TypeVar("T")


def flatten(nested: Iterable[Iterable[T]]) -> list[T]:
    """Return the elements of every inner iterable, in order, as one list."""
    return list(chain.from_iterable(nested))