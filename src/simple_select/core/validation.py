"""Input validation with clear error messages for host applications."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def validate_collection(collection: Any) -> MutableSequence:
    """Validate that the collection is a mutable, ordered sequence.

    Returns the collection itself (unchanged, not copied). The store
    borrows it from the host so that ticks are visible to the owner.
    """
    if collection is None:
        raise TypeError(
            "collection is required. Pass a list of items, e.g. "
            "[{'name': 'item 1', 'ticked': False}]."
        )
    if not isinstance(collection, MutableSequence):
        raise TypeError(
            f"Expected a mutable sequence (e.g. a list), got "
            f"{type(collection).__name__}. Tuples and other immutable "
            "sequences cannot be shared with the host by reference."
        )
    return collection


def validate_delegate(delegate: Any, name: str) -> Any:
    """Validate that a delegate is either None or callable."""
    if delegate is not None and not callable(delegate):
        raise TypeError(
            f"{name} must be callable or None, got {type(delegate).__name__}."
        )
    return delegate
