"""
Recursive key filtering and key transformation over nested dicts and lists.
Values are walked before their entry is visited, so rewrites are bottom-up.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from utils.case import CasingConvention, letter_case_key, to_keyword

logger = logging.getLogger(__name__)

EntryVisitor = Callable[[Any, Any], Optional[tuple[Any, Any]]]


def is_container(obj: Any) -> bool:
    """Mappings and ordered sequences (list, tuple). Strings are scalars."""
    return isinstance(obj, (Mapping, list, tuple))


def walk_maps(node: Any, visit_entry: EntryVisitor) -> Any:
    """
    Rebuild every mapping found anywhere in node through visit_entry.

    visit_entry(key, walked_value) returns the (key, value) pair to keep, or None to drop
    the entry. Lists and tuples keep their type; scalars are returned as is.
    """
    if isinstance(node, Mapping):
        out: dict[Any, Any] = {}
        for k, v in node.items():
            entry = visit_entry(k, walk_maps(v, visit_entry))
            if entry is not None:
                new_key, new_value = entry
                out[new_key] = new_value
        return out
    if isinstance(node, list):
        return [walk_maps(x, visit_entry) for x in node]
    if isinstance(node, tuple):
        return tuple(walk_maps(x, visit_entry) for x in node)
    return node


def filter_keys_letter_case(node: Any, letter_case: CasingConvention | str) -> Any:
    """Recursively keep only map entries whose key is already in letter_case."""

    def keep_self_consistent(k: Any, v: Any) -> tuple[Any, Any] | None:
        if to_keyword(k) == letter_case_key(k, letter_case):
            return k, v
        logger.debug("Dropping key %r: not %s", k, letter_case)
        return None

    return walk_maps(node, keep_self_consistent)


def transform_keys_letter_case(node: Any, letter_case: CasingConvention | str) -> Any:
    """Recursively convert every map key to letter_case. Colliding keys: last one wins."""
    return walk_maps(node, lambda k, v: (letter_case_key(k, letter_case), v))
