"""Shared utilities for the backend."""
from utils.case import (
    CasingConvention,
    Keyword,
    convert_letter_case,
    letter_case_key,
    to_keyword,
)
from utils.keys import filter_keys_letter_case, is_container, transform_keys_letter_case, walk_maps

__all__ = [
    "CasingConvention",
    "Keyword",
    "convert_letter_case",
    "letter_case_key",
    "to_keyword",
    "walk_maps",
    "is_container",
    "filter_keys_letter_case",
    "transform_keys_letter_case",
]
