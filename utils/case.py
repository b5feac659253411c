"""
Shared case conversion for API request/response normalization.
Word boundaries come from Pydantic's alias_generators for consistency with schema validation.
"""
from __future__ import annotations

import numbers
import re
from enum import Enum
from typing import Any, Callable

from pydantic.alias_generators import to_snake


class CasingConvention(str, Enum):
    PASCAL = "PascalCase"
    CAMEL = "camelCase"
    SCREAMING_SNAKE = "SCREAMING_SNAKE_CASE"
    SNAKE = "snake_case"
    KEBAB = "kebab-case"
    CAMEL_SNAKE = "Camel_Snake_Case"

    def __str__(self) -> str:
        return self.value


class Keyword(str):
    """Symbolic identifier key. Equal to (and hashed like) its text, but distinct by type."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Keyword({str.__repr__(self)})"


TextCoercer = Callable[[str], str]

_SEPARATORS = re.compile(r"[\s_\-]+")
# Digits belong to the word before them: userID2 -> user, id2
_DIGIT_SEPARATORS = re.compile(r"[\s_\-]+(?=[0-9])")


def split_words(s: str) -> list[str]:
    """Split an identifier of any supported convention into lower-case words."""
    snake = _DIGIT_SEPARATORS.sub("", to_snake(s))
    return [w for w in _SEPARATORS.split(snake) if w]


def to_pascal_case(s: str) -> str:
    return "".join(w.capitalize() for w in split_words(s))


def to_camel_case(s: str) -> str:
    words = split_words(s)
    if not words:
        return ""
    return words[0] + "".join(w.capitalize() for w in words[1:])


def to_screaming_snake_case(s: str) -> str:
    return "_".join(w.upper() for w in split_words(s))


def to_snake_case(s: str) -> str:
    return "_".join(split_words(s))


def to_kebab_case(s: str) -> str:
    return "-".join(split_words(s))


def to_camel_snake_case(s: str) -> str:
    return "_".join(w.capitalize() for w in split_words(s))


COERCERS: dict[CasingConvention, TextCoercer] = {
    CasingConvention.PASCAL: to_pascal_case,
    CasingConvention.CAMEL: to_camel_case,
    CasingConvention.SCREAMING_SNAKE: to_screaming_snake_case,
    CasingConvention.SNAKE: to_snake_case,
    CasingConvention.KEBAB: to_kebab_case,
    CasingConvention.CAMEL_SNAKE: to_camel_snake_case,
}


def _key_text(k: Any) -> str:
    if isinstance(k, bool):
        return "true" if k else "false"
    return str(k)


def to_keyword(k: Any) -> Keyword | None:
    """Identifier form of any key; None stays None."""
    if k is None or isinstance(k, Keyword):
        return k
    return Keyword(_key_text(k))


def convert_letter_case(k: Any, coerce_fn: TextCoercer) -> Any:
    """
    (Safely) convert a key using coerce_fn.
    Strings stay strings and keywords stay keywords. Numbers and booleans are
    stringified, converted and promoted to keywords. Any other key becomes a
    keyword of its text without conversion.
    """
    if k is None:
        return k
    if isinstance(k, Keyword):
        return Keyword(coerce_fn(k))
    if isinstance(k, str):
        return coerce_fn(k)
    if isinstance(k, (bool, numbers.Number)):
        return Keyword(coerce_fn(_key_text(k)))
    return Keyword(str(k))


def letter_case_key(k: Any, letter_case: CasingConvention | str | None) -> Any:
    """Convert a single key to letter_case. Unknown conventions only coerce the key to a keyword."""
    try:
        coerce_fn = COERCERS[CasingConvention(letter_case)]
    except ValueError:
        return to_keyword(k)
    return convert_letter_case(k, coerce_fn)
