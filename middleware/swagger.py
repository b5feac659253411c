"""
Letter case for generated API documents (swagger.json / openapi.json).
Only parameter values are converted: the `required` field names list and `name`
keyword values. Document keys are left alone.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from middleware.handler import Handler, wrap_handler
from schemas.options import DEFAULT_TO, LetterCase, LetterCaseOptions
from utils.case import Keyword, letter_case_key
from utils.keys import walk_maps

logger = logging.getLogger(__name__)


def letter_case_swagger_body(body: Any, letter_case: LetterCase) -> Any:
    """Recursively convert `required` list items and keyword `name` values to letter_case."""

    def convert_param_values(k: Any, v: Any) -> tuple[Any, Any]:
        if k == "required" and isinstance(v, list):
            return k, [letter_case_key(x, letter_case) for x in v]
        if k == "required" and isinstance(v, tuple):
            return k, tuple(letter_case_key(x, letter_case) for x in v)
        if k == "name" and isinstance(v, Keyword):
            return k, letter_case_key(v, letter_case)
        return k, v

    return walk_maps(body, convert_param_values)


def keywordize_parameter_names(document: Any) -> Any:
    """
    Mark the `name` of every `parameters` entry as a Keyword.
    Parsed JSON documents carry names as plain strings; only keyword names are converted.
    """

    def mark_names(k: Any, v: Any) -> tuple[Any, Any]:
        if k == "parameters" and isinstance(v, list):
            return k, [_keyword_name(p) for p in v]
        return k, v

    return walk_maps(document, mark_names)


def _keyword_name(parameter: Any) -> Any:
    if isinstance(parameter, Mapping) and isinstance(parameter.get("name"), str):
        return {**parameter, "name": Keyword(parameter["name"])}
    return parameter


def letter_case_swagger_response(handler: Handler, options: Any = None) -> Handler:
    """
    Middleware wrapping the API document handler; converts the document's
    parameter names to letter case.

    Options:
        to - convert parameter names TO letter case (default kebab-case)
    """
    to_case = LetterCaseOptions.parse(options).resolve_to(DEFAULT_TO)
    logger.debug("letter_case_swagger_response: -> %s", to_case)

    def transform(response: Any) -> Any:
        if not isinstance(response, Mapping):
            return response
        return {**response, "body": letter_case_swagger_body(response.get("body"), to_case)}

    return wrap_handler(handler, after=transform)
