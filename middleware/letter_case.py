"""
Letter case middleware: recursively converts request params keys on the way in
and response body keys on the way out.

Letter case values (utils.case.CasingConvention):
    PascalCase, camelCase, SCREAMING_SNAKE_CASE, snake_case, kebab-case, Camel_Snake_Case
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from middleware.handler import Handler, wrap_handler
from schemas.options import DEFAULT_FROM, DEFAULT_RESPONSE_TO, DEFAULT_TO, LetterCase, LetterCaseOptions
from utils.keys import filter_keys_letter_case, is_container, transform_keys_letter_case

logger = logging.getLogger(__name__)

# Covers both parsed-params style (params, query-params) and json-body style (body, body-params) requests.
REQUEST_PARAM_FIELDS = ("body-params", "query-params", "body", "params")


def transform_request_params(request: Mapping[str, Any], options: Any = None) -> dict[str, Any]:
    """
    Return a copy of request whose body and query params keys are filtered to the
    `from` letter case and converted to the `to` letter case.
    Keys not already in `from` are dropped, not converted.
    """
    opts = LetterCaseOptions.parse(options)
    from_case = opts.resolve_from(DEFAULT_FROM)
    to_case = opts.resolve_to(DEFAULT_TO)
    out = dict(request)
    for field in REQUEST_PARAM_FIELDS:
        value = out.get(field)
        if is_container(value):
            out[field] = transform_keys_letter_case(filter_keys_letter_case(value, from_case), to_case)
    return out


def transform_response_body(response: Any, letter_case: LetterCase) -> Any:
    """Copy of response with body keys converted; responses without a container body are returned as is."""
    if isinstance(response, Mapping) and is_container(response.get("body")):
        return {**response, "body": transform_keys_letter_case(response["body"], letter_case)}
    return response


def letter_case_request(handler: Handler, options: Any = None) -> Handler:
    """
    Middleware to recursively transform all request body and query params keys.

    Options:
        from - convert keys FROM letter case (default camelCase)
        to   - convert keys TO letter case (default kebab-case)

    Must run AFTER request params were parsed.
    """
    opts = LetterCaseOptions.parse(options)
    resolved = LetterCaseOptions(from_=opts.resolve_from(DEFAULT_FROM), to=opts.resolve_to(DEFAULT_TO))
    logger.debug("letter_case_request: %s -> %s", resolved.from_, resolved.to)
    return wrap_handler(handler, before=lambda request: transform_request_params(request, resolved))


def letter_case_response(handler: Handler, options: Any = None) -> Handler:
    """
    Middleware to recursively transform all response body keys.

    Options:
        to - convert keys TO letter case (default camelCase)

    Must run BEFORE the response body is serialized.
    """
    to_case = LetterCaseOptions.parse(options).resolve_to(DEFAULT_RESPONSE_TO)
    logger.debug("letter_case_response: -> %s", to_case)
    return wrap_handler(handler, after=lambda response: transform_response_body(response, to_case))
