"""Letter case middleware for handler pipelines and ASGI apps."""
from middleware.asgi import LetterCaseMiddleware
from middleware.auth import authorize_middleware, check_authorization
from middleware.handler import wrap_handler
from middleware.letter_case import (
    letter_case_request,
    letter_case_response,
    transform_request_params,
    transform_response_body,
)
from middleware.swagger import keywordize_parameter_names, letter_case_swagger_body, letter_case_swagger_response

__all__ = [
    "LetterCaseMiddleware",
    "authorize_middleware",
    "check_authorization",
    "wrap_handler",
    "letter_case_request",
    "letter_case_response",
    "transform_request_params",
    "transform_response_body",
    "keywordize_parameter_names",
    "letter_case_swagger_body",
    "letter_case_swagger_response",
]
