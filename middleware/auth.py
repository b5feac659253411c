from __future__ import annotations

import logging
from typing import Any, Callable

from middleware.handler import Handler

logger = logging.getLogger(__name__)

UNAUTHORIZED_STATUS = 401
UNAUTHORIZED_BODY = "Unauthorized"


def check_authorization(request: Any) -> bool:
    # No authorization scheme yet: every request is allowed.
    return True


def authorize_middleware(handler: Handler, check: Callable[[Any], bool] = check_authorization) -> Handler:
    """Short-circuit with 401 when check(request) is false; otherwise call handler."""

    def wrapped(request: Any) -> Any:
        if not check(request):
            logger.warning("Unauthorized request rejected")
            return {"status": UNAUTHORIZED_STATUS, "body": UNAUTHORIZED_BODY}
        return handler(request)

    return wrapped
