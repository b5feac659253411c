"""
Handler wrapping for the two invocation shapes a handler may be called with:
  handler(request) -> response
  handler(request, respond, raise_) -> None
"""
from __future__ import annotations

from typing import Any, Callable, Optional

Handler = Callable[..., Any]
Transform = Callable[[Any], Any]


def wrap_handler(
    handler: Handler,
    before: Optional[Transform] = None,
    after: Optional[Transform] = None,
) -> Handler:
    """
    Wrap handler so that before runs on the request and after runs on the response,
    in both shapes. In the callback shape after runs inside the success continuation;
    raise_ is always forwarded untouched.
    """

    def wrapped(request: Any, respond: Optional[Callable] = None, raise_: Optional[Callable] = None):
        if before is not None:
            request = before(request)
        if respond is None:
            response = handler(request)
            return after(response) if after is not None else response
        if after is None:
            handler(request, respond, raise_)
            return None

        def respond_after(response: Any) -> Any:
            return respond(after(response))

        handler(request, respond_after, raise_)
        return None

    return wrapped
