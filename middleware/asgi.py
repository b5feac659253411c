"""
ASGI bridge: applies the letter case transforms to JSON request/response bodies,
query strings and the generated API document of an ASGI app (FastAPI).
"""
from __future__ import annotations

import json
import logging
from typing import Any, Optional
from urllib.parse import parse_qs, urlencode

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from middleware.letter_case import transform_request_params, transform_response_body
from middleware.swagger import keywordize_parameter_names, letter_case_swagger_body
from schemas.options import DEFAULT_FROM, DEFAULT_RESPONSE_TO, DEFAULT_TO, LetterCaseOptions
from utils.keys import is_container

logger = logging.getLogger(__name__)


def _is_json(headers: list[tuple[bytes, bytes]]) -> bool:
    for name, value in headers:
        if name.lower() == b"content-type":
            return b"json" in value.lower()
    return False


def _with_content_length(headers: list[tuple[bytes, bytes]], length: int) -> list[tuple[bytes, bytes]]:
    out = [(n, v) for n, v in headers if n.lower() != b"content-length"]
    out.append((b"content-length", str(length).encode("latin-1")))
    return out


def _dumps(obj: Any) -> bytes:
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def _parse_query(query_string: bytes) -> dict[str, Any]:
    """Query params by name; repeated names keep every value, in order, as a list."""
    parsed = parse_qs(query_string.decode("latin-1"), keep_blank_values=True)
    return {k: v if len(v) > 1 else v[0] for k, v in parsed.items()}


async def _read_body(receive: Receive) -> bytes:
    chunks = []
    more_body = True
    while more_body:
        message = await receive()
        if message["type"] != "http.request":
            break
        chunks.append(message.get("body", b""))
        more_body = message.get("more_body", False)
    return b"".join(chunks)


class LetterCaseMiddleware:
    """
    Normalizes request keys (filter `from`, convert `to`) before the app sees them and
    converts response keys after. The document at docs_path only has its parameter
    names converted.
    """

    def __init__(
        self,
        app: ASGIApp,
        request_options: Any = None,
        response_options: Any = None,
        docs_path: Optional[str] = "/openapi.json",
        docs_options: Any = None,
    ) -> None:
        self.app = app
        req = LetterCaseOptions.parse(request_options)
        self.request_options = LetterCaseOptions(from_=req.resolve_from(DEFAULT_FROM), to=req.resolve_to(DEFAULT_TO))
        self.response_to = LetterCaseOptions.parse(response_options).resolve_to(DEFAULT_RESPONSE_TO)
        self.docs_path = docs_path
        self.docs_to = LetterCaseOptions.parse(docs_options).resolve_to(DEFAULT_TO)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        is_docs = self.docs_path is not None and scope.get("path") == self.docs_path
        if is_docs:
            await self.app(scope, receive, self._wrap_send(send, is_docs=True))
            return

        scope, receive = await self._normalize_request(scope, receive)
        await self.app(scope, receive, self._wrap_send(send, is_docs=False))

    async def _normalize_request(self, scope: Scope, receive: Receive) -> tuple[Scope, Receive]:
        headers = list(scope.get("headers") or [])
        query = _parse_query(scope.get("query_string", b""))
        body = await _read_body(receive)

        request: dict[str, Any] = {"query-params": query}
        parsed_body = False
        if body and _is_json(headers):
            try:
                request["body"] = json.loads(body)
                parsed_body = True
            except ValueError:
                logger.debug("Request body is not valid JSON; forwarding unchanged")

        normalized = transform_request_params(request, self.request_options)
        if parsed_body and is_container(normalized["body"]):
            body = _dumps(normalized["body"])
            headers = _with_content_length(headers, len(body))

        scope = dict(scope)
        scope["headers"] = headers
        scope["query_string"] = urlencode(normalized["query-params"], doseq=True).encode("latin-1")

        body_sent = False

        async def replay() -> Message:
            nonlocal body_sent
            if body_sent:
                return await receive()
            body_sent = True
            return {"type": "http.request", "body": body, "more_body": False}

        return scope, replay

    def _wrap_send(self, send: Send, is_docs: bool) -> Send:
        start: dict[str, Any] = {}
        chunks: list[bytes] = []

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                if not _is_json(list(message.get("headers") or [])):
                    start["passthrough"] = True
                    await send(message)
                    return
                start["message"] = message
                return
            if message["type"] != "http.response.body" or start.get("passthrough"):
                await send(message)
                return

            chunks.append(message.get("body", b""))
            if message.get("more_body", False):
                return

            raw = b"".join(chunks)
            body = self._transform_body(raw, is_docs)
            start_message = dict(start["message"])
            if body is None:
                body = raw
            else:
                start_message["headers"] = _with_content_length(list(start_message.get("headers") or []), len(body))
            await send(start_message)
            await send({"type": "http.response.body", "body": body, "more_body": False})

        return send_wrapper

    def _transform_body(self, raw: bytes, is_docs: bool) -> Optional[bytes]:
        """Transformed JSON body, or None when raw is empty or not JSON (headers are then left alone)."""
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except ValueError:
            logger.debug("Response body is not valid JSON; forwarding unchanged")
            return None
        if is_docs:
            data = letter_case_swagger_body(keywordize_parameter_names(data), self.docs_to)
        else:
            data = transform_response_body({"body": data}, self.response_to)["body"]
        return _dumps(data)
