from typing import Any

from fastapi import APIRouter, Body, Request

from schemas.profile import ProfileUpdate

router = APIRouter(prefix="/api/echo", tags=["echo"])


@router.post("")
async def echo(request: Request, payload: Any = Body(None)):
    """Return the body and query params exactly as the handler received them (kebab-case)."""
    return {
        "received-body": payload,
        "received-query": dict(request.query_params),
    }


@router.get("/profile")
async def get_profile():
    """Fixed kebab-case payload; clients receive it in camelCase."""
    return {
        "user-name": "ada",
        "display-name": "Ada Lovelace",
        "linked-accounts": [
            {"account-id": "gh-1", "provider-name": "github"},
            {"account-id": "gl-2", "provider-name": "gitlab"},
        ],
    }


@router.put("/profile")
async def update_profile(payload: ProfileUpdate):
    return payload.model_dump(by_alias=True)
