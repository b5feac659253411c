import logging

from fastapi import FastAPI

from api.echo import router as echo_router
from config import settings
from middleware.asgi import LetterCaseMiddleware

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    description="Request/response key letter case normalization",
    version="0.1.0",
    debug=settings.debug,
    openapi_url=settings.docs_path,
)

app.add_middleware(
    LetterCaseMiddleware,
    request_options={"from": settings.request_from_case, "to": settings.request_to_case},
    response_options={"to": settings.response_to_case},
    docs_path=settings.docs_path,
    docs_options={"to": settings.docs_to_case},
)

app.include_router(echo_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
