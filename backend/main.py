import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import analytics_router, orders_router, payments_router
from config import settings
from triggers import send_order_confirmation, update_search_index  # noqa: F401

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("storefront")

app = FastAPI(title="Storefront API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(payments_router)
app.include_router(orders_router)
app.include_router(analytics_router)


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies are reported like any other failure.
    logger.warning("Rejected body %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


@app.middleware("http")
async def log_preflight(request, call_next):
    if request.method == "OPTIONS":
        origin = request.headers.get("origin", "")
        logger.info("CORS preflight %s %s origin=%s", request.method, request.url.path, origin)
    response = await call_next(request)
    return response


if __name__ == "__main__":
    import os

    import uvicorn

    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
