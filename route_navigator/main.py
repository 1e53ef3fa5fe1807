import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, ORJSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from route_navigator import __version__
from route_navigator.api.router import api_router
from route_navigator.core.config import settings
from route_navigator.core.logging import configure_logging
from route_navigator.core.tracing import bound_trace_id, current_trace_id, resolve_trace_id
from route_navigator.domain.route_sequencing import RouteSequencingError
from route_navigator.models.schemas import ErrorResponse

logger = configure_logging(settings.SERVICE_NAME, settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    with bound_trace_id("bootstrap"):
        logger.info("Starting route navigator")
        logger.info("Environment: %s, tmap mode: %s", settings.ENVIRONMENT, settings.TMAP_MODE)
    yield
    logger.info("Route navigator stopped")


app = FastAPI(
    title="Route Navigator API",
    version=__version__,
    description="Ordered trip routes and navigation app deep links",
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        "%s %s - status=%s duration=%.3fs",
        request.method,
        request.url.path,
        response.status_code,
        duration,
    )

    return response


@app.middleware("http")
async def trace_middleware(request: Request, call_next):
    with bound_trace_id(resolve_trace_id(request.headers.items())) as trace_id:
        response = await call_next(request)
    response.headers.setdefault("X-Trace-Id", trace_id)
    return response


@app.exception_handler(RouteSequencingError)
async def route_error_handler(request: Request, exc: RouteSequencingError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    body = ErrorResponse(error=exc.code, detail=exc.message, context=exc.context())
    return JSONResponse(body.model_dump(), status_code=exc.status_code)


Instrumentator().instrument(app).expose(app, endpoint="/metrics")

app.include_router(api_router, prefix="/api/v1")


@app.get("/healthz")
async def health_check() -> JSONResponse:
    return JSONResponse(
        {"service": settings.SERVICE_NAME, "status": "ok"},
        status_code=status.HTTP_200_OK,
        headers={"X-Trace-Id": current_trace_id()},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "route_navigator.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
    )
