import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chado.repository import ChadoRepository
from core import db, settings
from core.errors import BackendUnavailable, InvalidRange
from features import router as features_router
from organisms import router as organisms_router
from refseqs import router as refseqs_router
from tracks import router as tracks_router

logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = ["Origin", "X-Requested-With", "Content-Type", "Accept"]


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, shared by every request through the repository.
    pool = await db.create_pool()
    app.state.backend = ChadoRepository(pool)
    try:
        yield
    finally:
        await db.close_pool(pool)


configure_logging()
app = FastAPI(lifespan=lifespan)

# JBrowse is usually served from another origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=CORS_ALLOW_HEADERS,
)


@app.middleware("http")
async def always_allow_origin(request: Request, call_next) -> Response:
    # CORSMiddleware only answers requests carrying Origin; clients such as
    # curl or proxies still get the headers.
    response = await call_next(request)
    response.headers.setdefault("Access-Control-Allow-Origin", "*")
    response.headers.setdefault("Access-Control-Allow-Headers", ", ".join(CORS_ALLOW_HEADERS))
    return response


@app.exception_handler(InvalidRange)
async def invalid_range_handler(_: Request, exc: InvalidRange) -> Response:
    logger.info("invalid_range start=%s end=%s", exc.start, exc.end)
    return Response(status_code=400)


@app.exception_handler(BackendUnavailable)
async def backend_unavailable_handler(_: Request, exc: BackendUnavailable) -> Response:
    logger.error("backend_unavailable operation=%s", exc.operation, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Backend unavailable."})


app.include_router(organisms_router.router, tags=["organisms"])
app.include_router(refseqs_router.router, tags=["refseqs"])
app.include_router(features_router.router, tags=["features"])
app.include_router(tracks_router.router, tags=["tracks"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
