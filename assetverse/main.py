import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from assetverse.api.routers.affiliations import router as affiliations_router
from assetverse.api.routers.assets import router as assets_router
from assetverse.api.routers.assignments import router as assignments_router
from assetverse.api.routers.auth import router as auth_router
from assetverse.api.routers.packages import router as packages_router
from assetverse.api.routers.requests import router as requests_router
from assetverse.api.routers.users import router as users_router
from assetverse.core.config import settings
from assetverse.core.errors import AssetVerseError
from assetverse.core.logging import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="AssetVerse",
    version="1.0.0",
    description=(
        "Company asset tracking with employee asset requests, HR approval workflow "
        "and per-company employee capacity limits."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.site_domain],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AssetVerseError)
async def _domain_error_handler(request: Request, exc: AssetVerseError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message}, headers=headers)


@app.exception_handler(Exception)
async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


@app.get("/")
def health() -> dict[str, str]:
    return {"status": "ok", "service": "AssetVerse server running"}


app.include_router(auth_router)
app.include_router(users_router)
app.include_router(assets_router)
app.include_router(requests_router)
app.include_router(assignments_router)
app.include_router(affiliations_router)
app.include_router(packages_router)
