import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

# Imports de l'application
from app.core.config import settings
from app.api.v1.api import api_router
from app.services.word_service import CONNECTION_ERROR_MESSAGE, DatabaseConnectionError

# --- Configuration du logging ---
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# --- Initialisation de l'application FastAPI ---
app = FastAPI(
    title="Vocabulary Flashcards API",
    openapi_url="/api/openapi.json",
)


def _build_cors_origins() -> list[str]:
    origins = sorted({origin.strip().rstrip("/") for origin in settings.BACKEND_CORS_ORIGINS if origin and origin.strip()})
    logger.info("CORS origins configurés: %s", origins)
    return origins or ["*"]


# --- Configuration des Middlewares ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=_build_cors_origins(),
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.middleware("http")
async def allow_any_origin(request: Request, call_next):
    # CORSMiddleware only answers requests that carry an Origin header.
    response = await call_next(request)
    response.headers.setdefault("Access-Control-Allow-Origin", "*")
    return response


@app.exception_handler(DatabaseConnectionError)
async def database_connection_error_handler(request: Request, exc: DatabaseConnectionError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": CONNECTION_ERROR_MESSAGE},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    # Table manquante, SQL invalide... : même réponse JSON que la connexion perdue.
    logger.error("Database error on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"message": CONNECTION_ERROR_MESSAGE},
    )


app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
