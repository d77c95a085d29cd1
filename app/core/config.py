# Fichier: app/core/config.py
from pydantic_settings import BaseSettings
from typing import Optional, List
from pydantic import ValidationError, field_validator
from sqlalchemy.engine.url import URL, make_url
import sys


class Settings(BaseSettings):
    # --- Connexion MySQL (chaque valeur a un défaut pour XAMPP en local) ---
    DB_HOST: str = "localhost"
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "eng_deu_vocab"
    DB_DRIVER: str = "mysql+pymysql"

    # Full URL override, mostly used by tests and local SQLite runs.
    DATABASE_URL: Optional[str] = None

    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # Word Client
    WORD_API_BASE_URL: str = "http://localhost:8000"
    WORD_CLIENT_DISCARD_STALE: bool = False

    # Performance instrumentation
    SQLALCHEMY_SLOW_QUERY_THRESHOLD_MS: int = 300

    ENVIRONMENT: str = "development"

    class Config:
        env_file = ".env"

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def _normalize_database_url(cls, value: Optional[str]) -> Optional[str]:
        """Ensure MySQL URLs always name the PyMySQL driver.

        Hosting providers usually hand out ``mysql://`` URLs, which SQLAlchemy
        maps to the ``mysqlclient`` driver. We only ship PyMySQL, so the scheme
        is upgraded to ``mysql+pymysql://``. Other backends are left untouched.
        """

        if not isinstance(value, str):
            return value

        value = value.strip()
        if not value:
            return None

        if value.startswith("mysql://"):
            return "mysql+pymysql://" + value[len("mysql://") :]

        return value

    @field_validator("WORD_API_BASE_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def sqlalchemy_database_uri(self) -> str:
        """Return the effective database URL.

        ``DATABASE_URL`` wins when set, otherwise the URL is assembled from the
        ``DB_*`` parts.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL

        url = URL.create(
            self.DB_DRIVER,
            username=self.DB_USER or None,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            database=self.DB_NAME,
        )
        return url.render_as_string(hide_password=False)

    @property
    def masked_database_uri(self) -> str:
        return make_url(self.sqlalchemy_database_uri).render_as_string(hide_password=True)


def describe_settings_errors(exc: ValidationError) -> list[str]:
    """One ``VARIABLE: problem`` line per invalid environment variable."""
    lines = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<settings>"
        lines.append(f"{location}: {error.get('msg', 'invalid value')} (type={error.get('type', '?')})")
    return lines


try:
    settings = Settings()
except ValidationError as exc:  # pragma: no cover - exercised at runtime
    # L'erreur remonte pendant l'import : on affiche d'abord les variables fautives.
    print("Configuration error while loading environment variables:", file=sys.stderr)
    for line in describe_settings_errors(exc):
        print(f"  - {line}", file=sys.stderr)
    raise
