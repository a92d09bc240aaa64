"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ──────────────────────────────
    POSTGRES_USER: str = "insureclaim_user"
    POSTGRES_PASSWORD: str = "insureclaim_pass"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "insureclaim_db"

    @property
    def DATABASE_URL(self) -> str:
        """Async URL for app runtime (asyncpg)."""
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    @property
    def DATABASE_URL_SYNC(self) -> str:
        """Sync URL for Alembic migrations (psycopg2)."""
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # ── Auth / JWT ────────────────────────────
    JWT_SECRET_KEY: str = "change-this-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_ISSUER: str = "InsureClaimAPI"
    JWT_AUDIENCE: str = "InsureClaimClient"
    BCRYPT_ROUNDS: int = Field(default=12, ge=4, le=31)
    ALLOW_ADMIN_SELF_REGISTRATION: bool = True

    # ── Business rules ────────────────────────
    PREMIUM_ROUNDING: str = Field(default="HALF_EVEN", pattern="^(HALF_EVEN|HALF_UP)$")
    ENFORCE_CLAIM_TRANSITIONS: bool = False

    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    LOG_JSON: bool = False
    CORS_ALLOWED_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
