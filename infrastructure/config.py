import os
from dataclasses import dataclass

from dotenv import load_dotenv

SUPPORTED_ORMS = ("peewee", "sqlalchemy")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True, slots=True)
class Settings:
    database_url: str = "sqlite:///tasks.db"
    orm: str = "peewee"
    host: str = "127.0.0.1"
    port: int = 8080
    reload: bool = False
    log_level: str = "info"
    cors_origins: tuple[str, ...] = ("*",)
    cors_allow_credentials: bool = True
    cors_allow_methods: tuple[str, ...] = ("*",)
    cors_allow_headers: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls) -> "Settings":
        """Lee la configuración de las variables de entorno (y de `.env` si existe)."""
        load_dotenv()

        orm = os.getenv("ORM", "peewee").strip().lower()
        if orm not in SUPPORTED_ORMS:
            raise ValueError(
                f"ORM no soportado: {orm!r} (opciones: {', '.join(SUPPORTED_ORMS)})"
            )

        return cls(
            database_url=os.getenv("DATABASE_URL", "sqlite:///tasks.db"),
            orm=orm,
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "8080")),
            reload=_as_bool(os.getenv("RELOAD", "false")),
            log_level=os.getenv("LOG_LEVEL", "info").lower(),
            cors_origins=tuple(_as_list(os.getenv("CORS_ORIGINS", "*"))),
            cors_allow_credentials=_as_bool(
                os.getenv("CORS_ALLOW_CREDENTIALS", "true")
            ),
            cors_allow_methods=tuple(_as_list(os.getenv("CORS_ALLOW_METHODS", "*"))),
            cors_allow_headers=tuple(_as_list(os.getenv("CORS_ALLOW_HEADERS", "*"))),
        )
