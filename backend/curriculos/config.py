import logging
import logging.handlers
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "postgresql://curriculos:curriculos@db:5432/curriculos"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    api_prefix: str = ""

    # Anti-forgery guard (one shared secret, no per-session binding)
    csrf_enabled: bool = True
    csrf_secret: str = "change-me"
    csrf_token_max_age: int | None = None

    # HTTP hardening
    security_headers_enabled: bool = True
    cors_origins: str = "*"
    cors_allow_credentials: bool = False
    trusted_hosts: str = "*"

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_max_bytes: int = 10_485_760  # 10 MB
    log_backup_count: int = 5

    model_config = {"env_file": ".env"}

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def trusted_hosts_list(self) -> list[str]:
        return [h.strip() for h in self.trusted_hosts.split(",") if h.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


settings = Settings()


_BRIEF_FORMAT = logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%H:%M:%S")
_DETAIL_FORMAT = logging.Formatter(
    "%(asctime)s %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Loggers that are too chatty at the root level.
_QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


def _rotating_handler(path: Path, level: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(_DETAIL_FORMAT)
    return handler


def setup_logging() -> None:
    """Log to the console (INFO+) and to rotating app.log / error.log files under log_dir."""
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(_BRIEF_FORMAT)
    root.addHandler(console)
    root.addHandler(_rotating_handler(log_dir / "app.log", logging.DEBUG))
    root.addHandler(_rotating_handler(log_dir / "error.log", logging.ERROR))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging to %s at %s (rotation %d MB x %d)",
        log_dir, settings.log_level, settings.log_max_bytes // 1_048_576, settings.log_backup_count,
    )
