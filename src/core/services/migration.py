"""Run Alembic migrations programmatically against the bookings database."""

import io
import logging
from pathlib import Path

from alembic.config import Config

from alembic import command
from core.config import get_config

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def sqlalchemy_url(database_url: str) -> str:
    """Point a libpq-style URL at SQLAlchemy's psycopg 3 dialect."""
    for prefix in ("postgresql://", "postgres://"):
        if database_url.startswith(prefix):
            return "postgresql+psycopg://" + database_url[len(prefix) :]
    return database_url


def run_migrations(root: Path = PROJECT_ROOT) -> dict[str, str]:
    config = get_config()

    cfg = Config(str(root / "alembic.ini"))
    cfg.set_main_option("script_location", str(root / "alembic"))
    cfg.set_main_option("sqlalchemy.url", sqlalchemy_url(config.database_url).replace("%", "%%"))

    stderr_buf = io.StringIO()
    stream_handler = logging.StreamHandler(stderr_buf)
    alembic_logger = logging.getLogger("alembic")
    alembic_logger.addHandler(stream_handler)

    try:
        command.upgrade(cfg, "head")
        output = stderr_buf.getvalue()
        logger.info("Migration complete: %s", output)
        return {"status": "success", "output": output}
    except Exception as e:
        logger.error("Migration failed: %s", e)
        raise
    finally:
        alembic_logger.removeHandler(stream_handler)


def main() -> None:
    logging.basicConfig(level=get_config().log_level)
    run_migrations()
