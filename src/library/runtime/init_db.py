"""Database initialization script."""

from src.library.core.services.database.db_manage import DbManageService
from src.library.core.services.database.db_session import DbSessionService
from src.library.runtime.logging_setup import configure_logging


def init_db(session_service: DbSessionService | None = None) -> None:
    """Create all database tables."""
    session_service = session_service or DbSessionService()
    DbManageService(session_service.engine).create_all()


if __name__ == "__main__":
    configure_logging()
    init_db()
