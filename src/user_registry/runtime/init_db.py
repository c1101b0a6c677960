"""Database initialization script."""

from src.user_registry.core.services.database.db_manage import DbManageService
from src.user_registry.core.services.database.db_session import DbSessionService
from src.user_registry.runtime.config.config_data import ConfigData
from src.user_registry.runtime.context import get_config


def init_db(config: ConfigData | None = None) -> None:
    """Create all database tables."""
    db_service = DbSessionService(config or get_config())
    try:
        DbManageService(db_service.engine).create_all()
    finally:
        db_service.dispose()


if __name__ == "__main__":
    init_db()
