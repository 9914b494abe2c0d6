"""
Initialize database tables
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from resumeforge.core.config import settings
from resumeforge.core.database import init_db
from resumeforge.core.logging_config import configure_logging
import structlog

logger = structlog.get_logger()


def main():
    """Main initialization function"""
    configure_logging()
    logger.info("initializing_database", database_url=settings.DATABASE_URL)

    try:
        init_db()
        logger.info("database_initialization_complete")
    except Exception as e:
        logger.error("database_initialization_failed", error=str(e))
        raise


if __name__ == "__main__":
    main()
