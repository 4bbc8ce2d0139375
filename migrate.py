import subprocess
import sys

from villa_api.core.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def run_migration():
    """Run database migrations"""
    try:
        result = subprocess.run(['alembic', 'upgrade', 'head'],
                                capture_output=True, text=True)
    except OSError as e:
        logger.error(f"Migration error: {e}")
        return False

    if result.returncode == 0:
        logger.info("Database migration completed successfully")
        return True
    logger.error(f"Migration failed: {result.stderr}")
    return False


if __name__ == "__main__":
    setup_logging()
    success = run_migration()
    sys.exit(0 if success else 1)
