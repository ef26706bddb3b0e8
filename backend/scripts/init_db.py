"""
Initialize database: create the submissions table.

Usage (from backend directory):
  python -m scripts.init_db

The application also creates missing tables on startup; this script is for
preparing a database before the first deploy.
"""

from homework_grader.core.database import init_db
from homework_grader.core.logging import get_logger

logger = get_logger(__name__)


def main():
    logger.info("Initializing database...")
    init_db()
    logger.info(
        "Database initialization complete. Run the application with: python -m uvicorn main:app --host 0.0.0.0 --port 8090"
    )


if __name__ == "__main__":
    main()
