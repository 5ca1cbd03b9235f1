"""CLI adapter to create the finance schema and seed default settings."""

from src.infrastructure.container import build_finance_store
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Create missing tables and seed default profiles and categories."""
    logger = get_app_logger()
    store = build_finance_store()
    store.ensure_schema()
    seeded = store.seed_defaults()
    logger.info("Finance schema is ready.")
    if seeded:
        print("Created the finance schema with default profiles and categories.")
    else:
        print("Finance schema already initialized.")


if __name__ == "__main__":  # pragma: no cover
    main()
