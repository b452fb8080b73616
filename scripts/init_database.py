#!/usr/bin/env python3
"""
Database Initialization Script

Creates all library-site tables and, with --seed, the default site settings.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from library_site.core.logger import get_logger, setup_logging
from library_site.services.provisioning import initialize_database

logger = get_logger(__name__)


def main() -> None:
    """Main function to initialize the database."""
    parser = argparse.ArgumentParser(description="Initialize the library-site database")
    parser.add_argument(
        "--seed", action="store_true", help="Insert missing default site settings"
    )
    args = parser.parse_args()

    setup_logging()
    try:
        initialize_database(seed=args.seed)
    except Exception as e:
        logger.error("Database initialization failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
