"""
library-site - Main Entry Point

Runs the API server or provisions the database.
"""

import argparse
import os
import sys

from fastapi import FastAPI

from library_site.core.config import settings


def create_app() -> FastAPI:
    """
    Factory function to create FastAPI application.

    Called by uvicorn in factory mode so the app is only built in the worker.

    Returns:
        FastAPI: Configured application instance
    """
    from library_site.api.factory import create_api
    from library_site.core.logger import setup_logging

    setup_logging()
    return create_api(
        title=settings.api__title,
        description=settings.api__description,
        version=settings.api__version,
        docs_url=settings.api__docs_url,
        redoc_url=settings.api__redoc_url,
    )


def init_database(seed: bool) -> None:
    """Create missing tables and optionally seed default site settings."""
    from library_site.core.logger import setup_logging
    from library_site.services.provisioning import initialize_database

    setup_logging()
    inserted = initialize_database(seed=seed)
    print("✅ Database tables created")
    if seed:
        print(f"🌱 Seeded {len(inserted)} default settings")


def main() -> None:
    """
    Main entry point with CLI argument parsing.
    """
    parser = argparse.ArgumentParser(
        description="library-site - Library website content API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                         # Run the API server (default)
  python main.py --host 127.0.0.1 --port 3000
  python main.py --mode init-db --seed   # Create tables and default settings
        """,
    )

    parser.add_argument(
        "--mode",
        choices=["api", "init-db"],
        default="api",
        help="Run mode: 'api' for the FastAPI server, 'init-db' to create tables (default: api)",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="With --mode init-db, insert default site settings that are missing",
    )
    parser.add_argument(
        "--host",
        default=os.getenv("HOST", "0.0.0.0"),
        help="Host to bind the API server (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", "8080")),
        help="Port to bind the API server (default: 8080)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development (API mode only)",
    )

    args = parser.parse_args()

    if args.mode == "init-db":
        try:
            init_database(seed=args.seed)
        except Exception as e:
            print(f"❌ Database initialization failed: {e}")
            sys.exit(1)
        return

    print("🚀 Starting library-site API Server...")
    print(f"📍 Server will run on {args.host}:{args.port}")
    print(f"🌍 Environment: {settings.environment}")
    print(f"🐛 Debug mode: {settings.debug}")
    print(f"📚 API docs: http://{args.host}:{args.port}{settings.api__docs_url}")
    print()

    try:
        import uvicorn

        uvicorn.run(
            "main:create_app",
            factory=True,
            host=args.host,
            port=args.port,
            reload=args.reload or settings.debug,
            log_level=settings.log_level,
        )
    except Exception as e:
        print(f"❌ Error starting API server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
