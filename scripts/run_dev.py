"""
Development server launcher.

Loads the .env file and serves the API with uvicorn, reloading on code
changes.  Host, port and log level default to the application settings.

Usage:
    python scripts/run_dev.py [--host HOST] [--port PORT] [--no-reload]
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import click
import uvicorn

from app.core.config import settings
from app.core.logging import setup_logging


@click.command()
@click.option("--host", default=settings.API_HOST, show_default=True, help="Interface to bind.")
@click.option("--port", default=settings.API_PORT, show_default=True, type=int, help="Port to listen on.")
@click.option("--reload/--no-reload", default=True, show_default=True, help="Restart on code changes.")
def main(host: str, port: int, reload: bool) -> None:
    """Serve the TrainVault API for local development."""
    setup_logging(settings.LOG_LEVEL)
    click.echo(f"TrainVault API on http://{host}:{port} (docs at /docs, log level {settings.LOG_LEVEL})")
    uvicorn.run("app.main:app", host=host, port=port, reload=reload, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
