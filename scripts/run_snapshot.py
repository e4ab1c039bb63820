"""
Monthly snapshot runner for cron-style schedulers.

Copies every user's current weights into last month's progress history.
Run it on the 1st of each month, e.g.::

    5 0 1 * *  cd /srv/trainvault && python scripts/run_snapshot.py

Usage:
    python scripts/run_snapshot.py [--keep-existing]
"""

import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import click
from sqlmodel import Session

from app.core.config import settings
from app.core.exceptions import SnapshotError
from app.core.logging import setup_logging
from app.db.session import engine
from app.services.snapshot_service import SnapshotService


@click.command()
@click.option("--keep-existing", is_flag=True, default=False,
              help="Do not overwrite records already stored for the month.")
def main(keep_existing: bool) -> None:
    """Run the monthly progress snapshot and print the result as JSON."""
    setup_logging(settings.LOG_LEVEL)
    with Session(engine) as session:
        try:
            result = SnapshotService(session).run(overwrite=not keep_existing)
        except SnapshotError as e:
            click.echo(json.dumps({"error": str(e)}), err=True)
            sys.exit(1)

    click.echo(json.dumps(result.model_dump(by_alias=True)))


if __name__ == "__main__":
    main()
