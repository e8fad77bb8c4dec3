import argparse
import asyncio
import importlib.util
import logging
import os
import sys
from datetime import datetime, timezone

from artdb.config import settings
from artdb.db import get_client
from artdb.exceptions import MigrationError

logger = logging.getLogger(__name__)

EXCLUDED_FILES = ['runner.py', 'template.py', '__init__.py']
TRACKING = '_migrations'


class MigrationRunner:
    """
    MongoDB migration runner with version tracking.
    Tracks applied migrations in '_migrations' collection.
    """

    def __init__(self, db, client=None, migrations_dir: str = None):
        self.client = client
        self.db = db
        self.migrations_col = self.db[TRACKING]  # Use bracket notation for collections starting with _
        self.migrations_dir = migrations_dir or os.path.dirname(os.path.abspath(__file__))

    @classmethod
    def from_settings(cls, migrations_dir: str = None):
        client = get_client(settings.MONGO_URI)
        return cls(client[settings.MONGO_DB_NAME], client=client, migrations_dir=migrations_dir)

    def discover(self):
        """Migration filenames found on disk, in apply order"""
        return sorted([
            f for f in os.listdir(self.migrations_dir)
            if f.endswith('.py') and f not in EXCLUDED_FILES
        ])

    async def get_applied(self):
        """Get list of applied migration filenames"""
        try:
            cursor = self.migrations_col.find().sort('applied_at', 1)
            return [doc['name'] async for doc in cursor]
        except Exception as e:
            raise self._fail(TRACKING, f"could not read applied migrations: {e}") from e

    async def pending(self):
        applied = set(await self.get_applied())
        return [f for f in self.discover() if f not in applied]

    async def run_pending(self):
        """Run all pending migrations"""
        applied = await self.get_applied()

        pending_count = 0
        for filename in self.discover():
            if filename in applied:
                logger.debug("Skipping %s (already applied)", filename)
                continue

            logger.info("Running %s...", filename)
            module = self._load_module(filename)

            try:
                await module.up(self.db)
                await self.migrations_col.insert_one({
                    'name': filename,
                    'applied_at': datetime.now(timezone.utc)
                })
            except Exception as e:
                raise self._fail(filename, f"up failed: {e}") from e
            logger.info("Applied %s", filename)
            pending_count += 1

        if pending_count == 0:
            logger.info("No pending migrations")
        else:
            logger.info("Applied %d migration(s)", pending_count)

        return pending_count

    async def rollback_last(self):
        """Rollback the most recently applied migration"""
        try:
            last = await self.migrations_col.find_one(sort=[('applied_at', -1)])
        except Exception as e:
            raise self._fail(TRACKING, f"could not read last migration: {e}") from e
        if not last:
            logger.warning("No migrations to rollback")
            return None

        filename = last['name']
        logger.info("Rolling back %s...", filename)
        module = self._load_module(filename)

        try:
            await module.down(self.db)
            await self.migrations_col.delete_one({'name': filename})
        except Exception as e:
            raise self._fail(filename, f"down failed: {e}") from e
        logger.info("Rolled back %s", filename)
        return filename

    async def status(self):
        """Return (filename, applied_at) rows; applied_at is None while pending"""
        applied_at = {}
        try:
            async for doc in self.migrations_col.find():
                applied_at[doc['name']] = doc.get('applied_at')
        except Exception as e:
            raise self._fail(TRACKING, f"could not read applied migrations: {e}") from e
        return [(filename, applied_at.get(filename)) for filename in self.discover()]

    def _load_module(self, filename):
        """Load migration module from file"""
        filepath = os.path.join(self.migrations_dir, filename)
        if not os.path.isfile(filepath):
            raise self._fail(filename, "migration file not found")

        spec = importlib.util.spec_from_file_location(filename[:-3], filepath)
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            raise self._fail(filename, f"could not load: {e}") from e

        for hook in ('up', 'down'):
            if not callable(getattr(module, hook, None)):
                raise self._fail(filename, f"missing '{hook}' function")
        return module

    @staticmethod
    def _fail(name, message):
        """Log a failure and build the MigrationError to raise"""
        logger.error("Failed %s: %s", name, message)
        return MigrationError(name, message)

    async def close(self):
        """Close MongoDB connection"""
        if self.client is not None:
            self.client.close()


def print_status(rows):
    print("\nMigration Status:\n")
    print(f"{'Status':<12} {'Migration':<40} {'Applied At'}")
    print("-" * 80)

    for filename, applied_at in rows:
        if applied_at is not None:
            print(f"{'Applied':<12} {filename:<40} {applied_at.strftime('%Y-%m-%d %H:%M:%S')}")
        else:
            print(f"{'Pending':<12} {filename:<40} {'-'}")

    applied = sum(1 for _, applied_at in rows if applied_at is not None)
    print(f"\nTotal: {len(rows)} migrations ({applied} applied, {len(rows) - applied} pending)")


def build_parser():
    parser = argparse.ArgumentParser(prog="migrations.runner", description="Art database migrations")
    parser.add_argument(
        "command",
        choices=["migrate", "rollback", "status"],
        help="migrate: run pending migrations; rollback: undo the last one; status: list migrations",
    )
    return parser


async def main(argv=None, runner=None):
    args = build_parser().parse_args(argv)
    runner = runner or MigrationRunner.from_settings()

    try:
        if args.command == 'migrate':
            await runner.run_pending()
        elif args.command == 'rollback':
            await runner.rollback_last()
        elif args.command == 'status':
            print_status(await runner.status())
    except MigrationError:
        return 1
    finally:
        await runner.close()
    return 0


if __name__ == '__main__':
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(asyncio.run(main()))
