"""
Skeleton for a new Art database migration.

Save a copy next to runner.py under the next free number, for example
002_add_sculptures.py. The runner applies files in filename order and
records each one in the _migrations collection once up() succeeds.

String values may use {#Key} placeholders; pass seed data through
artdb.placeholders.render with settings.placeholder_variables().
"""

from artdb.config import settings
from artdb.db import ensure_collection
from artdb.placeholders import render

DOCUMENTS = []


async def up(db):
    await ensure_collection(db, "sculptures")
    if DOCUMENTS:
        await db["sculptures"].insert_many(render(DOCUMENTS, settings.placeholder_variables()))


async def down(db):
    await db.drop_collection("sculptures")
