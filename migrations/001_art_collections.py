"""
Migration: Art collections and sample paintings
Date: 2018-06-01

Creates the paintings and sculptures collections and seeds two paintings.
"""

from artdb.config import settings
from artdb.db import ensure_collection
from artdb.models import Painting
from artdb.placeholders import render

PAINTINGS = [
    {
        "Name": "Mona Lisa",
        "Artist": "Leonardo da Vinci",
        "Year": 1503,
        "Medium": "Oil Paint",
    },
    {
        "Name": "My first painting",
        "Artist": "{#MyName}",
        "Year": 2018,
        "Medium": "Crayons",
    },
]


async def up(db):
    """Apply migration"""
    await ensure_collection(db, "paintings")
    await ensure_collection(db, "sculptures")

    documents = [
        Painting.model_validate(doc).to_document()
        for doc in render(PAINTINGS, settings.placeholder_variables())
    ]
    await db["paintings"].insert_many(documents)


async def down(db):
    """Rollback migration"""
    await db.drop_collection("paintings")
    await db.drop_collection("sculptures")
