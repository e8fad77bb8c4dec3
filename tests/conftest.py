import copy

import pytest


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key, direction=1):
        self._docs = sorted(self._docs, key=lambda d: d.get(key), reverse=direction < 0)
        return self

    def __aiter__(self):
        self._iter = iter(self._docs)
        return self

    async def __anext__(self):
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration


def _matches(doc, filter):
    return all(doc.get(k) == v for k, v in (filter or {}).items())


class FakeCollection:
    """In-memory stand-in for the subset of Motor's collection API we use."""

    def __init__(self, name):
        self.name = name
        self.docs = []

    async def insert_one(self, doc):
        self.docs.append(copy.deepcopy(doc))

    async def insert_many(self, docs):
        for doc in docs:
            await self.insert_one(doc)

    def find(self, filter=None):
        return FakeCursor([copy.deepcopy(d) for d in self.docs if _matches(d, filter)])

    async def find_one(self, filter=None, sort=None):
        docs = [d for d in self.docs if _matches(d, filter)]
        for key, direction in reversed(sort or []):
            # latest insert wins ties on a descending sort
            ordered = list(reversed(docs)) if direction < 0 else docs
            docs = sorted(ordered, key=lambda d: d.get(key), reverse=direction < 0)
        return copy.deepcopy(docs[0]) if docs else None

    async def delete_one(self, filter):
        for i, doc in enumerate(self.docs):
            if _matches(doc, filter):
                del self.docs[i]
                return

    async def count_documents(self, filter):
        return sum(1 for d in self.docs if _matches(d, filter))


class FakeDatabase:
    def __init__(self):
        self.collections = {}
        self.created = []

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    async def list_collection_names(self):
        return list(self.collections)

    async def create_collection(self, name):
        if name in self.collections:
            raise RuntimeError(f"collection {name} already exists")
        self.created.append(name)
        return self[name]

    async def drop_collection(self, name):
        self.collections.pop(name, None)


@pytest.fixture
def fake_db():
    return FakeDatabase()
