from dataclasses import dataclass

import pytest
from click.testing import CliRunner

from folio.collection import Collection
from folio.config import Config
from folio.context import StaticRequestContext


@dataclass
class Post:
    title: str = ""


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def context():
    """A GET request to ``/posts`` without any query parameters."""
    return StaticRequestContext("/posts")


@pytest.fixture
def make_collection(config):
    """Factory for collections filled with :class:`Post` items."""

    def make(page=1, per_page=5, total_entries=23, item_type_name=None):
        pager = Collection(
            page,
            per_page,
            total_entries,
            config=config,
            item_type_name=item_type_name,
        )
        remaining = max(0, min(per_page, total_entries - pager.offset))
        pager.replace([Post("post %d" % (pager.offset + i)) for i in range(remaining)])
        return pager

    return make


@pytest.fixture
def cli_runner():
    return CliRunner()


class FakeMongoCollection:
    """Just enough of a pymongo collection to run criteria against.
    Only equality filters are supported.
    """

    def __init__(self, documents=()):
        self.documents = list(documents)
        self.find_calls = []
        self.count_calls = 0

    def _matches(self, document, selector):
        return all(document.get(key) == value for key, value in selector.items())

    def find(self, selector=None, sort=None, skip=0, limit=0):
        self.find_calls.append(
            {"filter": selector, "sort": sort, "skip": skip, "limit": limit}
        )
        rv = [d for d in self.documents if self._matches(d, selector or {})]
        for key, direction in reversed(sort or ()):
            rv.sort(key=lambda d: d.get(key), reverse=direction < 0)
        rv = rv[skip:]
        if limit:
            rv = rv[:limit]
        return iter([dict(d) for d in rv])

    def count_documents(self, selector):
        self.count_calls += 1
        return len([d for d in self.documents if self._matches(d, selector)])


@pytest.fixture
def mongo_collection():
    return FakeMongoCollection(
        [{"_id": num, "title": "doc %d" % num, "odd": bool(num % 2)} for num in range(1, 5)]
    )
