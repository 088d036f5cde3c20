"""A small query builder for document stores.

It works with any collection that speaks the pymongo API (``find`` and
``count_documents``).  Criteria are immutable, every method returns a
modified copy::

    posts = Criteria(db.posts, Post).where(published=True).order_by("-date")
    page = posts.paginate(page=2, per_page=10)
"""
import logging

from pymongo import ASCENDING
from pymongo import DESCENDING

from folio.collection import Collection
from folio.collection import PageMixin
from folio.finders.base import normalize_paginate_args
from folio.page_number import page_number
from folio.page_number import per_page_value


logger = logging.getLogger(__name__)


class Criteria:
    """Finds documents in `collection`.  If a `document_class` is given,
    every raw document is passed to it as keyword arguments.
    """

    def __init__(self, collection, document_class=None):
        self.collection = collection
        self.document_class = document_class
        self._filter = {}
        self._sort = None
        self._skip = None
        self._limit = None

    def _clone(self, cls=None):
        """Makes a flat copy but keeps the other data on it shared."""
        rv = object.__new__(cls or self.__class__)
        rv.__dict__.update(self.__dict__)
        return rv

    def where(self, *filters, **fields):
        """Adds conditions.  Accepts filter documents and keyword
        arguments for plain equality matches.
        """
        rv = self._clone()
        rv._filter = dict(self._filter)
        for item in filters:
            rv._filter.update(item)
        rv._filter.update(fields)
        return rv

    def order_by(self, *fields):
        """Sets the ordering.  Prefix a field with ``-`` to sort it in
        descending order.
        """
        rv = self._clone()
        sort = []
        for field in fields:
            if field.startswith("-"):
                sort.append((field[1:], DESCENDING))
            else:
                sort.append((field, ASCENDING))
        rv._sort = sort or None
        return rv

    def skip(self, skip):
        rv = self._clone()
        rv._skip = skip
        return rv

    def limit(self, limit):
        rv = self._clone()
        rv._limit = limit
        return rv

    @property
    def selector(self):
        """The filter document of this query."""
        return dict(self._filter)

    @property
    def offset(self):
        return self._skip

    @property
    def options(self):
        """The options passed to ``find`` besides the filter."""
        rv = {}
        if self._sort is not None:
            rv["sort"] = list(self._sort)
        if self._skip is not None:
            rv["skip"] = self._skip
        if self._limit is not None:
            rv["limit"] = self._limit
        return rv

    def count(self):
        """Counts all matching documents, ignoring skip and limit."""
        return self.collection.count_documents(self._filter)

    def _wrap(self, document):
        if self.document_class is None:
            return document
        return self.document_class(**document)

    def __iter__(self):
        for document in self.collection.find(self._filter, **self.options):
            yield self._wrap(document)

    def first(self):
        """Return the first matching document."""
        return next(iter(self.limit(1)), None)

    def all(self):
        """Loads all matching documents as list."""
        return list(self)

    def paginate(self, page=None, per_page=None, config=None):
        """Returns a :class:`PaginatedCriteria` for one page of this
        query.  Limit and skip are set from `page` and `per_page`.
        """
        page, per_page = normalize_paginate_args(page, per_page, config)
        rv = self._clone(PaginatedCriteria)
        rv._total_entries = None
        rv._config = config
        rv._set_page(page, per_page)
        return rv

    def page(self, page):
        """Shortcut for ``paginate(page=page)``."""
        return self.paginate(page=page)

    def __repr__(self):
        return "<%s %r %r>" % (self.__class__.__name__, self._filter, self.options)


class PaginatedCriteria(PageMixin, Criteria):
    """Criteria limited to one page.  Besides being a query it can be
    handed to the link renderer like a :class:`folio.collection.Collection`.
    """

    def _set_page(self, page, per_page):
        self.current_page = page
        self.per_page = per_page
        self._skip = page.to_offset(per_page)
        self._limit = per_page

    def where(self, *filters, **fields):
        rv = Criteria.where(self, *filters, **fields)
        rv._total_entries = None
        return rv

    def _unpaginated(self):
        rv = self._clone(Criteria)
        for name in ("current_page", "per_page", "_total_entries", "_config"):
            rv.__dict__.pop(name, None)
        return rv

    def skip(self, skip):
        """Changing the skip leaves the page, so this returns a plain
        :class:`Criteria`.
        """
        rv = self._unpaginated()
        rv._skip = skip
        return rv

    def limit(self, limit):
        """Like :meth:`skip` this returns a plain :class:`Criteria`."""
        rv = self._unpaginated()
        rv._limit = limit
        return rv

    def paginate(self, page=None, per_page=None, config=None):
        """Like :meth:`Criteria.paginate` but keeps the page and page size
        set earlier in the chain unless they are given again.
        """
        rv = self._clone()
        if config is not None:
            rv._config = config
        rv._set_page(
            self.current_page if page is None else page_number(page),
            self.per_page if per_page is None else per_page_value(per_page),
        )
        return rv

    @property
    def total_entries(self):
        """The number of matching documents over all pages.  This is
        counted once and remembered.
        """
        if self._total_entries is None:
            logger.debug("counting documents for pagination: %r", self._filter)
            self._total_entries = self.count()
        return self._total_entries

    @property
    def item_type_name(self):
        if self.document_class is not None:
            return self.document_class.__name__
        return None

    def __len__(self):
        return max(0, min(self.per_page, self.total_entries - self.offset))

    def to_collection(self):
        """Loads the documents of the page into a collection."""
        rv = Collection(
            self.current_page,
            self.per_page,
            self.total_entries,
            config=self._config,
            item_type_name=self.item_type_name,
        )
        return rv.replace(self.all())
