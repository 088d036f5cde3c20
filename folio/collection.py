import math
from typing import Optional
from typing import Protocol
from typing import runtime_checkable

from folio.config import default_config
from folio.page_number import page_number
from folio.page_number import PageNumber
from folio.page_number import per_page_value


@runtime_checkable
class CollectionLike(Protocol):
    """What the link renderer and the view helpers need from a paginated
    collection.  :class:`Collection` implements it, and so do the
    paginated query objects in :mod:`folio.finders`.
    """

    current_page: PageNumber
    per_page: int

    @property
    def total_entries(self) -> Optional[int]:
        ...

    @property
    def total_pages(self) -> int:
        ...

    @property
    def previous_page(self) -> Optional[int]:
        ...

    @property
    def next_page(self) -> Optional[int]:
        ...

    @property
    def item_type_name(self) -> Optional[str]:
        ...

    def __iter__(self):
        ...

    def __len__(self) -> int:
        ...


def total_pages_for(total_entries, per_page):
    """The number of pages needed for `total_entries` items.  Even when
    there are no items there is one (empty) page.
    """
    if not total_entries:
        return 1
    return max(int(math.ceil(total_entries / float(per_page))), 1)


class PageMixin:
    """Page arithmetic shared by everything that knows its current page,
    page size and total number of entries.
    """

    @property
    def total_pages(self):
        """The total number of pages."""
        return total_pages_for(self.total_entries, self.per_page)

    @property
    def offset(self):
        """The offset of the first item on the current page."""
        return self.current_page.to_offset(self.per_page)

    @property
    def previous_page(self):
        """The page number of the previous page or `None`."""
        if self.current_page > 1:
            return self.current_page - 1
        return None

    @property
    def next_page(self):
        """The page number of the following page or `None`."""
        if self.current_page < self.total_pages:
            return self.current_page + 1
        return None

    @property
    def out_of_bounds(self):
        """True if the current page is past the last page."""
        return self.current_page > self.total_pages


class Collection(PageMixin, list):
    """A list holding the items of one page together with the numbers
    needed to render links to the other pages.

    Asking for a page past the last one is fine, the collection is simply
    empty in that case.
    """

    def __init__(
        self,
        page=1,
        per_page=None,
        total_entries=None,
        config=None,
        item_type_name=None,
    ):
        list.__init__(self)
        if config is None:
            config = default_config
        if per_page is None:
            per_page = config.per_page
        self.current_page = page_number(page)
        self.per_page = per_page_value(per_page)
        self.total_entries = None if total_entries is None else int(total_entries)
        self._item_type_name = item_type_name

    @classmethod
    def create(cls, page, per_page, total_entries=None, fill=None, **kwargs):
        """Creates a collection and hands it to `fill` which is expected
        to call :meth:`replace` with the items for the page.
        """
        pager = cls(page, per_page, total_entries, **kwargs)
        if fill is not None:
            fill(pager)
        return pager

    def replace(self, items):
        """Replaces the contents with `items`.  If the total is not known
        yet and the page turns out to be the last one, it is worked out
        from what was received.
        """
        self[:] = items
        if self.total_entries is None:
            if len(self) < self.per_page and (self.current_page == 1 or len(self) > 0):
                self.total_entries = self.offset + len(self)
        return self

    @property
    def item_type_name(self):
        """The class name of the items, used for generated HTML ids."""
        if self._item_type_name is not None:
            return self._item_type_name
        if self:
            return type(self[0]).__name__
        return None

    def __repr__(self):
        return "<%s page=%d/%d per_page=%d %s>" % (
            self.__class__.__name__,
            self.current_page,
            self.total_pages,
            self.per_page,
            list.__repr__(self),
        )
