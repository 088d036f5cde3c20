from enum import Enum


class Marker(Enum):
    """Non-numeric entries in a pagination sequence."""

    GAP = "gap"
    PREVIOUS_PAGE = "previous_page"
    NEXT_PAGE = "next_page"


class LinkRendererBase:
    """Works out which page numbers to show.  This holds no knowledge
    about HTML and can be reused by renderers for other output formats.
    """

    def __init__(self):
        self.collection = None
        self.options = {}

    def prepare(self, collection, options):
        """Sets up the renderer for `collection` with the (already merged)
        pagination `options`.
        """
        self.collection = collection
        self.options = options
        self._total_pages = None

    def pagination(self):
        """Returns the sequence of items to display: page numbers, gaps
        and the previous and next markers at both ends.
        """
        if self.options.get("page_links", True):
            items = self.windowed_page_numbers()
        else:
            items = []
        items.insert(0, Marker.PREVIOUS_PAGE)
        items.append(Marker.NEXT_PAGE)
        return items

    def windowed_page_numbers(self):
        """Page numbers around the current page plus the first and last
        pages, with gaps where numbers are skipped.
        """
        inner_window = int(self.options.get("inner_window") or 0)
        outer_window = int(self.options.get("outer_window") or 0)
        current_page = self.current_page
        total_pages = self.total_pages

        window_from = current_page - inner_window
        window_to = current_page + inner_window

        # Shift the window back into range if it sticks out on either end.
        if window_to > total_pages:
            window_from -= window_to - total_pages
            window_to = total_pages
        if window_from < 1:
            window_to += 1 - window_from
            window_from = 1
            if window_to > total_pages:
                window_to = total_pages

        middle = list(range(window_from, window_to + 1))

        if outer_window + 3 < window_from:
            left = list(range(1, outer_window + 2))
            left.append(Marker.GAP)
        else:
            left = list(range(1, window_from))

        if total_pages - outer_window - 2 > window_to:
            right = [Marker.GAP]
            right.extend(range(total_pages - outer_window, total_pages + 1))
        else:
            right = list(range(window_to + 1, total_pages + 1))

        return left + middle + right

    @property
    def current_page(self):
        return self.collection.current_page

    @property
    def total_pages(self):
        if self._total_pages is None:
            self._total_pages = self.collection.total_pages
        return self._total_pages
