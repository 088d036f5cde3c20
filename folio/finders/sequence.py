from folio.collection import Collection
from folio.finders.base import normalize_paginate_args


def paginate(seq, page=None, per_page=None, total_entries=None, config=None):
    """Returns the items of `seq` for `page` as a
    :class:`folio.collection.Collection`.  `total_entries` defaults to
    the length of the sequence.
    """
    page, per_page = normalize_paginate_args(page, per_page, config)
    if total_entries is None:
        total_entries = len(seq)

    def fill(pager):
        pager.replace(seq[pager.offset : pager.offset + pager.per_page])

    return Collection.create(page, per_page, total_entries, fill, config=config)
