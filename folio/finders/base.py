from folio.config import default_config
from folio.page_number import page_number
from folio.page_number import per_page_value


def normalize_paginate_args(page=None, per_page=None, config=None):
    """Converts the `page` and `per_page` arguments of the finders.  Both
    may be strings as they usually come straight from the request.
    Missing values default to page 1 and the configured page size.
    """
    if config is None:
        config = default_config
    if page is None:
        page = 1
    if per_page is None:
        per_page = config.per_page
    return page_number(page), per_page_value(per_page)
