import logging

from sqlalchemy import func
from sqlalchemy import select

from folio.collection import Collection
from folio.finders.base import normalize_paginate_args


logger = logging.getLogger(__name__)


def count_statement(session, statement):
    """Counts the rows `statement` would return."""
    counter = select(func.count()).select_from(statement.order_by(None).subquery())
    logger.debug("counting rows for pagination: %s", counter)
    return session.scalar(counter)


def _item_type_name(statement):
    descriptions = statement.column_descriptions
    if not descriptions:
        return None
    entity = descriptions[0].get("entity")
    # select(Post.id) still reports Post as entity, but yields plain ids
    if entity is None or descriptions[0].get("expr") is not entity:
        return None
    return entity.__name__


def paginate(
    session,
    statement,
    page=None,
    per_page=None,
    total_entries=None,
    scalars=True,
    config=None,
):
    """Runs a SQLAlchemy `select()` for one page and returns the rows as
    a :class:`folio.collection.Collection`.

    Unless `total_entries` is given, a ``count(*)`` query is issued once
    to find out how many rows there are in total.  With `scalars` set
    (the default) the first column of each row is returned, which is the
    mapped instance for ``select(Model)``.
    """
    page, per_page = normalize_paginate_args(page, per_page, config)

    def fill(pager):
        result = session.execute(statement.limit(pager.per_page).offset(pager.offset))
        pager.replace(result.scalars().all() if scalars else result.all())

    pager = Collection.create(
        page,
        per_page,
        total_entries,
        fill,
        config=config,
        item_type_name=_item_type_name(statement),
    )
    if pager.total_entries is None:
        pager.total_entries = count_statement(session, statement)
    return pager
