from babel.numbers import format_decimal
from markupsafe import Markup

from folio.config import default_config
from folio.utils import pluralize
from folio.utils import underscore
from folio.view_helpers.link_renderer import LinkRenderer
from folio.view_helpers.link_renderer import PaginationItem  # noqa - reexport
from folio.view_helpers.link_renderer_base import LinkRendererBase  # noqa - reexport
from folio.view_helpers.link_renderer_base import Marker  # noqa - reexport


def _normalize_options(options):
    rv = {}
    for key, value in options.items():
        # class_ and id_ for callers that can't pass reserved words
        if key.endswith("_") and key[:-1] in ("class", "id"):
            key = key[:-1]
        rv[key] = value
    return rv


def paginate_links(collection, context=None, renderer=None, config=None, **options):
    """Renders the pagination links for `collection`.  Returns `None` if
    everything fits on one page.

    `context` is the request context used for building URLs.  `renderer`
    may be a :class:`LinkRenderer` subclass or instance and defaults to
    the configured renderer.  All other keyword arguments override the
    configured view options.
    """
    if collection.total_pages <= 1:
        return None

    if config is None:
        config = default_config
    options = dict(config.view_options, **_normalize_options(options))

    if renderer is None:
        renderer = options.get("renderer") or LinkRenderer
    if isinstance(renderer, type):
        renderer = renderer()
    if not isinstance(renderer, LinkRenderer):
        raise TypeError(
            "Renderer must be a LinkRenderer, got %s" % type(renderer).__name__
        )
    if context is None:
        raise RuntimeError("No request context to build pagination links with")

    renderer.prepare(collection, options, context)
    return renderer.to_html()


def page_entries_info(collection, model=None, locale=None):
    """A human readable summary of what is displayed, for instance
    ``Displaying posts 6 - 10 of 23 in total``.
    """
    if model is None:
        type_name = collection.item_type_name
        model = underscore(type_name).replace("_", " ") if type_name else "entry"
    plural = pluralize(model)
    locale = locale or "en_US"

    def num(value):
        return format_decimal(value, locale=locale)

    total = collection.total_entries or 0
    if collection.total_pages < 2:
        if total == 0:
            return Markup("No %s found") % plural
        if total == 1:
            return Markup("Displaying <b>1</b> %s") % model
        return Markup("Displaying <b>all %s</b> %s") % (num(total), plural)

    first = collection.offset + 1
    last = collection.offset + len(collection)
    return Markup(
        "Displaying %s <b>%s&nbsp;-&nbsp;%s</b> of <b>%s</b> in total"
    ) % (plural, num(first), num(last), num(total))
