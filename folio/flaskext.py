"""Flask integration.

    app = Flask(__name__)
    folio = Folio(app)

    @app.route("/posts/")
    def posts():
        pagination = paginate(session, select(Post), page=folio.get_page())
        return render_template("posts.html", posts=pagination)

and in the template ``{{ paginate_links(posts) }}``.
"""
import logging
from urllib.parse import urlencode

from flask import current_app
from flask import request
from flask import url_for

from folio.config import Config
from folio.page_number import page_number
from folio.params import decode_bracketed_params
from folio.params import encode_nested_params
from folio.params import split_param_name
from folio.view_helpers import page_entries_info
from folio.view_helpers import paginate_links


logger = logging.getLogger(__name__)


class FlaskRequestContext:
    """Request context backed by the current Flask request.  Links point
    to the endpoint that is being handled unless `endpoint` is given.
    """

    def __init__(self, endpoint=None, external=False):
        self.endpoint = endpoint
        self.external = external

    @property
    def is_get(self):
        return request.method == "GET"

    @property
    def params(self):
        return decode_bracketed_params(request.args.items(multi=True))

    def url_for(self, params):
        endpoint = self.endpoint or request.endpoint
        if endpoint is None:
            raise RuntimeError("Cannot build pagination links without an endpoint")
        params = dict(params)
        params.pop("escape", None)
        # Only view arguments go through url_for, query parameters could
        # clash with its own arguments (endpoint, _anchor, _external ...).
        view_args = {}
        if endpoint == request.endpoint:
            view_args = dict(request.view_args or {})
        url = url_for(endpoint, _external=self.external, **view_args)
        query = urlencode(encode_nested_params(params))
        if not query:
            return url
        return url + ("&" if "?" in url else "?") + query


def get_config(app=None):
    """Returns the folio config of `app` (or the current app)."""
    if app is None:
        app = current_app
    try:
        return app.extensions["folio"]
    except KeyError:
        raise RuntimeError(
            "Folio is not set up for this application, call Folio.init_app() first"
        )


def _paginate_links(collection, **options):
    return paginate_links(
        collection,
        context=options.pop("context", None) or FlaskRequestContext(),
        config=get_config(),
        **options
    )


class Folio:
    """Flask extension registering the pagination helpers as template
    globals.  Settings are read from the ``FOLIO_*`` config keys.
    """

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        config = Config.from_mapping(app.config)
        app.extensions["folio"] = config
        app.jinja_env.globals.update(
            paginate_links=_paginate_links,
            page_entries_info=page_entries_info,
        )
        logger.debug(
            "folio set up for %s (per_page=%d, param_name=%s)",
            app.name,
            config.per_page,
            config.param_name,
        )

    def get_page(self, default=1):
        """Reads the page number of the current request.  Malformed
        values raise :class:`folio.exception.InvalidPage`.
        """
        keys = split_param_name(get_config().param_name)
        value = decode_bracketed_params(request.args.items(multi=True))
        for key in keys:
            if not isinstance(value, dict) or key not in value:
                return page_number(default)
            value = value[key]
        if value is None or value == "":
            return page_number(default)
        return page_number(value)
