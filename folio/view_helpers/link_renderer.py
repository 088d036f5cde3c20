import copy
from collections import namedtuple

from markupsafe import escape
from markupsafe import Markup

from folio.config import DEFAULT_CONFIG
from folio.params import is_simple_param_name
from folio.params import parse_nested_param
from folio.params import stringified_merge
from folio.utils import pluralize
from folio.utils import underscore
from folio.view_helpers.link_renderer_base import LinkRendererBase
from folio.view_helpers.link_renderer_base import Marker


#: Options that control pagination.  Everything else that is passed to the
#: renderer ends up as an HTML attribute on the container.
PAGINATION_OPTION_KEYS = frozenset(DEFAULT_CONFIG["VIEW"])

_not_computed = object()


PaginationItem = namedtuple(
    "PaginationItem", ["kind", "label", "page", "href", "rel", "classes"]
)
PaginationItem.__doc__ = """One entry of a rendered pagination.  `kind` is
one of ``page``, ``current``, ``gap``, ``previous_page`` or ``next_page``.
"""


class LinkRenderer(LinkRendererBase):
    """Builds the HTML for pagination links.  Subclass it and override
    the individual render methods to change the markup.
    """

    _marker_renderers = {
        Marker.GAP: lambda self: self.gap(),
        Marker.PREVIOUS_PAGE: lambda self: self.previous_page(),
        Marker.NEXT_PAGE: lambda self: self.next_page(),
    }

    def __init__(self):
        LinkRendererBase.__init__(self)
        self.context = None
        self._container_attributes = _not_computed
        self._base_url_params = _not_computed

    def prepare(self, collection, options, context):
        """`collection` is a :class:`folio.collection.Collection` or anything
        else satisfying :class:`folio.collection.CollectionLike`, `options`
        are the merged pagination options and `context` is the request
        context used to build URLs.
        """
        LinkRendererBase.prepare(self, collection, options)
        self.context = context
        self._container_attributes = _not_computed
        self._base_url_params = _not_computed

    def to_html(self):
        """Returns the complete pagination markup."""
        separator = self.options.get("separator", " ")
        html = separator.join(str(self.render_item(item)) for item in self.pagination())
        if self.options.get("container"):
            html = self.html_container(html)
        return Markup(html)

    def render_item(self, item):
        if isinstance(item, Marker):
            return self._marker_renderers[item](self)
        return self.page_number(item)

    def items(self):
        """The pagination as a list of :class:`PaginationItem` for output
        formats other than HTML.
        """
        rv = []
        for item in self.pagination():
            if item is Marker.GAP:
                rv.append(PaginationItem("gap", "…", None, None, None, ("gap",)))
            elif isinstance(item, Marker):
                if item is Marker.PREVIOUS_PAGE:
                    page = self.collection.previous_page
                    label = self.options.get("previous_label")
                else:
                    page = self.collection.next_page
                    label = self.options.get("next_label")
                if page:
                    rv.append(
                        PaginationItem(
                            item.value,
                            label,
                            page,
                            self.url(page),
                            self.rel_value(page),
                            (item.value,),
                        )
                    )
                else:
                    rv.append(
                        PaginationItem(
                            item.value, label, None, None, None, (item.value, "disabled")
                        )
                    )
            elif item == self.current_page:
                rv.append(
                    PaginationItem("current", str(item), item, None, None, ("current",))
                )
            else:
                rv.append(
                    PaginationItem(
                        "page", str(item), item, self.url(item), self.rel_value(item), ()
                    )
                )
        return rv

    @property
    def container_attributes(self):
        """The options that are HTML attributes of the container element."""
        if self._container_attributes is _not_computed:
            attributes = dict(
                (key, value)
                for key, value in self.options.items()
                if key not in PAGINATION_OPTION_KEYS or key == "class"
            )
            id_option = self.options.get("id")
            if isinstance(id_option, str):
                attributes["id"] = id_option
            elif id_option is True and self.options.get("container"):
                # pagination of Post items gets the id "posts_pagination"
                type_name = self.collection.item_type_name
                if type_name:
                    attributes["id"] = pluralize(underscore(type_name)) + "_pagination"
            self._container_attributes = attributes
        return self._container_attributes

    def page_number(self, page):
        if page != self.current_page:
            return self.link(page, page, {"rel": self.rel_value(page)})
        return self.tag("em", page, {"class": "current"})

    def gap(self):
        return Markup('<span class="gap">&hellip;</span>')

    def previous_page(self):
        return self.previous_or_next_page(
            self.collection.previous_page,
            self.options.get("previous_label"),
            "previous_page",
        )

    def next_page(self):
        return self.previous_or_next_page(
            self.collection.next_page, self.options.get("next_label"), "next_page"
        )

    def previous_or_next_page(self, page, text, classname):
        if page:
            return self.link(text, page, {"class": classname})
        return self.tag("span", text, {"class": classname + " disabled"})

    def html_container(self, html):
        return self.tag("div", html, self.container_attributes)

    def url(self, page):
        """The URL of `page`, keeping the current GET parameters and the
        ``params`` option.
        """
        if self._base_url_params is _not_computed:
            url_params = self.default_url_params()
            self.merge_optional_params(url_params)
            self._base_url_params = url_params

        url_params = copy.deepcopy(self._base_url_params)
        self.add_current_page_param(url_params, page)
        return self.context.url_for(url_params)

    def default_url_params(self):
        url_params = {"escape": False}
        if self.context.is_get:
            # page links should preserve GET parameters
            stringified_merge(url_params, self.context.params)
        return url_params

    def merge_optional_params(self, url_params):
        params = self.options.get("params")
        if params:
            stringified_merge(url_params, params)

    def add_current_page_param(self, url_params, page):
        param_name = self.options.get("param_name") or "page"
        page = int(page)
        if is_simple_param_name(param_name):
            url_params[param_name] = page
        else:
            stringified_merge(url_params, parse_nested_param(param_name, page))

    def link(self, text, target, attributes=None):
        attributes = dict(attributes or ())
        if isinstance(target, int):
            attributes["rel"] = self.rel_value(target)
            target = self.url(target)
        attributes["href"] = target
        return self.tag("a", text, attributes)

    def tag(self, name, value, attributes=None):
        string_attributes = "".join(
            ' %s="%s"' % (key, escape(str(value)))
            for key, value in (attributes or {}).items()
            if value is not None
        )
        return Markup("<%s%s>%s</%s>" % (name, string_attributes, value, name))

    def rel_value(self, page):
        if page == self.collection.previous_page:
            return "prev start" if page == 1 else "prev"
        if page == self.collection.next_page:
            return "next"
        if page == 1:
            return "start"
        return None
