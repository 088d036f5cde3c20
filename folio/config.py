import copy
import os

from inifile import IniFile

from folio.page_number import per_page_value
from folio.utils import bool_from_string


DEFAULT_CONFIG = {
    "PAGINATION": {
        "per_page": 30,
        "param_name": "page",
    },
    # Default options for the link renderer.  Everything in here can be
    # overridden per call of `paginate_links`.
    "VIEW": {
        "class": "pagination",
        "previous_label": "&#8592; Previous",
        "next_label": "Next &#8594;",
        "inner_window": 4,
        "outer_window": 1,
        "separator": " ",
        "param_name": None,
        "params": None,
        "renderer": None,
        "page_links": True,
        "container": True,
        "id": None,
    },
}

_int_options = ("inner_window", "outer_window")
_bool_options = ("page_links", "container")


def _coerce_view_option(key, value):
    if key in _int_options:
        return int(value)
    if key in _bool_options:
        return bool_from_string(value, True)
    if key == "id" and isinstance(value, str):
        flag = bool_from_string(value)
        if flag is not None:
            return flag
    return value


def update_config_from_ini(config, inifile):
    pagination = inifile.section_as_dict("pagination")
    if "per_page" in pagination:
        config["PAGINATION"]["per_page"] = per_page_value(pagination["per_page"])
    if pagination.get("param_name"):
        config["PAGINATION"]["param_name"] = pagination["param_name"]

    for key, value in inifile.section_as_dict("view").items():
        config["VIEW"][key] = _coerce_view_option(key, value)


class Config:
    """Application level pagination settings.  A config is created once
    at startup and handed to collections, finders and view helpers.  It
    is not supposed to be modified once requests are being served.
    """

    def __init__(self, filename=None, per_page=None, param_name=None, **view_options):
        self.filename = filename
        self.values = copy.deepcopy(DEFAULT_CONFIG)

        if filename is not None and os.path.isfile(filename):
            inifile = IniFile(filename)
            update_config_from_ini(self.values, inifile)

        if per_page is not None:
            self.values["PAGINATION"]["per_page"] = per_page_value(per_page)
        if param_name is not None:
            self.values["PAGINATION"]["param_name"] = param_name
        for key, value in view_options.items():
            self.values["VIEW"][key] = _coerce_view_option(key, value)

    @classmethod
    def from_mapping(cls, mapping, prefix="FOLIO_"):
        """Creates a config from a flat mapping such as a Flask config.
        Recognized keys are ``<prefix>CONFIG_FILE``, ``<prefix>PER_PAGE``,
        ``<prefix>PARAM_NAME`` and ``<prefix>VIEW_OPTIONS`` (a dict).
        """
        return cls(
            filename=mapping.get(prefix + "CONFIG_FILE"),
            per_page=mapping.get(prefix + "PER_PAGE"),
            param_name=mapping.get(prefix + "PARAM_NAME"),
            **(mapping.get(prefix + "VIEW_OPTIONS") or {})
        )

    def __getitem__(self, name):
        return self.values[name]

    @property
    def per_page(self):
        """The page size used when none is given explicitly."""
        return self.values["PAGINATION"]["per_page"]

    @property
    def param_name(self):
        """The name of the query parameter holding the page number."""
        return self.values["PAGINATION"]["param_name"]

    @property
    def view_options(self):
        """A fresh copy of the default link renderer options."""
        rv = dict(self.values["VIEW"])
        if rv["param_name"] is None:
            rv["param_name"] = self.param_name
        return rv


default_config = Config()
