"""Helpers for URL query parameters.

Page links keep the parameters of the current request, so the nested
``list[page]=2&list[sort]=name`` style of query strings has to survive
a round trip through plain dictionaries.
"""
import re


_simple_name_re = re.compile(r"[\w-]+")
_nested_name_re = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)$")
_subkey_re = re.compile(r"\[([^\[\]]*)\]")


def is_simple_param_name(name):
    """True if `name` only contains word characters and hyphens."""
    return _simple_name_re.fullmatch(name) is not None


def split_param_name(name):
    """Splits ``list[page]`` into ``["list", "page"]``.  An empty part
    stands for ``[]`` (append to a list).
    """
    match = _nested_name_re.match(name)
    if match is None:
        return [name]
    head, rest = match.groups()
    return [head] + _subkey_re.findall(rest)


def _assign(target, keys, value):
    key = keys[0]
    if len(keys) == 1:
        if key == "":
            return
        existing = target.get(key)
        if isinstance(existing, list):
            existing.append(value)
        else:
            target[key] = value
        return

    if keys[1] == "" and len(keys) == 2:
        existing = target.get(key)
        if not isinstance(existing, list):
            existing = target[key] = []
        existing.append(value)
        return

    existing = target.get(key)
    if not isinstance(existing, dict):
        existing = target[key] = {}
    _assign(existing, keys[1:], value)


def parse_nested_param(name, value):
    """Parses a single ``name=value`` pair into a (possibly nested) dict.

    >>> parse_nested_param("list[page]", 3)
    {'list': {'page': 3}}
    """
    rv = {}
    _assign(rv, split_param_name(name), value)
    return rv


def decode_bracketed_params(items):
    """Turns flat ``(key, value)`` pairs as they come out of a query string
    into nested dictionaries.
    """
    rv = {}
    for key, value in items:
        _assign(rv, split_param_name(key), value)
    return rv


def encode_nested_params(params, prefix=None):
    """The reverse of :func:`decode_bracketed_params`.  Returns a list of
    ``(key, value)`` pairs.  `None` values are dropped.
    """
    rv = []
    for key, value in params.items():
        key = str(key)
        if prefix is not None:
            key = "%s[%s]" % (prefix, key)
        if isinstance(value, dict):
            rv.extend(encode_nested_params(value, key))
        elif isinstance(value, (list, tuple)):
            rv.extend((key + "[]", item) for item in value if item is not None)
        elif value is not None:
            rv.append((key, value))
    return rv


def stringified_merge(target, other):
    """Merges `other` into `target` in place, converting keys to strings.

    Nested dicts are merged recursively.  Where `target` holds something
    other than a dict the nested value replaces it with a copy.  Scalars
    from `other` always win.
    """
    for key, value in other.items():
        key = str(key)
        if isinstance(value, dict):
            existing = target.get(key)
            if not isinstance(existing, dict):
                existing = target[key] = {}
            stringified_merge(existing, value)
        else:
            target[key] = value
    return target
