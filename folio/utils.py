import re


_camel_boundary_re = re.compile(r"([A-Z]+)([A-Z][a-z])|([a-z\d])([A-Z])")
_non_word_re = re.compile(r"[^\w]+")

# Irregular plurals that turn up as model names often enough to matter.
_irregular_plurals = {
    "person": "people",
    "child": "children",
    "man": "men",
    "woman": "women",
    "datum": "data",
}


def bool_from_string(val, default=None):
    if val in (True, False, 1, 0):
        return bool(val)
    if isinstance(val, str):
        val = val.lower()
        if val in ("true", "yes", "1"):
            return True
        if val in ("false", "no", "0"):
            return False
    return default


def underscore(name):
    """Converts a class name like ``BlogPost`` (or ``blog.BlogPost``)
    into ``blog_post``.
    """
    name = name.rsplit(".", 1)[-1]

    def _sub(match):
        if match.group(1) is not None:
            return match.group(1) + "_" + match.group(2)
        return match.group(3) + "_" + match.group(4)

    name = _camel_boundary_re.sub(_sub, name)
    return _non_word_re.sub("_", name).strip("_").lower()


def pluralize(word):
    """A small English pluralizer for identifiers."""
    if not word:
        return word
    head, sep, last = word.rpartition("_")
    irregular = _irregular_plurals.get(last)
    if irregular is not None:
        return head + sep + irregular
    if re.search(r"(s|x|z|ch|sh)$", last):
        return word + "es"
    if re.search(r"[^aeiou]y$", last):
        return word[:-1] + "ies"
    return word + "s"

