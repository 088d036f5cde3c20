from folio.exception import InvalidPage


class PageNumber(int):
    """A page number.  It is a plain integer for all purposes (it compares
    equal to ints and can be used in arithmetic) but it remembers which
    parameter it came from.
    """

    def __new__(cls, value, name="page"):
        rv = int.__new__(cls, value)
        rv.name = name
        return rv

    def to_offset(self, per_page):
        """The offset of the first item on this page."""
        return (self - 1) * per_page

    def __repr__(self):
        return "PageNumber(%d)" % int(self)


def page_number(value, name="page"):
    """Converts `value` to a :class:`PageNumber`.  Strings are accepted as
    long as they are numeric.  Pages start at 1, offsets at 0.
    """
    if isinstance(value, PageNumber) and value.name == name:
        return value
    try:
        num = int(value)
    except (TypeError, ValueError):
        raise InvalidPage("%r is not a valid %s number" % (value, name))
    if isinstance(value, float) and num != value:
        raise InvalidPage("%r is not a valid %s number" % (value, name))
    if name == "offset":
        if num < 0:
            raise InvalidPage("%s must not be negative, got %d" % (name, num))
    elif num < 1:
        raise InvalidPage("%s must be greater than 0, got %d" % (name, num))
    return PageNumber(num, name)


def per_page_value(value):
    """Converts a page size to an int, rejecting anything below 1."""
    try:
        num = int(value)
    except (TypeError, ValueError):
        raise InvalidPage("%r is not a valid per_page value" % (value,))
    if num <= 0:
        raise InvalidPage("per_page must be greater than 0, got %d" % num)
    return num
