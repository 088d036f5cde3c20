class FolioException(Exception):
    def __init__(self, message=None):
        Exception.__init__(self, message)
        if isinstance(message, bytes):
            message = message.decode("utf-8", "replace")
        self.message = message

    def to_json(self):
        return {
            "type": self.__class__.__name__,
            "message": self.message,
        }

    def __str__(self):
        return str(self.message)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.message)


class InvalidPage(FolioException, ValueError):
    """Raised when a page number or page size is not acceptable.

    This is a :class:`ValueError` so callers that validate request input
    can treat it like any other bad argument.
    """
