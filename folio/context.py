from typing import Any
from typing import Dict
from typing import Optional
from typing import Protocol
from urllib.parse import urlencode

from folio.params import decode_bracketed_params
from folio.params import encode_nested_params


class RequestContext(Protocol):
    """What the link renderer needs to know about the current request."""

    @property
    def is_get(self) -> bool:
        ...

    @property
    def params(self) -> Dict[str, Any]:
        ...

    def url_for(self, params: Dict[str, Any]) -> str:
        ...


class StaticRequestContext:
    """A request context that is not bound to a web framework.  Links are
    built by appending the parameters as query string to `base_url`.
    `params` may be nested dicts or flat ``list[page]`` style pairs.
    """

    def __init__(
        self, base_url: str, params: Optional[Any] = None, method: str = "GET"
    ) -> None:
        self.base_url = base_url
        self.method = method.upper()
        if params is None:
            params = {}
        if not isinstance(params, dict):
            params = decode_bracketed_params(params)
        elif any("[" in str(key) for key in params):
            params = decode_bracketed_params(params.items())
        self._params = params

    @property
    def is_get(self) -> bool:
        return self.method == "GET"

    @property
    def params(self) -> Dict[str, Any]:
        return self._params

    def url_for(self, params: Dict[str, Any]) -> str:
        params = dict(params)
        params.pop("escape", None)
        query = urlencode(encode_nested_params(params))
        if not query:
            return self.base_url
        joiner = "&" if "?" in self.base_url else "?"
        return self.base_url + joiner + query
