from folio.collection import Collection
from folio.collection import CollectionLike
from folio.config import Config
from folio.context import StaticRequestContext
from folio.exception import FolioException
from folio.exception import InvalidPage
from folio.page_number import page_number
from folio.page_number import PageNumber
from folio.view_helpers import page_entries_info
from folio.view_helpers import paginate_links
from folio.view_helpers.link_renderer import LinkRenderer


__all__ = [
    "Collection",
    "CollectionLike",
    "Config",
    "FolioException",
    "InvalidPage",
    "LinkRenderer",
    "PageNumber",
    "StaticRequestContext",
    "page_entries_info",
    "page_number",
    "paginate_links",
]
