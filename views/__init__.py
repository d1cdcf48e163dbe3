from .debounce import Debouncer
from .details import DetailsView, Field, FileAction
from .list_view import ListView
from .selection import ResourceSelection
from .server_pagination import FetchError, ServerPagination, extract_rows

__all__ = [
    "Debouncer",
    "DetailsView",
    "FetchError",
    "Field",
    "FileAction",
    "ListView",
    "ResourceSelection",
    "ServerPagination",
    "extract_rows",
]
