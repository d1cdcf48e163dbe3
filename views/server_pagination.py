"""Client-side state holder for one paginated list endpoint.

Keeps ``data``, ``pagination``, ``loading``, ``error`` and ``filters`` and
refetches whenever the endpoint, the page, the page size or the filters change.
"""

import logging
import threading

import requests

logger = logging.getLogger(__name__)

# Envelope keys the list endpoints use, in lookup order
KNOWN_DATA_KEYS = (
    "data",
    "equipments",
    "softwares",
    "maintenances",
    "contacts",
    "assignments",
    "contracts",
    "documents",
)


class FetchError(RuntimeError):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


def error_message(response) -> str:
    """The server's ``error`` field when the body carries one, else the status line."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP error! status: {response.status_code}"


def extract_rows(result) -> list:
    """Pick the row list out of a list response, whatever its envelope key."""
    if not isinstance(result, dict):
        return []
    for key in KNOWN_DATA_KEYS:
        if isinstance(result.get(key), list):
            return result[key]
    for key, value in result.items():
        if key != "pagination" and isinstance(value, list):
            return value
    return []


class ServerPagination:
    def __init__(self, endpoint: str, initial_params: dict | None = None, fetch=None,
                 auto_fetch: bool = True, page_size: int = 10, timeout: float = 10.0):
        self.endpoint = endpoint
        self.filters = dict(initial_params or {})
        self.pagination = {"page": 1, "limit": page_size, "total": 0, "totalPages": 0}
        self.data = []
        self.loading = False
        self.error = None
        self.timeout = timeout
        self._fetch = fetch or self._http_get
        self._seq = 0
        self._lock = threading.Lock()
        if auto_fetch:
            self.refetch()

    def _http_get(self, url, params):
        return requests.get(url, params=params, timeout=self.timeout)

    # ---------- request ----------
    def query_params(self) -> dict:
        params = {"page": str(self.pagination["page"]), "limit": str(self.pagination["limit"])}
        for key, value in self.filters.items():
            if value is not None and str(value).strip():
                params[key] = str(value)
        return params

    def refetch(self) -> None:
        with self._lock:
            self._seq += 1
            seq = self._seq
            params = self.query_params()
            self.loading = True
            self.error = None

        try:
            response = self._fetch(self.endpoint, params)
            if not response.ok:
                raise RuntimeError(f"HTTP error! status: {response.status_code}")
            result = response.json()
        except Exception as exc:  # noqa: BLE001  (any failure ends up in .error)
            with self._lock:
                if seq != self._seq:
                    return
                logger.warning("fetch %s failed: %s", self.endpoint, exc)
                self.error = str(exc) or "An error occurred"
                self.data = []
                self.loading = False
            return

        with self._lock:
            # a newer request was issued meanwhile; its response wins
            if seq != self._seq:
                logger.debug("discarding stale response #%s for %s", seq, self.endpoint)
                return
            self.data = extract_rows(result)
            if isinstance(result, dict) and isinstance(result.get("pagination"), dict):
                self.pagination = {**self.pagination, **result["pagination"]}
            self.loading = False

    def fetch_all(self, limit: int = 500) -> list:
        """Every row matching the current filters, page by page; raises :class:`FetchError` on HTTP errors."""
        rows, page = [], 1
        while True:
            params = {**self.query_params(), "page": str(page), "limit": str(limit)}
            response = self._fetch(self.endpoint, params)
            if not response.ok:
                raise FetchError(error_message(response), response.status_code)
            result = response.json()
            rows.extend(extract_rows(result))
            pagination = result.get("pagination") if isinstance(result, dict) else None
            total_pages = (pagination if isinstance(pagination, dict) else {}).get("totalPages", 0)
            if page >= total_pages:
                return rows
            page += 1

    # ---------- state changes ----------
    def set_endpoint(self, endpoint: str) -> None:
        if endpoint != self.endpoint:
            self.endpoint = endpoint
            self.refetch()

    def update_filters(self, new_filters: dict) -> None:
        self.filters = {**self.filters, **new_filters}
        self.pagination = {**self.pagination, "page": 1}
        self.refetch()

    def update_pagination(self, new_pagination: dict) -> None:
        before = (self.pagination["page"], self.pagination["limit"])
        self.pagination = {**self.pagination, **new_pagination}
        if (self.pagination["page"], self.pagination["limit"]) != before:
            self.refetch()

    def go_to_page(self, page: int) -> None:
        if 1 <= page <= self.pagination["totalPages"] and page != self.pagination["page"]:
            self.update_pagination({"page": page})

    def change_page_size(self, limit: int) -> None:
        self.update_pagination({"limit": limit, "page": 1})
