"""Table state behind every entity list screen.

Server mode wraps a :class:`ServerPagination` and pushes filters to it;
client mode holds the full row list and filters/paginates it in memory.
"""

import math

from exports import render_export
from labels import color, label

from .debounce import Debouncer


class ListView:
    def __init__(self, source=None, rows=None, search_keys=(), page_size=10,
                 on_view=None, on_edit=None, on_delete=None,
                 status_group=None,
                 export_columns=None, export_title="Export", search_wait=0.3):
        if (source is None) == (rows is None):
            raise ValueError("ListView needs either a server source or client rows")
        self.source = source
        self.rows = list(rows or [])
        self.search_keys = tuple(search_keys)
        self.page = 1
        self.page_size = page_size

        self.search = ""
        self.filters = {}
        self.pending_delete = None

        self.on_view = on_view
        self.on_edit = on_edit
        self.on_delete = on_delete
        self.status_group = status_group
        self.export_columns = export_columns
        self.export_title = export_title

        self._push_search = Debouncer(self._send_search, wait=search_wait)

    @property
    def server_mode(self) -> bool:
        return self.source is not None

    # ---------- filters ----------
    def set_search(self, text: str) -> None:
        """Local state changes now; the server sees it after the debounce."""
        self.search = text
        if self.server_mode:
            self._push_search(text)
        else:
            self.page = 1

    def _send_search(self, text: str) -> None:
        self.source.update_filters({"search": text})

    def flush_search(self) -> None:
        """Push a pending search to the server without waiting for the debounce."""
        self._push_search.flush()

    def set_filter(self, key: str, value) -> None:
        self.filters[key] = value
        if self.server_mode:
            self.source.update_filters({key: value})
        else:
            self.page = 1

    def set_rows(self, rows) -> None:
        self.rows = list(rows)

    def _matches(self, row: dict) -> bool:
        term = self.search.strip().lower()
        if term and not any(term in str(row.get(key) or "").lower() for key in self.search_keys):
            return False
        for key, value in self.filters.items():
            if value in (None, "", "all"):
                continue
            if str(row.get(key)) != str(value):
                return False
        return True

    @property
    def filtered_rows(self) -> list:
        if self.server_mode:
            return self.source.data
        return [row for row in self.rows if self._matches(row)]

    # ---------- pagination ----------
    @property
    def pagination(self) -> dict:
        if self.server_mode:
            return self.source.pagination
        total = len(self.filtered_rows)
        return {
            "page": self.page,
            "limit": self.page_size,
            "total": total,
            "totalPages": math.ceil(total / self.page_size),
        }

    @property
    def page_rows(self) -> list:
        if self.server_mode:
            return self.source.data
        start = (self.page - 1) * self.page_size
        return self.filtered_rows[start:start + self.page_size]

    def go_to_page(self, page: int) -> None:
        if self.server_mode:
            self.source.go_to_page(page)
        elif 1 <= page <= self.pagination["totalPages"]:
            self.page = page

    def change_page_size(self, size: int) -> None:
        if self.server_mode:
            self.source.change_page_size(size)
        else:
            self.page_size = max(int(size), 1)
            self.page = 1

    # ---------- row actions ----------
    def view(self, row):
        if self.on_view:
            return self.on_view(row)

    def edit(self, row):
        if self.on_edit:
            return self.on_edit(row)

    def request_delete(self, row) -> None:
        self.pending_delete = row

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def confirm_delete(self):
        """Call ``on_delete`` for the pending row, then reload once it has returned."""
        row, self.pending_delete = self.pending_delete, None
        if row is None:
            return None
        result = self.on_delete(row) if self.on_delete else None
        if self.server_mode:
            self.source.refetch()
        return result

    # ---------- presentation ----------
    def status_label(self, value) -> str:
        return label(self.status_group, value)

    def status_color(self, value) -> str:
        return color(self.status_group, value)

    def export(self, fmt: str):
        """``(content, mimetype, filename)`` holding exactly the rows the filters select."""
        if not self.export_columns:
            raise ValueError("No export columns configured")
        self.flush_search()
        rows = self.source.fetch_all() if self.server_mode else self.filtered_rows
        return render_export(rows, self.export_columns, fmt, self.export_title)
