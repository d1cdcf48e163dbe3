"""Read-only record view: label/value rows plus attachment handling."""

import re
import threading
from dataclasses import dataclass
from datetime import date, datetime

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}")
_IMAGE_RE = re.compile(r"\.(jpg|jpeg|png|gif|bmp|webp|svg)$")
_PDF_RE = re.compile(r"\.pdf$")

PDF_LOAD_TIMEOUT = 5.0


@dataclass(frozen=True)
class Field:
    key: str
    label: str
    render: object = None  # callable(value) -> str


@dataclass(frozen=True)
class FileAction:
    """What the screen does with an attachment.

    ``kind`` is ``open_tab`` (remote URL), ``inline_image``, ``inline_pdf``
    or ``inline_frame``.
    """

    kind: str
    url: str
    file_name: str = ""


def is_local_file(url) -> bool:
    if not url or not isinstance(url, str):
        return False
    return url.startswith("/") and not url.startswith(("http://", "https://"))


def file_type(url: str) -> str:
    lower = url.lower()
    if _IMAGE_RE.search(lower):
        return "image"
    if _PDF_RE.search(lower):
        return "pdf"
    return "other"


def format_value(value, render=None) -> str:
    if render is not None:
        return str(render(value))
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "Oui" if value else "Non"
    if isinstance(value, (date, datetime)):
        return value.strftime("%d/%m/%Y")
    if isinstance(value, str) and _ISO_DATE_RE.match(value):
        return f"{value[8:10]}/{value[5:7]}/{value[0:4]}"
    return str(value)


class DetailsView:
    def __init__(self, title: str, data: dict, fields, pdf_timeout: float = PDF_LOAD_TIMEOUT):
        self.title = title
        self.data = data
        self.fields = list(fields)
        self.pdf_timeout = pdf_timeout

        self.viewing = None
        self.pdf_error = False
        self._pdf_timer = None

    def rows(self) -> list:
        return [(f.label, format_value(self.data.get(f.key), f.render)) for f in self.fields]

    # ---------- attachments ----------
    def open_file(self, url: str):
        if not url:
            return None
        if not is_local_file(url):
            return FileAction("open_tab", url)

        kind = {"image": "inline_image", "pdf": "inline_pdf"}.get(file_type(url), "inline_frame")
        self.viewing = FileAction(kind, url, url.rsplit("/", 1)[-1])
        self.pdf_error = False
        self._cancel_pdf_timer()
        if kind == "inline_pdf":
            self._pdf_timer = threading.Timer(self.pdf_timeout, self._pdf_timed_out)
            self._pdf_timer.daemon = True
            self._pdf_timer.start()
        return self.viewing

    def _pdf_timed_out(self) -> None:
        self.pdf_error = True

    def _cancel_pdf_timer(self) -> None:
        if self._pdf_timer is not None:
            self._pdf_timer.cancel()
            self._pdf_timer = None

    def mark_pdf_loaded(self) -> None:
        """The embedded PDF reported a load: the fallback prompt is no longer needed."""
        self._cancel_pdf_timer()
        self.pdf_error = False

    def close_file(self) -> None:
        self._cancel_pdf_timer()
        self.viewing = None
        self.pdf_error = False

    def close(self) -> None:
        self.close_file()
