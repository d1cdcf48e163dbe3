import os
import re
import secrets
import time
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation

from werkzeug.utils import secure_filename

ALLOWED_EXTENSIONS = {
    'png', 'jpg', 'jpeg', 'gif', 'bmp', 'webp', 'svg',
    'pdf', 'doc', 'docx', 'xls', 'xlsx', 'csv', 'txt',
}

# Attribution fields keep the casing the UI has always sent.
WIRE_ALIASES = {
    'inserter_identity': 'Inserteridentity',
    'inserter_country': 'InserterCountry',
}
_ATTR_ALIASES = {wire: attr for attr, wire in WIRE_ALIASES.items()}
_CAMEL_RE = re.compile(r'(?<!^)(?=[A-Z])')


def to_wire(attr: str) -> str:
    """``date_debut`` -> ``dateDebut``."""
    if attr in WIRE_ALIASES:
        return WIRE_ALIASES[attr]
    head, *tail = attr.split('_')
    return head + ''.join(part.title() for part in tail)


def to_attr(wire: str) -> str:
    """``dateDebut`` -> ``date_debut``; dotted paths are converted segment by segment."""
    if '.' in wire:
        return '.'.join(to_attr(part) for part in wire.split('.'))
    if wire in _ATTR_ALIASES:
        return _ATTR_ALIASES[wire]
    return _CAMEL_RE.sub('_', wire).lower()


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_number(value):
    """Finite Decimal from a number or a numeric string (``"63,750"`` is accepted); None when invalid."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        number = Decimal(str(value))
    elif isinstance(value, str) and value.strip():
        try:
            number = Decimal(value.strip().replace(',', '.'))
        except InvalidOperation:
            return None
    else:
        return None
    # NaN / Infinity parse as Decimal but fit no column
    return number if number.is_finite() else None


def parse_datetime(value):
    """Naive UTC datetime from an ISO string or date object; None when unparseable."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_date(value):
    parsed = parse_datetime(value)
    return parsed.date() if parsed is not None else None


def allowed_file(filename):
    """Check if the file has an allowed extension."""
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def unique_upload_name(filename: str) -> str:
    """``<ms timestamp>-<random>-<safe base><ext>``; the base keeps only ``[A-Za-z0-9_]``."""
    base, ext = os.path.splitext(secure_filename(filename) or 'file')
    base = re.sub(r'[^a-zA-Z0-9]', '_', base) or 'file'
    return f"{int(time.time() * 1000)}-{secrets.token_hex(4)}-{base}{ext.lower()}"


def handle_file_upload(file, upload_folder):
    """Save uploaded file under a unique name and return that name, or None."""
    if file and file.filename and allowed_file(file.filename):
        os.makedirs(upload_folder, exist_ok=True)
        filename = unique_upload_name(file.filename)
        file.save(os.path.join(upload_folder, filename))
        return filename
    return None
