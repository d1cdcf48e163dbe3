"""Generic CRUD request handler shared by every entity endpoint.

One :class:`Resource` describes one table: which query parameters filter it,
which columns ``search`` looks into, which fields a create must carry and
which parent rows are embedded in the JSON. :meth:`Resource.register` mounts
``/<name>`` (GET/POST/PUT/DELETE/OPTIONS) and ``/<name>/export`` on a blueprint.

Wire keys are camelCase (``dateDebut``), model attributes snake_case
(``date_debut``); see :func:`utils.to_wire`.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

import sqlalchemy as sa
from flask import current_app, jsonify, make_response, request
from sqlalchemy import or_

from errors import NotFoundError, ValidationError
from extensions import db
from utils import is_blank, parse_date, parse_datetime, parse_number, to_attr, to_wire

READ_ONLY = {"created_at", "updated_at"}
TRUE_VALUES = {"true", "1", "yes", "oui", "on"}
FALSE_VALUES = {"false", "0", "no", "non", "off"}
METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"]


def json_value(value):
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    return value


@dataclass
class Resource:
    name: str
    model: type
    envelope_key: str
    label: str
    search: tuple = ()
    filters: tuple = ()
    required: tuple = ()
    includes: dict = field(default_factory=dict)
    defaults: dict = field(default_factory=dict)
    default_limit: int | None = None

    def __post_init__(self) -> None:
        mapper = sa.inspect(self.model)
        self.columns = {prop.key: prop.columns[0] for prop in mapper.column_attrs}
        self.pk = mapper.primary_key[0].key
        self.writable = [key for key in self.columns if key != self.pk and key not in READ_ONLY]

    # ---------- serialisation ----------
    def serialize(self, obj) -> dict:
        out = {to_wire(key): json_value(getattr(obj, key)) for key in self.columns}
        for rel_wire, fields in self.includes.items():
            parent = getattr(obj, to_attr(rel_wire))
            out[rel_wire] = None if parent is None else {
                wire: json_value(getattr(parent, to_attr(wire))) for wire in fields
            }
        return out

    # ---------- coercion ----------
    def coerce(self, attr: str, value):
        """Convert a non-blank wire value to the Python type of the column."""
        wire = to_wire(attr)
        column_type = self.columns[attr].type
        if isinstance(column_type, sa.DateTime):
            parsed = parse_datetime(value)
            if parsed is None:
                raise ValidationError(f"Invalid {wire} format")
            return parsed
        if isinstance(column_type, sa.Date):
            parsed = parse_date(value)
            if parsed is None:
                raise ValidationError(f"Invalid {wire} format")
            return parsed
        if isinstance(column_type, sa.Boolean):
            if isinstance(value, bool):
                return value
            text = str(value).strip().lower()
            if text in TRUE_VALUES:
                return True
            if text in FALSE_VALUES:
                return False
            raise ValidationError(f"Invalid {wire} value")
        if isinstance(column_type, sa.Integer):
            number = parse_number(value)
            if number is None or number != number.to_integral_value():
                raise ValidationError(f"Invalid {wire} value")
            return int(number)
        if isinstance(column_type, sa.Numeric):
            number = parse_number(value)
            if number is None:
                raise ValidationError(f"Invalid {wire} value")
            return float(number)
        if isinstance(value, (dict, list)):
            raise ValidationError(f"Invalid {wire} value")
        return str(value).strip() if isinstance(value, str) else str(value)

    # ---------- queries ----------
    def _search_clause(self, term: str):
        like = f"%{term}%"
        clauses = []
        for path in self.search:
            attr = to_attr(path)
            if "." in attr:
                rel_name, col_name = attr.split(".", 1)
                rel = getattr(self.model, rel_name)
                target = rel.property.mapper.class_
                clauses.append(rel.has(getattr(target, col_name).ilike(like)))
            else:
                clauses.append(getattr(self.model, attr).ilike(like))
        return or_(*clauses)

    def filtered_query(self, args):
        query = self.model.query
        term = (args.get("search") or "").strip()
        if term and self.search:
            query = query.filter(self._search_clause(term))
        for wire in self.filters:
            value = args.get(wire)
            if is_blank(value) or value == "all":
                continue
            attr = to_attr(wire)
            query = query.filter(getattr(self.model, attr) == self.coerce(attr, value))
        return query.order_by(
            getattr(self.model, "created_at").desc(),
            getattr(self.model, self.pk).desc(),
        )

    def get_or_404(self, raw_id):
        pk_value = self._parse_id(raw_id)
        obj = db.session.get(self.model, pk_value)
        if obj is None:
            raise NotFoundError(f"{self.label} not found")
        return obj

    def _parse_id(self, raw_id):
        if is_blank(raw_id):
            raise ValidationError(f"{self.label} ID is required")
        try:
            return int(raw_id)
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid {self.label} ID") from None

    @staticmethod
    def _int_param(args, name: str, default: int) -> int:
        raw = args.get(name)
        if is_blank(raw):
            return default
        try:
            return int(raw)
        except ValueError:
            raise ValidationError(f"Invalid {name} parameter") from None

    # ---------- operations ----------
    def list(self, args) -> dict:
        config = current_app.config
        default_limit = self.default_limit or config.get("DEFAULT_PAGE_SIZE", 10)
        page = max(self._int_param(args, "page", 1), 1)
        limit = min(max(self._int_param(args, "limit", default_limit), 1), config.get("MAX_PAGE_SIZE", 500))

        query = self.filtered_query(args)
        total = query.order_by(None).count()
        rows = query.offset((page - 1) * limit).limit(limit).all()
        return {
            self.envelope_key: [self.serialize(row) for row in rows],
            "pagination": {
                "page": page,
                "limit": limit,
                "total": total,
                "totalPages": math.ceil(total / limit),
            },
        }

    def create(self, payload: dict):
        for wire in self.required:
            if is_blank(payload.get(wire)):
                raise ValidationError(f"Field {wire} is required")

        values = {}
        for attr in self.writable:
            value = payload.get(to_wire(attr))
            if is_blank(value):
                value = self.defaults.get(to_wire(attr))
            if is_blank(value):
                continue
            values[attr] = self.coerce(attr, value)

        obj = self.model(**values)
        db.session.add(obj)
        db.session.commit()
        return obj

    def update(self, raw_id, payload: dict):
        obj = self.get_or_404(raw_id)

        changes = {}
        for wire, value in payload.items():
            attr = to_attr(wire)
            # snake_case spellings (``date_debut``) are unknown keys, as on POST
            if attr not in self.writable or to_wire(attr) != wire:
                continue
            if is_blank(value):
                if wire in self.required:
                    raise ValidationError(f"{wire} is required")
                changes[attr] = None
            else:
                changes[attr] = self.coerce(attr, value)

        for attr, value in changes.items():
            setattr(obj, attr, value)
        db.session.commit()
        return obj

    def delete(self, raw_id) -> None:
        obj = self.get_or_404(raw_id)
        db.session.delete(obj)
        db.session.commit()

    # ---------- HTTP ----------
    def dispatch(self):
        method = request.method
        args = request.args

        if method == "OPTIONS":
            return jsonify(ok=True)

        if method == "GET":
            if not is_blank(args.get("id")):
                return jsonify(self.serialize(self.get_or_404(args.get("id"))))
            return jsonify(self.list(args))

        if method == "POST":
            obj = self.create(self._payload())
            current_app.logger.info("%s: created %s=%s", self.name, self.pk, getattr(obj, self.pk))
            return jsonify(self.serialize(obj)), 201

        if method == "PUT":
            raw_id = args.get("id")
            if is_blank(raw_id):
                raise ValidationError(f"{self.label} ID is required")
            obj = self.update(raw_id, self._payload())
            return jsonify(self.serialize(obj))

        if method == "DELETE":
            self.delete(args.get("id"))
            current_app.logger.info("%s: deleted %s=%s", self.name, self.pk, args.get("id"))
            return jsonify(message=f"{self.label} deleted successfully")

        return jsonify(error="Method not allowed"), 405

    @staticmethod
    def _payload() -> dict:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise ValidationError("Missing request body")
        return payload

    def export(self):
        # imported here: exports pulls in openpyxl/reportlab, only needed on this route
        from exports import EXPORT_COLUMNS, EXPORT_TITLES, render_export

        if request.method == "OPTIONS":
            return jsonify(ok=True)
        if request.method not in ("GET", "HEAD"):
            return jsonify(error="Method not allowed"), 405
        if self.name not in EXPORT_COLUMNS:
            raise NotFoundError(f"No export defined for {self.name}")
        fmt = (request.args.get("format") or "csv").lower()
        rows = [self.serialize(row) for row in self.filtered_query(request.args).all()]
        content, mimetype, filename = render_export(
            rows, EXPORT_COLUMNS[self.name], fmt, EXPORT_TITLES.get(self.name, self.label)
        )
        resp = make_response(content)
        resp.headers["Content-Type"] = mimetype
        resp.headers.set("Content-Disposition", "attachment", filename=filename)
        return resp

    def register(self, bp) -> None:
        endpoint = self.name.replace("-", "_").lower()
        bp.add_url_rule(f"/{self.name}", endpoint=endpoint, view_func=self.dispatch, methods=METHODS)
        bp.add_url_rule(f"/{self.name}/export", endpoint=f"{endpoint}_export", view_func=self.export, methods=METHODS)
