"""Shared SQLAlchemy models and column mixins."""

from datetime import datetime, timezone

from extensions import db


def utcnow() -> datetime:
    """Naive UTC timestamp, the form SQLite stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampMixin:
    """``createdAt`` / ``updatedAt`` maintained by the ORM, never by the caller."""

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class InserterMixin:
    """Attribution columns filled in by the calling UI."""

    inserter_identity = db.Column(db.String(150))
    inserter_country = db.Column(db.String(50))


class User(TimestampMixin, InserterMixin, db.Model):
    """Personnel record; parent of absences, contracts, bonuses and assignments."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(150), unique=True, nullable=False)
    employee_number = db.Column(db.String(50))
    phone = db.Column(db.String(50))
    role = db.Column(db.String(50), default="EMPLOYEE")  # ADMIN, ACCOUNTANT, DIRECTOR, ...
    status = db.Column(db.String(50), default="ACTIVE")
    department = db.Column(db.String(100))
    position = db.Column(db.String(100))
    hire_date = db.Column(db.Date)
    country = db.Column(db.String(50))

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<User {self.first_name} {self.last_name}>"


# Parent columns embedded in child rows (``include: { user: { select } }``)
USER_SUMMARY = ("id", "firstName", "lastName", "employeeNumber", "email")
