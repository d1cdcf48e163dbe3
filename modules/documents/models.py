"""SQLAlchemy models for document management."""

import datetime

from extensions import db
from models import InserterMixin, TimestampMixin


class Document(TimestampMixin, InserterMixin, db.Model):
    """Controlled document; ``file_path`` is a relative upload path or an absolute URL."""

    __tablename__ = "documents"

    document_id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    version = db.Column(db.String(30))
    date = db.Column(db.Date, default=datetime.date.today)
    created_by = db.Column(db.String(150), nullable=False)
    verified_by = db.Column(db.String(150))
    validated_by = db.Column(db.String(150))
    file_name = db.Column(db.String(255), nullable=False)
    file_size = db.Column(db.String(30))
    file_path = db.Column(db.String(500))
    status = db.Column(db.String(30), default="ACTIVE")       # ACTIVE, OBSOLETE, DRAFT, ARCHIVE
    description = db.Column(db.Text)
    category = db.Column(db.String(80))
    entity = db.Column(db.String(80))
    country_code = db.Column(db.String(10))
    project_code = db.Column(db.String(50))
    process_code = db.Column(db.String(50))
    document_type = db.Column(db.String(50))
    document_number = db.Column(db.String(100))

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Document {self.document_number or self.document_id}: {self.title}>"
