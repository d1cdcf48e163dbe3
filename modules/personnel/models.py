"""SQLAlchemy models for the personnel domain.

The employee itself is :class:`models.User`; every table here hangs off it
through ``user_id``.
"""

from extensions import db
from models import InserterMixin, TimestampMixin


class Absence(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "absences"

    absence_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    absence_type = db.Column(db.String(50), nullable=False)  # SICK_LEAVE, ANNUAL_LEAVE, ...
    description = db.Column(db.Text)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    days_count = db.Column(db.Integer, nullable=False)
    return_date = db.Column(db.Date)
    status = db.Column(db.String(30), default="PENDING")     # PENDING, APPROVED, REJECTED
    supporting_document = db.Column(db.String(255))

    user = db.relationship("User")


class Contract(TimestampMixin, InserterMixin, db.Model):
    """Employment contract (not to be confused with software contracts)."""

    __tablename__ = "contracts"

    contract_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    contract_type = db.Column(db.String(50), nullable=False)  # PERMANENT_CONTRACT_CDI, FIXED_TERM_CONTRACT_CDD, ...
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date)
    post = db.Column(db.String(150), nullable=False)
    department = db.Column(db.String(150), nullable=False)
    unit = db.Column(db.String(150))
    gross_salary = db.Column(db.Numeric(14, 2, asdecimal=False), nullable=False)
    net_salary = db.Column(db.Numeric(14, 2, asdecimal=False), nullable=False)
    currency = db.Column(db.String(10), default="XAF")
    contract_file = db.Column(db.String(255))

    user = db.relationship("User")


class Bonus(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "bonuses"

    bonus_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    bonus_type = db.Column(db.String(50), nullable=False)
    amount = db.Column(db.Numeric(14, 2, asdecimal=False), nullable=False)
    currency = db.Column(db.String(10), nullable=False)
    award_date = db.Column(db.Date, nullable=False)
    reason = db.Column(db.Text)
    payment_method = db.Column(db.String(50), nullable=False)
    status = db.Column(db.String(30), default="PENDING")

    user = db.relationship("User")


class Sanction(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "sanctions"

    sanction_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    sanction_type = db.Column(db.String(50), nullable=False)  # VERBAL_WARNING, WRITTEN_WARNING, ...
    reason = db.Column(db.Text, nullable=False)
    sanction_date = db.Column(db.Date, nullable=False)
    duration_days = db.Column(db.Integer)
    decision = db.Column(db.Text)
    supporting_document = db.Column(db.String(255))

    user = db.relationship("User")


class MedicalRecord(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "medical_records"

    medical_record_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    visit_date = db.Column(db.Date, nullable=False)
    description = db.Column(db.Text)
    diagnosis = db.Column(db.Text)
    tests_performed = db.Column(db.Text)
    test_results = db.Column(db.Text)
    prescribed_action = db.Column(db.Text)
    notes = db.Column(db.Text)
    next_visit_date = db.Column(db.Date)

    user = db.relationship("User")


class Affectation(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "affectations"

    affectation_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    affectation_type = db.Column(db.String(50), nullable=False)  # PERMANENT, TEMPORARY, TRANSFER, ...
    site = db.Column(db.String(150), nullable=False)
    position = db.Column(db.String(150))
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date)
    description = db.Column(db.Text)

    user = db.relationship("User")
