"""SQLAlchemy models for the software asset domain.

A :class:`Software` row owns four kinds of child rows: maintenance periods,
contracts, support contacts and assignments to users or departments.
"""

from extensions import db
from models import InserterMixin, TimestampMixin


class Software(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "softwares"

    software_id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    vendor = db.Column(db.String(150), nullable=False)
    version = db.Column(db.String(50), nullable=False)
    type = db.Column(db.String(50), nullable=False)         # LICENSE, SUBSCRIPTION, OPEN_SOURCE, ...
    purchase_date = db.Column(db.Date, nullable=False)
    amount = db.Column(db.Numeric(14, 2, asdecimal=False), nullable=False)
    currency = db.Column(db.String(10), default="XAF")
    license_count = db.Column(db.Integer, nullable=False)
    description = db.Column(db.Text)

    maintenances = db.relationship("SoftwareMaintenance", back_populates="software", cascade="all, delete-orphan")
    contracts = db.relationship("SoftwareContract", back_populates="software", cascade="all, delete-orphan")
    contacts = db.relationship("SoftwareContact", back_populates="software", cascade="all, delete-orphan")
    assignments = db.relationship("SoftwareAssignment", back_populates="software", cascade="all, delete-orphan")

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Software {self.name} {self.version}>"


class SoftwareMaintenance(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "software_maintenances"

    maintenance_id = db.Column(db.Integer, primary_key=True)
    software_id = db.Column(db.Integer, db.ForeignKey("softwares.software_id"), nullable=False)
    provider = db.Column(db.String(150), nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    price = db.Column(db.Numeric(14, 2, asdecimal=False), nullable=False)
    currency = db.Column(db.String(10), default="XAF")
    periodicity = db.Column(db.String(30), nullable=False)  # MONTHLY, QUARTERLY, ANNUAL, ...
    maintenance_type = db.Column(db.String(50), nullable=False)
    observations = db.Column(db.Text)

    software = db.relationship("Software", back_populates="maintenances")


class SoftwareContract(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "software_contracts"

    contract_id = db.Column(db.Integer, primary_key=True)
    software_id = db.Column(db.Integer, db.ForeignKey("softwares.software_id"), nullable=False)
    contract_number = db.Column(db.String(100))
    provider = db.Column(db.String(150), nullable=False)
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    renewal_date = db.Column(db.Date)
    amount = db.Column(db.Numeric(14, 2, asdecimal=False))
    currency = db.Column(db.String(10), default="XAF")
    contract_type = db.Column(db.String(50), nullable=False)
    status = db.Column(db.String(50), default="ACTIVE")
    description = db.Column(db.Text)

    software = db.relationship("Software", back_populates="contracts")


class SoftwareContact(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "software_contacts"

    contact_id = db.Column(db.Integer, primary_key=True)
    software_id = db.Column(db.Integer, db.ForeignKey("softwares.software_id"), nullable=False)
    role = db.Column(db.String(80), nullable=False)
    name = db.Column(db.String(150))
    phone = db.Column(db.String(50))
    email = db.Column(db.String(150))
    notes = db.Column(db.Text)
    online_assistant = db.Column(db.String(255))

    software = db.relationship("Software", back_populates="contacts")


class SoftwareAssignment(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "software_assignments"

    assignment_id = db.Column(db.Integer, primary_key=True)
    software_id = db.Column(db.Integer, db.ForeignKey("softwares.software_id"), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"))
    department = db.Column(db.String(150))
    assignment_date = db.Column(db.Date, nullable=False)
    return_date = db.Column(db.Date)
    purpose = db.Column(db.String(255))
    notes = db.Column(db.Text)
    status = db.Column(db.String(50), nullable=False)

    software = db.relationship("Software", back_populates="assignments")
    user = db.relationship("User")
