"""SQLAlchemy models for the equipment domain."""

from extensions import db
from models import InserterMixin, TimestampMixin


class Equipment(TimestampMixin, InserterMixin, db.Model):
    """Owned or rented piece of equipment."""

    __tablename__ = "equipment"

    equipment_id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    category = db.Column(db.String(50), nullable=False)     # TOPOGRAPHIC_MATERIALS, COMPUTER_MATERIALS, OTHERS
    type = db.Column(db.String(80), nullable=False)
    brand = db.Column(db.String(100), nullable=False)
    model = db.Column(db.String(100))
    serial_number = db.Column(db.String(100), nullable=False)
    reference_code = db.Column(db.String(100), nullable=False)
    supplier = db.Column(db.String(150), nullable=False)
    purchase_amount = db.Column(db.Numeric(14, 2, asdecimal=False), nullable=False)
    purchase_date = db.Column(db.Date, nullable=False)
    delivery_date = db.Column(db.Date, nullable=False)
    warranty_expiry = db.Column(db.Date)
    status = db.Column(db.String(50), nullable=False)       # GOOD, BAD, BROKEN, DECOMMISSIONED, LOST
    devise = db.Column(db.String(10), default="XAF", nullable=False)
    location = db.Column(db.String(150), nullable=False)
    ownership = db.Column(db.String(50), nullable=False)
    observations = db.Column(db.Text)
    attachment_file = db.Column(db.String(255))

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Equipment {self.reference_code}: {self.name}>"


class EquipmentMaintenance(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "equipment_maintenances"

    maintenance_id = db.Column(db.Integer, primary_key=True)
    equipment_id = db.Column(db.Integer, db.ForeignKey("equipment.equipment_id"), nullable=False)
    maintenance_date = db.Column(db.Date, nullable=False)
    maintenance_type = db.Column(db.String(50), nullable=False)   # PREVENTIVE, CORRECTIVE, PREDICTIVE
    description = db.Column(db.Text)
    amount = db.Column(db.Numeric(14, 2, asdecimal=False), nullable=False)
    supplier = db.Column(db.String(150), nullable=False)
    technician = db.Column(db.String(150))
    downtime_hours = db.Column(db.Integer)
    next_maintenance_date = db.Column(db.Date)
    devise = db.Column(db.String(10), nullable=False)

    equipment = db.relationship("Equipment")


class EquipmentAssignment(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "equipment_assignments"

    assignment_id = db.Column(db.Integer, primary_key=True)
    equipment_id = db.Column(db.Integer, db.ForeignKey("equipment.equipment_id"), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    assignment_date = db.Column(db.Date, nullable=False)
    return_date = db.Column(db.Date)
    purpose = db.Column(db.String(255))
    notes = db.Column(db.Text)
    status = db.Column(db.String(50), nullable=False)       # ASSIGNED, IN_TRANSIT, RETURNED, CANCELLED
    attachment_file = db.Column(db.String(255))

    equipment = db.relationship("Equipment")
    user = db.relationship("User")
