"""SQLAlchemy models for the vehicle fleet domain."""

from extensions import db
from models import InserterMixin, TimestampMixin


class Vehicle(TimestampMixin, InserterMixin, db.Model):
    """A fleet vehicle."""

    __tablename__ = "vehicles"

    vehicle_id = db.Column(db.Integer, primary_key=True)
    license_plate = db.Column(db.String(50), unique=True, nullable=False)
    brand = db.Column(db.String(100), nullable=False)
    model = db.Column(db.String(100), nullable=False)
    type = db.Column(db.String(50), nullable=False)         # CAR, TRUCK, VAN, MOTORCYCLE
    year = db.Column(db.Integer, nullable=False)
    vehiclecountry = db.Column(db.String(50), default="IVORY_COAST")
    chassis_number = db.Column(db.String(100), nullable=False)
    fuel_type = db.Column(db.String(50), nullable=False)    # GASOLINE, DIESEL, ELECTRIC, HYBRID
    status = db.Column(db.String(50), default="AVAILABLE")
    civil_registration = db.Column(db.String(100))
    administrative_registration = db.Column(db.String(100))
    using_entity = db.Column(db.String(150))
    holder = db.Column(db.String(150))
    assigned_to = db.Column(db.String(150))
    acquisition_date = db.Column(db.Date)

    pieces = db.relationship("VehiclePiece", back_populates="vehicle", cascade="all, delete-orphan")

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Vehicle {self.license_plate}>"


class VehiclePiece(TimestampMixin, InserterMixin, db.Model):
    """Administrative paper of a vehicle (insurance, technical visit, registration)."""

    __tablename__ = "vehicle_pieces"

    piece_id = db.Column(db.Integer, primary_key=True)
    vehicle_id = db.Column(db.Integer, db.ForeignKey("vehicles.vehicle_id"), nullable=False)
    type = db.Column(db.String(50), nullable=False)         # INSURANCE, TECHNICAL_VISIT, REGISTRATION
    type_libre = db.Column(db.String(150))
    description = db.Column(db.Text)
    montant = db.Column(db.Numeric(14, 2, asdecimal=False), nullable=False)
    date_debut = db.Column(db.Date, nullable=False)
    date_fin = db.Column(db.Date, nullable=False)
    date_prochaine = db.Column(db.Date)
    fichier_joint = db.Column(db.String(255))

    vehicle = db.relationship("Vehicle", back_populates="pieces")

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<VehiclePiece {self.piece_id} {self.type}>"
