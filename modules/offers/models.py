"""SQLAlchemy models for procurement offers.

DAO (call for tender), AMI (expression of interest) and Devis (quotation)
share one six-state status enum, see ``labels.OFFER_STATUS``.
"""

from extensions import db
from models import InserterMixin, TimestampMixin


class OffreDAO(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "offre_dao"

    dao_id = db.Column(db.Integer, primary_key=True)
    activity_code = db.Column(db.String(50))
    transmission_date = db.Column(db.Date, nullable=False)
    dao_number = db.Column(db.String(100), nullable=False)
    clientname = db.Column(db.String(150), nullable=False)
    contactname = db.Column(db.String(150))
    submission_date = db.Column(db.Date)
    submission_type = db.Column(db.String(30), nullable=False)  # ELECTRONIC, PHYSICAL, EMAIL
    object = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(30), nullable=False)
    attachment = db.Column(db.String(255))
    devise = db.Column(db.String(10), default="XAF")

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<OffreDAO {self.dao_number}>"


class OffreAMI(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "offre_ami"

    ami_id = db.Column(db.Integer, primary_key=True)
    activity_code = db.Column(db.String(50))
    deposit_date = db.Column(db.Date, nullable=False)
    name = db.Column(db.String(150), nullable=False)
    client = db.Column(db.String(150), nullable=False)
    contact = db.Column(db.String(150))
    submission_date = db.Column(db.Date, nullable=False)
    object = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(30), nullable=False)
    comment = db.Column(db.Text)
    soumission_type = db.Column(db.String(30))
    attachment = db.Column(db.String(255))

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<OffreAMI {self.name}>"


class OffreDevis(TimestampMixin, InserterMixin, db.Model):
    __tablename__ = "offre_devis"

    devis_id = db.Column(db.Integer, primary_key=True)
    index_number = db.Column(db.String(100), nullable=False)
    clientname = db.Column(db.String(150), nullable=False)
    amount = db.Column(db.Numeric(14, 2, asdecimal=False), nullable=False)
    validity_date = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(30), nullable=False)
    description = db.Column(db.Text)
    attachment = db.Column(db.String(255))
    devise = db.Column(db.String(10), default="XAF")

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<OffreDevis {self.index_number}>"
