"""HTTP routes for procurement offers."""

from resources import Resource

from . import bp
from .models import OffreAMI, OffreDAO, OffreDevis

RESOURCES = [
    Resource(
        name="offre-dao",
        model=OffreDAO,
        envelope_key="offreDAO",
        label="DAO",
        search=("daoNumber", "activityCode", "object"),
        filters=("status", "submissionType", "InserterCountry"),
        required=("transmissionDate", "daoNumber", "clientname", "submissionType", "object", "status"),
    ),
    Resource(
        name="offre-ami",
        model=OffreAMI,
        envelope_key="offreAMI",
        label="AMI",
        search=("name", "activityCode", "client", "object"),
        filters=("status", "InserterCountry"),
        required=("depositDate", "name", "client", "submissionDate", "object", "status"),
    ),
    Resource(
        name="offre-devis",
        model=OffreDevis,
        envelope_key="offreDevis",
        label="Devis",
        search=("indexNumber", "description"),
        filters=("status", "InserterCountry"),
        required=("indexNumber", "clientname", "amount", "validityDate", "status"),
    ),
]

for resource in RESOURCES:
    resource.register(bp)
