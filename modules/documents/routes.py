"""HTTP routes for document management."""

from resources import Resource

from . import bp
from .models import Document

RESOURCES = [
    Resource(
        name="Document-documents",
        model=Document,
        envelope_key="documents",
        label="Document",
        search=("title", "createdBy", "version", "documentNumber", "description", "fileName"),
        filters=("status", "documentType", "entity", "InserterCountry"),
        required=("title", "createdBy", "fileName"),
    ),
]

for resource in RESOURCES:
    resource.register(bp)
