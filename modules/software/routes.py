"""HTTP routes for the software asset domain."""

from models import USER_SUMMARY
from resources import Resource

from . import bp
from .models import (
    Software,
    SoftwareAssignment,
    SoftwareContact,
    SoftwareContract,
    SoftwareMaintenance,
)

SOFTWARE_SUMMARY = ("softwareId", "name", "vendor", "version")

RESOURCES = [
    Resource(
        name="Software-software",
        model=Software,
        envelope_key="softwares",
        label="Software",
        search=("name", "vendor", "version", "description"),
        filters=("type", "InserterCountry"),
        required=("name", "vendor", "version", "type", "purchaseDate", "amount", "licenseCount"),
    ),
    Resource(
        name="Software-maintenance",
        model=SoftwareMaintenance,
        envelope_key="maintenances",
        label="Maintenance",
        search=("provider", "observations", "software.name", "software.vendor"),
        filters=("maintenanceType", "periodicity", "softwareId", "InserterCountry"),
        required=("softwareId", "provider", "startDate", "endDate", "price", "periodicity", "maintenanceType"),
        includes={"software": SOFTWARE_SUMMARY},
    ),
    Resource(
        name="Software-contracts",
        model=SoftwareContract,
        envelope_key="contracts",
        label="Contract",
        search=("contractNumber", "provider", "description", "software.name"),
        filters=("status", "contractType", "softwareId", "InserterCountry"),
        required=("softwareId", "provider", "contractType"),
        defaults={"status": "ACTIVE"},
        includes={"software": SOFTWARE_SUMMARY},
    ),
    Resource(
        name="Software-contacts",
        model=SoftwareContact,
        envelope_key="contacts",
        label="Contact",
        search=("name", "role", "phone", "email", "notes", "software.name"),
        filters=("role", "softwareId", "InserterCountry"),
        required=("softwareId", "role"),
        includes={"software": SOFTWARE_SUMMARY},
    ),
    Resource(
        name="Software-assignments",
        model=SoftwareAssignment,
        envelope_key="assignments",
        label="Assignment",
        search=("department", "purpose", "notes", "software.name", "user.lastName"),
        filters=("status", "softwareId", "userId", "InserterCountry"),
        required=("softwareId", "assignmentDate", "status"),
        includes={"software": SOFTWARE_SUMMARY, "user": USER_SUMMARY},
    ),
]

for resource in RESOURCES:
    resource.register(bp)
