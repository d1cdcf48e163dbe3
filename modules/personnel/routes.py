"""HTTP routes for the personnel domain."""

from models import USER_SUMMARY, User
from resources import Resource

from . import bp
from .models import Absence, Affectation, Bonus, Contract, MedicalRecord, Sanction

_BY_USER = ("userId", "InserterCountry")
_USER_SEARCH = ("user.firstName", "user.lastName")

RESOURCES = [
    Resource(
        name="personnel-users",
        model=User,
        envelope_key="users",
        label="User",
        search=("firstName", "lastName", "email", "employeeNumber"),
        filters=("role", "status", "department", "InserterCountry"),
        required=("firstName", "lastName", "email"),
    ),
    Resource(
        name="personnel-absences",
        model=Absence,
        envelope_key="absences",
        label="Absence",
        search=("description",) + _USER_SEARCH,
        filters=("absenceType", "status") + _BY_USER,
        required=("userId", "absenceType", "startDate", "endDate", "daysCount"),
        defaults={"status": "PENDING"},
        includes={"user": USER_SUMMARY},
    ),
    Resource(
        name="personnel-contracts",
        model=Contract,
        envelope_key="contracts",
        label="Contract",
        search=("post", "department") + _USER_SEARCH,
        filters=("contractType",) + _BY_USER,
        required=("userId", "contractType", "startDate", "post", "department", "grossSalary", "netSalary"),
        includes={"user": USER_SUMMARY},
    ),
    Resource(
        name="personnel-bonuses",
        model=Bonus,
        envelope_key="bonuses",
        label="Bonus",
        search=("reason",) + _USER_SEARCH,
        filters=("bonusType", "status") + _BY_USER,
        required=("userId", "bonusType", "amount", "currency", "awardDate", "paymentMethod"),
        includes={"user": USER_SUMMARY},
    ),
    Resource(
        name="personnel-sanctions",
        model=Sanction,
        envelope_key="sanctions",
        label="Sanction",
        search=("reason", "decision") + _USER_SEARCH,
        filters=("sanctionType",) + _BY_USER,
        required=("userId", "sanctionType", "reason", "sanctionDate"),
        includes={"user": USER_SUMMARY},
    ),
    Resource(
        name="personnel-medical-records",
        model=MedicalRecord,
        envelope_key="medicalRecords",
        label="Medical record",
        search=("description", "diagnosis") + _USER_SEARCH,
        filters=_BY_USER,
        required=("userId", "visitDate"),
        includes={"user": USER_SUMMARY},
    ),
    Resource(
        name="personnel-affectations",
        model=Affectation,
        envelope_key="affectations",
        label="Affectation",
        search=("site", "position") + _USER_SEARCH,
        filters=("affectationType",) + _BY_USER,
        required=("userId", "affectationType", "site", "startDate"),
        includes={"user": USER_SUMMARY},
    ),
]

for resource in RESOURCES:
    resource.register(bp)
