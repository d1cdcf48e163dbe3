"""Enum -> French display label lookups shared by list views and exports.

One table per enum group; unknown values are displayed as-is.
"""

OFFER_STATUS = {
    "APPLICATION": "Candidature",
    "UNDER_REVIEW": "En Étude",
    "PENDING": "En Attente",
    "SHORTLISTED": "Retenu",
    "BID_SUBMITTED": "Soumission",
    "NOT_PURSUED": "Pas de suite",
}

SUBMISSION_TYPE = {
    "ELECTRONIC": "Électronique",
    "PHYSICAL": "Physique",
    "EMAIL": "Email",
}

VEHICLE_STATUS = {
    "AVAILABLE": "Disponible",
    "IN_USE": "En service",
    "UNDER_MAINTENANCE": "Maintenance",
    "OUT_OF_SERVICE": "Hors service",
}

VEHICLE_TYPE = {
    "CAR": "Voiture",
    "TRUCK": "Camion",
    "VAN": "Fourgon",
    "MOTORCYCLE": "Moto",
}

FUEL_TYPE = {
    "GASOLINE": "Essence",
    "DIESEL": "Diesel",
    "ELECTRIC": "Électrique",
    "HYBRID": "Hybride",
}

PIECE_TYPE = {
    "INSURANCE": "Assurance",
    "TECHNICAL_VISIT": "Visite technique",
    "REGISTRATION": "Enregistrement",
}

COUNTRY = {
    "IVORY_COAST": "Côte d'Ivoire",
    "GHANA": "Ghana",
    "BENIN": "Bénin",
    "CAMEROON": "Cameroun",
    "TOGO": "Togo",
    "ROMANIE": "Romanie",
    "ITALIE": "Italie",
}

PAYMENT_METHOD = {
    "ESPÈCES": "Espèces",
    "CASH": "Espèces",
    "CARTE_BANCAIRE": "Carte bancaire",
    "VIREMENT": "Virement",
    "BANK_TRANSFER": "Virement",
    "CHEQUE": "Chèque",
    "AUTRE": "Autre",
}

EQUIPMENT_STATUS = {
    "GOOD": "Bon",
    "BAD": "Mauvais",
    "BROKEN": "En panne",
    "DECOMMISSIONED": "Réformé",
    "LOST": "Perdu",
}

EQUIPMENT_CATEGORY = {
    "TOPOGRAPHIC_MATERIALS": "Matériels Topographiques",
    "COMPUTER_MATERIALS": "Matériels Informatiques",
    "OTHERS": "Autres",
}

MAINTENANCE_TYPE = {
    "PREVENTIVE": "Préventive",
    "CORRECTIVE": "Corrective",
    "PREDICTIVE": "Prédictive",
}

ASSIGNMENT_STATUS = {
    "ASSIGNED": "Affecté",
    "IN_TRANSIT": "En transit",
    "RETURNED": "Retourné",
    "CANCELLED": "Annulé",
}

SOFTWARE_TYPE = {
    "LICENSE": "Licence",
    "SUBSCRIPTION": "Abonnement",
    "OPEN_SOURCE": "Open source",
    "SUPPORT": "Support",
}

PERIODICITY = {
    "MONTHLY": "Mensuelle",
    "QUARTERLY": "Trimestrielle",
    "SEMI_ANNUAL": "Semestrielle",
    "ANNUAL": "Annuelle",
}

CONTRACT_STATUS = {
    "ACTIVE": "Actif",
    "EXPIRED": "Expiré",
    "PENDING": "En attente",
    "TERMINATED": "Résilié",
}

DOCUMENT_STATUS = {
    "ACTIVE": "Actif",
    "OBSOLETE": "Obsolète",
    "DRAFT": "Brouillon",
    "ARCHIVE": "Archivé",
}

USER_ROLE = {
    "ADMIN": "Admin",
    "ACCOUNTANT": "Comptable",
    "DIRECTOR": "Directeur",
    "DIRECTEUR_TECHNIQUE": "Directeur Technique",
    "DIRECTEUR_ADMINISTRATIF": "Directeur Administratif",
    "EMPLOYEE": "Employé",
    "SECRETARY": "Secrétaire",
    "DRIVER": "Chauffeur",
}

PERSONNEL_STATUS = {
    "ACTIVE": "Actif",
    "SUSPENDED": "Suspendu",
    "FIRED": "Licencié",
    "ON_HOLIDAY": "En congé",
    "APPROVED": "Approuvé",
    "PENDING": "En attente",
    "REJECTED": "Rejeté",
}

ABSENCE_TYPE = {
    "SICK_LEAVE": "Congé maladie",
    "ANNUAL_LEAVE": "Congé annuel",
    "MATERNITY_LEAVE": "Congé maternité",
    "PATERNITY_LEAVE": "Congé paternité",
    "UNPAID_LEAVE": "Congé sans solde",
    "OTHER": "Autre",
}

CONTRACT_TYPE = {
    "PERMANENT_CONTRACT_CDI": "CDI",
    "FIXED_TERM_CONTRACT_CDD": "CDD",
    "INTERNSHIP": "Stage",
    "CONSULTANT": "Consultant",
}

BONUS_TYPE = {
    "PERFORMANCE_BONUS": "Prime de performance",
    "YEAR_END_BONUS": "Prime de fin d'année",
    "SPECIAL_BONUS": "Prime spéciale",
    "OTHER": "Autre",
}

SANCTION_TYPE = {
    "VERBAL_WARNING": "Avertissement verbal",
    "WRITTEN_WARNING": "Avertissement écrit",
    "SUSPENSION": "Suspension",
    "DEMOTION": "Rétrogradation",
    "TERMINATION": "Licenciement",
    "OTHER": "Autre",
}

AFFECTATION_TYPE = {
    "PERMANENT": "Permanente",
    "TEMPORARY": "Temporaire",
    "TRANSFER": "Mutation",
    "PROJECT_BASED": "Basée sur projet",
    "SPECIAL_ASSIGNMENT": "Mission spéciale",
}

LABELS = {
    "offer_status": OFFER_STATUS,
    "submission_type": SUBMISSION_TYPE,
    "vehicle_status": VEHICLE_STATUS,
    "vehicle_type": VEHICLE_TYPE,
    "fuel_type": FUEL_TYPE,
    "piece_type": PIECE_TYPE,
    "country": COUNTRY,
    "payment_method": PAYMENT_METHOD,
    "equipment_status": EQUIPMENT_STATUS,
    "equipment_category": EQUIPMENT_CATEGORY,
    "maintenance_type": MAINTENANCE_TYPE,
    "assignment_status": ASSIGNMENT_STATUS,
    "software_type": SOFTWARE_TYPE,
    "periodicity": PERIODICITY,
    "contract_status": CONTRACT_STATUS,
    "document_status": DOCUMENT_STATUS,
    "user_role": USER_ROLE,
    "personnel_status": PERSONNEL_STATUS,
    "absence_type": ABSENCE_TYPE,
    "contract_type": CONTRACT_TYPE,
    "bonus_type": BONUS_TYPE,
    "sanction_type": SANCTION_TYPE,
    "affectation_type": AFFECTATION_TYPE,
}

# Tailwind badge classes used by list views
STATUS_COLORS = {
    "offer_status": {
        "APPLICATION": "bg-blue-100 text-blue-800",
        "UNDER_REVIEW": "bg-yellow-100 text-yellow-800",
        "PENDING": "bg-orange-100 text-orange-800",
        "SHORTLISTED": "bg-green-100 text-green-800",
        "BID_SUBMITTED": "bg-purple-100 text-purple-800",
        "NOT_PURSUED": "bg-red-100 text-red-800",
    },
    "assignment_status": {
        "ASSIGNED": "bg-blue-100 text-blue-800",
        "IN_TRANSIT": "bg-yellow-100 text-yellow-800",
        "RETURNED": "bg-green-100 text-green-800",
        "CANCELLED": "bg-gray-100 text-gray-800",
    },
    "piece_type": {
        "INSURANCE": "bg-blue-100 text-blue-800",
        "TECHNICAL_VISIT": "bg-green-100 text-green-800",
        "REGISTRATION": "bg-purple-100 text-purple-800",
    },
    "vehicle_status": {
        "AVAILABLE": "bg-green-100 text-green-800",
        "IN_USE": "bg-blue-100 text-blue-800",
        "UNDER_MAINTENANCE": "bg-yellow-100 text-yellow-800",
        "OUT_OF_SERVICE": "bg-red-100 text-red-800",
    },
    "equipment_status": {
        "GOOD": "bg-green-100 text-green-800",
        "BAD": "bg-orange-100 text-orange-800",
        "BROKEN": "bg-red-100 text-red-800",
        "DECOMMISSIONED": "bg-gray-100 text-gray-800",
        "LOST": "bg-purple-100 text-purple-800",
    },
}
DEFAULT_COLOR = "bg-gray-100 text-gray-800"


def label(group: str, value):
    """Display label of ``value`` in ``group``; falls back to the raw value."""
    if value is None:
        return ""
    return LABELS.get(group, {}).get(value, value)


def color(group: str, value) -> str:
    return STATUS_COLORS.get(group, {}).get(value, DEFAULT_COLOR)
