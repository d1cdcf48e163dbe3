"""CSV / Excel / PDF rendering of list rows.

Rows are the serialized wire dicts (``{"devisId": 1, "amount": 150.0, ...}``).
Each cell is formatted once by :func:`format_row`, so the three formats carry
the same text for the same row.
"""

import csv
import re
from dataclasses import dataclass
from datetime import date, datetime
from io import BytesIO, StringIO

from openpyxl import Workbook
from openpyxl.styles import Font
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from errors import ValidationError
from labels import label
from utils import parse_datetime

HEADER_BLUE = colors.Color(41 / 255, 128 / 255, 185 / 255)
SHEET_TITLE_MAX = 31
EXCEL_COLUMN_WIDTH = 20
BOM = "\ufeff"


@dataclass(frozen=True)
class ExportColumn:
    """``kind`` is ``text``, ``date``, ``money[:<currency key>]`` or ``label:<group>``."""

    key: str
    header: str
    kind: str = "text"


def _col(key, header, kind="text"):
    return ExportColumn(key, header, kind)


_ATTACHMENT = _col("attachment", "Pièce jointe")
_COUNTRY = _col("InserterCountry", "Pays", "label:country")

EXPORT_COLUMNS = {
    "offre-devis": [
        _col("devisId", "ID"),
        _col("indexNumber", "Numéro Index"),
        _col("clientname", "Client"),
        _col("amount", "Montant", "money:devise"),
        _col("validityDate", "Date de validité", "date"),
        _col("status", "Statut", "label:offer_status"),
        _col("description", "Description"),
        _ATTACHMENT,
    ],
    "offre-dao": [
        _col("daoId", "ID"),
        _col("daoNumber", "Numéro DAO"),
        _col("activityCode", "Code activité"),
        _col("clientname", "Client"),
        _col("object", "Objet"),
        _col("transmissionDate", "Date de transmission", "date"),
        _col("submissionDate", "Date de soumission", "date"),
        _col("submissionType", "Type de soumission", "label:submission_type"),
        _col("status", "Statut", "label:offer_status"),
        _ATTACHMENT,
    ],
    "offre-ami": [
        _col("amiId", "ID"),
        _col("name", "Nom"),
        _col("client", "Client"),
        _col("object", "Objet"),
        _col("depositDate", "Date de dépôt", "date"),
        _col("submissionDate", "Date de soumission", "date"),
        _col("status", "Statut", "label:offer_status"),
        _col("comment", "Commentaire"),
        _ATTACHMENT,
    ],
    "vehicle-vehicles": [
        _col("vehicleId", "ID"),
        _col("licensePlate", "Immatriculation"),
        _col("brand", "Marque"),
        _col("model", "Modèle"),
        _col("type", "Type", "label:vehicle_type"),
        _col("year", "Année"),
        _col("fuelType", "Carburant", "label:fuel_type"),
        _col("status", "Statut", "label:vehicle_status"),
        _col("vehiclecountry", "Pays", "label:country"),
    ],
    "vehicle-pieces": [
        _col("pieceId", "ID"),
        _col("vehicle.licensePlate", "Véhicule"),
        _col("type", "Type", "label:piece_type"),
        _col("description", "Description"),
        _col("montant", "Montant", "money"),
        _col("dateDebut", "Date de début", "date"),
        _col("dateFin", "Date de fin", "date"),
        _col("dateProchaine", "Prochaine échéance", "date"),
    ],
    "equipment-equipment": [
        _col("equipmentId", "ID"),
        _col("referenceCode", "Référence"),
        _col("name", "Nom"),
        _col("category", "Catégorie", "label:equipment_category"),
        _col("brand", "Marque"),
        _col("serialNumber", "Numéro de série"),
        _col("purchaseAmount", "Montant d'achat", "money:devise"),
        _col("purchaseDate", "Date d'achat", "date"),
        _col("status", "État", "label:equipment_status"),
        _col("location", "Emplacement"),
    ],
    "equipment-maintenance": [
        _col("maintenanceId", "ID"),
        _col("equipment.name", "Équipement"),
        _col("maintenanceDate", "Date", "date"),
        _col("maintenanceType", "Type", "label:maintenance_type"),
        _col("amount", "Montant", "money:devise"),
        _col("supplier", "Fournisseur"),
        _col("technician", "Technicien"),
    ],
    "equipment-assignments": [
        _col("assignmentId", "ID"),
        _col("equipment.name", "Équipement"),
        _col("user.lastName", "Employé"),
        _col("assignmentDate", "Date d'affectation", "date"),
        _col("returnDate", "Date de retour", "date"),
        _col("status", "Statut", "label:assignment_status"),
    ],
    "Software-software": [
        _col("softwareId", "ID"),
        _col("name", "Nom"),
        _col("vendor", "Éditeur"),
        _col("version", "Version"),
        _col("type", "Type", "label:software_type"),
        _col("purchaseDate", "Date d'achat", "date"),
        _col("amount", "Montant", "money:currency"),
        _col("licenseCount", "Licences"),
    ],
    "Software-maintenance": [
        _col("maintenanceId", "ID"),
        _col("software.name", "Logiciel"),
        _col("provider", "Prestataire"),
        _col("startDate", "Date de début", "date"),
        _col("endDate", "Date de fin", "date"),
        _col("price", "Prix", "money:currency"),
        _col("periodicity", "Périodicité", "label:periodicity"),
    ],
    "personnel-users": [
        _col("employeeNumber", "Matricule"),
        _col("lastName", "Nom"),
        _col("firstName", "Prénom"),
        _col("email", "Email"),
        _col("role", "Rôle", "label:user_role"),
        _col("status", "Statut", "label:personnel_status"),
        _col("department", "Département"),
        _col("hireDate", "Date d'embauche", "date"),
    ],
    "personnel-absences": [
        _col("absenceId", "ID"),
        _col("user.lastName", "Employé"),
        _col("absenceType", "Type", "label:absence_type"),
        _col("startDate", "Date de début", "date"),
        _col("endDate", "Date de fin", "date"),
        _col("daysCount", "Jours"),
        _col("status", "Statut", "label:personnel_status"),
    ],
    "personnel-contracts": [
        _col("contractId", "ID"),
        _col("user.lastName", "Employé"),
        _col("contractType", "Type", "label:contract_type"),
        _col("post", "Poste"),
        _col("department", "Département"),
        _col("startDate", "Date de début", "date"),
        _col("endDate", "Date de fin", "date"),
        _col("grossSalary", "Salaire brut", "money:currency"),
        _col("netSalary", "Salaire net", "money:currency"),
    ],
    "personnel-bonuses": [
        _col("bonusId", "ID"),
        _col("user.lastName", "Employé"),
        _col("bonusType", "Type", "label:bonus_type"),
        _col("amount", "Montant", "money:currency"),
        _col("awardDate", "Date d'attribution", "date"),
        _col("paymentMethod", "Mode de paiement", "label:payment_method"),
        _col("status", "Statut", "label:personnel_status"),
    ],
    "personnel-sanctions": [
        _col("sanctionId", "ID"),
        _col("user.lastName", "Employé"),
        _col("sanctionType", "Type", "label:sanction_type"),
        _col("reason", "Motif"),
        _col("sanctionDate", "Date", "date"),
        _col("durationDays", "Durée (jours)"),
    ],
    "personnel-affectations": [
        _col("affectationId", "ID"),
        _col("user.lastName", "Employé"),
        _col("affectationType", "Type", "label:affectation_type"),
        _col("site", "Site"),
        _col("position", "Poste"),
        _col("startDate", "Date de début", "date"),
        _col("endDate", "Date de fin", "date"),
    ],
    "Document-documents": [
        _col("documentNumber", "Numéro"),
        _col("title", "Titre"),
        _col("version", "Version"),
        _col("date", "Date", "date"),
        _col("createdBy", "Rédigé par"),
        _col("status", "Statut", "label:document_status"),
        _col("fileName", "Fichier"),
        _COUNTRY,
    ],
}

EXPORT_TITLES = {
    "offre-devis": "Rapport des devis",
    "offre-dao": "Rapport des DAO",
    "offre-ami": "Rapport des AMI",
    "vehicle-vehicles": "Liste des véhicules",
    "vehicle-pieces": "Pièces des véhicules",
    "equipment-equipment": "Liste des équipements",
    "equipment-maintenance": "Maintenances des équipements",
    "equipment-assignments": "Affectations des équipements",
    "Software-software": "Liste des logiciels",
    "Software-maintenance": "Maintenances des logiciels",
    "personnel-users": "Liste du personnel",
    "personnel-absences": "Absences",
    "personnel-contracts": "Contrats du personnel",
    "personnel-bonuses": "Primes",
    "personnel-sanctions": "Sanctions",
    "personnel-affectations": "Affectations du personnel",
    "Document-documents": "Documents",
}


# ---------- cell formatting ----------
def _lookup(row: dict, key: str):
    value = row
    for part in key.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def format_date(value) -> str:
    if value is None or value == "":
        return ""
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        parsed = parse_datetime(value)
        if parsed is None:
            return str(value)
        value = parsed.date()
    return value.strftime("%d/%m/%Y")


def format_money(amount, currency="XAF") -> str:
    """``1500.5`` -> ``"1 500,50 XAF"``; whole amounts drop the decimals."""
    if amount is None or amount == "":
        return ""
    try:
        number = float(amount)
    except (TypeError, ValueError):
        return str(amount)
    if number == int(number):
        text = f"{int(number):,}".replace(",", " ")
    else:
        text = f"{number:,.2f}".replace(",", " ").replace(".", ",")
    return f"{text} {currency or 'XAF'}".strip()


def format_cell(row: dict, column: ExportColumn) -> str:
    value = _lookup(row, column.key)
    kind, _, arg = column.kind.partition(":")
    if kind == "date":
        return format_date(value)
    if kind == "money":
        currency = row.get(arg) if arg else None
        return format_money(value, currency or "XAF")
    if kind == "label":
        return str(label(arg, value))
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Oui" if value else "Non"
    return str(value)


def format_row(row: dict, columns) -> list:
    return [format_cell(row, column) for column in columns]


def export_filename(title: str, ext: str) -> str:
    return re.sub(r"\s+", "_", title.strip()) + "." + ext


# ---------- renderers ----------
def to_csv(rows, columns) -> bytes:
    """UTF-8 with BOM, ``;``-separated, every field quoted, CRLF line endings."""
    out = StringIO()
    writer = csv.writer(out, delimiter=";", quoting=csv.QUOTE_ALL, lineterminator="\r\n")
    writer.writerow([column.header for column in columns])
    for row in rows:
        writer.writerow([cell.replace("\r\n", " ").replace("\n", " ") for cell in format_row(row, columns)])
    return (BOM + out.getvalue()).encode("utf-8")


def to_excel(rows, columns, title: str) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = re.sub(r"[\\/*?:\[\]]", " ", title)[:SHEET_TITLE_MAX] or "Export"

    ws.append([column.header for column in columns])
    for cell in ws[1]:
        cell.font = Font(bold=True)
    for row in rows:
        ws.append(format_row(row, columns))

    for idx in range(1, len(columns) + 1):
        ws.column_dimensions[ws.cell(row=1, column=idx).column_letter].width = EXCEL_COLUMN_WIDTH

    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def to_pdf(rows, columns, title: str, exported_at: datetime | None = None) -> bytes:
    exported_at = exported_at or datetime.now()
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=landscape(A4),
        leftMargin=28, rightMargin=28, topMargin=28, bottomMargin=28,
        title=title,
    )
    styles = getSampleStyleSheet()
    cell_style = styles["BodyText"].clone("cell", fontSize=8, leading=10)

    story = [
        Paragraph(title, styles["Title"]),
        Paragraph(f"Date d'export : {exported_at:%d/%m/%Y %H:%M:%S}", styles["Normal"]),
        Spacer(1, 12),
    ]

    # Paragraph cells wrap long text inside the column width
    data = [[column.header for column in columns]]
    for row in rows:
        data.append([Paragraph(_escape(cell), cell_style) for cell in format_row(row, columns)])

    table = Table(data, repeatRows=1, colWidths=[doc.width / max(len(columns), 1)] * len(columns))
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), HEADER_BLUE),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 8),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]))
    story.append(table)

    doc.build(story)
    return buffer.getvalue()


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


FORMATS = {
    "csv": ("text/csv; charset=utf-8", "csv"),
    "xlsx": ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", "xlsx"),
    "pdf": ("application/pdf", "pdf"),
}


def render_export(rows, columns, fmt: str, title: str):
    """Return ``(content, mimetype, filename)`` for one of :data:`FORMATS`."""
    if fmt not in FORMATS:
        raise ValidationError(f"Unsupported export format: {fmt}")
    mimetype, ext = FORMATS[fmt]
    if fmt == "csv":
        content = to_csv(rows, columns)
    elif fmt == "xlsx":
        content = to_excel(rows, columns, title)
    else:
        content = to_pdf(rows, columns, title)
    return content, mimetype, export_filename(title, ext)
