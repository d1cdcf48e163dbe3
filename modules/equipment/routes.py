"""HTTP routes for the equipment domain."""

from models import USER_SUMMARY
from resources import Resource

from . import bp
from .models import Equipment, EquipmentAssignment, EquipmentMaintenance

EQUIPMENT_SUMMARY = ("equipmentId", "name", "referenceCode", "serialNumber")

RESOURCES = [
    Resource(
        name="equipment-equipment",
        model=Equipment,
        envelope_key="equipments",
        label="Equipment",
        search=("name", "serialNumber", "referenceCode", "brand"),
        filters=("status", "category", "InserterCountry"),
        required=(
            "name", "category", "type", "brand", "serialNumber", "referenceCode", "supplier",
            "purchaseAmount", "purchaseDate", "deliveryDate", "status", "location", "ownership", "devise",
        ),
        default_limit=50,
    ),
    Resource(
        name="equipment-maintenance",
        model=EquipmentMaintenance,
        envelope_key="maintenances",
        label="Maintenance",
        search=("description", "supplier", "technician", "equipment.name"),
        filters=("maintenanceType", "equipmentId", "InserterCountry"),
        required=("equipmentId", "maintenanceDate", "maintenanceType", "amount", "supplier", "devise"),
        includes={"equipment": EQUIPMENT_SUMMARY},
        default_limit=50,
    ),
    Resource(
        name="equipment-assignments",
        model=EquipmentAssignment,
        envelope_key="assignments",
        label="Assignment",
        search=("purpose", "notes", "equipment.name"),
        filters=("status", "equipmentId", "userId", "InserterCountry"),
        required=("equipmentId", "userId", "assignmentDate", "status"),
        includes={"equipment": EQUIPMENT_SUMMARY, "user": USER_SUMMARY},
        default_limit=50,
    ),
]

for resource in RESOURCES:
    resource.register(bp)
