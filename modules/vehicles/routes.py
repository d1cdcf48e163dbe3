"""HTTP routes for the vehicle fleet domain."""

from resources import Resource

from . import bp
from .models import Vehicle, VehiclePiece

VEHICLE_SUMMARY = ("vehicleId", "licensePlate", "brand", "model")

RESOURCES = [
    Resource(
        name="vehicle-vehicles",
        model=Vehicle,
        envelope_key="vehicles",
        label="Vehicle",
        search=("licensePlate", "brand", "model", "chassisNumber"),
        filters=("status", "type", "fuelType", "InserterCountry"),
        required=("licensePlate", "brand", "model", "type", "year", "chassisNumber", "fuelType"),
    ),
    Resource(
        name="vehicle-pieces",
        model=VehiclePiece,
        envelope_key="pieces",
        label="Piece",
        search=("description", "typeLibre"),
        filters=("type", "vehicleId", "InserterCountry"),
        required=("vehicleId", "type", "montant", "dateDebut", "dateFin"),
        includes={"vehicle": VEHICLE_SUMMARY},
    ),
]

for resource in RESOURCES:
    resource.register(bp)
