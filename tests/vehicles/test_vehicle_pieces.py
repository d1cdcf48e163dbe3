from datetime import date

import pytest

from extensions import db
from modules.vehicles.models import VehiclePiece

API = "/.netlify/functions"

URL = f"{API}/vehicle-pieces"


def _payload(vehicle_id: int, **overrides) -> dict:
    payload = {
        "vehicleId": vehicle_id,
        "type": "INSURANCE",
        "description": "Assurance tous risques",
        "montant": "150.5",
        "dateDebut": "2024-01-15",
        "dateFin": "2025-01-14",
        "dateProchaine": "2024-12-15",
        "Inserteridentity": 42,
        "InserterCountry": "IVORY_COAST",
    }
    payload.update(overrides)
    return payload


def _create(client, vehicle_id: int, **overrides) -> dict:
    resp = client.post(URL, json=_payload(vehicle_id, **overrides))
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


def _add_pieces(vehicle_id: int, count: int) -> None:
    db.session.add_all(
        VehiclePiece(
            vehicle_id=vehicle_id,
            type="TECHNICAL_VISIT",
            montant=10 + i,
            date_debut=date(2024, 1, 1),
            date_fin=date(2024, 12, 31),
        )
        for i in range(count)
    )
    db.session.commit()


def test_create_coerces_numbers_and_dates(client, vehicle):
    body = _create(client, vehicle.vehicle_id)

    assert body["montant"] == 150.5
    assert body["dateDebut"] == "2024-01-15"
    assert body["dateProchaine"] == "2024-12-15"
    assert body["Inserteridentity"] == "42"
    assert body["InserterCountry"] == "IVORY_COAST"
    assert body["vehicle"]["licensePlate"] == "AB-123-CI"
    assert body["createdAt"] and body["updatedAt"]


def test_create_accepts_comma_decimal(client, vehicle):
    body = _create(client, vehicle.vehicle_id, montant="63,75")
    assert body["montant"] == 63.75


def test_create_stores_blank_optional_as_null(client, vehicle):
    body = _create(client, vehicle.vehicle_id, dateProchaine="", description="  ")
    assert body["dateProchaine"] is None
    assert body["description"] is None


@pytest.mark.parametrize("missing", ["vehicleId", "type", "montant", "dateDebut", "dateFin"])
def test_create_requires_fields(client, vehicle, missing):
    payload = _payload(vehicle.vehicle_id)
    del payload[missing]

    resp = client.post(URL, json=payload)

    assert resp.status_code == 400
    assert resp.get_json() == {"error": f"Field {missing} is required"}


def test_create_rejects_bad_date(client, vehicle):
    resp = client.post(URL, json=_payload(vehicle.vehicle_id, dateDebut="not-a-date"))
    assert resp.status_code == 400
    assert "dateDebut" in resp.get_json()["error"]


def test_create_rejects_bad_amount(client, vehicle):
    resp = client.post(URL, json=_payload(vehicle.vehicle_id, montant="cent"))
    assert resp.status_code == 400
    assert "montant" in resp.get_json()["error"]


@pytest.mark.parametrize("amount", ["NaN", "nan", "Infinity", "-inf"])
def test_create_rejects_non_finite_amount(client, vehicle, amount):
    resp = client.post(URL, json=_payload(vehicle.vehicle_id, montant=amount))
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid montant value"}


@pytest.mark.parametrize("amount", [0, "0"])
def test_create_accepts_zero_amount(client, vehicle, amount):
    body = _create(client, vehicle.vehicle_id, montant=amount)
    assert body["montant"] == 0


def test_create_without_body(client):
    resp = client.post(URL, data="nope", content_type="text/plain")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Missing request body"}


def test_update_only_touches_sent_fields(client, vehicle):
    created = _create(client, vehicle.vehicle_id)

    resp = client.put(f"{URL}?id={created['pieceId']}", json={"description": "Renouvelée"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["description"] == "Renouvelée"
    for key in ("montant", "dateDebut", "dateFin", "dateProchaine", "type", "vehicleId"):
        assert body[key] == created[key]


def test_update_null_clears_optional_date(client, vehicle):
    created = _create(client, vehicle.vehicle_id)

    resp = client.put(f"{URL}?id={created['pieceId']}", json={"dateProchaine": None})

    assert resp.status_code == 200
    assert resp.get_json()["dateProchaine"] is None
    assert db.session.get(VehiclePiece, created["pieceId"]).date_prochaine is None


def test_update_omitting_field_keeps_it(client, vehicle):
    created = _create(client, vehicle.vehicle_id)

    resp = client.put(f"{URL}?id={created['pieceId']}", json={"montant": 99})

    assert resp.get_json()["montant"] == 99
    assert resp.get_json()["dateProchaine"] == "2024-12-15"


def test_update_cannot_clear_required_date(client, vehicle):
    created = _create(client, vehicle.vehicle_id)

    resp = client.put(f"{URL}?id={created['pieceId']}", json={"dateDebut": None, "description": "x"})

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "dateDebut is required"}
    # nothing applied
    assert db.session.get(VehiclePiece, created["pieceId"]).description == "Assurance tous risques"


def test_update_ignores_snake_case_keys(client, vehicle):
    created = _create(client, vehicle.vehicle_id)

    resp = client.put(f"{URL}?id={created['pieceId']}", json={"date_debut": None, "type_libre": "Vignette"})

    assert resp.status_code == 200
    assert resp.get_json()["dateDebut"] == "2024-01-15"
    assert resp.get_json()["typeLibre"] == created["typeLibre"]


def test_update_rejects_bad_date(client, vehicle):
    created = _create(client, vehicle.vehicle_id)
    resp = client.put(f"{URL}?id={created['pieceId']}", json={"dateFin": "31/12/2024"})
    assert resp.status_code == 400
    assert "dateFin" in resp.get_json()["error"]


def test_update_ignores_pk_and_unknown_keys(client, vehicle):
    created = _create(client, vehicle.vehicle_id)

    resp = client.put(
        f"{URL}?id={created['pieceId']}",
        json={"pieceId": 999, "createdAt": "2000-01-01", "color": "red", "typeLibre": "Vignette"},
    )

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["pieceId"] == created["pieceId"]
    assert body["createdAt"] == created["createdAt"]
    assert body["typeLibre"] == "Vignette"
    assert "color" not in body


def test_update_requires_id(client):
    resp = client.put(URL, json={"description": "x"})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Piece ID is required"}


def test_update_missing_row_is_404(client):
    resp = client.put(f"{URL}?id=9999", json={"description": "x"})
    assert resp.status_code == 404


def test_delete(client, vehicle):
    created = _create(client, vehicle.vehicle_id)

    resp = client.delete(f"{URL}?id={created['pieceId']}")

    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Piece deleted successfully"}
    assert db.session.get(VehiclePiece, created["pieceId"]) is None


def test_delete_missing_row_is_404(client):
    resp = client.delete(f"{URL}?id=9999")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Piece not found"}


def test_delete_requires_id(client):
    resp = client.delete(URL)
    assert resp.status_code == 400


def test_pagination_maths(client, vehicle):
    _add_pieces(vehicle.vehicle_id, 47)

    resp = client.get(f"{URL}?page=1&limit=10")
    body = resp.get_json()
    assert len(body["pieces"]) == 10
    assert body["pagination"] == {"page": 1, "limit": 10, "total": 47, "totalPages": 5}

    last = client.get(f"{URL}?page=5&limit=10").get_json()
    assert len(last["pieces"]) == 7

    past_end = client.get(f"{URL}?page=6&limit=10")
    assert past_end.status_code == 200
    assert past_end.get_json()["pieces"] == []


def test_pagination_rejects_non_integer_page(client):
    resp = client.get(f"{URL}?page=deux")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid page parameter"}


def test_list_is_newest_first(client, vehicle):
    first = _create(client, vehicle.vehicle_id, description="first")
    second = _create(client, vehicle.vehicle_id, description="second")

    ids = [row["pieceId"] for row in client.get(URL).get_json()["pieces"]]

    assert ids == [second["pieceId"], first["pieceId"]]


def test_filters_and_search(client, vehicle):
    _create(client, vehicle.vehicle_id, type="INSURANCE", description="Assurance Allianz")
    _create(client, vehicle.vehicle_id, type="REGISTRATION", description="Carte grise")

    by_type = client.get(f"{URL}?type=REGISTRATION").get_json()["pieces"]
    assert [p["description"] for p in by_type] == ["Carte grise"]

    everything = client.get(f"{URL}?type=all").get_json()["pieces"]
    assert len(everything) == 2

    found = client.get(f"{URL}?search=allianz").get_json()["pieces"]
    assert [p["type"] for p in found] == ["INSURANCE"]

    by_vehicle = client.get(f"{URL}?vehicleId={vehicle.vehicle_id}").get_json()["pieces"]
    assert len(by_vehicle) == 2


def test_integer_filter_rejects_text(client):
    resp = client.get(f"{URL}?vehicleId=abc")
    assert resp.status_code == 400


def test_get_single_row(client, vehicle):
    created = _create(client, vehicle.vehicle_id)

    resp = client.get(f"{URL}?id={created['pieceId']}")

    assert resp.status_code == 200
    assert resp.get_json()["pieceId"] == created["pieceId"]
    assert client.get(f"{URL}?id=9999").status_code == 404
