import pytest

API = "/.netlify/functions"

EQUIPMENT = {
    "name": "Station totale Leica",
    "category": "TOPOGRAPHIC_MATERIALS",
    "type": "Station totale",
    "brand": "Leica",
    "serialNumber": "LX-2231",
    "referenceCode": "TOPO-001",
    "supplier": "GeoServ",
    "purchaseAmount": "12500000",
    "purchaseDate": "2023-02-10",
    "deliveryDate": "2023-02-20",
    "status": "GOOD",
    "location": "Abidjan",
    "ownership": "OWNED",
    "devise": "XOF",
}


@pytest.fixture()
def equipment(client):
    resp = client.post(f"{API}/equipment-equipment", json=EQUIPMENT)
    assert resp.status_code == 201
    return resp.get_json()


def test_equipment_list_defaults_to_50_per_page(client, equipment):
    body = client.get(f"{API}/equipment-equipment").get_json()
    assert body["pagination"]["limit"] == 50
    assert body["equipments"][0]["purchaseAmount"] == 12500000


def test_maintenance_embeds_equipment_and_searches_through_it(client, equipment):
    resp = client.post(f"{API}/equipment-maintenance", json={
        "equipmentId": equipment["equipmentId"],
        "maintenanceDate": "2024-03-01",
        "maintenanceType": "PREVENTIVE",
        "amount": 150000,
        "supplier": "GeoServ",
        "devise": "XOF",
    })
    assert resp.status_code == 201
    assert resp.get_json()["equipment"] == {
        "equipmentId": equipment["equipmentId"],
        "name": "Station totale Leica",
        "referenceCode": "TOPO-001",
        "serialNumber": "LX-2231",
    }

    found = client.get(f"{API}/equipment-maintenance?search=leica").get_json()
    assert len(found["maintenances"]) == 1
    assert client.get(f"{API}/equipment-maintenance?search=trimble").get_json()["maintenances"] == []


def test_assignment_embeds_user(client, equipment, employee):
    resp = client.post(f"{API}/equipment-assignments", json={
        "equipmentId": equipment["equipmentId"],
        "userId": employee.id,
        "assignmentDate": "2024-04-02",
        "status": "ASSIGNED",
    })

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["user"]["lastName"] == "Kone"
    assert body["user"]["employeeNumber"] == "EMP-001"

    listed = client.get(f"{API}/equipment-assignments?userId={employee.id}").get_json()
    assert [a["assignmentId"] for a in listed["assignments"]] == [body["assignmentId"]]


def test_update_status(client, equipment):
    resp = client.put(f"{API}/equipment-equipment?id={equipment['equipmentId']}", json={"status": "BROKEN"})
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "BROKEN"
    assert resp.get_json()["name"] == EQUIPMENT["name"]
