API = "/.netlify/functions"


def test_create_user_and_filter_by_role(client):
    resp = client.post(f"{API}/personnel-users", json={
        "firstName": "Koffi",
        "lastName": "Yao",
        "email": "koffi.yao@example.com",
        "role": "DRIVER",
    })
    assert resp.status_code == 201
    assert resp.get_json()["status"] == "ACTIVE"

    drivers = client.get(f"{API}/personnel-users?role=DRIVER").get_json()
    assert [u["email"] for u in drivers["users"]] == ["koffi.yao@example.com"]
    assert client.get(f"{API}/personnel-users?role=ADMIN").get_json()["users"] == []


def test_absence_defaults_and_user_search(client, employee):
    resp = client.post(f"{API}/personnel-absences", json={
        "userId": employee.id,
        "absenceType": "SICK_LEAVE",
        "startDate": "2024-05-02",
        "endDate": "2024-05-04",
        "daysCount": "3",
    })

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["status"] == "PENDING"
    assert body["daysCount"] == 3
    assert body["user"]["firstName"] == "Awa"

    assert len(client.get(f"{API}/personnel-absences?search=kone").get_json()["absences"]) == 1
    assert client.get(f"{API}/personnel-absences?search=nobody").get_json()["absences"] == []


def test_contract_salaries_are_numbers(client, employee):
    resp = client.post(f"{API}/personnel-contracts", json={
        "userId": employee.id,
        "contractType": "PERMANENT_CONTRACT_CDI",
        "startDate": "2020-05-04",
        "post": "Géomètre",
        "department": "Topographie",
        "grossSalary": "850000",
        "netSalary": "720000.50",
    })

    assert resp.status_code == 201
    assert resp.get_json()["grossSalary"] == 850000
    assert resp.get_json()["netSalary"] == 720000.5


def test_medical_records_envelope_and_pk(client, employee):
    created = client.post(f"{API}/personnel-medical-records", json={
        "userId": employee.id,
        "visitDate": "2024-06-01",
        "diagnosis": "RAS",
    }).get_json()

    body = client.get(f"{API}/personnel-medical-records").get_json()
    assert body["medicalRecords"][0]["medicalRecordId"] == created["medicalRecordId"]

    deleted = client.delete(f"{API}/personnel-medical-records?id={created['medicalRecordId']}")
    assert deleted.get_json() == {"message": "Medical record deleted successfully"}


def test_sanction_requires_reason(client, employee):
    resp = client.post(f"{API}/personnel-sanctions", json={
        "userId": employee.id,
        "sanctionType": "VERBAL_WARNING",
        "sanctionDate": "2024-06-01",
    })
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Field reason is required"}


def test_bonus_and_affectation(client, employee):
    bonus = client.post(f"{API}/personnel-bonuses", json={
        "userId": employee.id,
        "bonusType": "YEAR_END_BONUS",
        "amount": 100000,
        "currency": "XOF",
        "awardDate": "2024-12-20",
        "paymentMethod": "VIREMENT",
    })
    assert bonus.status_code == 201

    affectation = client.post(f"{API}/personnel-affectations", json={
        "userId": employee.id,
        "affectationType": "TEMPORARY",
        "site": "Bouaké",
        "startDate": "2024-07-01",
    })
    assert affectation.status_code == 201

    assert len(client.get(f"{API}/personnel-bonuses?status=PENDING").get_json()["bonuses"]) == 1
    assert len(client.get(f"{API}/personnel-affectations?affectationType=TEMPORARY").get_json()["affectations"]) == 1
