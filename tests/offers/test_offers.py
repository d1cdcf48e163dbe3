from io import BytesIO

import pytest
from openpyxl import load_workbook

API = "/.netlify/functions"


def _devis(client, index: str, status: str, **extra) -> dict:
    resp = client.post(f"{API}/offre-devis", json={
        "indexNumber": index,
        "clientname": "Mairie de Cocody",
        "amount": "1500000",
        "validityDate": "2024-09-30",
        "status": status,
        **extra,
    })
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


@pytest.fixture()
def devis(client):
    return [
        _devis(client, "DV-001", "SHORTLISTED", description='Lot "A"\nvoirie'),
        _devis(client, "DV-002", "PENDING"),
        _devis(client, "DV-003", "SHORTLISTED", devise="EUR"),
    ]


def test_dao_crud(client):
    created = client.post(f"{API}/offre-dao", json={
        "transmissionDate": "2024-03-01",
        "daoNumber": "DAO-2024-07",
        "clientname": "AGEROUTE",
        "submissionType": "ELECTRONIC",
        "object": "Levés topographiques",
        "status": "APPLICATION",
    })
    assert created.status_code == 201
    dao = created.get_json()
    assert dao["devise"] == "XAF"

    updated = client.put(f"{API}/offre-dao?id={dao['daoId']}", json={"status": "BID_SUBMITTED"})
    assert updated.get_json()["status"] == "BID_SUBMITTED"

    listed = client.get(f"{API}/offre-dao?submissionType=ELECTRONIC").get_json()
    assert [d["daoNumber"] for d in listed["offreDAO"]] == ["DAO-2024-07"]

    assert client.delete(f"{API}/offre-dao?id={dao['daoId']}").get_json() == {"message": "DAO deleted successfully"}


def test_ami_requires_submission_date(client):
    resp = client.post(f"{API}/offre-ami", json={
        "depositDate": "2024-03-01",
        "name": "AMI cadastre",
        "client": "BNETD",
        "object": "Cadastre",
        "status": "UNDER_REVIEW",
    })
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Field submissionDate is required"}


def test_export_csv_contains_filtered_rows(client, devis):
    resp = client.get(f"{API}/offre-devis/export?format=csv&status=SHORTLISTED")

    assert resp.status_code == 200
    assert resp.headers["Content-Type"].startswith("text/csv")
    assert "Rapport_des_devis.csv" in resp.headers["Content-Disposition"]
    assert resp.data.startswith(b"\xef\xbb\xbf")

    lines = resp.data.decode("utf-8-sig").split("\r\n")
    assert lines[-1] == ""
    assert lines[0].startswith('"ID";"Numéro Index";"Client"')
    body = lines[1:-1]
    assert len(body) == 2
    assert all('"Retenu"' in line for line in body)
    assert any('"Lot ""A"" voirie"' in line for line in body)
    assert any('"1 500 000 EUR"' in line for line in body)


def test_export_xlsx(client, devis):
    resp = client.get(f"{API}/offre-devis/export?format=xlsx")

    assert resp.status_code == 200
    ws = load_workbook(BytesIO(resp.data)).active
    assert ws.max_row == 4
    assert ws["A1"].value == "ID"
    assert ws["A1"].font.bold
    statuses = sorted(ws.cell(row=r, column=6).value for r in range(2, 5))
    assert statuses == ["En Attente", "Retenu", "Retenu"]


def test_export_pdf(client, devis):
    resp = client.get(f"{API}/offre-devis/export?format=pdf&search=DV-002")
    assert resp.status_code == 200
    assert resp.headers["Content-Type"] == "application/pdf"
    assert resp.data.startswith(b"%PDF")


def test_export_unknown_format(client):
    resp = client.get(f"{API}/offre-devis/export?format=docx")
    assert resp.status_code == 400
    assert "docx" in resp.get_json()["error"]


def test_export_not_defined_for_resource(client):
    resp = client.get(f"{API}/Software-contacts/export")
    assert resp.status_code == 404
