from hostel_api.services.monthly_account_service import split_eb
from tests.conftest import HOSTEL


async def eb_batch(client, room, eb_total, date="2024-05"):
    return await client.post(
        f"/api/rooms/{room}/eb-batch", json={"hostel_code": HOSTEL, "date": date, "eb_total": eb_total}
    )


def test_split_drops_remainder():
    assert split_eb(100, 3) == 33
    assert split_eb(99, 3) == 33
    assert split_eb(2, 3) == 0


async def test_eb_split_floor_division(client, add_student):
    students = [await add_student(name, room_number="101") for name in ("Asha", "Bala", "Chitra")]

    response = await eb_batch(client, "101", 100)
    assert response.json() == {
        "success": True,
        "room": "101",
        "date": "2024-05",
        "total_students": 3,
        "eb_total": 100,
        "eb_share": 33,
    }

    for student in students:
        entries = (await client.get(f"/api/students/{student['id']}/monthly-account")).json()["entries"]
        assert len(entries) == 1
        assert entries[0]["eb_share"] == 33
        assert entries[0]["eb_paid"] == 0
        assert entries[0]["eb_remaining"] == 33
        assert entries[0]["room_number"] == "101"


async def test_eb_rerun_preserves_payments(client, add_student):
    students = [await add_student(name, room_number="101") for name in ("Asha", "Bala", "Chitra")]
    asha = students[0]
    await eb_batch(client, "101", 100)

    entry = (await client.get(f"/api/students/{asha['id']}/monthly-account")).json()["entries"][0]
    response = await client.put(
        f"/api/monthly_accounts/{entry['id']}",
        json={"date": "2024-05", "room_number": "101", "eb_share": 33, "eb_paid": 10, "eb_remaining": 23},
    )
    assert response.json() == {"success": True}

    response = await eb_batch(client, "101", 120)
    assert response.json()["eb_share"] == 40

    entries = (await client.get(f"/api/students/{asha['id']}/monthly-account")).json()["entries"]
    assert len(entries) == 1
    assert entries[0]["id"] == entry["id"]
    assert entries[0]["eb_share"] == 40
    assert entries[0]["eb_paid"] == 10
    assert entries[0]["eb_remaining"] == 30


async def test_eb_remaining_never_negative(client, add_student):
    asha = await add_student("Asha", room_number="101")
    await eb_batch(client, "101", 500)
    entry = (await client.get(f"/api/students/{asha['id']}/monthly-account")).json()["entries"][0]
    await client.put(
        f"/api/monthly_accounts/{entry['id']}",
        json={"date": "2024-05", "room_number": "101", "eb_share": 500, "eb_paid": 500},
    )

    await eb_batch(client, "101", 300)
    entry = (await client.get(f"/api/students/{asha['id']}/monthly-account")).json()["entries"][0]
    assert entry["eb_share"] == 300
    assert entry["eb_remaining"] == 0


async def test_eb_ignores_deleted_students(client, add_student):
    await add_student("Asha", room_number="101")
    gone = await add_student("Bala", room_number="101")
    await client.delete(f"/api/students/{gone['id']}")

    response = await eb_batch(client, "101", 100)
    assert response.json()["total_students"] == 1
    assert response.json()["eb_share"] == 100


async def test_eb_empty_room_is_business_error(client):
    response = await eb_batch(client, "404", 100)
    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "No active students in this room."}


async def test_eb_validation(client):
    response = await client.post("/api/rooms/101/eb-batch", json={"date": "2024-05", "eb_total": 10})
    assert response.status_code == 400
    assert response.json()["message"] == "Missing hostel_code"

    response = await client.post("/api/rooms/101/eb-batch", json={"hostel_code": HOSTEL, "eb_total": 10})
    assert response.status_code == 400
    assert response.json()["message"] == "Missing date"

    response = await eb_batch(client, "101", -5)
    assert response.status_code == 400


async def test_room_roster_joins_monthly_rows(client, add_student):
    asha = await add_student("Asha", room_number="101", monthly_rent=4000)
    await client.post(
        f"/api/students/{asha['id']}/monthly-account",
        json={"hostel_code": HOSTEL, "date": "2024-05", "room_number": "101", "rent_paid": 4000},
    )
    await add_student("Bala", room_number="101", monthly_rent=3500)

    response = await client.get("/api/rooms/101/monthly-account", params={"hostel": HOSTEL, "date": "2024-05"})
    entries = response.json()["entries"]
    assert [e["name"] for e in entries] == ["Asha", "Bala"]
    assert entries[0]["rent_paid"] == 4000
    assert entries[0]["monthly_rent"] == 4000
    assert entries[0]["monthly_id"] is not None
    assert entries[1]["monthly_id"] is None
    assert entries[1]["rent_paid"] == 0
    assert entries[1]["eb_remaining"] == 0

    response = await client.get("/api/rooms/101/monthly-account", params={"hostel": HOSTEL})
    assert response.status_code == 400
    assert response.json()["message"] == "Missing date"


async def test_monthly_entry_crud(client, add_student):
    asha = await add_student("Asha")
    sid = asha["id"]

    response = await client.post(f"/api/students/{sid}/monthly-account", json={"date": "2024-05"})
    assert response.status_code == 400

    created = (await client.post(
        f"/api/students/{sid}/monthly-account",
        json={"hostel_code": HOSTEL, "date": "2024-04", "rent_paid": "3000", "rent_remaining": "500"},
    )).json()["entry"]
    await client.post(f"/api/students/{sid}/monthly-account", json={"hostel_code": HOSTEL, "date": "2024-05"})

    entries = (await client.get(f"/api/students/{sid}/monthly-account")).json()["entries"]
    assert [e["date"] for e in entries] == ["2024-05", "2024-04"]
    assert entries[1]["rent_remaining"] == 500

    assert (await client.delete(f"/api/monthly_accounts/{created['id']}")).json() == {"success": True}
    assert (await client.put(f"/api/monthly_accounts/{created['id']}", json={})).json() == {
        "success": False,
        "message": "Monthly entry not found",
    }


async def test_duplicate_monthly_entry_is_storage_error(client, add_student):
    asha = await add_student("Asha")
    payload = {"hostel_code": HOSTEL, "date": "2024-05"}
    assert (await client.post(f"/api/students/{asha['id']}/monthly-account", json=payload)).status_code == 200

    response = await client.post(f"/api/students/{asha['id']}/monthly-account", json=payload)
    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Database error"}
