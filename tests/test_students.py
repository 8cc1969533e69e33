from tests.conftest import HOSTEL


async def test_create_requires_hostel_and_name(client):
    response = await client.post("/api/students", json={"name": "Asha"})
    assert response.status_code == 400
    assert response.json()["success"] is False

    response = await client.post("/api/students", json={"hostel_code": HOSTEL, "name": ""})
    assert response.status_code == 400


async def test_create_fills_defaults(add_student):
    student = await add_student("Asha", monthly_rent="4500", advance_paid="")
    assert student["id"] > 0
    assert student["hostel_code"] == HOSTEL
    assert student["monthly_rent"] == 4500
    assert student["advance_paid"] == 0
    assert student["course"] == ""
    assert student["is_deleted"] is False
    assert student["deleted_at"] is None


async def test_active_roster_sorted_by_name(client, add_student):
    await add_student("Ravi")
    await add_student("Asha")
    await add_student("Other hostel", hostel_code="H2")

    response = await client.get("/api/students/list", params={"hostel": HOSTEL})
    body = response.json()
    assert body["success"] is True
    assert [s["name"] for s in body["students"]] == ["Asha", "Ravi"]
    assert set(body["students"][0]) == {"id", "name", "room_number"}


async def test_roster_requires_hostel(client):
    response = await client.get("/api/students/list")
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Missing hostel code"}


async def test_name_search_is_case_insensitive(client, add_student):
    created = await add_student("Asha")

    for query in ("asha", "ASHA", "Asha"):
        response = await client.get("/api/students", params={"hostel": HOSTEL, "name": query})
        body = response.json()
        assert body["success"] is True
        assert body["student"]["id"] == created["id"]

    response = await client.get("/api/students", params={"hostel": HOSTEL, "name": "Ash"})
    assert response.json() == {"success": False, "message": "No student found"}


async def test_name_search_folds_non_ascii_case(client, add_student):
    created = await add_student("Élodie")

    for query in ("élodie", "ÉLODIE"):
        response = await client.get("/api/students", params={"hostel": HOSTEL, "name": query})
        body = response.json()
        assert body["success"] is True
        assert body["student"]["id"] == created["id"]


async def test_filter_by_room_and_room_type(client, add_student):
    await add_student("Asha", room_number="101", room_type="AC")
    await add_student("Bala", room_number="102", room_type="AC")
    await add_student("Chitra", room_number="101", room_type="Non-AC")

    response = await client.get("/api/students/by-room", params={"hostel": HOSTEL, "room": "101"})
    assert [s["name"] for s in response.json()["students"]] == ["Asha", "Chitra"]

    response = await client.get("/api/students/by-roomtype", params={"hostel": HOSTEL, "roomType": "AC"})
    assert [s["name"] for s in response.json()["students"]] == ["Asha", "Bala"]

    response = await client.get("/api/students/by-room", params={"hostel": HOSTEL})
    assert response.status_code == 400


async def test_get_by_id_hides_deleted_unless_asked(client, add_student):
    student = await add_student("Asha")
    await client.delete(f"/api/students/{student['id']}")

    response = await client.get(f"/api/students/{student['id']}")
    assert response.json() == {"success": False, "message": "Student not found"}

    response = await client.get(f"/api/students/{student['id']}", params={"includeDeleted": "1"})
    body = response.json()
    assert body["success"] is True
    assert body["student"]["is_deleted"] is True


async def test_non_numeric_id_is_rejected(client):
    response = await client.get("/api/students/abc")
    assert response.status_code == 400
    assert response.json()["success"] is False


async def test_update_overwrites_profile(client, add_student):
    student = await add_student("Asha", course="BSc", room_number="101")

    response = await client.put(
        f"/api/students/{student['id']}",
        json={"hostel_code": HOSTEL, "name": "Asha K", "room_number": "202", "monthly_rent": 5000},
    )
    assert response.json() == {"success": True}

    body = (await client.get(f"/api/students/{student['id']}")).json()
    assert body["student"]["name"] == "Asha K"
    assert body["student"]["room_number"] == "202"
    assert body["student"]["monthly_rent"] == 5000
    assert body["student"]["course"] == ""


async def test_update_unknown_student(client):
    response = await client.put("/api/students/999", json={"name": "Nobody"})
    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "Student not found"}
