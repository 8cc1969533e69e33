async def test_rent_entries_crud(client, add_student):
    asha = await add_student("Asha")
    sid = asha["id"]

    first = (await client.post(
        f"/api/students/{sid}/rent", json={"date": "2024-05-01", "rent_paid": "3000", "remaining": 1500}
    )).json()["entry"]
    assert first["student_id"] == sid
    assert first["rent_paid"] == 3000
    await client.post(f"/api/students/{sid}/rent", json={"date": "2024-05-15", "rent_paid": 1500})

    entries = (await client.get(f"/api/students/{sid}/rent")).json()["entries"]
    assert [e["date"] for e in entries] == ["2024-05-01", "2024-05-15"]
    assert entries[1]["remaining"] == 0

    response = await client.put(
        f"/api/rent_payments/{first['id']}", json={"date": "2024-05-02", "rent_paid": 2500, "remaining": 2000}
    )
    assert response.json() == {"success": True}
    entries = (await client.get(f"/api/students/{sid}/rent")).json()["entries"]
    assert (entries[0]["date"], entries[0]["rent_paid"], entries[0]["remaining"]) == ("2024-05-02", 2500, 2000)

    assert (await client.delete(f"/api/rent_payments/{first['id']}")).json() == {"success": True}
    assert len((await client.get(f"/api/students/{sid}/rent")).json()["entries"]) == 1


async def test_rent_entry_not_found(client):
    response = await client.delete("/api/rent_payments/41")
    assert response.json() == {"success": False, "message": "Rent entry not found"}
    response = await client.put("/api/rent_payments/41", json={"rent_paid": 1})
    assert response.json() == {"success": False, "message": "Rent entry not found"}


async def test_extra_food_entries_crud(client, add_student):
    asha = await add_student("Asha")
    sid = asha["id"]

    entry = (await client.post(
        f"/api/students/{sid}/extra-food", json={"date": "2024-05-04", "amount": 80, "remaining": ""}
    )).json()["entry"]
    assert entry["amount"] == 80
    assert entry["remaining"] == 0

    response = await client.put(f"/api/extra_food/{entry['id']}", json={"date": "2024-05-04", "amount": 95})
    assert response.json() == {"success": True}
    entries = (await client.get(f"/api/students/{sid}/extra-food")).json()["entries"]
    assert entries[0]["amount"] == 95

    assert (await client.delete(f"/api/extra_food/{entry['id']}")).json() == {"success": True}
    assert (await client.delete(f"/api/extra_food/{entry['id']}")).json() == {
        "success": False,
        "message": "Extra food entry not found",
    }


async def test_non_numeric_amount_is_rejected(client, add_student):
    asha = await add_student("Asha")
    response = await client.post(f"/api/students/{asha['id']}/rent", json={"rent_paid": "lots"})
    assert response.status_code == 400
    assert response.json()["success"] is False


async def test_fractional_amounts_truncate_to_whole_units(client, add_student):
    asha = await add_student("Asha")
    sid = asha["id"]

    rent = (await client.post(f"/api/students/{sid}/rent", json={"date": "2024-05-01", "rent_paid": "12.5"})).json()
    assert rent["entry"]["rent_paid"] == 12
    food = (await client.post(f"/api/students/{sid}/extra-food", json={"date": "2024-05-01", "amount": 12.7})).json()
    assert food["entry"]["amount"] == 12
