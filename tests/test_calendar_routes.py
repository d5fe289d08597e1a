def create_day(client, day="Monday"):
    return client.post("/create-date", json={"day": day})


def add_slot(client, time, day="Monday", booking=""):
    return client.post("/add-timeslot", json={"day": day, "time": time, "booking": booking})


def slot_labels(res):
    return [s["time"] for s in res.json()["date"]["times"]]


def test_create_date(client):
    res = create_day(client)
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["date"]["day"] == "Monday"
    assert body["date"]["times"] == []
    assert body["message"] == "Date added successfully"


def test_create_date_twice_conflicts(client):
    create_day(client)
    res = create_day(client)
    assert res.status_code == 400
    assert res.json() == {"success": False, "errors": "A date entry already exists for this day"}


def test_add_timeslot_inserts_in_chronological_order(client):
    create_day(client)
    add_slot(client, "9:00am-10:00am")
    res = add_slot(client, "8:00am-9:00am")

    assert res.status_code == 200
    assert res.json()["message"] == "Time added Successfully"
    assert slot_labels(res) == ["8:00am-9:00am", "9:00am-10:00am"]


def test_add_timeslot_sorts_across_noon(client):
    create_day(client)
    for label in ["1:00pm-2:00pm", "11:00am-12:00pm", "12:00pm-1:00pm", "9:30am-10:30am"]:
        res = add_slot(client, label)

    assert slot_labels(res) == ["9:30am-10:30am", "11:00am-12:00pm", "12:00pm-1:00pm", "1:00pm-2:00pm"]

    stored = client.post("/get-date", json={"day": "Monday"})
    assert slot_labels(stored) == slot_labels(res)


def test_add_timeslot_keeps_initial_booking(client):
    create_day(client)
    res = add_slot(client, "9:00am-10:00am", booking="Walk-in")
    assert res.json()["date"]["times"] == [{"time": "9:00am-10:00am", "booking": "Walk-in"}]


def test_add_duplicate_timeslot_conflicts_and_leaves_day_unchanged(client):
    create_day(client)
    add_slot(client, "9:00am-10:00am", booking="Walk-in")

    res = add_slot(client, "9:00am-10:00am", booking="Someone else")
    assert res.status_code == 400
    assert res.json() == {"success": False, "errors": "This timeslot already exists."}

    stored = client.post("/get-date", json={"day": "Monday"}).json()
    assert stored["date"]["times"] == [{"time": "9:00am-10:00am", "booking": "Walk-in"}]


def test_add_timeslot_to_missing_day(client):
    res = add_slot(client, "9:00am-10:00am", day="Tuesday")
    assert res.status_code == 404
    assert res.json() == {"success": False, "errors": "Date entry not found."}


def test_add_timeslot_rejects_unparseable_label(client):
    create_day(client)
    res = add_slot(client, "whenever")
    assert res.status_code == 400
    assert res.json()["success"] is False


def test_add_timeslot_rejects_label_without_am_pm(client):
    create_day(client)
    add_slot(client, "9:00am-10:00am")

    res = add_slot(client, "1:00-2:00")
    assert res.status_code == 400
    assert res.json()["success"] is False

    stored = client.post("/get-date", json={"day": "Monday"})
    assert slot_labels(stored) == ["9:00am-10:00am"]


def test_get_date_miss_returns_placeholder(client):
    res = client.post("/get-date", json={"day": "Nonexistent"})
    assert res.status_code == 200
    assert res.json() == {"success": True, "date": {"day": "Nonexistent", "times": "Date not found"}}


def test_book_treatment_writes_booking_and_flags_user(client, signup):
    token = signup(username="aluser")
    create_day(client)
    add_slot(client, "9:00am-10:00am")
    add_slot(client, "8:00am-9:00am")

    res = client.post(
        "/book-treatment",
        json={"name": "Al", "username": "aluser", "treatment": "Cut", "day": "Monday", "time": "8:00am-9:00am"},
    )
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Booking updated successfully"}

    times = client.post("/get-date", json={"day": "Monday"}).json()["date"]["times"]
    assert times == [
        {"time": "8:00am-9:00am", "booking": "Al (aluser) - Cut"},
        {"time": "9:00am-10:00am", "booking": ""},
    ]

    user = client.get("/getuserinfo", headers={"Authorization": f"Bearer {token}"}).json()["user"]
    assert user["treatmentType"] == "Treatment"


def test_book_treatment_overwrites_existing_booking(client, signup):
    signup(username="aluser")
    create_day(client)
    add_slot(client, "8:00am-9:00am", booking="Walk-in")

    for treatment in ("Cut", "Colour"):
        client.post(
            "/book-treatment",
            json={"name": "Al", "username": "aluser", "treatment": treatment, "day": "Monday", "time": "8:00am-9:00am"},
        )

    times = client.post("/get-date", json={"day": "Monday"}).json()["date"]["times"]
    assert times == [{"time": "8:00am-9:00am", "booking": "Al (aluser) - Colour"}]


def test_book_treatment_unknown_slot_and_user_still_succeeds(client):
    create_day(client)
    add_slot(client, "8:00am-9:00am")

    res = client.post(
        "/book-treatment",
        json={"name": "Ghost", "username": "nobody", "treatment": "Cut", "day": "Monday", "time": "7:00am-8:00am"},
    )
    assert res.status_code == 200
    assert res.json()["success"] is True

    times = client.post("/get-date", json={"day": "Monday"}).json()["date"]["times"]
    assert times == [{"time": "8:00am-9:00am", "booking": ""}]


def test_book_treatment_missing_day(client):
    res = client.post(
        "/book-treatment",
        json={"name": "Al", "username": "aluser", "treatment": "Cut", "day": "Sunday", "time": "8:00am-9:00am"},
    )
    assert res.status_code == 404
    assert res.json()["errors"] == "Date entry not found."
