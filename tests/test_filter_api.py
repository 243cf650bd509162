from datetime import date


def test_spring_scenario_matches_single_borrow(client, john_borrow):
    r = client.get("/borrows/filter", params={
        "bookTitle": "Spring",
        "isbn": "123456789",
        "available": "true",
        "userAge": 25,
        "archived": "false",
        "dob": "2000-01-01",
        "returned": "false",
    })
    assert r.status_code == 200
    body = r.json()
    assert len(body) == 1
    assert body[0]["id"] == john_borrow
    assert body[0]["borrow_date"] == date.today().isoformat()
    assert body[0]["book"] == {
        "id": 1, "title": "Spring Boot Guide", "isbn": "123456789", "available": True,
    }
    assert body[0]["user"] == {
        "id": 1, "name": "John Doe", "age": 24, "archived": False, "dob": "2000-01-01",
    }


def test_returned_true_matches_nothing(client, john_borrow):
    r = client.get("/borrows/filter", params={"returned": "true"})
    assert r.status_code == 200
    assert r.json() == []


def test_no_parameters_returns_all(client, john_borrow):
    r = client.get("/borrows/filter")
    assert r.status_code == 200
    assert [b["id"] for b in r.json()] == [john_borrow]


def test_empty_title_and_isbn_are_ignored(client, john_borrow):
    r = client.get("/borrows/filter?bookTitle=&isbn=")
    assert r.status_code == 200
    assert [b["id"] for b in r.json()] == [john_borrow]


def test_user_age_equal_to_bound_is_excluded(client, john_borrow):
    assert client.get("/borrows/filter", params={"userAge": 24}).json() == []
    assert len(client.get("/borrows/filter", params={"userAge": 25}).json()) == 1


def test_filter_sees_return_transition(client, john_borrow):
    client.post(f"/borrows/{john_borrow}/return")
    assert client.get("/borrows/filter", params={"returned": "false"}).json() == []
    assert len(client.get("/borrows/filter", params={"returned": "true"}).json()) == 1


def test_malformed_date_is_rejected(client, john_borrow):
    r = client.get("/borrows/filter", params={"dob": "01/01/2000"})
    assert r.status_code == 422


def test_malformed_boolean_is_rejected(client, john_borrow):
    r = client.get("/borrows/filter", params={"available": "maybe"})
    assert r.status_code == 422


def test_malformed_age_is_rejected(client, john_borrow):
    r = client.get("/borrows/filter", params={"userAge": "old"})
    assert r.status_code == 422


def test_out_of_range_age_is_rejected(client, john_borrow):
    r = client.get("/borrows/filter", params={"userAge": 10 ** 30})
    assert r.status_code == 422
    r = client.get("/borrows/filter", params={"userAge": 2 ** 63 - 1})
    assert r.status_code == 200
    assert len(r.json()) == 1
