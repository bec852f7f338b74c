def test_create_read_update_against_memory_storage(memory_client):
    r = memory_client.get("/profiles")
    assert r.status_code == 200
    assert r.json() == []

    r = memory_client.post(
        "/profiles",
        json={"firstName": "Jane", "lastName": "Doe", "dateOfBirth": "01/01/1990"},
    )
    assert r.status_code == 201
    created = r.json()
    assert created["id"] == 1
    assert created["dateOfBirth"] == "1990-01-01T00:00:00.000Z"

    r = memory_client.post(
        "/profiles",
        json={"firstName": "John", "lastName": "Smith", "dateOfBirth": "15/06/1985"},
    )
    assert r.json()["id"] == 2

    r = memory_client.put(
        "/profiles/1",
        json={"firstName": "Janet", "lastName": "Doe-Smith", "dateOfBirth": "31/12/1999"},
    )
    assert r.status_code == 200
    assert r.json() == {
        "id": 1,
        "firstName": "Janet",
        "lastName": "Doe-Smith",
        "dateOfBirth": "1999-12-31T00:00:00.000Z",
    }

    r = memory_client.get("/profiles/1")
    assert r.json()["firstName"] == "Janet"

    r = memory_client.get("/profiles")
    assert [p["id"] for p in r.json()] == [1, 2]


def test_update_unknown_profile_is_not_found(memory_client):
    r = memory_client.put(
        "/profiles/77",
        json={"firstName": "Nobody", "lastName": "Here", "dateOfBirth": "01/01/2000"},
    )
    assert r.status_code == 404


def test_readiness_reports_memory_backend(memory_client):
    r = memory_client.get("/health/ready")
    assert r.status_code == 200
    assert r.json()["storage"] == "memory"
