from __future__ import annotations

from click.testing import CliRunner

from app import demo


def test_root_redirects_to_summary(client) -> None:
    response = client.get("/")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/garage")


def test_summary_of_new_garage(client) -> None:
    data = client.get("/garage").get_json()

    assert data["levels"] == 2
    assert data["total_lots"] == 4
    assert data["free_lots"] == 4
    assert data["occupied_lots"] == 0


def test_enter_lookup_exit(client) -> None:
    response = client.post("/vehicles", json={"identifier": "car1"})
    assert response.status_code == 201
    assert response.get_json() == {"identifier": "car1", "level": 0, "lot": 0}

    response = client.post("/vehicles", data={"identifier": "bike1", "kind": "motorbike"})
    assert response.status_code == 201
    assert response.get_json()["lot"] == 1

    assert client.get("/vehicles/bike1").get_json() == {"identifier": "bike1", "level": 0, "lot": 1}
    assert client.get("/vehicles").get_json() == [
        {"identifier": "car1", "kind": "car", "level": 0, "lot": 0},
        {"identifier": "bike1", "kind": "motorbike", "level": 0, "lot": 1},
    ]

    response = client.delete("/vehicles/car1")
    assert response.status_code == 200
    assert response.get_json() == {"identifier": "car1", "level": 0, "lot": 0}
    assert client.get("/vehicles/car1").status_code == 404
    assert client.delete("/vehicles/car1").status_code == 404


def test_duplicate_entry_is_bad_request(client) -> None:
    client.post("/vehicles", json={"identifier": "car1"})

    response = client.post("/vehicles", json={"identifier": "car1"})

    assert response.status_code == 400
    body = response.get_json()
    assert body["error"] == "duplicate_vehicle"
    assert body["level"] == 0
    assert client.get("/garage").get_json()["occupied_lots"] == 1


def test_full_garage_is_conflict(client) -> None:
    for i in range(4):
        assert client.post("/vehicles", json={"identifier": f"c{i}"}).status_code == 201

    response = client.post("/vehicles", json={"identifier": "late"})

    assert response.status_code == 409
    assert response.get_json()["error"] == "garage_full"


def test_missing_identifier_and_unknown_kind(client) -> None:
    response = client.post("/vehicles", json={})
    assert response.status_code == 400
    assert response.get_json()["error"] == "MissingIdentifierError"

    response = client.post("/vehicles", json={"identifier": "t1", "kind": "truck"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "InvalidArgumentError"


def test_unknown_route_renders_json(client) -> None:
    response = client.get("/nowhere")

    assert response.status_code == 404
    assert response.get_json()["error"] == "Not Found"


def test_demo_command() -> None:
    result = CliRunner().invoke(demo, [])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == (
        "Garage(ParkingLevel(level=0, lots=4, occupied=[motorbike1@0, car1@1]), "
        "ParkingLevel(level=1, lots=4, occupied=[]))"
    )
    assert lines[1].startswith("Garage(ParkingLevel(level=0, lots=4, occupied=[motorbike1@0])")
    assert lines[2] == "Car{identifier='car1'} is not parked"
    assert lines[3] == "Motorbike{identifier='motorbike1'} at level 0, lot 0"


def test_non_string_identifier_is_bad_request(client) -> None:
    response = client.post("/vehicles", json={"identifier": 5})

    assert response.status_code == 400
    assert response.get_json()["error"] == "MissingIdentifierError"


def test_non_string_kind_is_bad_request(client) -> None:
    response = client.post("/vehicles", json={"identifier": "a", "kind": 3})

    assert response.status_code == 400
    assert response.get_json()["error"] == "InvalidArgumentError"
    assert client.get("/garage").get_json()["occupied_lots"] == 0


def test_list_body_is_bad_request(client) -> None:
    response = client.post("/vehicles", json=["car1"])

    assert response.status_code == 400
    assert response.get_json()["error"] == "Bad Request"
