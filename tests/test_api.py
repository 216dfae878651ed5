"""HTTP surface: auth gating, status codes and response shapes."""

import logging

import pytest


def test_api_requires_login(client):
    response = client.get("/api/summary")
    assert response.status_code == 401
    assert response.get_json() == {"success": False, "message": "Authentication required."}


def test_pages_redirect_to_login(client):
    response = client.get("/")
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/Login")
    assert client.get("/Login").status_code == 200


def test_login_logout_cycle(client):
    bad = client.post("/api/login", json={"username": "admin1", "password": "nope"})
    assert bad.status_code == 401
    assert bad.get_json()["message"] == "Invalid credentials."
    assert client.get("/api/auth/status").get_json() == {"loggedIn": False}

    ok = client.post("/api/login", data={"username": "admin1", "password": "Aarav"})
    assert ok.get_json() == {"success": True, "message": "Login successful!"}
    assert client.get("/api/auth/status").get_json() == {"loggedIn": True, "username": "admin1"}
    assert client.get("/Login").status_code == 302

    out = client.post("/api/logout")
    assert out.get_json()["message"] == "Logged out successfully."
    assert client.get("/api/summary").status_code == 401


def test_forged_cookie_token_is_rejected(client):
    with client.session_transaction() as sess:
        sess["token"] = "not-a-real-token"
    assert client.get("/api/candidates/all").status_code == 401


def test_candidate_lifecycle(auth_client, ledger):
    created = auth_client.post(
        "/api/candidates", json={"name": "Asha", "age": 12, "phone": "9123456789", "gender": "Female"}
    )
    assert created.status_code == 201
    uid = created.get_json()["uid"]

    bad = auth_client.post("/api/candidates", json={"name": "Asha", "age": 2, "phone": "9123456789", "gender": "Female"})
    assert bad.status_code == 400
    assert bad.get_json() == {"success": False, "message": "Age must be at least 4."}

    found = auth_client.get(f"/api/candidates?searchTerm={uid}").get_json()
    assert found["success"] is True
    assert found["data"]["name"] == "Asha"
    assert found["data"]["logs"] == []

    assert auth_client.get("/api/candidates?searchTerm=zzz").status_code == 404

    rows = auth_client.get("/api/candidates/all?gender=Female&sort=name").get_json()["data"]
    assert [r["uid"] for r in rows] == [uid]
    assert auth_client.get("/api/candidates/all?sort=shoe").status_code == 400

    assert auth_client.delete(f"/api/candidates/{uid}").get_json()["success"] is True
    assert auth_client.delete(f"/api/candidates/{uid}").status_code == 404
    assert auth_client.delete("/api/candidates/abc").status_code == 400


def test_points_endpoints(auth_client, ledger):
    uid = ledger.add_candidate("Ravi")

    assert auth_client.post("/api/points", json={"uid": uid, "points": 15, "reason": "Quiz"}).status_code == 200
    assert auth_client.post("/api/points", json={"uid": 999, "points": 15, "reason": "Quiz"}).status_code == 404
    assert auth_client.post("/api/points", json={"uid": uid, "points": "x", "reason": "Quiz"}).status_code == 400
    assert ledger.points[-1].admin_username == "admin1"

    bulk = auth_client.post("/api/event-points", json={"uids": f"{uid}, 999, abc", "points": 5, "eventName": "Quiz"})
    assert bulk.status_code == 200
    assert bulk.get_json() == {
        "success": False,
        "message": "Points added to 1 user(s). Failed for UID(s): 999.",
        "results": {"success": [uid], "not_found": [999], "duplicate": [], "error": []},
    }

    empty = auth_client.post("/api/event-points", json={"uids": "", "points": 5, "eventName": "Quiz"}).get_json()
    assert empty["success"] is False
    assert empty["message"] == "No valid UIDs provided."

    assert auth_client.get("/api/events/search?term=qu").get_json() == {"success": True, "events": ["Quiz"]}
    participants = auth_client.get("/api/events/participants?eventName=Quiz").get_json()
    assert participants == {"success": True, "participants": [{"uid": uid, "name": "Ravi"}]}
    assert auth_client.get("/api/events/participants").status_code == 400


def test_bulk_setup_failure_is_a_server_error(auth_client, container, caplog):
    container.points_service._candidates.fail_existing = True
    with caplog.at_level(logging.WARNING, logger="event_manager.audit"):
        response = auth_client.post("/api/event-points", json={"uids": "1,2", "points": 5, "eventName": "Quiz"})
    assert response.status_code == 500
    assert response.get_json()["message"] == "Server error during bulk points add."
    assert "Attempted Add Event Points (Bulk)" in caplog.text


def test_attendance_endpoints(auth_client, ledger, caplog):
    uid = ledger.add_candidate("Meera")

    first = auth_client.post("/api/attendance", json={"uid": uid, "day": 1})
    assert first.get_json() == {"success": True, "message": "Attendance marked for Day 1."}
    assert auth_client.post("/api/attendance", json={"uid": uid, "day": 1}).status_code == 409
    assert auth_client.post("/api/attendance", json={"uid": 999, "day": 1}).status_code == 404
    assert auth_client.post("/api/attendance", json={"uid": uid, "day": 0}).status_code == 400

    with caplog.at_level(logging.INFO, logger="event_manager.audit"):
        bulk = auth_client.post("/api/attendance/bulk", json={"uids": [uid, 999], "day": 1}).get_json()
    assert bulk["results"] == {"success": [], "not_found": [999], "duplicate": [uid], "error": []}
    assert bulk["message"] == f"Already marked for Day 1: UID(s) {uid}. Failed for UID(s): 999."
    assert "Action: Marked Bulk Attendance" in caplog.text


def test_summary_and_backup(auth_client, ledger):
    uid = ledger.add_candidate("Asha")
    ledger.add_points(uid, 40, "Quiz")

    summary = auth_client.get("/api/summary").get_json()
    assert summary["success"] is True
    assert summary["stats"]["totalPoints"] == 40
    assert auth_client.get("/api/summary?gender=Robot").status_code == 400

    backup = auth_client.get("/api/backup/excel")
    assert backup.status_code == 200
    assert backup.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    assert "EventBackup-" in backup.headers["Content-Disposition"]


@pytest.mark.parametrize("path, status", [("/", 200), ("/leaderboard", 200), ("/missing.js", 404), ("/api/nope", 404)])
def test_page_catch_all(auth_client, path, status):
    assert auth_client.get(path).status_code == status


def test_second_login_revokes_the_old_token(auth_client, container):
    with auth_client.session_transaction() as sess:
        old_token = sess["token"]

    assert auth_client.post("/api/login", json={"username": "admin1", "password": "Aarav"}).status_code == 200

    with auth_client.session_transaction() as sess:
        new_token = sess["token"]
    assert new_token != old_token
    assert container.sessions.resolve(old_token) is None
    assert container.sessions.resolve(new_token).username == "admin1"


def test_dashboard_offers_candidate_delete(auth_client):
    page = auth_client.get("/").get_data(as_text=True)
    assert 'id="deleteCandidateBtn"' in page

    script = auth_client.get("/static/app.js")
    body = script.get_data(as_text=True)
    script.close()
    assert "`/candidates/${foundUid}`, { method: 'DELETE' }" in body
