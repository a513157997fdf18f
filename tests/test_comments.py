# tests/test_comments.py
from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)


def make_ticket() -> int:
    r = client.post("/api/tickets", json={"title": "Printer broken", "description": "No toner"})
    assert r.status_code == 201
    return r.json()["id"]


def make_comment(ticket_id: int, text: str = "On it") -> dict:
    r = client.post(f"/api/tickets/{ticket_id}/comments", json={"text": text})
    assert r.status_code == 201
    return r.json()


def test_create_and_get_comment():
    tid = make_ticket()
    r = client.post(f"/api/tickets/{tid}/comments", json={"text": "Replaced toner"})
    assert r.status_code == 201
    data = r.json()
    assert isinstance(data["id"], int)
    assert data["ticketId"] == tid
    assert data["text"] == "Replaced toner"
    assert data["createdAt"]
    assert r.headers["location"].endswith(f"/api/tickets/{tid}/comments/{data['id']}")

    r2 = client.get(f"/api/tickets/{tid}/comments/{data['id']}")
    assert r2.status_code == 200
    assert r2.json() == data


def test_create_comment_does_not_touch_ticket_updated_at():
    tid = make_ticket()
    before = client.get(f"/api/tickets/{tid}").json()["updatedAt"]
    make_comment(tid)
    assert client.get(f"/api/tickets/{tid}").json()["updatedAt"] == before


def test_create_comment_on_missing_ticket_returns_404():
    r = client.post("/api/tickets/9999999/comments", json={"text": "hello"})
    assert r.status_code == 404
    assert r.json()["error"] == "Ticket with id=9999999 could not be found."


def test_create_comment_validation():
    tid = make_ticket()

    r = client.post(f"/api/tickets/{tid}/comments", json={"text": "x" * 501})
    assert r.status_code == 400
    assert r.json()["error"] == "Request validation failed."

    assert client.post(f"/api/tickets/{tid}/comments", json={"text": ""}).status_code == 400
    assert client.post(f"/api/tickets/{tid}/comments", json={"text": "  "}).status_code == 400
    assert client.post(f"/api/tickets/{tid}/comments", json={}).status_code == 400

    assert client.get(f"/api/tickets/{tid}/comments").json() == []
    assert client.get(f"/api/tickets/{tid}").json()["comments"] == []


def test_validation_runs_before_ticket_lookup():
    r = client.post("/api/tickets/9999999/comments", json={"text": "x" * 501})
    assert r.status_code == 400


def test_create_comment_accepts_maximum_length():
    tid = make_ticket()
    assert make_comment(tid, "x" * 500)["text"] == "x" * 500


def test_list_comments_oldest_first():
    tid = make_ticket()
    ids = [make_comment(tid, text)["id"] for text in ("first", "second", "third")]

    r = client.get(f"/api/tickets/{tid}/comments")
    assert r.status_code == 200
    data = r.json()
    assert [c["id"] for c in data] == ids
    assert [c["text"] for c in data] == ["first", "second", "third"]


def test_list_comments_scoped_to_ticket():
    first = make_ticket()
    second = make_ticket()
    make_comment(first, "on first")

    assert client.get(f"/api/tickets/{second}/comments").json() == []
    assert len(client.get(f"/api/tickets/{first}/comments").json()) == 1


def test_list_comments_missing_ticket_returns_404():
    r = client.get("/api/tickets/9999999/comments")
    assert r.status_code == 404
    assert "error" in r.json()


def test_get_comment_under_wrong_ticket_is_404():
    owner = make_ticket()
    other = make_ticket()
    cid = make_comment(owner)["id"]

    r = client.get(f"/api/tickets/{other}/comments/{cid}")
    assert r.status_code == 404
    assert r.json()["error"] == f"Comment with id={cid} could not be found for ticket id={other}."


def test_get_comment_missing_ticket_or_comment():
    tid = make_ticket()
    assert client.get(f"/api/tickets/{tid}/comments/9999999").status_code == 404
    assert client.get("/api/tickets/9999999/comments/1").status_code == 404


def test_delete_comment():
    tid = make_ticket()
    keep = make_comment(tid, "keep")
    drop = make_comment(tid, "drop")

    r = client.delete(f"/api/tickets/{tid}/comments/{drop['id']}")
    assert r.status_code == 204
    assert r.content == b""

    assert client.get(f"/api/tickets/{tid}/comments/{drop['id']}").status_code == 404
    assert client.get(f"/api/tickets/{tid}/comments").json() == [keep]
    assert client.delete(f"/api/tickets/{tid}/comments/{drop['id']}").status_code == 404


def test_delete_comment_under_wrong_ticket_is_404_and_keeps_comment():
    owner = make_ticket()
    other = make_ticket()
    comment = make_comment(owner)

    r = client.delete(f"/api/tickets/{other}/comments/{comment['id']}")
    assert r.status_code == 404
    assert client.get(f"/api/tickets/{owner}/comments/{comment['id']}").json() == comment


def test_delete_ticket_then_list_comments_is_404():
    tid = make_ticket()
    make_comment(tid)
    assert client.delete(f"/api/tickets/{tid}").status_code == 204
    assert client.get(f"/api/tickets/{tid}/comments").status_code == 404

