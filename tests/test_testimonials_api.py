"""
Tests for /api/Testimonials and the approval flow.
"""

import logging
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from dancesite.models import Testimonial, utcnow


@pytest.fixture
def approved_testimonial(db: Session) -> Testimonial:
    record = Testimonial(
        client_name="Anna",
        role="Student",
        text="Great instructor!",
        rating=5,
        is_approved=True,
        created_at_utc=utcnow() - timedelta(days=1),
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def _testimonial_body(**overrides) -> dict:
    body = {"clientName": "Erik", "role": "Organizer", "text": "Fantastic workshop", "rating": 4}
    body.update(overrides)
    return body


def test_submitted_testimonial_waits_for_approval(client: TestClient, approved_testimonial):
    response = client.post("/api/Testimonials", json=_testimonial_body())

    assert response.status_code == 201
    created = response.json()
    assert created["isApproved"] is False

    public = client.get("/api/Testimonials").json()
    assert [t["id"] for t in public] == [approved_testimonial.id]

    everything = client.get("/api/Testimonials", params={"includeUnapproved": "true"}).json()
    # Newest first
    assert [t["id"] for t in everything] == [created["id"], approved_testimonial.id]


def test_approve(client: TestClient):
    created = client.post("/api/Testimonials", json=_testimonial_body()).json()

    response = client.put(f"/api/Testimonials/{created['id']}/approve")

    assert response.status_code == 200
    assert response.json()["isApproved"] is True
    assert [t["id"] for t in client.get("/api/Testimonials").json()] == [created["id"]]


def test_approve_unknown(client: TestClient):
    response = client.put("/api/Testimonials/31/approve")

    assert response.status_code == 404
    assert response.json()["message"] == "Testimonial with ID 31 was not found."


@pytest.mark.parametrize("rating", [0, 6])
def test_rating_must_be_one_to_five(client: TestClient, rating):
    response = client.post("/api/Testimonials", json=_testimonial_body(rating=rating))

    assert response.status_code == 400
    assert any(p["field"] == "rating" for p in response.json()["errors"])


def test_text_is_required(client: TestClient):
    response = client.post("/api/Testimonials", json=_testimonial_body(text=""))

    assert response.status_code == 400


def test_get_and_delete(client: TestClient, approved_testimonial):
    fetched = client.get(f"/api/Testimonials/{approved_testimonial.id}")
    assert fetched.status_code == 200
    assert fetched.json()["clientName"] == "Anna"

    assert client.delete(f"/api/Testimonials/{approved_testimonial.id}").status_code == 204
    assert client.get(f"/api/Testimonials/{approved_testimonial.id}").status_code == 404
    assert client.delete(f"/api/Testimonials/{approved_testimonial.id}").status_code == 404


def test_operations_are_logged(client: TestClient, approved_testimonial, caplog):
    with caplog.at_level(logging.INFO, logger="dancesite.domain.testimonials.router"):
        client.get("/api/Testimonials")
        client.get(f"/api/Testimonials/{approved_testimonial.id}")
        client.post("/api/Testimonials", json=_testimonial_body())

    messages = [
        r.getMessage()
        for r in caplog.records
        if r.name == "dancesite.domain.testimonials.router" and r.levelno == logging.INFO
    ]
    assert messages == [
        "Fetching testimonials (includeUnapproved=False)",
        f"Fetching testimonial with ID {approved_testimonial.id}",
        "Creating new testimonial from Erik (rating 4)",
    ]
