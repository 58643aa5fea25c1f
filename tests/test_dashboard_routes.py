from urllib.parse import unquote
from uuid import uuid4

import pytest
from sqlmodel import SQLModel

from transcript_review.exceptions import ConfigurationError, TranscriptStoreError
from transcript_review.dependencies import get_repository
from transcript_review.main import app


def test_create_then_dashboard_lists_pending_row(client, ada_form):
    response = client.post("/transcripts", json=ada_form)

    assert response.status_code == 201
    created = response.json()
    assert created["status"] == "pending_review"
    assert created["status_label"] == "Pending Review"
    assert created["text"] == "Hello."
    assert created["approved_at"] is None

    dashboard = client.get("/").json()
    assert dashboard["config_error"] is None
    [row] = dashboard["transcripts"]
    assert row["id"] == created["id"]
    assert row["speaker_name"] == "Ada"
    assert row["review_link"] == f"http://testserver/review/{created['id']}"
    assert row["invite_available"] is False


@pytest.mark.parametrize(
    "field", ["speaker_name", "talk_title", "talk_date", "original_text"]
)
def test_create_rejects_missing_required_field(client, ada_form, field):
    del ada_form[field]

    response = client.post("/transcripts", json=ada_form)

    assert response.status_code == 422
    assert client.get("/").json()["transcripts"] == []


def test_create_rejects_blank_text(client, ada_form):
    ada_form["speaker_name"] = "   "

    assert client.post("/transcripts", json=ada_form).status_code == 422


def test_create_treats_blank_email_as_unset(client, ada_form):
    ada_form["reviewer_email"] = ""

    created = client.post("/transcripts", json=ada_form).json()

    assert created["reviewer_email"] is None


def test_dashboard_orders_by_talk_date_descending(client, ada, grace):
    rows = client.get("/").json()["transcripts"]

    assert [r["talk_title"] for r in rows] == ["Nanoseconds", "Talk"]


def test_view_shows_revised_text_once_saved(client, repository, ada):
    repository.save_draft(ada.id, "Hello, world.")

    view = client.get(f"/transcripts/{ada.id}").json()

    assert view["text"] == "Hello, world."
    assert view["review_link"].endswith(f"/review/{ada.id}")


def test_view_shows_approval_date(client, repository, ada):
    repository.approve(ada.id, "Hello.")

    view = client.get(f"/transcripts/{ada.id}").json()

    assert view["status"] == "approved"
    assert view["status_label"] == "Approved"
    assert view["approved_at"] is not None


def test_view_unknown_transcript_is_404(client):
    assert client.get(f"/transcripts/{uuid4()}").status_code == 404
    assert client.get("/transcripts/nope").status_code == 404


def test_delete_requires_confirmation(client, ada):
    response = client.delete(f"/transcripts/{ada.id}")

    assert response.status_code == 400
    assert len(client.get("/").json()["transcripts"]) == 1


def test_delete_with_confirmation_removes_row(client, ada, grace):
    response = client.delete(f"/transcripts/{ada.id}", params={"confirm": "true"})

    assert response.status_code == 200
    rows = client.get("/").json()["transcripts"]
    assert [r["id"] for r in rows] == [str(grace.id)]


def test_delete_unknown_transcript_is_404(client):
    response = client.delete(f"/transcripts/{uuid4()}", params={"confirm": "true"})

    assert response.status_code == 404


def test_review_link_uses_request_origin(client, ada):
    response = client.get(f"/transcripts/{ada.id}/link")

    assert response.json() == {"review_link": f"http://testserver/review/{ada.id}"}


def test_invite_composes_mail_for_reviewer(client, grace):
    invite = client.get(f"/transcripts/{grace.id}/invite").json()

    assert invite["to"] == "grace@example.com"
    assert "Nanoseconds" in invite["subject"]
    assert invite["body"].startswith("Hi Grace,")
    assert f"http://testserver/review/{grace.id}" in invite["body"]
    assert invite["mailto"].startswith("mailto:grace@example.com?subject=")
    assert f"http://testserver/review/{grace.id}" in unquote(invite["mailto"])


def test_invite_without_email_is_rejected(client, ada):
    response = client.get(f"/transcripts/{ada.id}/invite")

    assert response.status_code == 400


def test_dashboard_shows_configuration_banner(client):
    class UnreachableRepository:
        def ping(self):
            raise ConfigurationError("Missing database configuration: POSTGRES_HOST")

    app.dependency_overrides[get_repository] = lambda: UnreachableRepository()

    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["transcripts"] == []
    assert "POSTGRES_HOST" in body["config_error"]


def test_create_failure_returns_backend_detail(client, repository, ada_form, monkeypatch):
    def failing_create(data):
        raise TranscriptStoreError(
            "create",
            message="duplicate key value violates unique constraint",
            details="Key (id) already exists.",
            hint="Retry with a new id.",
        )

    monkeypatch.setattr(repository, "create", failing_create)

    response = client.post("/transcripts", json=ada_form)

    assert response.status_code == 500
    assert response.json()["detail"] == {
        "operation": "create",
        "message": "duplicate key value violates unique constraint",
        "details": "Key (id) already exists.",
        "hint": "Retry with a new id.",
    }


def test_health_reports_ok(client):
    assert client.get("/health").json() == {"status": "ok", "detail": None}


def test_health_reports_unavailable(client):
    class UnreachableRepository:
        def ping(self):
            raise ConfigurationError("Unable to reach the transcript database.")

    app.dependency_overrides[get_repository] = lambda: UnreachableRepository()

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unavailable"


def test_missing_table_shows_banner_and_fails_reads(client, engine, ada):
    SQLModel.metadata.drop_all(engine)

    dashboard = client.get("/")
    view = client.get(f"/transcripts/{ada.id}")

    assert dashboard.status_code == 200
    assert dashboard.json()["transcripts"] == []
    assert "no such table" in dashboard.json()["config_error"]
    assert view.status_code == 500
    assert view.json()["detail"]["operation"] == "read"
