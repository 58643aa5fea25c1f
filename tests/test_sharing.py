from datetime import date
from urllib.parse import parse_qs, urlsplit

from transcript_review.db_models import Transcript
from transcript_review.domain.sharing import (
    INVITE_MESSAGE,
    build_review_link,
    compose_invite,
    first_name,
)
from transcript_review.screens import TransientFlags


def make_transcript(**overrides):
    fields = dict(
        speaker_name="Ada Lovelace",
        reviewer_email="ada@example.com",
        talk_title="Notes & Engines",
        talk_date=date(2024, 1, 1),
        original_text="Hello.",
    )
    fields.update(overrides)
    return Transcript(**fields)


def test_review_link_joins_origin_and_id():
    assert build_review_link("https://x.org/", "abc") == "https://x.org/review/abc"
    assert build_review_link("https://x.org", "abc") == "https://x.org/review/abc"


def test_first_name():
    assert first_name("Ada Lovelace") == "Ada"
    assert first_name("Plato") == "Plato"
    assert first_name("") == ""


def test_invite_survives_mailto_encoding():
    transcript = make_transcript()
    link = build_review_link("https://x.org", transcript.id)

    invite = compose_invite(transcript, link)

    parts = urlsplit(invite.mailto)
    query = parse_qs(parts.query)
    assert parts.scheme == "mailto"
    assert parts.path == "ada@example.com"
    assert query["subject"] == [
        "Please review your talk transcript: Notes & Engines"
    ]
    body = query["body"][0]
    assert body.startswith("Hi Ada,\n\n")
    assert INVITE_MESSAGE in body
    assert link in body


def test_no_invite_without_email():
    assert compose_invite(make_transcript(reviewer_email=None), "link") is None
    assert compose_invite(make_transcript(reviewer_email=""), "link") is None


def test_effective_text_prefers_revision():
    assert make_transcript().effective_text == "Hello."
    assert make_transcript(revised_text="Edited.").effective_text == "Edited."


def test_transient_flags_expire(clock):
    flags = TransientFlags(2, clock)
    flags.mark("row")

    assert flags.is_set("row")
    assert not flags.is_set("other")

    clock.advance(1.9)
    assert flags.is_set("row")

    clock.advance(0.1)
    assert not flags.is_set("row")
