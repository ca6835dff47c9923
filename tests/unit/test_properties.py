"""Tests for build property publishing."""

from commitstamp.core.feedback import FakeFeedback
from commitstamp.core.properties import publish_property


def test_publish_sets_entry() -> None:
    properties: dict[str, str] = {}
    feedback = FakeFeedback()

    assert publish_property(properties, "vcs.commit.id", "abc123", feedback)

    assert properties == {"vcs.commit.id": "abc123"}
    assert feedback.errors == []


def test_publish_overwrites_existing_entry() -> None:
    properties = {"vcs.commit.id": "old", "other": "kept"}

    publish_property(properties, "vcs.commit.id", "new", FakeFeedback())

    assert properties == {"vcs.commit.id": "new", "other": "kept"}


def test_empty_name_reports_error_and_writes_nothing() -> None:
    properties: dict[str, str] = {}
    feedback = FakeFeedback()

    assert not publish_property(properties, "", "abc123", feedback)

    assert properties == {}
    assert len(feedback.errors) == 1
    assert "property_name" in feedback.errors[0]


def test_none_name_reports_error() -> None:
    feedback = FakeFeedback()

    assert not publish_property({}, None, "abc123", feedback)
    assert feedback.errors
