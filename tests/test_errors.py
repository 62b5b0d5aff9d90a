"""Tests for tfdocgen.errors."""

from __future__ import annotations

from tfdocgen.errors import FileIOError, GenerationError, SchemaNotFoundError


def test_wrap_preserves_kind_and_chains_cause() -> None:
    original = FileIOError("disk full")

    wrapped = original.wrap("unable to render doc 'widget_thing'")

    assert isinstance(wrapped, FileIOError)
    assert str(wrapped) == "unable to render doc 'widget_thing': disk full"
    assert wrapped.__cause__ is original


def test_wrap_keeps_extra_attributes() -> None:
    original = SchemaNotFoundError("missing", provider_name="widget")

    wrapped = original.wrap("outer").wrap("outermost")

    assert isinstance(wrapped, SchemaNotFoundError)
    assert isinstance(wrapped, GenerationError)
    assert wrapped.provider_name == "widget"
    assert str(wrapped) == "outermost: outer: missing"
