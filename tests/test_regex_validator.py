import re

import pytest

from odm.validation.message import Message
from odm.validation.regex import Regex
from odm.validation.validation import Validation

DATE = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"


class Context:
    """Minimalan kontekst: get_value + append_message."""

    def __init__(self, **values):
        self.values = values
        self.messages = []

    def get_value(self, attribute):
        return self.values.get(attribute)

    def append_message(self, message):
        self.messages.append(message)


def test_valid_value_passes_without_message():
    ctx = Context(date="2020-01-01")
    assert Regex({"pattern": DATE}).validate(ctx, "date") is True
    assert ctx.messages == []


def test_invalid_value_appends_default_message():
    ctx = Context(date="2020-1-01")
    assert Regex({"pattern": DATE}).validate(ctx, "date") is False
    assert ctx.messages == [
        Message("Value of field 'date' doesn't match regular expression", "date", "Regex")
    ]


def test_custom_message_overrides_default():
    ctx = Context(date="nope")
    Regex({"pattern": DATE, "message": "Bad date"}).validate(ctx, "date")
    assert [str(m) for m in ctx.messages] == ["Bad date"]


def test_custom_message_field_placeholder_and_label():
    ctx = Context(date="nope")
    Regex({"pattern": DATE, "message": ":field is wrong", "label": "Birth date"}).validate(ctx, "date")
    assert ctx.messages[0].message == "Birth date is wrong"


def test_partial_match_is_rejected():
    ctx = Context(code="abc123")
    assert Regex({"pattern": r"[0-9]+"}).validate(ctx, "code") is False
    assert len(ctx.messages) == 1


def test_unanchored_pattern_matching_whole_value_passes():
    ctx = Context(code="123")
    assert Regex({"pattern": r"[0-9]+"}).validate(ctx, "code") is True


@pytest.mark.parametrize("pattern", ["[0-9", "(?P<x", "a{4294967296}", None, 42])
def test_malformed_or_missing_pattern_fails_closed(pattern):
    ctx = Context(code="123")
    assert Regex({"pattern": pattern}).validate(ctx, "code") is False
    assert ctx.messages[0].type == "Regex"


def test_compiled_pattern_is_accepted():
    ctx = Context(code="ab")
    assert Regex({"pattern": re.compile(r"[a-z]+")}).validate(ctx, "code") is True


def test_none_and_numbers_are_compared_as_text():
    ctx = Context(year=2020, missing=None)
    assert Regex({"pattern": r"\d{4}"}).validate(ctx, "year") is True
    assert Regex({"pattern": r"\d{4}"}).validate(ctx, "missing") is False


def test_allow_empty():
    ctx = Context(date="", other=None)
    validator = Regex({"pattern": DATE, "allow_empty": True})
    assert validator.validate(ctx, "date") is True
    assert validator.validate(ctx, "other") is True
    assert ctx.messages == []


def test_message_is_immutable():
    msg = Message("text", "field", "Regex")
    with pytest.raises(Exception):
        msg.message = "other"


def test_through_validation_context():
    validation = Validation().add("date", Regex({"pattern": DATE}))
    assert validation.validate({"date": "2020-01-01"}) == []
    messages = validation.validate({"date": "01/01/2020"})
    assert [(m.field, m.type) for m in messages] == [("date", "Regex")]


def test_pattern_compiled_once_and_recompiled_on_change():
    validator = Regex({"pattern": r"[a-z]+"})
    assert validator._compiled() is validator._compiled()

    ctx = Context(code="123")
    assert validator.validate(ctx, "code") is False

    validator.set_option("pattern", r"[0-9]+")
    assert validator._compiled().pattern == r"[0-9]+"
    assert validator.validate(ctx, "code") is True


def test_overflowing_repeat_count_does_not_escape_validation():
    validation = Validation().add("code", Regex({"pattern": "a{4294967296}"}))
    messages = validation.validate({"code": "a"})
    assert [m.type for m in messages] == ["Regex"]
