"""Tests for agent reply shape detection, decoding and message extraction."""

import pytest

from n8n_bridge.agent.domain.reply import (
    Decoded,
    Malformed,
    RawReply,
    ReplyFields,
    classify,
    coerce_text,
    decode,
    extract_message,
    is_structured,
    strip_leading_newlines,
    unreadable_reason,
)


class TestIsStructured:
    @pytest.mark.parametrize("body", ['{"a": 1}', "[1, 2]", "{}", "[]", "{not json}"])
    def test_bracket_delimited_bodies_are_structured(self, body: str) -> None:
        assert is_structured(body) is True

    @pytest.mark.parametrize("body", ["Hello", "{open", "[1, 2}", "", "x{}"])
    def test_other_bodies_are_plain_text(self, body: str) -> None:
        assert is_structured(body) is False


class TestDecode:
    def test_valid_json_is_decoded(self) -> None:
        assert decode('{"result": "ok"}') == Decoded(value={"result": "ok"})

    def test_invalid_json_is_malformed(self) -> None:
        outcome = decode("{not json}")
        assert isinstance(outcome, Malformed)
        assert outcome.reason

    def test_control_characters_inside_strings_are_accepted(self) -> None:
        assert decode('{"result": "line1\nline2"}') == Decoded(
            value={"result": "line1\nline2"}
        )

    @pytest.mark.parametrize(
        "body",
        [
            "{'result': 'hi'}",
            '{result: "hi"}',
            '{"result": "hi",}',
            '{"result": "hi" /* note */}',
        ],
    )
    def test_relaxed_syntax_is_decoded(self, body: str) -> None:
        assert decode(body) == Decoded(value={"result": "hi"})


class TestUnreadableReason:
    def test_object_is_readable(self) -> None:
        assert unreadable_reason(Decoded(value={"other": 1})) is None

    def test_malformed_carries_its_reason(self) -> None:
        assert unreadable_reason(Malformed(reason="bad token")) == "bad token"

    @pytest.mark.parametrize("value", [[{"result": "x"}], 42, "text", None])
    def test_non_object_is_unreadable(self, value: object) -> None:
        assert unreadable_reason(Decoded(value=value))


class TestClassify:
    def test_object_with_result_is_reply_fields(self) -> None:
        assert classify({"result": "x"}) == ReplyFields(result="x")

    def test_object_without_message_fields_is_raw(self) -> None:
        assert classify({"unexpected": "value"}) == RawReply()

    def test_array_is_raw(self) -> None:
        assert classify([{"result": "x"}]) == RawReply()

    def test_scalar_is_raw(self) -> None:
        assert classify(42) == RawReply()

    def test_null_field_is_present_and_empty(self) -> None:
        assert classify({"result": None}) == ReplyFields(result="")


class TestReplyFieldsPriority:
    def test_result_beats_content_and_message(self) -> None:
        fields = ReplyFields(result="r", content="c", message="m")
        assert fields.first_present() == "r"

    def test_content_beats_message(self) -> None:
        assert ReplyFields(content="c", message="m").first_present() == "c"

    def test_message_is_last_resort(self) -> None:
        assert ReplyFields(message="m").first_present() == "m"

    def test_empty_but_present_result_still_wins(self) -> None:
        assert ReplyFields(result="", content="real text").first_present() == ""


class TestCoerceText:
    def test_string_is_verbatim(self) -> None:
        assert coerce_text("text") == "text"

    def test_null_is_empty(self) -> None:
        assert coerce_text(None) == ""

    def test_number_is_rendered(self) -> None:
        assert coerce_text(42) == "42"

    def test_object_is_compact_json(self) -> None:
        assert coerce_text({"a": [1, 2]}) == '{"a":[1,2]}'

    def test_non_ascii_is_preserved(self) -> None:
        assert coerce_text(["grüße"]) == '["grüße"]'


class TestExtractMessage:
    def test_malformed_falls_back_to_body(self) -> None:
        assert extract_message("{oops}", Malformed(reason="bad")) == "{oops}"

    def test_decoded_field_is_used(self) -> None:
        body = '{"content": "hi"}'
        assert extract_message(body, Decoded(value={"content": "hi"})) == "hi"

    def test_decoded_without_fields_falls_back_to_body(self) -> None:
        body = '{"unexpected":"value"}'
        assert extract_message(body, Decoded(value={"unexpected": "value"})) == body


class TestStripLeadingNewlines:
    def test_strips_only_leading_run(self) -> None:
        assert strip_leading_newlines("\n\nHello\nWorld\n") == "Hello\nWorld\n"

    def test_leaves_leading_spaces(self) -> None:
        assert strip_leading_newlines(" \nHello") == " \nHello"
