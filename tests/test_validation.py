"""Tests for per-channel data validation."""

import pytest

from notify_templates.exceptions import TemplateDataError
from notify_templates.validation.result import ValidationResult
from notify_templates.validation.schema import validate_template
from notify_templates.variants import map_template


def test_valid_email_allows_extra_fields(make_template, email_data) -> None:
    template = make_template(data={**email_data, "preheader": "anything"})

    result = validate_template(template)

    assert result.is_valid
    assert result.as_tuple() == (True, None)


def test_email_missing_html_reports_locale_message(make_template, email_data) -> None:
    del email_data["html"]
    template = make_template(data=email_data, locale="pt-BR")

    ok, errors = validate_template(template).as_tuple()

    assert ok is False
    assert errors == {
        "html": "The `html` field on the `pt-BR` template is missing and is required."
    }


def test_email_reports_every_missing_field(make_template) -> None:
    result = validate_template(make_template(data={}))

    assert set(result.errors) == {"from", "subject", "text", "html"}
    assert result.errors["from"] == (
        "The `from` field on the `en` template is missing and is required."
    )


def test_email_wrong_type(make_template, email_data) -> None:
    template = make_template(data={**email_data, "subject": 42})

    result = validate_template(template)

    assert result.errors == {
        "subject": "The `subject` field on the `en` template must be a string."
    }


def test_text_requires_text(make_template) -> None:
    assert validate_template(make_template(type="text", data={"text": "hi"})).is_valid

    result = validate_template(make_template(type="text", data={}))

    assert list(result.errors) == ["text"]


def test_push_requires_title_topic_body(make_template) -> None:
    template = make_template(
        type="push",
        data={"title": "T", "body": "B", "custom": {"deep": {"x": [1, 2]}}},
    )

    result = validate_template(template)

    assert result.errors == {
        "topic": "The `topic` field on the `en` template is missing and is required."
    }


def test_webhook_valid(make_template) -> None:
    template = make_template(
        type="webhook",
        data={
            "method": "POST",
            "endpoint": "https://hooks.example.com/{{ user.id }}",
            "headers": {"Authorization": "Bearer {{ token }}"},
            "body": {"user": {"name": "{{ name }}"}},
        },
    )

    assert validate_template(template).is_valid


def test_webhook_requires_method_and_endpoint(make_template) -> None:
    result = validate_template(make_template(type="webhook", data={}))

    assert set(result.errors) == {"method", "endpoint"}


def test_webhook_rejects_unknown_method(make_template) -> None:
    template = make_template(
        type="webhook", data={"method": "FETCH", "endpoint": "https://x"}
    )

    result = validate_template(template)

    assert result.errors == {
        "method": (
            "The `method` field on the `en` template must be one of "
            "DELETE, GET, PATCH, POST, PUT."
        )
    }


def test_webhook_header_values_must_be_strings(make_template) -> None:
    template = make_template(
        type="webhook",
        data={"method": "GET", "endpoint": "https://x", "headers": {"X-Id": 5}},
    )

    result = validate_template(template)

    assert list(result.errors) == ["headers"]
    assert "`headers.X-Id`" in result.errors["headers"]


def test_validation_result_methods() -> None:
    r1 = ValidationResult.failure({"a": "first"})
    r1.add_error("b", "second")
    r1.add_error("a", "ignored")

    merged = r1.merge(ValidationResult.failure({"a": "other", "c": "third"}))

    assert merged.errors == {"a": "first", "b": "second", "c": "third"}
    assert not merged
    assert ValidationResult.success()


ACCEPTED_DATA = [
    (
        "email",
        {
            "from": "a@x",
            "cc": "c@x",
            "bcc": None,
            "reply_to": "r@x",
            "subject": "S",
            "text": "T",
            "html": "H",
        },
    ),
    ("email", {"from": "a@x", "subject": "S", "text": "T", "html": "H", "from_": 5}),
    ("text", {"text": "hi", "note": ["ignored"]}),
    ("push", {"title": "T", "topic": "t", "body": "B", "custom": None}),
    ("push", {"title": "T", "topic": "t", "body": "B", "custom": {"k": [1, "v"]}}),
    ("webhook", {"method": "GET", "endpoint": "https://x", "headers": None}),
    (
        "webhook",
        {"method": "PUT", "endpoint": "https://x", "headers": {}, "body": {"a": 1}},
    ),
]


@pytest.mark.parametrize(("type_", "data"), ACCEPTED_DATA)
def test_accepted_data_maps_to_a_view(make_template, type_, data) -> None:
    template = make_template(type=type_, data=data)

    assert validate_template(template).is_valid
    assert map_template(template).channel.value == type_


@pytest.mark.parametrize(
    ("type_", "data", "field", "message"),
    [
        (
            "email",
            {"from": "a@x", "subject": "S", "text": "T", "html": "H", "cc": ["c@x"]},
            "cc",
            "The `cc` field on the `en` template must be a string.",
        ),
        (
            "email",
            {"from": "a@x", "subject": "S", "text": "T", "html": "H", "reply_to": 1},
            "reply_to",
            "The `reply_to` field on the `en` template must be a string.",
        ),
        (
            "text",
            {"text": ["hi"]},
            "text",
            "The `text` field on the `en` template must be a string.",
        ),
        (
            "push",
            {"title": "T", "topic": "t", "body": "B", "custom": "oops"},
            "custom",
            "The `custom` field on the `en` template must be an object.",
        ),
        (
            "webhook",
            {"method": "POST", "endpoint": "https://x", "body": ["a"]},
            "body",
            "The `body` field on the `en` template must be an object.",
        ),
    ],
)
def test_data_the_view_rejects_fails_validation(
    make_template, type_, data, field, message
) -> None:
    template = make_template(type=type_, data=data)

    result = validate_template(template)

    assert result.errors == {field: message}
    with pytest.raises(TemplateDataError):
        map_template(template)
