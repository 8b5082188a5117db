import pytest

from app.lib.contact_validation import Submission, validate_submission


def _submission(**overrides):
    payload = {"firstName": "A", "lastName": "B", "email": "a@b.com", "message": "hi"}
    payload.update(overrides)
    return Submission.from_payload(payload)


def test_valid_submission_has_no_errors():
    result = validate_submission(_submission())
    assert result.valid is True
    assert result.errors == {}


@pytest.mark.parametrize(
    "field, message",
    [
        ("firstName", "First name is required"),
        ("lastName", "Last name is required"),
        ("email", "Please enter a valid email address"),
        ("message", "Message is required"),
    ],
)
def test_missing_field_reports_only_that_field(field, message):
    payload = {"firstName": "A", "lastName": "B", "email": "a@b.com", "message": "hi"}
    del payload[field]
    result = validate_submission(Submission.from_payload(payload))
    assert result.valid is False
    assert result.errors == {field: message}


def test_blank_names_and_message_are_rejected():
    result = validate_submission(_submission(firstName="   ", lastName="\t", message=" \n "))
    assert result.valid is False
    assert result.errors == {
        "firstName": "First name is required",
        "lastName": "Last name is required",
        "message": "Message is required",
    }


def test_bad_email_is_the_only_error():
    result = validate_submission(_submission(email="bad"))
    assert result.valid is False
    assert result.errors == {"email": "Please enter a valid email address"}


@pytest.mark.parametrize("email", ["a@b", "a b@c.com", "a@@b.com", "@b.com", "a@b.", "a@b.com\n", " a@b.com"])
def test_email_shape_rejections(email):
    assert "email" in validate_submission(_submission(email=email)).errors


@pytest.mark.parametrize("email", ["a@b.c", "first.last@sub.domain.org", "x@y.z.w", "weird!#$@host.tld"])
def test_email_check_stays_permissive(email):
    assert validate_submission(_submission(email=email)).valid is True


def test_message_over_limit():
    result = validate_submission(_submission(message="x" * 601))
    assert result.valid is False
    assert result.errors == {"message": "Message cannot exceed 600 characters"}


def test_message_at_limit_is_accepted():
    assert validate_submission(_submission(message="x" * 600)).valid is True


def test_message_length_counts_untrimmed_value():
    result = validate_submission(_submission(message=" " * 10 + "x" * 595))
    assert result.errors == {"message": "Message cannot exceed 600 characters"}


def test_all_failures_reported_together():
    result = validate_submission(Submission.from_payload({}))
    assert result.valid is False
    assert set(result.errors) == {"firstName", "lastName", "email", "message"}


def test_non_string_values_count_as_missing():
    sub = Submission.from_payload({"firstName": 1, "lastName": None, "email": ["a@b.com"], "message": "hi"})
    assert sub.first_name is None
    assert set(validate_submission(sub).errors) == {"firstName", "lastName", "email"}


def test_non_object_payload_is_empty_submission():
    assert Submission.from_payload(["a", "b"]) == Submission()
    assert Submission.from_payload(None) == Submission()


def test_result_is_immutable():
    result = validate_submission(_submission())
    with pytest.raises(Exception):
        result.valid = False
