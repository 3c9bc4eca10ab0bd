"""Tests for the duraspan error hierarchy and user messages."""

import pytest

from duraspan.errors import (
    ConfigurationError,
    DuraspanError,
    ExtractionError,
    InvalidConfigError,
    MissingConfigError,
    ProcessingError,
    UnsupportedCultureError,
    format_error_for_cli,
    handle_error,
    is_recoverable,
)
from duraspan.errors.user_messages import (
    ERROR_MESSAGES,
    RECOVERY_SUGGESTIONS,
    get_recovery_suggestion,
    get_user_message,
)


class TestErrorHierarchy:
    """Tests for error classes."""

    @pytest.mark.parametrize("error_cls,parent", [
        (InvalidConfigError, ConfigurationError),
        (MissingConfigError, ConfigurationError),
        (UnsupportedCultureError, ConfigurationError),
        (ExtractionError, ProcessingError),
        (ConfigurationError, DuraspanError),
        (ProcessingError, DuraspanError),
    ])
    def test_subclassing(self, error_cls, parent):
        assert issubclass(error_cls, parent)

    def test_default_message(self):
        error = ExtractionError()

        assert error.message == "Extraction failed"
        assert str(error) == "Extraction failed"
        assert error.details == {}

    def test_user_message_override(self):
        error = InvalidConfigError("bad", user_message="Fix the file")

        assert error.user_message == "Fix the file"

    def test_unsupported_culture_details(self):
        error = UnsupportedCultureError("fr-fr", ["zh-cn", "en-us"])

        assert error.culture == "fr-fr"
        assert error.supported == ["en-us", "zh-cn"]
        assert error.details == {"culture": "fr-fr", "supported": "en-us, zh-cn"}
        assert "fr-fr" in error.message

    def test_to_dict(self):
        error = MissingConfigError("gone", details={"path": "/tmp/x.json"})

        assert error.to_dict() == {
            "code": "MISSING_CONFIG",
            "message": "gone",
            "user_message": ERROR_MESSAGES["MISSING_CONFIG"],
            "recoverable": True,
            "details": {"path": "/tmp/x.json"},
            "recovery_suggestion": RECOVERY_SUGGESTIONS["MISSING_CONFIG"],
        }

    def test_is_recoverable(self):
        assert is_recoverable(InvalidConfigError())
        assert not is_recoverable(RuntimeError("boom"))


class TestUserMessages:
    """Tests for message lookup and formatting."""

    def test_every_code_has_suggestion(self):
        assert set(ERROR_MESSAGES) == set(RECOVERY_SUGGESTIONS)

    def test_lookup_by_code_string(self):
        assert get_user_message("UNSUPPORTED_CULTURE") == ERROR_MESSAGES["UNSUPPORTED_CULTURE"]

    def test_unknown_error_falls_back(self):
        assert get_user_message(KeyError("x")) == ERROR_MESSAGES["UNKNOWN_ERROR"]
        assert get_recovery_suggestion(KeyError("x")) == RECOVERY_SUGGESTIONS["UNKNOWN_ERROR"]

    def test_handle_error(self):
        message = handle_error(UnsupportedCultureError("fr-fr", ["en-us"]))

        assert message.startswith(ERROR_MESSAGES["UNSUPPORTED_CULTURE"])
        assert "duraspan cultures" in message

    def test_format_error_for_cli(self):
        output = format_error_for_cli(UnsupportedCultureError("fr-fr", ["en-us", "zh-cn"]))

        assert output.splitlines()[0] == (
            f"Error [UNSUPPORTED_CULTURE]: {ERROR_MESSAGES['UNSUPPORTED_CULTURE']}"
        )
        assert "Details:" in output
        assert "  culture: fr-fr" in output
        assert "  supported: en-us, zh-cn" in output

    def test_format_error_for_cli_without_details(self):
        output = format_error_for_cli(ExtractionError())

        assert "Details:" not in output
        assert "--file" in output
