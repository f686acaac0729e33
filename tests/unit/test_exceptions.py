"""Unit tests for the exception hierarchy."""

import pytest

from scenewriter.exceptions import (
    BundleError,
    ConfigurationError,
    ExportError,
    SceneWriterError,
    ValidationError,
    check_config_keys,
)


class TestSceneWriterError:
    """Test cases for SceneWriterError formatting."""

    def test_message_only(self):
        """A bare error carries the Error prefix."""
        assert str(SceneWriterError("Something failed")) == "Error: Something failed"

    def test_hint_and_details(self):
        """Hints and details are appended on their own lines."""
        error = SceneWriterError(
            "Bad input",
            hint="Try again",
            details={"file": "bundle.json", "line": 3},
        )

        assert str(error) == (
            "Error: Bad input\n"
            "Hint: Try again\n"
            "Details:\n"
            "  file: bundle.json\n"
            "  line: 3"
        )

    @pytest.mark.parametrize(
        "error_class", [ConfigurationError, ValidationError, BundleError, ExportError]
    )
    def test_hierarchy(self, error_class):
        """All errors share the base class."""
        assert issubclass(error_class, SceneWriterError)


class TestExportError:
    """Test cases for ExportError."""

    def test_details(self):
        """File name and cause are recorded as details."""
        cause = PermissionError("denied")
        error = ExportError("Failed to save", filename="a.docx", original_error=cause)

        assert error.filename == "a.docx"
        assert error.original_error is cause
        assert error.details == {
            "filename": "a.docx",
            "original_error": "PermissionError: denied",
        }

    def test_without_details(self):
        """Without context there are no details."""
        error = ExportError("Failed")

        assert error.details is None
        assert str(error) == "Error: Failed"


class TestCheckConfigKeys:
    """Test cases for check_config_keys."""

    def test_valid_keys(self):
        """Correct keys pass."""
        check_config_keys({"author_placeholder": "x", "font_name": "y"})

    @pytest.mark.parametrize(
        ("wrong", "correct"),
        [
            ("author", "author_placeholder"),
            ("font", "font_name"),
            ("font_size", "font_size_pt"),
            ("output", "output_dir"),
        ],
    )
    def test_wrong_keys(self, wrong, correct):
        """Misnamed keys raise with the correct name in the details."""
        with pytest.raises(ConfigurationError) as exc_info:
            check_config_keys({wrong: "value"})

        assert exc_info.value.details["correct_key"] == correct
