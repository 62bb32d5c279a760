"""
Test suite for CLI validation functions.
"""

from pathlib import Path

import pytest

from lolhtml.cli.errors import CLIValidationError
from lolhtml.cli.validation import validate_bool, validate_path, validate_source_suffix


class TestValidatePath:
    """Test validate_path() function."""

    def test_valid_string_path(self):
        result = validate_path("/tmp/test.lol")
        assert isinstance(result, Path)
        assert str(result) == "/tmp/test.lol"

    def test_valid_path_object(self):
        input_path = Path("/tmp/test.lol")
        assert validate_path(input_path) == input_path

    def test_none_without_allow_none(self):
        with pytest.raises(CLIValidationError) as exc_info:
            validate_path(None)
        assert "got NoneType" in str(exc_info.value)

    def test_none_with_allow_none(self):
        assert validate_path(None, allow_none=True) is None

    def test_missing_file_is_not_checked(self, tmp_path):
        missing = tmp_path / "missing.lol"
        assert validate_path(missing) == missing

    def test_invalid_type(self):
        with pytest.raises(CLIValidationError) as exc_info:
            validate_path(123)
        assert str(exc_info.value) == "A file error was encountered. Expected a file path, got int."
        assert exc_info.value.code == "CLI_VALIDATION_ERROR"


class TestValidateBool:
    """Test validate_bool() function."""

    def test_true_and_false(self):
        assert validate_bool(True) is True
        assert validate_bool(False) is False

    def test_none(self):
        assert validate_bool(None, allow_none=True) is None
        with pytest.raises(CLIValidationError):
            validate_bool(None)

    def test_non_bool(self):
        with pytest.raises(CLIValidationError):
            validate_bool("yes")


class TestValidateSourceSuffix:
    """Test validate_source_suffix() function."""

    def test_lol_file(self):
        assert validate_source_suffix(Path("page.lol")) == Path("page.lol")

    @pytest.mark.parametrize("name", ["page.txt", "page", "page.lol.bak", "page.LOL"])
    def test_other_suffixes_rejected(self, name):
        with pytest.raises(CLIValidationError) as exc_info:
            validate_source_suffix(Path(name))
        assert str(exc_info.value) == "A file error was encountered. Only '.lol' files are accepted."

    def test_custom_suffix(self):
        assert validate_source_suffix(Path("page.lolz"), ".lolz") == Path("page.lolz")
