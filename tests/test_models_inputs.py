"""Tests for UserInputs validation."""

from __future__ import annotations

import pytest
from pydantic import SecretStr, ValidationError

from frames_quickstart.models.inputs import UserInputs, validate_account_id

VALID = {
    "project_name": "my-frame",
    "description": "A test frame",
    "account_id": "1234",
    "secret_phrase": SecretStr("test test test test test test test test test test test junk"),
}


class TestUserInputs:
    """Test UserInputs model."""

    def test_valid(self) -> None:
        inputs = UserInputs(**VALID)
        assert inputs.project_name == "my-frame"
        assert inputs.trimmed_name == "my-frame"

    @pytest.mark.parametrize(
        ("field", "message"),
        [
            ("project_name", "Project name cannot be empty"),
            ("description", "Description cannot be empty"),
            ("account_id", "FID cannot be empty"),
        ],
    )
    @pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
    def test_blank_fields_rejected(self, field: str, message: str, blank: str) -> None:
        with pytest.raises(ValidationError, match=message):
            UserInputs(**{**VALID, field: blank})

    def test_blank_secret_phrase_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Seed phrase cannot be empty"):
            UserInputs(**{**VALID, "secret_phrase": SecretStr("  ")})

    def test_non_numeric_fid_rejected(self) -> None:
        with pytest.raises(ValidationError, match="FID must be a number"):
            UserInputs(**{**VALID, "account_id": "alice"})

    def test_raw_values_kept(self) -> None:
        inputs = UserInputs(**{**VALID, "project_name": "  spaced  "})
        assert inputs.project_name == "  spaced  "
        assert inputs.trimmed_name == "spaced"

    def test_secret_not_in_repr_or_dump(self) -> None:
        inputs = UserInputs(**VALID)
        secret = VALID["secret_phrase"].get_secret_value()
        assert secret not in repr(inputs)
        assert secret not in str(inputs.model_dump())
        assert secret not in inputs.model_dump_json()

    def test_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValidationError, match="extra_forbidden"):
            UserInputs(**VALID, seed="x")


class TestFieldValidators:
    """Test the standalone validators used by the prompts."""

    def test_account_id_allows_surrounding_space(self) -> None:
        assert validate_account_id(" 42 ") == " 42 "

    def test_account_id_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match="must be a number"):
            validate_account_id("-5")
