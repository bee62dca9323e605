"""User-provided values collected before generation starts.

The validators are plain functions so the interactive prompts can run the
same checks one field at a time and re-prompt on failure.
"""

from __future__ import annotations

from pydantic import BaseModel, SecretStr, field_validator


def _require(value: str, label: str) -> str:
    if value.strip() == "":
        raise ValueError(f"{label} cannot be empty")
    return value


def validate_project_name(value: str) -> str:
    return _require(value, "Project name")


def validate_description(value: str) -> str:
    return _require(value, "Description")


def validate_account_id(value: str) -> str:
    """Require a non-empty, all-digit Farcaster FID."""
    _require(value, "FID")
    if not value.strip().isdecimal():
        raise ValueError("FID must be a number")
    return value


def validate_secret_phrase(value: str) -> str:
    return _require(value, "Seed phrase")


class UserInputs(BaseModel):
    """The four values that drive one generation run.

    project_name and description are kept exactly as typed; the environment
    file receives them raw. Use ``trimmed_name`` for paths and package
    metadata. secret_phrase is a SecretStr and is masked in repr and dumps.
    """

    model_config = {"extra": "forbid", "frozen": True}

    project_name: str
    description: str
    account_id: str
    secret_phrase: SecretStr

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, v: str) -> str:
        return validate_project_name(v)

    @field_validator("description")
    @classmethod
    def _check_description(cls, v: str) -> str:
        return validate_description(v)

    @field_validator("account_id")
    @classmethod
    def _check_account_id(cls, v: str) -> str:
        return validate_account_id(v)

    @field_validator("secret_phrase")
    @classmethod
    def _check_secret_phrase(cls, v: SecretStr) -> SecretStr:
        validate_secret_phrase(v.get_secret_value())
        return v

    @property
    def trimmed_name(self) -> str:
        return self.project_name.strip()
