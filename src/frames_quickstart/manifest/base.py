"""BaseSigner ABC and manifest serialization.

A signer turns an account identifier and a seed phrase into the frame
manifest document. The generator treats the document as an opaque JSON
object and writes it exactly as serialize_manifest() renders it.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

from pydantic import SecretStr

from frames_quickstart.models.config import ManifestSettings


class BaseSigner(ABC):
    """Abstract base class for manifest signers.

    Subclasses receive the manifest settings at construction and must not
    log, store or echo the secret phrase.
    """

    def __init__(self, settings: ManifestSettings | None = None) -> None:
        self.settings = settings or ManifestSettings()

    @abstractmethod
    def sign(self, account_id: str, secret_phrase: SecretStr) -> dict[str, Any]:
        """Produce the signed manifest document.

        Args:
            account_id: Numeric account identifier as typed by the user.
            secret_phrase: Seed phrase of the account's custody wallet.

        Returns:
            A JSON-compatible mapping.
        """
        ...


def serialize_manifest(manifest: dict[str, Any]) -> str:
    """Render a manifest as compact JSON, the form written to disk."""
    return json.dumps(manifest, separators=(",", ":"), ensure_ascii=False)
