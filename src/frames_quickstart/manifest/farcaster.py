"""Farcaster manifest signer backed by eth-account.

Builds a JSON Farcaster Signature binding the FID's custody address to the
configured domain, and pairs it with the template's frame metadata.
"""

from __future__ import annotations

import base64
import json
from typing import Any

from eth_account import Account
from eth_account.messages import encode_defunct
from pydantic import SecretStr

from frames_quickstart.errors import ManifestError
from frames_quickstart.manifest.base import BaseSigner


def b64url(data: bytes) -> str:
    """base64url without padding, as used by JSON Farcaster Signatures."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _compact(obj: dict[str, Any]) -> bytes:
    return json.dumps(obj, separators=(",", ":")).encode("utf-8")


class FarcasterSigner(BaseSigner):
    """Signs the account association with the custody wallet's key.

    The custody account is derived from the seed phrase on the default
    Ethereum path (m/44'/60'/0'/0/0).
    """

    def sign(self, account_id: str, secret_phrase: SecretStr) -> dict[str, Any]:
        try:
            fid = int(account_id.strip())
        except ValueError:
            raise ManifestError(f"FID must be a number, got {account_id!r}") from None

        Account.enable_unaudited_hdwallet_features()
        try:
            account = Account.from_mnemonic(secret_phrase.get_secret_value().strip())
        except Exception:
            # The library's message echoes the phrase back.
            raise ManifestError(
                "Could not derive a custody account from the seed phrase"
            ) from None

        header = {"fid": fid, "type": "custody", "key": account.address}
        payload = {"domain": self.settings.domain}
        encoded_header = b64url(_compact(header))
        encoded_payload = b64url(_compact(payload))

        signed = account.sign_message(
            encode_defunct(text=f"{encoded_header}.{encoded_payload}")
        )
        signature_hex = "0x" + bytes(signed.signature).hex()

        return {
            "accountAssociation": {
                "header": encoded_header,
                "payload": encoded_payload,
                "signature": b64url(signature_hex.encode("utf-8")),
            },
            "frame": self._frame_fields(),
        }

    def _frame_fields(self) -> dict[str, str]:
        s = self.settings
        home = s.home_url.rstrip("/")
        return {
            "version": s.frame_version,
            "name": s.frame_name,
            "homeUrl": home,
            "iconUrl": f"{home}/icon.png",
            "imageUrl": f"{home}/opengraph-image",
            "buttonTitle": s.button_title,
            "splashImageUrl": f"{home}/splash.png",
            "splashBackgroundColor": s.splash_background_color,
            "webhookUrl": f"{home}/api/webhook",
        }
