"""Signer lookup from the configured ``signer`` setting.

``farcaster`` selects the builtin eth-account signer. Anything else must be
a ``package.module:ClassName`` reference to a BaseSigner subclass, e.g. a
signer that talks to a hardware wallet instead of reading a seed phrase.
"""

from __future__ import annotations

import importlib

from frames_quickstart.manifest.base import BaseSigner
from frames_quickstart.models.config import GeneratorConfig

FARCASTER = "farcaster"


def _farcaster_class() -> type[BaseSigner]:
    try:
        from frames_quickstart.manifest.farcaster import FarcasterSigner
    except ImportError as exc:
        raise ImportError(
            "The farcaster signer needs eth-account to derive the custody "
            "wallet from the seed phrase. Install it: pip install eth-account"
        ) from exc
    return FarcasterSigner


def _referenced_class(reference: str) -> object:
    module_path, sep, attr = reference.partition(":")
    if not sep or not module_path or not attr:
        raise ValueError(
            f"Signer '{reference}' is neither '{FARCASTER}' nor a "
            f"'package.module:ClassName' reference."
        )
    module = importlib.import_module(module_path)
    try:
        return getattr(module, attr)
    except AttributeError:
        raise ImportError(
            f"Signer module '{module_path}' defines no '{attr}'."
        ) from None


def resolve_signer(config: GeneratorConfig) -> BaseSigner:
    """Build the signer named by config.signer, bound to config.manifest.

    Raises:
        ValueError: The setting is malformed.
        ImportError: eth-account or the referenced module is missing.
        TypeError: The reference is not a BaseSigner subclass.
    """
    name = config.signer.strip()
    cls = _farcaster_class() if name == FARCASTER else _referenced_class(name)
    if not (isinstance(cls, type) and issubclass(cls, BaseSigner)):
        raise TypeError(
            f"Signer '{name}' must be a BaseSigner subclass implementing "
            f"sign(account_id, secret_phrase)."
        )
    return cls(config.manifest)
