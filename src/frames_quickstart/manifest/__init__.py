"""Frame manifest signing - signer ABC, registry and serialization.

The builtin Farcaster signer is not re-exported here so that importing the
package does not require eth-account; resolve it through resolve_signer().
"""

from frames_quickstart.manifest.base import BaseSigner, serialize_manifest
from frames_quickstart.manifest.registry import resolve_signer

__all__ = [
    "BaseSigner",
    "resolve_signer",
    "serialize_manifest",
]
