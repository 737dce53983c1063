"""Request-signing collaborator interface."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol


class SignatureService(Protocol):
    """Computes the per-request signature headers for the creator API.

    Implementations are shared by every client built with them and may be
    called concurrently, so any mutable state must be internally synchronised.
    """

    def sign(self, path: str, auth_id: str) -> Mapping[str, str]:
        """Return the signing headers for a request to ``path``."""
        ...
