"""Default custom-claims providers."""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class IDefaultClaimsProvider(Protocol):
    """Supplies the claims used when a user has none of their own."""

    def default_claims(self) -> dict[str, Any]:
        ...


class StaticDefaultClaims:
    """Returns a copy of a fixed claims mapping."""

    def __init__(self, claims: Optional[Mapping[str, Any]] = None):
        self._claims = dict(claims or {})

    def default_claims(self) -> dict[str, Any]:
        return dict(self._claims)
