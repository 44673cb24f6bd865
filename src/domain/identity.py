"""
Caller and system identity value objects.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class SystemIdentity:
    """The API's own token audience and the government employee providers."""

    audience: str
    gov_identity_providers: Tuple[str, ...] = ("idir", "azureidir")
    operations_admin_role: str = "TMS.OPERATIONS_ADMIN"


@dataclass(frozen=True)
class CallerIdentity:
    """Identity of an authenticated caller, built from verified token claims."""

    subject: Optional[str]
    audience: Optional[str]
    identity_provider: Optional[str]
    client_roles: Tuple[str, ...] = field(default_factory=tuple)
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    display_name: Optional[str] = None
    user_name: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "CallerIdentity":
        audience = claims.get("aud") or claims.get("audience")
        if isinstance(audience, (list, tuple)):
            audience = audience[0] if audience else None

        return cls(
            subject=claims.get("idir_user_guid")
            or claims.get("bceid_user_guid")
            or claims.get("sub"),
            audience=audience,
            identity_provider=claims.get("identity_provider"),
            client_roles=tuple(claims.get("client_roles") or ()),
            given_name=claims.get("given_name"),
            family_name=claims.get("family_name"),
            display_name=claims.get("display_name") or claims.get("name"),
            user_name=claims.get("preferred_username"),
            email=claims.get("email"),
        )

    def is_shared_service(self, system: SystemIdentity) -> bool:
        # A missing audience is treated as first-party
        return self.audience is not None and self.audience != system.audience

    def is_government_user(self, system: SystemIdentity) -> bool:
        return self.identity_provider in system.gov_identity_providers

    def has_client_role(self, role: str) -> bool:
        return role in self.client_roles
