"""Access token claims entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenClaims:
    """Claims carried by a signed access token."""

    username: str
    role: str
    full_name: str
    issuer: str
    issued_at: datetime
    expires_at: datetime
