"""Token issuer protocol."""

from typing import Protocol, runtime_checkable

from todo_api.entities import TokenClaims


@runtime_checkable
class TokenIssuer(Protocol):
    """Protocol for anything that signs claims into a bearer token."""

    def generate_access_token(self, claims: TokenClaims) -> str:
        """Sign the claims.

        Args:
            claims: The claims to embed

        Returns:
            The encoded bearer token
        """
        ...
