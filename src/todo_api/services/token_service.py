"""JWT access token issuing and verification."""

from datetime import datetime, timezone

from jose import JWTError, jwt

from todo_api.config import settings
from todo_api.entities import TokenClaims
from todo_api.errors import UnauthorizedError


class JwtTokenService:
    """Signs and verifies HMAC JWT access tokens.

    Satisfies the TokenIssuer protocol, and additionally decodes tokens for
    the HTTP layer's authentication dependency.
    """

    def __init__(self, secret_key: str | None = None, algorithm: str | None = None) -> None:
        """Initialize the token service.

        Args:
            secret_key: HMAC signing key. Defaults to settings.
            algorithm: JWS algorithm. Defaults to settings.
        """
        self._secret_key = secret_key or settings.jwt_secret_key
        self._algorithm = algorithm or settings.jwt_algorithm

    def generate_access_token(self, claims: TokenClaims) -> str:
        """Sign the claims into a compact JWT.

        Args:
            claims: The claims to embed

        Returns:
            The encoded token
        """
        payload = {
            "sub": claims.username,
            "username": claims.username,
            "role": claims.role,
            "full_name": claims.full_name,
            "iss": claims.issuer,
            "iat": claims.issued_at,
            "exp": claims.expires_at,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode_access_token(self, token: str) -> TokenClaims:
        """Verify a token and return its claims.

        Args:
            token: The encoded token

        Returns:
            The verified claims

        Raises:
            UnauthorizedError: If the signature is invalid, the token has
                expired or a required claim is missing
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as e:
            raise UnauthorizedError("invalid or expired token") from e

        try:
            return TokenClaims(
                username=payload["username"],
                role=payload["role"],
                full_name=payload.get("full_name", ""),
                issuer=payload.get("iss", ""),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise UnauthorizedError("malformed token claims") from e
