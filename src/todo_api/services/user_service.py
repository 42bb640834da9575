"""User service: accounts, authentication and the cached user listing."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

from todo_api.config import settings
from todo_api.entities import TokenClaims, UserEntity
from todo_api.errors import (
    InvalidCredentialsError,
    UsernameTakenError,
    UserNotFoundError,
    ValidationError,
)
from todo_api.protocols import CacheStore, TokenIssuer, UserStore
from todo_api.services.list_cache import ListCache
from todo_api.utils import hash_password, verify_password


class UserService:
    """Orchestrates user persistence, password hashing, token issuance and
    the read-through user listing cache.

    Depends on PROTOCOLS, not concrete implementations:
    - UserStore: SQL database, or a mock in tests
    - CacheStore: Redis, or a mock in tests
    - TokenIssuer: JWT signer
    """

    def __init__(
        self,
        repository: UserStore,
        token_issuer: TokenIssuer,
        cache: CacheStore,
        token_ttl: timedelta | None = None,
        issuer: str | None = None,
    ) -> None:
        """Initialize the user service.

        Args:
            repository: User persistence (required).
            token_issuer: Access token signer (required).
            cache: Cache backend for the user listing (required).
            token_ttl: Access token lifetime. Defaults to settings.
            issuer: Token issuer claim. Defaults to settings.
        """
        self._repository = repository
        self._tokens = token_issuer
        self._list_cache = ListCache(
            cache,
            key=f"{settings.cache_key_prefix}:users:find-all",
            item_type=UserEntity,
            exclude_fields={"password"},
        )
        self._token_ttl = token_ttl or timedelta(hours=settings.access_token_expire_hours)
        self._issuer = issuer or settings.jwt_issuer

    def find_all(self) -> list[UserEntity]:
        """Return every user, served from cache when possible.

        Users decoded from the cache carry an empty password.
        """
        return self._list_cache.find_all(self._repository.find_all)

    def find_by_id(self, user_id: int) -> UserEntity:
        """Return a single user.

        Raises:
            ValidationError: If ``user_id`` is not positive
            UserNotFoundError: If no such user exists
        """
        _check_id(user_id)
        return self._repository.find_by_id(user_id)

    def login(self, username: str, password: str) -> str:
        """Authenticate a user and issue an access token.

        Business logic:
        1. Look the user up by username
        2. Compare the password against the stored bcrypt hash
        3. Sign a token carrying username, role and full name

        An unknown username and a wrong password raise the same error.
        Any other lookup failure is an upstream error and propagates, so a
        database outage answers 500 instead of reading as bad credentials.

        Returns:
            The signed access token

        Raises:
            InvalidCredentialsError: If the credentials do not match
            DatabaseError: If the user lookup itself fails
        """
        try:
            user = self._repository.find_by_username(username)
        except UserNotFoundError as e:
            raise InvalidCredentialsError() from e

        if not verify_password(password, user.password):
            raise InvalidCredentialsError()

        now = datetime.now(timezone.utc)
        claims = TokenClaims(
            username=user.username,
            role=user.role,
            full_name=user.full_name,
            issuer=self._issuer,
            issued_at=now,
            expires_at=now + self._token_ttl,
        )
        return self._tokens.generate_access_token(claims)

    def create_user(self, user: UserEntity) -> UserEntity:
        """Register a new user.

        Business logic:
        1. Reject the username if it already exists
        2. Hash the password
        3. Persist and invalidate the user listing

        Raises:
            UsernameTakenError: If the username is already registered
        """
        try:
            self._repository.find_by_username(user.username)
        except UserNotFoundError:
            pass
        else:
            raise UsernameTakenError()

        created = self._repository.create(replace(user, password=hash_password(user.password)))
        self._list_cache.invalidate()
        return created

    def update_user(self, user: UserEntity) -> UserEntity:
        """Apply a partial update to an existing user.

        Only non-empty fields of ``user`` overwrite the stored record. A
        non-empty password is re-hashed.

        Raises:
            ValidationError: If ``user.id`` is not positive
            UserNotFoundError: If no such user exists
        """
        _check_id(user.id)
        existing = self._repository.find_by_id(user.id)

        merged = replace(
            existing,
            username=user.username or existing.username,
            role=user.role or existing.role,
            full_name=user.full_name or existing.full_name,
            password=hash_password(user.password) if user.password else existing.password,
        )

        updated = self._repository.update(merged)
        self._list_cache.invalidate()
        return updated

    def delete_user(self, user_id: int) -> None:
        """Delete a user.

        Raises:
            ValidationError: If ``user_id`` is not positive
            UserNotFoundError: If no such user exists
        """
        _check_id(user_id)
        self._repository.find_by_id(user_id)
        self._repository.delete(user_id)
        self._list_cache.invalidate()

    @property
    def list_cache(self) -> ListCache[UserEntity]:
        """Get the listing cache (for testing)."""
        return self._list_cache


def _check_id(user_id: int) -> None:
    if user_id <= 0:
        raise ValidationError("invalid user id")
