"""SQLAlchemy implementation of UserStore."""

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from todo_api.entities import UserEntity
from todo_api.errors import DatabaseError, UsernameTakenError, UserNotFoundError
from todo_api.repositories.models import UserModel


def _to_entity(row: UserModel) -> UserEntity:
    return UserEntity(
        id=row.id,
        username=row.username,
        password=row.password,
        role=row.role,
        full_name=row.full_name,
    )


class SqlUserRepository:
    """User persistence backed by a relational database.

    This class satisfies the UserStore protocol. Every method runs in its
    own session, so each call is one transaction.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        """Initialize the repository.

        Args:
            session_factory: Factory producing SQLAlchemy sessions.
        """
        self._session_factory = session_factory

    def find_all(self) -> list[UserEntity]:
        try:
            with self._session_factory() as session:
                rows = session.query(UserModel).order_by(UserModel.id).all()
        except SQLAlchemyError as e:
            raise DatabaseError(f"failed to list users: {e}") from e
        return [_to_entity(row) for row in rows]

    def find_by_id(self, user_id: int) -> UserEntity:
        try:
            with self._session_factory() as session:
                row = session.query(UserModel).filter(UserModel.id == user_id).first()
        except SQLAlchemyError as e:
            raise DatabaseError(f"failed to fetch user {user_id}: {e}") from e
        if row is None:
            raise UserNotFoundError()
        return _to_entity(row)

    def find_by_username(self, username: str) -> UserEntity:
        try:
            with self._session_factory() as session:
                row = session.query(UserModel).filter(UserModel.username == username).first()
        except SQLAlchemyError as e:
            raise DatabaseError(f"failed to fetch user {username!r}: {e}") from e
        if row is None:
            raise UserNotFoundError()
        return _to_entity(row)

    def create(self, user: UserEntity) -> UserEntity:
        """Insert a user.

        The unique index on ``username`` is the final arbiter when two
        registrations race past the service-level lookup.
        """
        row = UserModel(
            username=user.username,
            password=user.password,
            role=user.role,
            full_name=user.full_name,
        )
        try:
            with self._session_factory() as session:
                session.add(row)
                session.commit()
                session.refresh(row)
        except IntegrityError as e:
            raise UsernameTakenError() from e
        except SQLAlchemyError as e:
            raise DatabaseError(f"failed to create user: {e}") from e
        return _to_entity(row)

    def update(self, user: UserEntity) -> UserEntity:
        updates = {
            "username": user.username,
            "password": user.password,
            "role": user.role,
            "full_name": user.full_name,
        }
        try:
            with self._session_factory() as session:
                affected = (
                    session.query(UserModel)
                    .filter(UserModel.id == user.id)
                    .update(updates, synchronize_session=False)
                )
                session.commit()
        except IntegrityError as e:
            raise UsernameTakenError() from e
        except SQLAlchemyError as e:
            raise DatabaseError(f"failed to update user {user.id}: {e}") from e

        if affected == 0:
            raise UserNotFoundError()
        return self.find_by_id(user.id)

    def delete(self, user_id: int) -> None:
        try:
            with self._session_factory() as session:
                affected = (
                    session.query(UserModel)
                    .filter(UserModel.id == user_id)
                    .delete(synchronize_session=False)
                )
                session.commit()
        except SQLAlchemyError as e:
            raise DatabaseError(f"failed to delete user {user_id}: {e}") from e
        if affected == 0:
            raise UserNotFoundError()

    def health_check(self) -> bool:
        """Check if the database is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            with self._session_factory() as session:
                session.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False
