"""SQLAlchemy implementation of TodoStore."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from todo_api.entities import TodoEntity
from todo_api.errors import DatabaseError, TodoNotFoundError
from todo_api.repositories.models import TodoModel


def _to_entity(row: TodoModel) -> TodoEntity:
    return TodoEntity(
        id=row.id,
        title=row.title,
        content=row.content,
        due_date=row.due_date,
        completed=row.completed,
        user_id=row.user_id,
    )


class SqlTodoRepository:
    """Todo persistence backed by a relational database.

    This class satisfies the TodoStore protocol. Every method runs in its
    own session, so each call is one transaction.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def find_all(self) -> list[TodoEntity]:
        try:
            with self._session_factory() as session:
                rows = session.query(TodoModel).order_by(TodoModel.id).all()
        except SQLAlchemyError as e:
            raise DatabaseError(f"failed to list todos: {e}") from e
        return [_to_entity(row) for row in rows]

    def find_by_id(self, todo_id: int) -> TodoEntity:
        try:
            with self._session_factory() as session:
                row = session.query(TodoModel).filter(TodoModel.id == todo_id).first()
        except SQLAlchemyError as e:
            raise DatabaseError(f"failed to fetch todo {todo_id}: {e}") from e
        if row is None:
            raise TodoNotFoundError()
        return _to_entity(row)

    def create(self, todo: TodoEntity) -> TodoEntity:
        row = TodoModel(
            title=todo.title,
            content=todo.content,
            due_date=todo.due_date,
            completed=todo.completed,
            user_id=todo.user_id,
        )
        try:
            with self._session_factory() as session:
                session.add(row)
                session.commit()
                session.refresh(row)
        except SQLAlchemyError as e:
            raise DatabaseError(f"failed to create todo: {e}") from e
        return _to_entity(row)

    def update(self, todo: TodoEntity) -> TodoEntity:
        try:
            with self._session_factory() as session:
                row = session.query(TodoModel).filter(TodoModel.id == todo.id).first()
                if row is None:
                    raise TodoNotFoundError()
                row.title = todo.title
                row.content = todo.content
                row.due_date = todo.due_date
                row.completed = todo.completed
                row.user_id = todo.user_id
                session.commit()
                session.refresh(row)
        except SQLAlchemyError as e:
            raise DatabaseError(f"failed to update todo {todo.id}: {e}") from e
        return _to_entity(row)

    def delete(self, todo_id: int) -> None:
        try:
            with self._session_factory() as session:
                affected = (
                    session.query(TodoModel)
                    .filter(TodoModel.id == todo_id)
                    .delete(synchronize_session=False)
                )
                session.commit()
        except SQLAlchemyError as e:
            raise DatabaseError(f"failed to delete todo {todo_id}: {e}") from e
        if affected == 0:
            raise TodoNotFoundError()
