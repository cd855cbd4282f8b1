"""Unit tests for transaction demarcation and error translation."""

import pytest
from sqlalchemy.exc import (
    DataError,
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    MultipleResultsFound,
    NoResultFound,
    OperationalError,
)
from sqlmodel import Session, select

from src.library.core.exceptions import (
    AmbiguousResultError,
    ConstraintViolationError,
    DataAccessError,
    NotFoundError,
    StoreUnavailableError,
)
from src.library.core.services.database.db_utils import run_in_transaction, translate_errors
from src.library.entities import AuthorTable


class TestRunInTransaction:
    def test_commits_on_success(self, engine):
        with Session(engine) as session:
            result = run_in_transaction(
                session, lambda s: s.add(AuthorTable(first_name="Eric", last_name="Evans"))
            )
            assert result is None
            assert not session.in_transaction()

        with Session(engine) as session:
            assert len(session.exec(select(AuthorTable)).all()) == 1

    def test_returns_work_result(self, engine):
        def insert(session: Session) -> int:
            row = AuthorTable(first_name="Eric", last_name="Evans")
            session.add(row)
            session.flush()
            return row.id

        with Session(engine) as session:
            assert run_in_transaction(session, insert) is not None

    def test_rolls_back_and_reraises(self, engine):
        def insert_then_fail(session: Session) -> None:
            session.add(AuthorTable(first_name="Eric", last_name="Evans"))
            session.flush()
            raise RuntimeError("boom")

        with Session(engine) as session:
            with pytest.raises(RuntimeError, match="boom"):
                run_in_transaction(session, insert_then_fail)
            assert not session.in_transaction()

        with Session(engine) as session:
            assert session.exec(select(AuthorTable)).all() == []


class TestTranslateErrors:
    @pytest.mark.parametrize(
        ("raised", "expected"),
        [
            (NoResultFound("No row was found"), NotFoundError),
            (MultipleResultsFound("Multiple rows were found"), AmbiguousResultError),
            (
                IntegrityError("INSERT INTO book", {}, Exception("UNIQUE constraint failed")),
                ConstraintViolationError,
            ),
            (
                DataError(
                    "INSERT INTO author", {}, Exception("value too long for type varchar(50)")
                ),
                ConstraintViolationError,
            ),
            (
                OperationalError("SELECT 1", {}, Exception("unable to open database file")),
                StoreUnavailableError,
            ),
            (
                InterfaceError("SELECT 1", {}, Exception("connection closed")),
                StoreUnavailableError,
            ),
            (DisconnectionError("connection invalidated"), StoreUnavailableError),
        ],
    )
    def test_maps_sqlalchemy_errors(self, raised, expected):
        with pytest.raises(expected) as exc_info:
            with translate_errors("Book"):
                raise raised

        assert isinstance(exc_info.value, DataAccessError)
        assert exc_info.value.__cause__ is raised
        assert exc_info.value.cause is raised

    def test_not_found_names_entity(self):
        with pytest.raises(NotFoundError, match="Book not found"):
            with translate_errors("Book"):
                raise NoResultFound("No row was found")

    def test_other_errors_pass_through(self):
        with pytest.raises(KeyError):
            with translate_errors("Book"):
                raise KeyError("title")
