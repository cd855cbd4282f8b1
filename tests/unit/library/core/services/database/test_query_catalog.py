"""Unit tests for the query catalog."""

import pytest
from sqlalchemy import bindparam
from sqlmodel import col, select

from src.library.core.services.database.query_catalog import QueryCatalog
from src.library.entities import AuthorTable, BookTable, build_query_catalog


class TestBuildQueryCatalog:
    def test_registers_every_named_query(self):
        catalog = build_query_catalog()

        assert set(catalog) == {
            "find_by_name",
            "author_find_all",
            "find_by_title",
            "book_find_all",
        }
        assert len(catalog) == 4

    def test_queries_are_registered_against_their_table(self):
        catalog = build_query_catalog()

        assert catalog.get("find_by_name").table is AuthorTable
        assert catalog.get("author_find_all").table is AuthorTable
        assert catalog.get("find_by_title").table is BookTable
        assert catalog.get("book_find_all").table is BookTable

    def test_declared_parameters(self):
        catalog = build_query_catalog()

        assert catalog.get("find_by_name").parameters == {"first_name", "last_name"}
        assert catalog.get("find_by_title").parameters == {"title"}
        assert catalog.get("book_find_all").parameters == frozenset()


class TestQueryCatalog:
    def test_duplicate_name_rejected(self):
        catalog = QueryCatalog()
        catalog.register("book_find_all", BookTable, select(BookTable))

        with pytest.raises(ValueError):
            catalog.register("book_find_all", BookTable, select(BookTable))

    def test_unknown_name(self):
        catalog = QueryCatalog()

        assert "find_by_title" not in catalog
        with pytest.raises(KeyError):
            catalog.get("find_by_title")

    def test_bind_accepts_declared_parameters(self):
        catalog = QueryCatalog()
        query = catalog.register(
            "find_by_isbn",
            BookTable,
            select(BookTable).where(col(BookTable.isbn) == bindparam("isbn")),
        )

        assert query.bind({"isbn": "111"}) == {"isbn": "111"}

    @pytest.mark.parametrize("params", [{}, {"isbn": "111", "title": "x"}, {"title": "x"}])
    def test_bind_rejects_mismatched_parameters(self, params):
        catalog = QueryCatalog()
        query = catalog.register(
            "find_by_isbn",
            BookTable,
            select(BookTable).where(col(BookTable.isbn) == bindparam("isbn")),
        )

        with pytest.raises(ValueError):
            query.bind(params)
