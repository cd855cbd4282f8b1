from .db_manage import DbManageService
from .db_session import DbSessionService
from .db_utils import run_in_transaction, translate_errors
from .entity_access import EntityAccess
from .query_catalog import NamedQuery, QueryCatalog
from .query_strategies import (
    DynamicExactMatch,
    ExactMatchStrategy,
    PrecompiledExactMatch,
    TextExactMatch,
)

__all__ = [
    "DbManageService",
    "DbSessionService",
    "DynamicExactMatch",
    "EntityAccess",
    "ExactMatchStrategy",
    "NamedQuery",
    "PrecompiledExactMatch",
    "QueryCatalog",
    "TextExactMatch",
    "run_in_transaction",
    "translate_errors",
]
