"""
Query engine - dispatches a query to the strategy registered under its tag
"""

from typing import Any, Dict, List, Optional

from .adapters.base import DomAdapter
from .base import QueryContext, QueryStrategy
from .config import QueryConfig
from .strategies import (
    TextStrategy, IdStrategy, LabelStrategy,
    DisplayValueStrategy, RoleStrategy, PlaceholderStrategy
)


class QueryEngine:
    """Registry of the fixed strategy set.

    Strategies hold no per-query state, so one engine serves every root.
    """

    def __init__(self):
        strategies: List[QueryStrategy] = [
            TextStrategy(exact=True),
            TextStrategy(exact=False),
            IdStrategy(exact=True),
            IdStrategy(exact=False),
            LabelStrategy(exact=True),
            LabelStrategy(exact=False),
            DisplayValueStrategy(exact=True),
            DisplayValueStrategy(exact=False),
            RoleStrategy(),
            PlaceholderStrategy(exact=True),
            PlaceholderStrategy(exact=False),
        ]
        self.strategies: Dict[str, QueryStrategy] = {strategy.name: strategy for strategy in strategies}

    def strategy(self, name: str) -> QueryStrategy:
        try:
            return self.strategies[name]
        except KeyError:
            raise ValueError(f"Unknown query strategy {name!r}, expected one of {sorted(self.strategies)}") from None

    def find_all(self, name: str, adapter: DomAdapter, root: Any, query: str,
                 config: Optional[QueryConfig] = None) -> List[Any]:
        """All matches for a query; never raises for zero or many"""
        context = QueryContext(adapter, root, query, config or QueryConfig())
        with adapter.query_pass() as query_pass:
            return query_pass.keep(self.strategy(name).find_elements(context))

    def find_one(self, name: str, adapter: DomAdapter, root: Any, query: str,
                 config: Optional[QueryConfig] = None) -> Any:
        """The single match for a query, or NotFound / MoreThanOne"""
        context = QueryContext(adapter, root, query, config or QueryConfig())
        with adapter.query_pass() as query_pass:
            node = self.strategy(name).find_one(context)
            query_pass.keep([node])
            return node


default_engine = QueryEngine()
