"""
Base classes and interfaces for the query strategies
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from .adapters.base import DomAdapter
from .config import QueryConfig
from .reducer import get_one

logger = logging.getLogger(__name__)


@dataclass
class QueryContext:
    """Everything one strategy pass needs"""
    adapter: DomAdapter
    root: Any
    query: str
    config: QueryConfig = field(default_factory=QueryConfig)


class QueryStrategy(ABC):
    """Base class for all query strategies.

    A strategy matches either exactly or by substring. Its tag is ``tag`` for
    the exact form and ``tag + '_contains'`` for the substring form; the tag
    names the strategy in errors.
    """

    tag = 'by_strategy'
    supports_contains = True

    def __init__(self, exact: bool = True):
        if not exact and not self.supports_contains:
            raise ValueError(f"{self.__class__.__name__} only matches exactly")
        self.exact = exact
        self.name = self.tag if exact else f"{self.tag}_contains"

    @abstractmethod
    def find_elements(self, context: QueryContext) -> List[Any]:
        """Every matching element in document order"""
        pass

    def find_one(self, context: QueryContext) -> Any:
        """The single matching element, or NotFound / MoreThanOne"""
        return get_one(self.find_elements(context), self.name, context.query, self.exact)

    def get_selectors(self, context: QueryContext) -> List[Tuple[str, str]]:
        """CSS selectors for this strategy (selector, description)"""
        return []

    def matches(self, actual: Optional[str], expected: str) -> bool:
        """Compare a read value to the query, exactly or as a substring"""
        actual = actual or ''
        if self.exact:
            return actual == expected
        return expected in actual

    def log_pass(self, context: QueryContext, count: int, source: str):
        if context.config.debug:
            logger.debug("  → %s: found %d element(s) for %r using %s", self.name, count, context.query, source)

    def __repr__(self):
        return f"{self.__class__.__name__}(exact={self.exact})"


class SelectorStrategy(QueryStrategy):
    """Strategy that narrows candidates with CSS selectors, then filters them"""

    def find_elements(self, context: QueryContext) -> List[Any]:
        matches = []
        for selector, desc in self.get_selectors(context):
            elements = context.adapter.select(context.root, selector)
            for element in elements:
                if self.accept(element, context):
                    matches.append(element)
            self.log_pass(context, len(matches), desc)
        return matches

    def accept(self, element: Any, context: QueryContext) -> bool:
        """Whether a selected element matches the query"""
        return True
