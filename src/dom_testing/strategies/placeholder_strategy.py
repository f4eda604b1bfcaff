"""
Strategy for finding text inputs by placeholder
"""

from typing import Any, List, Tuple

from ..base import QueryContext, SelectorStrategy


class PlaceholderStrategy(SelectorStrategy):
    """Matches input and textarea elements by their placeholder.

    Only these two elements render a placeholder, so a placeholder attribute
    on anything else is ignored.
    """

    tag = 'by_placeholder'

    def get_selectors(self, context: QueryContext) -> List[Tuple[str, str]]:
        return [('input, textarea', 'text inputs')]

    def accept(self, element: Any, context: QueryContext) -> bool:
        return self.matches(context.adapter.get_attribute(element, 'placeholder'), context.query)
