"""
Strategy for finding form controls by the value they display
"""

from typing import Any, List, Tuple

from ..adapters.base import DISPLAY_VALUE_TAGS
from ..base import QueryContext, SelectorStrategy


class DisplayValueStrategy(SelectorStrategy):
    """Matches input, textarea and select elements by current display value.

    Elements that use ``value`` for something other than display (option,
    progress, li, meter, ...) are never candidates.
    """

    tag = 'by_display_value'

    def get_selectors(self, context: QueryContext) -> List[Tuple[str, str]]:
        return [(', '.join(DISPLAY_VALUE_TAGS), 'form controls')]

    def accept(self, element: Any, context: QueryContext) -> bool:
        return self.matches(context.adapter.display_value(element), context.query)
