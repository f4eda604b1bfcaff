"""
Strategy for finding elements by their id attribute
"""

from typing import Any, List

from ..base import QueryContext, QueryStrategy


class IdStrategy(QueryStrategy):
    """Matches every element under the root whose id equals or contains the query"""

    tag = 'by_id'

    def find_elements(self, context: QueryContext) -> List[Any]:
        adapter = context.adapter
        matches = [
            element for element in adapter.iter_elements(context.root)
            if self.matches(adapter.get_attribute(element, 'id'), context.query)
        ]
        self.log_pass(context, len(matches), 'all elements')
        return matches
