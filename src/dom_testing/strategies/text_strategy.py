"""
Strategy for finding elements by the text a user sees
"""

from typing import Any, List

from ..base import QueryContext, QueryStrategy
from ..text_nodes import collect_text_nodes


class TextStrategy(QueryStrategy):
    """Matches elements whose rendered text equals or contains the query"""

    tag = 'by_text'

    def find_elements(self, context: QueryContext) -> List[Any]:
        text_nodes = collect_text_nodes(context.adapter, context.root)
        text_nodes.dedupe = context.config.dedupe_text_matches

        if self.exact:
            matches = text_nodes.find_parents_exact(context.query)
        else:
            matches = text_nodes.find_parents_containing(context.query)
        self.log_pass(context, len(matches), f"{len(text_nodes)} text nodes")
        return matches
