"""
Strategy for finding elements by ARIA role
"""

from typing import List, Tuple

from ..base import QueryContext, SelectorStrategy


def css_string(value: str) -> str:
    """Quote a value as a CSS string literal"""
    escaped = value.replace('\\', '\\\\').replace('"', '\\"').replace('\n', '\\a ')
    return f'"{escaped}"'


class RoleStrategy(SelectorStrategy):
    """Matches elements with an explicit role attribute equal to the query"""

    tag = 'by_role'
    supports_contains = False

    def get_selectors(self, context: QueryContext) -> List[Tuple[str, str]]:
        return [(f'[role={css_string(context.query)}]', 'role attribute')]
