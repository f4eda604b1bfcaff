"""
The single-result contract shared by every get_by_* query
"""

from typing import List, TypeVar

from .errors import MoreThanOne, NotFound, QueryDescriptor

T = TypeVar('T')


def get_one(candidates: List[T], strategy: str, query: str, exact: bool = True) -> T:
    """Reduce a match list to exactly one element.

    Raises NotFound for an empty list and MoreThanOne for two or more
    candidates; both carry the strategy tag and the query.
    """
    if len(candidates) > 1:
        raise MoreThanOne(QueryDescriptor(strategy, query, exact))
    if not candidates:
        raise NotFound(QueryDescriptor(strategy, query, exact))
    return candidates[0]
