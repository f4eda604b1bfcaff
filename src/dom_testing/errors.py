"""
Errors raised by the singular query forms
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class QueryDescriptor:
    """Identifies a failed query: which strategy, what was searched for"""
    strategy: str
    query: str
    exact: bool = True


class GetOneError(Exception):
    """Base class for failures of a get_by_* query"""

    def __init__(self, descriptor: QueryDescriptor):
        self.descriptor = descriptor
        super().__init__(self.describe())

    @property
    def strategy(self) -> str:
        return self.descriptor.strategy

    @property
    def query(self) -> str:
        return self.descriptor.query

    def describe(self) -> str:
        raise NotImplementedError

    def is_not_found(self) -> bool:
        return isinstance(self, NotFound)

    def is_more_than_one(self) -> bool:
        return isinstance(self, MoreThanOne)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.descriptor == other.descriptor

    def __hash__(self):
        return hash((type(self), self.descriptor))

    def __repr__(self):
        return f"{type(self).__name__}(strategy={self.strategy!r}, query={self.query!r})"


class NotFound(GetOneError):
    """No element matched a singular query"""

    def describe(self) -> str:
        return f"Not Found: attempting to find {self.query!r} by method {self.strategy}"


class MoreThanOne(GetOneError):
    """More than one element matched a singular query"""

    def describe(self) -> str:
        return (
            f"Found more than one element by method of get_{self.strategy} with input of {self.query!r}, "
            f"if you were expecting more than one match see the get_all_{self.strategy} version of this method instead."
        )


class HostContractError(TypeError):
    """The host tree broke the adapter contract (wrong node kind, unknown node type)"""
