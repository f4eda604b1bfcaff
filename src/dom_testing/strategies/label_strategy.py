"""
Strategy for finding form controls through the text of their label
"""

import logging
from typing import Any, List

from ..base import QueryContext, QueryStrategy
from ..errors import GetOneError
from ..reducer import get_one
from ..text_nodes import unique_nodes
from .id_strategy import IdStrategy
from .text_strategy import TextStrategy

logger = logging.getLogger(__name__)


class LabelStrategy(QueryStrategy):
    """Matches the control a ``<label for="...">`` points to.

    Labels are found with the text strategy of the same exactness, then each
    label's ``for`` attribute is resolved with the exact id strategy.
    """

    tag = 'by_label'

    def __init__(self, exact: bool = True):
        super().__init__(exact)
        self.text_strategy = TextStrategy(exact)
        self.id_strategy = IdStrategy()

    def find_elements(self, context: QueryContext) -> List[Any]:
        """Resolve each label independently; labels whose target is missing or ambiguous are skipped"""
        return self.resolve_labels(context, self.find_labels(context), strict=False)

    def find_one(self, context: QueryContext) -> Any:
        """Resolve every label strictly, so a broken target surfaces its by_id error"""
        controls = self.resolve_labels(context, self.find_labels(context), strict=True)
        return get_one(controls, self.name, context.query, self.exact)

    def find_labels(self, context: QueryContext) -> List[Any]:
        adapter = context.adapter
        return [
            element for element in self.text_strategy.find_elements(context)
            if adapter.tag_name(element) == 'label'
        ]

    def resolve_labels(self, context: QueryContext, labels: List[Any], strict: bool) -> List[Any]:
        adapter = context.adapter
        controls = []
        for label in labels:
            target_id = adapter.get_attribute(label, 'for')
            if target_id is None:
                self.log_pass(context, 0, 'label without a for attribute')
                continue

            target_context = QueryContext(adapter, context.root, target_id, context.config)
            try:
                controls.append(self.id_strategy.find_one(target_context))
            except GetOneError as e:
                if strict:
                    raise
                logger.warning("Skipping label %r for %r: %s", context.query, target_id, e)

        controls = unique_nodes(adapter, controls)
        self.log_pass(context, len(controls), f"{len(labels)} label(s)")
        return controls
