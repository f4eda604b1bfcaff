"""
Query strategies, one per user-observable trait
"""

from .text_strategy import TextStrategy
from .id_strategy import IdStrategy
from .label_strategy import LabelStrategy
from .display_value_strategy import DisplayValueStrategy
from .role_strategy import RoleStrategy, css_string
from .placeholder_strategy import PlaceholderStrategy

__all__ = [
    'TextStrategy',
    'IdStrategy',
    'LabelStrategy',
    'DisplayValueStrategy',
    'RoleStrategy',
    'PlaceholderStrategy',
    'css_string',
]
