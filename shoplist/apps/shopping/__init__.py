"""
Shopping List App Module

Provides the shopping list functionality:
- ShoppingState: plain list state
- commands: pure list commands
- ShoppingListManager: commands plus persistence
- WidgetNotifier / read_widget_snapshot: widget collaborator
"""

from .state import ShoppingState, SEED_CATEGORIES, HISTORY_LIMIT
from .manager import ShoppingListManager
from .widget import WidgetNotifier, read_widget_snapshot

__all__ = [
    'ShoppingState',
    'SEED_CATEGORIES',
    'HISTORY_LIMIT',
    'ShoppingListManager',
    'WidgetNotifier',
    'read_widget_snapshot',
]
