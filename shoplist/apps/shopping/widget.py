"""
Home-screen widget collaborator.

The widget reads the shared shopping list on its own; the app only has to
write current data and tell the widget to reload after each save.
"""

import logging
from typing import Callable, List, Optional, Tuple

from shoplist.storage.kv_store import KeyValueStore
from .codec import decode_shopping_list, decode_categories
from .state import SHOPPING_LIST_KEY, CATEGORIES_KEY


class WidgetNotifier:
    """Fan-out of reload signals to registered widget callbacks"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._callbacks: List[Callable[[], None]] = []
        self.reload_count = 0

    def subscribe(self, callback: Callable[[], None]):
        """
        Register a reload callback

        Args:
            callback: Called with no arguments after every save
        """
        self._callbacks.append(callback)

    def reload_all(self):
        """Signal every widget to reload its timeline"""
        self.reload_count += 1
        for callback in self._callbacks:
            try:
                callback()
            except Exception as e:
                self.logger.error(f"Widget reload callback failed: {e}")
        self.logger.debug(f"Widget reload #{self.reload_count} sent to {len(self._callbacks)} callbacks")


def read_widget_snapshot(shared_store: KeyValueStore,
                         limit: Optional[int] = None) -> List[Tuple[str, List[str]]]:
    """
    Read what the widget should show

    Categories follow the stored category order when the shared store has
    one, otherwise the mapping's own order. Empty categories are skipped.

    Args:
        shared_store: Store shared between app and widget
        limit: Maximum items shown per category (all if None)

    Returns:
        List of (category, items) pairs
    """
    items = decode_shopping_list(shared_store.get(SHOPPING_LIST_KEY))
    if not items:
        return []

    order = decode_categories(shared_store.get(CATEGORIES_KEY)) or []
    order = order + [category for category in items if category not in order]

    snapshot = []
    for category in order:
        names = items.get(category)
        if not names:
            continue
        snapshot.append((category, names if limit is None else names[:limit]))
    return snapshot
