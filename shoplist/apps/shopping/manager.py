"""
Shopping List Manager

Runs list commands against the in-memory state and persists after each
change, signalling the widget once the data is written.
"""

import logging
from typing import Dict, Iterable, List, Optional

from shoplist.storage.kv_store import KeyValueStore
from . import commands
from .codec import try_load, save_state
from .state import ShoppingState
from .widget import WidgetNotifier


class ShoppingListManager:
    """Manages shopping list state and persistence"""

    def __init__(self,
                 store: KeyValueStore,
                 shared_store: Optional[KeyValueStore] = None,
                 notifier: Optional[WidgetNotifier] = None,
                 persist_categories: bool = True):
        """
        Initialize ShoppingListManager

        Args:
            store: Main key-value store
            shared_store: Store shared with the widget (optional)
            notifier: Widget reload signal (optional)
            persist_categories: Store the category order as well
        """
        self.store = store
        self.shared_store = shared_store
        self.notifier = notifier
        self.persist_categories = persist_categories
        self.logger = logging.getLogger(__name__)
        self._state = ShoppingState.seed()

    @property
    def state(self) -> ShoppingState:
        """Copy of the current state"""
        return self._state.copy()

    @property
    def categories(self) -> List[str]:
        return list(self._state.categories)

    @property
    def history(self) -> List[str]:
        return list(self._state.history)

    def items_in(self, category: str) -> List[str]:
        return list(self._state.items_in(category))

    def shopping_list(self) -> Dict[str, List[str]]:
        """Category -> items, in category order, empty categories included"""
        return {category: self.items_in(category) for category in self._state.categories}

    def load(self) -> ShoppingState:
        """
        Reload state from storage

        Returns:
            The loaded state (seed state if nothing is stored)
        """
        loaded = try_load(self.store, self.shared_store, self.persist_categories)
        if loaded is None:
            self.logger.info("Starting with a fresh shopping list")
            loaded = ShoppingState.seed()
        self._state = loaded
        return self.state

    def save(self) -> bool:
        """
        Persist current state and signal the widget

        Returns:
            True if successful, False otherwise
        """
        saved = save_state(self._state, self.store, self.shared_store, self.persist_categories)
        if saved and self.notifier:
            self.notifier.reload_all()
        return saved

    def _apply(self, changed: bool) -> bool:
        if changed:
            self.save()
        return changed

    def can_delete_category(self, category: str) -> bool:
        return commands.can_delete_category(self._state, category)

    def add_item(self, name: str, category: str) -> bool:
        return self._apply(commands.add_item(self._state, name, category))

    def delete_item(self, name: str, category: str) -> bool:
        return self._apply(commands.delete_item(self._state, name, category))

    def restore_item(self, name: str, category: str) -> bool:
        return self._apply(commands.restore_item(self._state, name, category))

    def add_category(self, name: str) -> bool:
        return self._apply(commands.add_category(self._state, name))

    def delete_category(self, name: str) -> bool:
        return self._apply(commands.delete_category(self._state, name))

    def rename_category(self, old_name: str, new_name: str) -> bool:
        return self._apply(commands.rename_category(self._state, old_name, new_name))

    def rename_item(self, category: str, old_name: str, new_name: str) -> bool:
        return self._apply(commands.rename_item(self._state, category, old_name, new_name))

    def reorder_items(self, category: str, from_indices: Iterable[int], to_offset: int) -> bool:
        return self._apply(commands.reorder_items(self._state, category, from_indices, to_offset))
