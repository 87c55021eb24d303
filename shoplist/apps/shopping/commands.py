"""
List commands.

Each command mutates a ShoppingState in place and returns True when it
changed something. Invalid input (empty names, unknown categories, duplicates)
leaves the state untouched and returns False. Persisting is up to the caller.
"""

import logging
from typing import Iterable, List

from .state import ShoppingState, SEED_CATEGORIES, HISTORY_LIMIT

logger = logging.getLogger(__name__)


def _clean(name: str) -> str:
    return (name or '').strip()


def push_history(history: List[str], names: Iterable[str], limit: int = HISTORY_LIMIT):
    """
    Push deleted names to the front of the history

    A name already in history moves to the front instead of repeating.
    The history is truncated to the newest `limit` entries.

    Args:
        history: History list, most recent first (modified in place)
        names: Names in deletion order
        limit: Maximum history length
    """
    for name in names:
        if name in history:
            history.remove(name)
        history.insert(0, name)
    del history[limit:]


def can_delete_category(state: ShoppingState, category: str) -> bool:
    """Seed categories and unknown names cannot be deleted"""
    return category in state.categories and category not in SEED_CATEGORIES


def add_item(state: ShoppingState, name: str, category: str) -> bool:
    item = _clean(name)
    if not item:
        return False
    if category not in state.categories:
        logger.debug(f"Ignoring add to unknown category '{category}'")
        return False

    state.items.setdefault(category, []).append(item)
    logger.info(f"Added '{item}' to {category}")
    return True


def delete_item(state: ShoppingState, name: str, category: str) -> bool:
    """Remove the first matching item and remember it in history"""
    items = state.items.get(category)
    if not items or name not in items:
        return False

    items.remove(name)
    push_history(state.history, [name])
    logger.info(f"Deleted '{name}' from {category}")
    return True


def restore_item(state: ShoppingState, name: str, category: str) -> bool:
    """
    Move a name from history back into a category

    Nothing happens if the category already holds an item with that name,
    if the category is unknown, or if the name is not in history.
    """
    if name not in state.history or category not in state.categories:
        return False

    items = state.items.setdefault(category, [])
    if name in items:
        return False

    items.append(name)
    state.history.remove(name)
    logger.info(f"Restored '{name}' to {category}")
    return True


def add_category(state: ShoppingState, name: str) -> bool:
    category = _clean(name)
    if not category or category in state.categories:
        return False

    state.categories.append(category)
    logger.info(f"Added category {category}")
    return True


def delete_category(state: ShoppingState, name: str) -> bool:
    """Remove a custom category together with its items"""
    if not can_delete_category(state, name):
        return False

    state.categories.remove(name)
    state.items.pop(name, None)
    logger.info(f"Deleted category {name}")
    return True


def rename_category(state: ShoppingState, old_name: str, new_name: str) -> bool:
    """Rename a custom category in place, carrying its items along"""
    category = _clean(new_name)
    if not category or category in state.categories:
        return False
    if not can_delete_category(state, old_name):
        return False

    index = state.categories.index(old_name)
    state.categories[index] = category
    if old_name in state.items:
        state.items[category] = state.items.pop(old_name)
    logger.info(f"Renamed category {old_name} -> {category}")
    return True


def rename_item(state: ShoppingState, category: str, old_name: str, new_name: str) -> bool:
    item = _clean(new_name)
    if not item:
        return False

    items = state.items.get(category)
    if not items or old_name not in items:
        return False
    if item == old_name:
        return False

    items[items.index(old_name)] = item
    logger.info(f"Renamed '{old_name}' -> '{item}' in {category}")
    return True


def reorder_items(state: ShoppingState, category: str, from_indices: Iterable[int], to_offset: int) -> bool:
    """
    Move items within one category

    The items at `from_indices` keep their relative order and are inserted
    before the item that sat at `to_offset` before the move (`to_offset`
    equal to the list length moves them to the end).

    Args:
        state: List state
        category: Category whose items are reordered
        from_indices: Positions of the items to move
        to_offset: Destination offset, in pre-move positions
    """
    items = state.items.get(category)
    if not items:
        return False

    indices = sorted(set(from_indices))
    if not indices:
        return False
    if indices[0] < 0 or indices[-1] >= len(items):
        return False
    if to_offset < 0 or to_offset > len(items):
        return False

    moved = [items[i] for i in indices]
    remaining = [item for i, item in enumerate(items) if i not in indices]
    insert_at = to_offset - sum(1 for i in indices if i < to_offset)

    reordered = remaining[:insert_at] + moved + remaining[insert_at:]
    if reordered == items:
        return False

    items[:] = reordered
    logger.debug(f"Reordered {category}: {indices} -> {to_offset}")
    return True
