"""
Serialization of list state to and from a key-value store.

Every key is stored as UTF-8 JSON. Decoding never raises: data that is
missing or has the wrong shape decodes to None and the caller keeps its
default for that key.
"""

import json
import logging
from typing import Dict, List, Optional

from shoplist.storage.kv_store import KeyValueStore
from .state import (
    ShoppingState,
    SEED_CATEGORIES,
    HISTORY_LIMIT,
    SHOPPING_LIST_KEY,
    DELETED_ITEMS_KEY,
    CATEGORIES_KEY,
)

logger = logging.getLogger(__name__)


def _encode(value) -> bytes:
    return json.dumps(value, ensure_ascii=False).encode('utf-8')


def _decode(data: Optional[bytes], key: str):
    if data is None:
        return None
    try:
        return json.loads(data.decode('utf-8'))
    except Exception as e:
        logger.warning(f"Failed to decode '{key}': {e}")
        return None


def _names(values: List) -> List[str]:
    """Keep non-empty string names, trimmed"""
    return [value.strip() for value in values if isinstance(value, str) and value.strip()]


def encode_shopping_list(items: Dict[str, List[str]]) -> bytes:
    return _encode(items)


def encode_history(history: List[str]) -> bytes:
    return _encode(history)


def encode_categories(categories: List[str]) -> bytes:
    return _encode(categories)


def decode_shopping_list(data: Optional[bytes]) -> Optional[Dict[str, List[str]]]:
    """
    Decode the category -> items mapping

    Returns:
        Mapping, or None if data is missing or not a JSON object of lists
    """
    value = _decode(data, SHOPPING_LIST_KEY)
    if value is None:
        return None
    if not isinstance(value, dict) or not all(isinstance(v, list) for v in value.values()):
        logger.warning(f"Unexpected shape for '{SHOPPING_LIST_KEY}', ignoring")
        return None

    return {category: _names(names) for category, names in value.items() if category.strip()}


def decode_history(data: Optional[bytes]) -> Optional[List[str]]:
    value = _decode(data, DELETED_ITEMS_KEY)
    if value is None:
        return None
    if not isinstance(value, list):
        logger.warning(f"Unexpected shape for '{DELETED_ITEMS_KEY}', ignoring")
        return None

    history = []
    for name in _names(value):
        if name not in history:
            history.append(name)
    return history[:HISTORY_LIMIT]


def decode_categories(data: Optional[bytes]) -> Optional[List[str]]:
    """
    Decode the category order

    Duplicates are dropped and missing seed categories are put back in
    front, so the result always satisfies the category invariants.
    """
    value = _decode(data, CATEGORIES_KEY)
    if value is None:
        return None
    if not isinstance(value, list):
        logger.warning(f"Unexpected shape for '{CATEGORIES_KEY}', ignoring")
        return None

    categories = []
    for name in _names(value):
        if name not in categories:
            categories.append(name)

    missing = [seed for seed in SEED_CATEGORIES if seed not in categories]
    return missing + categories


def try_load(store: KeyValueStore,
             shared_store: Optional[KeyValueStore] = None,
             persist_categories: bool = True) -> Optional[ShoppingState]:
    """
    Load list state from storage

    The shopping list is read from the shared store when one is given, since
    that is the copy the widget sees; the history and category order come
    from the main store.

    Args:
        store: Main key-value store
        shared_store: Optional store shared with the widget
        persist_categories: Whether the category order is stored

    Returns:
        Loaded state, or None if nothing has been stored yet
    """
    list_source = shared_store if shared_store is not None else store
    raw_items = list_source.get(SHOPPING_LIST_KEY)
    if raw_items is None and shared_store is not None:
        raw_items = store.get(SHOPPING_LIST_KEY)
    raw_history = store.get(DELETED_ITEMS_KEY)
    raw_categories = store.get(CATEGORIES_KEY) if persist_categories else None

    if raw_items is None and raw_history is None and raw_categories is None:
        logger.info("No stored list state found")
        return None

    state = ShoppingState.seed()

    items = decode_shopping_list(raw_items)
    if items is not None:
        state.items = items

    history = decode_history(raw_history)
    if history is not None:
        state.history = history

    categories = decode_categories(raw_categories)
    if categories is not None:
        state.categories = categories

    # Categories only known from the item mapping still need to be listed
    for category in state.items:
        if category not in state.categories:
            state.categories.append(category)

    logger.info(f"Loaded {sum(len(v) for v in state.items.values())} items in "
                f"{len(state.categories)} categories, {len(state.history)} in history")
    return state


def save_state(state: ShoppingState,
               store: KeyValueStore,
               shared_store: Optional[KeyValueStore] = None,
               persist_categories: bool = True) -> bool:
    """
    Write list state to storage

    Returns:
        True if every key was written, False otherwise
    """
    try:
        items = encode_shopping_list(state.items)
        store.put(SHOPPING_LIST_KEY, items)
        if shared_store is not None:
            shared_store.put(SHOPPING_LIST_KEY, items)
            # Widget lists categories in the app's order
            shared_store.put(CATEGORIES_KEY, encode_categories(state.categories))

        store.put(DELETED_ITEMS_KEY, encode_history(state.history))

        if persist_categories:
            store.put(CATEGORIES_KEY, encode_categories(state.categories))
    except Exception as e:
        logger.error(f"Failed to save list state to {store.name()}: {e}")
        return False

    logger.debug(f"Saved list state to {store.name()}")
    return True
