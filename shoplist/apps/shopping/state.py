"""
Shopping list state and the constants shared by commands and storage.
"""

from typing import Dict, List, Optional

# Permanent starter categories, in display order
SEED_CATEGORIES = ("Food", "Household", "Other")

# Most recent deletions kept for restore
HISTORY_LIMIT = 5

# Storage keys
SHOPPING_LIST_KEY = "shoppingListKey"
DELETED_ITEMS_KEY = "deletedItemsKey"
CATEGORIES_KEY = "categoriesKey"


class ShoppingState:
    """
    Plain list state: items per category, category order and deletion history
    """

    def __init__(self,
                 items: Optional[Dict[str, List[str]]] = None,
                 categories: Optional[List[str]] = None,
                 history: Optional[List[str]] = None):
        """
        Initialize state

        Args:
            items: Category name -> ordered item names
            categories: Ordered category names (seed categories if None)
            history: Deleted item names, most recent first
        """
        self.items: Dict[str, List[str]] = items if items is not None else {}
        self.categories: List[str] = categories if categories is not None else list(SEED_CATEGORIES)
        self.history: List[str] = history if history is not None else []

    @classmethod
    def seed(cls) -> 'ShoppingState':
        """State of a first launch"""
        return cls()

    def items_in(self, category: str) -> List[str]:
        """Items of a category, empty list for unknown categories"""
        return self.items.get(category, [])

    def copy(self) -> 'ShoppingState':
        return ShoppingState(
            items={category: list(names) for category, names in self.items.items()},
            categories=list(self.categories),
            history=list(self.history),
        )

    def __eq__(self, other):
        if not isinstance(other, ShoppingState):
            return NotImplemented
        return (self.items == other.items
                and self.categories == other.categories
                and self.history == other.history)

    def __repr__(self):
        return (f"ShoppingState(items={self.items!r}, categories={self.categories!r}, "
                f"history={self.history!r})")
