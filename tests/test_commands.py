"""
Unit tests for shopping list commands
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shoplist.apps.shopping import commands
from shoplist.apps.shopping.state import ShoppingState, SEED_CATEGORIES, HISTORY_LIMIT


def test_seed_state():
    """Test first-launch state"""
    state = ShoppingState.seed()

    assert state.categories == ["Food", "Household", "Other"], "Seed categories in order"
    assert state.items == {}, "No items at first launch"
    assert state.history == [], "No history at first launch"
    assert state.items_in("Food") == [], "Absent category reads as empty"

    print("✓ Seed state")


def test_add_item_trims_and_appends():
    """Test adding items"""
    state = ShoppingState.seed()

    assert commands.add_item(state, "  milk ", "Food")
    assert commands.add_item(state, "bread", "Food")
    assert state.items == {"Food": ["milk", "bread"]}, f"Unexpected items: {state.items}"

    print("✓ Add item")


def test_add_blank_item_is_noop():
    """Test empty and whitespace-only names never change the list"""
    state = ShoppingState.seed()
    commands.add_item(state, "eggs", "Food")

    for blank in ["", "   ", "\t", None]:
        assert not commands.add_item(state, blank, "Food"), f"Blank {blank!r} should be ignored"
    assert state.items_in("Food") == ["eggs"], "List size must not change"

    print("✓ Blank item ignored")


def test_add_item_unknown_category_is_noop():
    state = ShoppingState.seed()

    assert not commands.add_item(state, "milk", "Garden")
    assert state.items == {}


def test_delete_item_pushes_history():
    """Test deleting moves the item into history"""
    state = ShoppingState.seed()
    commands.add_item(state, "milk", "Food")
    commands.add_item(state, "soap", "Household")

    assert commands.delete_item(state, "milk", "Food")
    assert commands.delete_item(state, "soap", "Household")

    assert state.items == {"Food": [], "Household": []}
    assert state.history == ["soap", "milk"], "Most recent deletion first"

    print("✓ Delete item")


def test_delete_item_removes_first_match_only():
    state = ShoppingState.seed()
    for name in ["apple", "pear", "apple"]:
        commands.add_item(state, name, "Food")

    commands.delete_item(state, "apple", "Food")
    assert state.items_in("Food") == ["pear", "apple"]


def test_delete_missing_item_is_noop():
    state = ShoppingState.seed()
    commands.add_item(state, "milk", "Food")

    assert not commands.delete_item(state, "tea", "Food")
    assert not commands.delete_item(state, "milk", "Other")
    assert state.history == []


def test_history_is_capped():
    """Test history never exceeds its limit"""
    state = ShoppingState.seed()
    names = [f"item{i}" for i in range(8)]
    for name in names:
        commands.add_item(state, name, "Other")
    for name in names:
        commands.delete_item(state, name, "Other")

    assert len(state.history) == HISTORY_LIMIT, f"History length {len(state.history)}"
    assert state.history == ["item7", "item6", "item5", "item4", "item3"]

    print("✓ History capped")


def test_history_deduplicates():
    """Test re-deleting a name moves it to the front instead of repeating"""
    state = ShoppingState.seed()
    for name in ["milk", "eggs", "milk"]:
        commands.add_item(state, name, "Food")

    commands.delete_item(state, "milk", "Food")
    commands.delete_item(state, "eggs", "Food")
    commands.delete_item(state, "milk", "Food")

    assert state.history == ["milk", "eggs"], f"Unexpected history: {state.history}"

    print("✓ History deduplicated")


def test_push_history_many():
    history = ["a", "b"]
    commands.push_history(history, ["c", "a", "d"], limit=3)

    assert history == ["d", "a", "c"]


def test_restore_item():
    """Test restoring moves a name from history to the category"""
    state = ShoppingState.seed()
    commands.add_item(state, "milk", "Food")
    commands.delete_item(state, "milk", "Food")

    assert commands.restore_item(state, "milk", "Household")
    assert state.items_in("Household") == ["milk"]
    assert state.history == []

    print("✓ Restore item")


def test_restore_into_category_holding_name_is_noop():
    """Test restore does nothing when the target already has the name"""
    state = ShoppingState.seed()
    commands.add_item(state, "milk", "Food")
    commands.add_item(state, "milk", "Food")
    commands.delete_item(state, "milk", "Food")
    before = state.copy()

    assert not commands.restore_item(state, "milk", "Food")
    assert state == before, "State must be untouched"

    print("✓ Restore no-op on duplicate")


def test_restore_unknown_name_is_noop():
    state = ShoppingState.seed()

    assert not commands.restore_item(state, "milk", "Food")
    assert state.items == {}


def test_example_walkthrough():
    """Test add, delete, restore in sequence"""
    state = ShoppingState(items={"Food": []})

    commands.add_item(state, "milk", "Food")
    assert state.items == {"Food": ["milk"]}

    commands.delete_item(state, "milk", "Food")
    assert state.items == {"Food": []}
    assert state.history == ["milk"]

    commands.restore_item(state, "milk", "Food")
    assert state.items == {"Food": ["milk"]}
    assert state.history == []

    print("✓ Walkthrough")


def test_add_category():
    state = ShoppingState.seed()

    assert commands.add_category(state, "  Garden ")
    assert not commands.add_category(state, "Garden"), "Duplicate category"
    assert not commands.add_category(state, "Food"), "Duplicate seed category"
    assert not commands.add_category(state, "  "), "Blank category"
    assert state.categories == ["Food", "Household", "Other", "Garden"]


def test_seed_categories_cannot_be_deleted():
    """Test seed categories survive delete_category"""
    state = ShoppingState.seed()
    commands.add_item(state, "milk", "Food")

    for seed in SEED_CATEGORIES:
        assert not commands.can_delete_category(state, seed)
        assert not commands.delete_category(state, seed), f"{seed} must not be removable"

    assert state.categories == list(SEED_CATEGORIES)
    assert state.items_in("Food") == ["milk"]

    print("✓ Seed categories protected")


def test_delete_custom_category_drops_items():
    state = ShoppingState.seed()
    commands.add_category(state, "Garden")
    commands.add_item(state, "seeds", "Garden")

    assert commands.delete_category(state, "Garden")
    assert "Garden" not in state.categories
    assert "Garden" not in state.items
    assert not commands.delete_category(state, "Garden"), "Already gone"


def test_rename_category():
    state = ShoppingState.seed()
    commands.add_category(state, "Garden")
    commands.add_category(state, "Pets")
    commands.add_item(state, "seeds", "Garden")

    assert commands.rename_category(state, "Garden", " Yard ")
    assert state.categories == ["Food", "Household", "Other", "Yard", "Pets"], "Position kept"
    assert state.items == {"Yard": ["seeds"]}

    assert not commands.rename_category(state, "Yard", "Pets"), "Name taken"
    assert not commands.rename_category(state, "Food", "Groceries"), "Seed category"
    assert not commands.rename_category(state, "Yard", ""), "Blank name"


def test_rename_item_keeps_position():
    """Test renaming replaces in place"""
    state = ShoppingState.seed()
    for name in ["milk", "eggs", "bread"]:
        commands.add_item(state, name, "Food")

    assert commands.rename_item(state, "Food", "eggs", "  free-range eggs ")
    assert state.items_in("Food") == ["milk", "free-range eggs", "bread"]

    assert not commands.rename_item(state, "Food", "milk", "   "), "Blank name"
    assert not commands.rename_item(state, "Food", "tea", "coffee"), "Unknown item"
    assert not commands.rename_item(state, "Other", "milk", "oat milk"), "Wrong category"
    assert state.items_in("Food") == ["milk", "free-range eggs", "bread"]

    print("✓ Rename item")


def test_reorder_items():
    """Test moves within a category"""
    state = ShoppingState(items={"Food": ["a", "b", "c", "d"]})

    # Move first item to the end
    assert commands.reorder_items(state, "Food", [0], 4)
    assert state.items_in("Food") == ["b", "c", "d", "a"]

    # Move last item to the front
    assert commands.reorder_items(state, "Food", [3], 0)
    assert state.items_in("Food") == ["a", "b", "c", "d"]

    # Move a block, inserted before the item at the pre-move offset
    assert commands.reorder_items(state, "Food", [0, 2], 4)
    assert state.items_in("Food") == ["b", "d", "a", "c"]

    assert commands.reorder_items(state, "Food", [3], 1)
    assert state.items_in("Food") == ["b", "c", "d", "a"]

    print("✓ Reorder items")


def test_reorder_invalid_is_noop():
    state = ShoppingState(items={"Food": ["a", "b", "c"], "Other": ["x"]})
    before = state.copy()

    assert not commands.reorder_items(state, "Food", [], 1), "No indices"
    assert not commands.reorder_items(state, "Food", [3], 0), "Index out of range"
    assert not commands.reorder_items(state, "Food", [0], 4), "Offset out of range"
    assert not commands.reorder_items(state, "Food", [1], 1), "Same position"
    assert not commands.reorder_items(state, "Food", [1], 2), "Same position after removal"
    assert not commands.reorder_items(state, "Garden", [0], 1), "Unknown category"
    assert state == before


if __name__ == '__main__':
    print("Running shopping list command tests...\n")

    try:
        for name, func in list(globals().items()):
            if name.startswith('test_') and callable(func):
                func()

        print("\n" + "=" * 50)
        print("ALL TESTS PASSED ✓")
        print("=" * 50)

    except AssertionError as e:
        print(f"\n❌ TEST FAILED: {e}")
        sys.exit(1)
