"""
ShopList - Main Application
Command line front end for the shopping list
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

import yaml

from shoplist.config import Config, DEFAULT_CONFIG_PATH
from shoplist.core.settings import SettingsManager
from shoplist.storage.kv_store import JsonFileStore
from shoplist.apps.shopping import ShoppingListManager, WidgetNotifier, read_widget_snapshot


class ShopListApp:
    """
    Shopping list application: storage, settings and list manager wiring
    """

    def __init__(self, config_path: str):
        """
        Initialize application

        Args:
            config_path: Path to config.yaml
        """
        self.config = Config(config_path)

        self._setup_logging()
        self.logger = logging.getLogger(__name__)

        self.store = JsonFileStore(self.config.get('storage.data_file', 'store.json'))
        shared_file = self.config.get('storage.shared_file')
        self.shared_store = JsonFileStore(shared_file) if shared_file else None

        self.notifier = WidgetNotifier()
        self.notifier.subscribe(self._on_widget_reload)

        self.manager = ShoppingListManager(
            self.store,
            shared_store=self.shared_store,
            notifier=self.notifier,
            persist_categories=self.config.get('storage.persist_categories', True),
        )
        self.manager.load()

        self.settings = SettingsManager(self.config.get('settings_file', 'settings.json'))

    def _setup_logging(self):
        """Configure logging"""
        log_level = getattr(logging, str(self.config.get('logging.level', 'INFO')).upper(), logging.INFO)
        log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

        handlers = []

        if self.config.get('logging.console', True):
            handlers.append(logging.StreamHandler())

        log_file = self.config.get('logging.file')
        if log_file:
            os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
            handlers.append(logging.FileHandler(log_file))

        if not handlers:
            handlers.append(logging.NullHandler())

        logging.basicConfig(
            level=log_level,
            format=log_format,
            handlers=handlers,
            force=True
        )

    def _on_widget_reload(self):
        if self.shared_store:
            self.logger.debug(f"Widget data refreshed in {self.shared_store.name()}")

    def _category(self, requested: Optional[str]) -> str:
        if requested:
            return requested
        return self.settings.selected_category(self.manager.categories)

    def execute(self, args: argparse.Namespace) -> List[str]:
        """
        Run one command

        Args:
            args: Parsed command line

        Returns:
            Lines to print
        """
        manager = self.manager
        command = args.command

        if command == 'list':
            return self._format_list()

        if command == 'history':
            history = manager.history
            return history if history else ["(history is empty)"]

        if command == 'add':
            category = self._category(args.category)
            if manager.add_item(args.name, category):
                return [f"Added '{args.name.strip()}' to {category}"]
            return ["Nothing added"]

        if command == 'done':
            if manager.delete_item(args.name, args.category):
                return [f"Done: '{args.name}'"]
            return [f"'{args.name}' not found in {args.category}"]

        if command == 'restore':
            category = self._category(args.category)
            if manager.restore_item(args.name, category):
                return [f"Restored '{args.name}' to {category}"]
            return ["Nothing restored"]

        if command == 'add-category':
            if manager.add_category(args.name):
                return [f"Added category {args.name.strip()}"]
            return ["Category not added"]

        if command == 'delete-category':
            if manager.delete_category(args.name):
                return [f"Deleted category {args.name}"]
            return [f"Category {args.name} cannot be deleted"]

        if command == 'rename-item':
            if manager.rename_item(args.category, args.old, args.new):
                return [f"Renamed '{args.old}' to '{args.new.strip()}'"]
            return ["Nothing renamed"]

        if command == 'rename-category':
            if manager.rename_category(args.old, args.new):
                return [f"Renamed category {args.old} to {args.new.strip()}"]
            return ["Category not renamed"]

        if command == 'move':
            if manager.reorder_items(args.category, args.from_indices, args.to):
                return [f"{i}. {item}" for i, item in enumerate(manager.items_in(args.category))]
            return ["Order unchanged"]

        if command == 'select':
            if args.category not in manager.categories:
                return [f"Unknown category {args.category}"]
            self.settings.set('selected_category', args.category)
            self.settings.save()
            return [f"Selected {args.category}"]

        if command == 'widget':
            if not self.shared_store:
                return ["Widget storage is disabled"]
            limit = args.limit if args.limit is not None else self.config.get('widget.item_limit')
            lines = []
            for category, items in read_widget_snapshot(self.shared_store, limit):
                lines.append(category)
                lines.extend(f"  - {item}" for item in items)
            return lines or ["(widget shows nothing)"]

        raise ValueError(f"Unknown command: {command}")

    def _format_list(self) -> List[str]:
        lines = []
        for category, items in self.manager.shopping_list().items():
            if not items:
                continue
            lines.append(category)
            lines.extend(f"  {i}. {item}" for i, item in enumerate(items))

        if not lines:
            lines.append("(no items)")

        history = self.manager.history
        if history:
            lines.append("")
            lines.append("Recently done: " + ", ".join(history))
        return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='shoplist', description="Categorised shopping list")
    parser.add_argument("--config", help="Path to config.yaml (default: $SHOPLIST_CONFIG or bundled config)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Show items by category")
    sub.add_parser("history", help="Show recently done items")

    p = sub.add_parser("add", help="Add an item")
    p.add_argument("name")
    p.add_argument("--category", help="Target category (default: selected category)")

    p = sub.add_parser("done", help="Mark an item done")
    p.add_argument("name")
    p.add_argument("--category", required=True)

    p = sub.add_parser("restore", help="Restore an item from history")
    p.add_argument("name")
    p.add_argument("--category", help="Target category (default: selected category)")

    p = sub.add_parser("add-category", help="Add a custom category")
    p.add_argument("name")

    p = sub.add_parser("delete-category", help="Delete a custom category and its items")
    p.add_argument("name")

    p = sub.add_parser("rename-item", help="Rename an item in place")
    p.add_argument("category")
    p.add_argument("old")
    p.add_argument("new")

    p = sub.add_parser("rename-category", help="Rename a custom category")
    p.add_argument("old")
    p.add_argument("new")

    p = sub.add_parser("move", help="Reorder items within a category")
    p.add_argument("category")
    p.add_argument("--from", dest="from_indices", type=int, nargs="+", required=True,
                   help="Positions of the items to move")
    p.add_argument("--to", type=int, required=True, help="Destination offset")

    p = sub.add_parser("select", help="Set the default category")
    p.add_argument("category")

    p = sub.add_parser("widget", help="Show what the widget displays")
    p.add_argument("--limit", type=int, help="Items per category")

    return parser


def resolve_config_path(requested: Optional[str]) -> str:
    if requested:
        return requested
    return os.environ.get('SHOPLIST_CONFIG', DEFAULT_CONFIG_PATH)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    config_path = resolve_config_path(args.config)

    if not os.path.exists(config_path):
        print(f"ERROR: Configuration file not found: {config_path}", file=sys.stderr)
        return 1

    try:
        app = ShopListApp(config_path)
    except (OSError, yaml.YAMLError, ValueError) as e:
        print(f"ERROR: Unreadable configuration {config_path}: {e}", file=sys.stderr)
        return 1

    for line in app.execute(args):
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
