"""
Settings Management Module
Handles user settings persistence and access
"""

import json
import os
import logging
from typing import List

from shoplist.apps.shopping.state import SEED_CATEGORIES


class SettingsManager:
    """Manages user settings persistence"""

    DEFAULT_SETTINGS = {
        'selected_category': SEED_CATEGORIES[0],
    }

    def __init__(self, settings_file='settings.json', logger=None):
        """
        Initialize settings manager

        Args:
            settings_file: Path to settings JSON file
            logger: Logger instance (optional)
        """
        self.settings_file = settings_file
        self.logger = logger or logging.getLogger(__name__)
        self.settings = self.load()

    def load(self):
        """Load settings from file, missing keys filled from defaults"""
        settings = self.DEFAULT_SETTINGS.copy()
        if not os.path.exists(self.settings_file):
            return settings

        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                loaded_settings = json.load(f)
        except Exception as e:
            self.logger.warning(f"Failed to load settings: {e}. Using defaults.")
            return settings

        if isinstance(loaded_settings, dict):
            settings.update(loaded_settings)
        else:
            self.logger.warning("Settings file is not a JSON object. Using defaults.")
        return settings

    def save(self) -> bool:
        """
        Save settings to file

        Returns:
            True if successful, False otherwise
        """
        try:
            directory = os.path.dirname(os.path.abspath(self.settings_file))
            os.makedirs(directory, exist_ok=True)
            with open(self.settings_file, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=2, ensure_ascii=False)
            self.logger.debug("Settings saved")
            return True
        except Exception as e:
            self.logger.error(f"Failed to save settings: {e}")
            return False

    def get(self, key, default=None):
        return self.settings.get(key, default)

    def set(self, key, value):
        self.settings[key] = value

    def selected_category(self, categories: List[str]) -> str:
        """
        Category new and restored items go to

        Args:
            categories: Currently known categories

        Returns:
            The stored selection, or the first seed category if it is gone
        """
        selected = self.settings.get('selected_category')
        if selected in categories:
            return selected
        return self.DEFAULT_SETTINGS['selected_category']
