# mergeview/config/__init__.py
# Settings dataclass & JSON-backed settings manager

from .settings import MergeviewSettings, SettingsManager, settings_manager, get_settings

__all__ = ["MergeviewSettings", "SettingsManager", "settings_manager", "get_settings"]
