"""Protocol repository for the plugin settings (SQLAlchemy implementation in sql_repository.py)"""

from typing import Protocol

from chessdiagram.core.config import StyleConfig


class SettingsRepository(Protocol):
    """Persistence of the style configuration"""

    def load_config(self) -> StyleConfig | None:
        """Stored configuration, or None if nothing was saved yet."""
        ...

    def save_config(self, config: StyleConfig) -> StyleConfig:
        """Replace the stored configuration and return what got stored."""
        ...
