"""Implementation of (Settings)Repository using SQLAlchemy"""

import logging

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chessdiagram.core.config import StyleConfig
from chessdiagram.core.exceptions import RepositoryError
from chessdiagram.db.schema import DBPluginSettings

log = logging.getLogger(__name__)

DEFAULT_PLUGIN_ID = "chessboard"


class SQLSettingsRepository:
    """Settings blob stored as a JSON column, one row per plugin"""

    def __init__(self, db_session: Session, plugin_id: str = DEFAULT_PLUGIN_ID) -> None:
        self.db = db_session
        self.plugin_id = plugin_id

    def load_config(self) -> StyleConfig | None:
        """Stored configuration, or None if nothing was saved yet."""
        settings_db = self._fetch_settings()
        if settings_db is None:
            return None
        try:
            return StyleConfig.from_blob(settings_db.data)
        except ValidationError as e:
            raise RepositoryError(
                f"Stored settings for {self.plugin_id!r} are invalid: {settings_db.data}"
            ) from e

    def save_config(self, config: StyleConfig) -> StyleConfig:
        """Replace the stored configuration and return what got stored."""
        settings_db = self._fetch_settings()
        try:
            if settings_db is None:
                settings_db = DBPluginSettings(
                    plugin_id=self.plugin_id, data=config.to_blob()
                )
                self.db.add(settings_db)
            else:
                settings_db.data = config.to_blob()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(
                f"Could not store settings for {self.plugin_id!r}"
            ) from e
        self.db.refresh(settings_db)
        log.debug("Stored settings for %s: %s", self.plugin_id, settings_db.data)
        return StyleConfig.from_blob(settings_db.data)

    def _fetch_settings(self) -> DBPluginSettings | None:
        query = select(DBPluginSettings).where(
            DBPluginSettings.plugin_id == self.plugin_id
        )
        return self.db.scalar(query)
