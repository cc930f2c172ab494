"""JSON-file backed store for the persisted tracker settings."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from gjira.config import TrackerSettings

logger = logging.getLogger(__name__)


class SettingsStore:
    """Persist the tracker settings as a flat JSON object.

    A missing, unreadable or malformed file reads as empty, which makes the
    settings incomplete and sends the user back through the wizard.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(
                "Settings file is unreadable; treating as empty",
                extra={"path": str(self._path), "error": str(e)},
            )
            return {}

        if not isinstance(raw, dict):
            logger.warning(
                "Settings file has unexpected shape; treating as empty",
                extra={"path": str(self._path)},
            )
            return {}

        return raw

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def load(self) -> TrackerSettings:
        raw = self._read()
        try:
            return TrackerSettings.model_validate(raw)
        except ValidationError:
            logger.warning(
                "Settings file has invalid values; treating as empty",
                extra={"path": str(self._path)},
            )
            return TrackerSettings()

    def save(self, settings: TrackerSettings) -> None:
        """Overwrite all tracker fields in a single write.

        Unrelated keys already present in the file are kept.
        """

        data = self._read()
        data.update(settings.to_store())

        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
                f.write("\n")
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info("Settings saved", extra={"path": str(self._path)})
