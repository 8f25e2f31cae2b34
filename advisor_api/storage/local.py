"""Local filesystem profile store.

Files are stored under:
    {base_path}/profile/
        - user_profile.json    (UserProfile)
        - notifications.json   (list of Notification)
        - watchlist.json       (list of instrument ids)

A missing file reads as empty. A corrupt file is logged and treated as
empty, the same way a cache miss would be.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from advisor_api.core.config import get_data_path
from advisor_api.domain.constants import DEFAULT_RISK_PROFILE
from advisor_api.domain.entities import Notification, RiskProfile, UserProfile
from advisor_api.domain.exceptions import DataNotFoundError, StorageWriteError

logger = logging.getLogger(__name__)

PROFILE_FILENAME = "user_profile.json"
NOTIFICATIONS_FILENAME = "notifications.json"
WATCHLIST_FILENAME = "watchlist.json"


class LocalProfileStore:
    """JSON-file store for the user's profile, notifications and watchlist."""

    def __init__(self, base_path: Path | str | None = None):
        """Initialize storage.

        Args:
            base_path: Base path for data storage. Defaults to ADVISOR_DATA_PATH.
        """
        if base_path is None:
            base_path = get_data_path()
        self.base_path = Path(base_path)
        self.profile_path = self.base_path / "profile"

    # ------------------------------------------------------------------
    # File helpers
    # ------------------------------------------------------------------

    def _read_json(self, filename: str) -> Any | None:
        path = self.profile_path / filename
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text())
        except (json.JSONDecodeError, OSError):
            logger.warning(f"Profile store file corrupt/unreadable, treating as empty: {path}")
            return None

    def _write_json(self, filename: str, data: Any) -> None:
        """Write JSON atomically (temp file in the same directory, then replace)."""
        target = self.profile_path / filename
        try:
            self.profile_path.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                dir=self.profile_path, prefix=f".{filename}_", suffix=".tmp"
            )
        except OSError as e:
            raise StorageWriteError(f"Cannot write {filename}: {e}", path=str(target)) from e

        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2)
            os.replace(temp_path, target)
        except OSError as e:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise StorageWriteError(f"Cannot write {filename}: {e}", path=str(target)) from e

    # ------------------------------------------------------------------
    # User profile
    # ------------------------------------------------------------------

    def save_profile(self, profile: UserProfile) -> None:
        """Store the profile, replacing any previous one."""
        self._write_json(PROFILE_FILENAME, profile.to_dict())
        logger.info(f"Profile saved: {profile.name} ({profile.risk_profile.value})")

    def load_profile(self) -> UserProfile | None:
        """Return the stored profile, or None if onboarding has not run."""
        data = self._read_json(PROFILE_FILENAME)
        if data is None:
            return None
        try:
            return UserProfile.from_dict(data)
        except (KeyError, TypeError, ValueError):
            logger.warning("Stored profile is malformed, treating as absent")
            return None

    def delete_profile(self) -> bool:
        """Remove the stored profile. Returns True if one existed."""
        path = self.profile_path / PROFILE_FILENAME
        existed = path.exists()
        path.unlink(missing_ok=True)
        return existed

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def save_notifications(self, notifications: list[Notification]) -> None:
        self._write_json(NOTIFICATIONS_FILENAME, [n.to_dict() for n in notifications])

    def load_notifications(self) -> list[Notification]:
        data = self._read_json(NOTIFICATIONS_FILENAME)
        if not isinstance(data, list):
            return []
        notifications = []
        for record in data:
            try:
                notifications.append(Notification.from_dict(record))
            except (KeyError, TypeError, ValueError):
                logger.warning(f"Skipping malformed notification: {record}")
        return notifications

    def unread_count(self) -> int:
        return sum(1 for n in self.load_notifications() if not n.read)

    def mark_notification_read(self, notification_id: str) -> Notification:
        """Mark one notification as read.

        Raises:
            DataNotFoundError: if no notification has that id
        """
        notifications = self.load_notifications()
        for notification in notifications:
            if notification.id == notification_id:
                notification.read = True
                self.save_notifications(notifications)
                return notification
        raise DataNotFoundError(
            f"Notification not found: {notification_id}", resource=notification_id
        )

    def clear_notification(self, notification_id: str) -> None:
        """Remove one notification.

        Raises:
            DataNotFoundError: if no notification has that id
        """
        notifications = self.load_notifications()
        remaining = [n for n in notifications if n.id != notification_id]
        if len(remaining) == len(notifications):
            raise DataNotFoundError(
                f"Notification not found: {notification_id}", resource=notification_id
            )
        self.save_notifications(remaining)

    # ------------------------------------------------------------------
    # Watchlist
    # ------------------------------------------------------------------

    def save_watchlist(self, instrument_ids: list[str]) -> None:
        self._write_json(WATCHLIST_FILENAME, list(instrument_ids))

    def load_watchlist(self) -> list[str]:
        data = self._read_json(WATCHLIST_FILENAME)
        if not isinstance(data, list):
            return []
        return [str(item) for item in data]

    def add_to_watchlist(self, instrument_id: str) -> list[str]:
        """Append an id if not already present; returns the new watchlist."""
        watchlist = self.load_watchlist()
        if instrument_id not in watchlist:
            watchlist.append(instrument_id)
            self.save_watchlist(watchlist)
        return watchlist

    def remove_from_watchlist(self, instrument_id: str) -> list[str]:
        """Remove an id if present; returns the new watchlist."""
        watchlist = self.load_watchlist()
        if instrument_id in watchlist:
            watchlist.remove(instrument_id)
            self.save_watchlist(watchlist)
        return watchlist


def resolve_risk_profile(profile: UserProfile | None) -> RiskProfile:
    """Risk profile to allocate for; moderate when no profile is stored."""
    if profile is None:
        return DEFAULT_RISK_PROFILE
    return profile.risk_profile
