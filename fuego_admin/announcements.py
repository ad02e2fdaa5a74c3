"""Site announcements: optimistic toggling reconciled by a full refetch."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable

from fuego_admin.models import Announcement, Outcome

logger = logging.getLogger("fuego_admin.announcements")


class AnnouncementReconciler:
    """Owns the announcement list shown in the settings tab.

    The list is only ever replaced with a new list. A toggle flips the flag
    locally first (``provisional`` is then True) and always finishes with a
    refetch whose result overwrites the local list, so a toggle the server
    silently ignored snaps back.
    """

    def __init__(self, store) -> None:
        self.store = store
        self.announcements: list[Announcement] = []
        self.draft_text = ""
        self.is_posting = False
        self.provisional = False

    async def load(self) -> bool:
        """Replace the list with the server's. Returns False when the fetch failed."""
        try:
            fresh = await self.store.fetch_announcements()
        except Exception as e:
            logger.warning(f"Fetching announcements failed: {e}")
            return False
        if not isinstance(fresh, list):
            return False
        self.announcements = fresh
        self.provisional = False
        return True

    def apply_toggle(self, announcement_id: str) -> bool | None:
        """Flip ``is_active`` locally. Returns the new value, or None if the id is unknown."""
        new_value: bool | None = None
        updated: list[Announcement] = []
        for announcement in self.announcements:
            if announcement.id == announcement_id:
                new_value = not announcement.is_active
                announcement = replace(announcement, is_active=new_value)
            updated.append(announcement)
        if new_value is not None:
            self.announcements = updated
            self.provisional = True
        return new_value

    async def toggle(
        self,
        announcement_id: str,
        current: bool | None = None,
        on_applied: Callable[[], None] | None = None,
    ) -> None:
        """Optimistic flip followed by the remote update and an unconditional refetch.

        ``on_applied`` runs after the local flip and before the remote call.
        """
        new_value = self.apply_toggle(announcement_id)
        if on_applied is not None:
            on_applied()
        if new_value is None:
            if current is None:
                return
            new_value = not current
        await self.confirm_toggle(announcement_id, new_value)

    async def confirm_toggle(self, announcement_id: str, new_value: bool) -> None:
        """Send the toggle, then refetch and replace the local list even if the send failed."""
        try:
            await self.store.toggle_announcement(announcement_id, new_value)
        except Exception as e:
            logger.warning(f"Toggling announcement {announcement_id} failed: {e}")

        await self.load()

    async def post(self, text: str | None = None) -> Outcome[Announcement]:
        message = self.draft_text if text is None else text
        if not message.strip():
            return Outcome.failure("empty announcement")

        self.is_posting = True
        try:
            created = await self.store.create_announcement(message)
        except Exception as e:
            logger.warning(f"Creating announcement failed: {e}")
            return Outcome.failure(str(e))
        finally:
            self.is_posting = False

        if created is None:
            return Outcome.failure("store returned no announcement")

        self.announcements = [created, *self.announcements]
        self.draft_text = ""
        logger.info(f"Announcement created: {created.id}")
        return Outcome.success(created)
