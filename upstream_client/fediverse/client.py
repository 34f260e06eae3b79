"""Fediverse API client - note engagement."""

from loguru import logger

from upstream_client.base import BaseClient
from upstream_client.fediverse.schemas import NoteSchema

USER_NOTES_LIMIT = 100


class FediverseClient(BaseClient):
    """Client for a Misskey-compatible instance."""

    async def note(self, note_id: str) -> NoteSchema:
        """POST /api/notes/show - one note."""
        return self._parse(NoteSchema, await self._post("/api/notes/show", {"noteId": note_id}))

    async def user_notes(self, user_id: str, limit: int = USER_NOTES_LIMIT) -> dict[str, NoteSchema]:
        """POST /api/users/notes - recent notes of a user, keyed by note id."""
        data = await self._post("/api/users/notes", {"userId": user_id, "limit": limit})
        notes = self._parse(list[NoteSchema], data)
        logger.debug("Fetched {} notes for user {}", len(notes), user_id)
        return {n.id: n for n in notes}
