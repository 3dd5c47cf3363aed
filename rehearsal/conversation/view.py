"""Tentative transcript view.

Local, per-conversation list of exchanges shown to the trainee before the
transcript store has confirmed them. Each change is a command:

    entry = view.apply(conversation_id, exchange)   # shown as pending
    view.confirm(conversation_id, exchange.id)      # persisted
    view.rollback(conversation_id, exchange.id)     # persistence failed

Deferred (offline) exchanges simply stay pending until replay confirms
them.
"""

from dataclasses import dataclass

from rehearsal.conversation.models import Exchange, ExchangeStatus


@dataclass
class ViewEntry:
    """An exchange as displayed, with its persistence status."""

    exchange: Exchange
    status: ExchangeStatus = ExchangeStatus.PENDING


class TranscriptView:
    """Holds the displayed transcript for every conversation of one client."""

    def __init__(self) -> None:
        self._entries: dict[str, list[ViewEntry]] = {}

    def apply(self, conversation_id: str, exchange: Exchange) -> ViewEntry:
        entry = ViewEntry(exchange=exchange)
        self._entries.setdefault(conversation_id, []).append(entry)
        return entry

    def confirm(self, conversation_id: str, exchange_id: str) -> bool:
        """Mark an exchange confirmed. Returns False if it is not shown."""
        entry = self._find(conversation_id, exchange_id)
        if entry is None:
            return False
        entry.status = ExchangeStatus.CONFIRMED
        return True

    def rollback(self, conversation_id: str, exchange_id: str) -> bool:
        """Remove a pending exchange. Confirmed exchanges are never removed."""
        entry = self._find(conversation_id, exchange_id)
        if entry is None or entry.status is ExchangeStatus.CONFIRMED:
            return False
        self._entries[conversation_id].remove(entry)
        return True

    def entries(self, conversation_id: str) -> list[ViewEntry]:
        return list(self._entries.get(conversation_id, []))

    def pending(self, conversation_id: str) -> list[ViewEntry]:
        return [
            e for e in self._entries.get(conversation_id, [])
            if e.status is ExchangeStatus.PENDING
        ]

    def _find(self, conversation_id: str, exchange_id: str) -> ViewEntry | None:
        for entry in self._entries.get(conversation_id, []):
            if entry.exchange.id == exchange_id:
                return entry
        return None
