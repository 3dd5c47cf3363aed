"""Pending exchange buffer.

Holds exchanges whose persistence was deferred because the transcript
store was unreachable. Entries keep their original order and are
replayed by the ConnectivityMonitor.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from rehearsal.conversation.models import Exchange
from rehearsal.observability.metrics import PENDING_EXCHANGES


@dataclass(frozen=True)
class PendingExchange:
    """An exchange waiting to be appended to its conversation transcript."""

    conversation_id: str
    exchange: Exchange


class PendingExchangeBuffer:
    """Ordered in-memory buffer of deferred exchanges."""

    def __init__(self) -> None:
        self._entries: list[PendingExchange] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PendingExchange]:
        return iter(list(self._entries))

    def add(self, conversation_id: str, exchange: Exchange) -> PendingExchange:
        entry = PendingExchange(conversation_id=conversation_id, exchange=exchange)
        self._entries.append(entry)
        PENDING_EXCHANGES.set(len(self._entries))
        return entry

    def remove(self, entry: PendingExchange) -> None:
        self._entries.remove(entry)
        PENDING_EXCHANGES.set(len(self._entries))

    def has_pending(self, conversation_id: str) -> bool:
        return any(e.conversation_id == conversation_id for e in self._entries)

    def for_conversation(self, conversation_id: str) -> list[Exchange]:
        """Buffered exchanges of one conversation, in original order."""
        return [e.exchange for e in self._entries if e.conversation_id == conversation_id]

    def snapshot(self) -> list[PendingExchange]:
        return list(self._entries)
