from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from typing import List, Optional

from .models import (
    CandidateEntity,
    PokeRoutineType,
    PokeTradeType,
    QueueAdmissionResult,
    TradeRequest,
)

logger = logging.getLogger(__name__)

_ROUTINE_BY_KIND = {
    PokeTradeType.SPECIFIC: PokeRoutineType.LINK_TRADE,
    PokeTradeType.CLONE: PokeRoutineType.CLONE,
    PokeTradeType.DUMP: PokeRoutineType.DUMP,
}


@dataclass
class _QueueEntry:
    request: TradeRequest
    ticket: int


class LinkTradeQueue:
    """In-process shared trade queue.

    Privileged requests go ahead of unprivileged ones; within the same
    privilege level entries keep arrival order.
    """

    def __init__(
        self,
        code_min: Optional[int] = None,
        code_max: Optional[int] = None,
        max_size: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        import config

        self.code_min = config.RANDOM_CODE_MIN if code_min is None else code_min
        self.code_max = config.RANDOM_CODE_MAX if code_max is None else code_max
        if self.code_min > self.code_max:
            raise ValueError(f"code_min {self.code_min} > code_max {self.code_max}")
        self.max_size = config.MAX_QUEUE_SIZE if max_size is None else max_size
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._entries: List[_QueueEntry] = []
        self._ticket = 0
        self.can_queue = True

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def set_can_queue(self, value: bool) -> None:
        with self._lock:
            self.can_queue = bool(value)

    def next_random_code(self) -> int:
        return self._rng.randint(self.code_min, self.code_max)

    def admit(
        self,
        code: int,
        requester_name: str,
        entity: CandidateEntity,
        is_privileged: bool,
        kind: PokeTradeType,
    ) -> QueueAdmissionResult:
        request = TradeRequest(
            code=code,
            requester_name=requester_name,
            entity=entity,
            is_privileged=is_privileged,
            kind=kind,
            routine=_ROUTINE_BY_KIND.get(kind, PokeRoutineType.LINK_TRADE),
        )
        with self._lock:
            if not is_privileged and not self.can_queue:
                return QueueAdmissionResult(False, "Sorry, I am not currently accepting queue requests!")
            if any(e.request.requester_name == requester_name for e in self._entries):
                return QueueAdmissionResult(False, "You are already in the queue.")
            if not is_privileged and len(self._entries) >= self.max_size:
                return QueueAdmissionResult(False, "Queue is full, please try again later.")

            self._ticket += 1
            self._entries.append(_QueueEntry(request=request, ticket=self._ticket))
            self._entries.sort(key=lambda e: (not e.request.is_privileged, e.ticket))
            position = next(
                i for i, e in enumerate(self._entries, start=1) if e.ticket == self._ticket
            )

        logger.info(
            "[QUEUE_ADMITTED] requester=%s routine=%s position=%d",
            requester_name,
            request.routine.value,
            position,
        )
        return QueueAdmissionResult(
            True,
            f"Added {requester_name} to the {request.routine.value} queue. Current Position: {position}",
            position,
        )

    def remove(self, requester_name: str) -> bool:
        with self._lock:
            before = len(self._entries)
            self._entries = [e for e in self._entries if e.request.requester_name != requester_name]
            return len(self._entries) != before

    def pending(self, routine: Optional[PokeRoutineType] = None) -> List[TradeRequest]:
        with self._lock:
            return [
                e.request
                for e in self._entries
                if routine is None or e.request.routine == routine
            ]

    def describe_pending(self, routine: PokeRoutineType) -> str:
        requests = self.pending(routine)
        if not requests:
            return "Nobody in queue."
        return "\n".join(
            f"{i}. {r.requester_name}{' (priority)' if r.is_privileged else ''}"
            for i, r in enumerate(requests, start=1)
        )
