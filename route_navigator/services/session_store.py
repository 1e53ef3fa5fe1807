import logging
import threading
from collections import OrderedDict
from typing import Iterable, Optional
from uuid import uuid4

from route_navigator.core.config import settings
from route_navigator.domain.route_sequencing import Ok, Place, Result, RouteSequencer
from route_navigator.domain.route_sequencing.exceptions import DuplicatePlaceError

logger = logging.getLogger(__name__)


class PlanningSessionStore:
    """One RouteSequencer per planning session, held in process memory.

    ``lock`` serialises every read and mutation of the held sequencers; the
    sequencer itself does no locking.
    """

    def __init__(self, capacity: int | None = None) -> None:
        self.capacity = capacity or settings.MAX_PLANNING_SESSIONS
        self.lock = threading.RLock()
        self._sessions: "OrderedDict[str, RouteSequencer]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, places: Iterable[Place] = ()) -> Result[str, DuplicatePlaceError]:
        sequencer = RouteSequencer()
        seeded = sequencer.extend(places)
        if not seeded.ok:
            return seeded

        session_id = uuid4().hex
        with self.lock:
            self._sessions[session_id] = sequencer
            while len(self._sessions) > self.capacity:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("Evicted planning session %s", evicted)
        logger.info("Created planning session %s with %d points", session_id, len(sequencer))
        return Ok(session_id)

    def get(self, session_id: str) -> Optional[RouteSequencer]:
        with self.lock:
            sequencer = self._sessions.get(session_id)
            if sequencer is not None:
                self._sessions.move_to_end(session_id)
            return sequencer

    def discard(self, session_id: str) -> bool:
        with self.lock:
            removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.info("Discarded planning session %s", session_id)
        return removed


session_store = PlanningSessionStore()
