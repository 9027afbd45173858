# Waiting room shared by barbers and clients
# - One lock (wrapped in a Condition) guards the queue and all bookkeeping
# - Clients never block; barbers sleep on the condition while the room is empty

from __future__ import annotations

import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Deque, Dict, Optional, Set, Tuple

from barbershop.errors import Cancelled, InvalidConfiguration
from barbershop.logger import get_logger

if TYPE_CHECKING:
    from barbershop.actors import Client


logger = get_logger(__name__)


@dataclass(frozen=True)
class BarberStatus:
    barber_id: int
    client_id: Optional[int] = None
    started_at: Optional[float] = None

    @property
    def busy(self) -> bool:
        return self.client_id is not None


@dataclass(frozen=True)
class RoomSnapshot:
    capacity: int
    waiting: Tuple[int, ...]
    barbers: Tuple[BarberStatus, ...]
    sleeping: int
    served: int
    turned_away: int


class WaitingRoom:
    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise InvalidConfiguration("capacity must be >= 0")
        self.capacity: int = capacity

        # Protected by _cond
        self._queue: Deque["Client"] = deque()
        self._interrupted: Set[int] = set()
        self._service: Dict[int, BarberStatus] = {}
        self._sleeping: int = 0
        self._served: int = 0
        self._turned_away: int = 0

        self._cond = threading.Condition(threading.Lock())

    def __len__(self) -> int:
        with self._cond:
            return len(self._queue)

    def try_enter(self, client: "Client") -> bool:
        """Seat ``client`` if a chair is free; never blocks."""
        with self._cond:
            if len(self._queue) < self.capacity:
                self._queue.append(client)
                logger.info("%s took a seat in the queue.", client)
                self._cond.notify_all()
                return True
            self._turned_away += 1
            logger.info("%s left, all chairs are taken.", client)
            return False

    def take_next(self, barber_id: int) -> "Client":
        """Remove the longest-waiting client, sleeping while the room is empty.

        Raises Cancelled if ``interrupt(barber_id)`` was called before or
        during the wait.
        """
        with self._cond:
            announced = False
            while True:
                if barber_id in self._interrupted:
                    self._interrupted.discard(barber_id)
                    raise Cancelled(f"barber {barber_id} was cancelled")
                if self._queue:
                    break
                if not announced:
                    logger.debug("Barber %d is waiting for clients...", barber_id)
                    announced = True
                self._sleeping += 1
                try:
                    self._cond.wait()
                finally:
                    self._sleeping -= 1

            client = self._queue.popleft()
            logger.info("Barber %d is serving %s", barber_id, client)
            return client

    def interrupt(self, barber_id: int) -> None:
        """Ask the barber to stop; wakes it if it is asleep in take_next."""
        with self._cond:
            self._interrupted.add(barber_id)
            self._cond.notify_all()

    def begin_service(self, barber_id: int, client: "Client") -> None:
        with self._cond:
            self._service[barber_id] = BarberStatus(
                barber_id=barber_id,
                client_id=client.id,
                started_at=time.monotonic(),
            )

    def end_service(self, barber_id: int, completed: bool = True) -> None:
        with self._cond:
            self._service[barber_id] = BarberStatus(barber_id=barber_id)
            if completed:
                self._served += 1

    def register_barber(self, barber_id: int) -> None:
        """Seat a barber at ``barber_id``, idle and with no stop request left over."""
        with self._cond:
            self._interrupted.discard(barber_id)
            self._service[barber_id] = BarberStatus(barber_id=barber_id)

    def snapshot(self) -> RoomSnapshot:
        with self._cond:
            return RoomSnapshot(
                capacity=self.capacity,
                waiting=tuple(c.id for c in self._queue),
                barbers=tuple(self._service[k] for k in sorted(self._service)),
                sleeping=self._sleeping,
                served=self._served,
                turned_away=self._turned_away,
            )
