# Barber and client actors
# - A client tries the waiting room once and is done
# - A barber loops: sleep until a client is seated, cut hair, repeat

from __future__ import annotations

import itertools
import threading
from enum import Enum
from typing import Optional

from barbershop.errors import Cancelled, InvalidConfiguration
from barbershop.logger import get_logger
from barbershop.room import WaitingRoom


logger = get_logger(__name__)

_client_ids = itertools.count()
_client_ids_lock = threading.Lock()


def next_client_id() -> int:
    with _client_ids_lock:
        return next(_client_ids)


class ClientState(Enum):
    ARRIVING = "arriving"
    REJECTED = "rejected"
    ENQUEUED = "enqueued"


class BarberState(Enum):
    IDLE = "idle"
    SERVING = "serving"
    STOPPED = "stopped"


class Client:
    def __init__(self, room: WaitingRoom, client_id: Optional[int] = None) -> None:
        self.id: int = next_client_id() if client_id is None else client_id
        self.room = room
        self.state: ClientState = ClientState.ARRIVING

    def __repr__(self) -> str:
        return f"Client {self.id}"

    def run(self) -> bool:
        """Try to sit down once. Returns True if the client got a chair."""
        if self.room.try_enter(self):
            self.state = ClientState.ENQUEUED
            logger.info("%s is waiting for a turn.", self)
            return True
        self.state = ClientState.REJECTED
        return False


class Barber:
    def __init__(self, barber_id: int, room: WaitingRoom, service_time_ms: int) -> None:
        if barber_id < 0:
            raise InvalidConfiguration("barber_id must be >= 0")
        if service_time_ms < 0:
            raise InvalidConfiguration("service_time_ms must be >= 0")
        self.id: int = barber_id
        self.room = room
        self.service_time_ms: int = service_time_ms
        self.state: BarberState = BarberState.IDLE
        self.served: int = 0

        self._stop = threading.Event()
        room.register_barber(barber_id)

    def __repr__(self) -> str:
        return f"Barber {self.id}"

    @property
    def cancelled(self) -> bool:
        return self._stop.is_set()

    def cancel(self) -> None:
        """Request a stop; a barber asleep in take_next wakes up and exits."""
        self._stop.set()
        self.room.interrupt(self.id)

    def run(self) -> None:
        while not self._stop.is_set():
            self.state = BarberState.IDLE
            try:
                client = self.room.take_next(self.id)
            except Cancelled:
                break
            self._cut_hair(client)

        self.state = BarberState.STOPPED
        logger.info("Barber %d finished work.", self.id)

    def _cut_hair(self, client: "Client") -> None:
        self.state = BarberState.SERVING
        self.room.begin_service(self.id, client)

        # The room lock is not held here; other barbers and clients proceed
        interrupted = self._stop.wait(self.service_time_ms / 1000.0)

        if interrupted:
            logger.info("Barber %d stopped in the middle of %s's haircut.", self.id, client)
        else:
            self.served += 1
            logger.info("Barber %d finished the haircut for %s", self.id, client)
        self.room.end_service(self.id, completed=not interrupted)
