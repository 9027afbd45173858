"""Shop wiring: one waiting room, a fixed pool of barbers, random client arrivals."""

from __future__ import annotations

import random
import threading
from typing import Dict, List, Optional, Tuple

from barbershop.actors import Barber, Client
from barbershop.config import ShopConfig, validate_shop_config
from barbershop.errors import InvalidConfiguration
from barbershop.logger import get_logger
from barbershop.room import WaitingRoom


logger = get_logger(__name__)

# Arrival interval range in ms for each speed level; 2 matches 1-3s arrivals
ARRIVAL_SPEEDS: Dict[int, Tuple[int, int]] = {
    1: (2000, 4000),
    2: (1000, 3000),
    3: (600, 1200),
    4: (300, 800),
    5: (150, 400),
}
DEFAULT_ARRIVAL_SPEED = 2


def _check_speed(speed: int) -> int:
    if speed not in ARRIVAL_SPEEDS:
        raise InvalidConfiguration(
            f"arrival speed must be between {min(ARRIVAL_SPEEDS)} and {max(ARRIVAL_SPEEDS)}"
        )
    return speed


class Dispatcher:
    def __init__(
        self,
        config: ShopConfig,
        arrival_speed: int = DEFAULT_ARRIVAL_SPEED,
        rng: Optional[random.Random] = None,
    ) -> None:
        validate_shop_config(config)
        self.config = config
        self.room = WaitingRoom(config.num_chairs)
        self.barbers: List[Barber] = [
            Barber(i, self.room, config.haircut_time_ms) for i in range(config.num_barbers)
        ]

        self._rng = rng or random.Random()
        self._speed_lock = threading.Lock()
        self._arrival_speed = _check_speed(arrival_speed)
        self._stop = threading.Event()
        self._barber_threads: List[threading.Thread] = []
        self._generator: Optional[threading.Thread] = None

    @property
    def arrival_speed(self) -> int:
        with self._speed_lock:
            return self._arrival_speed

    @arrival_speed.setter
    def arrival_speed(self, speed: int) -> None:
        with self._speed_lock:
            self._arrival_speed = _check_speed(speed)

    def start(self, generate_clients: bool = True) -> None:
        if self._barber_threads:
            raise RuntimeError("shop is already open")

        logger.info(
            "Opening shop: %d barber(s), %d chair(s), %d ms per haircut.",
            self.config.num_barbers,
            self.config.num_chairs,
            self.config.haircut_time_ms,
        )
        for barber in self.barbers:
            t = threading.Thread(target=barber.run, name=f"barber-{barber.id}", daemon=True)
            self._barber_threads.append(t)
            t.start()

        if generate_clients:
            self._generator = threading.Thread(target=self._generate, name="arrivals", daemon=True)
            self._generator.start()

    def spawn_client(self) -> Client:
        """Create the next client and let it try the waiting room on its own thread."""
        client = Client(self.room)
        t = threading.Thread(target=client.run, name=f"client-{client.id}", daemon=True)
        t.start()
        return client

    def _generate(self) -> None:
        while not self._stop.is_set():
            low, high = ARRIVAL_SPEEDS[self.arrival_speed]
            delay = self._rng.randint(low, high) / 1000.0
            if self._stop.wait(delay):
                break
            self.spawn_client()

    def stop(self, timeout: float = 1.0) -> None:
        """Stop arrivals, cancel every barber and wait for the threads to end."""
        self._stop.set()
        for barber in self.barbers:
            barber.cancel()

        if self._generator is not None:
            self._generator.join(timeout=timeout)
        for t in self._barber_threads:
            t.join(timeout=timeout)

        snap = self.room.snapshot()
        logger.info(
            "Shop closed: %d served, %d turned away, %d still waiting.",
            snap.served,
            snap.turned_away,
            len(snap.waiting),
        )

    def run_for(self, seconds: Optional[float] = None) -> None:
        """Keep the shop open for ``seconds``, or until Ctrl+C when None."""
        self.start()
        try:
            if seconds is None:
                while not self._stop.wait(0.5):
                    pass
            else:
                self._stop.wait(seconds)
        except KeyboardInterrupt:
            logger.info("Interrupted, closing the shop.")
        finally:
            self.stop()
