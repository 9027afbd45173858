# Terminal animation of the shop (curses)
# - Keyboard controls: 1-5 to change arrival speed, q to quit

from __future__ import annotations

import curses
import time
from typing import Optional

from barbershop.dispatcher import ARRIVAL_SPEEDS, Dispatcher
from barbershop.room import BarberStatus, RoomSnapshot


BAR_WIDTH = 24
SPEED_KEYS = {ord(str(speed)): speed for speed in ARRIVAL_SPEEDS}


def barber_line(status: BarberStatus, cut_time: float, now: float) -> str:
    if status.busy and status.started_at is not None:
        elapsed = max(0.0, now - status.started_at)
        prog = min(1.0, elapsed / max(0.001, cut_time))
        filled = int(prog * BAR_WIDTH)
        bar = "#" * filled + "-" * (BAR_WIDTH - filled)
        return f"Barber {status.barber_id}: Cutting C{status.client_id:03d}  [{bar}] {int(prog*100):3d}%"
    return f"Barber {status.barber_id}: Zzz (sleeping)"


def chairs_line(snapshot: RoomSnapshot) -> str:
    chairs = []
    for i in range(snapshot.capacity):
        if i < len(snapshot.waiting):
            chairs.append(f"[{snapshot.waiting[i]:02d}]")
        else:
            chairs.append("[  ]")
    return " ".join(chairs)


def draw_ui(
    stdscr,
    snapshot: RoomSnapshot,
    speed: int,
    cut_time: float,
    now: Optional[float] = None,
) -> None:
    if now is None:
        now = time.monotonic()
    stdscr.erase()

    stdscr.addstr(0, 2, "Sleeping Barber: Barbershop Simulation")
    stdscr.addstr(1, 2, "Controls: [1-5]=arrival speed, q=quit")

    stdscr.addstr(
        3,
        2,
        f"Chairs: {snapshot.capacity}  |  Speed: {speed}  |  "
        f"Served: {snapshot.served}  |  Left: {snapshot.turned_away}",
    )

    y = 5
    for status in snapshot.barbers:
        stdscr.addstr(y, 2, barber_line(status, cut_time, now))
        y += 1

    y += 1
    stdscr.addstr(y, 2, "Waiting chairs:")
    y += 1
    stdscr.addstr(y, 4, chairs_line(snapshot))

    y += 2
    stdscr.addstr(y, 2, "Legend: [NN]=client id in queue; empty chair=[  ]")

    stdscr.refresh()


def run_curses(dispatcher: Dispatcher) -> None:
    cut_time = dispatcher.config.haircut_time_ms / 1000.0
    dispatcher.start()

    def wrapped(stdscr):
        curses.curs_set(0)
        stdscr.nodelay(True)
        stdscr.timeout(100)  # ms

        while True:
            ch = stdscr.getch()
            if ch in (ord("q"), ord("Q")):
                break
            if ch in SPEED_KEYS:
                dispatcher.arrival_speed = SPEED_KEYS[ch]

            draw_ui(stdscr, dispatcher.room.snapshot(), dispatcher.arrival_speed, cut_time)

    try:
        curses.wrapper(wrapped)
    finally:
        dispatcher.stop()
