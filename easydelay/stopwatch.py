import time
from enum import Enum
from typing import List, Tuple


class Stopwatch:
    """
    Stopwatch which can be started, paused and resumed as needed
    and is able to compute the elapsed active time while being
    aware of the interruptions.
    """
    class Event(Enum):
        START = 0
        STOP = 1

    def __init__(self, start: bool = True):
        self._events: List[Tuple[Stopwatch.Event, int]] = []
        if start:
            self.start()

    def is_running(self) -> bool:
        return bool(self._events) and self._events[-1][0] == Stopwatch.Event.START

    def elapsed(self) -> int: # ns
        # Sum the deltas between each Event.START and the following Event.STOP;
        # a trailing Event.START counts up to now
        deltas_sum = 0
        t_start = None
        for ev, t in self._events:
            if ev == Stopwatch.Event.START:
                if t_start is None:
                    t_start = t
            elif t_start is not None:
                deltas_sum += t - t_start
                t_start = None

        if t_start is not None:
            deltas_sum += time.monotonic_ns() - t_start

        return deltas_sum

    def elapsed_ms(self) -> float:
        return self.elapsed() * 1e-6

    def start(self):
        self._events.append((Stopwatch.Event.START, time.monotonic_ns()))

    def stop(self) -> int:
        if self.is_running():
            self._events.append((Stopwatch.Event.STOP, time.monotonic_ns()))
        return self.elapsed()

    def resume(self):
        # Actually is start(), but with a more reasonable name
        if not self.is_running():
            self.start()

    def pause(self):
        # Actually is stop(), but with a more reasonable name
        self.stop()

    def reset(self):
        self._events = []
