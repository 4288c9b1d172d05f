import asyncio
from enum import Enum
from typing import Callable, Optional

from easydelay.errors import ErrorsStrings
from easydelay.logging import get_logger
from easydelay.stopwatch import Stopwatch
from easydelay.utils.measures import Duration, duration_to_ms, duration_str_human
from easydelay.utils.time import ms, ms2timestamp

log = get_logger(__name__)

Action = Callable[[], None]


class Delay:
    """
    Delay which executes an action once its duration is elapsed.
    Unlike a plain loop.call_later(), the countdown can be paused
    and resumed later from the point it left off, queried for the
    remaining time and cancelled.

    The delay is driven by the running asyncio event loop: start() and
    resume() return a future which is resolved (within the loop) right
    after the action has been executed.
    The instance is not thread safe.
    """

    class State(Enum):
        IDLE = 0
        ARMED = 1
        PAUSED = 2
        FIRED = 3

    def __init__(self, loop: asyncio.AbstractEventLoop = None):
        # Loop given by the caller; otherwise the running one is looked up at each run
        self._loop = loop
        self._stopwatch = Stopwatch(start=False)
        self._reset()

    def __str__(self):
        s = f"Delay({self._state.name}"
        remaining = self.remaining
        if remaining is not None:
            s += f", remaining={duration_str_human(round(remaining / 1000))}"
        if self._start_time is not None:
            s += f", started={ms2timestamp(self._start_time)}"
        return s + ")"

    @property
    def timer_id(self) -> Optional[asyncio.TimerHandle]:
        """ The handle of the scheduled loop callback, if any """
        return self._handle

    @property
    def start_time(self) -> Optional[int]:
        """ Epoch milliseconds of the last start() """
        return self._start_time

    @property
    def restart_time(self) -> Optional[int]:
        """ Epoch milliseconds of the last resume() """
        return self._restart_time

    @property
    def is_paused(self) -> bool:
        return self._state == Delay.State.PAUSED

    @property
    def state(self) -> 'Delay.State':
        return self._state

    @property
    def remaining(self) -> Optional[float]:
        """
        Milliseconds still owed before the action is executed.
        None if the delay is not armed nor paused, or if the
        time is already elapsed.
        """
        if self._state == Delay.State.PAUSED:
            remaining = self._remaining_since_last_start
        elif self._state == Delay.State.ARMED:
            remaining = self._remaining_since_last_start - self._since_last_arm()
        else:
            return None

        return remaining if remaining > 0 else None

    @property
    def elapsed(self) -> Optional[float]:
        """ Milliseconds the delay has been counting down, pauses excluded """
        if self._state == Delay.State.IDLE:
            return None
        return self._stopwatch.elapsed_ms()

    def start(self, duration: Duration, action: Action = None) -> asyncio.Future:
        """
        Starts the delay: 'action' will be executed after 'duration'.
        'duration' is either a number of milliseconds or a string
        with a time unit (e.g. "30s", "5m", "1h", "2d").
        Starting an already running delay supersedes it.
        Returns a future resolved after the action is executed.
        If the action raises, the exception is logged and set on the future
        (already marked as retrieved, so asyncio won't report it again).
        """
        millis = duration_to_ms(duration)
        loop = self._get_loop()

        if self._state in (Delay.State.ARMED, Delay.State.PAUSED):
            log.w("Restarting a running delay; superseding it")
            self._discard()

        log.d(f"Starting delay of {millis}ms")

        self._action = action
        self._remaining_since_last_start = millis
        self._start_time = ms()
        self._restart_time = None
        self._completion = loop.create_future()

        self._stopwatch.reset()
        self._stopwatch.start()

        self._arm(loop)
        self._state = Delay.State.ARMED

        return self._completion

    def pause(self):
        """ Pauses the countdown, if it is running """
        if self._state != Delay.State.ARMED:
            return

        self._handle.cancel()
        self._handle = None
        self._remaining_since_last_start -= self._since_last_arm()
        self._stopwatch.pause()
        self._state = Delay.State.PAUSED

        log.d(f"Delay paused, {self._remaining_since_last_start}ms remaining")

    def resume(self) -> Optional[asyncio.Future]:
        """
        Resumes a paused countdown from the point it left off.
        Returns the future of the delay (the same returned by start()).
        If the delay wasn't paused this is a no-op which returns an already
        resolved future, or None when there is no event loop to create it on.
        """
        if self._state != Delay.State.PAUSED:
            loop = self._find_loop()
            if loop is None:
                return None
            done = loop.create_future()
            done.set_result(None)
            return done

        # The run's future belongs to the loop the delay was started on
        loop = self._run_loop

        log.d(f"Resuming delay, {self._remaining_since_last_start}ms remaining")

        self._restart_time = ms()
        self._state = Delay.State.ARMED
        self._stopwatch.resume()
        self._arm(loop)

        return self._completion

    def cancel(self):
        """
        Cancels the delay, which is brought back to its initial state.
        The action won't be executed and the pending future is cancelled.
        """
        if self._state == Delay.State.IDLE:
            return

        log.d("Cancelling delay")
        self._discard()
        self._reset()

    def _find_loop(self) -> Optional[asyncio.AbstractEventLoop]:
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        loop = self._find_loop()
        if loop is None:
            raise RuntimeError(ErrorsStrings.NO_RUNNING_LOOP)
        return loop

    def _arm(self, loop: asyncio.AbstractEventLoop):
        self._run_loop = loop
        self._armed_at = loop.time()
        self._handle = loop.call_later(self._remaining_since_last_start / 1000, self._fire)

    def _since_last_arm(self) -> float:
        return (self._run_loop.time() - self._armed_at) * 1000

    def _fire(self):
        self._handle = None
        self._armed_at = None
        self._stopwatch.stop()
        self._state = Delay.State.FIRED

        log.h("Delay elapsed, executing action")

        completion = self._completion
        try:
            if self._action:
                self._action()
        except Exception as ex:
            log.eexception(ErrorsStrings.ACTION_FAILED)
            if not completion.done():
                completion.set_exception(ex)
                # Already logged: don't let asyncio report it as never retrieved
                completion.exception()
            return

        if not completion.done():
            completion.set_result(None)

    def _discard(self):
        # Drops the scheduled callback and the pending future, if any
        if self._handle:
            self._handle.cancel()
            self._handle = None
        if self._completion and not self._completion.done():
            self._completion.cancel()

    def _reset(self):
        self._state = Delay.State.IDLE
        self._handle: Optional[asyncio.TimerHandle] = None
        self._start_time: Optional[int] = None
        self._restart_time: Optional[int] = None
        self._run_loop: Optional[asyncio.AbstractEventLoop] = None
        self._armed_at: Optional[float] = None
        self._remaining_since_last_start: Optional[float] = None
        self._action: Optional[Action] = None
        self._completion: Optional[asyncio.Future] = None
        self._stopwatch.reset()


if __name__ == "__main__":
    from easydelay.common import easydelay_setup, VERBOSITY_MAX

    async def main():
        delay = Delay()
        fut = delay.start("1s", lambda: print("fired"))
        await asyncio.sleep(0.3)
        delay.pause()
        print(delay)
        await asyncio.sleep(0.5)
        await delay.resume()
        print(delay)
        await fut

    easydelay_setup(VERBOSITY_MAX)
    asyncio.run(main())
