import time


class Clock:
    """
    Frame clock.

    Tracks seconds since start and since the previous tick. `tick()` must run
    exactly once per rendered frame, before anything reads the elapsed values
    for that frame.
    """

    def __init__(self, time_source=time.monotonic):
        self._time_source = time_source
        self.start_time = time_source()
        self.previous_tick = self.start_time
        self.current = self.start_time
        self.elapsed_since_start = 0.0
        self.elapsed_since_last_tick = 0.0

    def tick(self):
        self.current = self._time_source()
        self.elapsed_since_start = self.current - self.start_time
        self.elapsed_since_last_tick = self.current - self.previous_tick
        self.previous_tick = self.current
