# stopwatch.py
import time


class Stopwatch:
    def __init__(self, clock=time.perf_counter):
        self._clock = clock
        self._start = clock()

    def reset(self):
        self._start = self._clock()

    def elapsed_seconds(self):
        return self._clock() - self._start
