from datetime import datetime, timedelta

import pytz


START = pytz.UTC.localize(datetime(2026, 1, 2, 9, 0, 0))


class SteppingClock:
    """Returns START, then advances one minute per call."""

    def __init__(self, start: datetime = START, step: timedelta = timedelta(minutes=1)):
        self.current = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        self.calls += 1
        return value
