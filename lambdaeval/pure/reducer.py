"""Evaluation loop: reduces a term over and over until its rendering stops changing.

There is deliberately no step counter in the termination check. A term without a normal form keeps the Reducer
stepping forever unless the caller supplies a keep_going hook. Note that a term which reproduces its own rendering
after a step (e.g. [U U], where U = \\x.[x x]) is indistinguishable from a normal form and is reported as fixed.
"""

from collections import namedtuple
from enum import Enum, IntEnum


Step = namedtuple("Step", ["number", "term"])


class State(Enum):
    START = "start"
    STEPPING = "stepping"
    FIXED = "fixed"


class Verbosity(IntEnum):
    """How much of a reduction is reported. Only the console layer reads this."""
    BASIC = 0    # starting term and result only
    SUMMARY = 1  # every step, printed once after the run
    VERBOSE = 2  # every step as it happens, then the summary

    @classmethod
    def parse(cls, name):
        """Case-insensitive lookup by name, for command-line use."""
        try:
            return cls[name.upper()]
        except KeyError:
            expected = ", ".join(v.name.lower() for v in cls)
            raise ValueError(f"unknown verbosity '{name}', expected one of {expected}") from None


class Reducer:
    """Drives repeated reduction of a single term. Iterating over steps() advances the reduction lazily."""

    def __init__(self, term, keep_going=None):
        """keep_going(reducer) is checked once before every step; returning a falsy value stops the run without
        reaching a fixed point.
        """
        self.start = term
        self.current = term
        self.state = State.START
        self.count = 0

        self._keep_going = keep_going if keep_going is not None else (lambda reducer: True)
        self._upcoming = None

    @property
    def fixed(self):
        return self.state is State.FIXED

    def steps(self):
        """Yields a Step for every new term produced, in order. Returns once a fixed point is reached or keep_going
        says otherwise. Calling it again after an interruption resumes where the previous run stopped.
        """
        if self.state is State.FIXED:
            return
        self.state = State.STEPPING

        while True:
            if self._upcoming is None:
                self._upcoming = self.current.reduce()
            if self._upcoming.render() == self.current.render():
                break

            if not self._keep_going(self):
                return

            self.current, self._upcoming = self._upcoming, None
            self.count += 1
            yield Step(self.count, self.current)

        self.state = State.FIXED

    def run(self):
        """Runs steps() to completion and returns the last observed term."""
        for __ in self.steps():
            pass
        return self.current

    def __repr__(self):
        return f"Reducer(state={self.state.name}, steps={self.count}, current='{self.current.render()}')"


def within(max_steps):
    """keep_going hook that allows at most max_steps steps."""
    if max_steps < 0:
        raise ValueError(f"max_steps must be non-negative, got {max_steps}")
    return lambda reducer: reducer.count < max_steps
