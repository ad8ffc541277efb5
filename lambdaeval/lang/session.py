"""Session control for lambdaeval. Runs a Reducer over a term and reports the reduction to a text stream at the
requested verbosity:

```
MAIN := <starting term>     ; always shown, except under SUMMARY where it goes to the summary instead
= <step>                    ; every step: live under VERBOSE, buffered under SUMMARY and VERBOSE
= <result>                  ; always shown, except under SUMMARY (where the last step is the result)
Summary:                    ; VERBOSE only, followed by the buffered lines
```
"""

import sys

from lambdaeval.lang.library import decode
from lambdaeval.pure.reducer import Reducer, Verbosity


class Session:
    """Governs the evaluation of terms, and where and how much of them gets reported."""
    HEADER = "{} := {}"
    STEP = "= {}"

    def __init__(self, error_handler, verbosity=Verbosity.BASIC, stream=None, keep_going=None, decode=False):
        self.error_handler = error_handler
        self.verbosity = Verbosity(verbosity)
        self.stream = stream          # defaults to sys.stdout at write time, so that it can be patched
        self.keep_going = keep_going  # passed through to every Reducer
        self.decode = decode          # whether or not to show numbers encoded by results

        self.results = {}  # dict of name: Reducer for terms run in this session

    def write(self, line):
        print(f"\n{line}", file=self.stream if self.stream is not None else sys.stdout)

    def run(self, term, name="MAIN"):
        """Reduces term, reporting it as name. Returns the Reducer, which is fixed unless keep_going stopped it."""
        reducer = Reducer(term, keep_going=self.keep_going)
        self.error_handler.register_term(name, term)  # in case error is raised

        summary = []
        header = Session.HEADER.format(name, term.render())
        if self.verbosity != Verbosity.SUMMARY:
            self.write(header)
        if self.verbosity >= Verbosity.SUMMARY:
            summary.append(header)

        for step in reducer.steps():
            self.error_handler.register_term(name, step.term, step.number)

            line = Session.STEP.format(step.term.render())
            if self.verbosity >= Verbosity.VERBOSE:
                self.write(line)
            if self.verbosity >= Verbosity.SUMMARY:
                summary.append(line)

        result = Session.STEP.format(reducer.current.render())
        if self.decode:
            decoded = decode(reducer.current)
            if decoded is not None:
                result += f"  ({decoded})"
                if summary and reducer.count:
                    summary[-1] = result

        if self.verbosity != Verbosity.SUMMARY:
            self.write(result)

        if self.verbosity >= Verbosity.SUMMARY:
            if self.verbosity >= Verbosity.VERBOSE:
                self.write("\n\nSummary:")
            for line in summary:
                self.write(line)

        if not reducer.fixed:
            self.error_handler.warn("'{}' did not reach a normal form within {} steps", [name, reducer.count],
                                    diagnosis=False)

        self.error_handler.remove_term(name)  # error was not raised
        self.results[name] = reducer
        return reducer
