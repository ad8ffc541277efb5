"""Error handling for the lambdaeval front end. The reduction core never raises: only GenericExceptions should be
encountered while running. If another type of error makes it all the way to ErrorHandler, it is assumed to be an
internal issue.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a lambdaeval error/warning."""

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        """exprs are formatted into msg in bold; exprs[0] should be the offending expr, and start/end the span of it
        that gets underlined.
        """
        if exprs is None:
            exprs = []
        if isinstance(exprs, str):
            exprs = [exprs]
        exprs = [str(expr) for expr in exprs]

        # msg is only a template if there is something to fill in
        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs)) if exprs else msg
        self.expr = exprs[0] if exprs else ""
        self.end = end if end != -1 else len(self.expr)

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)


class ErrorHandler:
    """Context manager that reports lambdaeval errors/warnings in color and converts stray Python errors into them."""
    ERROR = "red"
    WARNING = "magenta"

    # exceptions reported as a plain lambdaeval error rather than an internal one
    CONVERTED = {
        KeyboardInterrupt: "keyboard interrupt",
        RecursionError: "maximum recursion depth exceeded while reducing",
    }

    def __init__(self, fatal=True, stream=None):
        self.fatal = fatal
        self.stream = stream
        self.traceback = {}

    def register_term(self, name, term, step=0):
        """Registers the term currently being reduced under name. Should be kept current while a Session runs."""
        self.traceback[name] = (term.render() if term is not None else None, step)

    def remove_term(self, name):
        """Removes name from traceback. Should be called after a successful run."""
        self.traceback.pop(name, None)

    def _print(self, msg):
        print(msg, file=self.stream if self.stream is not None else sys.stdout)

    @staticmethod
    def _label(text, color):
        return colored(text, color, attrs=["bold"])

    @staticmethod
    def diagnose(error, warning=False):
        """Returns error.expr with the span start:end bolded in color, over a caret underline of the same span."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        end = max(error.end, error.start + 1)
        before, span, after = error.expr[:error.start], error.expr[error.start:end], error.expr[end:]
        underline = "^".ljust(end - error.start, "~")

        return (f"  {before}{ErrorHandler._label(span, color)}{after}\n"
                f"  {' ' * error.start}{ErrorHandler._label(underline, color)}")

    def _report(self, error, heading, warning=False):
        self._print(heading + error.msg)
        if not error.internal and error.expr and error.diagnosis:
            self._print(ErrorHandler.diagnose(error, warning=warning))

    def _trace(self):
        """Lists every registered term with the step it was at, or returns "" if nothing is registered."""
        frames = [f"  Term '{name}', step {step}:\n    {rendered}\n"
                  for name, (rendered, step) in self.traceback.items() if rendered]
        return "Traceback:\n" + "".join(frames) if frames else ""

    def warn(self, *args, **kwargs):
        """Builds a GenericException from args and prints it as a warning. Nothing is raised."""
        error = GenericException(*args, **kwargs)
        self._report(error, self._label("warning: ", ErrorHandler.WARNING), warning=True)

    def throw(self, error):
        """Prints error, a GenericException, after the traceback of terms being reduced when it happened. Exits with
        status 1 if fatal, else forgets the traceback.
        """
        heading = self._trace()
        if error.internal:
            heading += self._label("[internal] ", ErrorHandler.ERROR)
        self._report(error, heading + self._label("error: ", ErrorHandler.ERROR))

        if self.fatal:
            sys.exit(1)
        self.traceback = {}

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            return True
        if issubclass(exc_type, SystemExit):
            return False

        if issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type in ErrorHandler.CONVERTED:
            self.throw(GenericException(ErrorHandler.CONVERTED[exc_type]))
        else:
            # unknown errors are reported, then left to propagate
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            return False
        return True
