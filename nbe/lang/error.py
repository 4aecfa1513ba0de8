"""Error handling for the normalizer. Only GenericExceptions should be raised on purpose: if another type of error
makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import re
import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a normalizer error/warning."""

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        """Parses args for GenericException or warning. msg is a str.format template filled with exprs."""
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]  # exprs[0] should be the offending expr that caused the error
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)


class UnboundVariableError(GenericException):
    """Raised when a variable is evaluated under an environment that does not bind it."""

    def __init__(self, name):
        super().__init__("variable '{}' is not bound in the environment", name)
        self.name = name


class ErrorHandler:
    """Context manager that will report normalizer errors/warnings instead of Python tracebacks."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}  # dict of label: line, in registration order

    def register(self, label, line):
        """Registers line (usually a rendered term) under label. Should be called before normalizing it."""
        self.traceback[label] = line

    def remove(self, label):
        """Removes label from traceback. Should be called after a successful normalization."""
        self.traceback.pop(label, None)

    @staticmethod
    def diagnose(error, line, warning=False):
        """Returns line with the offending part of error.expr highlighted and bolded, or None if error.expr does not
        occur in line.
        """
        match = re.search(rf"(?<![\w']){re.escape(error.expr)}(?![\w'])", line)  # whole names only
        if match is None:
            return None
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        start = match.start() + error.start
        end = max(match.start() + error.end, start + 1)

        diagnosis = "  " + line[:start]
        diagnosis += colored(line[start:end], color, attrs=["bold"])
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), color, attrs=["bold"])

        return diagnosis

    def _diagnoses(self, error, warning=False):
        if error.internal or not error.expr or not error.diagnosis:
            return []
        diagnoses = (ErrorHandler.diagnose(error, line, warning) for line in self.traceback.values())
        return [diagnosis for diagnosis in diagnoses if diagnosis is not None][-1:]

    def warn(self, *args, **kwargs):
        """Generates and prints a warning message based on args."""
        error = GenericException(*args, **kwargs)

        error_msg = colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg
        print(error_msg)

        for diagnosis in self._diagnoses(error, warning=True):
            print(diagnosis)

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException."""
        error_msg = ""
        for label, line in self.traceback.items():  # assumes dict is insertion-ordered
            error_msg += f"  In {label}:\n"
            error_msg += f"    {line}\n"

        if len(self.traceback) > 1:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        for diagnosis in self._diagnoses(error):
            print(diagnosis)

        if self.fatal:
            sys.exit(1)
        self.traceback = {}  # if error occurred, reset traceback (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
            do_exit = True
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("normal form might exist, but maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            detail = f"{exc_type.__name__}: {exc_val}".replace("{", "{{").replace("}", "}}")
            self.throw(GenericException(f"unknown error: '{detail}'", internal=True))
            do_exit = True

        return not do_exit
