import io
import sys
import unittest
from contextlib import redirect_stdout

from nbe.lang.error import ErrorHandler, GenericException, UnboundVariableError
from nbe.pure.lexical import App, Lam, Var
from nbe.pure.normalize import nf


class GenericExceptionTestCase(unittest.TestCase):

    def test_init(self):
        error = GenericException("'{}' is not bound in '{}'", ("y", "(fun x -> y)"))
        self.assertEqual("y", error.expr)
        self.assertEqual((0, 1), (error.start, error.end))
        self.assertIn("y", str(error))
        self.assertIn("(fun x -> y)", str(error))

        error = GenericException("keyboard interrupt")
        self.assertEqual("", error.expr)
        self.assertEqual("keyboard interrupt", str(error))

    def test_unbound_variable(self):
        error = UnboundVariableError("foo")
        self.assertIsInstance(error, GenericException)
        self.assertEqual("foo", error.name)
        self.assertEqual("foo", error.expr)
        self.assertIn("foo", error.msg)


class ErrorHandlerTestCase(unittest.TestCase):

    def test_diagnose(self):
        diagnosis = ErrorHandler.diagnose(UnboundVariableError("nope"), "(fun x -> nope)")
        line, caret = diagnosis.split("\n")

        self.assertIn("nope", line)
        self.assertIn("^~~~", caret)
        self.assertTrue(caret.startswith("  " + " " * len("(fun x -> ")))

        self.assertIsNone(ErrorHandler.diagnose(UnboundVariableError("nope"), "(fun x -> x)"))

    def test_diagnose_whole_names(self):
        cases = {
            ("u", "(fun x -> u)"): len("(fun x -> "),
            ("x", "(fun x' -> x)"): len("(fun x' -> "),
            ("n", "(fun f -> (f n))"): len("(fun f -> (f "),
            ("f", "(fun x -> (f' f))"): len("(fun x -> (f' "),
        }
        for (name, line), column in cases.items():
            caret = ErrorHandler.diagnose(UnboundVariableError(name), line).split("\n")[1]
            self.assertEqual(2 + column, len(caret) - len(caret.lstrip(" ")), (name, line))

        should_fail = [("u", "(fun x -> (f u'))"), ("n", "(fun x -> x)"), ("x", "(fun x_ -> y)")]
        for name, line in should_fail:
            self.assertIsNone(ErrorHandler.diagnose(UnboundVariableError(name), line), (name, line))

    def test_non_fatal(self):
        error_handler = ErrorHandler(fatal=False)
        error_handler.register("term 1", "(fun x -> nope)")

        output = io.StringIO()
        with redirect_stdout(output):
            with error_handler:
                nf(Lam("x", Var("nope")))

        self.assertIn("error: ", output.getvalue())
        self.assertIn("In term 1:", output.getvalue())
        self.assertIn("^", output.getvalue())
        self.assertEqual({}, error_handler.traceback)

    def test_fatal(self):
        output = io.StringIO()
        with redirect_stdout(output):
            with self.assertRaises(SystemExit) as context:
                with ErrorHandler():
                    raise UnboundVariableError("x")

        self.assertEqual(1, context.exception.code)
        self.assertIn("'", output.getvalue())

    def test_register(self):
        error_handler = ErrorHandler(fatal=False)
        error_handler.register("iteration 1", "a")
        error_handler.register("iteration 2", "b")
        error_handler.remove("iteration 1")
        error_handler.remove("iteration 3")

        self.assertEqual({"iteration 2": "b"}, error_handler.traceback)

    def test_traceback(self):
        error_handler = ErrorHandler(fatal=False)
        error_handler.register("outer", "x")
        error_handler.register("inner", "y")

        output = io.StringIO()
        with redirect_stdout(output):
            with error_handler:
                raise GenericException("bad term")

        self.assertTrue(output.getvalue().startswith("Traceback:\n"))

    def test_recursion(self):
        omega = App(Lam("x", App(Var("x"), Var("x"))), Lam("x", App(Var("x"), Var("x"))))

        limit = sys.getrecursionlimit()
        sys.setrecursionlimit(1000)
        output = io.StringIO()
        try:
            with redirect_stdout(output):
                with ErrorHandler(fatal=False):
                    nf(omega)
        finally:
            sys.setrecursionlimit(limit)

        self.assertIn("maximum recursion depth exceeded", output.getvalue())

    def test_unknown_error(self):
        output = io.StringIO()
        with redirect_stdout(output):
            with self.assertRaises(KeyError):
                with ErrorHandler(fatal=False):
                    raise KeyError("{braces}")

        self.assertIn("[internal]", output.getvalue())
        self.assertIn("KeyError", output.getvalue())

    def test_keyboard_interrupt(self):
        output = io.StringIO()
        with redirect_stdout(output):
            with self.assertRaises(KeyboardInterrupt):
                with ErrorHandler(fatal=False):
                    raise KeyboardInterrupt

        self.assertIn("keyboard interrupt", output.getvalue())

    def test_system_exit(self):
        with self.assertRaises(SystemExit):
            with ErrorHandler(fatal=False):
                sys.exit(3)

    def test_warn(self):
        error_handler = ErrorHandler()
        error_handler.register("iteration 1", "(fun x -> x)")

        output = io.StringIO()
        with redirect_stdout(output):
            error_handler.warn("binder '{}' is shadowed", "x")

        self.assertIn("warning: ", output.getvalue())
        self.assertIn("^", output.getvalue())


if __name__ == '__main__':
    unittest.main()
