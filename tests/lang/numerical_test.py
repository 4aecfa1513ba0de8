import unittest

from nbe.lang.error import GenericException
from nbe.lang.numerical import ADD, FIVE, MULT, cnumber, number
from nbe.pure.lexical import App, Lam, Var
from nbe.pure.normalize import nf


class NumericalTestCase(unittest.TestCase):

    def test_cnumber(self):
        should_fail = [-2, 0.3, 4.0, 14.2, True, None, "three"]
        for case in should_fail:
            self.assertRaises(GenericException, cnumber, case)

        should_pass = {
            0: Lam("f", Lam("x", Var("x"))),
            3: Lam("f", Lam("x", App(Var("f"), App(Var("f"), App(Var("f"), Var("x")))))),
            "2": Lam("f", Lam("x", App(Var("f"), App(Var("f"), Var("x"))))),
        }
        for case, result in should_pass.items():
            self.assertEqual(result, cnumber(case), case)

        self.assertEqual(cnumber(5), FIVE)

    def test_number(self):
        should_fail = [
            Lam("f", Lam("x", App(Var("f"), Var("f")))),
            Lam("f", Lam("x", App(App(Var("x"), Var("f")), Var("x")))),
            Lam("f", Lam("f", Var("f"))),
            Lam("f", Var("f")),
            Var("x"),
            App(Var("f"), Var("x")),
            ADD,
        ]
        for case in should_fail:
            self.assertIsNone(number(case), case)

        should_pass = {
            3: Lam("f", Lam("x", App(Var("f"), App(Var("f"), App(Var("f"), Var("x")))))),
            0: Lam("f", Lam("x", Var("x"))),
            1: Lam("s", Lam("z", App(Var("s"), Var("z")))),
            2: Lam("f'", Lam("x", App(Var("f'"), App(Var("f'"), Var("x"))))),
        }
        for result, case in should_pass.items():
            self.assertEqual(result, number(case), case)

    def test_arithmetic(self):
        cases = {
            App(App(ADD, FIVE), FIVE): 10,
            App(App(MULT, FIVE), FIVE): 25,
            App(App(ADD, cnumber(7)), App(App(MULT, cnumber(3)), cnumber(4))): 19,
            App(App(MULT, cnumber(1)), cnumber(0)): 0,
        }
        for case, result in cases.items():
            self.assertEqual(result, number(nf(case)), case)

    def test_large_numeral(self):
        self.assertEqual(300, number(cnumber(300)))


if __name__ == '__main__':
    unittest.main()
