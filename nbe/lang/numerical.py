"""Natural numbers encoded as Church numerals, plus the arithmetic combinators used by the tests and the benchmark.
Numerals are built directly as λ-terms, thus keeping everything as pure as possible.

Source: https://en.wikipedia.org/wiki/Church_encoding#Calculation_with_Church_numerals
"""

from nbe.lang.error import GenericException
from nbe.pure.lexical import App, Lam, Var


def cnumber(num):
    """Returns the λ-term λf.λx.f (f (... x)) of natural number num (cnum = Church numeral)."""
    try:
        assert not isinstance(num, (float, bool))
        num = int(num)
        assert num >= 0
    except (AssertionError, TypeError, ValueError):
        raise GenericException("expected natural number, got '{}'", str(num), internal=True)

    body = Var("x")
    for __ in range(num):
        body = App(Var("f"), body)

    return Lam("f", Lam("x", body))


def number(cnum):
    """Returns the natural number cnum denotes, or None if cnum isn't a Church numeral in normal form."""
    if not isinstance(cnum, Lam) or not isinstance(cnum.body, Lam):
        return None
    first_arg, second_arg = cnum.name, cnum.body.name
    if first_arg == second_arg:
        return None

    num = 0
    nth_body = cnum.body.body
    while isinstance(nth_body, App):
        if nth_body.fn != Var(first_arg):
            return None

        nth_body = nth_body.arg
        num += 1

    return num if nth_body == Var(second_arg) else None


FIVE = cnumber(5)

# λm.λn.λf.λx.m f (n f x)
ADD = Lam("m", Lam("n", Lam("f", Lam("x", App(App(Var("m"), Var("f")), App(App(Var("n"), Var("f")), Var("x")))))))

# λm.λn.λf.m (n f)
MULT = Lam("m", Lam("n", Lam("f", App(Var("m"), App(Var("n"), Var("f"))))))
