"""Semantic domain: the values terms evaluate to.

A value is either neutral (a variable, or an application stuck on one) or a VLam, whose closure is an ordinary Python
function. Beta-reduction is nothing more than calling that function, and substitution is realized by extending the
closure's captured environment instead of rewriting the term tree.
"""

from dataclasses import dataclass
from typing import Callable

from nbe.lang.error import UnboundVariableError
from nbe.pure.lexical import App, Lam, Var
from nbe.pure.persistent import NIL, cons, lookup


@dataclass(frozen=True)
class VVar:
    """Neutral variable. Only produced while quoting, to stand for the bound variable of a VLam."""
    name: str


@dataclass(frozen=True)
class VApp:
    """Neutral application: fn is not a VLam, so applying it to arg cannot reduce."""
    fn: object
    arg: object


@dataclass(frozen=True, eq=False)
class VLam:
    """Semantic function. name is the parameter name of the abstraction it came from and is only used to pick
    readable names when quoting.
    """
    name: str
    closure: Callable


def bind(env, name, value):
    """Returns env extended with name bound to value. The new binding shadows any previous one for name."""
    return cons((name, value), env)


def apply(fn, arg):
    """Applies fn to arg: calls the closure if fn is a VLam, otherwise records a neutral application."""
    if isinstance(fn, VLam):
        return fn.closure(arg)
    return VApp(fn, arg)


def evaluate(term, env=NIL):
    """Evaluates term under env, call-by-value, evaluating an application's function before its argument. Raises
    UnboundVariableError if term references a name env does not bind.
    """
    if isinstance(term, Var):
        value = lookup(env, term.name)
        if value is None:
            raise UnboundVariableError(term.name)
        return value

    elif isinstance(term, Lam):
        return VLam(term.name, lambda arg: evaluate(term.body, bind(env, term.name, arg)))

    elif isinstance(term, App):
        fn = evaluate(term.fn, env)
        arg = evaluate(term.arg, env)
        return apply(fn, arg)

    raise TypeError(f"cannot evaluate {term!r}: not a LambdaTerm")
