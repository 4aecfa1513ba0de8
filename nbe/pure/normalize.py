"""Normalization by evaluation: evaluate a term into the semantic domain, then quote the result back.

Sources: https://en.wikipedia.org/wiki/Normalisation_by_evaluation,
         https://davidchristiansen.dk/tutorials/nbe/
"""

from nbe.pure import persistent
from nbe.pure.persistent import NIL
from nbe.pure.quotation import quote
from nbe.pure.semantic import evaluate


def names(env):
    """Returns the persistent list of names bound in env, nearest first."""
    return persistent.map(env, lambda binding: binding[0])


def nf(term, env=NIL):
    """Returns the beta-normal form of term under env. Binders in the result never collide with names bound in env.
    Does not return if term has no normal form under call-by-value evaluation.
    """
    return quote(evaluate(term, env), names(env))
