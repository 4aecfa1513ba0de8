"""Read-back of semantic values into terms, with capture-avoiding renaming of binders."""

from nbe.pure.lexical import App, Lam, Var
from nbe.pure.persistent import cons, contains
from nbe.pure.semantic import VApp, VLam, VVar

PLACEHOLDER = "_"  # binder name that is never referenced, and thus never renamed
PRIME = "'"


def fresh(seen, name):
    """Returns name with as many primes appended as needed for it not to be in seen. The placeholder is returned
    unchanged.
    """
    if name == PLACEHOLDER:
        return name
    while contains(seen, name):
        name += PRIME
    return name


def quote(value, seen):
    """Converts value back into a term. seen is the persistent list of names already visible at this position; every
    binder introduced is renamed away from them.
    """
    if isinstance(value, VVar):
        return Var(value.name)

    elif isinstance(value, VApp):
        return App(quote(value.fn, seen), quote(value.arg, seen))

    elif isinstance(value, VLam):
        # going under the binder means running the closure on a neutral variable
        name = fresh(seen, value.name)
        return Lam(name, quote(value.closure(VVar(name)), cons(name, seen)))

    raise TypeError(f"cannot quote {value!r}: not a value")
