"""Persistent singly-linked lists. Used both as the evaluation environment (a list of (name, value) pairs) and as the
set of names already visible while quoting.

Lists are never mutated: extending one allocates a new Cons pointing at the old list, so any number of environments
may share a common tail.
"""

from dataclasses import dataclass


class PersistentList:
    """Superclass of Nil and Cons. Iteration walks the list front to back without recursion."""

    def __iter__(self):
        node = self
        while isinstance(node, Cons):
            yield node.head
            node = node.tail

    def __len__(self):
        return sum(1 for __ in self)

    def __bool__(self):
        return True


class NilType(PersistentList):
    """The empty list. Use the NIL singleton rather than instantiating this."""

    def __repr__(self):
        return "NIL"

    def __bool__(self):
        return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


NIL = NilType()


@dataclass(frozen=True, eq=False)
class Cons(PersistentList):
    head: object
    tail: PersistentList = NIL

    def __repr__(self):
        return f"Cons({', '.join(repr(item) for item in self)})"

    def __eq__(self, other):
        if not isinstance(other, PersistentList) or len(self) != len(other):
            return False
        return all(item == other_item for item, other_item in zip(self, other))

    def __hash__(self):
        return hash(tuple(self))


def cons(head, tail=NIL):
    """Returns a new list with head in front of tail. tail is shared, not copied."""
    return Cons(head, tail)


def from_iterable(items):
    """Builds a list whose first element is the first of items."""
    result = NIL
    for item in reversed(list(items)):
        result = Cons(item, result)
    return result


def lookup(env, key):
    """Returns the value of the nearest (key, value) pair in env whose key equals key, or None if there is none."""
    for name, value in env:
        if name == key:
            return value
    return None


def contains(names, key):
    """Whether or not some element of names equals key."""
    return any(name == key for name in names)


def map(xs, f):
    """Returns a new list with f applied to every element of xs, in order. xs is left untouched."""
    return from_iterable(f(x) for x in xs)
