"""Syntax domain of pure lambda calculus: the terms fed to the normalizer and returned by it.

Formally, a term is one of

```
<λ-term> ::= <name>                   ; "variable"
           | "λ" <name> "." <λ-term>  ; "abstraction"
           | <λ-term> <λ-term>        ; "application"
```

Terms are immutable once built, so subterms may be shared by any number of parents. There is no parser: terms are
built with the Var, Lam and App constructors.

Sources: https://plato.stanford.edu/entries/lambda-calculus/#Com
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from nbe.pure.persistent import NIL, cons


class LambdaTerm(ABC):
    """Superclass of every λ-term. Subclasses are frozen dataclasses, so == is structural equality."""

    @property
    @abstractmethod
    def nodes(self):
        """Child nodes of this term. Abstractions report their bound variable as a Var node, as in [arg, body]."""

    @abstractmethod
    def render(self):
        """Debug rendering: x, (fun x -> M) and (M N)."""

    @abstractmethod
    def alpha_equals(self, other, mapping=NIL):
        """Whether or not two terms are equal up to renaming of bound variables. mapping is a persistent list of
        (self name, other name) pairs for the binders enclosing this position, innermost first.
        """

    def display(self, indents=0):
        """Recursively displays the syntax tree with readable format.

        Format:
        <LambdaTerm>(expr='<expr>', nodes=[
            <LambdaTerm>(expr='<expr>', nodes=[
                ...
                <LambdaTerm>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}(expr='{self.render()}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def __str__(self):
        return self.render()


@dataclass(frozen=True)
class Var(LambdaTerm):
    """Reference to a bound variable (or a free one, if nothing binds it)."""
    name: str

    @property
    def nodes(self):
        return []

    def render(self):
        return self.name

    def alpha_equals(self, other, mapping=NIL):
        if not isinstance(other, Var):
            return False

        for name, other_name in mapping:
            if name == self.name or other_name == other.name:
                # both sides must be bound by the same enclosing binder
                return name == self.name and other_name == other.name
        return self.name == other.name


@dataclass(frozen=True)
class Lam(LambdaTerm):
    """Abstraction binding name in body."""
    name: str
    body: LambdaTerm

    @property
    def nodes(self):
        return [Var(self.name), self.body]

    def render(self):
        return f"(fun {self.name} -> {self.body.render()})"

    def alpha_equals(self, other, mapping=NIL):
        if not isinstance(other, Lam):
            return False
        return self.body.alpha_equals(other.body, cons((self.name, other.name), mapping))


@dataclass(frozen=True)
class App(LambdaTerm):
    """Application of fn to arg."""
    fn: LambdaTerm
    arg: LambdaTerm

    @property
    def nodes(self):
        return [self.fn, self.arg]

    def render(self):
        return f"({self.fn.render()} {self.arg.render()})"

    def alpha_equals(self, other, mapping=NIL):
        if not isinstance(other, App):
            return False
        return self.fn.alpha_equals(other.fn, mapping) and self.arg.alpha_equals(other.arg, mapping)


def kind(term):
    """Returns the name of term's node type: 'Var', 'Lam' or 'App'."""
    return type(term).__name__
