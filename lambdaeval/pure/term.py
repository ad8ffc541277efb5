"""Pure lambda calculus terms and their reduction semantics.

The `pure` directory holds the term model and the evaluation loop- nothing in here prints, parses or knows about
named terms. Formally, the terms handled here are

```
<λ-term> ::= <name>                     ; "variable", rendered as `name`
           | "λ" <variable> "." <λ-term> ; "abstraction", rendered as `(\\x.body)`
           | <λ-term> <λ-term>          ; "application", rendered as `[function argument]`
```

Every operation returns a freshly built tree: terms are immutable and no node of an input is ever reused in an
output, so successive generations of a term can be kept around and compared safely.

Substitution is NOT capture-avoiding. An abstraction that rebinds the substituted name shadows it and is returned
untouched, but nothing is alpha-renamed, so a replacement whose free variables collide with an inner binder will be
captured by it. Terms built from the named-term library are closed and are written so that this never bites.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class LambdaTerm(ABC):
    """A λ-term: Variable, Abstraction, or Application. The three subclasses below are the only ones."""

    @abstractmethod
    def render(self):
        """Canonical textual form. This is also the only equality check used between reduction steps."""

    @abstractmethod
    def copy(self):
        """Returns a structurally fresh copy of this term."""

    @abstractmethod
    def substitute(self, target, replacement):
        """Returns this term with every free occurrence of the Variable target replaced with a copy of replacement.
        Abstractions binding target shadow it: their bodies are left alone.
        """

    @abstractmethod
    def reduce(self):
        """Attempts one layer of simplification and returns the result. Never fails."""

    @abstractmethod
    def apply(self, argument):
        """Combines this term, acting as a function, with argument."""

    def __call__(self, *arguments):
        """Left-associative application: f(a, b) == [[f a] b]."""
        result = self
        for argument in arguments:
            result = Application(result, argument)
        return result

    def __str__(self):
        return self.render()


@dataclass(frozen=True)
class Variable(LambdaTerm):
    """Variable in lambda calculus. Two variables are the same iff their names are the same."""
    name: str

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(f"variable name must be a str, got {type(self.name).__name__}")
        if not self.name:
            raise ValueError("variable name cannot be empty")

    def render(self):
        return self.name

    def copy(self):
        return Variable(self.name)

    def substitute(self, target, replacement):
        if self == target:
            return replacement.copy()
        return self.copy()

    def reduce(self):
        """Variables are terminal."""
        return self.copy()

    def apply(self, argument):
        """A variable can't consume its argument, so the application is stuck. The argument still gets a chance to
        make progress if it is itself an application.
        """
        if isinstance(argument, Application):
            argument = argument.reduce()
        else:
            argument = argument.copy()
        return Application(self.copy(), argument)

    def __rshift__(self, body):
        """x >> body == (\\x.body)"""
        return Abstraction(self, body)


@dataclass(frozen=True)
class Abstraction(LambdaTerm):
    """Abstraction: a function with a single bound variable."""
    bound: Variable
    body: LambdaTerm

    def __post_init__(self):
        if not isinstance(self.bound, Variable):
            raise TypeError(f"abstraction must bind a Variable, got {type(self.bound).__name__}")
        if not isinstance(self.body, LambdaTerm):
            raise TypeError(f"abstraction body must be a λ-term, got {type(self.body).__name__}")

    def render(self):
        return f"(\\{self.bound.render()}.{self.body.render()})"

    def copy(self):
        return Abstraction(self.bound.copy(), self.body.copy())

    def substitute(self, target, replacement):
        if self.bound == target:
            return self.copy()  # shadowed
        return Abstraction(self.bound.copy(), self.body.substitute(target, replacement))

    def reduce(self):
        """Reduction proceeds under the binder."""
        return Abstraction(self.bound.copy(), self.body.reduce())

    def apply(self, argument):
        """Beta-reduction proper: (\\x.M) N -> M[x := N]."""
        return self.body.substitute(self.bound, argument)


@dataclass(frozen=True)
class Application(LambdaTerm):
    """Application of a function to a single argument."""
    function: LambdaTerm
    argument: LambdaTerm

    def __post_init__(self):
        for name in ("function", "argument"):
            child = getattr(self, name)
            if not isinstance(child, LambdaTerm):
                raise TypeError(f"application {name} must be a λ-term, got {type(child).__name__}")

    @property
    def is_stuck(self):
        """An Application is stuck if its function is a bare Variable: nothing can be applied."""
        return isinstance(self.function, Variable)

    def render(self):
        return f"[{self.function.render()} {self.argument.render()}]"

    def copy(self):
        return Application(self.function.copy(), self.argument.copy())

    def substitute(self, target, replacement):
        return Application(self.function.substitute(target, replacement),
                           self.argument.substitute(target, replacement))

    def reduce(self):
        if self.is_stuck:
            return Application(self.function.copy(), self.argument.reduce())
        return self.function.apply(self.argument)

    def apply(self, argument):
        """Keeps simplifying the callee before attaching argument. If the callee is already in normal form, the
        new application is built as is.
        """
        candidate = self.reduce()
        if candidate.render() == self.render():
            return Application(self.copy(), argument.copy())
        return candidate.apply(argument)
