"""Embedding syntax for writing λ-terms directly in Python. There is no textual parser: terms are built out of Python
expressions, which only construct terms and never reduce them.

```
V("x")                      ; x
V("x") >> V("x")            ; (\\x.x)
lam("x", "y", V("x"))       ; (\\x.(\\y.x))
f(a, b) == app(f, a, b)     ; [[f a] b]
```

Note that >> binds looser than a call but tighter than comparison, so V("x") >> f(a) is (\\x.[f a]).
"""

from lambdaeval.pure.term import Abstraction, LambdaTerm, Variable


def V(name):
    """Returns Variable named name."""
    return Variable(name)


def app(*terms):
    """Left-associative application of terms: app(a, b, c) == [[a b] c]. A single term is returned as is."""
    if not terms:
        raise ValueError("app needs at least one λ-term")

    head, *arguments = terms
    if not isinstance(head, LambdaTerm):
        raise TypeError(f"expected a λ-term, got {type(head).__name__}")
    return head(*arguments)


def lam(*args):
    """lam("x", "y", body) == (\\x.(\\y.body)). Names may be given as strings or Variables."""
    if len(args) < 2:
        raise ValueError("lam needs at least one bound name and a body")

    *names, body = args
    for name in reversed(names):
        bound = name if isinstance(name, Variable) else Variable(name)
        body = Abstraction(bound, body)
    return body
