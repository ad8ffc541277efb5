"""Library of named λ-terms: combinators, Church booleans, Church numerals, pairs, lists, signed integers, and a couple
of recursive algorithms. Every term here is closed and is a plain term value. The only reduction done here is in
integer(), which normalises the two halves of a signed integer before reading them.

Keep in mind that substitution does not alpha-rename. These terms are written so that evaluating them on each other
works, but mixing them with terms that have free variables named like their binders may give wrong answers.

Source: https://en.wikipedia.org/wiki/Church_encoding
"""

import re

from lambdaeval.lang.error import GenericException
from lambdaeval.lang.syntax import V, app
from lambdaeval.pure.reducer import Reducer, within
from lambdaeval.pure.term import Abstraction, Application, Variable


COMPONENT_STEPS = 10000  # how long integer() reduces each half of a signed integer before giving up


a, b, f, g, h, l, m, n, p, q, t, u, x, y, z = (V(name) for name in "abfghlmnpqtuxyz")


# combinators
I = x >> x
K = x >> (y >> x)
S = x >> (y >> (z >> x(z, y(z))))  # S K _ = I, and SK combinatory calculus is Turing complete
B = x >> (y >> (z >> x(y(z))))
C = x >> (y >> (z >> x(z, y)))
W = x >> (y >> x(y, y))
U = x >> x(x)
Y = g >> app(x >> g(x(x)), x >> g(x(x)))
IOTA = f >> f(S, K)  # IOTA IOTA = I, IOTA (IOTA (IOTA IOTA)) = K
OMEGA = U(U)

# booleans
TRUE = x >> (y >> x)
FALSE = x >> (y >> y)
NOT = p >> p(FALSE, TRUE)
AND = p >> (q >> p(q, p))
OR = p >> (q >> p(p, q))
XOR = p >> (q >> p(NOT(q), q))

# natural numbers
ZERO = f >> (x >> x)
ONE = f >> (x >> f(x))
SUCC = n >> (f >> (x >> f(n(f, x))))
PLUS = m >> (n >> m(SUCC, n))
MULT = m >> (n >> m(PLUS(n), ZERO))
POW = m >> (n >> n(MULT(m), ONE))
PRED = n >> (f >> (x >> n(g >> (h >> h(g(f))), u >> x, u >> u)))
SUB = m >> (n >> n(PRED, m))  # truncated: SUB 1 3 == 0
ISZERO = n >> n(x >> FALSE, TRUE)
LEQ = m >> (n >> ISZERO(SUB(m, n)))

# pairs
PAIR = x >> (y >> (f >> f(x, y)))
FIRST = p >> p(TRUE)
SECOND = p >> p(FALSE)

# lists
NIL = x >> TRUE
ISNIL = p >> p(x >> (y >> FALSE))
CONS = h >> (t >> PAIR(h, t))
HEAD = FIRST
TAIL = SECOND
INDEX = Y(f >> (l >> (n >> ISZERO(n, HEAD(l), f(TAIL(l), PRED(n))))))


def NAT(num):
    """Returns the Church numeral for num. Non-positive numbers give ZERO."""
    if isinstance(num, bool) or not isinstance(num, int):
        raise GenericException("expected an integer, got '{}'", repr(num), internal=True)

    if num <= 0:
        return ZERO.copy()

    numeral = f(x)
    for __ in range(1, num):
        numeral = f(numeral)
    return f >> (x >> numeral)


def INT(num):
    """Returns the signed integer num, encoded as a pair of Church numerals (positive part, negative part)."""
    if isinstance(num, bool) or not isinstance(num, int):
        raise GenericException("expected an integer, got '{}'", repr(num), internal=True)

    return f >> f(NAT(max(num, 0)), NAT(max(-num, 0)))


# signed integers
IZERO = INT(0)
IONE = INT(1)
ITWOP = INT(2)
ITWON = INT(-2)
INEG = a >> (f >> f(SECOND(a), FIRST(a)))
IPLUS = a >> (b >> (f >> f(PLUS(FIRST(a), FIRST(b)), PLUS(SECOND(a), SECOND(b)))))
ISUB = a >> (b >> IPLUS(a, INEG(b)))
IMULT = a >> (b >> (f >> f(PLUS(MULT(FIRST(a), FIRST(b)), MULT(SECOND(a), SECOND(b))),
                           PLUS(MULT(FIRST(a), SECOND(b)), MULT(SECOND(a), FIRST(b))))))
IEXP = a >> (b >> SUB(FIRST(b), SECOND(b), IMULT(a), IONE))  # negative exponents count as 0
SIGN = a >> LEQ(SECOND(a), FIRST(a), ISZERO(SUB(FIRST(a), SECOND(a)), IZERO, IONE), INT(-1))

# algorithms
FACT = Y(f >> (n >> ISZERO(n, ONE, MULT(n, f(PRED(n))))))
FIBO = Y(f >> (n >> ISZERO(n, ZERO, ISZERO(PRED(n), ONE, PLUS(f(PRED(n)), f(PRED(PRED(n))))))))


NAMED = {
    "I": I, "K": K, "S": S, "B": B, "C": C, "W": W, "U": U, "Y": Y, "IOTA": IOTA, "OMEGA": OMEGA,
    "TRUE": TRUE, "FALSE": FALSE, "NOT": NOT, "AND": AND, "OR": OR, "XOR": XOR,
    "ZERO": ZERO, "ONE": ONE, "SUCC": SUCC, "PLUS": PLUS, "MULT": MULT, "POW": POW, "PRED": PRED, "SUB": SUB,
    "ISZERO": ISZERO, "LEQ": LEQ,
    "PAIR": PAIR, "FIRST": FIRST, "SECOND": SECOND,
    "NIL": NIL, "ISNIL": ISNIL, "CONS": CONS, "HEAD": HEAD, "TAIL": TAIL, "INDEX": INDEX,
    "IZERO": IZERO, "IONE": IONE, "ITWOP": ITWOP, "ITWON": ITWON, "INEG": INEG, "IPLUS": IPLUS, "ISUB": ISUB,
    "IMULT": IMULT, "IEXP": IEXP, "SIGN": SIGN,
    "FACT": FACT, "FIBO": FIBO,
}

_NATURAL = re.compile(r"^\d+$")
_SIGNED = re.compile(r"^[+-]\d+$")


def lookup(name, original_expr=None, start=None):
    """Returns the term for name: a key of NAMED, a natural number (Church numeral) or a signed number (signed
    integer). original_expr is the whole command the name came from and start the position of name in it; both are
    only used for better error messages.
    """
    if name in NAMED:
        return NAMED[name]
    elif _NATURAL.match(name):
        return NAT(int(name))
    elif _SIGNED.match(name):
        return INT(int(name))

    if original_expr is None or name not in original_expr:
        raise GenericException("'{}' is not a named term", name)
    if start is None:
        start = original_expr.index(name)
    msg = "'{1}' in '{0}' is not a named term"
    raise GenericException(msg, [original_expr, name], start=start, end=start + len(name))


def number(cnum):
    """Returns the int encoded by Church numeral cnum (in normal form). If cnum isn't a Church numeral, returns None.
    Binder names don't matter: λs.λz.s (s z) is 2 just like λf.λx.f (f x).
    """
    if not (isinstance(cnum, Abstraction) and isinstance(cnum.body, Abstraction)):
        return None

    func, arg = cnum.bound, cnum.body.bound
    if func == arg:
        return None

    num = 0
    nth_body = cnum.body.body
    while isinstance(nth_body, Application):
        if nth_body.function != func:
            return None
        nth_body = nth_body.argument
        num += 1

    return num if isinstance(nth_body, Variable) and nth_body == arg else None


def integer(inum):
    """Returns the int encoded by signed integer inum, or None. inum must be of the form (\\f.[[f P] Q]) but P and Q
    need not be in normal form: reduction leaves Q alone once [f P] stops changing, so results of IPLUS and friends
    come out that way. Each half is reduced on its own, for at most COMPONENT_STEPS steps.
    """
    if not (isinstance(inum, Abstraction) and isinstance(inum.body, Application)):
        return None

    selector, body = inum.bound, inum.body
    if not (isinstance(body.function, Application) and body.function.function == selector):
        return None

    positive, negative = _natural(body.function.argument), _natural(body.argument)
    if positive is None or negative is None:
        return None
    return positive - negative


def _natural(term):
    reducer = Reducer(term, keep_going=within(COMPONENT_STEPS))
    result = reducer.run()
    return number(result) if reducer.fixed else None


def decode(term):
    """Returns str of the number encoded by term (natural first, then signed), or None."""
    num = number(term)
    if num is not None:
        return str(num)

    num = integer(term)
    if num is not None:
        return f"{num:+d}" if num else "0"
    return None
