import unittest

from lambdaeval.lang.syntax import V, app, lam
from lambdaeval.pure.term import Abstraction, Application, Variable


class SyntaxTestCase(unittest.TestCase):

    def test_V(self):
        self.assertEqual(Variable("x"), V("x"))
        self.assertRaises(ValueError, V, "")

    def test_rshift(self):
        cases = {
            "(\\x.x)": V("x") >> V("x"),
            "(\\x.(\\y.x))": V("x") >> (V("y") >> V("x")),
            "(\\x.[f x])": V("x") >> V("f")(V("x")),
        }
        for result, case in cases.items():
            self.assertEqual(result, case.render())

    def test_app(self):
        f, x, y = V("f"), V("x"), V("y")
        self.assertEqual(Application(Application(f, x), y), app(f, x, y))
        self.assertEqual(f(x, y), app(f, x, y))
        self.assertEqual(f, app(f))
        self.assertEqual("[f [x y]]", app(f, app(x, y)).render())

        self.assertRaises(ValueError, app)
        self.assertRaises(TypeError, app, "f", x)

    def test_lam(self):
        cases = {
            "(\\x.x)": lam("x", V("x")),
            "(\\x.(\\y.(\\z.[[x z] [y z]])))": lam("x", "y", "z", V("x")(V("z"), V("y")(V("z")))),
            "(\\f.f)": lam(V("f"), V("f")),
        }
        for result, case in cases.items():
            self.assertEqual(result, case.render())
        self.assertIsInstance(lam("x", "y", V("x")).body, Abstraction)

        self.assertRaises(ValueError, lam, V("x"))
        self.assertRaises(ValueError, lam)


if __name__ == '__main__':
    unittest.main()
