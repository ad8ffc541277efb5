import io
import unittest
from unittest.mock import patch

from lambdaeval.main import build_parser, build_term, main
from lambdaeval.lang.error import GenericException
from lambdaeval.lang.library import NAT


class MainTestCase(unittest.TestCase):

    def run_main(self, argv):
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            main(argv)
        return stdout.getvalue()

    def test_basic(self):
        output = self.run_main(["NOT", "TRUE"])
        self.assertTrue(output.startswith("\nMAIN := [(\\p.[[p (\\x.(\\y.y))] (\\x.(\\y.x))]) (\\x.(\\y.x))]\n"))
        self.assertTrue(output.endswith("\n= (\\x.(\\y.y))\n"))

    def test_verbose(self):
        output = self.run_main(["-v", "verbose", "AND", "TRUE", "FALSE"])
        self.assertIn("Summary:", output)
        self.assertEqual(2, output.count("MAIN := "))

    def test_decode(self):
        output = self.run_main(["--decode", "SUCC", "1"])
        self.assertTrue(output.endswith("  (2)\n"))

    def test_signed_decode(self):
        output = self.run_main(["--decode", "IPLUS", "-2", "+5"])
        self.assertTrue(output.endswith("  (+3)\n"), output)

    def test_default_run(self):
        output = self.run_main([])
        self.assertTrue(output.startswith("\nMAIN := [[(\\g."), output)
        self.assertTrue(output.endswith(f"\n= {NAT(6).render()}\n"), output)

    def test_max_steps(self):
        output = self.run_main(["-n", "5", "Y", "I"])
        self.assertIn("did not reach a normal form within", output)

    def test_list(self):
        output = self.run_main(["--list"])
        self.assertIn("TRUE := (\\x.(\\y.x))\n", output)
        self.assertNotIn("MAIN := ", output)

    def test_unknown_name(self):
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            with self.assertRaises(SystemExit) as context:
                main(["NOT", "FOO"])
        self.assertEqual(1, context.exception.code)
        self.assertIn("is not a named term", stdout.getvalue())

    def test_bad_verbosity(self):
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as context:
                build_parser().parse_args(["-v", "loud"])
        self.assertEqual(2, context.exception.code)

    def test_build_term(self):
        self.assertEqual("[[(\\x.(\\y.x)) (\\x.x)] (\\f.(\\x.x))]", build_term(["K", "I", "0"]).render())

        with self.assertRaises(GenericException) as context:
            build_term(["K", "K", "X"])
        self.assertEqual((4, 5), (context.exception.start, context.exception.end))

    def test_default_term(self):
        args = build_parser().parse_args([])
        self.assertEqual([], args.term)
        self.assertEqual("basic", args.verbosity)
        self.assertIsNone(args.max_steps)


if __name__ == '__main__':
    unittest.main()
