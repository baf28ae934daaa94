import sys
import unittest
from unittest import mock

from lambdacodec import (
    END,
    App,
    Lam,
    Neutral,
    ResourceExhausted,
    Var,
    evaluate,
    from_bruijn,
    from_function,
    from_number,
    reduce,
    reify,
    to_bruijn,
    to_function,
)
from lambdacodec import nbe

n2 = "LL(1 (1 0))"
n3 = "LL(1 (1 (1 0)))"
n5 = "LL(1 (1 (1 (1 (1 0)))))"
n6 = "LL(1 (1 (1 (1 (1 (1 0))))))"
n8 = "LL(1 (1 (1 (1 (1 (1 (1 (1 0))))))))"
add = "LLLL((3 1) ((2 1) 0))"
mul = "LLL(2 (1 0))"
pow = "LL(0 1)"
omega = "(L(0 0) L(0 0))"


def normalize(code: str) -> str:
    return to_bruijn(reduce(from_bruijn(code)))


class ReduceTestCase(unittest.TestCase):

    def test_arithmetic(self):
        self.assertEqual(n5, normalize(f"(({add} {n2}) {n3})"))
        self.assertEqual(n6, normalize(f"(({mul} {n2}) {n3})"))
        self.assertEqual(n8, normalize(f"(({pow} {n2}) {n3})"))

    def test_normal_forms_are_unchanged(self):
        cases = [n2, add, mul, pow, "L(0 L0)", "LLL((2 0) (1 0))"]
        for case in cases:
            self.assertEqual(case, normalize(case), case)

    def test_beta(self):
        cases = {
            "(L0 L0)": "L0",
            "((LL1 L0) L(0 0))": "L0",
            "L(L(0 0) 0)": "L(0 0)",
            "LL(L1 0)": "LL0",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, normalize(case), case)

    def test_free_variables(self):
        cases = {
            "(L0 0)": "0",
            "L(1 0)": "L(1 0)",
            "(L(0 3) L0)": "2",
            "L(L(0 2) L0)": "L1",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, normalize(case), case)

    def test_non_normalizing(self):
        previous = sys.getrecursionlimit()
        with self.assertLogs("lambdacodec.nbe", level="WARNING"):
            with self.assertRaises(ResourceExhausted) as context:
                reduce(from_bruijn(omega), recursion_limit=2000)
        self.assertIsInstance(context.exception.__cause__, RecursionError)
        self.assertEqual(previous, sys.getrecursionlimit())

    def test_recovers_after_exhaustion(self):
        with self.assertRaises(ResourceExhausted):
            reduce(from_bruijn(omega), recursion_limit=2000)
        self.assertEqual(n5, normalize(f"(({add} {n2}) {n3})"))

    def test_keeps_higher_caller_limit(self):
        previous = sys.getrecursionlimit()
        term = from_number(300)
        sys.setrecursionlimit(3000)
        try:
            with mock.patch.object(nbe, "DEFAULT_RECURSION_LIMIT", 100):
                self.assertEqual(term, reduce(term))
            self.assertEqual(3000, sys.getrecursionlimit())
        finally:
            sys.setrecursionlimit(previous)

    def test_limit_below_current_depth(self):
        previous = sys.getrecursionlimit()
        with self.assertRaises(ResourceExhausted) as context:
            reduce(from_bruijn(n2), recursion_limit=5)
        self.assertIsInstance(context.exception.__cause__, RecursionError)
        self.assertEqual(previous, sys.getrecursionlimit())


class FunctionTestCase(unittest.TestCase):

    def test_evaluate(self):
        two = evaluate(from_bruijn(n2))
        self.assertEqual(7, two(lambda x: x + 2)(3))
        self.assertEqual("aa!", two(lambda s: s + "a")("!")[::-1])
        self.assertIs(to_function, evaluate)

    def test_reify(self):
        self.assertEqual(Lam(Lam(Var(1))), reify(lambda x: lambda y: x))
        self.assertEqual(from_bruijn(n2), reify(lambda f: lambda x: f(f(x))))
        self.assertEqual(
            Lam(App(Var(0), Lam(Var(0)))), reify(lambda x: x(lambda y: y))
        )
        self.assertIs(from_function, reify)

    def test_reify_non_function(self):
        self.assertRaises(TypeError, reify, 3)
        self.assertRaises(TypeError, reify, lambda x: 3)


class NeutralTestCase(unittest.TestCase):

    def test_unapplied(self):
        variable = Neutral(lambda depth: Var(depth - 1))
        self.assertEqual(0, variable.arity)
        self.assertEqual(Var(2), variable(END)(3))

    def test_applied_chain(self):
        variable = Neutral(lambda depth: Var(depth - 1))
        applied = variable(lambda x: x)(lambda x: lambda y: x)
        self.assertEqual(2, applied.arity)
        self.assertEqual(0, variable.arity)
        self.assertEqual(
            App(App(Var(0), Lam(Var(0))), Lam(Lam(Var(1)))), applied(END)(1)
        )


if __name__ == "__main__":
    unittest.main()
