import unittest

from lambdacodec import (
    App,
    DecodeError,
    Lam,
    Var,
    from_blc,
    from_blc64,
    from_bruijn,
    to_blc,
    to_blc64,
    to_bruijn,
)
from lambdacodec.blc import BASE64_TABLE

NUMERALS = [
    "LL0",
    "LL(1 0)",
    "LL(1 (1 0))",
    "LL(1 (1 (1 0)))",
    "LL(1 (1 (1 (1 0))))",
    "LL(1 (1 (1 (1 (1 0)))))",
    "LL(1 (1 (1 (1 (1 (1 0))))))",
    "LL(1 (1 (1 (1 (1 (1 (1 0)))))))",
    "LL(1 (1 (1 (1 (1 (1 (1 (1 0))))))))",
    "LL(1 (1 (1 (1 (1 (1 (1 (1 (1 0)))))))))",
]
FIVE = NUMERALS[5]


class BLCTestCase(unittest.TestCase):

    def test_church_five(self):
        self.assertEqual(FIVE, to_bruijn(from_blc("0000011100111001110011100111010")))
        self.assertEqual("0000011100111001110011100111010", to_blc(from_bruijn(FIVE)))

    def test_to_blc(self):
        cases = {
            "10": Var(0),
            "110": Var(1),
            "11110": Var(3),
            "0010": Lam(Var(0)),
            "0110110": App(Var(0), Var(1)),
        }
        for expected, term in cases.items():
            self.assertEqual(expected, to_blc(term))
            self.assertEqual(term, from_blc(expected))

    def test_round_trip(self):
        for case in NUMERALS + ["LLLL((3 1) ((2 1) 0))", "LLL(2 (1 0))", "LL(0 1)"]:
            self.assertEqual(case, to_bruijn(from_blc(to_blc(from_bruijn(case)))), case)

    def test_malformed(self):
        should_fail = ["", "0", "00", "01", "0110", "111", "1", "102", "x", "0x10", "1010"]
        for case in should_fail:
            self.assertRaises(DecodeError, from_blc, case)

    def test_error_position(self):
        with self.assertRaises(DecodeError) as context:
            from_blc("001112")
        self.assertEqual(5, context.exception.position)


class BLC64TestCase(unittest.TestCase):

    def test_table(self):
        self.assertEqual(128, len(BASE64_TABLE))
        self.assertEqual("000000", BASE64_TABLE["A"])
        self.assertEqual("111111", BASE64_TABLE["/"])
        self.assertEqual("C", BASE64_TABLE["000010"])
        for symbol in "Az09+/":
            self.assertEqual(symbol, BASE64_TABLE[BASE64_TABLE[symbol]])

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            BASE64_TABLE["A"] = "111111"  # type: ignore

    def test_church_five(self):
        self.assertEqual(FIVE, to_bruijn(from_blc64("CDnOc6")))
        self.assertEqual("CDnOc6", to_blc64(from_bruijn(FIVE)))

    def test_marker(self):
        # "0010" is completed to "010010"
        self.assertEqual("S", to_blc64(Lam(Var(0))))
        self.assertEqual(Lam(Var(0)), from_blc64("S"))

        # "000010" fills a whole symbol, so the marker takes one of its own
        self.assertEqual("BC", to_blc64(Lam(Lam(Var(0)))))
        self.assertEqual(Lam(Lam(Var(0))), from_blc64("BC"))

    def test_round_trip(self):
        for case in NUMERALS + ["LLLL((3 1) ((2 1) 0))", "LLL(2 (1 0))", "LL(0 1)", "L0"]:
            self.assertEqual(case, to_bruijn(from_blc64(to_blc64(from_bruijn(case)))), case)

    def test_malformed(self):
        should_fail = ["", "A", "AAB", "C*", "C=", "C D"]
        for case in should_fail:
            self.assertRaises(DecodeError, from_blc64, case)

    def test_error_points_into_symbols(self):
        with self.assertRaises(DecodeError) as context:
            from_blc64("CDnOc")
        self.assertEqual("CDnOc", context.exception.source)
        self.assertEqual(4, context.exception.position)
        self.assertIsInstance(context.exception.__cause__, DecodeError)


if __name__ == "__main__":
    unittest.main()
