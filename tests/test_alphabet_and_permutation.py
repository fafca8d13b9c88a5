"""Tests for the alphabet and cycle-notation permutations."""
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from alphabet_and_permutation import (
    Alpha26,
    Alphabet,
    Permutation,
    is_cycle_token,
    wiring_to_cycles,
)
from errors import AlphabetError, EnigmaError, PermutationError


class TestAlphabet(unittest.TestCase):
    def setUp(self):
        self.alpha = Alphabet()

    def test_default_is_uppercase(self):
        self.assertEqual(self.alpha.size(), 26)
        self.assertEqual(self.alpha.chars, Alpha26)

    def test_roundtrip(self):
        for i in range(self.alpha.size()):
            self.assertEqual(self.alpha.to_int(self.alpha.to_char(i)), i)
        for ch in Alpha26:
            self.assertEqual(self.alpha.to_char(self.alpha.to_int(ch)), ch)

    def test_contains(self):
        self.assertTrue(self.alpha.contains("Q"))
        self.assertFalse(self.alpha.contains("q"))
        self.assertIn("Z", self.alpha)
        self.assertEqual(len(self.alpha), 26)

    def test_custom_symbols(self):
        alpha = Alphabet("01#/")
        self.assertEqual(alpha.to_int("#"), 2)
        self.assertEqual(alpha.to_char(3), "/")

    def test_duplicate_rejected(self):
        with self.assertRaises(AlphabetError):
            Alphabet("ABCA")

    def test_empty_and_reserved_rejected(self):
        for chars in ("", "AB C", "AB(", "A)B"):
            with self.assertRaises(AlphabetError):
                Alphabet(chars)

    def test_lookup_miss(self):
        with self.assertRaises(AlphabetError):
            self.alpha.to_int("?")
        # still a ValueError for callers that only know the builtin
        with self.assertRaises(ValueError):
            self.alpha.to_int("a")

    def test_index_out_of_range(self):
        with self.assertRaises(AlphabetError):
            self.alpha.to_char(26)
        with self.assertRaises(AlphabetError):
            self.alpha.to_char(-1)

    def test_equality(self):
        self.assertEqual(Alphabet("ABC"), Alphabet("ABC"))
        self.assertNotEqual(Alphabet("ABC"), Alphabet("ACB"))


class TestPermutation(unittest.TestCase):
    def setUp(self):
        self.alpha = Alphabet()

    def test_identity(self):
        p = Permutation("", self.alpha)
        for i in range(26):
            self.assertEqual(p.permute(i), i)
            self.assertEqual(p.invert(i), i)
        self.assertEqual(p.cycles(), "")

    def test_single_cycle(self):
        p = Permutation("(ABCD)", self.alpha)
        self.assertEqual(p.permute_char("A"), "B")
        self.assertEqual(p.permute_char("D"), "A")
        self.assertEqual(p.permute_char("E"), "E")
        self.assertEqual(p.invert_char("B"), "A")
        self.assertEqual(p.invert_char("A"), "D")

    def test_wraps_indices(self):
        p = Permutation("(ABCD)", self.alpha)
        self.assertEqual(p.permute(-26), 1)
        self.assertEqual(p.permute(27), 2)
        self.assertEqual(p.invert(-1), 25)
        self.assertEqual(p.wrap(-1), 25)

    def test_roundtrip(self):
        p = Permutation("(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)", self.alpha)
        for i in range(26):
            self.assertEqual(p.invert(p.permute(i)), i)
            self.assertEqual(p.permute(p.invert(i)), i)

    def test_whitespace_ignored(self):
        p = Permutation("  ( A B )\t(C D) ", self.alpha)
        q = Permutation("(AB)(CD)", self.alpha)
        for i in range(26):
            self.assertEqual(p.permute(i), q.permute(i))

    def test_derangement(self):
        alpha = Alphabet("ABCD")
        self.assertTrue(Permutation("(AB)(CD)", alpha).derangement())
        self.assertFalse(Permutation("(AB)(C)", alpha).derangement())
        self.assertFalse(Permutation("", alpha).derangement())

    def test_unknown_symbol_rejected(self):
        with self.assertRaises(PermutationError):
            Permutation("(AB1)", self.alpha)

    def test_symbol_in_two_cycles_rejected(self):
        with self.assertRaises(PermutationError):
            Permutation("(AB) (BC)", self.alpha)
        with self.assertRaises(PermutationError):
            Permutation("(ABA)", self.alpha)

    def test_malformed_rejected(self):
        for cycles in ("(AB", "AB", "()", "(AB)C", "((AB))"):
            with self.assertRaises(PermutationError, msg=cycles):
                Permutation(cycles, self.alpha)

    def test_cycle_tokens(self):
        for token in ("(AB)", "(AB", "()", " (C)"):
            self.assertTrue(is_cycle_token(token), token)
        for token in ("AB)", "Beta", "AXLE", ""):
            self.assertFalse(is_cycle_token(token), token)

    def test_errors_share_a_base(self):
        self.assertTrue(issubclass(PermutationError, EnigmaError))
        self.assertTrue(issubclass(AlphabetError, EnigmaError))

    def test_canonical_cycles(self):
        p = Permutation("(BA) (DC)", self.alpha)
        self.assertEqual(p.cycles(), "(AB) (CD)")
        self.assertEqual(repr(Permutation("", self.alpha)), "<Permutation identity>")


class TestWiring(unittest.TestCase):
    def setUp(self):
        self.alpha = Alphabet()

    def test_rotor_one(self):
        cycles = wiring_to_cycles("EKMFLGDQVZNTOWYHXUSPAIBRCJ", self.alpha)
        self.assertEqual(cycles, "(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ)")

    def test_from_wiring_matches_wiring(self):
        wiring = "AJDKSIRUXBLHWTMCQGZNPYFVOE"
        p = Permutation.from_wiring(wiring, self.alpha)
        for i, ch in enumerate(wiring):
            self.assertEqual(p.permute(i), self.alpha.to_int(ch))

    def test_bad_wiring(self):
        with self.assertRaises(PermutationError):
            wiring_to_cycles("ABC", self.alpha)
        with self.assertRaises(PermutationError):
            wiring_to_cycles("A" * 26, self.alpha)


if __name__ == "__main__":
    unittest.main()
