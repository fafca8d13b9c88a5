"""Tests for the component tracer."""
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from debug import Debug
from suites import build_machine


class TestDebug(unittest.TestCase):
    def setUp(self):
        self.dbg = Debug()
        self._saved = (Debug.enabled, self.dbg.status())

    def tearDown(self):
        Debug.enabled, Debug.components = self._saved[0], self._saved[1]

    def test_components_known(self):
        self.assertEqual(
            set(self.dbg.status()),
            {"permutation", "rotor", "stepping", "machine", "config"},
        )

    def test_unknown_component(self):
        with self.assertRaises(ValueError):
            self.dbg.enable("turbo")

    def test_toggles_are_shared(self):
        other = Debug()
        self.dbg.toggle_global(True)
        self.dbg.enable("stepping")
        self.assertTrue(other.active("stepping"))
        self.dbg.toggle("stepping")
        self.assertFalse(other.active("stepping"))

    def test_global_switch(self):
        self.dbg.enable("machine")
        self.dbg.toggle_global(False)
        self.assertFalse(self.dbg.active("machine"))

    def test_stepping_trace(self):
        self.dbg.toggle_global(True)
        self.dbg.enable("stepping")
        m = build_machine()
        m.insert_rotors(["B", "Beta", "I", "II", "III"])
        m.set_rotors("AAAV")
        with self.assertLogs("ENIGMA", level="DEBUG") as logs:
            m.convert("A")
        self.assertIn("[STEPPING] advanced [3, 4] -> AABW", logs.output[0])


if __name__ == "__main__":
    unittest.main()
