# suites.py
from __future__ import annotations

from typing import Dict, List, Tuple

from alphabet_and_permutation import Alpha26, Alphabet, Permutation
from errors import ConfigurationError
from machine import Machine
from rotor_and_reflector import FixedRotor, MovingRotor, Reflector, Rotor

# name → (kind, wiring, notches); kind as in configuration files:
# M = moving, N = fixed, R = reflector
Wheel = Tuple[str, str, str]

LEGACY_WHEELS: Dict[str, Wheel] = {
    "I":     ("M", "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    "II":    ("M", "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    "III":   ("M", "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    "IV":    ("M", "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    "V":     ("M", "VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
    "VI":    ("M", "JPGVOUMFYQBENHZRDKASXLICTW", "ZM"),
    "VII":   ("M", "NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM"),
    "VIII":  ("M", "FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM"),
    "Beta":  ("N", "LEYJVCNIXWPBQMDRTAKZGFUHOS", ""),
    "Gamma": ("N", "FSOKANUERHMBTIYCWLQPZXVGJD", ""),
    "A":     ("R", "EJMZALYXVBWFCRQUONTSPIKHGD", ""),
    "B":     ("R", "YRUHQSLDPXNGOKMIEBFZCWVJAT", ""),
    "C":     ("R", "FVPJIAOYEDRZXWGCTKUQSBNMHL", ""),
    "B-thin": ("R", "ENKQAUYWJICOPBLMDXZVFTHRGS", ""),
    "C-thin": ("R", "RDOBJNTKVEHMLFCWZAXGYIPSUQ", ""),
}

SUITES: Dict[str, Dict] = {
    "legacy": {
        "name": "Legacy",
        "alphabet": Alpha26,
        "wheels": LEGACY_WHEELS,
        "n_rot": 5,
        "pawls": 3,
    },
}


def make_rotor(name: str, kind: str, perm: Permutation, notches: str = "") -> Rotor:
    """Instantiate the rotor class matching a configuration KIND letter."""
    if kind == "M":
        return MovingRotor(name, perm, notches)
    if kind == "N":
        return FixedRotor(name, perm)
    if kind == "R":
        return Reflector(name, perm)
    raise ConfigurationError(f"Rotor {name} has unknown type {kind!r}")


def build_catalog(wheels: Dict[str, Wheel], alphabet: Alphabet) -> List[Rotor]:
    return [
        make_rotor(name, kind, Permutation.from_wiring(wiring, alphabet), notches)
        for name, (kind, wiring, notches) in wheels.items()
    ]


def build_machine(suite: str = "legacy") -> Machine:
    """Return an unconfigured machine holding every wheel of SUITE."""
    try:
        cfg = SUITES[suite.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown suite {suite!r}. Expected one of {list(SUITES)}"
        ) from None

    alphabet = Alphabet(cfg["alphabet"])
    return Machine(alphabet, cfg["n_rot"], cfg["pawls"], build_catalog(cfg["wheels"], alphabet))
