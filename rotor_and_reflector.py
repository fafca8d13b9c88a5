# rotor_and_reflector.py
from __future__ import annotations

from copy import copy

from alphabet_and_permutation import Alphabet, Permutation
from debug import Debug
from errors import RotorError

debug = Debug()
debug.disable("rotor")


class Rotor:
    """A permuting wheel with a rotational offset.

    The wiring turns with the disc, so a signal entering at contact *e* is
    shifted by the offset, permuted, and shifted back.
    """

    def __init__(self, name: str, perm: Permutation) -> None:
        self.name: str = name
        self.permutation: Permutation = perm
        self.alphabet: Alphabet = perm.alphabet
        self.size: int = perm.size()
        self.position: int = 0

    # ── capabilities ─────────────────────────────────────────────
    def rotates(self) -> bool:
        return False

    def reflecting(self) -> bool:
        return False

    # ── window setting ───────────────────────────────────────────
    def setting(self) -> int:
        return self.position

    def set(self, posn: int | str) -> None:
        """Turn the rotor to POSN, an index or an alphabet symbol."""
        if isinstance(posn, str):
            posn = self.alphabet.to_int(posn)
        self.position = self.permutation.wrap(posn)

    def fresh(self) -> "Rotor":
        """Independent copy at position 0 sharing the wiring."""
        twin = copy(self)
        twin.position = 0
        return twin

    # ── signal paths ─────────────────────────────────────────────
    def convert_forward(self, sig: int) -> int:
        mapped = self.permutation.permute(sig + self.position)
        return self.permutation.wrap(mapped - self.position)

    def convert_backward(self, sig: int) -> int:
        mapped = self.permutation.invert(sig + self.position)
        return self.permutation.wrap(mapped - self.position)

    # ── niceties ─────────────────────────────────────────────────
    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} pos={self.position}>"


class FixedRotor(Rotor):
    """Settable by hand but has no pawl, so it never advances."""


class MovingRotor(Rotor):
    def __init__(self, name: str, perm: Permutation, notches: str) -> None:
        super().__init__(name, perm)
        if not set(notches) <= set(self.alphabet.chars):
            raise RotorError(f"Notch characters of rotor {name} must be in the alphabet")
        self.notches: frozenset[str] = frozenset(notches)

    def rotates(self) -> bool:
        return True

    def at_notch(self) -> bool:
        return self.alphabet.to_char(self.position) in self.notches

    def advance(self) -> None:
        self.position = self.permutation.wrap(self.position + 1)
        debug.log("rotor", f"{self.name} -> {self.alphabet.to_char(self.position)}")

    def __repr__(self) -> str:
        notches = "".join(sorted(self.notches))
        return f"<MovingRotor {self.name} pos={self.position} notches={notches!r}>"


class Reflector(Rotor):
    """Leftmost wheel; its wiring must pair every contact with another."""

    def __init__(self, name: str, perm: Permutation) -> None:
        if not perm.derangement():
            raise RotorError(f"Reflector {name} wiring must have no fixed points")
        super().__init__(name, perm)

    def reflecting(self) -> bool:
        return True

    def set(self, posn: int | str) -> None:
        if isinstance(posn, str):
            posn = self.alphabet.to_int(posn)
        if posn != 0:
            raise RotorError(f"Reflector {self.name} has only one position")
        self.position = 0
