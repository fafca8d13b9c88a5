# alphabet_and_permutation.py
from __future__ import annotations

import re

from debug import Debug
from errors import AlphabetError, PermutationError

debug = Debug()
debug.disable("permutation")

Alpha26 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_CYCLE_RE = re.compile(r"\(([^()]+)\)")
_RESERVED = set("()")


# ── Alphabet ──────────────────────────────────────────────────────
class Alphabet:
    """Ordered set of encodable symbols; the K-th symbol has index K."""

    def __init__(self, chars: str = Alpha26) -> None:
        if not chars:
            raise AlphabetError("Alphabet must contain at least one symbol")

        index: dict[str, int] = {}
        for i, ch in enumerate(chars):
            if ch.isspace() or ch in _RESERVED:
                raise AlphabetError(f"Symbol {ch!r} cannot be part of an alphabet")
            if ch in index:
                raise AlphabetError(f"Duplicate symbol {ch!r} in alphabet")
            index[ch] = i

        self._chars: str = chars
        self._index: dict[str, int] = index

    @property
    def chars(self) -> str:
        return self._chars

    def size(self) -> int:
        return len(self._chars)

    def contains(self, ch: str) -> bool:
        return ch in self._index

    # symbol index → symbol
    def to_char(self, index: int) -> str:
        if not (0 <= index < len(self._chars)):
            hi = len(self._chars) - 1
            raise AlphabetError(f"Index {index} out of range 0–{hi}")
        return self._chars[index]

    # symbol → symbol index
    def to_int(self, ch: str) -> int:
        try:
            return self._index[ch]
        except KeyError:
            raise AlphabetError(
                f"Invalid character {ch!r} for current alphabet."
            ) from None

    __len__ = size
    __contains__ = contains

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"<Alphabet {self._chars!r}>"


# ── Permutation ───────────────────────────────────────────────────
class Permutation:
    """A permutation of alphabet indices given in cycle notation.

    ``"(ABC) (DE)"`` sends A→B, B→C, C→A, D→E and E→D; every symbol not
    mentioned in any cycle maps to itself. Whitespace is ignored and the
    empty string is the identity.
    """

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        self.alphabet: Alphabet = alphabet
        n = alphabet.size()

        # integer lookup tables
        self._fwd: list[int] = list(range(n))
        self._rev: list[int] = list(range(n))

        used: set[str] = set()
        for cycle in _split_cycles(cycles):
            self._add_cycle(cycle, used)

    @classmethod
    def from_wiring(cls, wiring: str, alphabet: Alphabet) -> "Permutation":
        """Build from a substitution string: alphabet[i] ↦ wiring[i]."""
        return cls(wiring_to_cycles(wiring, alphabet), alphabet)

    def _add_cycle(self, cycle: str, used: set[str]) -> None:
        for ch in cycle:
            if ch not in self.alphabet:
                raise PermutationError(f"Symbol {ch!r} in cycle ({cycle}) not in alphabet")
            if ch in used:
                raise PermutationError(f"Symbol {ch!r} appears in more than one cycle")
            used.add(ch)

        # passed validation → commit c0→c1→…→cm→c0
        idx = [self.alphabet.to_int(ch) for ch in cycle]
        for a, b in zip(idx, idx[1:] + idx[:1]):
            self._fwd[a] = b
        for i, j in enumerate(self._fwd):
            self._rev[j] = i
        debug.log("permutation", f"cycle ({cycle}) applied")

    # ── lookups ──────────────────────────────────────────────────
    def size(self) -> int:
        return self.alphabet.size()

    def wrap(self, p: int) -> int:
        """Return P modulo the size of this permutation (never negative)."""
        return p % self.size()

    def permute(self, p: int) -> int:
        return self._fwd[self.wrap(p)]

    def invert(self, c: int) -> int:
        return self._rev[self.wrap(c)]

    def permute_char(self, ch: str) -> str:
        return self.alphabet.to_char(self._fwd[self.alphabet.to_int(ch)])

    def invert_char(self, ch: str) -> str:
        return self.alphabet.to_char(self._rev[self.alphabet.to_int(ch)])

    def derangement(self) -> bool:
        """True iff no symbol maps to itself."""
        return all(j != i for i, j in enumerate(self._fwd))

    def cycles(self) -> str:
        """Canonical cycle notation, fixed points omitted."""
        seen: set[int] = set()
        out: list[str] = []
        for start in range(self.size()):
            if start in seen or self._fwd[start] == start:
                continue
            cycle = []
            i = start
            while i not in seen:
                seen.add(i)
                cycle.append(self.alphabet.to_char(i))
                i = self._fwd[i]
            out.append("(" + "".join(cycle) + ")")
        return " ".join(out)

    # nicety for debugging
    def __repr__(self) -> str:
        return f"<Permutation {self.cycles() or 'identity'}>"


# ── helpers ───────────────────────────────────────────────────────
def is_cycle_token(token: str) -> bool:
    """True if TOKEN belongs to cycle notation rather than a name or setting."""
    return token.lstrip().startswith("(")


def _split_cycles(cycles: str) -> list[str]:
    """Tokenise ``"(ab) (cd)"`` into ``["ab", "cd"]``; reject anything else."""
    compact = "".join(cycles.split())
    groups = _CYCLE_RE.findall(compact)
    if "".join(f"({g})" for g in groups) != compact:
        raise PermutationError(f"Malformed cycle notation: {cycles!r}")
    return groups


def wiring_to_cycles(wiring: str, alphabet: Alphabet) -> str:
    """Return the cycle notation of the substitution alphabet[i] ↦ wiring[i]."""
    if sorted(wiring) != sorted(alphabet.chars):
        raise PermutationError("wiring must be a permutation of alphabet")

    seen: set[str] = set()
    out: list[str] = []
    for start in alphabet.chars:
        if start in seen:
            continue
        cycle = []
        ch = start
        while ch not in seen:
            seen.add(ch)
            cycle.append(ch)
            ch = wiring[alphabet.to_int(ch)]
        if len(cycle) > 1:
            out.append("(" + "".join(cycle) + ")")
    return " ".join(out)
