# machine.py  ─────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Sequence

from alphabet_and_permutation import Alphabet, Permutation
from debug import Debug
from errors import ConfigurationError, MessageError
from rotor_and_reflector import Rotor

debug = Debug()
debug.disable("stepping", "machine")


class Machine:
    """A complete rotor machine.

    Slot 0 holds the reflector, the next ``num_rotors - pawls`` slots hold
    fixed rotors and the rightmost ``pawls`` slots hold moving rotors.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        pawls: int,
        all_rotors: Iterable[Rotor],
    ) -> None:
        if num_rotors <= 1:
            raise ConfigurationError("A machine needs a reflector and at least one rotor")
        if not (0 <= pawls < num_rotors):
            raise ConfigurationError(
                f"Number of pawls must be in 0–{num_rotors - 1}, got {pawls}"
            )

        self.alphabet = alphabet
        self._num_rotors = num_rotors
        self._pawls = pawls

        self._catalog: dict[str, Rotor] = {}
        for rotor in all_rotors:
            if rotor.name in self._catalog:
                raise ConfigurationError(f"Rotor {rotor.name!r} described twice")
            if rotor.alphabet != alphabet:
                raise ConfigurationError(f"Rotor {rotor.name!r} uses a different alphabet")
            self._catalog[rotor.name] = rotor

        self._slots: list[Rotor] = []
        self._plugboard = Permutation("", alphabet)

    # ── shape ───────────────────────────────────────────────────
    def num_rotors(self) -> int:
        return self._num_rotors

    def num_pawls(self) -> int:
        return self._pawls

    def catalog(self) -> list[str]:
        return list(self._catalog)

    # ── setup ───────────────────────────────────────────────────
    def insert_rotors(self, names: Sequence[str]) -> None:
        """Fill the slots with the rotors NAMES (NAMES[0] is the reflector),
        every one freshly set at position 0."""
        if len(names) != self._num_rotors:
            raise ConfigurationError(
                f"Wrong slot count: expected {self._num_rotors} rotors, got {len(names)}"
            )

        first_moving = self._num_rotors - self._pawls
        slots: list[Rotor] = []
        seen: set[str] = set()

        for i, name in enumerate(names):
            try:
                template = self._catalog[name]
            except KeyError:
                raise ConfigurationError(f"Unknown rotor name {name!r}") from None

            if i == 0:
                if not template.reflecting():
                    raise ConfigurationError(f"Slot 0 needs a reflector, {name} is not one")
            elif i < first_moving:
                if template.rotates() or template.reflecting():
                    raise ConfigurationError(f"Slot {i} needs a fixed rotor, {name} is not one")
            elif not template.rotates():
                raise ConfigurationError(f"Slot {i} needs a moving rotor, {name} is not one")

            if name in seen:
                raise ConfigurationError(f"Repeated rotor {name!r} in the setting")
            seen.add(name)
            slots.append(template.fresh())

        # passed validation → commit
        self._slots = slots
        debug.log("machine", f"inserted {' '.join(names)}")

    def set_rotors(self, setting: str) -> None:
        """Turn slots 1.. to SETTING, one symbol per slot, leftmost first."""
        self._require_rotors()
        if len(setting) != self._num_rotors - 1:
            raise ConfigurationError(
                f"Setting {setting!r} must have {self._num_rotors - 1} symbols"
            )
        for ch in setting:
            if ch not in self.alphabet:
                raise ConfigurationError(f"Setting symbol {ch!r} not in the alphabet")

        for rotor, ch in zip(self._slots[1:], setting):
            rotor.set(ch)

    def set_plugboard(self, plugboard: Permutation) -> None:
        if plugboard.alphabet != self.alphabet:
            raise ConfigurationError("Plugboard uses a different alphabet")
        self._plugboard = plugboard

    def rotor_setting(self) -> str:
        """The symbols currently in the windows of slots 1.."""
        self._require_rotors()
        return "".join(self.alphabet.to_char(r.setting()) for r in self._slots[1:])

    # ── stepping logic ──────────────────────────────────────────
    def _step_rotors(self) -> None:
        """Advance the moving rotors for one key-press.

        Phase one collects the slots to move from the positions before the
        key-press; phase two moves each of them exactly once.
        """
        n = self._num_rotors
        advances: set[int] = set()
        if self._pawls:
            advances.add(n - 1)

        for i in range(n - 2, n - self._pawls - 1, -1):
            if self._slots[i + 1].at_notch():
                advances.update((i, i + 1))

        for i in advances:
            self._slots[i].advance()

        if debug.active("stepping"):
            debug.log("stepping", f"advanced {sorted(advances)} -> {self.rotor_setting()}")

    # ── encipher ────────────────────────────────────────────────
    def convert_index(self, c: int) -> int:
        """Convert the symbol index C after first advancing the machine."""
        self._require_rotors()
        self._step_rotors()

        c = self._plugboard.permute(c)

        for rotor in reversed(self._slots):
            c = rotor.convert_forward(c)

        for rotor in self._slots[1:]:
            c = rotor.convert_backward(c)

        return self._plugboard.invert(c)

    def convert(self, msg: str) -> str:
        """Encipher (or, equally, decipher) MSG, updating the rotors."""
        self._require_rotors()
        for ch in msg:
            if ch not in self.alphabet:
                raise MessageError(f"Character {ch!r} not in the alphabet")

        return "".join(
            self.alphabet.to_char(self.convert_index(self.alphabet.to_int(ch)))
            for ch in msg
        )

    # ── helpers ─────────────────────────────────────────────────
    def _require_rotors(self) -> None:
        if not self._slots:
            raise ConfigurationError("No rotors inserted")

    def __repr__(self) -> str:
        names = " ".join(r.name for r in self._slots) or "empty"
        return f"<Machine {names} plugboard={self._plugboard.cycles() or '-'}>"
