# utilities.py
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, List

from alphabet_and_permutation import Alphabet, Permutation, is_cycle_token
from debug import Debug
from errors import ConfigurationError
from machine import Machine
from rotor_and_reflector import Rotor
from suites import make_rotor

debug = Debug()
debug.disable("config")


# ──────────────────────────────────────────────────────────────────
#  0. Regex & trivial helpers
# ──────────────────────────────────────────────────────────────────


_kind_re = re.compile(r"^([MNR])(.*)$")


# ──────────────────────────────────────────────────────────────────
#  1. Machine configuration
# ──────────────────────────────────────────────────────────────────


def read_config(text: str) -> Machine:
    """Build a machine from configuration TEXT.

    Line 1 is the alphabet, line 2 holds ``numRotors pawls`` and the rest
    is a whitespace-separated list of ``NAME KIND[NOTCHES] (cycles)...``
    rotor descriptions, free to wrap across lines.
    """
    lines = text.splitlines()
    if len(lines) < 2:
        raise ConfigurationError("configuration file truncated")

    alphabet = Alphabet(lines[0].strip())

    shape = lines[1].split()
    if len(shape) != 2:
        raise ConfigurationError("second line must hold the number of rotors and pawls")
    try:
        num_rotors, pawls = (int(n) for n in shape)
    except ValueError:
        raise ConfigurationError(
            f"bad format for number of rotors in configuration file: {lines[1]!r}"
        ) from None

    tokens = iter("\n".join(lines[2:]).split())
    rotors = list(_read_rotors(tokens, alphabet))
    debug.log("config", f"{len(rotors)} rotors over {alphabet.chars}")
    return Machine(alphabet, num_rotors, pawls, rotors)


def _read_rotors(tokens: Iterator[str], alphabet: Alphabet) -> Iterator[Rotor]:
    pending = next(tokens, None)
    while pending is not None:
        name = pending
        if is_cycle_token(name):
            raise ConfigurationError(f"expected a rotor name, found {name!r}")

        kind_token = next(tokens, None)
        if kind_token is None:
            raise ConfigurationError(f"bad rotor description for {name}")
        m = _kind_re.match(kind_token)
        if not m:
            raise ConfigurationError(f"Rotor {name} has unknown type {kind_token!r}")
        kind, notches = m.groups()
        if notches and kind != "M":
            raise ConfigurationError(f"Only moving rotors have notches ({name})")

        cycles: List[str] = []
        pending = next(tokens, None)
        while pending is not None and is_cycle_token(pending):
            cycles.append(pending)
            pending = next(tokens, None)

        yield make_rotor(name, kind, Permutation(" ".join(cycles), alphabet), notches)


# ──────────────────────────────────────────────────────────────────
#  2. Setting lines
# ──────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class Setup:
    """One parsed ``* B Beta III IV I AXLE (YF) (ZH)`` line."""

    rotors: List[str]
    setting: str
    cycles: List[str] = field(default_factory=list)

    @property
    def plugboard(self) -> str:
        return " ".join(self.cycles)


def is_setup_line(line: str) -> bool:
    return line.lstrip().startswith("*")


def parse_setup(line: str, num_rotors: int) -> Setup:
    """Split a setting line into rotor names, window setting and plugs."""
    if not is_setup_line(line):
        raise ConfigurationError(f"setting line must start with '*': {line!r}")

    tokens = line.lstrip()[1:].split()
    if len(tokens) < num_rotors:
        raise ConfigurationError(
            f"Wrong slot count: expected {num_rotors} rotors in {line.strip()!r}"
        )

    rotors, rest = tokens[:num_rotors], tokens[num_rotors:]
    cycles = [t for t in rest if is_cycle_token(t)]
    setting = "".join(t for t in rest if not is_cycle_token(t))
    return Setup(rotors, setting, cycles)


def apply_setup(machine: Machine, setup: Setup) -> None:
    machine.insert_rotors(setup.rotors)
    machine.set_rotors(setup.setting)
    machine.set_plugboard(Permutation(setup.plugboard, machine.alphabet))


# ──────────────────────────────────────────────────────────────────
#  3. Message text
# ──────────────────────────────────────────────────────────────────


def preprocess_message(msg: str) -> str:
    """Drop all whitespace; everything else goes to the machine as is."""
    return "".join(msg.split())


def format_groups(msg: str, block: int = 5) -> str:
    """Return MSG in groups of BLOCK symbols (the last may be shorter)."""
    if block < 1:
        raise ValueError(f"Group size must be positive, got {block}")
    return " ".join(msg[i : i + block] for i in range(0, len(msg), block))


__all__ = [
    "Setup",
    "apply_setup",
    "format_groups",
    "is_setup_line",
    "parse_setup",
    "preprocess_message",
    "read_config",
]
