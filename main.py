# main.py
from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, TextIO

from debug import Debug
from errors import ConfigurationError, EnigmaError
from machine import Machine
from suites import SUITES, build_machine
from utilities import (
    apply_setup,
    format_groups,
    is_setup_line,
    parse_setup,
    preprocess_message,
    read_config,
)

# ──────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ──────────────────────────────────────────────────────────────────


debug = Debug()
debug.toggle_global(False)


@dataclass(slots=True)
class Config:
    """Runtime switches for the command-line driver."""

    block: int = 5                          # display group size
    debug: tuple[str, ...] = ()             # Debug components to trace
    log_file: Path | None = None            # extra log destination


# ──────────────────────────────────────────────────────────────────
#  1. Message processing
# ──────────────────────────────────────────────────────────────────


def process(machine: Machine, lines: Iterable[str], cfg: Config | None = None) -> List[str]:
    """Run every message section of LINES through MACHINE.

    Each section starts with a ``*`` setting line; each following line is
    one message. A blank line between two messages yields an empty output
    line; blank lines running up to the next setting line or the end of
    input are dropped. Returns the output lines, sections separated by an
    empty line.
    """
    cfg = cfg or Config()
    out: List[str] = []
    configured = False
    blanks = 0

    for raw in lines:
        line = raw.rstrip("\n")
        if is_setup_line(line):
            if configured:
                out.append("")
            apply_setup(machine, parse_setup(line, machine.num_rotors()))
            configured = True
            blanks = 0
            continue

        msg = preprocess_message(line)
        if not msg:
            if configured:
                blanks += 1
            continue
        if not configured:
            raise ConfigurationError("Input must begin with a '*' setting line")

        # blank lines held back until a message follows them
        out.extend(format_groups("", cfg.block) for _ in range(blanks))
        blanks = 0
        out.append(format_groups(machine.convert(msg), cfg.block))

    if not configured:
        raise ConfigurationError("Input must begin with a '*' setting line")
    return out


def load_machine(config_path: Path | None, suite: str) -> Machine:
    if config_path is None:
        return build_machine(suite)
    return read_config(config_path.read_text(encoding="utf-8"))


# ──────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ──────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a rotor machine")
    p.add_argument("config", nargs="?", type=Path,
                   help="Machine configuration file. If omitted, the built-in suite is used.")
    p.add_argument("input", nargs="?", type=Path,
                   help="File holding setting lines and messages (default: stdin)")
    p.add_argument("output", nargs="?", type=Path,
                   help="Where converted messages go (default: stdout)")
    p.add_argument("--suite", choices=sorted(SUITES), default="legacy",
                   help="Built-in wheel set used when no configuration file is given")
    p.add_argument("--block", type=int, default=5, help="Output group size (default 5)")
    p.add_argument("--debug", action="append", choices=list(Debug.components), default=[],
                   metavar="COMPONENT",
                   help=f"Trace a component; repeatable. One of: {', '.join(Debug.components)}")
    p.add_argument("--log-file", type=Path, help="Also write traces to this file")
    args = p.parse_args(argv)
    if args.block < 1:
        p.error("--block must be a positive integer")
    return args


def _open_output(path: Path | None) -> TextIO:
    return path.open("w", encoding="utf-8") if path else sys.stdout


# ──────────────────────────────────────────────────────────────────
#  3. Main entry point
# ──────────────────────────────────────────────────────────────────


def run(args: argparse.Namespace) -> None:
    cfg = Config(block=args.block, debug=tuple(args.debug), log_file=args.log_file)

    if cfg.debug:
        if cfg.log_file:
            Debug.configure(log_to=str(cfg.log_file))
        debug.toggle_global(True)
        debug.enable(*cfg.debug)

    machine = load_machine(args.config, args.suite)

    if args.input:
        lines = args.input.read_text(encoding="utf-8").splitlines()
    else:
        lines = sys.stdin.read().splitlines()

    result = process(machine, lines, cfg)

    out = _open_output(args.output)
    try:
        for line in result:
            print(line, file=out)
    finally:
        if out is not sys.stdout:
            out.close()


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        run(args)
    except (EnigmaError, OSError) as e:
        sys.exit(f"Error: {e}")


if __name__ == "__main__":
    main()
