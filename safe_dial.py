"""
Safe Dial – count how many times a rotating dial lands on zero.

The puzzle input is a list of rotations such as ``L68`` or ``R14``. The dial
starts at 50, wraps around 0..99, and the password is the number of
rotations after which it rests on 0.

Run:
    python safe_dial.py -instructions cmd/first/instructions.txt
"""

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_INSTRUCTIONS_PATH = os.environ.get("SAFE_DIAL_INSTRUCTIONS", "cmd/first/instructions.txt")
LOG_LEVEL = os.environ.get("SAFE_DIAL_LOG_LEVEL", "INFO")

MAX_FILE_SIZE_ALLOWED = 1_000_000  # bytes
DEFAULT_START = 50
MIN_DIAL = 0
MAX_DIAL = 99
DIAL_SIZE = MAX_DIAL - MIN_DIAL + 1
TARGET_DIAL = 0


class DialError(Exception):
    """Base error for anything that stops the password from being computed."""


class InstructionParseError(DialError):
    """A single line could not be turned into a DialInstruction."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"invalid instruction {line!r}: {reason}")
        self.line = line
        self.reason = reason


class EmptyInstructionsError(DialError):
    def __init__(self) -> None:
        super().__init__("no instructions to simulate")


class Rotation(Enum):
    LEFT = "L"
    RIGHT = "R"

    def sign(self, amount: int) -> int:
        """Left turns count down the dial, right turns count up."""
        if self is Rotation.LEFT:
            return -amount
        return amount


@dataclass(frozen=True)
class DialInstruction:
    rotation: Rotation
    amount: int

    @property
    def delta(self) -> int:
        return self.rotation.sign(self.amount)

    def __str__(self) -> str:
        return f"{self.rotation.value}{self.amount}"


@dataclass(frozen=True)
class SimulationResult:
    final_position: int
    count: int
    steps: int


# -------------------------------------------------------------
# Reading
# -------------------------------------------------------------

def read_instructions_file(path) -> str:
    """
    Read the raw puzzle input from disk.

    Args:
        path (str | Path): Location of the instructions file.

    Returns:
        str: The file contents.

    Raises:
        DialError: If the path is empty, the file cannot be read,
                   or the file is empty or too large.
    """
    if not path:
        raise DialError("file path is empty")

    file_path = Path(path)
    try:
        size = file_path.stat().st_size
        if size == 0:
            raise DialError(f"{file_path.name} is empty")
        if size > MAX_FILE_SIZE_ALLOWED:
            raise DialError(f"{file_path.name} is too large")
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DialError(f"error reading {file_path}: {exc}") from exc


# -------------------------------------------------------------
# Parsing
# -------------------------------------------------------------

def parse_line(line: str) -> DialInstruction:
    """
    Parse one rotation such as ``L68``.

    Args:
        line (str): A single instruction; surrounding whitespace is ignored.

    Returns:
        DialInstruction: The parsed rotation.

    Raises:
        InstructionParseError: If the direction or the amount is invalid.
    """
    text = line.strip()
    if not text:
        raise InstructionParseError(line, "line is empty")

    direction, amount_text = text[0], text[1:]
    try:
        rotation = Rotation(direction)
    except ValueError:
        raise InstructionParseError(line, f"unknown direction {direction!r}") from None

    # ASCII digits only: signs and non-Latin digits are both malformed
    if not (amount_text.isascii() and amount_text.isdigit()):
        raise InstructionParseError(line, "amount must be a non-negative integer")

    try:
        amount = int(amount_text)
    except ValueError:
        # int() refuses strings past sys.get_int_max_str_digits()
        raise InstructionParseError(line, "amount is too long") from None

    return DialInstruction(rotation, amount)


def parse_instructions(text: str) -> List[DialInstruction]:
    """Parse every non-blank line, logging and skipping the malformed ones."""
    instructions = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        try:
            instructions.append(parse_line(line))
        except InstructionParseError as exc:
            logger.warning("skipping line %d: %s", lineno, exc)
    return instructions


# -------------------------------------------------------------
# Simulation
# -------------------------------------------------------------

def rotate(position: int, instruction: DialInstruction) -> int:
    # % with a positive modulus is always non-negative in Python
    return (position + instruction.delta) % DIAL_SIZE


class Dial:
    """
    The safe's dial.

    Attributes:
        position (int): Current value, always within MIN_DIAL..MAX_DIAL.
        count (int): How many rotations have ended on TARGET_DIAL.
    """

    def __init__(self, start: int = DEFAULT_START) -> None:
        if not MIN_DIAL <= start <= MAX_DIAL:
            raise DialError(f"start position {start} is outside {MIN_DIAL}..{MAX_DIAL}")
        self.position = start
        self.count = 0

    def apply(self, instruction: DialInstruction) -> int:
        """Rotate the dial and return its new position."""
        self.position = rotate(self.position, instruction)
        if self.position == TARGET_DIAL:
            self.count += 1
        logger.debug("after %s: position = %d, count = %d", instruction, self.position, self.count)
        return self.position


def simulate(instructions: Iterable[DialInstruction], start: int = DEFAULT_START) -> SimulationResult:
    """
    Run every instruction through a fresh dial.

    Args:
        instructions: Rotations to apply, in order.
        start (int): Initial dial position.

    Returns:
        SimulationResult: Final position, password count and number of steps.

    Raises:
        EmptyInstructionsError: If there is nothing to apply.
    """
    instructions = list(instructions)
    if not instructions:
        raise EmptyInstructionsError()

    dial = Dial(start)
    for instruction in instructions:
        dial.apply(instruction)
    return SimulationResult(final_position=dial.position, count=dial.count, steps=len(instructions))


def count_password(instructions: Iterable[DialInstruction], start: int = DEFAULT_START) -> int:
    return simulate(instructions, start).count


# -------------------------------------------------------------
# Command line
# -------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Count how many times the safe dial lands on 0.")
    parser.add_argument(
        "-instructions",
        "--instructions",
        dest="instructions",
        default=DEFAULT_INSTRUCTIONS_PATH,
        help=f"path to the instructions file (default: {DEFAULT_INSTRUCTIONS_PATH})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log every rotation")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.getLevelName(LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = None
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else (logging.INFO if level is None else level),
        format="%(levelname)s %(name)s - %(message)s",
    )
    if level is None:
        logger.warning("unknown log level %r, using INFO", LOG_LEVEL)

    try:
        text = read_instructions_file(args.instructions)
        instructions = parse_instructions(text)
        result = simulate(instructions)
    except DialError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.info("applied %d rotations, dial rests at %d", result.steps, result.final_position)
    print(f"Password appears {result.count} times")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
