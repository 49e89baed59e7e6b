# console.py
"""
Interactive menu for matrix_toolbox.

The menu keeps its state in an explicit Session (the current matrix and the
random generator) which is passed to every action. Input comes from a
Prompter, so tests can drive the menu with scripted answers.
"""
import argparse
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import numpy as np

from .errors import MatrixError
from .linalg import determinant, inverse
from .logging_config import setup_logging
from .matrix import Matrix
from .ops import add_sub, multiply, transpose
from .random_fill import random_matrix
from .textio import load_txt, save_txt

LOG = logging.getLogger(__name__)

PRINT_FORMAT = "%10.4g"

MENU = """
=== Matrix Toolbox ===
1) Create a new matrix manually
2) Create a new random matrix
3) Load a matrix from file
4) Show the current matrix
5) Save the current matrix to file
6) Add another matrix
7) Subtract another matrix
8) Multiply by another matrix
9) Transpose the current matrix
10) Determinant (square only)
11) Inverse (square and non-singular only)
12) Clear the current matrix
0) Exit"""


def format_matrix(m: Matrix) -> str:
    lines = [f"Matrix {m.rows}x{m.cols}:"]
    for row in m.iter_rows():
        lines.append("".join(PRINT_FORMAT % v + " " for v in row))
    return "\n".join(lines)


# -------------------------
# Input provider
# -------------------------
class Prompter:
    """Reads typed answers, re-prompting until the text parses."""

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None,
                 output_fn: Optional[Callable[[str], None]] = None):
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def say(self, text: str) -> None:
        self.output_fn(text)

    def ask_text(self, prompt: str) -> str:
        return self.input_fn(prompt).strip()

    def ask_int(self, prompt: str, minimum: Optional[int] = None) -> int:
        while True:
            raw = self.ask_text(prompt)
            try:
                value = int(raw)
            except ValueError:
                self.say(f"Invalid input {raw!r}, please enter an integer.")
                continue
            if minimum is not None and value < minimum:
                self.say(f"Value must be at least {minimum}.")
                continue
            return value

    def ask_float(self, prompt: str) -> float:
        while True:
            raw = self.ask_text(prompt)
            try:
                return float(raw)
            except ValueError:
                self.say(f"Invalid input {raw!r}, please enter a number.")

    def ask_size(self) -> Tuple[int, int]:
        rows = self.ask_int("Number of rows: ", minimum=0)
        cols = self.ask_int("Number of columns: ", minimum=0)
        return rows, cols


def scripted(answers: Iterable[str]) -> Callable[[str], str]:
    """input()-compatible callable fed from a list; raises EOFError when exhausted."""
    it = iter(answers)

    def _input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return _input


# -------------------------
# Session state
# -------------------------
@dataclass
class Session:
    current: Optional[Matrix] = None
    rng: np.random.Generator = field(default_factory=np.random.default_rng)


# -------------------------
# Matrix sources
# -------------------------
def read_manual(prompter: Prompter) -> Matrix:
    rows, cols = prompter.ask_size()
    m = Matrix(rows, cols)
    prompter.say(f"Enter the {rows}x{cols} matrix element by element:")
    for i in range(rows):
        for j in range(cols):
            m.set(i, j, prompter.ask_float(f"A[{i}][{j}] = "))
    return m


def read_random(prompter: Prompter, rng: np.random.Generator) -> Matrix:
    rows, cols = prompter.ask_size()
    low = prompter.ask_float("Minimum random value: ")
    high = prompter.ask_float("Maximum random value: ")
    return random_matrix(rows, cols, low, high, rng=rng)


def read_file(prompter: Prompter) -> Matrix:
    return load_txt(prompter.ask_text("File name to load: "))


def ask_operand(session: Session, prompter: Prompter) -> Optional[Matrix]:
    prompter.say("How should the second matrix be given?\n1) Enter manually\n2) Generate randomly\n3) Load from file")
    choice = prompter.ask_text("Choice: ")
    if choice == "1":
        return read_manual(prompter)
    if choice == "2":
        return read_random(prompter, session.rng)
    if choice == "3":
        return read_file(prompter)
    return None


# -------------------------
# Menu actions
# -------------------------
def _require_current(session: Session, prompter: Prompter) -> Optional[Matrix]:
    if session.current is None:
        prompter.say("No current matrix.")
    return session.current


def action_manual(session, prompter):
    session.current = read_manual(prompter)


def action_random(session, prompter):
    session.current = read_random(prompter, session.rng)


def action_load(session, prompter):
    session.current = read_file(prompter)
    prompter.say(f"Loaded a {session.current.rows}x{session.current.cols} matrix.")


def action_show(session, prompter):
    m = _require_current(session, prompter)
    if m is not None:
        prompter.say(format_matrix(m))


def action_save(session, prompter):
    m = _require_current(session, prompter)
    if m is None:
        return
    path = prompter.ask_text("File name to save: ")
    save_txt(m, path)
    prompter.say(f"Saved to '{path}'")


def _binary_action(label: str, fn: Callable[[Matrix, Matrix], Matrix]):
    def action(session, prompter):
        m = _require_current(session, prompter)
        if m is None:
            return
        other = ask_operand(session, prompter)
        if other is None:
            prompter.say("Operation cancelled.")
            return
        result = fn(m, other)
        prompter.say(f"Result ({label}):")
        prompter.say(format_matrix(result))
    return action


def action_transpose(session, prompter):
    m = _require_current(session, prompter)
    if m is None:
        return
    session.current = transpose(m)
    prompter.say(f"Transposed. The matrix is now {session.current.rows}x{session.current.cols}.")


def action_determinant(session, prompter):
    m = _require_current(session, prompter)
    if m is not None:
        prompter.say("Determinant = %.12g" % determinant(m))


def action_inverse(session, prompter):
    m = _require_current(session, prompter)
    if m is not None:
        inv = inverse(m)
        prompter.say("Inverse matrix:")
        prompter.say(format_matrix(inv))


def action_clear(session, prompter):
    if session.current is None:
        prompter.say("No current matrix.")
    else:
        session.current = None
        prompter.say("Current matrix cleared.")


ACTIONS: Dict[int, Callable[[Session, Prompter], None]] = {
    1: action_manual,
    2: action_random,
    3: action_load,
    4: action_show,
    5: action_save,
    6: _binary_action("addition", lambda a, b: add_sub(a, b, subtract=False)),
    7: _binary_action("subtraction", lambda a, b: add_sub(a, b, subtract=True)),
    8: _binary_action("multiplication", multiply),
    9: action_transpose,
    10: action_determinant,
    11: action_inverse,
    12: action_clear,
}


def run_menu(session: Session, prompter: Prompter) -> int:
    """
    Loop until the user picks 0 or input ends. Failures of a single action
    (bad shapes, singular matrix, unreadable file) are reported and the loop
    continues; the session keeps its previous current matrix.
    """
    while True:
        prompter.say(MENU)
        try:
            raw = prompter.ask_text("Choose an action: ")
        except EOFError:
            break
        try:
            choice = int(raw)
        except ValueError:
            prompter.say("Unknown menu item.")
            continue
        if choice == 0:
            break
        action = ACTIONS.get(choice)
        if action is None:
            prompter.say("Unknown menu item.")
            continue
        try:
            action(session, prompter)
        except EOFError:
            break
        except MatrixError as exc:
            LOG.warning("action %d failed: %s", choice, exc)
            prompter.say(f"Error: {exc}")
        except OSError as exc:
            LOG.warning("action %d failed: %s", choice, exc)
            prompter.say(f"File error: {exc}")
    prompter.say("Bye!")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="matrix-toolbox",
                                description="Interactive dense matrix toolbox")
    p.add_argument("--seed", type=int, default=None, help="Seed for the random matrix generator")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    p.add_argument("--log-file", default=None, help="Also write log records to this file")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    session = Session(rng=np.random.default_rng(args.seed))
    return run_menu(session, Prompter())
