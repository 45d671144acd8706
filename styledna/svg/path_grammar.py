"""Path-data grammar — tokenizes an SVG ``d`` attribute into PathCommands.

Each command letter owns the raw text up to the next letter. Non-arc runs are
scanned as a flat number stream and split into fixed-arity groups; arc runs go
through a 7-slot scanner whose flag slots consume exactly one ``0``/``1``
character, so compact forms like ``a22 22 0 012-3.9`` decode as
rx=22 ry=22 rot=0 large=0 sweep=1 x=2 y=-3.9.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Iterator

from styledna.errors import PathParseError
from styledna.models.path import ARC_FLAG_SLOTS, Argument, CommandKind, Flag, Number, PathCommand

logger = logging.getLogger(__name__)

COMMAND_LETTERS = frozenset("MmLlHhVvCcSsQqTtAaZz")
_SEPARATORS = frozenset(" \t\r\n\f,")
_DIGITS = frozenset("0123456789")
_KIND_BY_LETTER = {kind.value: kind for kind in CommandKind}


class ParseMode(str, enum.Enum):
    """LENIENT skips malformed tokens; STRICT raises on the first one."""

    LENIENT = "lenient"
    STRICT = "strict"


def parse_path_data(d: str, mode: ParseMode | str = ParseMode.LENIENT) -> list[PathCommand]:
    """Parse one ``d`` attribute value into a flat list of PathCommands.

    A letter followed by several argument groups (``L1 2 3 4``) yields one
    command per group, all sharing the letter; extra pairs after ``M``/``m``
    become LineTo commands.
    """
    mode = ParseMode(mode)
    commands: list[PathCommand] = []

    for letter, offset, raw in _split_commands(d or "", mode):
        kind = _KIND_BY_LETTER[letter.upper()]
        is_relative = letter.islower()

        if kind is CommandKind.CLOSE_PATH:
            stray = _first_non_separator(raw)
            if stray >= 0:
                _malformed(mode, "ClosePath takes no arguments", offset + stray, letter)
            commands.append(PathCommand(kind, is_relative))
            continue

        scanner = _ArgumentScanner(raw, offset, letter, mode)
        groups = scanner.arc_groups() if kind is CommandKind.ARC else scanner.number_groups(kind.arity)
        if not groups:
            _malformed(mode, "command has no complete argument group", offset - 1, letter)
        for i, group in enumerate(groups):
            # Pairs after the first under M/m are implicit linetos
            group_kind = CommandKind.LINE_TO if kind is CommandKind.MOVE_TO and i > 0 else kind
            commands.append(PathCommand(group_kind, is_relative, group))

    return commands


def count_commands(d: str) -> int:
    """Count command letters in raw path data (repetitions under one letter count once)."""
    return sum(1 for ch in d or "" if ch in COMMAND_LETTERS)


def has_curves(commands: Iterable[PathCommand]) -> bool:
    return any(cmd.kind.is_curve for cmd in commands)


def has_lines(commands: Iterable[PathCommand]) -> bool:
    return any(cmd.kind.is_line for cmd in commands)


def arc_flags(commands: Iterable[PathCommand]) -> list[tuple[bool, bool]]:
    """(large_arc, sweep) for every arc command, in order."""
    return [cmd.flags for cmd in commands if cmd.kind is CommandKind.ARC]


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------


def _split_commands(d: str, mode: ParseMode) -> Iterator[tuple[str, int, str]]:
    """Yield (letter, offset of raw text, raw argument text) per command letter."""
    letter: str | None = None
    start = 0
    for i, ch in enumerate(d):
        if ch not in COMMAND_LETTERS:
            continue
        if letter is not None:
            yield letter, start, d[start:i]
        else:
            stray = _first_non_separator(d[:i])
            if stray >= 0:
                _malformed(mode, "data before first command", stray, None)
        letter = ch
        start = i + 1

    if letter is not None:
        yield letter, start, d[start:]
    else:
        stray = _first_non_separator(d)
        if stray >= 0:
            _malformed(mode, "path data has no command letters", stray, None)


def _first_non_separator(text: str) -> int:
    for i, ch in enumerate(text):
        if ch not in _SEPARATORS:
            return i
    return -1


def scan_number(text: str, pos: int) -> tuple[float, int] | None:
    """Scan one number starting at ``pos``; return (value, end) or None.

    A sign or a second decimal point ends the number, so ``10-6`` and
    ``1.5.3`` each scan as two numbers.
    """
    n = len(text)
    i = pos
    if i < n and text[i] in "+-":
        i += 1
    digits = 0
    while i < n and text[i] in _DIGITS:
        i += 1
        digits += 1
    if i < n and text[i] == ".":
        i += 1
        while i < n and text[i] in _DIGITS:
            i += 1
            digits += 1
    if digits == 0:
        return None
    if i < n and text[i] in "eE":
        j = i + 1
        if j < n and text[j] in "+-":
            j += 1
        if j < n and text[j] in _DIGITS:
            while j < n and text[j] in _DIGITS:
                j += 1
            i = j
    return float(text[pos:i]), i


class _ArgumentScanner:
    """Walks the raw argument text of one command letter."""

    def __init__(self, text: str, offset: int, letter: str, mode: ParseMode) -> None:
        self.text = text
        self.offset = offset
        self.letter = letter
        self.mode = mode
        self.pos = 0

    def _skip_separators(self) -> bool:
        while self.pos < len(self.text) and self.text[self.pos] in _SEPARATORS:
            self.pos += 1
        return self.pos < len(self.text)

    def _bad(self, message: str) -> None:
        _malformed(self.mode, message, self.offset + self.pos, self.letter)
        self.pos += 1

    def number_groups(self, arity: int) -> list[tuple[Argument, ...]]:
        values: list[Argument] = []
        while self._skip_separators():
            scanned = scan_number(self.text, self.pos)
            if scanned is None:
                self._bad(f"invalid number near {self.text[self.pos:self.pos + 8]!r}")
                continue
            value, self.pos = scanned
            values.append(Number(value))

        complete = len(values) - len(values) % arity
        if complete < len(values):
            _malformed(
                self.mode,
                f"incomplete argument group ({len(values) % arity} of {arity})",
                self.offset + self.pos,
                self.letter,
            )
        return [tuple(values[i:i + arity]) for i in range(0, complete, arity)]

    def arc_groups(self) -> list[tuple[Argument, ...]]:
        groups: list[tuple[Argument, ...]] = []
        current: list[Argument] = []
        while self._skip_separators():
            if len(current) in ARC_FLAG_SLOTS:
                ch = self.text[self.pos]
                if ch not in "01":
                    self._bad(f"arc flag must be 0 or 1, got {ch!r}")
                    continue
                current.append(Flag(ch == "1"))
                self.pos += 1
            else:
                scanned = scan_number(self.text, self.pos)
                if scanned is None:
                    self._bad(f"invalid number near {self.text[self.pos:self.pos + 8]!r}")
                    continue
                value, self.pos = scanned
                current.append(Number(value))

            if len(current) == CommandKind.ARC.arity:
                groups.append(tuple(current))
                current = []

        if current:
            _malformed(
                self.mode,
                f"incomplete arc group ({len(current)} of 7)",
                self.offset + self.pos,
                self.letter,
            )
        return groups


def _malformed(mode: ParseMode, message: str, position: int, command: str | None) -> None:
    if mode is ParseMode.STRICT:
        where = f" in {command!r}" if command else ""
        raise PathParseError(f"{message}{where} at offset {position}", position=position, command=command)
    logger.debug("Skipping malformed path data at %d (%s): %s", position, command, message)
