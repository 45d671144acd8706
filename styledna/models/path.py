"""Parsed path-data model — one PathCommand per argument group."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class CommandKind(enum.Enum):
    MOVE_TO = "M"
    LINE_TO = "L"
    HLINE_TO = "H"
    VLINE_TO = "V"
    CURVE_CUBIC = "C"
    CURVE_SMOOTH_CUBIC = "S"
    CURVE_QUADRATIC = "Q"
    CURVE_SMOOTH_QUADRATIC = "T"
    ARC = "A"
    CLOSE_PATH = "Z"

    @property
    def arity(self) -> int:
        return ARITY[self]

    @property
    def is_curve(self) -> bool:
        return self in CURVE_KINDS

    @property
    def is_line(self) -> bool:
        return self in LINE_KINDS


ARITY: dict[CommandKind, int] = {
    CommandKind.MOVE_TO: 2,
    CommandKind.LINE_TO: 2,
    CommandKind.HLINE_TO: 1,
    CommandKind.VLINE_TO: 1,
    CommandKind.CURVE_CUBIC: 6,
    CommandKind.CURVE_SMOOTH_CUBIC: 4,
    CommandKind.CURVE_QUADRATIC: 4,
    CommandKind.CURVE_SMOOTH_QUADRATIC: 2,
    CommandKind.ARC: 7,
    CommandKind.CLOSE_PATH: 0,
}

CURVE_KINDS = frozenset(
    {
        CommandKind.CURVE_CUBIC,
        CommandKind.CURVE_SMOOTH_CUBIC,
        CommandKind.CURVE_QUADRATIC,
        CommandKind.CURVE_SMOOTH_QUADRATIC,
        CommandKind.ARC,
    }
)
LINE_KINDS = frozenset({CommandKind.LINE_TO, CommandKind.HLINE_TO, CommandKind.VLINE_TO})

# Arc group slots holding large-arc-flag and sweep-flag
ARC_FLAG_SLOTS = (3, 4)


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Flag:
    value: bool

    def __str__(self) -> str:
        return "1" if self.value else "0"


Argument = Number | Flag


@dataclass(frozen=True)
class PathCommand:
    """A single drawing command with exactly one argument group."""

    kind: CommandKind
    is_relative: bool = False
    args: tuple[Argument, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if len(self.args) != self.kind.arity:
            raise ValueError(
                f"{self.kind.name} expects {self.kind.arity} arguments, got {len(self.args)}"
            )
        if self.kind is CommandKind.ARC:
            for slot, arg in enumerate(self.args):
                expect_flag = slot in ARC_FLAG_SLOTS
                if isinstance(arg, Flag) != expect_flag:
                    raise ValueError(f"Arc slot {slot} must be a {'Flag' if expect_flag else 'Number'}")

    @property
    def letter(self) -> str:
        letter = self.kind.value
        return letter.lower() if self.is_relative else letter

    @property
    def numbers(self) -> list[float]:
        return [a.value for a in self.args if isinstance(a, Number)]

    @property
    def flags(self) -> tuple[bool, bool] | None:
        """(large_arc, sweep) for arc commands, None otherwise."""
        if self.kind is not CommandKind.ARC:
            return None
        large, sweep = (self.args[i] for i in ARC_FLAG_SLOTS)
        return (large.value, sweep.value)
