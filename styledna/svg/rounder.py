"""Arc-safe coordinate rounding over the parsed token stream.

Rounding never touches raw text: numbers are rewritten on PathCommands, and
Flag arguments pass through untouched, so ``a6 6 0 01-6 6`` cannot turn into
``a6 6 0 0.0 1.0-6 6`` and have its flags misread later.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext

from styledna.models.path import CommandKind, Flag, Number, PathCommand
from styledna.svg.path_grammar import ParseMode, parse_path_data

logger = logging.getLogger(__name__)

# Past 2**53 every float is already integral
_ROUNDING_LIMIT = 2.0**53
# Integer digits of anything under _ROUNDING_LIMIT, plus a carry digit
_INTEGER_DIGITS = 17


def round_value(value: float, decimals: int) -> float:
    """Round half away from zero on the shortest decimal repr (2.675 → 2.68)."""
    if not math.isfinite(value) or abs(value) >= _ROUNDING_LIMIT:
        return value
    exact = Decimal(repr(value))
    if -exact.as_tuple().exponent <= decimals:
        return value
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _INTEGER_DIGITS + decimals)
        quantum = Decimal(1).scaleb(-decimals)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Compact decimal text: no exponent, no trailing ``.0``, no ``-0``."""
    if value == 0:
        return "0"
    if not math.isfinite(value):
        raise ValueError(f"cannot serialize non-finite coordinate {value!r}")
    return format(Decimal(repr(value)).normalize(), "f")


def round_precision(commands: Sequence[PathCommand], decimals: int) -> list[PathCommand]:
    """Return new commands with every Number rounded to ``decimals`` places."""
    _check_decimals(decimals)
    rounded: list[PathCommand] = []
    for cmd in commands:
        args = tuple(
            arg if isinstance(arg, Flag) else Number(round_value(arg.value, decimals))
            for arg in cmd.args
        )
        rounded.append(PathCommand(cmd.kind, cmd.is_relative, args))
    return rounded


def serialize_path_data(commands: Iterable[PathCommand]) -> str:
    """Render commands back to ``d`` text.

    A letter is omitted when it repeats the previous command's letter (except
    M and Z). The separator before a negative number is dropped; flags are
    always space-separated.
    """
    out: list[str] = []
    prev_letter: str | None = None
    last_was_flag = False

    for cmd in commands:
        letter = cmd.letter
        after_letter = letter != prev_letter or cmd.kind in (CommandKind.MOVE_TO, CommandKind.CLOSE_PATH)
        if after_letter:
            out.append(letter)

        for arg in cmd.args:
            is_flag = isinstance(arg, Flag)
            token = str(arg) if is_flag else format_number(arg.value)
            if not after_letter and (is_flag or last_was_flag or not token.startswith("-")):
                out.append(" ")
            out.append(token)
            after_letter = False
            last_was_flag = is_flag

        prev_letter = letter

    return "".join(out)


def round_path_data(d: str, decimals: int, mode: ParseMode | str = ParseMode.LENIENT) -> str:
    """Parse, round and re-serialize one ``d`` attribute value."""
    _check_decimals(decimals)
    commands = parse_path_data(d, mode)
    result = serialize_path_data(round_precision(commands, decimals))
    logger.debug("Rounded path data to %d decimals: %d → %d chars", decimals, len(d or ""), len(result))
    return result


def _check_decimals(decimals: int) -> None:
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise ValueError(f"decimals must be a non-negative integer, got {decimals!r}")
