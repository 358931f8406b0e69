from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, Inexact, InvalidOperation, ROUND_HALF_UP, Rounded, localcontext
from enum import Enum
from typing import Iterable, List, Optional, Tuple


DEFAULT_FORMATS = "100,50,20,10"
MAX_FORMATS = 40
# hard ceiling on one withdrawal, applied even when max_notes is unset
MAX_DISPENSE = 1_000_000
NOTE_QUANT = Decimal("0.01")


class FailureKind(str, Enum):
    INVALID_ARGUMENT = "InvalidArgument"
    NOTE_UNAVAILABLE = "NoteUnavailable"


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str


@dataclass(frozen=True)
class NoteFormats:
    """Denominations in descending order, fixed for the life of a machine."""

    values: Tuple[Decimal, ...]
    max_notes: Optional[int] = None

    @classmethod
    def of(cls, formats: Iterable[object], *, max_notes: Optional[int] = None) -> NoteFormats:
        ordered = sorted((_to_decimal(value) for value in formats), reverse=True)
        return cls(values=tuple(ordered), max_notes=max_notes)


Result = Tuple[Optional[List[str]], Optional[Failure]]


def _invalid(message: str) -> Failure:
    return Failure(FailureKind.INVALID_ARGUMENT, message)


def _unavailable(message: str) -> Failure:
    return Failure(FailureKind.NOTE_UNAVAILABLE, message)


def _to_decimal(value: object) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return Decimal("NaN")
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return Decimal("NaN")


def _format_note(value: Decimal) -> str:
    return str(value.quantize(NOTE_QUANT, rounding=ROUND_HALF_UP))


def parse_formats(raw: object) -> Tuple[List[Decimal] | None, str | None]:
    text = DEFAULT_FORMATS if raw is None or not str(raw).strip() else str(raw)
    tokens = [token for token in re.split(r"[,;\s]+", text) if token.strip()]
    if not tokens:
        return None, "Note formats are required."
    if len(tokens) > MAX_FORMATS:
        return None, f"Too many note formats (limit {MAX_FORMATS})."

    formats: List[Decimal] = []
    for token in tokens:
        value = _to_decimal(token)
        if not value.is_finite():
            return None, f"Note format '{token}' must be a number."
        if value <= 0:
            return None, "Note formats must be positive."
        formats.append(value)

    # duplicates are kept
    formats.sort(reverse=True)
    return formats, None


def validate_amount(value: object) -> Tuple[Decimal | None, Failure | None]:
    if value is None:
        return None, None

    amount = _to_decimal(value)
    if amount.is_nan():
        return None, _invalid("Amount must be a number.")
    if amount.is_infinite():
        return None, _invalid("Amount must be finite.")
    if amount < 0:
        return None, _invalid("Amount must be non-negative.")
    return amount, None


def decompose_amount(formats: NoteFormats, amount: Decimal | None) -> Result:
    """Greedy pass over ``formats``; assumes ``amount`` already validated."""
    if amount is None:
        return [], None

    remaining = amount
    counts: List[Tuple[Decimal, int]] = []
    try:
        with localcontext() as ctx:
            ctx.traps[Inexact] = True
            ctx.traps[Rounded] = True
            for note in formats.values:
                count = int(remaining // note)
                counts.append((note, count))
                remaining -= note * count
    except (InvalidOperation, Inexact, Rounded):
        return None, _unavailable("Amount is too large to dispense.")

    if remaining:
        return None, _unavailable(
            f"Amount {amount} cannot be dispensed with the available notes."
        )

    total = sum(count for _, count in counts)
    limit = MAX_DISPENSE
    if formats.max_notes is not None:
        limit = min(limit, formats.max_notes)
    if total > limit:
        return None, _unavailable(f"Withdrawal needs {total} notes (limit {limit}).")

    notes: List[str] = []
    for note, count in counts:
        notes.extend([_format_note(note)] * count)
    return notes, None


class CashMachine:
    def __init__(self, formats: NoteFormats) -> None:
        self._formats = formats

    def __repr__(self) -> str:
        values = ", ".join(_format_note(value) for value in self._formats.values)
        return f"CashMachine([{values}])"

    @property
    def formats(self) -> NoteFormats:
        return self._formats

    def decompose(self, amount: object) -> Result:
        """Validate ``amount`` then dispense it.

        Returns ``(notes, None)`` on success or ``(None, failure)``; a failure
        never carries a partial note list. ``None`` dispenses nothing.
        """
        value, failure = validate_amount(amount)
        if failure:
            return None, failure
        return decompose_amount(self._formats, value)


def configure(formats: Iterable[object], *, max_notes: Optional[int] = None) -> CashMachine:
    return CashMachine(NoteFormats.of(formats, max_notes=max_notes))
