"""Best-effort parsing of malformed version strings.

``parse_flexible`` never raises on bad input. It returns the closest usable
Version it can build, a StatusCode saying how the input fell short, and the
unparsed text of every component it had to cut, so callers can log or inspect
exactly what was discarded.
"""

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Self

from ._converters import (
    INT32_MAX,
    format_number,
    leading_digits,
    try_to_bignum_or_float,
    try_to_int32,
    try_to_int64,
)
from .types import Leftovers, OutcomeDict
from .version import Version, parse_strict

logger = logging.getLogger(__name__)

MAX_COMPONENTS = 4
EXCESS_SLOT = 4
EMPTY_LEFTOVERS: Leftovers = ("", "", "", "", "")


class StatusCode(IntEnum):
    """How faithfully an input matched a well-formed version string.

    Non-negative codes mean a usable Version was produced. ``TRUNCATED_*`` codes
    1 to 4 name the component that had to be cut.
    """

    EXACT = 0
    TRUNCATED_MAJOR = 1
    TRUNCATED_MINOR = 2
    TRUNCATED_BUILD = 3
    TRUNCATED_REVISION = 4
    TRUNCATED_EXCESS = 5
    UNPARSEABLE = -1

    @classmethod
    def truncated_at(cls, index: int) -> "StatusCode":
        """Return the code for a cut at component ``index`` (0-based)."""
        return cls(index + 1)

    @property
    def is_usable(self: Self) -> bool:
        """Whether a Version produced with this code may be trusted."""
        return self >= 0


@dataclass(frozen=True)
class ParseOutcome:
    """Result of a single flexible parse.

    Attributes:
        raw: The input string, unchanged. Not compared, so inputs that differ
            only in leading zeros give equal outcomes.
        status: Quality of the match.
        version: Best-effort Version, or None when status is UNPARSEABLE.
        leftovers: Unparsed text per slot. Slots 0-3 hold the remainder of the
            major, minor, build and revision components; slot 4 holds every
            component past the fourth, joined with ".".
    """

    raw: str = field(compare=False)
    status: StatusCode
    version: Version | None = None
    leftovers: Leftovers = field(default=EMPTY_LEFTOVERS)

    @property
    def is_usable(self: Self) -> bool:
        """Whether ``version`` may be used."""
        return self.status.is_usable

    @property
    def is_exact(self: Self) -> bool:
        """Whether the input was a well-formed version string."""
        return self.status == StatusCode.EXACT

    def leftover(self: Self, slot: int) -> str:
        """Return the leftover text for a slot (0-4)."""
        return self.leftovers[slot]

    def to_dict(self: Self) -> OutcomeDict:
        """Convert the outcome to a JSON-serializable dictionary.

        Returns:
            Dictionary representation of the outcome.
        """
        return {
            "raw": self.raw,
            "status": self.status.name,
            "code": int(self.status),
            "version": str(self.version) if self.version is not None else None,
            "components": list(self.version.components) if self.version else None,
            "leftovers": list(self.leftovers),
        }


def parse_flexible(version_str: str, has_bignum: bool) -> ParseOutcome:
    """Parse a version string, recovering as much as possible.

    Recovery keeps the most significant components intact and cuts at the
    latest possible component. Components past the fourth are dropped before
    any single component is truncated.

    Args:
        version_str: Raw, possibly malformed, version string.
        has_bignum: Whether arbitrary-precision integers are available for
            measuring overflow. When False a float approximation is used.

    Returns:
        The ParseOutcome. Never raises on malformed input.

    Example:
        >>> outcome = parse_flexible("1.2.3.4abc", has_bignum=True)
        >>> outcome.status, outcome.version, outcome.leftovers[3]
        (<StatusCode.TRUNCATED_REVISION: 4>, Version(1, 2, 3, 4), 'abc')
    """
    exact = parse_strict(version_str)
    if exact is not None:
        return ParseOutcome(version_str, StatusCode.EXACT, exact)

    components = version_str.split(".")
    if len(components) < 2:  # noqa: PLR2004
        return ParseOutcome(version_str, StatusCode.UNPARSEABLE)

    excess = ".".join(components[MAX_COMPONENTS:])
    components = components[:MAX_COMPONENTS]

    truncated = parse_strict(".".join(components))
    if truncated is not None:
        return ParseOutcome(
            version_str,
            StatusCode.TRUNCATED_EXCESS,
            truncated,
            _leftovers(components, None, "", excess),
        )

    for index in range(len(components) - 1, -1, -1):
        outcome = _recover_at(version_str, components, index, excess, has_bignum)
        if outcome is not None:
            return outcome

    logger.debug("No recoverable version in %r", version_str)
    return ParseOutcome(version_str, StatusCode.UNPARSEABLE)


class VersionParser:
    """Flexible parser bound to a numeric capability.

    Attributes:
        has_bignum: Whether arbitrary-precision integers are used to measure
            overflow. Resolved once by the caller, typically from settings.
    """

    def __init__(self: Self, has_bignum: bool = True) -> None:
        """Initialize the parser.

        Args:
            has_bignum: Whether arbitrary-precision integers are available.
        """
        self.has_bignum = has_bignum

    def parse(self: Self, version_str: str) -> ParseOutcome:
        """Parse a version string. See ``parse_flexible``."""
        return parse_flexible(version_str, self.has_bignum)

    def __repr__(self: Self) -> str:
        return f"VersionParser(has_bignum={self.has_bignum})"


def _recover_at(
    raw: str,
    components: list[str],
    index: int,
    excess: str,
    has_bignum: bool,
) -> ParseOutcome | None:
    """Try to build a Version by cutting component ``index``.

    Returns:
        The outcome, or None to continue with the previous component.
    """
    prefix = components[:index]
    if index > 0 and not _prefix_is_valid(prefix):
        return None

    component = components[index]
    digits, rest = leading_digits(component)
    status = StatusCode.truncated_at(index)

    clamped = _clamp(digits, has_bignum) if digits else None
    if digits and clamped is None:
        logger.debug("Component %r of %r cannot be converted", component, raw)

    if clamped is None:
        # Nothing numeric to keep; the whole component is left over.
        if index == 0:
            return None
        version = parse_strict(_candidate(prefix))
        if version is None:
            _warn_invariant(raw, prefix, None)
            return None
        return ParseOutcome(
            raw, status, version, _leftovers(components, index, component, excess)
        )

    kept, overflow = clamped
    version = parse_strict(_candidate([*prefix, kept]))
    if version is None:
        _warn_invariant(raw, prefix, kept)
        return None

    logger.debug("Recovered %s from %r (%s)", version, raw, status.name)
    return ParseOutcome(
        raw, status, version, _leftovers(components, index, overflow + rest, excess)
    )


def _prefix_is_valid(prefix: list[str]) -> bool:
    # A lone major is not a version by itself, so it only has to be a number.
    if len(prefix) == 1:
        return try_to_int32(prefix[0]) is not None
    return parse_strict(".".join(prefix)) is not None


def _candidate(parts: list[str]) -> str:
    # Minor is required; a cut at the major or minor keeps it as 0.
    if len(parts) == 1:
        parts = [*parts, "0"]
    return ".".join(parts)


def _clamp(digits: str, has_bignum: bool) -> tuple[str, str] | None:
    """Fit a digit run into an int32 component.

    Returns:
        A ``(kept, overflow)`` pair where ``kept`` is the component text to use
        and ``overflow`` is how far the value exceeded INT32_MAX (empty when it
        fits), or None if the digits cannot be converted at all.
    """
    if try_to_int32(digits) is not None:
        return digits, ""

    wide: int | float | None = try_to_int64(digits)
    if wide is None:
        wide = try_to_bignum_or_float(digits, has_bignum)
    if wide is None:
        return None
    return str(INT32_MAX), format_number(wide - INT32_MAX)


def _leftovers(
    components: list[str], index: int | None, cut: str, excess: str
) -> Leftovers:
    slots = list(EMPTY_LEFTOVERS)
    if index is not None:
        slots[index] = cut
        for later in range(index + 1, len(components)):
            slots[later] = components[later]
    slots[EXCESS_SLOT] = excess
    return (slots[0], slots[1], slots[2], slots[3], slots[4])


def _warn_invariant(raw: str, prefix: list[str], kept: str | None) -> None:
    logger.warning(
        "Validated prefix %r with component %r failed to re-parse while "
        "recovering %r; this should not be possible",
        ".".join(prefix),
        kept,
        raw,
    )
