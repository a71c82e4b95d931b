"""Models a dotted ``major.minor[.build[.revision]]`` version."""

import re
from dataclasses import dataclass
from typing import Self

from ._converters import INT32_MAX, try_to_int32
from .exceptions import InvalidVersionError

ABSENT = -1
"""Sentinel for an omitted build or revision component."""

_STRICT_FORMAT = re.compile(r"[0-9]+(?:\.[0-9]+){1,3}")


@dataclass(frozen=True, order=True)
class Version:
    """Four-part version representation.

    Ordering is lexicographic over ``(major, minor, build, revision)``. Absent
    components are stored as ``-1`` and therefore sort below any present value,
    so ``1.2 < 1.2.0 < 1.2.0.0``.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        build: Build number, or -1 when absent.
        revision: Revision number, or -1 when absent.
    """

    major: int
    minor: int
    build: int = ABSENT
    revision: int = ABSENT

    def __post_init__(self: Self) -> None:
        """Validate component ranges.

        Raises:
            InvalidVersionError: If a component is out of range, or a revision
                is given without a build.
        """
        for name in ("major", "minor"):
            value = getattr(self, name)
            if not 0 <= value <= INT32_MAX:
                raise InvalidVersionError(self.components, f"{name} out of range")
        for name in ("build", "revision"):
            value = getattr(self, name)
            if not ABSENT <= value <= INT32_MAX:
                raise InvalidVersionError(self.components, f"{name} out of range")
        if self.build == ABSENT and self.revision != ABSENT:
            raise InvalidVersionError(self.components, "revision without build")

    @classmethod
    def parse(cls, version_str: str) -> Self:
        """Parse a well-formed version string.

        Args:
            version_str: Version string in format "N.N[.N[.N]]".

        Returns:
            Parsed Version instance.

        Raises:
            InvalidVersionError: If the version string format is invalid.
        """
        version = parse_strict(version_str)
        if version is None:
            raise InvalidVersionError(version_str)
        return cls(*version.components)

    @property
    def components(self: Self) -> tuple[int, int, int, int]:
        """All four components, absent ones as -1."""
        return (self.major, self.minor, self.build, self.revision)

    @property
    def field_count(self: Self) -> int:
        """Number of present components (2 to 4)."""
        return 2 + sum(1 for part in (self.build, self.revision) if part != ABSENT)

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Version string with absent components omitted.
        """
        return ".".join(str(part) for part in self.components[: self.field_count])

    def __repr__(self: Self) -> str:
        """Return detailed string representation.

        Returns:
            Detailed version representation.
        """
        return f"Version({self.major}, {self.minor}, {self.build}, {self.revision})"


def parse_strict(version_str: str) -> Version | None:
    """Parse ``N.N[.N[.N]]`` all-or-nothing.

    Every component must be a run of ASCII digits that fits a signed 32-bit
    integer. No whitespace, signs or other characters are tolerated anywhere.

    Args:
        version_str: Candidate version string.

    Returns:
        The parsed Version, or None on any failure. Never raises.
    """
    if not isinstance(version_str, str) or not _STRICT_FORMAT.fullmatch(version_str):
        return None

    parts: list[int] = []
    for raw in version_str.split("."):
        value = try_to_int32(raw)
        if value is None:
            return None
        parts.append(value)

    return Version(*parts)
