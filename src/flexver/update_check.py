"""Compare an installed version with one reported by a package registry."""

from dataclasses import dataclass
from typing import Self

from .parser import ParseOutcome, parse_flexible
from .types import VersionInput
from .version import Version


@dataclass(frozen=True)
class UpdateCheck:
    """Result of comparing an installed version against an available one.

    Attributes:
        installed: The installed version.
        available: Outcome of parsing the registry's raw version string.
    """

    installed: Version
    available: ParseOutcome

    @property
    def comparable(self: Self) -> bool:
        """Whether the available version could be parsed into a usable value."""
        return self.available.is_usable and self.available.version is not None

    @property
    def update_available(self: Self) -> bool | None:
        """Whether the available version is newer than the installed one.

        Returns:
            None if the available version string was unparseable.
        """
        if not self.comparable or self.available.version is None:
            return None
        return self.available.version > self.installed


def check_update(
    installed: VersionInput, available_raw: str, *, has_bignum: bool = True
) -> UpdateCheck:
    """Check whether a registry version is newer than the installed version.

    The registry string is parsed flexibly so that malformed but recoverable
    versions still compare. Inspect ``UpdateCheck.available`` to see whether
    anything was discarded.

    Args:
        installed: Installed version, or a well-formed version string.
        available_raw: Raw version string returned by the registry.
        has_bignum: Whether arbitrary-precision integers are available.

    Returns:
        The UpdateCheck.

    Raises:
        InvalidVersionError: If ``installed`` is a malformed string.

    Example:
        >>> check_update("1.2.0", "1.3.0").update_available
        True
    """
    installed_ver = (
        Version.parse(installed) if isinstance(installed, str) else installed
    )
    return UpdateCheck(installed_ver, parse_flexible(available_raw, has_bignum))
