"""Type aliases needed in the package."""

from typing import Any, Literal, TypeAlias

from .version import Version

Leftovers: TypeAlias = tuple[str, str, str, str, str]
BigIntegerOrFloat: TypeAlias = int | float
VersionInput: TypeAlias = str | Version
LogLevel: TypeAlias = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
OutcomeDict: TypeAlias = dict[str, Any]
