"""flexver - best-effort parsing of dotted version strings.

Parses ``major.minor[.build[.revision]]`` strings, recovering a usable version
from malformed input and reporting exactly what had to be discarded.
"""

from ._version import __version__
from .config import ParserSettings, load_settings
from .exceptions import ConfigError, FlexverError, InvalidVersionError
from .parser import ParseOutcome, StatusCode, VersionParser, parse_flexible
from .types import BigIntegerOrFloat, Leftovers, VersionInput
from .update_check import UpdateCheck, check_update
from .version import ABSENT, Version, parse_strict

__all__ = [
    "ABSENT",
    "BigIntegerOrFloat",
    "ConfigError",
    "FlexverError",
    "InvalidVersionError",
    "Leftovers",
    "ParseOutcome",
    "ParserSettings",
    "StatusCode",
    "UpdateCheck",
    "Version",
    "VersionInput",
    "VersionParser",
    "__version__",
    "check_update",
    "load_settings",
    "parse_flexible",
    "parse_strict",
]
