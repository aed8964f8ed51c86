"""Exception hierarchy for ptp-conf.

Only the two parse failures and the SyncE structural mismatch abort an
operation. Integer and boolean parse problems inside option values are
logged and recovered from where they happen, never raised.

Hierarchy:
----------
- PtpConfError
  ├── ParseError
  │   ├── MalformedSectionError
  │   └── OptionOutsideSectionError
  ├── RenderError
  │   └── StructuralMismatchError
  ├── ProfileError
  └── ConfigError
"""

__all__ = [
    "PtpConfError",
    "ParseError",
    "MalformedSectionError",
    "OptionOutsideSectionError",
    "RenderError",
    "StructuralMismatchError",
    "ProfileError",
    "ConfigError",
]


class PtpConfError(Exception):
    """Base class for all ptp-conf errors."""

    pass


class ParseError(PtpConfError):
    """Configuration text could not be turned into a Document.

    Attributes:
        line: Offending line (trimmed)
        line_number: 1-based line number in the source text
    """

    def __init__(self, message: str, line: str = "", line_number: int = 0):
        super().__init__(message)
        self.line = line
        self.line_number = line_number


class MalformedSectionError(ParseError):
    """Section header is missing its closing ']'."""

    pass


class OptionOutsideSectionError(ParseError):
    """Option line appears before any section header."""

    pass


class RenderError(PtpConfError):
    """Error while rendering a Document back to text."""

    pass


class StructuralMismatchError(RenderError):
    """Device sections and extracted SyncE devices disagree in number."""

    def __init__(self, expected: int, found: int):
        super().__init__(f"Found {found} SyncE device(s) in relations but {expected} device section(s) in document")
        self.expected = expected
        self.found = found


class ProfileError(PtpConfError):
    """Profile payload could not be decoded with either schema."""

    pass


class ConfigError(PtpConfError):
    """Settings or default configuration file could not be loaded."""

    pass
