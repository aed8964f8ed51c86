"""Parse daemon configuration text into a Document.

The format is INI-like: ``[section]`` headers followed by ``key value``
option lines. ``#`` starts a comment line, blank lines are ignored, and a
value is everything after the first space of its line.

Example:
    >>> from ptp_conf.parser import parse
    >>> doc = parse("[ens1f0]\\nslaveOnly 1", profile_name="oc-profile")
    >>> [section.header for section in doc.sections]
    ['[ens1f0]', '[global]']
"""

import logging
from typing import Dict, List, Optional, Tuple

from .domain.conf import GLOBAL_SECTION, ClockRole, Document, Section
from .exceptions import MalformedSectionError, OptionOutsideSectionError

__all__ = ["parse", "SLAVE_PORT_OPTIONS"]

logger = logging.getLogger(__name__)

# Option key/value pairs that mark a port as slave-facing
SLAVE_PORT_OPTIONS = {
    ("masterOnly", "0"),
    ("serverOnly", "0"),
    ("slaveOnly", "1"),
    ("clientOnly", "1"),
}


def parse(text: Optional[str], profile_name: str = "") -> Document:
    """Parse configuration text.

    Args:
        text: Raw configuration text, may be None or empty
        profile_name: Profile the configuration belongs to (used in render headers)

    Returns:
        Document with exactly one [global] section and its derived clock role

    Raises:
        MalformedSectionError: Header line without closing ']'
        OptionOutsideSectionError: Option line before the first header
    """
    sections: List[Section] = []
    has_slave_port = False

    header: Optional[str] = None
    options: Dict[str, str] = {}

    for line_number, raw_line in enumerate((text or "").split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        if line.startswith("["):
            if header is not None:
                _append_section(sections, header, options)
            header = _parse_header(line, line_number)
            options = {}
            continue

        if header is None:
            raise OptionOutsideSectionError(f"Config option not in section: {line}", line=line, line_number=line_number)

        option = _split_option(line)
        if option is None:
            logger.debug(f"Ignoring option without value at line {line_number}: {line}")
            continue

        key, value = option
        options[key] = value
        if (key, value.strip()) in SLAVE_PORT_OPTIONS:
            has_slave_port = True

    if header is not None:
        _append_section(sections, header, options)

    if not any(section.is_global for section in sections):
        sections.append(Section.from_header(GLOBAL_SECTION))

    clock_role = ClockRole.classify(has_slave_port, len(sections))
    logger.debug(f"Parsed {len(sections)} section(s) for profile '{profile_name}', clock role {clock_role.value}")

    return Document(sections=tuple(sections), clock_role=clock_role, profile_name=profile_name)


# Private helpers


def _parse_header(line: str, line_number: int) -> str:
    """Return the header up to and including the first ']'."""
    end = line.find("]")
    if end < 0:
        raise MalformedSectionError(f"Section missing closing ']': {line}", line=line, line_number=line_number)
    return line[: end + 1]


def _split_option(line: str) -> Optional[Tuple[str, str]]:
    split = line.find(" ")
    if split <= 0:
        return None
    return line[:split], line[split + 1 :]


def _append_section(sections: List[Section], header: str, options: Dict[str, str]) -> None:
    """Close the open section, folding a repeated [global] into the first one."""
    if header == GLOBAL_SECTION:
        for index, section in enumerate(sections):
            if section.is_global:
                logger.warning("Duplicate [global] section, merging its options into the first one")
                sections[index] = Section.from_header(GLOBAL_SECTION, {**section.options, **options})
                return
    sections.append(Section.from_header(header, options))
