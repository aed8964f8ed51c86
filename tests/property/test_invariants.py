"""Property tests for parse/render invariants.

Validates invariants that must hold across all valid inputs:
- render(parse(text)) reproduces the same sections and option pairs
- exactly one [global] section after parsing
- extraction order equals source order of devices and ports
"""

from pathlib import Path
import random

import pytest

from ptp_conf.parser import parse
from ptp_conf.render import render, render_synce
from ptp_conf.synce import extract_relations

pytestmark = pytest.mark.property

CONFIGS_ROOT = Path(__file__).parent.parent / "fixtures" / "configs"


def random_config(seed: int) -> str:
    """Build a random valid configuration with plain and device sections."""
    rng = random.Random(seed)
    lines = []
    for index in range(rng.randint(0, 6)):
        shape = rng.choice(["plain", "plain", "device", "global"])
        if shape == "device":
            lines.append(f"[<dev{index}>]")
        elif shape == "global":
            lines.append("[global]")
        else:
            lines.append(f"[eth{index}]")
        for key_index in range(rng.randint(0, 4)):
            value = rng.choice(["1", "0", "-3", "0x1f", "a  b", "/dev/ptp0"])
            lines.append(f"opt{key_index} {value}")
        if rng.random() < 0.3:
            lines.append("# comment")
    return "\n".join(lines)


CORPUS = [path.read_text(encoding="utf-8") for path in sorted(CONFIGS_ROOT.glob("*.conf"))] + [""] + [random_config(seed) for seed in range(40)]


def section_pairs(text: str):
    doc = parse(text)
    return [(s.header, set(s.options.items())) for s in doc.sections]


class TestRoundTrip:
    """Property tests for render/parse round trips."""

    @pytest.mark.parametrize("text", CORPUS)
    def test_Should_ReproduceSectionsAndOptions_When_RenderedAndReparsed(self, text):
        rendered, _ = render(parse(text))

        assert section_pairs(rendered) == section_pairs(text)

    @pytest.mark.parametrize("text", CORPUS)
    def test_Should_BeIdempotent_When_RenderedTwice(self, text):
        once, _ = render(parse(text))
        twice, _ = render(parse(once))

        assert once == twice


class TestGlobalInvariant:
    @pytest.mark.parametrize("text", CORPUS)
    def test_Should_HaveExactlyOneGlobal_When_Parsed(self, text):
        doc = parse(text)

        assert sum(1 for s in doc.sections if s.is_global) == 1


class TestExtractionOrder:
    @pytest.mark.parametrize("text", CORPUS)
    def test_Should_FollowSourceOrder_When_Extracting(self, text):
        doc = parse(text)
        relations = extract_relations(doc)

        expected = [s.name for s in doc.sections if s.is_device and s.name]
        assert [d.name for d in relations] == expected

        ports = [port for device in relations for port in device.ifaces]
        first_device = next((i for i, s in enumerate(doc.sections) if s.is_device), len(doc.sections))
        expected_ports = [s.name for s in doc.sections[first_device:] if s.kind.value == "plain" and not s.is_global]
        assert ports == expected_ports

    @pytest.mark.parametrize("text", CORPUS)
    def test_Should_AlignDeviceSections_When_RenderingSynce(self, text):
        """Every device section pairs with exactly one extracted device."""
        doc = parse(text)

        rendered, relations = render_synce(doc, {})

        assert len(relations) == len(doc.device_sections)
        assert rendered.count("[<") == len(doc.device_sections)
