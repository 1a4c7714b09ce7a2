"""
Tests for MCP tools.

Tests the theory and export tool implementations against the built-in
registries.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_theory.registry import ChordRegistry, ScaleRegistry
from chuk_mcp_theory.tools import register_export_tools, register_theory_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def theory_tools(chord_registry: ChordRegistry, scale_registry: ScaleRegistry) -> dict:
    """Theory tools registered on a mock server."""
    mcp = MockMCPServer("test")
    return register_theory_tools(mcp, chord_registry, scale_registry)


@pytest.fixture
def export_tools(
    chord_registry: ChordRegistry, scale_registry: ScaleRegistry, temp_dir: Path
) -> dict:
    """Export tools writing into a temporary directory."""
    mcp = MockMCPServer("test")
    return register_export_tools(mcp, chord_registry, scale_registry, temp_dir / "output")


class TestRegistration:
    """Tools register with the server."""

    def test_all_tools_registered(
        self, chord_registry: ChordRegistry, scale_registry: ScaleRegistry, temp_dir: Path
    ) -> None:
        """Every tool is registered under its function name."""
        mcp = MockMCPServer("test")
        register_theory_tools(mcp, chord_registry, scale_registry)
        register_export_tools(mcp, chord_registry, scale_registry, temp_dir)
        assert set(mcp.tools) == {
            "theory_parse_pitch",
            "theory_describe_chord",
            "theory_identify_chord",
            "theory_list_chord_classes",
            "theory_list_scales",
            "theory_describe_key",
            "theory_key_chords",
            "theory_progression",
            "theory_export_progression",
        }


class TestPitchTools:
    """Tests for pitch parsing."""

    @pytest.mark.asyncio
    async def test_parse_scientific(self, theory_tools: dict) -> None:
        """Scientific notation gives a MIDI number."""
        data = json.loads(await theory_tools["theory_parse_pitch"](text="E4"))
        assert data["status"] == "success"
        assert data["midi_number"] == 64
        assert data["octave"] == 4
        assert data["pitch_class"] == 4

    @pytest.mark.asyncio
    async def test_parse_helmholtz(self, theory_tools: dict) -> None:
        """Helmholtz notation reports its scientific equivalent."""
        data = json.loads(await theory_tools["theory_parse_pitch"](text="e'"))
        assert data["midi_number"] == 64
        assert data["scientific"] == "E4"

    @pytest.mark.asyncio
    async def test_parse_pitch_class(self, theory_tools: dict) -> None:
        """A bare letter name is a pitch class with both spellings."""
        data = json.loads(await theory_tools["theory_parse_pitch"](text="A#"))
        assert data["pitch_class"] == 10
        assert data["sharp_name"] == "A♯"
        assert data["flat_name"] == "B♭"
        assert "midi_number" not in data

    @pytest.mark.asyncio
    async def test_parse_error(self, theory_tools: dict) -> None:
        """Bad notation is reported, not raised."""
        data = json.loads(await theory_tools["theory_parse_pitch"](text="H2"))
        assert data["status"] == "error"
        assert "H2" in data["message"]


class TestChordTools:
    """Tests for chord tools."""

    @pytest.mark.asyncio
    async def test_describe_chord(self, theory_tools: dict) -> None:
        """Describe a chord by name."""
        data = json.loads(await theory_tools["theory_describe_chord"](name="E Major"))
        assert data["status"] == "success"
        assert data["chord"]["pitches"] == ["E", "G♯", "B"]
        assert data["chord"]["intervals"] == [0, 4, 7]

    @pytest.mark.asyncio
    async def test_describe_inverted_chord(self, theory_tools: dict) -> None:
        """Inversions may be given as letters or numbers."""
        by_letter = json.loads(
            await theory_tools["theory_describe_chord"](name="G 7", inversion="a")
        )
        by_number = json.loads(
            await theory_tools["theory_describe_chord"](name="G 7", inversion="1")
        )
        assert by_letter["chord"]["pitches"] == ["B", "D", "F", "G"]
        assert by_letter["chord"] == by_number["chord"]

    @pytest.mark.asyncio
    async def test_describe_chord_class(self, theory_tools: dict) -> None:
        """A bare class name describes the chord class."""
        data = json.loads(await theory_tools["theory_describe_chord"](name="m7"))
        assert data["chord_class"]["full_name"] == "Minor 7th"
        assert data["chord_class"]["fingerprint"] == "0,3,7,10"

    @pytest.mark.asyncio
    async def test_describe_unknown(self, theory_tools: dict) -> None:
        """Unknown chord classes are reported."""
        data = json.loads(await theory_tools["theory_describe_chord"](name="E Hyper"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_identify_chord(self, theory_tools: dict) -> None:
        """Identify a chord from its notes."""
        data = json.loads(await theory_tools["theory_identify_chord"](notes=["D", "F", "A", "C"]))
        assert data["status"] == "success"
        assert data["chord"]["name"] == "D Min 7th"

    @pytest.mark.asyncio
    async def test_identify_unmatched(self, theory_tools: dict) -> None:
        """Unknown note sets are reported."""
        data = json.loads(await theory_tools["theory_identify_chord"](notes=["C", "C#", "D"]))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_list_chord_classes(self, theory_tools: dict) -> None:
        """List every chord class."""
        data = json.loads(await theory_tools["theory_list_chord_classes"]())
        assert data["count"] == 17
        assert data["chord_classes"][0]["name"] == "Major"


class TestKeyTools:
    """Tests for scale and key tools."""

    @pytest.mark.asyncio
    async def test_list_scales(self, theory_tools: dict) -> None:
        """List every scale with its modes."""
        data = json.loads(await theory_tools["theory_list_scales"]())
        assert data["count"] == 10
        major = next(s for s in data["scales"] if s["name"] == "Diatonic Major")
        assert len(major["modes"]) == 7

    @pytest.mark.asyncio
    async def test_describe_key(self, theory_tools: dict) -> None:
        """Describe a key's notes."""
        data = json.loads(await theory_tools["theory_describe_key"](key="E Diatonic Major"))
        assert data["key"]["notes"] == ["E", "F♯", "G♯", "A", "B", "C♯", "D♯"]

    @pytest.mark.asyncio
    async def test_describe_unknown_key(self, theory_tools: dict) -> None:
        """Unknown scales are reported."""
        data = json.loads(await theory_tools["theory_describe_key"](key="E Hyper Lydian"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_key_chords(self, theory_tools: dict) -> None:
        """List the diatonic chords of a key."""
        data = json.loads(await theory_tools["theory_key_chords"](key="E"))
        assert [c["name"] for c in data["chords"]][-1] == "D♯ Dim"

    @pytest.mark.asyncio
    async def test_progression(self, theory_tools: dict) -> None:
        """Resolve a progression."""
        data = json.loads(
            await theory_tools["theory_progression"](key="C", progression="I-vi-IV-V")
        )
        assert [c["name"] for c in data["chords"]] == [
            "C Major",
            "A Minor",
            "F Major",
            "G Major",
        ]

    @pytest.mark.asyncio
    async def test_progression_error(self, theory_tools: dict) -> None:
        """Malformed numerals are reported."""
        data = json.loads(await theory_tools["theory_progression"](key="C", progression="I-Iv"))
        assert data["status"] == "error"


class TestExportTools:
    """Tests for MIDI export."""

    @pytest.mark.asyncio
    async def test_export_progression(self, export_tools: dict, temp_dir: Path) -> None:
        """Export a progression to a MIDI file."""
        data = json.loads(
            await export_tools["theory_export_progression"](
                key="G", progression="I IV V", output_name="gcd"
            )
        )
        assert data["status"] == "success"
        assert data["chords"] == ["G Major", "C Major", "D Major"]
        assert (temp_dir / "output" / "gcd.mid").exists()

    @pytest.mark.asyncio
    async def test_export_empty(self, export_tools: dict) -> None:
        """An empty progression is an error."""
        data = json.loads(
            await export_tools["theory_export_progression"](key="G", progression=" ")
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_export_bad_key(self, export_tools: dict) -> None:
        """Bad keys are reported."""
        data = json.loads(
            await export_tools["theory_export_progression"](key="Q", progression="I")
        )
        assert data["status"] == "error"
