"""
Roland JX-8P patch extraction.

JX-8P tone dumps are plain Roland SysEx messages with a 32-byte payload:

    F0 41 xx xx xx xx [32 bytes of tone data] F7

The extractor scans a raw byte stream for the F0 41 marker and copies the
payload after the 6-byte header. Anything that is not a complete frame is
skipped one byte at a time.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

import mido

SYSEX_START = 0xF0
SYSEX_END = 0xF7
ROLAND_ID = 0x41

HEADER_SIZE = 6
PATCH_SIZE = 32
FRAME_SIZE = HEADER_SIZE + PATCH_SIZE + 1

MIDI_SUFFIXES = (".mid", ".midi", ".smf")


@dataclass
class JX8PPatch:
    """Raw JX-8P tone data."""

    data: bytes

    def __post_init__(self):
        if len(self.data) != PATCH_SIZE:
            raise ValueError(f"Invalid JX-8P patch size: {len(self.data)} (expected {PATCH_SIZE})")

    def debug_string(self) -> str:
        """Hex representation of the tone data."""
        return "JX8P Patch Data:\n" + " ".join(f"{b:02x}" for b in self.data)


def is_valid_sysex(data: bytes, offset: int) -> bool:
    """
    Check for a complete Roland frame at offset.

    Args:
        data: Byte stream
        offset: Candidate frame start

    Returns:
        True if a Roland SysEx start and a full frame fit at offset
    """
    if offset < 0 or offset + FRAME_SIZE > len(data):
        return False
    return data[offset] == SYSEX_START and data[offset + 1] == ROLAND_ID


def extract_from_sysex(data: bytes) -> List[JX8PPatch]:
    """
    Extract all JX-8P patches from a byte stream.

    Args:
        data: Raw SysEx data

    Returns:
        Patches in stream order
    """
    patches = []
    pos = 0
    while pos < len(data):
        if is_valid_sysex(data, pos):
            start = pos + HEADER_SIZE
            patches.append(JX8PPatch(bytes(data[start : start + PATCH_SIZE])))
            pos += FRAME_SIZE
        else:
            pos += 1
    return patches


def read_sysex_stream(filepath: Union[str, Path]) -> bytes:
    """
    Read the SysEx byte stream of a file.

    .syx files are returned as they are. For Standard MIDI Files the SysEx
    events of all tracks are reassembled into F0 ... F7 messages.
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    if filepath.suffix.lower() not in MIDI_SUFFIXES:
        with open(filepath, "rb") as f:
            return f.read()

    stream = bytearray()
    midi = mido.MidiFile(str(filepath))
    for track in midi.tracks:
        for message in track:
            if message.type == "sysex":
                stream.append(SYSEX_START)
                stream.extend(message.data)
                stream.append(SYSEX_END)
    return bytes(stream)
