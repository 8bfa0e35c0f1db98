"""
Module: tuning

Purpose:
    Named string tunings and the lookup used by the score header's
    tuning diagram. Values are MIDI note numbers listed from the highest
    (first) string to the lowest.

Key Functions:
    - find_tuning(): Match a track's tuning against the preset table
    - get_text_for_tuning(): Note name for a MIDI value

Key Classes:
    - Tuning: Named tuning descriptor

Dependencies:
    - dataclasses (std)

Used By:
    - layout.header: Tuning name and string listing rows
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

NOTE_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")


@dataclass(frozen=True, slots=True)
class Tuning:
    """
    Named tuning (immutable).

    Attributes:
        name: Display name, e.g. "Dropped D"
        values: MIDI values, highest string first
        is_standard: True for the standard tuning of its instrument

    Example:
        >>> find_tuning((64, 59, 55, 50, 45, 40)).name
        'Standard Tuning'
    """

    name: str
    values: Tuple[int, ...]
    is_standard: bool = False

    @property
    def string_count(self) -> int:
        return len(self.values)


# First match wins, so the standard tuning of each string count comes first.
PRESETS: Tuple[Tuning, ...] = (
    # 8 strings
    Tuning("Standard Tuning", (64, 59, 55, 50, 45, 40, 35, 30), is_standard=True),
    # 7 strings
    Tuning("Standard Tuning", (64, 59, 55, 50, 45, 40, 35), is_standard=True),
    Tuning("Dropped A", (64, 59, 55, 50, 45, 40, 33)),
    # 6 strings
    Tuning("Standard Tuning", (64, 59, 55, 50, 45, 40), is_standard=True),
    Tuning("Tune down ½ step", (63, 58, 54, 49, 44, 39)),
    Tuning("Tune down 1 step", (62, 57, 53, 48, 43, 38)),
    Tuning("Tune down 2 step", (60, 55, 51, 46, 41, 36)),
    Tuning("Dropped D Tuning", (64, 59, 55, 50, 45, 38)),
    Tuning("Double Dropped D Tuning", (62, 59, 55, 50, 45, 38)),
    Tuning("Dropped C", (62, 57, 53, 48, 43, 36)),
    Tuning("Open E", (64, 59, 56, 52, 47, 40)),
    Tuning("Open D", (62, 57, 54, 50, 45, 38)),
    Tuning("Open G", (62, 59, 55, 50, 43, 38)),
    Tuning("Open C", (64, 60, 55, 48, 43, 36)),
    Tuning("DADGAD", (62, 57, 55, 50, 45, 38)),
    # 5 strings
    Tuning("Bass 5 Strings Tuning", (43, 38, 33, 28, 23), is_standard=True),
    Tuning("Banjo Open G", (62, 59, 55, 50, 67)),
    # 4 strings
    Tuning("Bass Tuning", (43, 38, 33, 28), is_standard=True),
    Tuning("Drop D Bass Tuning", (43, 38, 33, 26)),
    Tuning("Ukulele Tuning", (69, 64, 60, 67)),
)


def find_tuning(values: Sequence[int]) -> Optional[Tuning]:
    """
    Find the preset matching a track's string values.

    Args:
        values: MIDI values, highest string first

    Returns:
        Matching Tuning, or None when the values are not a known preset
    """
    wanted = tuple(values)
    if not wanted:
        return None
    for preset in PRESETS:
        if preset.values == wanted:
            return preset
    return None


def get_text_for_tuning(value: int, include_octave: bool = False) -> str:
    """
    Note name for a MIDI value.

    Args:
        value: MIDI note number (60 = C4)
        include_octave: Append the octave number

    Returns:
        Note name such as "E" or "E4"
    """
    octave = value // 12 - 1
    name = NOTE_NAMES[value % 12]
    if include_octave:
        return f"{name}{octave}"
    return name
