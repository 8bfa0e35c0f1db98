"""
Module: score

Purpose:
    Read-only score object model consumed by the layout engine.
    Bars are shared across tracks (MasterBar); each track carries a
    lightweight per-bar content summary used for measuring.

Key Classes:
    - MasterBar: One measure boundary shared by all tracks
    - Bar: Per-track content summary for one master bar
    - Track: Tuning, percussion flag and bars of one instrument
    - Score: Metadata strings plus master bars and tracks

Dependencies:
    - dataclasses (std)

Used By:
    - layout.engine: Bar range resolution and packing
    - layout.header: Header rows and tuning diagram
    - layout.measure: Bar width/height measurement
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple


@dataclass(frozen=True, slots=True)
class MasterBar:
    """
    One measure, shared by all tracks.

    Attributes:
        index: 0-based position in Score.master_bars
        numerator: Time signature numerator (beats per bar)
        denominator: Time signature denominator

    Invariants:
        - index >= 0
        - numerator > 0 and denominator > 0
    """

    index: int
    numerator: int = 4
    denominator: int = 4

    def __post_init__(self) -> None:
        """Validate master bar on construction."""
        if self.index < 0:
            raise ValueError(f"index must be >= 0: {self.index}")
        if self.numerator <= 0 or self.denominator <= 0:
            raise ValueError(
                f"time signature must be positive: {self.numerator}/{self.denominator}"
            )

    @property
    def number(self) -> int:
        """1-based bar number as printed on the page."""
        return self.index + 1


@dataclass(frozen=True, slots=True)
class Bar:
    """Content summary of one track's bar (number of beats written)."""

    beats: int = 0

    def __post_init__(self) -> None:
        if self.beats < 0:
            raise ValueError(f"beats must be >= 0: {self.beats}")


@dataclass(frozen=True)
class Track:
    """
    One instrument of the score.

    Attributes:
        name: Display name
        tuning: MIDI values of the open strings, highest string first
        is_percussion: True for drum tracks (no tuning diagram)
        bars: Per-bar content, aligned with Score.master_bars
    """

    name: str = ""
    tuning: Tuple[int, ...] = ()
    is_percussion: bool = False
    bars: Tuple[Bar, ...] = ()

    @property
    def string_count(self) -> int:
        """Number of strings (length of the tuning)."""
        return len(self.tuning)

    def bar(self, index: int) -> Bar:
        """Bar at index, or an empty Bar when the track has none there."""
        if 0 <= index < len(self.bars):
            return self.bars[index]
        return Bar()


@dataclass(frozen=True)
class Score:
    """
    Complete score (immutable).

    Text fields are optional; an empty string means "absent".

    Example:
        >>> score = Score.with_bars(8, title="Etude")
        >>> score.bar_count
        8
    """

    title: str = ""
    subtitle: str = ""
    artist: str = ""
    album: str = ""
    words: str = ""
    music: str = ""
    master_bars: Tuple[MasterBar, ...] = ()
    tracks: Tuple[Track, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate that master bar indices match their position."""
        for position, master_bar in enumerate(self.master_bars):
            if master_bar.index != position:
                raise ValueError(
                    f"master bar at position {position} has index {master_bar.index}"
                )

    @property
    def bar_count(self) -> int:
        """Number of master bars."""
        return len(self.master_bars)

    @classmethod
    def with_bars(
        cls,
        count: int,
        tracks: Sequence[Track] = (),
        **metadata: str,
    ) -> Score:
        """
        Build a score with `count` 4/4 master bars.

        Args:
            count: Number of master bars
            tracks: Tracks of the score
            **metadata: title, subtitle, artist, album, words, music

        Returns:
            Score instance
        """
        return cls(
            master_bars=tuple(MasterBar(index=i) for i in range(count)),
            tracks=tuple(tracks),
            **metadata,
        )
