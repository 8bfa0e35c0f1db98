import pytest
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

# Add src to sys.path so we can import scorepage
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from scorepage.core.models import Score, Track  # noqa: E402
from scorepage.layout import BarSize, LayoutOptions, Settings  # noqa: E402

STANDARD_GUITAR = (64, 59, 55, 50, 45, 40)


@dataclass(frozen=True)
class FixedMeasurer:
    """
    Measurer returning preset bar sizes.

    widths: one width for every bar, or a width per bar index
    """

    widths: Union[float, Sequence[float]] = 50.0
    height: float = 80.0

    def measure(self, track, master_bar, scale):
        width = _pick(self.widths, master_bar.index)
        return BarSize(width=width * scale, height=self.height * scale)


def _pick(value, index):
    if isinstance(value, (int, float)):
        return float(value)
    return float(value[index])


# Common test fixtures
@pytest.fixture
def fixed_measurer():
    """Factory for FixedMeasurer."""
    return FixedMeasurer


@pytest.fixture
def score_factory():
    """Factory to create scores with n bars and plain tracks."""
    def _create(
        bar_count: int = 10,
        track_count: int = 1,
        tuning: Sequence[int] = (),
        **metadata: str,
    ) -> Score:
        tracks = [Track(name=f"Track {i + 1}", tuning=tuple(tuning)) for i in range(track_count)]
        return Score.with_bars(bar_count, tracks=tracks, **metadata)
    return _create


@pytest.fixture
def settings_factory():
    """
    Factory for settings with a fixed page width.

    Default page width 300 gives a usable width of 220.
    """
    def _create(
        width: float = 300,
        scale: float = 1.0,
        tracks: Optional[Sequence[int]] = (0,),
        **options,
    ) -> Settings:
        layout = {"autoSize": False}
        layout.update(options)
        return Settings(
            layout=LayoutOptions.from_mapping(layout),
            width=width,
            scale=scale,
            tracks=tuple(tracks),
        )
    return _create
