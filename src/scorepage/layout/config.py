"""
Module: layout.config

Purpose:
    Configuration for the page view layout engine.
    Fixed layout constants, typed layout options and render settings.

Key Classes:
    - LayoutConstants: Paddings, reference width and spacing (immutable)
    - LayoutOptions: Typed view of the "layout" option mapping
    - Settings: Layout options plus page width, scale and track selection

Dependencies:
    - dataclasses (std)
    - logging (std)

Used By:
    - layout.engine: Pagination and justification
    - layout.header: Header row heights
    - controller: Pipeline entry point
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


# Page width at scale 1.0 when auto-sizing
WIDTH_ON_100 = 950.0


@dataclass(frozen=True)
class LayoutConstants:
    """
    Fixed layout constants (immutable).

    Paddings are page units and are not scaled. All other lengths are
    multiplied by the layout scale.

    Attributes:
        padding_left: Left page padding
        padding_top: Top page padding
        padding_right: Right page padding
        padding_bottom: Bottom page padding
        width_on_100: Reference page width at scale 1.0
        group_spacing: Vertical gap after each stave group
        title_height: Header row height of the title
        text_row_height: Header row height of subtitle/artist/album/composer
        info_gap: Gap after the text rows of the header
        tuning_row_height: Height of tuning name and string rows
        tuning_column_offset: X offset of the second tuning column
        header_bottom_gap: Gap closing the header when measuring
        header_painted_bottom_gap: Gap closing the header when painting

    Example:
        >>> constants = LayoutConstants()
        >>> constants.horizontal_padding
        80.0
    """

    padding_left: float = 40.0
    padding_top: float = 40.0
    padding_right: float = 40.0
    padding_bottom: float = 40.0

    width_on_100: float = WIDTH_ON_100
    group_spacing: float = 20.0

    # Header rows
    title_height: float = 35.0
    text_row_height: float = 20.0
    info_gap: float = 20.0
    tuning_row_height: float = 15.0
    tuning_column_offset: float = 43.0
    header_bottom_gap: float = 40.0
    header_painted_bottom_gap: float = 25.0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        for name in ("padding_left", "padding_top", "padding_right", "padding_bottom"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0: {getattr(self, name)}")
        if self.width_on_100 <= 0:
            raise ValueError(f"width_on_100 must be positive: {self.width_on_100}")
        if self.group_spacing < 0:
            raise ValueError(f"group_spacing must be >= 0: {self.group_spacing}")

    @property
    def horizontal_padding(self) -> float:
        """Left plus right padding."""
        return self.padding_left + self.padding_right


# option name -> (attribute, type, default)
_OPTION_FIELDS: dict[str, tuple[str, type, Any]] = {
    "start": ("start", int, 1),
    "count": ("count", int, -1),
    "autoSize": ("auto_size", bool, True),
    "width": ("width", float, None),
    "barsPerRow": ("bars_per_row", int, -1),
    "hideInfo": ("hide_info", bool, False),
}


@dataclass(frozen=True)
class LayoutOptions:
    """
    Layout options (immutable).

    Attributes:
        start: 1-based first bar to lay out
        count: Number of bars to include, -1 = all from start
        auto_size: Ignore `width` and use the reference width x scale
        width: Page width when auto_size is False
        bars_per_row: Hard cap on bars per line, -1 = width-driven
        hide_info: Suppress the whole score info header

    Example:
        >>> options = LayoutOptions.from_mapping({"barsPerRow": 4})
        >>> options.get("barsPerRow", -1)
        4
    """

    start: int = 1
    count: int = -1
    auto_size: bool = True
    width: Optional[float] = None
    bars_per_row: int = -1
    hide_info: bool = False

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> LayoutOptions:
        """
        Build options from a camelCase option mapping.

        Unknown keys are ignored. Values that cannot be coerced fall
        back to their default.

        Args:
            data: Mapping like {"start": 3, "barsPerRow": 4}

        Returns:
            LayoutOptions instance
        """
        kwargs: dict[str, Any] = {}
        for key, value in (data or {}).items():
            if key not in _OPTION_FIELDS:
                logger.debug(f"Ignoring unknown layout option {key!r}")
                continue
            attr, kind, default = _OPTION_FIELDS[key]
            kwargs[attr] = _coerce(key, value, kind, default)
        return cls(**kwargs)

    def get(self, name: str, default: Any = None) -> Any:
        """
        Read an option by its camelCase name.

        Args:
            name: Option name, e.g. "barsPerRow"
            default: Returned for unknown names or unset values

        Returns:
            Option value
        """
        field_info = _OPTION_FIELDS.get(name)
        if field_info is None:
            return default
        value = getattr(self, field_info[0])
        return default if value is None else value


def _coerce(key: str, value: Any, kind: type, default: Any) -> Any:
    """Coerce an option value to its type, falling back to the default."""
    if value is None:
        return default
    if kind is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        if isinstance(value, (int, float)):
            return bool(value)
    else:
        try:
            return kind(value)
        except (TypeError, ValueError):
            pass
    logger.warning(f"Invalid value {value!r} for layout option {key!r}, using {default!r}")
    return default


@dataclass(frozen=True)
class Settings:
    """
    Render settings (immutable).

    Attributes:
        layout: Layout options
        width: Configured page width (used when layout.auto_size is False)
        scale: Scale factor applied to all scaled lengths
        tracks: Indices of the selected tracks

    Example:
        >>> settings = Settings(layout=LayoutOptions(auto_size=False), width=800)
        >>> settings.page_width
        800.0
    """

    layout: LayoutOptions = field(default_factory=LayoutOptions)
    width: float = 0.0
    scale: float = 1.0
    tracks: Tuple[int, ...] = (0,)

    def __post_init__(self) -> None:
        """Validate settings on construction."""
        if self.scale <= 0:
            raise ValueError(f"scale must be positive: {self.scale}")

    @property
    def page_width(self) -> float:
        """Configured width: layout option `width` when set, else `width`."""
        if self.layout.width is not None:
            return float(self.layout.width)
        return float(self.width)

    @classmethod
    def from_mapping(
        cls,
        layout: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> Settings:
        """Build settings from a camelCase layout mapping plus keyword fields."""
        if "tracks" in kwargs:
            kwargs["tracks"] = tuple(kwargs["tracks"])
        return cls(layout=LayoutOptions.from_mapping(layout), **kwargs)
