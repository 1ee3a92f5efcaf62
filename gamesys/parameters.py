"""Parameters describing how a drawable or an audio object is presented."""

from __future__ import annotations

from dataclasses import MISSING, dataclass, field, fields

from gamesys.defines import (
    FULL_OPACITY,
    MAX_VOLUME,
    ZERO_ROTATION,
    BlendMode,
    DrawLayer,
    FlipMode,
    ObjectType,
)
from gamesys.geometry import Point, Rectangle


def _reset_fields(obj: object) -> None:
    for f in fields(obj):
        if f.default is not MISSING:
            value = f.default
        elif f.default_factory is not MISSING:
            value = f.default_factory()
        else:
            continue
        setattr(obj, f.name, value)


@dataclass
class DrawParameters:
    """Where and how an object is drawn."""

    pos_rect: Rectangle = field(default=Rectangle.UNDEFINED)
    frame_rect: Rectangle = field(default=Rectangle.ZERO)
    standard_width: int = 0
    standard_height: int = 0

    opacity: int = FULL_OPACITY
    rotation_angle: int = ZERO_ROTATION
    rotation_center: Point = field(default=Point.UNDEFINED)

    object_type: ObjectType = ObjectType.INVALID
    blend_mode: BlendMode = BlendMode.BLEND
    flip_mode: FlipMode = FlipMode.NONE

    draw_layer: DrawLayer = DrawLayer.INVALID

    is_visible: bool = True

    def reset(self) -> None:
        """Restore every field to its default."""
        _reset_fields(self)


@dataclass
class AudioParameters:
    """How a sound or music object is played."""

    loops: int = 0
    loop_infinitely: bool = False

    volume: int = MAX_VOLUME
    max_volume: int = MAX_VOLUME

    object_type: ObjectType = ObjectType.INVALID

    def reset(self) -> None:
        """Restore every field to its default."""
        _reset_fields(self)