"""Static set pieces and the opening hook sequence."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from timemarches.animation import AnimationSprite, GridLayout
from timemarches.audio import Volume


@dataclass(frozen=True)
class Collider:
    """An axis-aligned rectangle collider, optionally offset from its owner."""

    width: float
    height: float
    offset: tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class PropSpec:
    """Physics and draw-order settings for a level prop."""

    kind: str
    y_origin: float
    collider: Optional[Collider] = None
    children: tuple[Collider, ...] = ()
    rigid_body: str = "static"


def easel_child_colliders() -> tuple[Collider, ...]:
    """The small collider an easel attaches below itself."""
    return (Collider(8.0, 8.0, (8.0, -24.0)),)


_PIANO = PropSpec("Piano", y_origin=-8.0, collider=Collider(32.0, 16.0))


def _easel(kind: str) -> PropSpec:
    return PropSpec(kind, y_origin=-32.0, children=easel_child_colliders())


_PROPS = {
    "Piano": _PIANO,
    "Easel1": _easel("Easel1"),
    "Easel2": _easel("Easel2"),
    "Easel3": _easel("Easel3"),
}


def prop_for(kind: str) -> PropSpec:
    """The prop settings for a level entity kind."""
    try:
        return _PROPS[kind]
    except KeyError:
        raise KeyError(f"no prop defined for {kind!r}") from None


@dataclass(frozen=True)
class SoundCue:
    """A sample to play, at a volume, optionally looped."""

    path: str
    volume: Volume
    repeat: bool = False


SWIGGLE_TEXTURE = "textures/mega-swiggle.png"
FACE_TEXTURE = "textures/face.png"


def _hook_sounds() -> tuple[SoundCue, ...]:
    half = Volume.from_linear(0.5)
    return (
        SoundCue("audio/sfx/whispers.wav", half, repeat=True),
        SoundCue("audio/sfx/hook.wav", half),
        SoundCue("audio/sfx/wake-up.wav", half),
        SoundCue("audio/sfx/many-whispers.wav", half),
    )


@dataclass(frozen=True)
class HookScene:
    """The opening overlay: a looping swiggle, a fading face and whispers."""

    swiggle: AnimationSprite
    sounds: tuple[SoundCue, ...] = field(default_factory=_hook_sounds)
    swiggle_z: float = 900.0
    face_texture: str = FACE_TEXTURE
    face_z: float = 901.0
    fade_duration: float = 13.0
    fade_ease: str = "quadratic_out"
    exit_after: float = 9.0
    next_state: str = "playing"
    columns: int = 5
    rows: int = 1

    def layout(self, width: int, height: int) -> GridLayout:
        """The swiggle sheet layout for a screen of ``width`` by ``height``."""
        return GridLayout(width, height, self.columns, self.rows)


def hook_scene() -> HookScene:
    """Build the opening hook sequence."""
    return HookScene(swiggle=AnimationSprite.repeating(SWIGGLE_TEXTURE, 0.1, range(5)))