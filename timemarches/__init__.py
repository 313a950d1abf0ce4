"""Game logic for a short narrative game: timers, sprite animation, audio tweens, props, scripted movement and the inventory menu."""

__version__ = "0.1.0"