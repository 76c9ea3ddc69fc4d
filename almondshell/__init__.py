"""Engine building blocks for small games: events, input, entities, scenes, save files, images, atlases and timing."""

__version__ = "0.1.0"