"""A small component-based 2D game engine built on pygame: scenes, game objects, components, triggers, observers, input and queued sound."""

__version__ = "0.1.0"