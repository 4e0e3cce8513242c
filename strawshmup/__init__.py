"""Game-logic pieces of a vertical shoot-'em-up: collision geometry, input, dialogue and asset catalogues."""

__version__ = "0.1.0"