"""A small arcade game about a pulsing cell that moves around and fires drifting attacks."""

__version__ = "0.1.0"