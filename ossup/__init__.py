"""Model of compose services and helpers that change them for local development."""

__version__ = "0.1.0"