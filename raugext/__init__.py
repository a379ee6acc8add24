"""Per-sample signal processors: math, control, lists, dynamics, oscillators, sample playback, timing and utilities."""

__version__ = "0.1.0"

__all__ = [
    "control",
    "dynamics",
    "env",
    "lists",
    "math",
    "oscillators",
    "storage",
    "time",
    "util",
]