"""Model, measure and validate CNC toolpaths, stock and work offsets."""

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "motion",
    "state",
    "point",
    "segment",
    "move",
    "toolpath",
    "workpiece",
    "validator",
]