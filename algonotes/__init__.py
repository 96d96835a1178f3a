"""Classic algorithm exercises, text drawings, integer sequences and small programming notes."""

__version__ = "0.1.0"