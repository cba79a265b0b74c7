"""ReelPass - skill scoring engine for candidate profiles."""

__version__ = "0.3.0"
