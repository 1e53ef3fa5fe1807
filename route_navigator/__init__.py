"""Route sequencing and navigation deep links for trip planning."""

__version__ = "0.1.0"
