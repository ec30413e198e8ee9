"""healthmetrics - interactive health metrics calculator."""

__version__ = "0.1.0"
