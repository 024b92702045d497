"""Rule-based parsing of spoken workout logs."""

__version__ = "0.1.0"
