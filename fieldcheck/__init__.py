"""fieldcheck: field-level validators for user-submitted data."""

__version__ = "0.1.0"
