"""Employee records persisted as a JSON file, with YAML export."""

__version__ = "0.1.0"
