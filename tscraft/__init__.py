"""tscraft -- interactive TypeScript project scaffolder."""

__version__ = "1.0.0"
