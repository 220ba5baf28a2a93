"""Classic algorithms on arrays, strings, integers and counting problems, and a two-stack queue."""

__version__ = "0.1.0"