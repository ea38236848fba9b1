"""Classic algorithms, data structures, design patterns, concurrency helpers and small command-line tools."""

__version__ = "0.1.0"