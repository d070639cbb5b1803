"""Classic algorithms in plain Python: sorting, conversions, strings, arrays,
numbers, graphs and backtracking."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "conversions",
    "graphs",
    "numbers",
    "sorting",
    "strings",
]