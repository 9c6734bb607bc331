"""Array, number, string, sorting and text-pattern drills with a small command line."""

__version__ = "0.1.0"