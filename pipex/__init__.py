"""Run two commands joined by a pipe, from an input file to an output file, plus small text helpers."""

__version__ = "0.1.0"