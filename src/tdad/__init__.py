"""TDAD - test verification pipeline for AI-generated code changes."""

__version__ = "0.1.0"
