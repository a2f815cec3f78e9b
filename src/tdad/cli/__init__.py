"""TDAD CLI commands."""
