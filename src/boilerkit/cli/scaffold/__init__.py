"""Boilerplate files copied verbatim into the target project."""
