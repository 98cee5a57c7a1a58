"""ABOUTME: Species search engine and dex lookup commands.
ABOUTME: Exposes the package version used by settings and the CLI."""

__version__ = "0.3.0"
