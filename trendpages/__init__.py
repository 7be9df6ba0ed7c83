"""Trending keyword aggregation published as static HTML and JSON pages."""

__version__ = "0.1.0"
