"""Scrape signal data from ARRIS/Motorola SURFboard cable modems."""

__version__ = "0.3.0"
