"""Scraper for manga listings, details, chapters and page images on natomanga.com."""

__version__ = "0.1.0"