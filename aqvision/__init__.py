"""AQ-Vision gateway: air quality, weather, maps and AI summaries behind one API."""

__version__ = "1.0.0"
