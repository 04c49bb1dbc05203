"""
Geospatial helpers.

Responsibilities:
- Great-circle distance between two coordinates (scalar and vectorised).
"""
