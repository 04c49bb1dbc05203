"""
Facility catalog package.

Responsibilities:
- Read the static facility catalog (JSON array of raw records).
- Normalize raw records into the canonical Facility schema.
- Keep the normalized catalog in memory for the search layer.
"""
