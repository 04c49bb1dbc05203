"""
Facility search engine.

Responsibilities:
- Derive the selectable facet options (cities, districts, types, card types).
- Filter the catalog by the active selection.
- Rank the matches by distance to the user, or by name in Turkish collation.
- Hold session-scoped selection and location and recompute derived values.
"""
