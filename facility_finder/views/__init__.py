"""
Presentation-facing payloads.

Responsibilities:
- Turn ranked facilities into display cards (labels, image, directions link).
- Apply the display cap and describe the empty-result state.
"""
