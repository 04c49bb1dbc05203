"""
Location acquisition.

Responsibilities:
- Ask an external position provider for one fresh fix per user request.
- Track the request as idle / loading / success / error.
- Report unsupported platforms separately from provider failures.
"""
