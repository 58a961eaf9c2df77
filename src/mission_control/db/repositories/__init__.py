"""
mission_control.db.repositories

Repository package.

Responsibilities:
- Group data-access repositories for launches, planets and the import ledger.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories flush but never commit; LaunchService owns transaction boundaries.
