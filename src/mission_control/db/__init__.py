"""
mission_control.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Launch records started life in a document store; the relational schema keeps the
# same shape (customers as a JSON list) so callers never see the difference.
