"""
mission_control.observability

Observability package.

Responsibilities:
- Structured logging configuration.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Metrics/tracing exporters can be added here without touching repository logic.
