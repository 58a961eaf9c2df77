"""
mission_control.clients

Upstream client package.

Responsibilities:
- Provide client interfaces for external launch-data providers.
"""

# Package marker.
