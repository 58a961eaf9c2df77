"""
mission_control.services

Service-layer package.

Responsibilities:
- LaunchService: the public launch boundary and transaction owner.
- LaunchImporter: one-off seeding from the upstream launch-data provider.
"""

# Package marker.
