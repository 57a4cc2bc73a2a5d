"""
Boundary layer for external system integrations.

Handles all interactions with external systems (the SQL document store
and the S3 image asset store).
"""
