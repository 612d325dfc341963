"""
Boundary layer for external system integrations.

Handles all interactions with the relational store: engine and session
lifecycle, ORM models, CRUD operations and schema bootstrap.
"""
