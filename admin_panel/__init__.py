"""
Admin panel backend.

REST API over PostgreSQL for managing projects and mentor reviews.
"""

__version__ = "0.1.0"
