"""User registry service.

Exposes a small registration API (list users, create user) backed by either an
in-memory collection or a relational table, selected through configuration.
"""

__version__ = "0.1.0"
