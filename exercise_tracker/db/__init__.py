"""Database declarations: the SQLAlchemy Base shared by all ORM models."""
