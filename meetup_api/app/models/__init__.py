"""
SQLAlchemy ORM models.

Models are kept apart from the Pydantic schemas so that the API
representation stays decoupled from persistence.
"""
