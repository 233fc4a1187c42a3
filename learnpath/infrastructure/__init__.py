"""
Infrastructure layer.

Adapters implementing the application ports: SQLAlchemy repositories with
their ORM mappers, the SQLAlchemy unit of work, the system clock and the
pydantic schemas validating raw request payloads.
"""
