"""
Domain entities.

Entities are plain dataclasses owned by the store.  They are separate
from the pydantic schemas in ``schemas`` so the service layer does not
depend on the HTTP representation.
"""
