"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the entities in ``models`` to decouple
the API representation from storage.
"""
