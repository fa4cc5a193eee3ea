"""
Pydantic schema definitions for API payloads and stored records.

Each domain defines its own models: ``*Create`` payloads, the stored
record types and a ``*Metrics`` summary.  All of them serialize with
camelCase field names (see ``schemas.base``).
"""
