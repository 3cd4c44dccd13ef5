"""
Pydantic schemas used by the API.

Schemas are separated from storage so that the wire format can evolve
independently of the table layout.
"""
