"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies and are kept separate
from the store so that the wire representation can evolve on its own.
"""
