"""
Boundary layer for external system integrations.

Adapters for external embedding models used by the chunking engine.
"""
