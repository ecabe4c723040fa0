"""
Application layer.

Service orchestrators and the pending-document store.
"""
