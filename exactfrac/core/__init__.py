"""
Core value types, integer primitives, and error contracts.

Nothing here depends on I/O or external systems.
"""
