"""
Core business logic package for the court booking API.

Configuration, data access, the places client and typed models live here.
HTTP routes in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []
