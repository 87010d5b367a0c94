"""Current-principal abstraction layer."""

from core.auth.interface import PlaceholderPrincipalProvider, Principal, PrincipalProvider, get_principal_provider

__all__ = ["PlaceholderPrincipalProvider", "Principal", "PrincipalProvider", "get_principal_provider"]
