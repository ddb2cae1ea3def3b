"""Factories for infrastructure components."""
from autocheckin.infrastructure.factories.provider_factory import ProviderFactory

__all__ = ["ProviderFactory"]
