"""Message provider implementations."""
from autocheckin.infrastructure.providers.whatsapp_provider import WhatsAppProvider

__all__ = ["WhatsAppProvider"]
