"""Interface for message providers (Strategy Pattern).

This allows switching between different messaging platforms:
- WhatsApp
- SMS
- etc.
"""
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any


class IMessageProvider(ABC):
    """
    Interface for message providers following Strategy Pattern.
    
    Implementations can be swapped without changing business logic.
    """
    
    @abstractmethod
    def send_text_message(self, recipient: str, message: str) -> Optional[Dict[str, Any]]:
        """
        Send a text message to a recipient.
        
        Args:
            recipient: Recipient identifier (phone number, user ID, etc.)
            message: Message text content
            
        Returns:
            Response dictionary with status and message_id, or None if failed
        """
        pass
