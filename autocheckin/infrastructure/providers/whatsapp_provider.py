"""WhatsApp provider implementation (Strategy Pattern)."""
import logging
from typing import Optional, Dict, Any
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from autocheckin.domain.interfaces.message_provider import IMessageProvider
from autocheckin.config.settings import Config


class WhatsAppProvider(IMessageProvider):
    """
    WhatsApp Cloud API provider implementation.
    
    Used to tell travelers their reservation is being tracked.
    """
    
    def __init__(self, access_token: Optional[str] = None, phone_number_id: Optional[str] = None):
        """Initialize WhatsApp provider with connection pooling."""
        self._logger = logging.getLogger(__name__)
        self._access_token = access_token or Config.ACCESS_TOKEN
        self._phone_number_id = phone_number_id or Config.PHONE_NUMBER_ID
        self._session = self._create_session()
    
    def _create_session(self) -> requests.Session:
        """Create a requests session with connection pooling."""
        session = requests.Session()
        
        retry_strategy = Retry(
            total=2,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["POST"]
        )
        
        adapter = HTTPAdapter(
            max_retries=retry_strategy,
            pool_connections=10,
            pool_maxsize=10,
            pool_block=False
        )
        
        session.mount("https://", adapter)
        return session
    
    def _get_base_url(self) -> str:
        if not self._phone_number_id:
            raise ValueError("PHONE_NUMBER_ID not configured")
        return f"https://graph.facebook.com/{Config.VERSION}/{self._phone_number_id}/messages"
    
    def _get_headers(self) -> Dict[str, str]:
        if not self._access_token:
            raise ValueError("ACCESS_TOKEN not configured")
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._access_token}"
        }
    
    def send_text_message(self, recipient: str, message: str) -> Optional[Dict[str, Any]]:
        """
        Send a text message via WhatsApp API.
        
        Args:
            recipient: Phone number (with or without + prefix)
            message: Message text
            
        Returns:
            Response dictionary with status and message_id, or None if failed
        """
        payload = {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": recipient.strip(),
            "type": "text",
            "text": {"preview_url": False, "body": message}
        }
        
        try:
            response = self._session.post(
                self._get_base_url(),
                json=payload,
                headers=self._get_headers(),
                timeout=8
            )
        except ValueError as e:
            self._logger.error(f"WhatsApp provider misconfigured: {e}")
            return None
        except requests.Timeout:
            self._logger.error("Request timeout")
            return None
        except requests.RequestException as e:
            self._logger.error(f"Request failed: {e}")
            return None
        
        if response.status_code == 200:
            response_data = response.json()
            return {
                "status": "success",
                "message_id": response_data.get("messages", [{}])[0].get("id"),
                "response": response_data
            }
        
        error_msg, error_code = self._extract_error(response)
        self._logger.error(f"HTTP {response.status_code} error: {error_msg} (code: {error_code})")
        return {
            "status": "error",
            "error_message": error_msg,
            "error_code": error_code,
            "http_status": response.status_code
        }
    
    @staticmethod
    def _extract_error(response: requests.Response):
        try:
            error = response.json().get('error', {})
            return error.get('message', 'Unknown error'), error.get('code')
        except ValueError:
            return response.text or 'Unknown error', None
