"""Southwest API client for retrieving reservations."""
import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from autocheckin.config.settings import Config
from autocheckin.domain.entities.retrieved_reservation import RetrievedReservation
from autocheckin.domain.errors import RetrievalUnavailableError
from autocheckin.domain.interfaces.reservation_client import IReservationClient


class SouthwestReservationClient(IReservationClient):
    """
    Client for the Southwest reservation lookup endpoint.
    
    Network failures, timeouts, throttling (429), server errors and
    unreadable bodies raise ``RetrievalUnavailableError`` after a single
    attempt. Other client errors (4xx) carrying a JSON body are business
    answers and come back as error documents.
    """
    
    RESERVATION_ENDPOINT = "/v1/mobile-air-booking/page/view-reservation/{confirmation_number}"
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[int] = None
    ):
        """
        Initialize the Southwest client.
        
        Args:
            base_url: Base URL for the API (defaults to Config value)
            api_key: API key sent with every request (defaults to Config value)
            timeout: Request timeout in seconds (defaults to Config value)
        """
        self.base_url = base_url or Config.SOUTHWEST_API_BASE_URL
        self.api_key = api_key or Config.SOUTHWEST_API_KEY
        self.timeout = timeout or Config.RETRIEVAL_TIMEOUT_SECONDS
        self._logger = logging.getLogger(__name__)
        
        # Single attempt per lookup
        self.session = requests.Session()
        adapter = HTTPAdapter(
            max_retries=Retry(total=0, raise_on_status=False),
            pool_connections=10,
            pool_maxsize=10
        )
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
    
    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        return headers
    
    def retrieve_reservation(
        self,
        last_name: str,
        first_name: str,
        confirmation_number: str
    ) -> RetrievedReservation:
        """
        Retrieve a reservation by names and confirmation number.
        
        Args:
            last_name: Traveler last name
            first_name: Traveler first name
            confirmation_number: Six character record locator
            
        Returns:
            Retrieved reservation document (possibly an error document)
            
        Raises:
            RetrievalUnavailableError: If the airline cannot be reached
        """
        base_url = self.base_url.rstrip('/')
        endpoint = self.RESERVATION_ENDPOINT.format(confirmation_number=confirmation_number).lstrip('/')
        url = f"{base_url}/{endpoint}"
        params = {"first-name": first_name, "last-name": last_name}
        
        try:
            response = self.session.get(url, headers=self._headers(), params=params, timeout=self.timeout)
        except requests.Timeout as e:
            self._logger.warning(f"Reservation lookup timed out after {self.timeout}s: {confirmation_number}")
            raise RetrievalUnavailableError() from e
        except requests.RequestException as e:
            self._logger.warning(f"Reservation lookup failed: {confirmation_number} - {e}")
            raise RetrievalUnavailableError() from e
        
        self._logger.debug(f"Reservation lookup {confirmation_number}: status {response.status_code}")
        
        if response.status_code == 429:
            self._logger.warning(f"Reservation lookup throttled by the airline: {confirmation_number}")
            raise RetrievalUnavailableError()
        if response.status_code >= 500:
            self._logger.error(f"Airline server error {response.status_code}: {response.text[:500]}")
            raise RetrievalUnavailableError()
        
        document = self._parse_json(response)
        if response.status_code >= 400:
            return RetrievedReservation(self._error_document(document), status_code=response.status_code)
        return RetrievedReservation(document, status_code=response.status_code)
    
    def _parse_json(self, response: requests.Response) -> Dict[str, Any]:
        if not response.text:
            self._logger.error(f"Empty response (status {response.status_code})")
            raise RetrievalUnavailableError()
        try:
            document = response.json()
        except ValueError as e:
            self._logger.error(f"Non-JSON response (status {response.status_code}): {response.text[:500]}")
            raise RetrievalUnavailableError() from e
        if not isinstance(document, dict):
            self._logger.error(f"Unexpected JSON document: {response.text[:200]}")
            raise RetrievalUnavailableError()
        return document
    
    @staticmethod
    def _error_document(document: Dict[str, Any]) -> Dict[str, Any]:
        message = document.get("errmsg") or document.get("message") or "The airline could not return your reservation"
        return {"errmsg": message, "code": document.get("code")}
