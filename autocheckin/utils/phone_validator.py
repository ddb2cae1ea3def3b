"""Phone number validation for reservation notifications."""
import re
from typing import Tuple


class PhoneNumberValidator:
    """Normalizes contact numbers into the international form messaging APIs expect."""
    
    SEPARATORS = re.compile(r"[\s\-().]")
    # E.164 allows at most 15 digits
    MIN_DIGITS = 7
    MAX_DIGITS = 15
    
    @classmethod
    def normalize(cls, phone_number: str) -> Tuple[str, str]:
        """
        Normalize phone number.
        
        Args:
            phone_number: Phone number in any common format
            
        Returns:
            Tuple of (digits, api_format) where api_format carries a + prefix
            
        Raises:
            ValueError: If the number is not a plausible international number
        """
        cleaned = cls.SEPARATORS.sub("", str(phone_number or ""))
        digits = cleaned[1:] if cleaned.startswith("+") else cleaned
        
        if not digits.isdigit() or not cls.MIN_DIGITS <= len(digits) <= cls.MAX_DIGITS:
            raise ValueError(f"Invalid phone number format: {phone_number}")
        
        return digits, f"+{digits}"
    
    @classmethod
    def validate_format(cls, phone_number: str) -> bool:
        try:
            cls.normalize(phone_number)
            return True
        except ValueError:
            return False
