"""
Input Validation & Sanitization Utilities
Validates request bodies for the item, supplier, lead and delivery APIs
"""
import re
from typing import Dict, Any, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

# Regex patterns
EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')
PHONE_PATTERN = re.compile(r'^\+?1?\d{9,15}$')

LEAD_STATUSES = {'new', 'contacted', 'qualified', 'unqualified', 'converted', 'lost'}
LEAD_SOURCES = {'website', 'referral', 'cold-call', 'email', 'social-media', 'trade-show', 'other'}
DELIVERY_STATUSES = {'scheduled', 'in-transit', 'delivered', 'failed', 'cancelled'}

MIN_PASSWORD_LENGTH = 6


class ValidationError(Exception):
    """Custom exception for validation errors"""
    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(self.message)


def validate_required_fields(data: Dict[str, Any], required_fields: List[str]) -> Tuple[bool, Optional[str]]:
    """
    Validate that all required fields are present in the data

    Args:
        data: Dictionary of input data
        required_fields: List of required field names

    Returns:
        Tuple of (is_valid, error_message)
    """
    missing_fields = [field for field in required_fields if field not in data or data[field] is None or data[field] == '']

    if missing_fields:
        return False, f"Missing required fields: {', '.join(missing_fields)}"

    return True, None


def validate_email(email: str) -> Tuple[bool, Optional[str]]:
    """
    Validate email format

    Args:
        email: Email address to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not email or not isinstance(email, str):
        return False, "Email must be a non-empty string"

    if not EMAIL_PATTERN.match(email):
        return False, "Invalid email format"

    if len(email) > 254:  # RFC 5321
        return False, "Email address too long"

    return True, None


def validate_phone(phone: str) -> Tuple[bool, Optional[str]]:
    """
    Validate phone number format

    Args:
        phone: Phone number to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not phone or not isinstance(phone, str):
        return False, "Phone must be a non-empty string"

    # Remove common separators
    cleaned_phone = re.sub(r'[\s\-\(\)]', '', phone)

    if not PHONE_PATTERN.match(cleaned_phone):
        return False, "Invalid phone number format"

    return True, None


def validate_string_length(value: str, min_length: int = 0, max_length: int = 1000) -> Tuple[bool, Optional[str]]:
    """Validate string length is within acceptable range"""
    if not isinstance(value, str):
        return False, "Value must be a string"

    if len(value) < min_length:
        return False, f"Value too short (minimum {min_length} characters)"

    if len(value) > max_length:
        return False, f"Value too long (maximum {max_length} characters)"

    return True, None


def validate_number_range(value: float, min_value: Optional[float] = None, max_value: Optional[float] = None) -> Tuple[bool, Optional[str]]:
    """
    Validate number is within acceptable range

    Args:
        value: Number to validate
        min_value: Minimum allowed value
        max_value: Maximum allowed value

    Returns:
        Tuple of (is_valid, error_message)
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False, "Value must be a number"

    if min_value is not None and value < min_value:
        return False, f"Value too small (minimum {min_value})"

    if max_value is not None and value > max_value:
        return False, f"Value too large (maximum {max_value})"

    return True, None


def sanitize_string(value: str, max_length: int = 1000) -> str:
    """
    Sanitize string input by removing null bytes and surrounding whitespace

    Args:
        value: String to sanitize
        max_length: Maximum allowed length

    Returns:
        Sanitized string
    """
    if not isinstance(value, str):
        return str(value)

    sanitized = value.replace('\x00', '').strip()

    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length]

    return sanitized


def _validate_optional_contact(data: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    if data.get('email'):
        is_valid, error = validate_email(data['email'])
        if not is_valid:
            return False, f"Invalid email: {error}"

    if data.get('phone'):
        is_valid, error = validate_phone(data['phone'])
        if not is_valid:
            return False, f"Invalid phone: {error}"

    return True, None


def validate_item_request(data: Dict[str, Any], partial: bool = False) -> Tuple[bool, Optional[str]]:
    """
    Validate inventory item create/update data

    Args:
        data: Request data dictionary
        partial: True for updates, where required fields may be omitted

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not partial:
        is_valid, error = validate_required_fields(data, ['sku', 'name', 'category'])
        if not is_valid:
            return False, error

    for field in ('sku', 'name', 'category'):
        if field in data:
            is_valid, error = validate_string_length(data[field], min_length=1, max_length=200)
            if not is_valid:
                return False, f"Invalid {field}: {error}"

    for field in ('quantity', 'reorderLevel', 'unitPrice', 'costPrice'):
        if field in data:
            is_valid, error = validate_number_range(data[field], min_value=0)
            if not is_valid:
                return False, f"Invalid {field}: {error}"

    if 'critical' in data and not isinstance(data['critical'], bool):
        return False, "critical must be a boolean"

    return True, None


def validate_stock_adjustment(data: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """Validate a stock adjustment body: {"adjustment": int, "reason": str}"""
    is_valid, error = validate_required_fields(data, ['adjustment'])
    if not is_valid:
        return False, error

    adjustment = data['adjustment']
    if isinstance(adjustment, bool) or not isinstance(adjustment, int):
        return False, "adjustment must be an integer"

    if adjustment == 0:
        return False, "adjustment must not be zero"

    if 'reason' in data and data['reason'] is not None:
        is_valid, error = validate_string_length(data['reason'], max_length=500)
        if not is_valid:
            return False, f"Invalid reason: {error}"

    return True, None


def validate_supplier_request(data: Dict[str, Any], partial: bool = False) -> Tuple[bool, Optional[str]]:
    """Validate supplier create/update data"""
    if not partial:
        if not data.get('name') or not data.get('email'):
            return False, "Name and email are required"

    if 'name' in data:
        is_valid, error = validate_string_length(data['name'], min_length=1, max_length=200)
        if not is_valid:
            return False, f"Invalid name: {error}"

    return _validate_optional_contact(data)


def validate_lead_request(data: Dict[str, Any], partial: bool = False) -> Tuple[bool, Optional[str]]:
    """Validate lead create/update data"""
    if not partial:
        is_valid, error = validate_required_fields(data, ['name', 'email'])
        if not is_valid:
            return False, error

    if 'name' in data:
        is_valid, error = validate_string_length(data['name'], min_length=1, max_length=200)
        if not is_valid:
            return False, f"Invalid name: {error}"

    if 'status' in data and data['status'] not in LEAD_STATUSES:
        return False, f"Invalid status. Allowed: {', '.join(sorted(LEAD_STATUSES))}"

    if 'source' in data and data['source'] not in LEAD_SOURCES:
        return False, f"Invalid source. Allowed: {', '.join(sorted(LEAD_SOURCES))}"

    if 'estimatedValue' in data:
        is_valid, error = validate_number_range(data['estimatedValue'], min_value=0)
        if not is_valid:
            return False, f"Invalid estimatedValue: {error}"

    return _validate_optional_contact(data)


def validate_delivery_request(data: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """Validate delivery creation data"""
    is_valid, error = validate_required_fields(data, ['customerName', 'address'])
    if not is_valid:
        return False, error

    if 'status' in data and data['status'] not in DELIVERY_STATUSES:
        return False, f"Invalid status. Allowed: {', '.join(sorted(DELIVERY_STATUSES))}"

    if 'items' in data:
        if not isinstance(data['items'], list):
            return False, "items must be an array"
        for idx, line in enumerate(data['items']):
            if not isinstance(line, dict):
                return False, f"Item {idx} must be an object"

    return True, None


def validate_login_request(data: Dict[str, Any]) -> Dict[str, List[str]]:
    """Field errors for a login body; empty when valid"""
    errors = {}
    if not data.get('email') or not isinstance(data['email'], str):
        errors['email'] = ["Email is required"]
    if not data.get('password') or not isinstance(data['password'], str):
        errors['password'] = ["Password is required"]
    return errors


def validate_user_request(data: Dict[str, Any], require_company: bool = False) -> Dict[str, List[str]]:
    """
    Field errors for registration or user creation; empty when valid

    Args:
        data: Request body
        require_company: Registration also needs a companyName
    """
    from auth import ROLES

    errors = {}
    email = data.get('email')
    if not isinstance(email, str) or not validate_email(email.strip().lower())[0]:
        errors['email'] = ["Valid email is required"]

    password = data.get('password')
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        errors['password'] = [f"Password must be at least {MIN_PASSWORD_LENGTH} characters"]

    if not data.get('name') or not isinstance(data['name'], str):
        errors['name'] = ["Name is required"]

    if require_company and not data.get('companyName'):
        errors['companyName'] = ["Company name is required"]

    if 'role' in data and data['role'] not in ROLES:
        errors['role'] = [f"Role must be one of: {', '.join(ROLES)}"]

    return errors
