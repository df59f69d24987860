"""
Custom Validators
=================

Validation functions for Brazilian registration data used by the schemas
"""

import re

def only_digits(value: str) -> str:
    return re.sub(r'\D', '', value or '')

def validate_document(value: str) -> str:
    """Validate CPF (11 digits) or CNPJ (14 digits); punctuation is dropped"""
    digits = only_digits(value)
    if len(digits) not in (11, 14):
        raise ValueError('Document must be a CPF (11 digits) or CNPJ (14 digits)')
    return digits

def validate_state_registration(value: str) -> str:
    """Validate state registration (inscrição estadual) or the literal ISENTO"""
    if value is None:
        return value
    if value.upper() == 'ISENTO':
        return 'ISENTO'
    digits = only_digits(value)
    if not 8 <= len(digits) <= 14:
        raise ValueError('State registration must have 8-14 digits or be ISENTO')
    return digits

def validate_phone_number(value: str) -> str:
    """Validate Brazilian phone number (area code + 8 or 9 digits)"""
    if not value:
        return value
    digits = only_digits(value)
    if digits.startswith('55') and len(digits) > 11:
        digits = digits[2:]
    if len(digits) not in (10, 11):
        raise ValueError('Invalid Brazilian phone number format')
    return digits

def validate_zip_code(value: str) -> str:
    """Validate CEP (8 digits)"""
    if not value:
        return value
    digits = only_digits(value)
    if len(digits) != 8:
        raise ValueError('Zip code (CEP) must be 8 digits')
    return digits

def validate_harvest(value: int) -> int:
    """Validate vintage year"""
    if value is not None and not 1800 <= value <= 2100:
        raise ValueError('Harvest must be a year between 1800 and 2100')
    return value

def validate_non_negative_number(value):
    """Validate non-negative number"""
    if value is not None and value < 0:
        raise ValueError('Value must be non-negative')
    return value

def reject_null(value):
    """Partial updates may omit a required field but never clear it"""
    if value is None:
        raise ValueError('Field cannot be null')
    return value
