"""
Identifier format validators
Field-by-field checks for Malaysian tax and business registration numbers
"""

from typing import Optional

from utils.code_tables import TIN_PATTERNS, BRN_PATTERNS


def _normalize(value: Optional[str]) -> str:
    if not isinstance(value, str):
        return ''
    return value.strip().upper()


def validate_tax_id(value: Optional[str]) -> bool:
    """
    Validate a Tax Identification Number (TIN)

    Accepts company (C), partnership (D), government (G), individual (IG)
    and the other LHDN classification prefixes followed by 10-12 digits.
    Input is trimmed and upper-cased first, so "c123456789012" is valid.

    Usage:
        if not validate_tax_id(form['tin']):
            show_error('Invalid TIN')
    """
    tin = _normalize(value)
    if not tin:
        return False
    return bool(TIN_PATTERNS['MALAYSIA_GENERAL'].fullmatch(tin))


def validate_business_registration_number(value: Optional[str]) -> bool:
    """
    Validate a Business Registration Number (BRN)

    Any of the registrar formats is accepted:
    - 12-digit new format (e.g. 202001012345)
    - old 2-letter prefix format (e.g. JM0123456)
    - ROC format (e.g. 1234567-A)
    - LLP format (e.g. LLP0012345-LCA)
    """
    brn = _normalize(value)
    if not brn:
        return False
    return any(pattern.fullmatch(brn) for pattern in BRN_PATTERNS.values())
