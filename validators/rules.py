"""
Rule catalog and severity policy

Every issue code the engine can emit is declared here with its category and
default severity. Checkers only name a code; whether it lands in the error
or warning list is decided by the SeverityPolicy for the active profile.

Codes are a public contract: never renumber, only append.
"""

from typing import Dict, List, Mapping, NamedTuple, Optional, Union

from models.validation import (
    IssueCategory,
    Profile,
    Severity,
    ValidationIssue,
    ValidationResult,
)


# Absolute tolerance for every amount comparison
AMOUNT_TOLERANCE = 0.01


class Rule(NamedTuple):
    category: IssueCategory
    severity: Severity
    title: str


_E = Severity.ERROR
_W = Severity.WARNING

RULES: Dict[str, Rule] = {
    # Document header
    'DOC_001': Rule(IssueCategory.INVOICE, _E, 'Invoice number required'),
    'DOC_002': Rule(IssueCategory.INVOICE, _E, 'Invoice number length'),
    'DOC_003': Rule(IssueCategory.INVOICE, _E, 'Issue date required'),
    'DOC_004': Rule(IssueCategory.INVOICE, _E, 'Issue date format'),
    'DOC_005': Rule(IssueCategory.INVOICE, _E, 'Currency code required'),
    'DOC_006': Rule(IssueCategory.INVOICE, _W, 'Currency code recognised'),
    'DOC_007': Rule(IssueCategory.INVOICE, _E, 'Original document reference'),
    'DOC_008': Rule(IssueCategory.INVOICE, _W, 'Payment means code recognised'),

    # Supplier
    'SUP_001': Rule(IssueCategory.SUPPLIER, _E, 'Supplier TIN required'),
    'SUP_002': Rule(IssueCategory.SUPPLIER, _E, 'Supplier TIN format'),
    'SUP_003': Rule(IssueCategory.SUPPLIER, _E, 'Supplier legal name required'),
    'SUP_004': Rule(IssueCategory.SUPPLIER, _E, 'Supplier legal name length'),
    'SUP_005': Rule(IssueCategory.SUPPLIER, _E, 'Supplier address required'),
    'SUP_006': Rule(IssueCategory.SUPPLIER, _E, 'Supplier street required'),
    'SUP_007': Rule(IssueCategory.SUPPLIER, _E, 'Supplier city required'),
    'SUP_008': Rule(IssueCategory.SUPPLIER, _E, 'Supplier postcode required'),
    'SUP_009': Rule(IssueCategory.SUPPLIER, _E, 'Supplier country required'),
    'SUP_010': Rule(IssueCategory.SUPPLIER, _W, 'Supplier contact recommended'),
    'SUP_011': Rule(IssueCategory.SUPPLIER, _W, 'MSIC code recommended'),
    'SUP_012': Rule(IssueCategory.SUPPLIER, _E, 'MSIC code format'),
    'SUP_013': Rule(IssueCategory.SUPPLIER, _E, 'Supplier BRN format'),
    'SUP_014': Rule(IssueCategory.SUPPLIER, _W, 'Supplier TIN matches settings'),
    'SUP_P01': Rule(IssueCategory.SUPPLIER, _E, 'Supplier PEPPOL participant ID'),

    # Buyer
    'BUY_001': Rule(IssueCategory.BUYER, _E, 'Buyer name required'),
    'BUY_002': Rule(IssueCategory.BUYER, _W, 'Buyer TIN or ID recommended'),
    'BUY_003': Rule(IssueCategory.BUYER, _E, 'Buyer TIN format'),
    'BUY_004': Rule(IssueCategory.BUYER, _E, 'Buyer BRN format'),
    'BUY_005': Rule(IssueCategory.BUYER, _W, 'Buyer ID type recognised'),
    'BUY_P01': Rule(IssueCategory.BUYER, _E, 'Buyer PEPPOL participant ID'),

    # Line items
    'ITM_001': Rule(IssueCategory.ITEMS, _E, 'At least one line item'),
    'ITM_002': Rule(IssueCategory.ITEMS, _E, 'Product name required'),
    'ITM_003': Rule(IssueCategory.ITEMS, _E, 'Quantity positive'),
    'ITM_004': Rule(IssueCategory.ITEMS, _E, 'Unit price not negative'),
    'ITM_005': Rule(IssueCategory.ITEMS, _E, 'Unit code required'),
    'ITM_006': Rule(IssueCategory.ITEMS, _W, 'Unit code recognised'),
    'ITM_007': Rule(IssueCategory.ITEMS, _E, 'Tax category required'),
    'ITM_008': Rule(IssueCategory.ITEMS, _W, 'Tax category recognised'),
    'ITM_009': Rule(IssueCategory.ITEMS, _E, 'Tax rate range'),
    'ITM_010': Rule(IssueCategory.ITEMS, _E, 'Line net amount calculation'),
    'ITM_011': Rule(IssueCategory.ITEMS, _W, 'Line tax amount calculation'),
    'ITM_012': Rule(IssueCategory.ITEMS, _W, 'Exemption reason recommended'),
    'ITM_013': Rule(IssueCategory.ITEMS, _W, 'Exemption reason code recognised'),

    # Tax subtotals
    'TAX_001': Rule(IssueCategory.TAX, _W, 'Line taxes match total tax'),
    'TAX_002': Rule(IssueCategory.TAX, _E, 'Tax subtotals match total tax'),
    'TAX_003': Rule(IssueCategory.TAX, _W, 'Subtotal taxable amount matches lines'),

    # Totals
    'TOT_001': Rule(IssueCategory.INVOICE, _E, 'Line extension amount'),
    'TOT_002': Rule(IssueCategory.INVOICE, _E, 'Tax exclusive amount'),
    'TOT_003': Rule(IssueCategory.INVOICE, _E, 'Tax inclusive amount'),
    'TOT_004': Rule(IssueCategory.INVOICE, _W, 'Payable amount'),

    # Currency
    'CURRENCY_001': Rule(IssueCategory.INVOICE, _E, 'Exchange rate required'),
    'CURRENCY_002': Rule(IssueCategory.INVOICE, _E, 'Exchange rate positive'),
}

# Profile-specific severity changes applied on top of the catalog defaults
PROFILE_SEVERITY_OVERRIDES: Dict[Profile, Dict[str, Severity]] = {
    Profile.NATIONAL: {},
    Profile.NETWORK: {},
}


def amounts_differ(actual: float, expected: float, tolerance: float = AMOUNT_TOLERANCE) -> bool:
    """True when two amounts are further apart than the tolerance"""
    return abs(actual - expected) > tolerance


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty or whitespace-only strings"""
    return not value or not value.strip()


class SeverityPolicy:
    """
    Resolves the severity of an issue code for a profile

    Args:
        overrides: {profile: {code: severity}}; profile and severity may be
            given as enum members or their string values (e.g. from YAML)
    """

    def __init__(self, overrides: Optional[Mapping[Union[Profile, str], Mapping[str, Union[Severity, str]]]] = None):
        self.overrides: Dict[Profile, Dict[str, Severity]] = {
            profile: dict(codes) for profile, codes in PROFILE_SEVERITY_OVERRIDES.items()
        }

        for profile_key, codes in (overrides or {}).items():
            profile = Profile(profile_key)
            for code, severity in codes.items():
                if code not in RULES:
                    raise ValueError(f"Unknown issue code in severity overrides: {code}")
                self.overrides.setdefault(profile, {})[code] = Severity(severity)

    def severity_for(self, code: str, profile: Profile) -> Severity:
        return self.overrides.get(profile, {}).get(code, RULES[code].severity)


class IssueCollector:
    """Accumulates issues for one validation run into ordered error/warning lists"""

    def __init__(self, profile: Profile = Profile.NATIONAL, policy: Optional[SeverityPolicy] = None):
        self.profile = profile
        self.policy = policy or SeverityPolicy()
        self.errors: List[ValidationIssue] = []
        self.warnings: List[ValidationIssue] = []

    def add(self, code: str, field: str, message: str) -> ValidationIssue:
        severity = self.policy.severity_for(code, self.profile)
        issue = ValidationIssue(
            field=field,
            message=message,
            category=RULES[code].category,
            severity=severity,
            code=code,
        )

        if severity == Severity.ERROR:
            self.errors.append(issue)
        else:
            self.warnings.append(issue)
        return issue

    def result(self) -> ValidationResult:
        return ValidationResult(errors=tuple(self.errors), warnings=tuple(self.warnings))
