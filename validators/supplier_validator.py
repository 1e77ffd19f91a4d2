"""
Supplier (seller) identity validation
"""

import re

from models.config import EngineConfig
from models.invoice import EInvoiceDocument
from models.validation import Profile
from utils.validators import validate_tax_id, validate_business_registration_number
from validators.rules import IssueCollector, is_blank


MAX_LEGAL_NAME_LENGTH = 300
MSIC_PATTERN = re.compile(r'[0-9]{5}')


class SupplierValidator:
    """
    Supplier identity checks

    Validates:
    - SUP_001/SUP_002: TIN present and well formed
    - SUP_003/SUP_004: Legal name present, at most 300 characters
    - SUP_005-SUP_009: Postal address with street, city, postcode, country
    - SUP_010: Phone or email (recommended)
    - SUP_011/SUP_012: MSIC code recommended, exactly 5 digits when given
    - SUP_013: BRN well formed when given
    - SUP_014: TIN agrees with the TIN registered in e-invoice settings
    - SUP_P01: PEPPOL participant ID (network profile)
    """

    def validate(
        self,
        document: EInvoiceDocument,
        config: EngineConfig,
        profile: Profile,
        issues: IssueCollector,
    ) -> None:
        supplier = document.supplier

        # TIN
        if is_blank(supplier.tin):
            issues.add('SUP_001', 'supplier.tin', 'Supplier TIN is required')
        elif not validate_tax_id(supplier.tin):
            issues.add(
                'SUP_002',
                'supplier.tin',
                'Invalid TIN format. Expected format: C + 12 digits for company, IG + 10 digits for individual',
            )

        # Legal name
        if is_blank(supplier.legal_name):
            issues.add('SUP_003', 'supplier.legal_name', 'Supplier legal name is required')
        elif len(supplier.legal_name) > MAX_LEGAL_NAME_LENGTH:
            issues.add(
                'SUP_004',
                'supplier.legal_name',
                f'Supplier legal name must not exceed {MAX_LEGAL_NAME_LENGTH} characters',
            )

        self._check_address(document, issues)

        # Contact information (recommended)
        contact = supplier.contact
        if contact is None or (is_blank(contact.phone) and is_blank(contact.email)):
            issues.add(
                'SUP_010',
                'supplier.contact',
                'Supplier contact information (phone or email) is recommended',
            )

        # MSIC code
        if is_blank(supplier.msic_code):
            issues.add('SUP_011', 'supplier.msic_code', 'MSIC code is recommended for Malaysian businesses')
        elif not MSIC_PATTERN.fullmatch(supplier.msic_code):
            issues.add('SUP_012', 'supplier.msic_code', 'MSIC code must be a 5-digit number')

        if not is_blank(supplier.brn) and not validate_business_registration_number(supplier.brn):
            issues.add('SUP_013', 'supplier.brn', f'Invalid supplier BRN format: "{supplier.brn}"')

        self._check_registered_tin(document, config, issues)

        if profile == Profile.NETWORK and is_blank(supplier.peppol_id):
            issues.add(
                'SUP_P01',
                'supplier.peppol_id',
                'PEPPOL participant ID is required for PEPPOL invoices',
            )

    def _check_address(self, document: EInvoiceDocument, issues: IssueCollector) -> None:
        address = document.supplier.address

        if address is None:
            issues.add('SUP_005', 'supplier.address', 'Supplier address is required')
            return

        required = [
            ('SUP_006', 'street', 'Supplier street address is required'),
            ('SUP_007', 'city', 'Supplier city is required'),
            ('SUP_008', 'postcode', 'Supplier postcode is required'),
            ('SUP_009', 'country', 'Supplier country is required'),
        ]
        for code, name, message in required:
            if is_blank(getattr(address, name)):
                issues.add(code, f'supplier.address.{name}', message)

    def _check_registered_tin(
        self,
        document: EInvoiceDocument,
        config: EngineConfig,
        issues: IssueCollector,
    ) -> None:
        """Only compared when both TINs are well formed; SUP_002 covers the rest"""
        document_tin = document.supplier.tin
        registered_tin = config.supplier_tin

        if not validate_tax_id(document_tin) or not validate_tax_id(registered_tin):
            return

        if document_tin.strip().upper() != registered_tin.strip().upper():
            issues.add(
                'SUP_014',
                'supplier.tin',
                f'Supplier TIN {document_tin} differs from the TIN in e-invoice settings ({registered_tin})',
            )
