"""
Buyer identity validation
"""

from models.config import EngineConfig
from models.invoice import EInvoiceDocument
from models.validation import Profile
from utils.code_tables import ID_TYPE_CODES
from utils.validators import validate_tax_id, validate_business_registration_number
from validators.rules import IssueCollector, is_blank


class BuyerValidator:
    """
    Buyer identity checks

    Retail (B2C) sales often carry no buyer TIN, so a missing identifier is
    only a warning; a TIN that is present must still be well formed.
    """

    def validate(
        self,
        document: EInvoiceDocument,
        config: EngineConfig,
        profile: Profile,
        issues: IssueCollector,
    ) -> None:
        buyer = document.buyer

        if is_blank(buyer.name):
            issues.add('BUY_001', 'buyer.name', 'Buyer name is required')

        if is_blank(buyer.tin) and is_blank(buyer.id_value):
            issues.add('BUY_002', 'buyer.tin', 'Buyer TIN or ID is recommended for B2B transactions')

        if not is_blank(buyer.tin) and not validate_tax_id(buyer.tin):
            issues.add('BUY_003', 'buyer.tin', 'Invalid buyer TIN format')

        if not is_blank(buyer.brn) and not validate_business_registration_number(buyer.brn):
            issues.add('BUY_004', 'buyer.brn', f'Invalid buyer BRN format: "{buyer.brn}"')

        if not is_blank(buyer.id_type) and buyer.id_type.strip().upper() not in ID_TYPE_CODES:
            issues.add(
                'BUY_005',
                'buyer.id_type',
                f'Buyer ID type {buyer.id_type} is not in the standard list',
            )

        if profile == Profile.NETWORK and is_blank(buyer.peppol_id):
            issues.add(
                'BUY_P01',
                'buyer.peppol_id',
                'PEPPOL participant ID is required for PEPPOL invoices',
            )
