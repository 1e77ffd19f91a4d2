"""
Line item validation
Presence, code list and per-line arithmetic checks
"""

from models.config import EngineConfig
from models.invoice import EInvoiceDocument, LineItem
from models.validation import Profile
from utils.code_tables import TAX_EXEMPTION_CODES, TAX_TYPE_CODES, UNIT_CODES
from validators.rules import IssueCollector, amounts_differ, is_blank


class LineItemValidator:
    """
    Line item checks

    Validates:
    - ITM_001: At least one line (remaining checks skipped when there are none)
    - ITM_002-ITM_009: Name, quantity, unit price, unit code, tax category, tax rate
    - ITM_010: Line net amount = quantity x unit price (error)
    - ITM_011: Tax amount = net x rate / 100 (warning, rounding conventions differ)
    - ITM_012/ITM_013: Exemption reason code for exempt categories
    """

    def validate(
        self,
        document: EInvoiceDocument,
        config: EngineConfig,
        profile: Profile,
        issues: IssueCollector,
    ) -> None:
        if not document.items:
            issues.add('ITM_001', 'items', 'At least one line item is required')
            return

        for index, item in enumerate(document.items):
            self._check_item(index, item, issues)

    def _check_item(self, index: int, item: LineItem, issues: IssueCollector) -> None:
        prefix = f'items[{index}]'
        line = index + 1

        if is_blank(item.product_name):
            issues.add('ITM_002', f'{prefix}.product_name', f'Line {line}: Product name is required')

        if item.quantity <= 0:
            issues.add('ITM_003', f'{prefix}.quantity', f'Line {line}: Quantity must be greater than 0')

        if item.unit_price < 0:
            issues.add('ITM_004', f'{prefix}.unit_price', f'Line {line}: Unit price cannot be negative')

        if is_blank(item.unit_code):
            issues.add('ITM_005', f'{prefix}.unit_code', f'Line {line}: Unit code is required')
        elif item.unit_code not in UNIT_CODES:
            issues.add(
                'ITM_006',
                f'{prefix}.unit_code',
                f'Line {line}: Unit code {item.unit_code} is not in the standard list',
            )

        if is_blank(item.tax_category):
            issues.add('ITM_007', f'{prefix}.tax_category', f'Line {line}: Tax category is required')
        elif item.tax_category not in TAX_TYPE_CODES:
            issues.add(
                'ITM_008',
                f'{prefix}.tax_category',
                f'Line {line}: Tax category {item.tax_category} is not in the standard list',
            )

        if item.tax_rate < 0 or item.tax_rate > 100:
            issues.add('ITM_009', f'{prefix}.tax_rate', f'Line {line}: Tax rate must be between 0 and 100')

        expected_net = item.quantity * item.unit_price
        if amounts_differ(item.line_net_amount, expected_net):
            issues.add(
                'ITM_010',
                f'{prefix}.line_net_amount',
                f'Line {line}: Line net amount ({item.line_net_amount}) does not match '
                f'quantity * unit price ({expected_net})',
            )

        expected_tax = item.line_net_amount * (item.tax_rate / 100)
        if amounts_differ(item.tax_amount, expected_tax):
            issues.add(
                'ITM_011',
                f'{prefix}.tax_amount',
                f'Line {line}: Tax amount ({item.tax_amount}) may not match '
                f'expected calculation ({expected_tax:.2f})',
            )

        self._check_exemption(prefix, line, item, issues)

    def _check_exemption(self, prefix: str, line: int, item: LineItem, issues: IssueCollector) -> None:
        tax_type = TAX_TYPE_CODES.get(item.tax_category or '')
        reason_code = item.tax_exemption_reason_code

        if tax_type is not None and tax_type.exempt and is_blank(reason_code):
            issues.add(
                'ITM_012',
                f'{prefix}.tax_exemption_reason_code',
                f'Line {line}: Tax exemption reason code is recommended for exempt items',
            )
        elif not is_blank(reason_code) and reason_code not in TAX_EXEMPTION_CODES:
            issues.add(
                'ITM_013',
                f'{prefix}.tax_exemption_reason_code',
                f'Line {line}: Tax exemption reason code {reason_code} is not in the standard list',
            )
