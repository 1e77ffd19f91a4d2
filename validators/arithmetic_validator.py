"""
Document totals and currency validation
"""

from models.config import EngineConfig
from models.invoice import EInvoiceDocument
from models.validation import Profile
from utils.code_tables import HOME_CURRENCY
from validators.rules import IssueCollector, amounts_differ


class TotalsValidator:
    """
    Totals chain checks

    line extension = sum(line net)
    tax exclusive  = line extension - allowances + charges
    tax inclusive  = tax exclusive + total tax
    payable        = tax inclusive (warning only; rounding adjustments allowed)
    """

    def validate(
        self,
        document: EInvoiceDocument,
        config: EngineConfig,
        profile: Profile,
        issues: IssueCollector,
    ) -> None:
        line_extension = sum(item.line_net_amount for item in document.items)
        if amounts_differ(document.line_extension_amount, line_extension):
            issues.add(
                'TOT_001',
                'line_extension_amount',
                f'Line extension amount ({document.line_extension_amount}) does not match '
                f'sum of line net amounts ({line_extension:.2f})',
            )

        expected_tax_exclusive = (
            document.line_extension_amount
            - (document.allowance_total_amount or 0)
            + (document.charge_total_amount or 0)
        )
        if amounts_differ(document.tax_exclusive_amount, expected_tax_exclusive):
            issues.add(
                'TOT_002',
                'tax_exclusive_amount',
                f'Tax exclusive amount ({document.tax_exclusive_amount}) does not match '
                f'line extension - allowances + charges ({expected_tax_exclusive:.2f})',
            )

        expected_tax_inclusive = document.tax_exclusive_amount + document.total_tax_amount
        if amounts_differ(document.tax_inclusive_amount, expected_tax_inclusive):
            issues.add(
                'TOT_003',
                'tax_inclusive_amount',
                f'Tax inclusive amount ({document.tax_inclusive_amount}) should equal '
                f'tax exclusive ({document.tax_exclusive_amount}) + tax ({document.total_tax_amount})',
            )

        if amounts_differ(document.payable_amount, document.tax_inclusive_amount):
            issues.add(
                'TOT_004',
                'payable_amount',
                f'Payable amount ({document.payable_amount}) differs from '
                f'tax inclusive amount ({document.tax_inclusive_amount})',
            )


class CurrencyValidator:
    """Exchange rate cross-check for documents not in the home currency"""

    def validate(
        self,
        document: EInvoiceDocument,
        config: EngineConfig,
        profile: Profile,
        issues: IssueCollector,
    ) -> None:
        rate = document.exchange_rate

        if document.is_foreign_currency(HOME_CURRENCY) and not rate:
            issues.add(
                'CURRENCY_001',
                'exchange_rate',
                f'Exchange rate is required for non-{HOME_CURRENCY} currency',
            )
        elif rate is not None and rate <= 0:
            issues.add('CURRENCY_002', 'exchange_rate', f'Exchange rate must be positive, got {rate}')
