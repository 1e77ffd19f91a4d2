"""
Tax subtotal reconciliation
"""

from typing import Dict, Tuple

from models.config import EngineConfig
from models.invoice import EInvoiceDocument
from models.validation import Profile
from validators.rules import IssueCollector, amounts_differ, is_blank


class TaxSubtotalValidator:
    """
    Tax breakdown checks

    Validates:
    - TAX_001: Sum of line taxes vs declared total tax (warning, line rounding drift)
    - TAX_002: Sum of tax subtotals vs declared total tax (error, structural)
    - TAX_003: Each categorised subtotal's taxable amount vs its lines
    """

    def validate(
        self,
        document: EInvoiceDocument,
        config: EngineConfig,
        profile: Profile,
        issues: IssueCollector,
    ) -> None:
        total_tax = document.total_tax_amount

        line_tax = sum(item.tax_amount for item in document.items)
        if amounts_differ(total_tax, line_tax):
            issues.add(
                'TAX_001',
                'total_tax_amount',
                f'Total tax amount ({total_tax}) does not match sum of line item taxes ({line_tax:.2f})',
            )

        subtotal_tax = sum(subtotal.tax_amount for subtotal in document.tax_subtotals)
        if amounts_differ(total_tax, subtotal_tax):
            issues.add(
                'TAX_002',
                'tax_subtotals',
                f'Tax subtotals ({subtotal_tax:.2f}) do not match total tax amount ({total_tax})',
            )

        self._check_taxable_amounts(document, issues)

    def _check_taxable_amounts(self, document: EInvoiceDocument, issues: IssueCollector) -> None:
        """Subtotals without a tax category cannot be matched to lines and are skipped"""
        net_by_pair: Dict[Tuple[str, float], float] = {}
        for item in document.items:
            key = (item.tax_category or '', float(item.tax_rate))
            net_by_pair[key] = net_by_pair.get(key, 0.0) + item.line_net_amount

        for index, subtotal in enumerate(document.tax_subtotals):
            if is_blank(subtotal.tax_category):
                continue

            if subtotal.tax_rate is None:
                # Category-only subtotal: compare against every rate of that category
                expected = sum(
                    amount for (category, _), amount in net_by_pair.items()
                    if category == subtotal.tax_category
                )
                label = subtotal.tax_category
            else:
                expected = net_by_pair.get((subtotal.tax_category, float(subtotal.tax_rate)), 0.0)
                label = f'{subtotal.tax_category} at {subtotal.tax_rate}%'

            if amounts_differ(subtotal.taxable_amount, expected):
                issues.add(
                    'TAX_003',
                    f'tax_subtotals[{index}].taxable_amount',
                    f'Taxable amount for tax category {label} ({subtotal.taxable_amount}) '
                    f'does not match its line items ({expected:.2f})',
                )
