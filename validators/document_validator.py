"""
Document header validation
Invoice number, issue date, currency and payment means
"""

from datetime import date, datetime
from typing import Optional, Union

from models.config import EngineConfig
from models.invoice import EInvoiceDocument
from models.validation import Profile
from utils.code_tables import CURRENCY_CODES, PAYMENT_MEANS_CODES
from validators.rules import IssueCollector


MAX_INVOICE_NUMBER_LENGTH = 50


def parse_issue_date(value: Union[date, str, None]) -> Optional[date]:
    """Parse an ISO 8601 date or date-time; None when unparseable"""
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
    except ValueError:
        return None


class DocumentHeaderValidator:
    """
    Document header checks

    Validates:
    - DOC_001/DOC_002: Invoice number present and at most 50 characters
    - DOC_003/DOC_004: Issue date present and a real calendar date
    - DOC_005/DOC_006: Currency code present and in the ISO 4217 list
    - DOC_008: Payment means code in the UN/CEFACT list
    """

    def validate(
        self,
        document: EInvoiceDocument,
        config: EngineConfig,
        profile: Profile,
        issues: IssueCollector,
    ) -> None:
        self._check_invoice_number(document, issues)
        self._check_issue_date(document, issues)
        self._check_currency(document, issues)
        self._check_payment_means(document, issues)

    def _check_invoice_number(self, document: EInvoiceDocument, issues: IssueCollector) -> None:
        invoice_number = document.invoice_number

        if not invoice_number or not invoice_number.strip():
            issues.add('DOC_001', 'invoice_number', 'Invoice number is required')
        elif len(invoice_number) > MAX_INVOICE_NUMBER_LENGTH:
            issues.add(
                'DOC_002',
                'invoice_number',
                f'Invoice number must not exceed {MAX_INVOICE_NUMBER_LENGTH} characters',
            )

    def _check_issue_date(self, document: EInvoiceDocument, issues: IssueCollector) -> None:
        issue_date = document.issue_date

        if issue_date is None or (isinstance(issue_date, str) and not issue_date.strip()):
            issues.add('DOC_003', 'issue_date', 'Issue date is required')
        elif parse_issue_date(issue_date) is None:
            issues.add('DOC_004', 'issue_date', f'Invalid issue date format: "{issue_date}"')

    def _check_currency(self, document: EInvoiceDocument, issues: IssueCollector) -> None:
        currency_code = document.currency_code

        if not currency_code:
            issues.add('DOC_005', 'currency_code', 'Currency code is required')
        elif currency_code not in CURRENCY_CODES:
            issues.add(
                'DOC_006',
                'currency_code',
                f'Currency code {currency_code} is not in the standard list',
            )

    def _check_payment_means(self, document: EInvoiceDocument, issues: IssueCollector) -> None:
        payment_means = document.payment_means
        if payment_means is None or not payment_means.code:
            return

        if payment_means.code not in PAYMENT_MEANS_CODES:
            issues.add(
                'DOC_008',
                'payment_means.code',
                f'Payment means code {payment_means.code} is not in the standard list',
            )


class NoteReferenceValidator:
    """Credit, debit and refund notes must point at the document they adjust"""

    def validate(
        self,
        document: EInvoiceDocument,
        config: EngineConfig,
        profile: Profile,
        issues: IssueCollector,
    ) -> None:
        if not document.is_adjustment_note():
            return

        reference = document.original_invoice_ref
        if not reference or not reference.strip():
            issues.add(
                'DOC_007',
                'original_invoice_ref',
                f'Original invoice reference is required for {document.document_type.value}',
            )
