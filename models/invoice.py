"""
Canonical e-invoice document model using Pydantic

One immutable shape for invoices, credit/debit/refund notes and their
self-billed variants. Every field has a default so that an incomplete
document can still be built and reported on by the validation engine.
"""

from datetime import date
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CanonicalModel(BaseModel):
    """Frozen base model; accepts camelCase keys from JSON payloads"""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,  # amounts must be finite
    )


class DocumentType(str, Enum):
    INVOICE = "INVOICE"
    CREDIT_NOTE = "CREDIT_NOTE"
    DEBIT_NOTE = "DEBIT_NOTE"
    REFUND_NOTE = "REFUND_NOTE"
    SELF_BILLED_INVOICE = "SELF_BILLED_INVOICE"
    SELF_BILLED_CREDIT_NOTE = "SELF_BILLED_CREDIT_NOTE"
    SELF_BILLED_DEBIT_NOTE = "SELF_BILLED_DEBIT_NOTE"
    SELF_BILLED_REFUND_NOTE = "SELF_BILLED_REFUND_NOTE"


ADJUSTMENT_NOTE_TYPES = frozenset({
    DocumentType.CREDIT_NOTE,
    DocumentType.DEBIT_NOTE,
    DocumentType.REFUND_NOTE,
    DocumentType.SELF_BILLED_CREDIT_NOTE,
    DocumentType.SELF_BILLED_DEBIT_NOTE,
    DocumentType.SELF_BILLED_REFUND_NOTE,
})


class Address(CanonicalModel):
    street: Optional[str] = None
    city: Optional[str] = None
    postcode: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None  # ISO 3166-1 alpha-2


class Contact(CanonicalModel):
    phone: Optional[str] = None
    email: Optional[str] = None


class Supplier(CanonicalModel):
    """Seller party"""
    tin: Optional[str] = None
    brn: Optional[str] = None
    sst_number: Optional[str] = None
    ttx_number: Optional[str] = None
    legal_name: Optional[str] = None
    trading_name: Optional[str] = None
    address: Optional[Address] = None
    contact: Optional[Contact] = None
    msic_code: Optional[str] = None  # Malaysian Standard Industrial Classification

    # PEPPOL
    peppol_id: Optional[str] = None
    peppol_scheme: Optional[str] = None


class Buyer(CanonicalModel):
    """Buyer party; TIN is optional for B2C sales"""
    tin: Optional[str] = None
    brn: Optional[str] = None
    id_type: Optional[str] = None  # NRIC, PASSPORT, BRN, ARMY, TIN
    id_value: Optional[str] = None
    name: Optional[str] = None
    address: Optional[Address] = None
    contact: Optional[Contact] = None

    # PEPPOL
    peppol_id: Optional[str] = None
    peppol_scheme: Optional[str] = None


class LineItem(CanonicalModel):
    """Individual invoice line"""
    line_number: int = 0
    product_name: Optional[str] = None
    product_description: Optional[str] = None
    quantity: float = 0.0
    unit_code: Optional[str] = None  # UNECE Rec 20
    unit_price: float = 0.0
    line_net_amount: float = 0.0
    tax_category: Optional[str] = None
    tax_rate: float = 0.0
    tax_amount: float = 0.0

    # Optional fields
    tax_exemption_reason_code: Optional[str] = None
    tax_exemption_reason: Optional[str] = None
    classification_code: Optional[str] = None
    classification_scheme: Optional[str] = None


class TaxSubtotal(CanonicalModel):
    """Aggregated amounts for one (tax category, tax rate) pair"""
    taxable_amount: float = 0.0
    tax_amount: float = 0.0
    tax_category: Optional[str] = None
    tax_rate: Optional[float] = None
    tax_exemption_reason_code: Optional[str] = None
    tax_exemption_reason: Optional[str] = None


class PaymentMeans(CanonicalModel):
    code: Optional[str] = None
    financial_account_id: Optional[str] = None
    financial_account_name: Optional[str] = None


class EInvoiceDocument(CanonicalModel):
    """Complete e-invoice document, all derived amounts already computed"""

    # Document identification
    document_type: DocumentType = DocumentType.INVOICE
    document_version: str = "1.0"
    invoice_number: str = ""
    issue_date: Optional[Union[date, str]] = None  # ISO 8601
    issue_time: Optional[str] = None
    due_date: Optional[Union[date, str]] = None

    # Currency
    currency_code: Optional[str] = "MYR"
    exchange_rate: Optional[float] = None

    # Parties
    supplier: Supplier = Field(default_factory=Supplier)
    buyer: Buyer = Field(default_factory=Buyer)

    items: List[LineItem] = Field(default_factory=list)

    # Totals
    line_extension_amount: float = 0.0
    tax_exclusive_amount: float = 0.0
    tax_inclusive_amount: float = 0.0
    allowance_total_amount: Optional[float] = None
    charge_total_amount: Optional[float] = None
    payable_amount: float = 0.0

    # Tax breakdown
    tax_subtotals: List[TaxSubtotal] = Field(default_factory=list)
    total_tax_amount: float = 0.0

    # Payment information
    payment_means: Optional[PaymentMeans] = None
    payment_terms: Optional[str] = None

    notes: List[str] = Field(default_factory=list)

    # References
    original_invoice_ref: Optional[str] = None  # credit/debit/refund notes
    internal_id: Optional[str] = None

    def is_adjustment_note(self) -> bool:
        """Credit, debit and refund notes (self-billed included)"""
        return self.document_type in ADJUSTMENT_NOTE_TYPES

    def is_foreign_currency(self, home_currency: str = "MYR") -> bool:
        return self.currency_code != home_currency
