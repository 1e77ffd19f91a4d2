"""
Shared builders for canonical e-invoice documents
"""

import pytest

from models.config import EngineConfig
from models.invoice import Address, Buyer, EInvoiceDocument, LineItem, Supplier, TaxSubtotal
from models.validation import Profile
from validators.rules import IssueCollector, SeverityPolicy


def make_item(**overrides) -> LineItem:
    data = dict(
        line_number=1,
        product_name="Consulting services",
        quantity=1,
        unit_code="C62",
        unit_price=100.0,
        line_net_amount=100.0,
        tax_category="01",
        tax_rate=0.0,
        tax_amount=0.0,
    )
    data.update(overrides)
    return LineItem(**data)


def make_supplier(**overrides) -> Supplier:
    data = dict(
        tin="C123456789012",
        legal_name="Syarikat Contoh Sdn Bhd",
        address=Address(
            street="12 Jalan Ampang",
            city="Kuala Lumpur",
            postcode="50450",
            state="14",
            country="MY",
        ),
    )
    data.update(overrides)
    return Supplier(**data)


def make_document(**overrides) -> EInvoiceDocument:
    """Minimal valid document: one 100.00 line at 0% tax with a matching totals chain"""
    data = dict(
        invoice_number="INV-2024-0001",
        issue_date="2024-09-15",
        currency_code="MYR",
        supplier=make_supplier(),
        buyer=Buyer(name="Pelanggan Runcit", tin="IG1234567890"),
        items=[make_item()],
        line_extension_amount=100.0,
        tax_exclusive_amount=100.0,
        tax_inclusive_amount=100.0,
        payable_amount=100.0,
        total_tax_amount=0.0,
        tax_subtotals=[TaxSubtotal(taxable_amount=100.0, tax_amount=0.0)],
    )
    data.update(overrides)
    return EInvoiceDocument(**data)


@pytest.fixture
def valid_document() -> EInvoiceDocument:
    return make_document()


@pytest.fixture
def document_factory():
    return make_document


@pytest.fixture
def item_factory():
    return make_item


@pytest.fixture
def supplier_factory():
    return make_supplier


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig(
        enabled=True,
        myinvois_client_id="client-123",
        has_client_secret=True,
        supplier_tin="C123456789012",
    )


@pytest.fixture
def run_checker(config):
    """Run a single checker and return its ValidationResult"""

    def run(checker, document, profile=Profile.NATIONAL, engine_config=None, policy=None):
        issues = IssueCollector(profile, policy or SeverityPolicy())
        checker.validate(document, engine_config or config, profile, issues)
        return issues.result()

    return run
