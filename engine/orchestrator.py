"""
Validation Orchestrator
Runs every rule checker in a fixed order and assembles the ValidationResult
"""

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from models.config import EngineConfig
from models.invoice import EInvoiceDocument
from models.validation import Profile, ValidationResult
from validators.arithmetic_validator import CurrencyValidator, TotalsValidator
from validators.buyer_validator import BuyerValidator
from validators.document_validator import DocumentHeaderValidator, NoteReferenceValidator
from validators.line_item_validator import LineItemValidator
from validators.rules import IssueCollector, SeverityPolicy
from validators.supplier_validator import SupplierValidator
from validators.tax_validator import TaxSubtotalValidator


logger = logging.getLogger(__name__)


class ValidationContractError(TypeError, ValueError):
    """Raised for invalid calls (missing document, unknown profile), never for bad data"""


class ValidationOrchestrator:
    """
    Orchestrator

    Coordinates the validation workflow:
    1. Coerce inputs into the canonical models
    2. Run header -> note reference -> supplier -> buyer -> items -> tax -> totals -> currency
    3. Collect issues into ordered error and warning lists
    4. Return one immutable ValidationResult

    Holds no per-document state; one instance can validate any number of
    documents, including concurrently.
    """

    def __init__(self, severity_policy: Optional[SeverityPolicy] = None):
        self.severity_policy = severity_policy or SeverityPolicy()

        self.checkers = (
            DocumentHeaderValidator(),
            NoteReferenceValidator(),
            SupplierValidator(),
            BuyerValidator(),
            LineItemValidator(),
            TaxSubtotalValidator(),
            TotalsValidator(),
            CurrencyValidator(),
        )

    def validate(
        self,
        document: Union[EInvoiceDocument, Mapping[str, Any]],
        config: Union[EngineConfig, Mapping[str, Any], None] = None,
        profile: Union[Profile, str] = Profile.NATIONAL,
    ) -> ValidationResult:
        """
        Validate a fully computed e-invoice document

        Args:
            document: Canonical document (or its dict/JSON-shaped form)
            config: E-invoice settings; defaults are used when omitted
            profile: NATIONAL (LHDN) or NETWORK (PEPPOL)

        Raises:
            ValidationContractError: document missing or not a document,
                profile unknown
        """
        document = self._coerce_document(document)
        config = self._coerce_config(config)
        profile = self._coerce_profile(profile)

        issues = IssueCollector(profile, self.severity_policy)
        for checker in self.checkers:
            checker.validate(document, config, profile, issues)

        result = issues.result()

        logger.debug(
            "Validated %s (%s): %d errors, %d warnings",
            document.invoice_number or '<no number>',
            profile.value,
            len(result.errors),
            len(result.warnings),
        )
        return result

    def _coerce_document(self, document) -> EInvoiceDocument:
        if document is None:
            raise ValidationContractError("document is required")
        if isinstance(document, EInvoiceDocument):
            return document
        if not isinstance(document, Mapping):
            raise ValidationContractError(
                f"document must be an EInvoiceDocument or mapping, got {type(document).__name__}"
            )

        try:
            return EInvoiceDocument.model_validate(document)
        except ValidationError as e:
            raise ValidationContractError(f"document is not a canonical e-invoice: {e}") from e

    def _coerce_config(self, config) -> EngineConfig:
        if config is None:
            return EngineConfig()
        if isinstance(config, EngineConfig):
            return config

        try:
            return EngineConfig.model_validate(config)
        except ValidationError as e:
            raise ValidationContractError(f"config is not a valid e-invoice configuration: {e}") from e

    def _coerce_profile(self, profile) -> Profile:
        try:
            return Profile(profile)
        except ValueError as e:
            raise ValidationContractError(f"unknown validation profile: {profile!r}") from e


def validate_einvoice(
    document: Union[EInvoiceDocument, Mapping[str, Any]],
    config: Union[EngineConfig, Mapping[str, Any], None] = None,
    profile: Union[Profile, str] = Profile.NATIONAL,
) -> ValidationResult:
    """
    Quick validation function

    Usage:
        result = validate_einvoice(document, settings, 'NATIONAL')
        if result.is_valid:
            submit(document)
        else:
            print(f"Validation errors: {result.error_codes}")
    """
    return ValidationOrchestrator().validate(document, config, profile)
