"""
E-invoice readiness pre-check

Presence-only check for drafts that cannot yet be assembled into a full
document. Returns short sentences for direct display in settings and
onboarding screens; amounts are never reconciled here.
"""

from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from models.config import EngineConfig
from models.invoice import Buyer, Supplier
from models.validation import Profile, ReadinessResult
from validators.rules import is_blank


ModelT = TypeVar('ModelT', bound=BaseModel)


def _coerce(value: Union[ModelT, Mapping[str, Any], None], model: Type[ModelT]) -> ModelT:
    if value is None:
        return model()
    if isinstance(value, model):
        return value
    return model.model_validate(value)


def quick_readiness_check(
    supplier: Union[Supplier, Mapping[str, Any], None],
    buyer: Union[Buyer, Mapping[str, Any], None],
    item_count: int,
    config: Union[EngineConfig, Mapping[str, Any], None],
    profile: Optional[Union[Profile, str]] = Profile.NATIONAL,
) -> ReadinessResult:
    """
    Quick check for e-invoice readiness

    The client secret counts as configured when the settings carry
    has_client_secret=True or a non-blank myinvois_client_secret
    (myinvoisClientSecret) value; the value itself is discarded.

    Usage:
        result = quick_readiness_check(company, customer, len(items), settings)
        if not result.ready:
            for issue in result.issues:
                flash(issue)
    """
    supplier = _coerce(supplier, Supplier)
    buyer = _coerce(buyer, Buyer)
    config = _coerce(config, EngineConfig)
    profile = Profile(profile or Profile.NATIONAL)

    issues = []

    # Settings
    if not config.enabled:
        issues.append('E-Invoice is not enabled')
    if is_blank(config.myinvois_client_id):
        issues.append('MyInvois Client ID is not configured')
    if not config.has_client_secret:
        issues.append('MyInvois Client Secret is not configured')
    if is_blank(config.supplier_tin):
        issues.append('Supplier TIN is not configured')
    if profile == Profile.NETWORK and is_blank(config.peppol_participant_id):
        issues.append('PEPPOL participant ID is not configured')

    # Company
    address = supplier.address
    if is_blank(supplier.legal_name):
        issues.append('Company legal name is missing')
    if address is None or is_blank(address.street):
        issues.append('Company street address is missing')
    if address is None or is_blank(address.city):
        issues.append('Company city is missing')
    if address is None or is_blank(address.postcode):
        issues.append('Company postcode is missing')

    # Customer
    if is_blank(buyer.name):
        issues.append('Customer name is missing')

    if not item_count or item_count <= 0:
        issues.append('Invoice must have at least one item')

    return ReadinessResult(ready=not issues, issues=issues)
