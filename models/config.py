"""
E-invoice configuration owned by the company settings module
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from utils.code_tables import PEPPOL_CONSTANTS


class Environment(str, Enum):
    SANDBOX = "SANDBOX"
    PRODUCTION = "PRODUCTION"


class EngineConfig(BaseModel):
    """Read-only settings consulted by the checkers and the readiness pre-check"""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    enabled: bool = False
    environment: Environment = Environment.SANDBOX

    # MyInvois credentials; the secret itself never reaches the engine
    myinvois_client_id: Optional[str] = None
    has_client_secret: bool = False

    # Supplier's registered identifiers
    supplier_tin: Optional[str] = None
    supplier_brn: Optional[str] = None
    sst_registration_number: Optional[str] = None
    tourism_tax_number: Optional[str] = None

    default_currency_code: str = "MYR"
    auto_submit_on_send: bool = False

    # PEPPOL
    peppol_participant_id: Optional[str] = None
    peppol_scheme_id: Optional[str] = PEPPOL_CONSTANTS['MALAYSIA_SCHEME_ID']

    @model_validator(mode='before')
    @classmethod
    def _reduce_client_secret(cls, data):
        """Settings shaped like the stored record carry the secret itself; keep only its presence"""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        secrets = [data.pop(key, None) for key in ('myinvois_client_secret', 'myinvoisClientSecret')]
        if any(isinstance(secret, str) and secret.strip() for secret in secrets):
            data['has_client_secret'] = True
        return data
