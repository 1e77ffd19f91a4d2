"""
Configuration management
"""

import os
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv

from models.config import EngineConfig
from models.validation import Profile
from validators.rules import SeverityPolicy

# Load environment variables
load_dotenv()


TRUTHY = {'1', 'true', 'yes', 'on'}


def default_config() -> Dict[str, Any]:
    """Configuration used when no config file is present"""
    return {
        'einvoice': {},
        'validation': {
            'profile': Profile.NATIONAL.value,
            'severity_overrides': {},
        },
    }


def load_config(config_path: str = "config.yaml") -> Dict[str, Any]:
    """Load configuration from YAML file, then apply environment overrides"""

    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_file) as f:
        config = yaml.safe_load(f) or {}

    return apply_env_overrides(config)


def apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Environment variables win over file values; the client secret is never kept"""

    einvoice = config.setdefault('einvoice', {}) or {}
    config['einvoice'] = einvoice
    validation = config.setdefault('validation', {}) or {}
    config['validation'] = validation

    if os.getenv('EINVOICE_ENABLED'):
        einvoice['enabled'] = os.getenv('EINVOICE_ENABLED').strip().lower() in TRUTHY
    if os.getenv('EINVOICE_ENVIRONMENT'):
        einvoice['environment'] = os.getenv('EINVOICE_ENVIRONMENT').strip().upper()
    if os.getenv('MYINVOIS_CLIENT_ID'):
        einvoice['myinvois_client_id'] = os.getenv('MYINVOIS_CLIENT_ID')
    if os.getenv('EINVOICE_SUPPLIER_TIN'):
        einvoice['supplier_tin'] = os.getenv('EINVOICE_SUPPLIER_TIN')
    if os.getenv('EINVOICE_PROFILE'):
        validation['profile'] = os.getenv('EINVOICE_PROFILE')

    secret = einvoice.pop('myinvois_client_secret', None) or os.getenv('MYINVOIS_CLIENT_SECRET')
    if secret:
        einvoice['has_client_secret'] = True

    return config


def load_engine_config(config: Dict[str, Any]) -> EngineConfig:
    return EngineConfig.model_validate(config.get('einvoice') or {})


def load_severity_policy(config: Dict[str, Any]) -> SeverityPolicy:
    validation = config.get('validation') or {}
    return SeverityPolicy(validation.get('severity_overrides') or {})


def get_profile(config: Dict[str, Any]) -> Profile:
    validation = config.get('validation') or {}
    return Profile(validation.get('profile') or Profile.NATIONAL.value)
