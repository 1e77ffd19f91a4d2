"""
Static code lists for LHDN MyInvois and PEPPOL BIS Billing 3.0

Every table maps a code to its descriptor. Membership is the only lookup;
unrecognised codes are reported by the rule checkers as warnings.
"""

import re
from typing import NamedTuple


HOME_CURRENCY = "MYR"


class DocumentTypeVersion(NamedTuple):
    code: str
    version: str


class TaxType(NamedTuple):
    name: str
    description: str
    exempt: bool = False


class CodeDescriptor(NamedTuple):
    name: str
    description: str


class Currency(NamedTuple):
    name: str
    symbol: str


DOCUMENT_TYPE_VERSIONS = {
    'INVOICE': DocumentTypeVersion('01', '1.0'),
    'CREDIT_NOTE': DocumentTypeVersion('02', '1.0'),
    'DEBIT_NOTE': DocumentTypeVersion('03', '1.0'),
    'REFUND_NOTE': DocumentTypeVersion('04', '1.0'),
    'SELF_BILLED_INVOICE': DocumentTypeVersion('11', '1.0'),
    'SELF_BILLED_CREDIT_NOTE': DocumentTypeVersion('12', '1.0'),
    'SELF_BILLED_DEBIT_NOTE': DocumentTypeVersion('13', '1.0'),
    'SELF_BILLED_REFUND_NOTE': DocumentTypeVersion('14', '1.0'),
}

# LHDN tax types
TAX_TYPE_CODES = {
    '01': TaxType('Sales Tax', 'Sales tax on goods'),
    '02': TaxType('Service Tax', 'Service tax'),
    '03': TaxType('Tourism Tax', 'Tourism tax'),
    '04': TaxType('High-Value Goods Tax', 'Tax on high-value goods'),
    '05': TaxType('Sales Tax on Low Value Goods', 'Sales tax on imported low value goods'),
    '06': TaxType('Not Applicable', 'Tax not applicable', exempt=True),
    'E': TaxType('Tax Exempt', 'Exempt from tax', exempt=True),
}

TAX_EXEMPTION_CODES = {
    'TEXS-EX01': 'Goods subject to exemption under Schedule A, Sales Tax (Persons Exempted from Payment of Tax) Order 2018',
    'TEXS-EX02': 'Goods subject to exemption under Schedule B, Sales Tax (Persons Exempted from Payment of Tax) Order 2018',
    'TEXS-EX03': 'Goods subject to exemption under Schedule C, Sales Tax (Persons Exempted from Payment of Tax) Order 2018',
    'TEXS-EX04': 'Goods exempted under Sales Tax Act 2018, Section 35',
    'TEXR-EX01': 'Services exempted under Service Tax Act 2018, First Schedule',
    'TEXR-EX02': 'Services exempted under Service Tax Act 2018, Section 34',
    'ZRL-EX01': 'Zero-rated supply',
    'OSS-EX01': 'Out of scope supply',
}

# UNECE Recommendation 20 (common subset)
UNIT_CODES = {
    'C62': CodeDescriptor('One (Unit)', 'Unit/Piece'),
    'EA': CodeDescriptor('Each', 'Each'),
    'HR': CodeDescriptor('Hour', 'Hour'),
    'DAY': CodeDescriptor('Day', 'Day'),
    'MON': CodeDescriptor('Month', 'Month'),
    'ANN': CodeDescriptor('Year', 'Year'),
    'KGM': CodeDescriptor('Kilogram', 'Kilogram'),
    'GRM': CodeDescriptor('Gram', 'Gram'),
    'LTR': CodeDescriptor('Litre', 'Litre'),
    'MLT': CodeDescriptor('Millilitre', 'Millilitre'),
    'MTR': CodeDescriptor('Metre', 'Metre'),
    'CMT': CodeDescriptor('Centimetre', 'Centimetre'),
    'MTK': CodeDescriptor('Square metre', 'Square metre'),
    'MTQ': CodeDescriptor('Cubic metre', 'Cubic metre'),
    'SET': CodeDescriptor('Set', 'Set'),
    'PR': CodeDescriptor('Pair', 'Pair'),
    'BX': CodeDescriptor('Box', 'Box'),
    'PK': CodeDescriptor('Pack', 'Pack'),
    'CT': CodeDescriptor('Carton', 'Carton'),
    'LS': CodeDescriptor('Lump Sum', 'Lump sum'),
}

ID_TYPE_CODES = {
    'NRIC': CodeDescriptor('NRIC', 'Malaysian National ID'),
    'PASSPORT': CodeDescriptor('Passport', 'Passport number'),
    'BRN': CodeDescriptor('BRN', 'Business Registration Number'),
    'ARMY': CodeDescriptor('Army ID', 'Army identification number'),
    'TIN': CodeDescriptor('TIN', 'Tax Identification Number'),
}

# ISO 4217
CURRENCY_CODES = {
    'MYR': Currency('Malaysian Ringgit', 'RM'),
    'USD': Currency('US Dollar', '$'),
    'EUR': Currency('Euro', '€'),
    'GBP': Currency('British Pound', '£'),
    'SGD': Currency('Singapore Dollar', 'S$'),
    'AUD': Currency('Australian Dollar', 'A$'),
    'JPY': Currency('Japanese Yen', '¥'),
    'CNY': Currency('Chinese Yuan', '¥'),
}

# ISO 3166-1 alpha-2
COUNTRY_CODES = {
    'MY': 'Malaysia',
    'SG': 'Singapore',
    'ID': 'Indonesia',
    'TH': 'Thailand',
    'PH': 'Philippines',
    'VN': 'Vietnam',
    'US': 'United States',
    'GB': 'United Kingdom',
    'AU': 'Australia',
    'JP': 'Japan',
    'CN': 'China',
    'IN': 'India',
}

MALAYSIAN_STATE_CODES = {
    '01': 'Johor',
    '02': 'Kedah',
    '03': 'Kelantan',
    '04': 'Melaka',
    '05': 'Negeri Sembilan',
    '06': 'Pahang',
    '07': 'Pulau Pinang',
    '08': 'Perak',
    '09': 'Perlis',
    '10': 'Selangor',
    '11': 'Terengganu',
    '12': 'Sabah',
    '13': 'Sarawak',
    '14': 'Wilayah Persekutuan Kuala Lumpur',
    '15': 'Wilayah Persekutuan Labuan',
    '16': 'Wilayah Persekutuan Putrajaya',
}

# UN/CEFACT 4461
PAYMENT_MEANS_CODES = {
    '01': 'Instrument not defined',
    '10': 'In cash',
    '20': 'Cheque',
    '30': 'Credit transfer',
    '42': 'Payment to bank account',
    '48': 'Bank card',
    '49': 'Direct debit',
    '57': 'Standing agreement',
    '58': 'SEPA credit transfer',
    '59': 'SEPA direct debit',
}

PEPPOL_CONSTANTS = {
    'CUSTOMIZATION_ID': 'urn:cen.eu:en16931:2017#compliant#urn:fdc:peppol.eu:2017:poacc:billing:3.0',
    'PROFILE_ID': 'urn:fdc:peppol.eu:2017:poacc:billing:01:1.0',
    'MALAYSIA_SCHEME_ID': '0195',
}

# ASCII digits only; callers use fullmatch
TIN_PATTERNS = {
    'MALAYSIA_COMPANY': re.compile(r'C[0-9]{12}'),
    'MALAYSIA_INDIVIDUAL': re.compile(r'IG[0-9]{10}'),
    'MALAYSIA_GOVERNMENT': re.compile(r'G[0-9]{12}'),
    'MALAYSIA_PARTNERSHIP': re.compile(r'D[0-9]{12}'),
    'MALAYSIA_GENERAL': re.compile(r'(?:IG|[CDGFI])[0-9]{10,12}'),
}

BRN_PATTERNS = {
    'NEW_FORMAT': re.compile(r'[0-9]{12}'),
    'OLD_FORMAT': re.compile(r'[A-Z]{2}[0-9]{4,7}'),
    'ROC': re.compile(r'[0-9]{6,7}-[A-Z]'),
    'LLP': re.compile(r'LLP[0-9]{7}-[A-Z]{3}'),
}
