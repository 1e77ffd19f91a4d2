"""
Validation Reporter
Generates console, JSON and batch reports for validation results
"""

import json
from datetime import datetime
from typing import Dict, List, Mapping, Optional

import pandas as pd

from models.invoice import Address, EInvoiceDocument
from models.validation import Profile, ValidationIssue, ValidationResult
from utils.code_tables import COUNTRY_CODES, MALAYSIAN_STATE_CODES, PEPPOL_CONSTANTS


ISSUE_COLUMNS = ['document', 'code', 'field', 'category', 'severity', 'message']


class ValidationReporter:
    """
    Reporter

    Generates reports in various formats:
    - Console (colored text)
    - JSON (machine readable)
    - Batch summary and a pandas issue table for per-code analytics
    """

    def __init__(self, color: bool = True):
        self.colors = {
            'green': '\033[92m',
            'red': '\033[91m',
            'yellow': '\033[93m',
            'gray': '\033[90m',
            'bold': '\033[1m',
            'reset': '\033[0m'
        }
        if not color:
            self.colors = {name: '' for name in self.colors}

    def generate_console_report(
        self,
        document: EInvoiceDocument,
        result: ValidationResult,
        profile: Profile = Profile.NATIONAL,
        timestamp: Optional[datetime] = None,
    ) -> str:
        """Generate detailed console report with colors"""
        c = self.colors
        lines = []

        lines.append("=" * 80)
        lines.append(f"{c['bold']}E-INVOICE VALIDATION REPORT{c['reset']}")
        lines.append("=" * 80)
        lines.append("")

        lines.append(f"{c['bold']}Document Details:{c['reset']}")
        lines.append(f"  Type: {document.document_type.value}")
        lines.append(f"  Number: {document.invoice_number or '-'}")
        lines.append(f"  Issue Date: {document.issue_date or '-'}")
        lines.append(f"  Payable: {document.currency_code or ''} {document.payable_amount:,.2f}")
        lines.append(f"  Supplier: {document.supplier.legal_name or '-'} ({document.supplier.tin or 'no TIN'})")
        lines.append(f"  Supplier Address: {self._describe_address(document.supplier.address)}")
        lines.append(f"  Buyer: {document.buyer.name or '-'}")
        lines.append(f"  Profile: {profile.value}")
        lines.append("")

        status = 'VALID' if result.is_valid else 'INVALID'
        status_color = c['green'] if result.is_valid else c['red']
        lines.append(f"{c['bold']}Overall Status:{c['reset']} {status_color}{status}{c['reset']}")
        lines.append(f"  Errors: {c['red']}{result.summary.total_errors}{c['reset']}")
        lines.append(f"  Warnings: {c['yellow']}{result.summary.total_warnings}{c['reset']}")
        for category, count in result.summary.by_category.items():
            lines.append(f"    {category}: {count}")
        lines.append("")

        if result.errors:
            lines.append("-" * 80)
            lines.append(f"{c['red']}{c['bold']}ERRORS ({len(result.errors)}){c['reset']}")
            lines.append("-" * 80)
            lines.extend(self._format_issue(issue, '✗', c['red']) for issue in result.errors)
            lines.append("")

        if result.warnings:
            lines.append("-" * 80)
            lines.append(f"{c['yellow']}{c['bold']}WARNINGS ({len(result.warnings)}){c['reset']}")
            lines.append("-" * 80)
            lines.extend(self._format_issue(issue, '⚠', c['yellow']) for issue in result.warnings)
            lines.append("")

        timestamp = timestamp or datetime.now()
        lines.append("=" * 80)
        lines.append(f"Report generated: {timestamp.strftime('%Y-%m-%d %H:%M:%S')}")
        lines.append("=" * 80)

        return "\n".join(lines)

    def generate_json_report(
        self,
        document: EInvoiceDocument,
        result: ValidationResult,
        profile: Profile = Profile.NATIONAL,
    ) -> str:
        """Generate JSON report"""
        report = {
            'document': {
                'type': document.document_type.value,
                'number': document.invoice_number,
                'issue_date': str(document.issue_date) if document.issue_date else None,
                'currency': document.currency_code,
                'payable_amount': document.payable_amount,
                'supplier_tin': document.supplier.tin,
            },
            'profile': profile.value,
            'validation': result.model_dump(mode='json'),
        }
        if profile == Profile.NETWORK:
            report['peppol'] = {
                'customization_id': PEPPOL_CONSTANTS['CUSTOMIZATION_ID'],
                'profile_id': PEPPOL_CONSTANTS['PROFILE_ID'],
                'supplier_endpoint': document.supplier.peppol_id,
                'buyer_endpoint': document.buyer.peppol_id,
            }
        return json.dumps(report, indent=2, ensure_ascii=False)

    def generate_summary_report(self, results: Mapping[str, ValidationResult]) -> str:
        """Generate executive summary for batch validation"""
        c = self.colors
        total = len(results)
        valid = sum(1 for result in results.values() if result.is_valid)
        frame = self.issues_frame(results)

        lines = []
        lines.append("=" * 80)
        lines.append(f"{c['bold']}BATCH VALIDATION SUMMARY{c['reset']}")
        lines.append("=" * 80)
        lines.append("")
        lines.append(f"  Total Documents: {total}")
        lines.append(f"  Valid: {c['green']}{valid}{c['reset']}")
        lines.append(f"  Invalid: {c['red']}{total - valid}{c['reset']}")

        pass_rate = valid / total * 100 if total > 0 else 0
        lines.append(f"  Pass Rate: {pass_rate:.1f}%")
        lines.append("")

        if not frame.empty:
            lines.append(f"{c['bold']}Most Frequent Issues:{c['reset']}")
            top = self.code_counts(frame).head(10)
            for code, severity, count in top.itertuples(index=False, name=None):
                lines.append(f"  {code:<14s} {severity:<8s} {int(count):>4d}")
            lines.append("")

        lines.append("=" * 80)
        return "\n".join(lines)

    def issues_frame(self, results: Mapping[str, ValidationResult]) -> pd.DataFrame:
        """One row per issue across a batch, keyed by document name"""
        rows: List[Dict[str, str]] = []
        for name, result in results.items():
            for issue in result.errors + result.warnings:
                rows.append({
                    'document': name,
                    'code': issue.code,
                    'field': issue.field,
                    'category': issue.category.value,
                    'severity': issue.severity.value,
                    'message': issue.message,
                })
        return pd.DataFrame(rows, columns=ISSUE_COLUMNS)

    def code_counts(self, frame: pd.DataFrame) -> pd.DataFrame:
        """Issue counts per (code, severity), most frequent first"""
        if frame.empty:
            return pd.DataFrame(columns=['code', 'severity', 'count'])

        counts = (
            frame.groupby(['code', 'severity'])
            .size()
            .reset_index(name='count')
            .sort_values(['count', 'code'], ascending=[False, True])
            .reset_index(drop=True)
        )
        return counts

    def _describe_address(self, address: Optional[Address]) -> str:
        """City, state and country with code-table names where known"""
        if address is None:
            return '-'

        parts = [address.city]
        if address.state:
            parts.append(MALAYSIAN_STATE_CODES.get(address.state, address.state))
        if address.country:
            parts.append(COUNTRY_CODES.get(address.country.upper(), address.country))
        return ', '.join(part for part in parts if part) or '-'

    def _format_issue(self, issue: ValidationIssue, symbol: str, color: str) -> str:
        return f"  {color}{symbol} {issue.code}{self.colors['reset']} [{issue.field}] {issue.message}"
