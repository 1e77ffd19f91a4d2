"""
Tests for line item checks, including the net-amount tolerance boundary
"""

import pytest

from validators.line_item_validator import LineItemValidator


class TestLineItemValidator:

    @pytest.fixture
    def validator(self):
        return LineItemValidator()

    def test_valid_item_has_no_issues(self, validator, valid_document, run_checker):
        result = run_checker(validator, valid_document)

        assert result.errors == ()
        assert result.warnings == ()

    def test_no_items_short_circuits(self, validator, document_factory, run_checker):
        """Exactly one ITM_001 and nothing per item"""
        result = run_checker(validator, document_factory(items=[]))

        assert result.error_codes == ['ITM_001']
        assert result.warnings == ()

    def test_net_amount_within_tolerance(self, validator, document_factory, item_factory, run_checker):
        item = item_factory(quantity=2, unit_price=10.00, line_net_amount=20.005)
        result = run_checker(validator, document_factory(items=[item]))

        assert 'ITM_010' not in result.error_codes

    def test_net_amount_outside_tolerance(self, validator, document_factory, item_factory, run_checker):
        item = item_factory(quantity=2, unit_price=10.00, line_net_amount=20.02)
        result = run_checker(validator, document_factory(items=[item]))

        assert result.error_codes == ['ITM_010']
        assert result.errors[0].field == 'items[0].line_net_amount'

    def test_tax_amount_mismatch_is_warning(self, validator, document_factory, item_factory, run_checker):
        item = item_factory(tax_rate=6.0, tax_amount=5.0)
        result = run_checker(validator, document_factory(items=[item]))

        assert result.errors == ()
        assert result.warning_codes == ['ITM_011']

    def test_tax_amount_matches_rate(self, validator, document_factory, item_factory, run_checker):
        item = item_factory(quantity=3, unit_price=33.33, line_net_amount=99.99, tax_rate=8.0, tax_amount=8.0)
        result = run_checker(validator, document_factory(items=[item]))

        assert result.errors == ()
        assert result.warnings == ()

    def test_presence_and_range_errors(self, validator, document_factory, item_factory, run_checker):
        item = item_factory(
            product_name="",
            quantity=0,
            unit_price=-1.0,
            line_net_amount=0.0,
            unit_code=None,
            tax_category=None,
            tax_rate=101.0,
            tax_amount=0.0,
        )
        result = run_checker(validator, document_factory(items=[item]))

        for code in ('ITM_002', 'ITM_003', 'ITM_004', 'ITM_005', 'ITM_007', 'ITM_009'):
            assert code in result.error_codes

    def test_unknown_codes_are_warnings(self, validator, document_factory, item_factory, run_checker):
        item = item_factory(unit_code="ZZZ", tax_category="99")
        result = run_checker(validator, document_factory(items=[item]))

        assert result.errors == ()
        assert result.warning_codes == ['ITM_006', 'ITM_008']

    @pytest.mark.parametrize("category", ["E", "06"])
    def test_exempt_category_without_reason(self, validator, document_factory, item_factory, run_checker, category):
        item = item_factory(tax_category=category)
        result = run_checker(validator, document_factory(items=[item]))

        assert result.warning_codes == ['ITM_012']

    def test_exempt_category_with_reason(self, validator, document_factory, item_factory, run_checker):
        item = item_factory(tax_category="E", tax_exemption_reason_code="TEXS-EX01")
        result = run_checker(validator, document_factory(items=[item]))

        assert result.warnings == ()

    def test_unknown_exemption_reason_code(self, validator, document_factory, item_factory, run_checker):
        item = item_factory(tax_category="E", tax_exemption_reason_code="NOPE")
        result = run_checker(validator, document_factory(items=[item]))

        assert result.warning_codes == ['ITM_013']

    def test_issues_reference_line_position(self, validator, document_factory, item_factory, run_checker):
        items = [
            item_factory(line_number=1),
            item_factory(line_number=2, unit_price=150.0),
        ]
        result = run_checker(validator, document_factory(items=items))

        assert result.error_codes == ['ITM_010']
        assert result.errors[0].field == 'items[1].line_net_amount'
        assert result.errors[0].message.startswith('Line 2:')
