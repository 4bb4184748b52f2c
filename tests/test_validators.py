"""
Tests for input validation utilities
"""
import pytest
from validators import (
    validate_required_fields,
    validate_email,
    validate_phone,
    validate_number_range,
    sanitize_string,
    validate_item_request,
    validate_stock_adjustment,
    validate_supplier_request,
    validate_lead_request,
    validate_delivery_request,
    validate_login_request,
    validate_user_request,
)


@pytest.mark.unit
class TestRequiredFields:
    """Tests for required fields validation"""

    def test_validate_all_fields_present(self):
        is_valid, error = validate_required_fields({'name': 'John', 'email': 'john@example.com'}, ['name', 'email'])
        assert is_valid is True
        assert error is None

    def test_validate_missing_field(self):
        is_valid, error = validate_required_fields({'name': 'John'}, ['name', 'email'])
        assert is_valid is False
        assert 'email' in error

    def test_validate_empty_and_none_fields(self):
        is_valid, _ = validate_required_fields({'name': '', 'email': None}, ['name', 'email'])
        assert is_valid is False


@pytest.mark.unit
class TestContactValidation:
    """Tests for email and phone validation"""

    def test_valid_email(self):
        assert validate_email('test@example.com') == (True, None)

    def test_invalid_email(self):
        assert validate_email('invalidemail.com')[0] is False
        assert validate_email('')[0] is False

    def test_valid_phone_with_formatting(self):
        assert validate_phone('(876) 555-1234')[0] is True

    def test_invalid_phone_letters(self):
        assert validate_phone('876-ABC-1234')[0] is False


@pytest.mark.unit
class TestNumbersAndStrings:
    """Tests for number range and sanitization"""

    def test_number_in_range(self):
        assert validate_number_range(5, min_value=0)[0] is True

    def test_negative_rejected(self):
        assert validate_number_range(-1, min_value=0)[0] is False

    def test_bool_is_not_a_number(self):
        assert validate_number_range(True, min_value=0)[0] is False

    def test_sanitize_strips_null_bytes_and_whitespace(self):
        assert sanitize_string('  Widget\x00 ') == 'Widget'

    def test_sanitize_truncates(self):
        assert sanitize_string('abcdef', max_length=3) == 'abc'


@pytest.mark.unit
class TestResourceValidation:
    """Tests for per-resource payload validation"""

    def test_item_requires_sku_name_category(self):
        is_valid, error = validate_item_request({'name': 'Widget'})
        assert is_valid is False
        assert 'sku' in error

    def test_item_partial_update_allows_missing_fields(self):
        assert validate_item_request({'quantity': 3}, partial=True) == (True, None)

    def test_item_negative_quantity_rejected(self, sample_item_data):
        sample_item_data['quantity'] = -4
        assert validate_item_request(sample_item_data)[0] is False

    def test_item_critical_must_be_bool(self, sample_item_data):
        sample_item_data['critical'] = 'yes'
        assert validate_item_request(sample_item_data)[0] is False

    def test_stock_adjustment_must_be_nonzero_int(self):
        assert validate_stock_adjustment({'adjustment': 5})[0] is True
        assert validate_stock_adjustment({'adjustment': 0})[0] is False
        assert validate_stock_adjustment({'adjustment': '5'})[0] is False
        assert validate_stock_adjustment({})[0] is False

    def test_supplier_requires_name_and_email(self):
        assert validate_supplier_request({'name': 'Acme'}) == (False, "Name and email are required")

    def test_supplier_invalid_email(self, sample_supplier_data):
        sample_supplier_data['email'] = 'not-an-email'
        assert validate_supplier_request(sample_supplier_data)[0] is False

    def test_lead_status_must_be_known(self, sample_lead_data):
        sample_lead_data['status'] = 'sleeping'
        assert validate_lead_request(sample_lead_data)[0] is False

    def test_lead_valid(self, sample_lead_data):
        assert validate_lead_request(sample_lead_data) == (True, None)

    def test_delivery_requires_customer_and_address(self):
        assert validate_delivery_request({'customerName': 'Ann'})[0] is False
        assert validate_delivery_request({'customerName': 'Ann', 'address': '1 Main St'}) == (True, None)

    def test_delivery_items_must_be_list(self):
        is_valid, error = validate_delivery_request({'customerName': 'Ann', 'address': 'x', 'items': 'abc'})
        assert is_valid is False
        assert 'items' in error


@pytest.mark.unit
class TestAccountValidation:
    def test_login_valid(self):
        assert validate_login_request({'email': 'a@b.co', 'password': 'x'}) == {}

    def test_login_rejects_non_string_password(self):
        assert 'password' in validate_login_request({'email': 'a@b.co', 'password': 123456})

    def test_user_valid(self):
        data = {'email': 'Ann@Example.com', 'password': 'abcdef', 'name': 'Ann', 'role': 'sales'}
        assert validate_user_request(data) == {}

    def test_user_short_password(self):
        errors = validate_user_request({'email': 'ann@example.com', 'password': 'abc', 'name': 'Ann'})
        assert errors == {'password': ['Password must be at least 6 characters']}

    def test_registration_needs_company(self):
        data = {'email': 'ann@example.com', 'password': 'abcdef', 'name': 'Ann'}
        assert 'companyName' in validate_user_request(data, require_company=True)
