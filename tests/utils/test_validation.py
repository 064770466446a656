import copy

import pytest

from receeco.errors import ErrorCode, SDKError
from receeco.utils.validation import (
    validate_contact_update_input,
    validate_create_receipt_input,
)


class TestValidateCreateReceiptInput:
    def test_valid_input(self, receipt_input):
        assert validate_create_receipt_input(receipt_input) is None

    @pytest.mark.parametrize(
        "field", ["merchant_string_id", "items", "total_amount", "category"]
    )
    def test_missing_required_field(self, receipt_input, field):
        del receipt_input[field]

        with pytest.raises(SDKError) as exc_info:
            validate_create_receipt_input(receipt_input)

        assert exc_info.value.code == ErrorCode.INVALID_INPUT
        assert exc_info.value.message == f"Field '{field}' is required"

    def test_none_counts_as_missing(self, receipt_input):
        receipt_input["category"] = None

        with pytest.raises(SDKError, match="'category' is required"):
            validate_create_receipt_input(receipt_input)

    def test_fields_checked_in_order(self):
        with pytest.raises(SDKError) as exc_info:
            validate_create_receipt_input({"category": "Grocery"})

        assert exc_info.value.message == "Field 'merchant_string_id' is required"

    def test_empty_items(self, receipt_input):
        receipt_input["items"] = []

        with pytest.raises(SDKError) as exc_info:
            validate_create_receipt_input(receipt_input)

        assert exc_info.value.code == ErrorCode.INVALID_INPUT
        assert exc_info.value.message == "items must be a non-empty array"

    @pytest.mark.parametrize("items", ["Tea", {"name": "Tea"}, 3])
    def test_items_not_a_list(self, receipt_input, items):
        receipt_input["items"] = items

        with pytest.raises(SDKError, match="items must be a non-empty array"):
            validate_create_receipt_input(receipt_input)

    @pytest.mark.parametrize(
        "field", ["name", "quantity", "unit_price", "total_price"]
    )
    def test_item_missing_field_cites_index(self, receipt_input, field):
        second = copy.deepcopy(receipt_input["items"][0])
        del second[field]
        receipt_input["items"].append(second)

        with pytest.raises(SDKError) as exc_info:
            validate_create_receipt_input(receipt_input)

        assert exc_info.value.code == ErrorCode.INVALID_INPUT
        assert exc_info.value.message == f"Item 1: field '{field}' is required"

    def test_first_bad_item_reported(self, receipt_input):
        receipt_input["items"] = [{"name": "Tea"}, {}]

        with pytest.raises(SDKError) as exc_info:
            validate_create_receipt_input(receipt_input)

        assert exc_info.value.message == "Item 0: field 'quantity' is required"

    def test_item_not_a_mapping(self, receipt_input):
        receipt_input["items"] = ["Tea"]

        with pytest.raises(SDKError, match="Item 0: field 'name' is required"):
            validate_create_receipt_input(receipt_input)

    def test_extra_fields_allowed(self, receipt_input):
        receipt_input["loyalty_points"] = 12
        receipt_input["items"][0]["sku"] = "TEA-001"

        validate_create_receipt_input(receipt_input)

    def test_total_price_not_recomputed(self, receipt_input):
        receipt_input["items"][0]["total_price"] = 999999

        validate_create_receipt_input(receipt_input)


class TestValidateContactUpdateInput:
    def test_valid(self):
        validate_contact_update_input({"token": "abc", "email": "a@example.com"})

    @pytest.mark.parametrize("data", [{}, {"token": ""}, {"token": None}])
    def test_missing_token(self, data):
        with pytest.raises(SDKError) as exc_info:
            validate_contact_update_input(data)

        assert exc_info.value.code == ErrorCode.INVALID_INPUT
        assert exc_info.value.message == "token is required"
