"""Unit tests for the FieldSet form data model."""

import pytest

from lexiforge.exceptions import FieldValueError, UnknownFieldError
from lexiforge.models import BillingType, FieldSet


class TestFieldSetDefaults:
    """Tests for FieldSet creation."""

    def test_every_key_present_with_defaults(self):
        """Test that a new FieldSet carries every key."""
        field_set = FieldSet()
        data = field_set.to_dict()

        assert set(data) == set(FieldSet.field_names())
        assert len(data) == 17
        assert data["client_name"] == ""
        assert data["jurisdiction"] == "New York"
        assert data["billing_type"] == "hourly"
        assert data["include_termination_clause"] is True
        assert data["include_arbitration_clause"] is False

    def test_effective_date_defaults_to_iso_date(self):
        """Test the effective date default is an ISO date string."""
        effective = FieldSet().effective_date
        assert len(effective) == 10
        assert effective[4] == "-" and effective[7] == "-"

    def test_billing_type_string_is_coerced(self):
        """Test passing billing type as string on construction."""
        assert FieldSet(billing_type="flat_fee").billing_type is BillingType.FLAT_FEE


class TestFieldSetMutation:
    """Tests for get/set/update."""

    def test_set_and_get(self):
        field_set = FieldSet()
        field_set.set("client_name", "Acme Corp")
        assert field_set.get("client_name") == "Acme Corp"
        assert field_set.client_name == "Acme Corp"

    def test_set_unknown_field_raises(self):
        with pytest.raises(UnknownFieldError) as exc_info:
            FieldSet().set("client_nickname", "Ace")
        assert exc_info.value.details["field_name"] == "client_nickname"

    def test_set_wrong_type_raises(self):
        with pytest.raises(FieldValueError):
            FieldSet().set("include_arbitration_clause", "yes")

    def test_set_invalid_billing_type_raises(self):
        with pytest.raises(FieldValueError) as exc_info:
            FieldSet().set("billing_type", "contingency")
        assert exc_info.value.to_dict()["error_type"] == "FieldValueError"

    def test_none_clears_string_field(self):
        field_set = FieldSet(client_name="Acme")
        field_set.set("client_name", None)
        assert field_set.client_name == ""

    def test_update_is_all_or_nothing(self):
        """Test that an invalid change leaves earlier changes unapplied."""
        field_set = FieldSet()
        with pytest.raises(UnknownFieldError):
            field_set.update({"client_name": "Acme", "bogus": "x"})
        assert field_set.client_name == ""


class TestFieldSetCopy:
    """Tests for snapshot copies and serialization."""

    def test_copy_is_independent(self):
        original = FieldSet(client_name="Acme")
        clone = original.copy()
        clone.set("client_name", "Other")

        assert original.client_name == "Acme"
        assert clone == FieldSet(client_name="Other", effective_date=original.effective_date)

    def test_from_dict_round_trip(self):
        original = FieldSet(client_name="Acme", billing_type=BillingType.FLAT_FEE)
        assert FieldSet.from_dict(original.to_dict()) == original
