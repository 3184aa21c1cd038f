"""
ApiKey Unit Tests
"""

import logging

import pytest

from appsync_client import ApiKey


class TestApiKeyCreate:
    """Tests for ApiKey.create."""

    def test_every_field_round_trips(self, api_key_input):
        """Each property returns exactly the supplied value."""
        key = ApiKey.create(api_key_input)
        assert key.id == api_key_input["id"]
        assert key.description == api_key_input["description"]
        assert key.expires == api_key_input["expires"]
        assert key.deletes == api_key_input["deletes"]

    def test_empty_input_yields_none(self):
        """Absent keys read back as None."""
        key = ApiKey.create({})
        assert key.id is None
        assert key.description is None
        assert key.expires is None
        assert key.deletes is None

    @pytest.mark.parametrize("field", ["id", "description", "expires", "deletes"])
    def test_single_field(self, field):
        """Only the supplied field is set."""
        key = ApiKey.create({field: "value"})
        for name in ("id", "description", "expires", "deletes"):
            expected = "value" if name == field else None
            assert getattr(key, name) == expected

    def test_unknown_keys_are_ignored(self, api_key_input, caplog):
        """Keys outside the wire shape are dropped and logged."""
        with caplog.at_level(logging.DEBUG, logger="appsync_client.value_object"):
            key = ApiKey.create({**api_key_input, "name": "extra"})
        assert key == ApiKey.create(api_key_input)
        assert "name" in caplog.text

    def test_existing_instance_is_returned_unchanged(self, api_key_input):
        """create() passes an ApiKey through."""
        key = ApiKey.create(api_key_input)
        assert ApiKey.create(key) is key

    def test_millisecond_expiry_is_not_interpreted(self):
        """da1 keys keep their millisecond expiry as is."""
        key = ApiKey.create({"id": "da1-legacy", "expires": "1518998400000"})
        assert key.expires == "1518998400000"


class TestApiKeyValueSemantics:
    """Tests for equality and repr."""

    def test_structural_equality(self, api_key_input):
        """Keys built from the same values are equal."""
        assert ApiKey.create(api_key_input) == ApiKey(**api_key_input)
        assert not (ApiKey.create(api_key_input) != ApiKey(**api_key_input))

    def test_inequality(self, api_key_input):
        """Different values compare unequal."""
        assert ApiKey.create(api_key_input) != ApiKey(id="other")
        assert ApiKey(id="x") != {"id": "x"}

    def test_repr_lists_supplied_fields(self):
        """repr shows only what was supplied."""
        assert repr(ApiKey(id="k", expires="3600")) == "ApiKey(id='k', expires='3600')"
        assert repr(ApiKey()) == "ApiKey()"

    def test_has_no_request_body(self):
        """ApiKey is a read model only."""
        assert not hasattr(ApiKey(), "request_body")

    def test_non_string_unknown_keys_are_ignored(self, caplog):
        """Unknown keys of any type are dropped."""
        with caplog.at_level(logging.DEBUG, logger="appsync_client.value_object"):
            key = ApiKey.create({"id": "k", 1: "x", "extra": 2})
        assert key == ApiKey(id="k")
        assert "'extra'" in caplog.text

    def test_hashable(self, api_key_input):
        """Equal keys hash alike and work as set members."""
        assert hash(ApiKey.create(api_key_input)) == hash(ApiKey(**api_key_input))
        assert len({ApiKey.create(api_key_input), ApiKey(**api_key_input), ApiKey()}) == 2
