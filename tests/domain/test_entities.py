"""Tests for the Country/Province/District entities and their pipeline stages."""
import uuid
from datetime import datetime, timezone

import pytest

from covid_api.domain.entities import Country, District, Province
from covid_api.domain.entities.case_statistics import sanitize_text
from covid_api.domain.exceptions import PayloadError, ValidationError


class TestSanitize:
    def test_trims_and_escapes(self) -> None:
        country = Country(name="  <b>Thai</b>  ")
        country.sanitize()
        assert country.name == "&lt;b&gt;Thai&lt;/b&gt;"

    @pytest.mark.parametrize(
        "raw",
        ["  <b>Thai</b>  ", "Lao & Thai", '  "quoted" \'single\'  ', "&lt;already&gt;", "plain"],
    )
    def test_idempotent(self, raw: str) -> None:
        once = sanitize_text(raw)
        assert sanitize_text(once) == once

    def test_whitespace_only_becomes_empty(self) -> None:
        province = Province(name=" \t\n ")
        province.sanitize()
        assert province.name == ""

    def test_applies_to_every_level(self) -> None:
        for entity in (Country(name=" a<b "), Province(name=" a<b "), District(name=" a<b ")):
            entity.sanitize()
            assert entity.name == "a&lt;b"


class TestAssignIdentifier:
    def test_generates_uuid4(self) -> None:
        country = Country(name="Thailand")
        assigned = country.assign_identifier()
        assert country.id == assigned
        assert uuid.UUID(assigned).version == 4

    def test_overwrites_existing_id(self) -> None:
        province = Province(id="old", name="Bangkok")
        province.assign_identifier()
        assert province.id != "old"

    def test_unique_across_many_samples(self) -> None:
        district = District(name="x")
        ids = {district.assign_identifier() for _ in range(10_000)}
        assert len(ids) == 10_000


class TestStamp:
    def test_defaults_to_utc_now(self) -> None:
        country = Country(name="Thailand")
        before = datetime.now(timezone.utc)
        country.stamp()
        assert country.updated_at is not None
        assert country.updated_at >= before
        assert country.updated_at.tzinfo is not None

    def test_accepts_explicit_time(self) -> None:
        when = datetime(2021, 5, 1, tzinfo=timezone.utc)
        province = Province(name="Bangkok")
        province.stamp(when)
        assert province.updated_at == when

    def test_does_not_touch_identifier(self) -> None:
        country = Country(id="fixed", name="Thailand")
        country.stamp()
        assert country.id == "fixed"


class TestValidate:
    @pytest.mark.parametrize(
        ("entity", "message"),
        [
            (Country(), "country: name is required"),
            (Province(), "province: name is required"),
            (District(), "district: name is required"),
        ],
    )
    def test_empty_name_rejected(self, entity, message: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            entity.validate()
        assert exc_info.value.message == message

    def test_whitespace_name_rejected_after_sanitize(self) -> None:
        country = Country(name="   ")
        country.sanitize()
        with pytest.raises(ValidationError):
            country.validate()

    def test_named_entity_passes(self) -> None:
        Country(name="Thailand").validate()

    def test_counters_are_not_validated(self) -> None:
        Country(name="Thailand", total=-1, dead=10).validate()


class TestFromDict:
    def test_parses_country_with_provinces(self) -> None:
        country = Country.from_dict({
            "name": "Thailand",
            "total": 150,
            "dead": 2,
            "provinces": [
                {"name": "Bangkok", "total": 100, "districts": [{"name": "Bang Rak"}]},
                {"name": "Chiang Mai", "total": 50},
            ],
        })
        assert country.name == "Thailand"
        assert country.total == 150
        assert country.dead == 2
        assert [p.name for p in country.provinces] == ["Bangkok", "Chiang Mai"]
        assert country.provinces[0].districts[0].name == "Bang Rak"

    def test_missing_fields_default(self) -> None:
        country = Country.from_dict({})
        assert country.id == ""
        assert country.name == ""
        assert country.total == 0
        assert country.provinces == []

    def test_null_provinces_become_empty_list(self) -> None:
        assert Country.from_dict({"name": "x", "provinces": None}).provinces == []

    def test_legacy_treated_key(self) -> None:
        province = Province.from_dict({"name": "Bangkok", "treaded": 7})
        assert province.treated == 7

    def test_canonical_key_wins_over_legacy(self) -> None:
        province = Province.from_dict({"name": "Bangkok", "treated": 3, "treaded": 7})
        assert province.treated == 3

    def test_updated_at_is_ignored(self) -> None:
        country = Country.from_dict({"name": "x", "updated_at": "2020-01-01T00:00:00Z"})
        assert country.updated_at is None

    @pytest.mark.parametrize(
        "payload",
        [
            [],
            "Thailand",
            {"name": 5},
            {"name": "x", "total": "100"},
            {"name": "x", "total": 1.5},
            {"name": "x", "dead": True},
            {"name": "x", "provinces": {"name": "Bangkok"}},
            {"name": "x", "provinces": ["Bangkok"]},
        ],
    )
    def test_rejects_malformed_payloads(self, payload) -> None:
        with pytest.raises(PayloadError):
            Country.from_dict(payload)

    @pytest.mark.parametrize("value", [2 ** 63, -(2 ** 63) - 1, 10 ** 20])
    def test_rejects_counters_outside_bigint(self, value: int) -> None:
        with pytest.raises(PayloadError, match="country: total must be an integer"):
            Country.from_dict({"name": "x", "total": value})

    def test_bigint_bounds_accepted(self) -> None:
        country = Country.from_dict({"name": "x", "total": 2 ** 63 - 1, "dead": -(2 ** 63)})
        assert country.total == 2 ** 63 - 1
        assert country.dead == -(2 ** 63)

    def test_out_of_range_province_counter(self) -> None:
        with pytest.raises(PayloadError, match="province: treated must be an integer"):
            Country.from_dict({"name": "x", "provinces": [{"name": "y", "treaded": 10 ** 20}]})


class TestToDict:
    def test_country_shape(self) -> None:
        when = datetime(2021, 5, 1, tzinfo=timezone.utc)
        country = Country(
            id="c1",
            name="Thailand",
            total=150,
            updated_at=when,
            provinces=[Province(id="p1", name="Bangkok", total=100, country_id="c1")],
        )
        data = country.to_dict()
        assert data["id"] == "c1"
        assert data["total"] == 150
        assert data["treated"] == 0
        assert data["updated_at"] == when.isoformat()
        assert data["provinces"][0]["country_id"] == "c1"
        assert data["provinces"][0]["districts"] == []

    def test_legacy_treated_key_is_rendered(self) -> None:
        data = Province(name="Bangkok", treated=4).to_dict()
        assert data["treated"] == 4
        assert data["treaded"] == 4

    def test_unstamped_entity_renders_null_time(self) -> None:
        assert District(name="x").to_dict()["updated_at"] is None
