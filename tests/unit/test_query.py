"""Tests for the Query builder and SearchRequest serialization."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from docsearch.domain.enums import SelectionKind
from docsearch.domain.query import Query, SearchRequest


def test_query_only_sends_q() -> None:
    """A query with no optional parameter serializes to exactly one field."""
    payload = Query("space").build().to_payload()
    assert payload == {"q": "space"}
    assert Query("space").to_json() == '{"q":"space"}'


def test_offset_and_limit_only() -> None:
    request = Query("space").with_offset(42).with_limit(21).build()
    encoded = request.to_json()
    assert '"offset":42,"limit":21' in encoded
    assert json.loads(encoded) == {"q": "space", "offset": 42, "limit": 21}


def test_chaining_returns_same_builder() -> None:
    query = Query("space")
    assert query.with_offset(1) is query
    assert query.with_matches(True) is query


def test_all_parameters_use_camel_case_wire_names() -> None:
    payload = (
        Query("batman")
        .with_offset(0)
        .with_limit(5)
        .with_filters("year > 2000")
        .with_facet_filters([["genre:action", "genre:drama"], ["director:Nolan"]])
        .with_facets_distribution(["genre"])
        .with_attributes_to_retrieve(["title", "year"])
        .with_attributes_to_crop([("overview", 10), ("title", None)])
        .with_crop_length(50)
        .with_attributes_to_highlight(["title"])
        .with_matches(True)
        .to_payload()
    )
    assert list(payload) == [
        "q",
        "offset",
        "limit",
        "filters",
        "facetFilters",
        "facetsDistribution",
        "attributesToRetrieve",
        "attributesToCrop",
        "cropLength",
        "attributesToHighlight",
        "matches",
    ]
    assert payload["facetFilters"] == [["genre:action", "genre:drama"], ["director:Nolan"]]
    assert payload["attributesToCrop"] == [["overview", 10], ["title", None]]
    assert payload["offset"] == 0


class TestTriStateParameters:
    """Unset / wildcard / explicit list must stay distinct on the wire."""

    @pytest.mark.parametrize(
        ("setter", "wire_name", "explicit", "explicit_wire"),
        [
            ("with_facets_distribution", "facetsDistribution", ["genre"], ["genre"]),
            ("with_attributes_to_highlight", "attributesToHighlight", ["title"], ["title"]),
            ("with_attributes_to_crop", "attributesToCrop", [("title", 5)], [["title", 5]]),
        ],
    )
    def test_three_states(self, setter, wire_name, explicit, explicit_wire) -> None:
        unset = Query("q").to_json()
        wildcard = getattr(Query("q"), setter)(None).to_json()
        listed = getattr(Query("q"), setter)(explicit).to_json()

        assert wire_name not in json.loads(unset)
        assert json.loads(wildcard)[wire_name] == "*"
        assert json.loads(listed)[wire_name] == explicit_wire
        assert len({unset, wildcard, listed}) == 3

    def test_empty_list_is_not_wildcard(self) -> None:
        payload = Query("q").with_facets_distribution([]).to_payload()
        assert payload["facetsDistribution"] == []

    def test_literal_star_in_list_stays_a_list(self) -> None:
        payload = Query("q").with_attributes_to_highlight(["*"]).to_payload()
        assert payload["attributesToHighlight"] == ["*"]

    def test_builder_holds_selection_kinds(self) -> None:
        query = Query("q").with_facets_distribution(None)
        assert query.facets_distribution.kind is SelectionKind.ALL
        assert query.attributes_to_crop.kind is SelectionKind.UNSET

    def test_bare_name_crops_with_default_length(self) -> None:
        payload = Query("q").with_attributes_to_crop(["title"]).to_payload()
        assert payload["attributesToCrop"] == [["title", None]]


class TestBuild:
    def test_build_is_independent_snapshot(self) -> None:
        query = Query("space").with_limit(10)
        first = query.build()
        query.with_limit(99).with_attributes_to_highlight(None)
        second = query.build()

        assert first.limit == 10
        assert "attributesToHighlight" not in first.to_payload()
        assert second.limit == 99

    def test_build_result_is_frozen(self) -> None:
        request = Query("space").build()
        assert isinstance(request, SearchRequest)
        with pytest.raises(AttributeError):
            request.limit = 3  # type: ignore[misc]

    def test_list_arguments_are_copied(self) -> None:
        attributes = ["title"]
        request = Query("q").with_attributes_to_retrieve(attributes).build()
        attributes.append("year")
        assert request.to_payload()["attributesToRetrieve"] == ["title"]

    def test_identical_chains_give_identical_bytes(self) -> None:
        def make() -> str:
            return (
                Query("space")
                .with_offset(3)
                .with_facet_filters([["a:b"]])
                .with_attributes_to_crop(None)
                .with_matches(False)
                .build()
                .to_json()
            )

        assert make() == make()

    def test_non_ascii_query_kept_verbatim(self) -> None:
        assert Query("café").to_json() == '{"q":"café"}'


class TestValidation:
    @pytest.mark.parametrize("setter", ["with_offset", "with_limit", "with_crop_length"])
    def test_negative_rejected(self, setter) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            getattr(Query("q"), setter)(-1)

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(ValueError, match="integer"):
            Query("q").with_limit(2.5)  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="integer"):
            Query("q").with_offset(True)

    def test_negative_crop_override_rejected(self) -> None:
        with pytest.raises(ValueError, match="crop length"):
            Query("q").with_attributes_to_crop([("title", -5)])

    def test_facet_filters_must_be_nested(self) -> None:
        with pytest.raises(ValueError, match="facet filter group"):
            Query("q").with_facet_filters(["genre:action"])

    def test_string_instead_of_list_rejected(self) -> None:
        with pytest.raises(ValueError, match="not a string"):
            Query("q").with_attributes_to_retrieve("title")


@pytest.mark.asyncio
async def test_execute_delegates_to_index_search() -> None:
    """execute() builds a snapshot and hands it to Index.search."""
    index = MagicMock()
    index.search = AsyncMock(return_value="results")
    query = Query("space").with_limit(2)

    result = await query.execute(index, dict)

    assert result == "results"
    request, document_type = index.search.await_args.args
    assert isinstance(request, SearchRequest)
    assert request.to_payload() == {"q": "space", "limit": 2}
    assert document_type is dict


class TestArgumentTypes:
    def test_crop_attribute_name_must_be_string(self) -> None:
        with pytest.raises(ValueError, match="crop attribute name must be a string"):
            Query("q").with_attributes_to_crop([(1, 5)])

    @pytest.mark.parametrize("value", ["false", 0, 1, None])
    def test_matches_must_be_bool(self, value) -> None:
        with pytest.raises(ValueError, match="matches must be a bool"):
            Query("q").with_matches(value)

    def test_matches_false_is_sent(self) -> None:
        assert Query("q").with_matches(False).to_payload() == {"q": "q", "matches": False}
