"""
Tests for the AIC adapter: collection fetching and random sampling.

The HTTP session is mocked; no test touches the real API.
"""

import pytest
import requests

from art_explorer.adapters import get_adapter
from art_explorer.adapters.aic import (
    RANDOM_ARTWORK_TYPES,
    RANDOM_FALLBACK_PAGES,
    RANDOM_PAGE_RANGES,
    AICAdapter,
)
from art_explorer.adapters.base import FetchError, NoArtworkAvailableError
from art_explorer.mappings import ArtworkType
from art_explorer.models import Filters, YearRange

from .factories import ScriptedRandom, make_api_response, make_raw_artwork, make_response


@pytest.mark.unit
class TestRegistry:
    def test_get_adapter(self):
        adapter = get_adapter("AIC", ssl_bypass=True)
        assert isinstance(adapter, AICAdapter)
        assert adapter.ssl_bypass is True

    def test_unknown_adapter(self):
        with pytest.raises(ValueError, match="Unknown adapter"):
            get_adapter("XYZ")


@pytest.mark.unit
class TestFetchArtworks:
    def test_simple_mode_uses_listing_endpoint(self, adapter, http_session):
        http_session.request.return_value = make_response(
            make_api_response([make_raw_artwork(1), make_raw_artwork(2)])
        )

        result = adapter.fetch_artworks(Filters(page=2, limit=10))

        http_session.request.assert_called_once()
        args, kwargs = http_session.request.call_args
        assert args == ("GET", AICAdapter.base_url)
        assert kwargs["params"]["page"] == 2
        assert kwargs["params"]["limit"] == 10
        assert kwargs["params"]["has_image"] == 1
        assert kwargs["timeout"] == AICAdapter.fetch_timeout
        assert kwargs["verify"] is True
        assert [a.id for a in result.data] == [1, 2]

    def test_search_mode_posts_query(self, adapter, http_session):
        http_session.request.return_value = make_response(make_api_response([]))

        adapter.fetch_artworks(
            Filters(artwork_type=ArtworkType.PAINTING, year_range=YearRange(1850, 1900))
        )

        args, kwargs = http_session.request.call_args
        assert args == ("POST", AICAdapter.search_url)
        must = kwargs["json"]["query"]["bool"]["must"]
        assert {"term": {"artwork_type_title.keyword": "Painting"}} in must
        assert {"range": {"date_end": {"gte": 1850}}} in must
        assert {"range": {"date_start": {"lte": 1900}}} in must

    def test_default_filters(self, adapter, http_session):
        http_session.request.return_value = make_response(make_api_response([]))

        adapter.fetch_artworks()

        _, kwargs = http_session.request.call_args
        assert kwargs["params"]["page"] == 1
        assert kwargs["params"]["limit"] == 20

    def test_metadata_passed_through(self, adapter, http_session):
        http_session.request.return_value = make_response(
            make_api_response([make_raw_artwork(1)], current_page=3, total_pages=9)
        )

        result = adapter.fetch_artworks()

        assert result.pagination.current_page == 3
        assert result.pagination.total_pages == 9
        assert result.pagination.offset == 40
        assert result.info.license_text == "CC0"
        assert result.info.version == "1.13"
        assert result.has_more

    def test_records_are_normalized(self, adapter, http_session):
        http_session.request.return_value = make_response(
            make_api_response([
                make_raw_artwork(5, style_title="Cubism", date_start=1910, date_end=1912),
            ])
        )

        artwork = adapter.fetch_artworks().data[0]

        assert artwork.movement == "Cubism"
        assert artwork.primary_year == 1912
        assert artwork.decade == 1910
        assert artwork.image_url.endswith("/image-5/full/600,/0/default.jpg")

    def test_artworks_without_image_are_kept(self, adapter, http_session):
        http_session.request.return_value = make_response(
            make_api_response([make_raw_artwork(1, image_id=None), make_raw_artwork(2)])
        )

        result = adapter.fetch_artworks()

        assert [a.id for a in result.data] == [1, 2]
        assert result.data[0].image_url == ""

    def test_malformed_record_skipped(self, adapter, http_session, log_lines):
        broken = make_raw_artwork(2)
        del broken["id"]
        http_session.request.return_value = make_response(
            make_api_response([make_raw_artwork(1), broken, make_raw_artwork(3)])
        )

        result = adapter.fetch_artworks()

        assert [a.id for a in result.data] == [1, 3]
        assert any(level == "WARN" for level, _ in log_lines)

    def test_ssl_bypass(self, http_session):
        http_session.request.return_value = make_response(make_api_response([]))
        adapter = AICAdapter(http_session=http_session, ssl_bypass=True)

        adapter.fetch_artworks()

        assert http_session.request.call_args.kwargs["verify"] is False

    def test_logs_with_prefix(self, adapter, http_session, log_lines):
        http_session.request.return_value = make_response(make_api_response([]))

        adapter.fetch_artworks()

        assert log_lines
        assert all(message.startswith("[AIC] ") for _, message in log_lines)


@pytest.mark.unit
class TestFetchErrors:
    def test_http_error(self, adapter, http_session, log_lines):
        http_session.request.return_value = make_response(status_code=503)

        with pytest.raises(FetchError) as exc_info:
            adapter.fetch_artworks()

        assert exc_info.value.status_code == 503
        assert "503" in str(exc_info.value)
        assert ("ERROR", "[AIC] HTTP error: 503") in log_lines

    @pytest.mark.parametrize(
        "exception, message",
        [
            (requests.Timeout(), "took too long"),
            (requests.ConnectionError(), "Could not connect"),
            (requests.RequestException("boom"), "Error communicating"),
        ],
    )
    def test_transport_errors(self, adapter, http_session, exception, message):
        http_session.request.side_effect = exception

        with pytest.raises(FetchError, match=message):
            adapter.fetch_artworks(Filters(artwork_type=ArtworkType.PRINT))

    def test_invalid_json(self, adapter, http_session):
        response = make_response()
        response.json.side_effect = ValueError("Expecting value")
        http_session.request.return_value = response

        with pytest.raises(FetchError):
            adapter.fetch_artworks()

    @pytest.mark.parametrize("payload", [[], {"data": None}, {"pagination": {}}])
    def test_unexpected_payload(self, adapter, http_session, payload):
        http_session.request.return_value = make_response(payload)

        with pytest.raises(FetchError):
            adapter.fetch_artworks()

    def test_no_retry(self, adapter, http_session):
        http_session.request.side_effect = requests.ConnectionError()

        with pytest.raises(FetchError):
            adapter.fetch_artworks()

        assert http_session.request.call_count == 1


@pytest.mark.unit
class TestFetchRandomArtwork:
    def test_first_attempt_hit(self, adapter, http_session):
        http_session.request.return_value = make_response(
            make_api_response([make_raw_artwork(42)])
        )
        rng = ScriptedRandom(pages=[17], choice_index=1)

        artwork = adapter.fetch_random_artwork(rng=rng)

        assert artwork.id == 42
        assert rng.randint_calls == [(1, RANDOM_PAGE_RANGES[0])]
        args, kwargs = http_session.request.call_args
        assert args == ("POST", AICAdapter.search_url)
        body = kwargs["json"]
        assert body["page"] == 17
        assert body["limit"] == 1
        assert body["query"]["bool"]["must"] == [
            {"term": {"artwork_type_title.keyword": RANDOM_ARTWORK_TYPES[1]}},
            {"range": {"date_start": {"gte": 1860}}},
        ]

    def test_page_range_narrows_per_attempt(self, adapter, http_session):
        http_session.request.side_effect = [
            make_response(make_api_response([])),
            make_response(make_api_response([])),
            make_response(make_api_response([make_raw_artwork(7)])),
        ]
        rng = ScriptedRandom(pages=[50, 20, 10])

        artwork = adapter.fetch_random_artwork(rng=rng)

        assert artwork.id == 7
        assert rng.randint_calls == [(1, 50), (1, 20), (1, 10)]
        pages = [c.kwargs["json"]["page"] for c in http_session.request.call_args_list]
        assert pages == [50, 20, 10]

    def test_failed_attempt_treated_like_empty_page(self, adapter, http_session):
        http_session.request.side_effect = [
            requests.ConnectionError(),
            make_response(status_code=500),
            make_response(make_api_response([make_raw_artwork(9)])),
        ]

        artwork = adapter.fetch_random_artwork(rng=ScriptedRandom(pages=[1, 2, 3]))

        assert artwork.id == 9
        assert http_session.request.call_count == 3

    def test_fallback_after_three_misses(self, adapter, http_session, log_lines):
        http_session.request.side_effect = [
            make_response(make_api_response([])),
            requests.Timeout(),
            make_response(make_api_response([])),
            make_response(make_api_response([make_raw_artwork(99)])),
        ]
        rng = ScriptedRandom(pages=[1, 1, 1, 64])

        artwork = adapter.fetch_random_artwork(rng=rng)

        assert artwork.id == 99
        assert rng.randint_calls[-1] == (1, RANDOM_FALLBACK_PAGES)
        args, kwargs = http_session.request.call_args
        assert args == ("GET", AICAdapter.base_url)
        assert kwargs["params"]["page"] == 64
        assert kwargs["params"]["limit"] == 1
        assert kwargs["params"]["has_image"] == 1
        assert any("fallback" in message for _, message in log_lines)

    def test_imageless_hit_moves_to_next_attempt(self, adapter, http_session):
        http_session.request.side_effect = [
            make_response(make_api_response([make_raw_artwork(9, image_id=None)])),
            make_response(make_api_response([make_raw_artwork(10)])),
        ]

        artwork = adapter.fetch_random_artwork(rng=ScriptedRandom(pages=[1, 1]))

        assert artwork.id == 10
        assert artwork.has_image
        assert http_session.request.call_count == 2

    def test_imageless_hits_everywhere_are_fatal(self, adapter, http_session):
        http_session.request.return_value = make_response(
            make_api_response([make_raw_artwork(9, image_id=None)])
        )

        with pytest.raises(NoArtworkAvailableError):
            adapter.fetch_random_artwork(rng=ScriptedRandom(pages=[1, 1, 1, 1]))

        assert http_session.request.call_count == 4

    def test_fatal_when_fallback_empty(self, adapter, http_session):
        http_session.request.return_value = make_response(make_api_response([]))

        with pytest.raises(NoArtworkAvailableError):
            adapter.fetch_random_artwork(rng=ScriptedRandom(pages=[1, 1, 1, 1]))

        assert http_session.request.call_count == 4

    def test_fallback_request_error_propagates(self, adapter, http_session):
        http_session.request.side_effect = requests.ConnectionError()

        with pytest.raises(FetchError) as exc_info:
            adapter.fetch_random_artwork(rng=ScriptedRandom(pages=[1, 1, 1, 1]))

        assert not isinstance(exc_info.value, NoArtworkAvailableError)
        assert http_session.request.call_count == 4

    def test_default_rng(self, adapter, http_session):
        http_session.request.return_value = make_response(
            make_api_response([make_raw_artwork(3)])
        )

        artwork = adapter.fetch_random_artwork()

        assert artwork.id == 3
        body = http_session.request.call_args.kwargs["json"]
        assert 1 <= body["page"] <= RANDOM_PAGE_RANGES[0]
