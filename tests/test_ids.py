"""Tests for identifier extraction from free-text error messages."""

from __future__ import annotations

from roadcheck.ids import extract_sign_id, extract_topology_id


class TestExtractSignId:
    def test_extracts_prefix_and_digits(self) -> None:
        msg = "Sign urn:here::here:signs:123456 is not matched to a motorway."
        assert extract_sign_id(msg) == "urn:here::here:signs:123456"

    def test_stops_at_first_non_digit(self) -> None:
        assert extract_sign_id("x urn:here::here:signs:42abc") == "urn:here::here:signs:42"

    def test_first_match_wins(self) -> None:
        msg = "urn:here::here:signs:1 and urn:here::here:signs:2"
        assert extract_sign_id(msg) == "urn:here::here:signs:1"

    def test_prefix_without_digits_is_no_match(self) -> None:
        assert extract_sign_id("urn:here::here:signs:abc") is None

    def test_no_match_returns_none(self) -> None:
        assert extract_sign_id("nothing to see here") is None

    def test_non_string_returns_none(self) -> None:
        assert extract_sign_id(None) is None


class TestExtractTopologyId:
    def test_extracts_until_whitespace(self) -> None:
        msg = "Validation error: Topology id urn:here::here:Topology:107037225 encountered an issue."
        assert extract_topology_id(msg) == "urn:here::here:Topology:107037225"

    def test_keeps_non_digit_characters(self) -> None:
        msg = "seg urn:here::here:Topology:ab-12.x, next"
        assert extract_topology_id(msg) == "urn:here::here:Topology:ab-12.x,"

    def test_is_case_sensitive(self) -> None:
        assert extract_topology_id("urn:here::here:topology:1") is None

    def test_no_match_returns_none(self) -> None:
        assert extract_topology_id("") is None

    def test_deterministic(self) -> None:
        msg = "urn:here::here:Topology:9 urn:here::here:Topology:10"
        assert extract_topology_id(msg) == extract_topology_id(msg) == "urn:here::here:Topology:9"
