"""Tests for lookup link generation."""

from unittest.mock import MagicMock

import pytest

from catalogue_search.core.exceptions import ConfigurationError
from catalogue_search.search.links import (
    LookupLink,
    LookupSite,
    build_lookup_links,
    sites_from_mapping,
    sites_from_settings,
)


class TestLookupSite:

    def test_url_for(self):
        site = LookupSite("Example", "https://example.com/search?q={id}")
        assert site.url_for(1500) == "https://example.com/search?q=1500"

    def test_placeholder_repeated(self):
        site = LookupSite("Twice", "https://x.test/{id}/{id}.html")
        assert site.url_for(7) == "https://x.test/7/7.html"

    def test_other_braces_untouched(self):
        site = LookupSite("Braces", "https://x.test/{lang}/s/{id}")
        assert site.url_for(3) == "https://x.test/{lang}/s/3"

    def test_missing_placeholder_raises(self):
        with pytest.raises(ConfigurationError, match="placeholder"):
            LookupSite("Broken", "https://example.com/search")


class TestBuildLookupLinks:

    def test_one_link_per_site_in_order(self):
        sites = [
            LookupSite("A", "https://a.test/?q={id}"),
            LookupSite("B", "https://b.test/{id}/"),
        ]
        assert build_lookup_links(42, sites) == [
            LookupLink(site="A", url="https://a.test/?q=42"),
            LookupLink(site="B", url="https://b.test/42/"),
        ]

    def test_no_sites(self):
        assert build_lookup_links(42, []) == []


class TestSitesFromConfig:

    def test_from_mapping_preserves_order(self):
        sites = sites_from_mapping({"Z": "https://z.test/{id}", "A": "https://a.test/{id}"})
        assert [s.name for s in sites] == ["Z", "A"]

    def test_from_mapping_validates(self):
        with pytest.raises(ConfigurationError):
            sites_from_mapping({"Bad": "https://bad.test/"})

    def test_from_settings(self):
        settings = MagicMock()
        settings.lookup.sites = {"Example": "https://example.com/{id}"}
        sites = sites_from_settings(settings)
        assert sites == [LookupSite("Example", "https://example.com/{id}")]
