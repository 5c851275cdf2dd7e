"""
Outbound lookup links for identifiers missing from the catalogue.

Sites are configured as URL templates containing ``{id}``, either through
``LOOKUP_SITES`` or ad hoc on the command line. Hosts attach links to
not-found results only.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Optional

from catalogue_search.config import LOOKUP_ID_PLACEHOLDER, Settings, get_settings
from catalogue_search.core import ConfigurationError


@dataclass(frozen=True)
class LookupSite:
    """A third-party service that can be searched by identifier.

    Attributes:
        name: Display name (e.g. "Example DB")
        url_template: URL with an ``{id}`` placeholder
    """

    name: str
    url_template: str

    def __post_init__(self) -> None:
        if LOOKUP_ID_PLACEHOLDER not in self.url_template:
            raise ConfigurationError(
                f"Lookup site {self.name!r} has no {LOOKUP_ID_PLACEHOLDER} placeholder",
                details=self.url_template,
            )

    def url_for(self, identifier: int) -> str:
        """Return the lookup URL for ``identifier``."""
        # str.replace rather than str.format: templates may contain other braces
        return self.url_template.replace(LOOKUP_ID_PLACEHOLDER, str(identifier))


@dataclass(frozen=True)
class LookupLink:
    """A rendered lookup URL for one identifier."""

    site: str
    url: str


def sites_from_mapping(sites: Mapping[str, str]) -> list[LookupSite]:
    """Build lookup sites from a name -> template mapping, preserving order."""
    return [LookupSite(name=name, url_template=template) for name, template in sites.items()]


def sites_from_settings(settings: Optional[Settings] = None) -> list[LookupSite]:
    """Build the lookup sites configured in ``LookupSettings``."""
    settings = settings or get_settings()
    return sites_from_mapping(settings.lookup.sites)


def build_lookup_links(identifier: int, sites: Iterable[LookupSite]) -> list[LookupLink]:
    """Render one link per site for ``identifier``."""
    return [LookupLink(site=site.name, url=site.url_for(identifier)) for site in sites]
