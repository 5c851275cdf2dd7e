"""Configuration module — settings and constants."""

from catalogue_search.config.constants import (
    DATASET_GENERATED_AT_FIELD,
    DATASET_IDS_FIELD,
    DATASET_REQUIRED_FIELDS,
    DATASET_TOTAL_COUNT_FIELD,
    DEFAULT_DATASET_PATH,
    DEFAULT_SEARCH_MODE,
    LOOKUP_ID_PLACEHOLDER,
    SUPPORTED_MODES,
    parse_lookup_site,
)
from catalogue_search.config.settings import (
    ApiSettings,
    DatasetSettings,
    LookupSettings,
    SearchSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    # Constants
    "DEFAULT_DATASET_PATH",
    "DATASET_IDS_FIELD",
    "DATASET_TOTAL_COUNT_FIELD",
    "DATASET_GENERATED_AT_FIELD",
    "DATASET_REQUIRED_FIELDS",
    "SUPPORTED_MODES",
    "DEFAULT_SEARCH_MODE",
    "LOOKUP_ID_PLACEHOLDER",
    "parse_lookup_site",
    # Settings
    "Settings",
    "DatasetSettings",
    "SearchSettings",
    "LookupSettings",
    "ApiSettings",
    "get_settings",
    "reload_settings",
]
