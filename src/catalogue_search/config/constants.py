"""Application-wide constants."""

# Reference dataset location and document fields
DEFAULT_DATASET_PATH = "./data/id_list.json"
DATASET_IDS_FIELD = "ids"
DATASET_TOTAL_COUNT_FIELD = "total_count"
DATASET_GENERATED_AT_FIELD = "generated_at"
DATASET_REQUIRED_FIELDS = (
    DATASET_IDS_FIELD,
    DATASET_TOTAL_COUNT_FIELD,
    DATASET_GENERATED_AT_FIELD,
)

# Search modes accepted by settings and the hosts
SUPPORTED_MODES = ("single", "bulk")
DEFAULT_SEARCH_MODE = "single"

# Lookup link templates must contain this placeholder
LOOKUP_ID_PLACEHOLDER = "{id}"


def parse_lookup_site(value: str) -> tuple[str, str]:
    """Parse a ``name=url_template`` pair as given on the command line.

    Accepts ``"Example=https://example.com/?q={id}"``; whitespace around
    the name and template is ignored. The template may itself contain
    ``=`` characters, only the first one separates the name.

    Args:
        value: The ``name=url_template`` string.

    Returns:
        Tuple of ``(name, url_template)``.

    Raises:
        ValueError: If the name or template is missing.
    """
    name, sep, template = value.partition("=")
    name = name.strip()
    template = template.strip()

    if not sep or not name or not template:
        raise ValueError(
            f"Invalid lookup site {value!r}. Expected NAME=URL_TEMPLATE"
        )

    return name, template
