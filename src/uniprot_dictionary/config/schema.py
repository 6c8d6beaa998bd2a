"""Pydantic models for dictionary configuration."""

from pydantic import BaseModel, ConfigDict, Field

# Placeholder replaced by the encoded query term in URL templates
QUERY_PLACEHOLDER = "$queryString"

DEFAULT_BASE_URL = "https://www.uniprot.org/uniprot"


class APIConfig(BaseModel):
    """Configuration for the HTTP transport."""

    model_config = ConfigDict(frozen=True)

    timeout_seconds: int = Field(
        default=30,
        ge=1,
        description="Request timeout in seconds",
    )


class DictionaryConfig(BaseModel):
    """Static configuration fixed when the dictionary is constructed."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the UniProt tabular search endpoint",
    )
    url_get_entries: str | None = Field(
        default=None,
        description="URL template for entry lookups (default: {base_url}/?query=$queryString)",
    )
    url_get_matches: str | None = Field(
        default=None,
        description="URL template for string matches (default: {base_url}/?query=$queryString)",
    )
    format: str = Field(
        default="tab",
        description="Output format requested from UniProt",
    )
    log: bool = Field(
        default=False,
        description="Log every request URL",
    )
    optimized_for_curator: bool = Field(
        default=True,
        description="Use the UniProt entry name as the primary term when present",
    )
    per_page_max: int = Field(
        default=50,
        ge=1,
        description="Page size used when a query gives no valid perPage",
    )
    api: APIConfig = Field(
        default_factory=APIConfig,
        description="HTTP transport configuration",
    )

    @property
    def entries_url_template(self) -> str:
        """URL template for entry lookups."""
        return self.url_get_entries or self._default_template()

    @property
    def matches_url_template(self) -> str:
        """URL template for string matches."""
        return self.url_get_matches or self._default_template()

    def _default_template(self) -> str:
        return f"{self.base_url}/?query={QUERY_PLACEHOLDER}"
