"""Build UniProt query URLs for entry lookups and string matches."""

from typing import Any, Mapping

from uniprot_dictionary.config.schema import QUERY_PLACEHOLDER, DictionaryConfig
from uniprot_dictionary.dictionary.models import UNIPROT_COLUMNS
from uniprot_dictionary.dictionary.normalize import (
    encode_query_component,
    last_url_part,
)
from uniprot_dictionary.dictionary.options import (
    has_proper_page,
    has_proper_per_page,
    requested_ids,
)


class UniprotURLBuilder:
    """Compose fully encoded UniProt URLs from query options."""

    def __init__(self, config: DictionaryConfig):
        self.entries_template = config.entries_url_template
        self.matches_template = config.matches_url_template
        self.format = config.format
        self.per_page_max = config.per_page_max
        self.columns_param = "&columns=" + encode_query_component(UNIPROT_COLUMNS)

    def entry_urls(self, options: Mapping[str, Any]) -> list[str]:
        """One URL per requested identifier, or a single all-records URL.

        Blank identifiers are dropped and duplicate URLs issued once.
        """
        ids = requested_ids(options)
        if not ids:
            return [self.entry_url("", options)]
        urls = (self.entry_url(entry_id, options) for entry_id in ids)
        return list(dict.fromkeys(urls))

    def entry_url(self, entry_id: str, options: Mapping[str, Any]) -> str:
        """URL for one identifier (URI or bare accession); "" lists all records.

        The accession in id:<accession> is percent-encoded, so plain
        accessions are sent unchanged.
        """
        if entry_id == "":
            url = self._fill(self.entries_template, "*") + self.columns_param
            url += "&sort=id&desc=no"
            url += self._limit_and_offset(options)
        else:
            accession = encode_query_component(last_url_part(entry_id))
            url = self._fill(self.entries_template, "id:" + accession)
            url += self.columns_param

        return url + "&format=" + self.format

    def match_url(self, query: str, options: Mapping[str, Any]) -> str:
        """URL for a free-text search, highest annotation score first."""
        url = self._fill(self.matches_template, encode_query_component(query))
        url += self.columns_param
        url += "&sort=score"
        url += self._limit_and_offset(options)
        return url + "&format=" + self.format

    def _limit_and_offset(self, options: Mapping[str, Any]) -> str:
        limit = options["perPage"] if has_proper_per_page(options) else self.per_page_max
        offset = (options["page"] - 1) * limit if has_proper_page(options) else 0
        return f"&limit={limit}&offset={offset}"

    @staticmethod
    def _fill(template: str, query: str) -> str:
        return template.replace(QUERY_PLACEHOLDER, query, 1)
