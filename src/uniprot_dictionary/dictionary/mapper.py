"""Map UniProt tabular rows to entry and match records."""

from typing import Any

from uniprot_dictionary.dictionary.models import (
    COLUMN_COUNT,
    UNIPROT_DICT_ID,
    UNIPROT_ENTRY_PREFIX,
    EntryRecord,
    MatchRecord,
)
from uniprot_dictionary.dictionary.normalize import (
    build_terms,
    elements_in_parentheses,
    refine_description,
    split_genes,
    string_before_first_separator,
)
from uniprot_dictionary.dictionary.parse import pad_columns, parse_tabular


class UniprotRecordMapper:
    """Decode UniProt columns into dictionary records.

    Column order follows UNIPROT_COLUMNS: accession, function comment,
    protein names, genes, organism, review status, entry name,
    annotation score.
    """

    def __init__(self, optimized_for_curator: bool = True):
        self.optimized_for_curator = optimized_for_curator

    def entries_from_response(self, body: str) -> list[EntryRecord]:
        return [self.entry_from_columns(columns) for columns in parse_tabular(body)]

    def matches_from_response(self, body: str, query: str) -> list[MatchRecord]:
        return [
            self.match_from_columns(columns, query)
            for columns in parse_tabular(body)
        ]

    def entry_from_columns(self, columns: list[str]) -> EntryRecord:
        return EntryRecord(**self._decode(columns))

    def match_from_columns(self, columns: list[str], query: str) -> MatchRecord:
        fields = self._decode(columns)
        primary = fields["terms"][0].string
        return MatchRecord(
            **fields,
            string=primary,
            match_type="S" if primary.startswith(query) else "T",
        )

    def _decode(self, columns: list[str]) -> dict[str, Any]:
        (
            accession,
            description,
            protein_names,
            genes,
            organism,
            status,  # reviewed, unreviewed, ...
            entry_name,
            annotation_score,
        ) = pad_columns(columns)[:COLUMN_COUNT]

        main_term = string_before_first_separator(protein_names, "(")
        synonyms = elements_in_parentheses(protein_names)

        z: dict[str, Any] = {}
        if genes:
            z["genes"] = split_genes(genes)
        if organism:
            z["species"] = organism
        if status:
            z["status"] = status
        if entry_name:
            z["entry"] = entry_name
        if annotation_score:
            z["score"] = annotation_score

        return {
            "id": f"{UNIPROT_ENTRY_PREFIX}/{accession}",
            "dict_id": UNIPROT_DICT_ID,
            "descr": refine_description(description) if description else None,
            "terms": build_terms(
                main_term,
                synonyms,
                entry_name,
                optimized_for_curator=self.optimized_for_curator,
            ),
            "z": z,
        }
