"""Data models for UniProt dictionary entries and matches."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# Dictionary identifier and prefix for entry identifiers
UNIPROT_DICT_ID = "https://www.uniprot.org"
UNIPROT_ENTRY_PREFIX = UNIPROT_DICT_ID + "/uniprot"

# Columns requested from UniProt, in the order the mapper reads them
UNIPROT_COLUMNS = (
    "id,comment(FUNCTION),protein names,genes,organism,reviewed,"
    "entry name,annotation score"
)
COLUMN_COUNT = 8

UNIPROT_DICT_INFO = {
    "id": UNIPROT_DICT_ID,
    "abbrev": "UniProt",
    "name": "Universal Protein Resource",
}


class Term(BaseModel):
    """A single name of an entry."""

    model_config = ConfigDict(populate_by_name=True)

    string: str = Field(alias="str")


class EntryRecord(BaseModel):
    """Canonical lookup result for one UniProt accession.

    Attributes:
        id: Entry URI (UNIPROT_ENTRY_PREFIX + "/" + accession)
        dict_id: Dictionary URI
        descr: Function description (absent when the column is empty)
        terms: Primary term first, then alternate names; never empty
        z: Auxiliary fields (genes, species, status, entry, score)

    Absent z keys mean "unknown"; they are never stored as None.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    dict_id: str = Field(alias="dictID")
    descr: str | None = None
    terms: list[Term]
    z: dict[str, Any] = Field(default_factory=dict)

    @property
    def primary_term(self) -> str:
        return self.terms[0].string

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class MatchRecord(EntryRecord):
    """Free-text search hit.

    match_type is "S" when the primary term starts with the query string,
    "T" otherwise.
    """

    string: str = Field(alias="str")
    match_type: Literal["S", "T"] = Field(alias="type")
