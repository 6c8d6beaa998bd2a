"""UniProt dictionary adapter.

Builds UniProt tabular-API URLs, parses tab-separated responses and maps
rows to entry and match records:
- URL building with strict query encoding (urls)
- Header-stripped row parsing (parse)
- Term, description and gene normalization (normalize)
- Entry/match record mapping (mapper)
- Sorting, pagination and z-pruning (aggregate)
- Public dictionary interface (facade)
"""

from uniprot_dictionary.dictionary.models import (
    EntryRecord,
    MatchRecord,
    Term,
    UNIPROT_COLUMNS,
    UNIPROT_DICT_ID,
    UNIPROT_ENTRY_PREFIX,
)
from uniprot_dictionary.dictionary.urls import UniprotURLBuilder
from uniprot_dictionary.dictionary.parse import parse_tabular
from uniprot_dictionary.dictionary.mapper import UniprotRecordMapper
from uniprot_dictionary.dictionary.aggregate import (
    paginate,
    sort_entries,
    z_prune,
)
from uniprot_dictionary.dictionary.facade import DictionaryUniprot

__all__ = [
    "EntryRecord",
    "MatchRecord",
    "Term",
    "UNIPROT_COLUMNS",
    "UNIPROT_DICT_ID",
    "UNIPROT_ENTRY_PREFIX",
    "UniprotURLBuilder",
    "parse_tabular",
    "UniprotRecordMapper",
    "paginate",
    "sort_entries",
    "z_prune",
    "DictionaryUniprot",
]
