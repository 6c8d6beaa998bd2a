"""Split UniProt tab-separated responses into column tuples."""

from uniprot_dictionary.dictionary.models import COLUMN_COUNT


def parse_tabular(body: str) -> list[list[str]]:
    """Data rows of a tabular response.

    The first line is the header and the last line is empty (trailing
    newline); both are dropped. Column counts are not validated.
    """
    lines = body.split("\n")
    return [line.split("\t") for line in lines[1:-1]]


def pad_columns(columns: list[str]) -> list[str]:
    """Fill missing trailing columns of a short row with ""."""
    return columns + [""] * (COLUMN_COUNT - len(columns))
