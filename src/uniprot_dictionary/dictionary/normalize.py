"""Normalize raw UniProt column text into terms, descriptions and genes."""

import re
from urllib.parse import quote

from uniprot_dictionary.dictionary.models import Term

FUNCTION_MARKER = "FUNCTION:"

# Non-greedy: a group closes at the first ")" so nested parentheses are
# not balanced ("(B(B))" yields "B(B").
PARENTHESES_PATTERN = re.compile(r"\((.+?)\)")


def last_url_part(text: str) -> str:
    """Final "/"-separated segment, e.g. the accession of an entry URI."""
    return text.split("/")[-1]


def encode_query_component(text: str) -> str:
    """Percent-encode text for use inside a query parameter.

    Stricter than a plain URI-component encoding: ! ' ( ) * are escaped
    as well, since UniProt's query grammar gives them meaning.
    """
    return quote(text, safe="")


def string_before_first_separator(text: str, sep: str | None = None) -> str:
    if sep is None:
        return text.strip()
    return text.split(sep)[0].strip()


def elements_in_parentheses(text: str) -> list[str]:
    return PARENTHESES_PATTERN.findall(text)


def refine_description(description: str) -> str:
    """Strip a leading "FUNCTION:" marker and surrounding whitespace."""
    if description.startswith(FUNCTION_MARKER):
        return description.replace(FUNCTION_MARKER, "", 1).strip()
    return description


def split_genes(genes: str) -> list[str]:
    """Gene symbols of the first ";"-separated group.

    An empty column gives [""].
    """
    return string_before_first_separator(genes, ";").split(" ")


def build_terms(
    main_term: str,
    synonyms: list[str],
    entry_name: str = "",
    optimized_for_curator: bool = True,
) -> list[Term]:
    """Ordered terms of an entry, primary term first.

    With curator ordering the UniProt entry name (e.g. "MUC18_HUMAN")
    leads, ahead of the recommended protein name.
    """
    names = []
    if optimized_for_curator and entry_name:
        names.append(entry_name)
    names.append(main_term)
    names.extend(synonyms)
    return [Term(string=name) for name in names]
