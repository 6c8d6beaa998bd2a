"""Shared fixtures: UniProt tabular responses and an in-memory transport."""

import asyncio

import pytest

from uniprot_dictionary.api_clients.base import DictionaryRequestError
from uniprot_dictionary.config import DictionaryConfig

TEST_BASE_URL = "http://test"

COLUMNS_PARAM = (
    "&columns=id%2Ccomment%28FUNCTION%29%2Cprotein%20names%2Cgenes"
    "%2Corganism%2Creviewed%2Centry%20name%2Cannotation%20score"
)

HEADER = "Entry\tFunction [CC]\tProtein names\tGene names\tOrganism\tStatus\tEntry name\tAnnotation"

ROW_P52413 = "\t".join([
    "P52413",
    "FUNCTION: Carrier of the growing fatty acid chain in fatty acid biosynthesis.  ",
    "Acyl carrier protein 3, chloroplastic (ACP)",
    "ACL1.3 ACP1-3",
    "Cuphea lanceolata (Cigar flower)",
    "reviewed",
    "ACP3_CUPLA",
    "3 out of 5",
])

ROW_P53142 = "\t".join([
    "P53142",
    "FUNCTION: May be involved in vacuolar protein sorting. {ECO:0000269|PubMed:12134085}.",
    "Vacuolar protein sorting-associated protein 73",
    "VPS73 YGL104C G3090",
    "Saccharomyces cerevisiae (strain ATCC 204508 / S288c) (Baker's yeast)",
    "reviewed",
    "VPS73_YEAST",
    "3 out of 5",
])

ROW_P43121 = "\t".join([
    "P43121",
    "FUNCTION: Plays a role in cell adhesion.",
    "Cell surface glycoprotein MUC18 (Cell surface glycoprotein P1H12) "
    "(Melanoma cell adhesion molecule) (CD antigen CD146)",
    "MCAM MUC18",
    "Homo sapiens (Human)",
    "reviewed",
    "MUC18_HUMAN",
    "5 out of 5",
])

ROW_Q6UVK1 = "\t".join([
    "Q6UVK1",
    "",
    "Chondroitin sulfate proteoglycan 4 (Melanoma chondroitin sulfate proteoglycan)",
    "CSPG4 MCSP",
    "Homo sapiens (Human)",
    "reviewed",
    "CSPG4_HUMAN",
    "5 out of 5",
])


def tabular(*rows: str) -> str:
    """Build a response body: header, rows, trailing newline."""
    return "\n".join([HEADER, *rows]) + "\n"


class FakeTransport:
    """In-memory transport answering by URL substring.

    responses maps a URL substring to a body or a DictionaryRequestError;
    delays maps a URL substring to seconds slept before answering.
    """

    def __init__(self, responses=None, delays=None, default=None):
        self.responses = responses or {}
        self.delays = delays or {}
        self.default = tabular() if default is None else default
        self.calls = []
        self.completed = []

    def _lookup(self, table, url, fallback):
        for key, value in table.items():
            if key in url:
                return value
        return fallback

    async def get_text(self, url: str) -> str:
        self.calls.append(url)
        await asyncio.sleep(self._lookup(self.delays, url, 0))
        self.completed.append(url)

        answer = self._lookup(self.responses, url, self.default)
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def test_config():
    """Configuration pointing at a fake base URL."""
    return DictionaryConfig(base_url=TEST_BASE_URL)


@pytest.fixture
def ids_response():
    """Tabular response for accessions P52413 and P53142."""
    return tabular(ROW_P52413, ROW_P53142)


@pytest.fixture
def melanoma_response():
    """Tabular response for a free-text search."""
    return tabular(ROW_P43121, ROW_Q6UVK1)


@pytest.fixture
def not_found_error():
    return DictionaryRequestError("Something is wrong!!!", status=404)
