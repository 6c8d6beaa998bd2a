"""UniProt dictionary: entries by identifier and matches by string.

Requests for several identifiers are issued together on one event loop.
Every request runs to completion; results are kept in request order and
the first error to arrive is the one reported.
"""

import asyncio
from typing import Any, Callable, Coroutine, Mapping, Protocol

import structlog

from uniprot_dictionary.api_clients.base import DictionaryRequestError, HttpTransport
from uniprot_dictionary.config.schema import DictionaryConfig
from uniprot_dictionary.dictionary.aggregate import paginate, sort_entries, z_prune
from uniprot_dictionary.dictionary.mapper import UniprotRecordMapper
from uniprot_dictionary.dictionary.models import (
    UNIPROT_DICT_ID,
    UNIPROT_DICT_INFO,
    EntryRecord,
)
from uniprot_dictionary.dictionary.options import (
    dict_id_allowed,
    has_proper_filter_id,
    requested_ids,
)
from uniprot_dictionary.dictionary.urls import UniprotURLBuilder

logger = structlog.get_logger()

Callback = Callable[[Any, Any], Any]


class Transport(Protocol):
    async def get_text(self, url: str) -> str: ...


def _empty() -> dict[str, list]:
    return {"items": []}


class DictionaryUniprot:
    """Dictionary interface over the UniProt tabular search API.

    Coroutine API (raises DictionaryRequestError):
        - get_entries_async(options)
        - get_entry_matches_for_string_async(query, options)

    Callback API (cb(error, result) called exactly once):
        - get_dict_infos(options, cb)
        - get_entries(options, cb)
        - get_entry_matches_for_string(query, options, cb)

    Usage:
        dictionary = DictionaryUniprot()
        result = await dictionary.get_entries_async(
            {"filter": {"id": ["https://www.uniprot.org/uniprot/P12345"]}}
        )
    """

    def __init__(
        self,
        config: DictionaryConfig | None = None,
        transport: Transport | None = None,
    ):
        self.config = config or DictionaryConfig()
        self.transport = transport or HttpTransport.from_config(self.config)
        self.urls = UniprotURLBuilder(self.config)
        self.mapper = UniprotRecordMapper(self.config.optimized_for_curator)

    def dict_infos(self, options: Mapping[str, Any] | None = None) -> dict[str, list]:
        """Static descriptor of this dictionary, unless filter.id excludes it."""
        options = options or {}
        if has_proper_filter_id(options) and UNIPROT_DICT_ID not in options["filter"]["id"]:
            return _empty()
        return {"items": [dict(UNIPROT_DICT_INFO)]}

    async def get_entries_async(
        self,
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, list]:
        """
        Fetch entries for filter.id, or one page of all entries.

        Args:
            options: Query options (filter.id, filter.dictID, sort, page,
                perPage, z)

        Returns:
            {"items": [entry dicts]}

        Raises:
            DictionaryRequestError: First transport failure among the requests
        """
        options = options or {}
        if not dict_id_allowed(options, UNIPROT_DICT_ID):
            return _empty()

        urls = self.urls.entry_urls(options)
        entries = await self._fetch_entries(urls)

        # The server already sorted and paged an all-records listing
        if requested_ids(options):
            entries = paginate(
                sort_entries(entries, options),
                options,
                self.config.per_page_max,
            )

        logger.info(
            "uniprot_entries_complete",
            request_count=len(urls),
            entry_count=len(entries),
        )
        items = [entry.to_dict() for entry in entries]
        return {"items": z_prune(items, options.get("z"))}

    async def get_entry_matches_for_string_async(
        self,
        query: str,
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, list]:
        """
        Search UniProt for query, best annotation score first.

        An empty or whitespace-only query returns no items without a request.

        Raises:
            DictionaryRequestError: On transport failure
        """
        options = options or {}
        if not query or not query.strip():
            return _empty()
        if not dict_id_allowed(options, UNIPROT_DICT_ID):
            return _empty()

        url = self.urls.match_url(query, options)
        body = await self._request(url)
        matches = self.mapper.matches_from_response(body, query)

        items = [match.to_dict() for match in matches]
        return {"items": z_prune(items, options.get("z"))}

    def get_dict_infos(self, options: Mapping[str, Any] | None, cb: Callback) -> Any:
        return cb(None, self.dict_infos(options))

    def get_entries(self, options: Mapping[str, Any] | None, cb: Callback) -> Any:
        return self._respond(self.get_entries_async(options), cb)

    def get_entry_matches_for_string(
        self,
        query: str,
        options: Mapping[str, Any] | None,
        cb: Callback,
    ) -> Any:
        return self._respond(
            self.get_entry_matches_for_string_async(query, options), cb
        )

    async def _fetch_entries(self, urls: list[str]) -> list[EntryRecord]:
        batches: list[list[EntryRecord]] = [[] for _ in urls]
        errors: list[DictionaryRequestError] = []

        async def fetch(index: int, url: str) -> None:
            try:
                body = await self._request(url)
            except DictionaryRequestError as e:
                errors.append(e)
                return
            if not errors:
                batches[index] = self.mapper.entries_from_response(body)

        outcomes = await asyncio.gather(
            *(fetch(i, url) for i, url in enumerate(urls)),
            return_exceptions=True,
        )

        if errors:
            raise errors[0]
        for outcome in outcomes:
            if isinstance(outcome, Exception):
                raise outcome
        return [entry for batch in batches for entry in batch]

    async def _request(self, url: str) -> str:
        if self.config.log:
            logger.info("uniprot_request", url=url)
        try:
            return await self.transport.get_text(url)
        except DictionaryRequestError as e:
            logger.warning("uniprot_request_failed", url=url, status=e.status)
            raise
        except Exception as e:
            logger.warning("uniprot_request_failed", url=url, error=str(e))
            raise DictionaryRequestError(str(e)) from e

    @staticmethod
    def _respond(coro: Coroutine[Any, Any, dict[str, list]], cb: Callback) -> Any:
        """Run coro and hand its outcome to cb exactly once.

        Without a running event loop the call blocks and returns cb's
        value. On a running loop it schedules a task and returns it; cb
        is called when the task finishes.
        """
        async def deliver() -> Any:
            try:
                result = await coro
            except DictionaryRequestError as e:
                return cb(e.to_dict(), None)
            return cb(None, result)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(deliver())
        return loop.create_task(deliver())
