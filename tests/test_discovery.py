import asyncio

import httpx

from dashboard.components import JobDiscoveryClient, ListingSequence, SearchKind
from dashboard.components.discovery import DEFAULT_QUERY
from dashboard.schemas import JobListing
from dashboard.state import DashboardState

ACME = {"title": "Backend Engineer", "url": "https://acme.com/careers/123"}
GLOBEX = {"title": "Data Engineer", "snippet": "Remote, EU hours", "url": "https://globex.io/jobs/7"}


def test_search_returns_every_reported_listing(backend):
    backend.search_results["site:acme.com careers"] = [ACME, GLOBEX]
    discovery = JobDiscoveryClient(backend.client(), DashboardState())

    outcome = asyncio.run(discovery.search("site:acme.com careers"))

    assert outcome.kind is SearchKind.FOUND
    assert [listing.url for listing in outcome.listings] == [ACME["url"], GLOBEX["url"]]
    assert len(discovery.results) == 2
    assert backend.calls("GET", "/api/search") == [{"q": "site:acme.com careers"}]


def test_default_query_is_used_when_none_given(backend):
    discovery = JobDiscoveryClient(backend.client(), DashboardState())

    asyncio.run(discovery.search())

    assert backend.calls("GET", "/api/search") == [{"q": DEFAULT_QUERY}]


def test_zero_results_is_empty_not_failed(backend):
    discovery = JobDiscoveryClient(backend.client(), DashboardState())

    outcome = asyncio.run(discovery.search("nothing here"))

    assert outcome.kind is SearchKind.EMPTY
    assert outcome.ok
    assert outcome.listings == []


def test_failure_yields_empty_sequence_and_failed_kind(backend):
    backend.search_results["python"] = [ACME]
    discovery = JobDiscoveryClient(backend.client(), DashboardState())

    async def scenario():
        await discovery.search("python")
        backend.fail["search"] = 502
        return await discovery.search("python")

    outcome = asyncio.run(scenario())

    assert outcome.kind is SearchKind.FAILED
    assert not outcome.ok
    assert outcome.listings == []
    assert "502" in outcome.reason
    assert len(discovery.results) == 0


def test_new_search_replaces_results(backend):
    backend.search_results["acme"] = [ACME]
    backend.search_results["globex"] = [GLOBEX]
    discovery = JobDiscoveryClient(backend.client(), DashboardState())

    async def scenario():
        await discovery.search("acme")
        await discovery.search("globex")

    asyncio.run(scenario())

    assert [listing.url for listing in discovery.results] == [GLOBEX["url"]]


def test_listing_sequence_is_single_pass():
    sequence = ListingSequence([JobListing(**ACME), JobListing(**GLOBEX)])

    assert len(sequence) == 2
    assert [listing.title for listing in sequence] == ["Backend Engineer", "Data Engineer"]
    assert list(sequence) == []
    assert len(sequence) == 0


def test_listing_count_matches_backend_report(backend):
    backend.search_results["acme"] = [ACME, {"title": "Repost", "url": ACME["url"]}, GLOBEX]
    discovery = JobDiscoveryClient(backend.client(), DashboardState())

    outcome = asyncio.run(discovery.search("acme"))

    assert len(outcome.listings) == 3
    assert len(discovery.results) == 3


def test_discard_drops_listing():
    sequence = ListingSequence([JobListing(**ACME), JobListing(**GLOBEX)])

    assert sequence.discard(ACME["url"])
    assert not sequence.discard("https://nowhere.example")
    assert [listing.url for listing in sequence] == [GLOBEX["url"]]


def test_stale_response_is_discarded(mock_client):
    async def scenario():
        gates = {"slow": asyncio.Event(), "fast": asyncio.Event()}

        async def handler(request):
            query = request.url.params["q"]
            await gates[query].wait()
            return httpx.Response(200, json=[{"title": query, "url": f"https://jobs.example/{query}"}])

        discovery = JobDiscoveryClient(mock_client(handler), DashboardState())
        slow = asyncio.create_task(discovery.search("slow"))
        fast = asyncio.create_task(discovery.search("fast"))
        await asyncio.sleep(0)

        gates["fast"].set()
        fast_outcome = await fast
        gates["slow"].set()
        slow_outcome = await slow
        return discovery, slow_outcome, fast_outcome

    discovery, slow_outcome, fast_outcome = asyncio.run(scenario())

    assert not fast_outcome.stale
    assert slow_outcome.stale
    assert [listing.title for listing in discovery.results] == ["fast"]
