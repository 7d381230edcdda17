"""
Manual end-to-end check against a running dashboard backend.

Walks the full workflow:
1. Load the applications list (mount)
2. Save a profile
3. Search for jobs
4. Queue the first listing
5. Refresh and verify the application is tracked

Requires: BACKEND_URL pointing at a running backend (default http://localhost:8000).
Usage:
    uv run python scripts/check_workflow.py ["search query"]
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv

load_dotenv()

from dashboard.config import configure_logging, settings
from dashboard.schemas import ProfileForm
from dashboard.workflow import Dashboard


async def run(query: str) -> int:
    print(f"Backend: {settings.backend_url}")

    async with Dashboard() as dashboard:
        print(f"\n[1/5] Mounted, {len(dashboard.applications)} applications visible")

        print("\n[2/5] Saving profile...")
        saved = await dashboard.save_profile(
            ProfileForm(name="Ana Lee", email="ana@example.com", titles="Engineer", locations="Remote", remote=True)
        )
        print(f"  {saved.message}")
        if not saved.ok:
            return 1

        print(f"\n[3/5] Searching: {query}")
        found = await dashboard.search(query)
        print(f"  {found.kind.value}: {len(found.listings)} listings {found.reason}")
        for listing in found.listings:
            print(f"    - {listing.title}  {listing.url}")
        if not found.listings:
            print("\nVERDICT: NEEDS WORK — no listings to queue")
            return 1

        listing = found.listings[0]
        print(f"\n[4/5] Queuing: {listing.title}")
        queued = await dashboard.pick(listing)
        print(f"  {queued.message}")
        if not queued.ok:
            return 1

        print("\n[5/5] Checking applications list...")
        application = dashboard.cache.find(listing.url)
        if application is None:
            print("\nVERDICT: FAIL — queued application not found after refresh")
            return 1

        print(f"  Status: {application.status}")
        print(f"  Cover letter: {len(application.cover_letter)} chars")
        print("\nVERDICT: PASS")
        return 0


def main() -> int:
    configure_logging()
    query = " ".join(sys.argv[1:]) or "site:acme.com careers"
    return asyncio.run(run(query))


if __name__ == "__main__":
    sys.exit(main())
