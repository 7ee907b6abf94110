"""Print the deployment's version document, exactly as served at /ver.json.

Usage: uv run python bin/print-version.py

Sources are configured with the same VERSION_* environment variables as the
server. Logs go to stderr so stdout stays valid JSON.
"""

import asyncio
import sys
from pathlib import Path

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

from provenance.manifest import ManifestError
from provenance.resolver import VersionInfoResolver
from provenance.settings import VersionSettings
from server.handlers import render_version_document
from shared.logging import setup_logging


async def main() -> None:
    setup_logging(stream=sys.stderr)

    try:
        resolver = VersionInfoResolver(VersionSettings())
    except ManifestError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    record = await resolver.get()
    sys.stdout.write(render_version_document(record))


if __name__ == "__main__":
    asyncio.run(main())
