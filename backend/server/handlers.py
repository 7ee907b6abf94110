"""HTTP handler serving the deployment's version document."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from starlette.responses import Response

if TYPE_CHECKING:
    from starlette.requests import Request

    from provenance.resolver import VersionInfoResolver
    from provenance.types import VersionRecord

JSON_MEDIA_TYPE = "application/json; charset=utf-8"


def render_version_document(record: VersionRecord) -> str:
    """Pretty-printed JSON with a trailing newline."""
    return json.dumps(record.to_document(), indent=2) + "\n"


async def version_info(request: Request) -> Response:
    """GET /ver.json - commit, source, version and vendored content revisions.

    Resolution never fails (unresolvable fields degrade to "unknown" or are
    omitted), so this always answers 200.
    """
    resolver: VersionInfoResolver = request.app.state.version_resolver
    record = await resolver.get()
    return Response(render_version_document(record), media_type=JSON_MEDIA_TYPE)
