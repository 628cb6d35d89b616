"""In-process stand-in for the Open Cloud group endpoints."""

from dataclasses import dataclass, field
from typing import Any

from aiohttp import web

CLOUD_PREFIX = "/cloud/v2"


@dataclass
class RecordedRequest:
    method: str
    path: str
    raw_path: str
    match_info: dict[str, str]
    query: dict[str, str]
    headers: dict[str, str]
    json: Any = None


@dataclass
class FakeCloud:
    """Serves roles, paged memberships and membership PATCHes from memory.

    `membership_pages` maps the incoming pageToken (None for the first page)
    to the page body. `overrides` maps "roles", "memberships" or "patch" to a
    (status, body) pair returned instead of the normal response; a str body
    is sent as-is to mimic non-JSON pages and None sends an empty body.
    """

    roles: list[dict[str, Any]] = field(default_factory=list)
    membership_pages: dict[str | None, dict[str, Any]] = field(
        default_factory=lambda: {None: {"groupMemberships": []}}
    )
    overrides: dict[str, tuple[int, Any]] = field(default_factory=dict)
    requests: list[RecordedRequest] = field(default_factory=list)

    def build_app(self) -> web.Application:
        app = web.Application()
        app.router.add_get(f"{CLOUD_PREFIX}/groups/{{group_id}}/roles", self._roles)
        app.router.add_get(
            f"{CLOUD_PREFIX}/groups/{{group_id}}/memberships", self._memberships
        )
        app.router.add_patch(
            f"{CLOUD_PREFIX}/groups/{{group_id}}/memberships/{{membership_id}}",
            self._patch,
        )
        return app

    def requests_for(self, method: str) -> list[RecordedRequest]:
        return [r for r in self.requests if r.method == method]

    async def _record(self, request: web.Request) -> RecordedRequest:
        body = await request.json() if request.can_read_body else None
        recorded = RecordedRequest(
            method=request.method,
            path=request.path,
            raw_path=request.raw_path.split("?", 1)[0],
            match_info=dict(request.match_info),
            query=dict(request.query),
            headers={k.lower(): v for k, v in request.headers.items()},
            json=body,
        )
        self.requests.append(recorded)
        return recorded

    @staticmethod
    def _canned(status: int, body: Any) -> web.Response:
        if body is None:
            return web.Response(status=status)
        if isinstance(body, str):
            return web.Response(status=status, text=body, content_type="text/html")
        return web.json_response(body, status=status)

    async def _roles(self, request: web.Request) -> web.Response:
        await self._record(request)
        if "roles" in self.overrides:
            return self._canned(*self.overrides["roles"])
        return web.json_response({"groupRoles": self.roles})

    async def _memberships(self, request: web.Request) -> web.Response:
        await self._record(request)
        if "memberships" in self.overrides:
            return self._canned(*self.overrides["memberships"])
        page = self.membership_pages.get(request.query.get("pageToken"))
        if page is None:
            return web.json_response(
                {"errors": [{"code": "INVALID_ARGUMENT", "message": "bad token"}]},
                status=400,
            )
        return web.json_response(page)

    async def _patch(self, request: web.Request) -> web.Response:
        recorded = await self._record(request)
        if "patch" in self.overrides:
            return self._canned(*self.overrides["patch"])
        group_id = request.match_info["group_id"]
        membership_id = request.match_info["membership_id"]
        return web.json_response(
            {
                "path": f"groups/{group_id}/memberships/{membership_id}",
                "role": (recorded.json or {}).get("role"),
            }
        )
