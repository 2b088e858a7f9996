from typing import Iterable

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

DEFAULT_ALLOWED_METHODS = ("GET", "POST", "PATCH", "DELETE")


class OriginAllowlistMiddleware:
    """
    Tags responses with Access-Control-Allow-Origin when the caller's Origin
    is allowlisted. Requests without an Origin header (same-origin or
    non-browser clients) are permitted but get no origin header, since there
    is nothing to echo. OPTIONS responses also advertise the allowed methods.

    Requests from other origins are still served; the missing header is what
    makes the browser reject them.
    """

    def __init__(
        self,
        app: ASGIApp,
        allowed_origins: Iterable[str] = (),
        allowed_methods: Iterable[str] = DEFAULT_ALLOWED_METHODS,
    ) -> None:
        self.app = app
        self.allowed_origins = frozenset(allowed_origins)
        self.allowed_methods = ", ".join(allowed_methods)

    def is_allowed(self, origin: str | None) -> bool:
        return not origin or origin in self.allowed_origins

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        origin = Headers(scope=scope).get("origin")
        if not self.is_allowed(origin):
            await self.app(scope, receive, send)
            return

        is_preflight = scope["method"] == "OPTIONS"

        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                if origin:
                    headers["Access-Control-Allow-Origin"] = origin
                    headers.add_vary_header("Origin")
                # only a routed preflight answers 200; 405s get no methods
                if is_preflight and message["status"] == 200:
                    headers["Access-Control-Allow-Methods"] = self.allowed_methods
            await send(message)

        await self.app(scope, receive, send_with_cors)
