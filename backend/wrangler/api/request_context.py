"""Request Context — immutable per-request view handed to every route handler."""

from dataclasses import dataclass
from urllib.parse import urlencode

from fastapi import Request

from wrangler.core.domain_types import USER_ID_HEADER, UserId


@dataclass(frozen=True)
class RequestContext:
    method: str
    path: str
    user_id: UserId
    host: str
    request_uri: str
    query: str

    @classmethod
    def from_request(cls, request: Request) -> "RequestContext":
        raw_query = request.url.query
        request_uri = request.url.path + (f"?{raw_query}" if raw_query else "")
        # Sorted by key, values keep their order: same shape as a canonical query encode
        pairs = sorted(request.query_params.multi_items(), key=lambda kv: kv[0])
        return cls(
            method=request.method,
            path=request.url.path,
            user_id=UserId(request.headers.get(USER_ID_HEADER, "")),
            host=request.headers.get("host", ""),
            request_uri=request_uri,
            query=urlencode(pairs),
        )

    def log_extra(self) -> dict:
        return {
            "host": self.host,
            "request_uri": self.request_uri,
            "method": self.method,
            "query": self.query,
        }
