from __future__ import annotations

from dataclasses import dataclass
from urllib.error import HTTPError
from urllib.request import Request, urlopen


@dataclass
class HTTPResponse:
    status: int
    text: str
    content: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HTTPStatusError(RuntimeError):
    def __init__(self, url: str, status: int) -> None:
        super().__init__(f"GET {url} failed with status {status}")
        self.url = url
        self.status = status


def http_get(url: str, *, headers: dict[str, str] | None = None, timeout: float = 20) -> HTTPResponse:
    req = Request(url, headers=headers or {})
    try:
        with urlopen(req, timeout=timeout) as resp:  # noqa: S310
            status = resp.status
            content = resp.read()
    except HTTPError as exc:
        raise HTTPStatusError(url, exc.code) from exc
    response = HTTPResponse(status=status, text=content.decode("utf-8", errors="replace"), content=content)
    if not response.ok:
        raise HTTPStatusError(url, response.status)
    return response
