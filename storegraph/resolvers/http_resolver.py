# storegraph/resolvers/http_resolver.py
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Union

from ..headers import HeaderBuilder, cookie_header
from .registry import Declarative, MissingArgument

if TYPE_CHECKING:
    from ..context import ResolverContext

UrlBuilder = Callable[[str, Dict[str, Any]], str]


@dataclass(frozen=True)
class HttpDescriptor:
    """
    Plain configuration for a pass-through HTTP call.

    url       fixed string or (account, args) -> url
    secure    force https on the target
    enable_cookies  forward the shopper's cookies
    headers   (auth_token, cookies) -> headers
    data      args -> request body; defaults to the args themselves
    """
    method: str
    url: Union[str, UrlBuilder]
    secure: bool = False
    enable_cookies: bool = False
    headers: Optional[HeaderBuilder] = None
    data: Optional[Callable[[Dict[str, Any]], Any]] = None


def _https(url: str) -> str:
    if url.startswith("http://"):
        return "https://" + url[len("http://"):]
    return url


def http_resolver(descriptor: HttpDescriptor) -> Declarative:
    """Compile a descriptor into a dispatch-table entry. Runs once, at registration."""
    method = descriptor.method.upper()
    url = descriptor.url
    url_for: UrlBuilder = url if callable(url) else (lambda account, args: url)
    build_headers = descriptor.headers or (lambda auth_token, cookies: {})
    transform = descriptor.data or (lambda args: args)
    secure = descriptor.secure
    enable_cookies = descriptor.enable_cookies

    async def handler(parent: Any, args: Dict[str, Any], context: "ResolverContext") -> Any:
        try:
            target = url_for(context.account, args)
        except KeyError as exc:
            raise MissingArgument(exc.args[0]) from None
        if secure:
            target = _https(target)
        headers = dict(build_headers(context.auth_token, context.cookies))
        if enable_cookies:
            headers.update(cookie_header(context.cookies))
        return await context.http.request(method, target, headers=headers, data=transform(args))

    return Declarative(descriptor=descriptor, handler=handler)
