import logging
import re
from functools import cached_property

import httpx

from app.config import Settings
from app.exceptions.custom import MissingCookieError, TransportError
from app.schemas.lookup import ContactInfo, LookupRequest
from app.services.extractors import PageExtractors, extract_cookie, join_address

logger = logging.getLogger(__name__)

_REDIRECT_STATUSES = frozenset({301, 302})
_DIGIT_RE = re.compile(r"\d")


def _safe_url(url: httpx.URL) -> str:
    """Mask every digit after the host, wherever the number sits in the URL."""
    rest = url.raw_path.decode("ascii")
    return f"{url.scheme}://{url.netloc.decode('ascii')}{_DIGIT_RE.sub('x', rest)}"


class WhitePagesLookup:
    """One reverse lookup of a single phone number.

    The page is fetched twice: the first response carries the session cookie
    the site requires, the second (sent with that cookie) carries the
    contact details. The result is computed once and reused.
    """

    def __init__(
        self,
        request: LookupRequest,
        client: httpx.Client,
        settings: Settings,
        extractors: PageExtractors | None = None,
    ):
        self._request = request
        self._client = client
        self._settings = settings
        self._extractors = extractors or PageExtractors()

    @property
    def number(self) -> str:
        return self._request.number

    @property
    def url(self) -> str:
        return self._settings.lookup_url + self._request.number

    @cached_property
    def contact_info(self) -> ContactInfo:
        # Both fetches happen on every lookup; we don't know what the site
        # ties the cookie to (IP, time window), so it is never reused.
        first = self._fetch(self.url)
        cookie = extract_cookie(first) if first is not None else None
        if cookie is None:
            raise MissingCookieError()

        second = self._fetch(self.url, cookie=cookie)
        return self._build_contact_info(second or "")

    def lookup(self) -> ContactInfo:
        """Resolve the number to best-effort contact details, fetching once."""
        return self.contact_info

    def _headers(self, cookie: str | None) -> dict[str, str]:
        headers = {"User-Agent": self._settings.user_agent}
        if cookie is not None:
            headers["Cookie"] = f"{self._settings.cookie_name}={cookie}"
        return headers

    def _fetch(self, url: str, cookie: str | None = None) -> str | None:
        """GET a page, following 301/302 up to ``max_redirects`` hops.

        Returns None when a redirect has no Location header.
        """
        headers = self._headers(cookie)
        try:
            target = httpx.URL(url)
        except httpx.InvalidURL as exc:
            raise TransportError(f"Invalid lookup URL: {exc}") from exc

        status = None
        for _ in range(self._settings.max_redirects + 1):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Fetching %s",
                    str(target) if self._settings.log_pii else _safe_url(target),
                )
            try:
                resp = self._client.get(target, headers=headers, follow_redirects=False)
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise TransportError(f"GET failed: {exc}") from exc

            status = resp.status_code
            if status not in _REDIRECT_STATUSES:
                if status >= 400:
                    logger.warning("Lookup page returned HTTP %d", status)
                return resp.text

            locations = resp.headers.get_list("location")
            if not locations:
                logger.warning("HTTP %d without Location header", status)
                return None
            try:
                target = resp.url.join(locations[-1])
            except httpx.InvalidURL as exc:
                raise TransportError(
                    f"Invalid redirect location: {exc}", status_code=status
                ) from exc

        raise TransportError(
            f"Exceeded {self._settings.max_redirects} redirects", status_code=status
        )

    def _build_contact_info(self, html: str) -> ContactInfo:
        ex = self._extractors
        address = join_address(
            ex.address_primary(html),
            ex.address_secondary(html),
            ex.address_location(html),
        )
        formatted_number = ex.phone_number(html) or self._request.number
        return ContactInfo(
            name=ex.name(html),
            address=address,
            formatted_number=formatted_number,
            website=self._settings.lookup_url + formatted_number,
        )


class ReversePhoneLookupClient:
    """Hands out one ``WhitePagesLookup`` per phone number.

    Lookups share the HTTP client and settings but nothing else; call
    ``lookup()`` on the returned instance, which caches its own result.
    """

    def __init__(
        self,
        client: httpx.Client,
        settings: Settings,
        extractors: PageExtractors | None = None,
    ):
        self._client = client
        self._settings = settings
        self._extractors = extractors

    def for_number(self, number: str) -> WhitePagesLookup:
        return WhitePagesLookup(
            LookupRequest(number=number),
            self._client,
            self._settings,
            extractors=self._extractors,
        )
