import httpx
import pytest
from httpx import ASGITransport

LOOKUP_URL = "https://lookup.test/search/ReversePhone?full_phone="


def cookie_page(cookie: str = "abc-123", name: str = "PID") -> str:
    return f'<html><script>document.cookie="{name}={cookie}";</script></html>'


def details_page(
    *,
    name: str | None = None,
    number: str | None = None,
    primary: str | None = None,
    secondary: str | None = None,
    location: str | None = None,
) -> str:
    parts = ["<html><body>"]
    if name is not None:
        parts.append(f'<h2 class="send">Send {name}&#39;s details to phone</h2>')
    if number is not None:
        parts.append(f'<ul><li><span class="label">Full Number:</span>{number}</li></ul>')
    if primary is not None:
        parts.append(f'<span class="address-primary street">{primary}</span>')
    if secondary is not None:
        parts.append(f'<span class="address-secondary">{secondary}</span>')
    if location is not None:
        parts.append(f'<span class="address-location locality">{location}</span>')
    parts.append("</body></html>")
    return "".join(parts)


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("LOOKUP_URL", LOOKUP_URL)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
