"""Shared fixtures and fakes for the export tests."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import pytest


def media_payload(
    romaji: str = "Test Anime",
    start_date: dict | None = None,
    end_date: dict | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Build a raw ``Page.media`` entry shaped like an AniList response."""
    payload: dict[str, Any] = {
        "id": 1,
        "idMal": 10,
        "title": {"romaji": romaji, "english": f"{romaji} (EN)", "native": None},
        "coverImage": {"extraLarge": f"https://img.example.com/{romaji}.jpg", "color": "#fff"},
        "format": "TV",
        "episodes": 12,
        "season": "SPRING",
        "source": "MANGA",
        "genres": ["Action", "Drama"],
        "studios": {"nodes": [{"id": 1, "name": "MAPPA"}]},
        "startDate": start_date if start_date is not None else {"year": 2021, "month": 4, "day": 8},
        "endDate": end_date if end_date is not None else {"year": 2021, "month": 6, "day": 24},
    }
    payload.update(overrides)
    return payload


def page_body(media: list[dict], has_next_page: bool) -> dict[str, Any]:
    return {
        "data": {
            "Page": {
                "pageInfo": {"hasNextPage": has_next_page, "total": None},
                "media": media,
            }
        }
    }


@dataclass
class FakeResponse:
    status: int
    body: Any

    async def text(self, errors: str = "strict") -> str:
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8", errors=errors)
        return self.body if isinstance(self.body, str) else json.dumps(self.body)

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        return None


@dataclass
class FakeSession:
    """Stands in for ``aiohttp.ClientSession``; answers posts in order."""

    responses: list[FakeResponse]
    requests: list[dict[str, Any]] = field(default_factory=list)

    def post(self, url: str, json: Any = None, headers: Any = None) -> FakeResponse:
        self.requests.append({"url": url, "json": json, "headers": headers})
        return self.responses[len(self.requests) - 1]


@pytest.fixture
def two_page_session() -> FakeSession:
    """Two successful pages: two media then one media."""
    return FakeSession(
        responses=[
            FakeResponse(200, page_body([media_payload("Alpha"), media_payload("Beta")], True)),
            FakeResponse(200, page_body([media_payload("Gamma")], False)),
        ]
    )
