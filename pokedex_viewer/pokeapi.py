"""PokeAPI (pokeapi.co) client: fetch one record, the record count, and sprite images."""

from __future__ import annotations

import json
import urllib.error
import urllib.parse
import urllib.request

from pokedex_viewer.version import APP_NAME, __version__

API_BASE = "https://pokeapi.co/api/v2"

USER_AGENT = f"{APP_NAME}/{__version__}"


class PokeApiError(Exception):
    """Base class for failures talking to the API."""


class RecordNotFound(PokeApiError):
    """The API has no record for the requested id or name (HTTP 404)."""


class RequestFailed(PokeApiError):
    """Non-success status, connection error or unreadable payload."""


class BoundLookupFailed(PokeApiError):
    """The record count could not be obtained."""


def _open(url: str, timeout: float, accept: str = "application/json") -> bytes:
    req = urllib.request.Request(
        url,
        headers={"Accept": accept, "User-Agent": USER_AGENT},
    )
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            return resp.read()
    except urllib.error.HTTPError as e:
        if e.code == 404:
            raise RecordNotFound(f"No record at {url}") from e
        raise RequestFailed(f"HTTP {e.code}: {e.reason}") from e
    except urllib.error.URLError as e:
        raise RequestFailed(str(e.reason) if e.reason else "Connection error") from e
    except (OSError, ValueError) as e:
        raise RequestFailed(str(e)) from e


def _get_json(url: str, timeout: float) -> dict:
    data = _open(url, timeout)
    try:
        payload = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise RequestFailed(f"Invalid response: {e}") from e
    if not isinstance(payload, dict):
        raise RequestFailed("Invalid response: expected a JSON object")
    return payload


def record_url(target: int | str) -> str:
    """URL of one record, keyed by numeric id or lowercase name."""
    return f"{API_BASE}/pokemon/" + urllib.parse.quote(str(target), safe="")


def fetch_pokemon(target: int | str, timeout: float = 15) -> dict:
    """Fetch a record by id or name. Raises RecordNotFound (404) or RequestFailed."""
    return _get_json(record_url(target), timeout)


def fetch_count(timeout: float = 10) -> int:
    """Fetch the total number of records (upper bound for ids). Raises BoundLookupFailed."""
    try:
        payload = _get_json(f"{API_BASE}/pokemon?limit=1", timeout)
    except PokeApiError as e:
        raise BoundLookupFailed(str(e)) from e
    count = payload.get("count")
    # bool is an int subclass; reject it explicitly
    if not isinstance(count, int) or isinstance(count, bool) or count < 1:
        raise BoundLookupFailed(f"Invalid count in response: {count!r}")
    return count


def fetch_image_bytes(url: str, timeout: float = 15) -> bytes:
    """Download an image (sprite or artwork). Raises RecordNotFound or RequestFailed."""
    return _open(url, timeout, accept="image/*")
