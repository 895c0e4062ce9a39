# typegallery/pokeapi.py
# Two-stage PokéAPI fetch: type listing -> per-Pokémon details -> records

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

from typegallery import config
from typegallery.errors import DetailUnavailable, ListingUnavailable
from typegallery.logger import log_action, log_verbose
from typegallery.types import require_known_type

# --------------------------------------------------------------------------- #
# Shared HTTP session (pool sized for the detail fan-out, no retries)
# --------------------------------------------------------------------------- #

_session = requests.Session()
_adapter = HTTPAdapter(max_retries=0, pool_maxsize=config.DETAIL_WORKERS)
_session.mount("https://", _adapter)
_session.mount("http://", _adapter)


@dataclass(frozen=True)
class PokemonRecord:
    name: str
    image_url: Optional[str]
    types: tuple[str, ...]

    @property
    def primary_type(self) -> Optional[str]:
        return self.types[0] if self.types else None

    def to_dict(self) -> dict:
        return {"name": self.name, "image": self.image_url, "types": list(self.types)}


def _json_fetch(session, url: str, error_cls, type_name: str):
    """GET url and decode JSON; any failure becomes error_cls."""
    try:
        r = session.get(url, timeout=config.REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise error_cls(type_name, f"{url}: {e}") from e
    if not 200 <= r.status_code < 300:
        raise error_cls(type_name, f"{url}: HTTP {r.status_code}")
    try:
        return r.json()
    except ValueError as e:
        raise error_cls(type_name, f"{url}: invalid JSON") from e


def best_sprite(p: dict) -> Optional[str]:
    """Official artwork if present, else the standard front sprite, else None."""
    s = p.get("sprites") or {}
    other = s.get("other") or {}
    return (
        (other.get("official-artwork") or {}).get("front_default")
        or s.get("front_default")
        or None
    )


def get_type_listing(type_name: str, session=None, limit: Optional[int] = None) -> list[dict]:
    """Stage 1: first `limit` {name, url} references for a type, in API order."""
    session = session or _session
    limit = config.LISTING_LIMIT if limit is None else limit
    data = _json_fetch(session, f"{config.POKEAPI_BASE_URL}/type/{type_name}", ListingUnavailable, type_name)
    try:
        refs = [entry["pokemon"] for entry in (data or {}).get("pokemon", [])]
        refs = [{"name": ref["name"], "url": ref["url"]} for ref in refs]
    except (KeyError, TypeError, AttributeError) as e:
        raise ListingUnavailable(type_name, "malformed listing") from e
    log_verbose(f"listing {type_name}: {len(refs)} entries, keeping {min(len(refs), limit)}")
    return refs[:limit]


def get_pokemon_detail(ref: dict, type_name: str, session=None) -> PokemonRecord:
    """Stage 2: fetch one reference and merge it into a record."""
    session = session or _session
    data = _json_fetch(session, ref["url"], DetailUnavailable, type_name) or {}
    try:
        types = tuple(t["type"]["name"] for t in data.get("types", []))
        image_url = best_sprite(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise DetailUnavailable(type_name, f"malformed detail for {ref['name']}") from e
    log_verbose(f"detail {ref['name']}: {'/'.join(types)}")
    return PokemonRecord(name=ref["name"], image_url=image_url, types=types)


def _fetch_details(refs: list[dict], type_name: str, session) -> list[PokemonRecord]:
    if not refs:
        return []
    pool = ThreadPoolExecutor(max_workers=max(1, config.DETAIL_WORKERS))
    try:
        futures = [pool.submit(get_pokemon_detail, ref, type_name, session) for ref in refs]
        wait(futures, return_when=FIRST_EXCEPTION)
        for f in futures:
            if f.done() and f.exception() is not None:
                raise f.exception()
        return [f.result() for f in futures]
    finally:
        # in-flight requests are left to finish on their own
        pool.shutdown(wait=False, cancel_futures=True)


def fetch_by_type(type_name: str, session=None) -> list[PokemonRecord]:
    """
    Records for up to LISTING_LIMIT Pokémon of `type_name`, in listing order.

    All or nothing: one failed detail request fails the whole call with
    DetailUnavailable. Unknown types raise UnknownType before any request.
    """
    type_name = require_known_type(type_name)
    session = session or _session
    refs = get_type_listing(type_name, session=session)
    records = _fetch_details(refs, type_name, session)
    log_action(f"Fetched {len(records)} Pokémon for type {type_name}")
    return records
