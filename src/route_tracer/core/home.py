"""The persisted "home" coordinate used as the default route origin."""
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from route_tracer.cache import keys
from route_tracer.config import settings
from route_tracer.core.location import LocationProvider
from route_tracer.core.models import parse_coordinate

log = logging.getLogger(__name__)


class HomeStore(ABC):
    """Single named coordinate string that survives process restarts."""

    def __init__(self, key: Optional[str] = None):
        self.key = key or settings.home_key

    @abstractmethod
    def get_home(self) -> Optional[str]:
        raise NotImplementedError

    @abstractmethod
    def _write(self, value: str) -> None:
        raise NotImplementedError

    def set_home(self, text: str) -> str:
        """Validate *text* and store it normalized as ``"<lon>,<lat>"``."""
        value = parse_coordinate(text, field="home").to_query()
        self._write(value)
        log.info("Home coordinate set to %s", value)
        return value


class RedisHomeStore(HomeStore):
    def __init__(self, client, key: Optional[str] = None):
        super().__init__(key)
        self.client = client

    def get_home(self) -> Optional[str]:
        # read errors propagate to the caller
        return self.client.get(keys.preference(self.key))

    def _write(self, value: str) -> None:
        self.client.set(keys.preference(self.key), value)


class JsonFileHomeStore(HomeStore):
    """Preferences kept as a flat JSON object in one file."""

    def __init__(self, path: Optional[str] = None, key: Optional[str] = None):
        super().__init__(key)
        self.path = Path(path or settings.home_file).expanduser()

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.warning("Ignoring unreadable preferences file %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def get_home(self) -> Optional[str]:
        value = self._read_all().get(self.key)
        return value if isinstance(value, str) else None

    def _write(self, value: str) -> None:
        data = self._read_all()
        data[self.key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def build_home_store() -> HomeStore:
    """Redis when configured and reachable, otherwise the JSON file."""
    from route_tracer.cache.redis_client import get_redis

    r = get_redis()
    if r is not None:
        return RedisHomeStore(r)
    return JsonFileHomeStore()


def ensure_home(store: HomeStore, location: LocationProvider) -> Optional[str]:
    """
    Return the saved home, saving the current location first if none exists.

    Returns None when there is no saved home and no location fix.
    """
    home = store.get_home()
    if home is not None:
        return home

    here = location.current_location()
    if here is None:
        return None
    return store.set_home(here.to_query())
