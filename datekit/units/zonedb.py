"""Injected timezone database.

ZoneDatabase maps IANA keys such as "America/New_York" to zoneinfo.ZoneInfo
objects. It reads either the zone files bundled with the tzdata
distribution or compiled TZif files from an explicit list of directories.
The process-wide TZPATH and the host's /usr/share/zoneinfo are never
consulted implicitly.

Examples:
    >>> db = ZoneDatabase()
    >>> db.resolve("Europe/Paris").key
    'Europe/Paris'

    >>> db = ZoneDatabase(search_path=["/usr/share/zoneinfo"])
"""

from __future__ import annotations

import logging
import os
import re
import zoneinfo
from importlib import resources
from pathlib import Path
from typing import Iterable, Sequence

from datekit.errors import TimezoneError

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_+\-]+(?:/[A-Za-z0-9_+\-]+)*$")

_TZIF_MAGIC = b"TZif"


class ZoneDatabase:
    """A read-only source of timezone rules.

    Attributes:
        search_path: Directories searched for TZif files, or None when the
            bundled tzdata package is used.
    """

    __slots__ = ("_search_path", "_cache")

    def __init__(self, search_path: Sequence[str | os.PathLike[str]] | None = None) -> None:
        if search_path is None:
            self._search_path: tuple[Path, ...] | None = None
        else:
            self._search_path = tuple(Path(p) for p in search_path)
        self._cache: dict[str, zoneinfo.ZoneInfo] = {}

    @property
    def search_path(self) -> tuple[Path, ...] | None:
        return self._search_path

    def resolve(self, key: str) -> zoneinfo.ZoneInfo:
        """Return the zone rules for an IANA key.

        Raises:
            TimezoneError: If the key is malformed or not in the database.
        """
        if not isinstance(key, str) or not _KEY_PATTERN.match(key):
            raise TimezoneError(f"invalid timezone key: {key!r}")

        cached = self._cache.get(key)
        if cached is not None:
            return cached

        zone = self._load(key)
        self._cache[key] = zone
        logger.debug("resolved timezone %s from %s", key, self._describe())
        return zone

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        try:
            self.resolve(key)
        except TimezoneError:
            return False
        return True

    def available(self) -> frozenset[str]:
        """Return every key this database can resolve."""
        if self._search_path is None:
            zones = _tzdata_root().joinpath("zones").read_text(encoding="utf-8")
            return frozenset(line.strip() for line in zones.splitlines() if line.strip())

        keys: set[str] = set()
        for root in self._search_path:
            keys.update(_scan_directory(root))
        return frozenset(keys)

    def _load(self, key: str) -> zoneinfo.ZoneInfo:
        parts = key.split("/")
        if self._search_path is None:
            resource = _tzdata_root().joinpath("zoneinfo")
            for part in parts:
                resource = resource.joinpath(part)
            if not resource.is_file():
                raise TimezoneError(f"unknown timezone: {key!r}")
            with resource.open("rb") as fobj:
                return _read_zone(fobj, key)

        for root in self._search_path:
            candidate = root.joinpath(*parts)
            if candidate.is_file():
                with candidate.open("rb") as fobj:
                    return _read_zone(fobj, key)

        logger.debug("timezone %s not found in %s", key, self._describe())
        raise TimezoneError(f"unknown timezone: {key!r}")

    def _describe(self) -> str:
        if self._search_path is None:
            return "tzdata"
        return os.pathsep.join(str(p) for p in self._search_path)

    def __repr__(self) -> str:
        if self._search_path is None:
            return "ZoneDatabase()"
        return f"ZoneDatabase(search_path={[str(p) for p in self._search_path]!r})"


def _tzdata_root():
    try:
        return resources.files("tzdata")
    except ModuleNotFoundError as exc:
        raise TimezoneError(
            "the tzdata package is required when no search_path is given"
        ) from exc


def _read_zone(fobj, key: str) -> zoneinfo.ZoneInfo:
    try:
        return zoneinfo.ZoneInfo.from_file(fobj, key=key)
    except ValueError as exc:
        raise TimezoneError(f"corrupt zone file for {key!r}") from exc


def _scan_directory(root: Path) -> Iterable[str]:
    if not root.is_dir():
        return
    for path in root.rglob("*"):
        if not path.is_file():
            continue
        key = path.relative_to(root).as_posix()
        if not _KEY_PATTERN.match(key):
            continue
        with path.open("rb") as fobj:
            if fobj.read(4) != _TZIF_MAGIC:
                continue
        yield key


_default: ZoneDatabase | None = None


def default_database() -> ZoneDatabase:
    """Return the shared tzdata-backed database used when none is injected."""
    global _default
    if _default is None:
        _default = ZoneDatabase()
    return _default


__all__ = ["ZoneDatabase", "default_database"]
