"""
Catalog loading: directory of JSON blobs → Catalog.

Every entry in the source directory is treated as a candidate blob,
whatever its name. Policy:
  - the directory itself cannot be listed → CatalogSourceError, nothing loads
  - one entry cannot be read or fails validation → dropped, logged, recorded
    in Catalog.dropped; the remaining entries still load
The surviving records are sorted by id, so the result does not depend on the
order the filesystem lists entries in.
"""
from __future__ import annotations

import logging
from pathlib import Path

from backend.catalog.catalog import Catalog, DroppedBlob
from backend.catalog.parser import MalformedEateryError, parse_eatery
from models import Eatery

logger = logging.getLogger(__name__)


class CatalogSourceError(Exception):
    """Raised when the catalog source directory cannot be enumerated."""


def _list_source(source_dir: Path) -> list[Path]:
    try:
        return list(source_dir.iterdir())
    except OSError as exc:
        raise CatalogSourceError(
            f"Cannot read catalog source {source_dir}: {exc}"
        ) from exc


def _load_entry(path: Path) -> Eatery | DroppedBlob:
    try:
        blob = path.read_bytes()
    except OSError as exc:
        return DroppedBlob(path=path, reason=f"unreadable: {exc.strerror or exc}")
    try:
        return parse_eatery(blob)
    except MalformedEateryError as exc:
        return DroppedBlob(path=path, reason=f"malformed: {exc}")


def load_catalog(source_dir: Path | str) -> Catalog:
    source_dir = Path(source_dir)
    entries = _list_source(source_dir)

    eateries: list[Eatery] = []
    dropped: list[DroppedBlob] = []
    for path in entries:
        result = _load_entry(path)
        if isinstance(result, DroppedBlob):
            logger.warning("Skipping %s: %s", path.name, result.reason)
            dropped.append(result)
            continue
        eateries.append(result)

    catalog = Catalog.from_eateries(eateries, dropped)
    for eatery_id in catalog.duplicate_ids():
        logger.warning(
            "Duplicate eatery id %d; lookups return the first entry", eatery_id
        )
    logger.info(
        "Loaded %d/%d eateries from %s", len(catalog), len(entries), source_dir
    )
    return catalog
