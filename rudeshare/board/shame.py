"""Hall of Shame: the public log of posts banned for being too polite.

Entries are persisted as newline-delimited JSON in daily files under
``~/.rudeshare/hall_of_shame/`` (or the configured data directory).
"""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

from rudeshare.board.models import ShameEntry
from rudeshare.board.store import hash_ip

logger = logging.getLogger(__name__)


class HallOfShame:
    """File-based JSONL log of polite content and the insult it earned."""

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = Path(base_dir) if base_dir else Path.home() / ".rudeshare" / "hall_of_shame"
        self._base_dir.mkdir(parents=True, exist_ok=True)
        # path -> ((size, mtime_ns), readable entry count)
        self._counts: dict[Path, tuple[tuple[int, int], int]] = {}

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _log_file_for_date(self, dt: datetime) -> Path:
        return self._base_dir / f"{dt.strftime('%Y-%m-%d')}.jsonl"

    def _read_file(self, path: Path) -> list[ShameEntry]:
        entries: list[ShameEntry] = []
        for lineno, raw in enumerate(path.read_bytes().splitlines(), start=1):
            if not raw.strip():
                continue
            try:
                entries.append(ShameEntry(**json.loads(raw.decode("utf-8"))))
            except (UnicodeDecodeError, json.JSONDecodeError, TypeError):
                logger.warning("Skipping unreadable shame entry %s:%d", path.name, lineno)
        return entries

    def _read_all_entries(self) -> list[ShameEntry]:
        entries: list[ShameEntry] = []
        for path in sorted(self._base_dir.glob("*.jsonl")):
            entries.extend(self._read_file(path))
        return entries

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def record(
        self,
        content: str,
        flagged_terms: Sequence[str],
        rude_response: str,
        ip_address: str = "",
    ) -> ShameEntry:
        """Append a banned post to the log and return the stored entry."""
        now = datetime.now(timezone.utc)
        entry = ShameEntry(
            id=uuid.uuid4().hex[:16],
            timestamp=now.isoformat(),
            content=content,
            flagged_terms=list(flagged_terms),
            rude_response=rude_response,
            ip_hash=hash_ip(ip_address) if ip_address else "",
        )
        with self._log_file_for_date(now).open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(asdict(entry)) + "\n")
        return entry

    def list_entries(self, limit: int = 20) -> list[ShameEntry]:
        """Return the most recent entries, newest first."""
        entries = sorted(reversed(self._read_all_entries()), key=lambda e: e.timestamp, reverse=True)
        return entries[:limit]

    def count(self) -> int:
        """Number of readable entries.

        Each file is parsed again only when its size or mtime changed, so
        past days' files cost one ``stat`` per call.
        """
        total = 0
        seen: dict[Path, tuple[tuple[int, int], int]] = {}
        for path in sorted(self._base_dir.glob("*.jsonl")):
            stat = path.stat()
            key = (stat.st_size, stat.st_mtime_ns)
            cached = self._counts.get(path)
            n = cached[1] if cached and cached[0] == key else len(self._read_file(path))
            seen[path] = (key, n)
            total += n
        self._counts = seen
        return total
