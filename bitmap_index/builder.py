import logging
import time
from collections import defaultdict
from typing import Any, Dict, List, Optional

from .base import InvalidIdError, check_id
from .engine import BitmapIndex


logger = logging.getLogger(__name__)


class FlagIndexBuilder:
    """Builds a BitmapIndex from flagged records."""

    def __init__(self, records: List[Dict], config: Optional[Dict[str, Any]] = None):
        """
        Initialize builder with raw records.

        Args:
            records: List of dicts, each containing:
                - id: unsigned 32-bit integer
                - flags: iterable of flag names held by that id
            config: Optional overrides for the built index's config
        """
        self.records = records
        self.config = config
        self.flag_members = defaultdict(list)

        self.stats = {
            "build_time": 0,
            "record_count": len(records),
            "key_count": 0
        }

    def build(self) -> BitmapIndex:
        """Group ids per flag and batch-load them into a new index."""
        start_time = time.time()

        self._collect_flags()
        index = BitmapIndex(self.config)
        for flag, ids in self.flag_members.items():
            index.batch_insert(flag, ids)

        self.stats["build_time"] = time.time() - start_time
        self.stats["key_count"] = len(index)
        logger.debug(
            f"Built index with {self.stats['key_count']} keys from "
            f"{self.stats['record_count']} records in {self.stats['build_time']:.4f}s"
        )
        return index

    def _collect_flags(self):
        self.flag_members.clear()
        for record in self.records:
            if "id" not in record:
                raise InvalidIdError(None)
            record_id = check_id(record["id"])
            flags = record.get("flags") or ()
            if isinstance(flags, str):
                raise TypeError(f"Record {record_id} flags must be a list of names, got string {flags!r}")
            for flag in flags:
                self.flag_members[flag].append(record_id)
