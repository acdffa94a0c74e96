"""Recent-search history for the search dropdown."""

import json
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from medquery.logging import get_logger

from .models import SearchHistoryItem
from .service import DEFAULT_MAX_QUERY_LENGTH, normalize_search_query, now_millis

logger = get_logger(__name__, component="history")

DEFAULT_MAX_HISTORY_ITEMS = 10


class SearchHistory:
    """Most-recent-first list of searches, capped at max_items.

    When a path is given the history is stored as a JSON array in that file;
    otherwise it lives in memory for the lifetime of the instance. Storage
    problems are logged and never interrupt a search.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        max_items: int = DEFAULT_MAX_HISTORY_ITEMS,
        max_query_length: int = DEFAULT_MAX_QUERY_LENGTH,
    ):
        self.path = Path(path) if path else None
        self.max_items = max_items
        self.max_query_length = max_query_length
        self._items: List[SearchHistoryItem] = []

    def get(self) -> List[SearchHistoryItem]:
        """Return saved searches, newest first. Unreadable storage yields []."""
        if self.path is None:
            return list(self._items)

        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.warning(
                f"Failed to read search history: {e}",
                extra={"event": "history.read_failed", "path": str(self.path)},
            )
            return []

        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning(
                f"Ignoring corrupt search history: {e}",
                extra={"event": "history.corrupt", "path": str(self.path)},
            )
            return []

        if not isinstance(data, list):
            return []

        # A bad entry is dropped on its own so the next save keeps the rest
        items = []
        for index, entry in enumerate(data):
            try:
                items.append(SearchHistoryItem.model_validate(entry))
            except ValidationError as e:
                logger.warning(
                    f"Skipping invalid search history entry {index}: {e}",
                    extra={"event": "history.corrupt", "path": str(self.path), "entry_index": index},
                )
        return items

    def save(self, query: str, location: str = "") -> SearchHistoryItem:
        """Remember a search, moving an identical earlier search to the front.

        Returns:
            The stored item
        """
        item = SearchHistoryItem(
            query=normalize_search_query(query, self.max_query_length),
            location=(location or "").strip(),
            timestamp=now_millis(),
        )

        items = [
            existing
            for existing in self.get()
            if not (existing.query == item.query and existing.location == item.location)
        ]
        items.insert(0, item)
        self._store(items[: self.max_items])

        logger.debug(
            "Search saved to history",
            extra={"event": "history.saved", "history_size": min(len(items), self.max_items)},
        )
        return item

    def clear(self) -> None:
        """Forget all saved searches."""
        self._items = []
        if self.path is None:
            return

        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(
                f"Failed to clear search history: {e}",
                extra={"event": "history.clear_failed", "path": str(self.path)},
            )

    def _store(self, items: List[SearchHistoryItem]) -> None:
        self._items = items
        if self.path is None:
            return

        payload = json.dumps([item.model_dump() for item in items], ensure_ascii=False, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as e:
            logger.warning(
                f"Failed to save search history: {e}",
                extra={"event": "history.write_failed", "path": str(self.path)},
            )
