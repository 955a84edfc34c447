# src/storage/handoff_store.py

"""One-shot staging area for search results handed to the shop view."""

import json
import logging
from collections.abc import MutableMapping
from dataclasses import dataclass

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("storefront.handoff")


@dataclass
class SearchHandoff:
    """A search term and its results, carried to the next view."""

    term: str
    results: list[Product]


class HandoffStore:
    """Two-key string store read at most once.

    :meth:`take` returns the staged record and clears both keys so a
    later, unrelated visit never sees stale results. *slots* is the
    backing string mapping; a private dict when omitted.
    """

    def __init__(
        self, slots: MutableMapping[str, str] | None = None
    ) -> None:
        self._slots: MutableMapping[str, str] = (
            slots if slots is not None else {}
        )
        self._term_key: str = Settings.HANDOFF_TERM_KEY
        self._results_key: str = Settings.HANDOFF_RESULTS_KEY

    def stage(self, term: str, results: list[Product]) -> None:
        """Store *term* and *results*, replacing any earlier record."""
        self._slots[self._term_key] = term
        self._slots[self._results_key] = json.dumps(
            [p.to_dict() for p in results], ensure_ascii=False
        )
        logger.debug(
            "Staged %d results for '%s'", len(results), term
        )

    def has_pending(self) -> bool:
        """True when both keys hold a staged record."""
        return (
            self._term_key in self._slots
            and self._results_key in self._slots
        )

    def take(self) -> SearchHandoff | None:
        """Return the staged record and clear it, or ``None``."""
        if not self.has_pending():
            return None

        term = self._slots.pop(self._term_key)
        encoded = self._slots.pop(self._results_key)
        results = [Product.from_dict(d) for d in json.loads(encoded)]
        logger.debug(
            "Consumed handoff for '%s' (%d results)", term, len(results)
        )
        return SearchHandoff(term=term, results=results)
