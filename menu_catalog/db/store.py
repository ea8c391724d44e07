"""JSON file store holding the whole menu document."""

import json
import logging
import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from menu_catalog.core.exceptions import StoreError
from menu_catalog.core.logging_config import log_store_timing
from menu_catalog.db.seeder import build_seed_document
from menu_catalog.models.document import MenuDocument

logger = logging.getLogger(__name__)


class MenuStore:
    """
    Reads and rewrites the menu document as a single JSON file.

    Loads and saves within one process are serialized by a lock, and
    transaction() holds it across a full load/mutate/save cycle. Separate
    processes sharing the same file are not coordinated: the last save wins.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @log_store_timing
    def load(self) -> MenuDocument:
        """Return the stored document, writing the seed menu first if the file is absent."""
        with self._lock:
            try:
                with open(self._path, "r", encoding="utf-8") as f:
                    raw = json.load(f)
            except FileNotFoundError:
                logger.info("Menu data file %s not found, creating seed menu", self._path)
                document = build_seed_document()
                self.save(document)
                return document
            except (OSError, ValueError) as e:
                raise StoreError(f"Failed to read menu data: {e}") from e

            try:
                return MenuDocument.from_dict(raw)
            except (KeyError, TypeError, ValueError) as e:
                raise StoreError(f"Malformed menu data: {e}") from e

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    @log_store_timing
    def save(self, document: MenuDocument) -> None:
        """Overwrite the backing file with *document* via a temporary file and rename."""
        with self._lock:
            tmp_path = self._path.with_name(self._path.name + ".tmp")
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                with open(tmp_path, "w", encoding="utf-8") as f:
                    json.dump(document.to_dict(), f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self._path)
            except OSError as e:
                raise StoreError(f"Failed to write menu data: {e}") from e

    @contextmanager
    def transaction(self) -> Iterator[MenuDocument]:
        """
        Yield the current document and save it when the block completes.
        If the block raises, the changes are discarded and nothing is written.
        """
        with self._lock:
            document = self.load()
            try:
                yield document
            except Exception:
                logger.trace("Menu transaction rolled back, document discarded")
                raise
            self.save(document)
            logger.trace("Menu transaction committed")
