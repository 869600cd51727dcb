"""Read-only access to the Lutris pga.db catalog."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from pathlib import Path

from lutris_sgdb.core.exceptions import CatalogError

logger = logging.getLogger(__name__)


class LutrisCatalog:
    """Reads game slugs from the Lutris SQLite catalog.

    The database is opened in read-only mode so that a missing file is
    reported as an error instead of being created empty.

    Example:
        catalog = LutrisCatalog(Path("~/.local/share/lutris/pga.db").expanduser())
        slugs = catalog.read_slugs()
    """

    query = "SELECT slug FROM games"

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        """Open a read-only connection to the catalog."""
        uri = f"{self._db_path.resolve().as_uri()}?mode=ro"
        return sqlite3.connect(uri, uri=True)

    def read_slugs(self) -> list[str]:
        """Get every non-empty game slug, in catalog order.

        Returns:
            List of slugs

        Raises:
            CatalogError: If the catalog cannot be opened or queried
        """
        logger.debug("Reading game slugs from %s", self._db_path)
        try:
            with closing(self._connect()) as conn:
                rows = conn.execute(self.query).fetchall()
        except sqlite3.Error as e:
            raise CatalogError(str(self._db_path), str(e)) from e

        slugs = [str(row[0]) for row in rows if row[0]]
        logger.debug("Catalog lists %d games (%d with a slug)", len(rows), len(slugs))
        return slugs
