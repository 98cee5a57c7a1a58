# ABOUTME: Holds the current dataset snapshot and swaps it wholesale on reload.
# ABOUTME: Commands take one snapshot per invocation so a reload never mixes old and new data.

import logging
from pathlib import Path

from dexsearch.data.dex import DexData

logger = logging.getLogger(__name__)


class DexHolder:
    """Publishes one immutable dataset snapshot at a time.

    Readers call snapshot() once and keep using the returned object; replace()
    only rebinds the reference, so evaluations already running keep the old
    snapshot and no locking is needed.
    """

    def __init__(self, dex: DexData) -> None:
        self._dex = dex

    def snapshot(self) -> DexData:
        """Return the current snapshot."""
        return self._dex

    def replace(self, dex: DexData) -> DexData:
        """Publish a new snapshot and return the one it replaced."""
        previous, self._dex = self._dex, dex
        logger.info("Replaced dex snapshot %r with %r", previous, dex)
        return previous

    def reload(self, dex_dir: Path | None = None) -> DexData:
        """Load the dataset again from disk and publish it.

        The current snapshot stays in place if loading fails.

        Args:
            dex_dir: Dataset directory, defaults to settings.dex_dir.

        Returns:
            The newly published snapshot.
        """
        from dexsearch.data.loader import load_dex  # noqa: PLC0415

        dex = load_dex(dex_dir)
        self.replace(dex)
        return dex
