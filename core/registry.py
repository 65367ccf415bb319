"""Process-wide reference data: the waste taxonomy and the disposal-center catalog."""
import threading
from typing import Iterable, Optional, Tuple
from loguru import logger
from configurations.config import Config
from models.disposal_center import DisposalCenter
from tools.waste_taxonomy import WasteTaxonomy


class ReferenceRegistry:
    """Loads reference data once and serves immutable snapshots of it."""

    def __init__(self):
        self._taxonomy: Optional[WasteTaxonomy] = None
        self._catalog: Tuple[DisposalCenter, ...] = ()
        self._lock = threading.Lock()

    def load(self, taxonomy: Optional[WasteTaxonomy] = None,
             centers: Optional[Iterable[DisposalCenter]] = None) -> None:
        """Initialize reference data; later calls are no-ops."""
        with self._lock:
            if self._taxonomy is not None:
                return
            if taxonomy is None:
                taxonomy = (WasteTaxonomy.from_json(Config.TAXONOMY_PATH)
                            if Config.TAXONOMY_PATH else WasteTaxonomy.default())
            if centers is None:
                from services.catalog_service import CenterCatalogService
                centers = CenterCatalogService().load_centers()
            self._catalog = tuple(centers)
            self._taxonomy = taxonomy
            logger.info(f"Reference data loaded: {len(taxonomy)} waste types, {len(self._catalog)} centers")

    @property
    def is_loaded(self) -> bool:
        return self._taxonomy is not None

    def taxonomy(self) -> WasteTaxonomy:
        if self._taxonomy is None:
            self.load()
        return self._taxonomy

    def catalog(self) -> Tuple[DisposalCenter, ...]:
        """Current catalog snapshot; a caller keeps the tuple it received."""
        if self._taxonomy is None:
            self.load()
        return self._catalog

    def replace_catalog(self, centers: Iterable[DisposalCenter]) -> None:
        """Swap in a fresh catalog snapshot."""
        snapshot = tuple(centers)
        with self._lock:
            self._catalog = snapshot
        logger.info(f"Catalog replaced with {len(snapshot)} centers")

    def reset(self) -> None:
        with self._lock:
            self._taxonomy = None
            self._catalog = ()


# Global registry instance
registry = ReferenceRegistry()
