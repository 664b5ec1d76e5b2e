"""
Dataset Service (the dashboard's "Engine")

===============================================================================
PURPOSE:
===============================================================================
This file owns the dataset collection for a session and turns loaded
datasets into rendered visualizations. UI files (main_app.py,
apps/datasets/dashboard.py) call these functions; they never fetch,
parse or call a renderer directly.

1.  **Snapshots, not in-place edits:**
    - DatasetStore keeps an immutable mapping {key: Dataset}.
    - A load never edits that mapping. It builds a new one from the
      snapshot that is current *at commit time* and swaps it in under a
      lock, so two loads finishing together cannot drop each other's rows.

2.  **One failing chart never takes down the page:**
    - Every renderer call goes through try_render(), which returns a
      RenderOutcome (descriptor OR error) instead of raising.

===============================================================================
QUICK NAVIGATION
===============================================================================
--- SECTION 1: DATA MODEL ---
    - Dataset, RenderOutcome

--- SECTION 2: DATASET STORE ---
    - DatasetStore.from_sources(), snapshot(), get(), load(), rows_by_key()

--- SECTION 3: RENDER COMPOSITION ---
    - resolve_renderer(), try_render()
    - render_dataset_visualizations(), render_cross_dataset_visualizations()
"""

import importlib
import threading
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from common.charts import ChartInputError
from common.data_access import fetch_text, parse_csv
from common.logging_utils import get_logger

logger = get_logger(__name__)

Record = dict[str, str]
Renderer = Union[str, Callable[[Any], Any]]


# --- [S1] SECTION 1: DATA MODEL ---

@dataclass(frozen=True)
class Dataset:
    """One configured data source and, once loaded, its parsed rows."""

    key: str
    source_locator: str
    display_name: str
    rows: Optional[tuple[Record, ...]] = None

    @property
    def is_loaded(self) -> bool:
        return self.rows is not None


@dataclass(frozen=True)
class RenderOutcome:
    """
    Result of one renderer call: either a descriptor (which may be None for
    "nothing to draw") or an error message plus its kind.
    """

    descriptor: Any = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    renderer_name: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


# --- [S2] SECTION 2: DATASET STORE ---

class DatasetStore:
    """Holds the session's datasets as an atomically replaced snapshot."""

    def __init__(self, datasets: Mapping[str, Dataset]):
        self._snapshot = MappingProxyType(dict(datasets))
        self._lock = threading.Lock()

    @classmethod
    def from_sources(cls, sources: Mapping[str, Mapping[str, str]]) -> "DatasetStore":
        """Build a store from config.DATA_SOURCES-shaped config; nothing is loaded."""
        return cls({
            key: Dataset(key=key, source_locator=source["url"], display_name=source["name"])
            for key, source in sources.items()
        })

    def snapshot(self) -> Mapping[str, Dataset]:
        return self._snapshot

    def get(self, key: str) -> Dataset:
        return self._snapshot[key]

    def rows_by_key(self) -> dict[str, Optional[tuple[Record, ...]]]:
        return {key: dataset.rows for key, dataset in self._snapshot.items()}

    def load(self, key: str, fetch: Optional[Callable[[str], str]] = None) -> Dataset:
        """
        Fetch and parse one dataset, then commit its rows.

        Raises KeyError for an unknown key and DatasetLoadError when the
        fetch or parse fails; in both cases the store is left untouched.
        """
        fetch = fetch or fetch_text
        dataset = self.get(key)
        logger.info("Loading dataset '%s' from %s", key, dataset.source_locator)

        text = fetch(dataset.source_locator)
        rows = parse_csv(text)

        loaded = self._commit(key, rows)
        logger.info("Loaded dataset '%s' (%d rows)", key, len(rows))
        return loaded

    def _commit(self, key: str, rows: tuple[Record, ...]) -> Dataset:
        with self._lock:
            current = self._snapshot
            loaded = replace(current[key], rows=rows)
            updated = dict(current)
            updated[key] = loaded
            self._snapshot = MappingProxyType(updated)
        return loaded


# --- [S3] SECTION 3: RENDER COMPOSITION ---

def resolve_renderer(renderer: Renderer) -> Callable[[Any], Any]:
    """Accept a callable, or a dotted path like 'apps.datasets.visualizations.color_table'."""
    if callable(renderer):
        return renderer
    module_path, _, attr = renderer.rpartition(".")
    if not module_path:
        raise ValueError(f"Renderer path '{renderer}' must be a dotted module path")
    module = importlib.import_module(module_path)
    return getattr(module, attr)


def _renderer_name(renderer: Renderer) -> str:
    if isinstance(renderer, str):
        return renderer
    return getattr(renderer, "__qualname__", None) or repr(renderer)


def try_render(renderer: Renderer, data: Any) -> RenderOutcome:
    """
    Call one renderer and capture its result or its failure.
    Failures are logged with their traceback and never re-raised.
    """
    name = _renderer_name(renderer)
    try:
        render = resolve_renderer(renderer)
        return RenderOutcome(descriptor=render(data), renderer_name=name)
    except Exception as e:
        logger.exception("Error rendering visualization %s: %s", name, e)
        kind = e.kind if isinstance(e, ChartInputError) else type(e).__name__
        return RenderOutcome(error=str(e), error_kind=kind, renderer_name=name)


def render_dataset_visualizations(
    dataset: Dataset, renderers: Sequence[Renderer]
) -> Optional[list[RenderOutcome]]:
    """Run a dataset's renderers in order; None while the dataset isn't loaded."""
    if not dataset.is_loaded:
        return None
    return [try_render(renderer, dataset.rows) for renderer in renderers]


def render_cross_dataset_visualizations(
    snapshot: Mapping[str, Dataset], renderers: Sequence[Renderer]
) -> list[RenderOutcome]:
    """Run the "all" renderers on {key: rows or None} for every dataset."""
    rows_by_key = {key: dataset.rows for key, dataset in snapshot.items()}
    return [try_render(renderer, rows_by_key) for renderer in renderers]
