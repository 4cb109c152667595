"""
Tree walker for GeoJSON documents.

Descends a decoded GeoJSON document (FeatureCollection, Feature or bare
Geometry), hands every Polygon and MultiPolygon to the winding normalizer
and recurses into GeometryCollections. Points, LineStrings and their Multi
forms pass through untouched.

Sibling collections (the Features of a FeatureCollection, the members of a
GeometryCollection and the Polygons of a MultiPolygon) can be fanned out over
a ThreadPoolExecutor. Every sibling owns its own rings, so the only state
shared between workers is the PolygonCounter.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, Optional

from .exceptions import WindingInvariantError
from .winding import Convention, wind_polygon

logger = logging.getLogger(__name__)

GEOMETRY_TYPES = frozenset([
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
])
PASS_THROUGH_TYPES = frozenset(["Point", "MultiPoint", "LineString", "MultiLineString"])
DOCUMENT_TYPES = GEOMETRY_TYPES | {"Feature", "FeatureCollection"}

# Set on pool threads so that nested collections run serially inside a worker
_worker_state = threading.local()


class PolygonCounter:
    """Number of Polygons processed, safe to bump from any thread."""

    def __init__(self, start: int = 0):
        self._value = start
        self._lock = threading.Lock()

    def increment(self, n: int = 1) -> int:
        with self._lock:
            self._value += n
            return self._value

    @property
    def value(self) -> int:
        return self._value

    def __int__(self):
        return self._value

    def __repr__(self):
        return f"PolygonCounter({self._value})"


def _in_worker() -> bool:
    return getattr(_worker_state, "active", False)


def _run_as_worker(func, item):
    _worker_state.active = True
    try:
        return func(item)
    finally:
        _worker_state.active = False


class WindingWalker:
    """Walk a GeoJSON document and wind its Polygons to one convention.

    Args:
        convention: Convention, or the boolean ``reverse`` flag
        counter: Shared PolygonCounter; a fresh one is created if omitted
        executor: Optional ThreadPoolExecutor used for sibling fan-out. Rings
            are rewritten in the caller's memory, so process pools cannot
            be used
        progress: Optional callable invoked once per top-level Feature;
            calls are serialized, so it need not be thread-safe
    """

    def __init__(
        self,
        convention=Convention.FORWARD,
        counter: Optional[PolygonCounter] = None,
        executor: Optional[ThreadPoolExecutor] = None,
        progress: Optional[Callable[[], None]] = None,
    ):
        self.convention = Convention.from_reverse(convention)
        self.counter = counter if counter is not None else PolygonCounter()
        self.executor = executor
        self.progress = progress
        self._progress_lock = threading.Lock()

    def _for_each(self, func: Callable, items: Iterable):
        """Apply ``func`` to every sibling, in parallel where that is allowed.

        Only the calling thread fans out; a worker that reaches another
        collection processes it itself instead of waiting on the pool.
        """
        items = list(items)
        if self.executor is None or _in_worker() or len(items) < 2:
            for item in items:
                func(item)
            return

        logger.debug(f"Fanning out {len(items)} siblings")
        futures = [self.executor.submit(_run_as_worker, func, item) for item in items]
        for future in as_completed(futures):
            # Re-raise worker errors in the caller
            future.result()

    def process_document(self, doc: dict) -> PolygonCounter:
        """Process a FeatureCollection, Feature or bare Geometry in place."""
        doc_type = doc.get("type")
        if doc_type == "FeatureCollection":
            self._for_each(self._process_feature, doc.get("features") or [])
        elif doc_type == "Feature":
            self._process_feature(doc)
        elif doc_type in GEOMETRY_TYPES:
            self.process_geometry(doc)
        else:
            raise WindingInvariantError(f"Unknown GeoJSON object type: {doc_type!r}")
        return self.counter

    def _process_feature(self, feature: dict):
        geometry = feature.get("geometry")
        if geometry is not None:
            self.process_geometry(geometry)
        if self.progress is not None:
            with self._progress_lock:
                self.progress()

    def process_geometry(self, geom: dict):
        """Dispatch one geometry node on its type."""
        geom_type = geom.get("type")
        if geom_type == "Polygon":
            self._process_polygon(geom["coordinates"])
        elif geom_type == "MultiPolygon":
            self._for_each(self._process_polygon, geom["coordinates"])
        elif geom_type == "GeometryCollection":
            self._for_each(self.process_geometry, geom["geometries"])
        elif geom_type in PASS_THROUGH_TYPES:
            pass
        else:
            raise WindingInvariantError(f"Unknown geometry type: {geom_type!r}")

    def _process_polygon(self, rings):
        wind_polygon(rings, self.convention)
        self.counter.increment()


def process_document(doc, reverse=False, counter=None, executor=None):
    """Wind every Polygon reachable from ``doc``; returns the counter."""
    walker = WindingWalker(reverse, counter=counter, executor=executor)
    return walker.process_document(doc)


def process_geometry(geom, reverse=False, counter=None, executor=None):
    """Wind every Polygon reachable from a single geometry; returns the counter."""
    walker = WindingWalker(reverse, counter=counter, executor=executor)
    walker.process_geometry(geom)
    return walker.counter


def normalize(doc, reverse=False, executor=None) -> int:
    """Wind ``doc`` in place and return the number of Polygons processed."""
    counter = process_document(doc, reverse, executor=executor)
    logger.info(f"Processed {counter.value} polygons")
    return counter.value
