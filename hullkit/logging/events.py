"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging of hull runs.

Event Naming Convention:
    <component>.<action>

    component: points, hull, render, error

Example Log Query (jq):
    jq 'select(.event == "hull.computed") | .metadata.hull_size' run.log
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - points.*: Input point sets
    - hull.*: Hull construction results
    - render.*: Image output
    - error.*: Error conditions
    """

    # ========== Input Events ==========
    POINTS_GENERATED = "points.generated"
    """Random point set sampled."""

    POINTS_LOADED = "points.loaded"
    """Explicit point set taken from config or caller."""

    # ========== Hull Events ==========
    HULL_COMPUTED = "hull.computed"
    """Hull vertices computed by one algorithm."""

    HULL_EDGES_EXTRACTED = "hull.edges_extracted"
    """Ordered boundary edges rebuilt from hull vertices."""

    # ========== Render Events ==========
    RENDER_SAVED = "render.saved"
    """Raster image written to disk."""

    # ========== Error Events ==========
    INVALID_INPUT_ERROR = "error.invalid_input"
    """Point set rejected (empty or malformed)."""

    DEGENERATE_INPUT_ERROR = "error.degenerate_input"
    """Hull construction did not terminate within its bound."""


HULL_EVENTS = {
    LogEvent.HULL_COMPUTED,
    LogEvent.HULL_EDGES_EXTRACTED,
}

ERROR_EVENTS = {
    LogEvent.INVALID_INPUT_ERROR,
    LogEvent.DEGENERATE_INPUT_ERROR,
}
