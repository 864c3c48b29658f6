# --- src/dcsim_core/components/__init__.py ---
import logging
logger = logging.getLogger(__name__)

from .base_enums import ElementKind
from .exceptions import ComponentError, DivideByZeroError
from .elements import (
    Element, Resistor, Capacitor, Inductor, VoltageSource, CurrentSource
)

logger.debug(f"Available element kinds: {[kind.value for kind in ElementKind]}")

__all__ = [
    "ElementKind",
    "Element",
    "Resistor",
    "Capacitor",
    "Inductor",
    "VoltageSource",
    "CurrentSource",
    "ComponentError",
    "DivideByZeroError",
]
