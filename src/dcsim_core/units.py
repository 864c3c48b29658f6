# --- src/dcsim_core/units.py ---
import logging

import pint

logger = logging.getLogger(__name__)
ureg = pint.UnitRegistry()
Quantity = ureg.Quantity
logger.debug("Pint Unit Registry initialized.")

__all__ = ["ureg", "pint", "Quantity"]
