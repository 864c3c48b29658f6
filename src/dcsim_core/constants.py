# --- src/dcsim_core/constants.py ---
import logging

logger = logging.getLogger(__name__)

# --- Topology Constants ---

#: Name of the reference (ground) node. It is never given a matrix row.
REFERENCE_NODE: str = "gnd"

#: Net that an element is attached to when no terminals are given.
DEFAULT_NODE: str = "n1"

#: Largest number of independent (non-reference) nodes the assembler accepts.
MAX_INDEPENDENT_NODES: int = 1

logger.debug("Defined core constants: REFERENCE_NODE, DEFAULT_NODE, MAX_INDEPENDENT_NODES")
