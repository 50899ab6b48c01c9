"""
Configuration constants for adjgraph.

Settings for the edge-list format and the command-line harness live here.
Values that make sense to change per environment are read from
environment variables.
"""

import os

# =============================================================================
# Logging Configuration
# =============================================================================

# Level used by the CLI when --log-level is not given
DEFAULT_LOG_LEVEL = os.environ.get("ADJGRAPH_LOG_LEVEL", "WARNING").upper()

LOG_FORMAT = "%(message)s"
LOG_DATE_FORMAT = "[%X]"

# =============================================================================
# Edge-List Format
# =============================================================================

# Everything after this prefix on a line is ignored
COMMENT_PREFIX = "#"

# "node", "tail head" or "tail head weight"
MAX_FIELDS_PER_LINE = 3

# Encoding used when reading edge-list files
EDGE_LIST_ENCODING = "utf-8"

# =============================================================================
# Output Configuration
# =============================================================================

# Shown in place of the distance of an unreachable node
UNREACHABLE_MARK = "∞"
