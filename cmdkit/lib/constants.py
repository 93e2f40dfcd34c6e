"""Application-wide constants for command registration and lifecycle hooks.

This is the single source of truth for defaults shared by the catalog,
the hook registry and the application object.
"""
from typing import Literal, get_args

# ============================================================================
# Verbosity Levels (ordered, low -> high)
# ============================================================================

VERB_QUIET = 0  # don't report anything
VERB_ERROR = 1  # report errors only
VERB_WARN = 2
VERB_INFO = 3
VERB_DEBUG = 4
VERB_CRAZY = 5

VERBOSITY_NAMES_LITERAL = Literal["quiet", "error", "warn", "info", "debug", "crazy"]

ALL_VERBOSITY_NAMES = list(get_args(VERBOSITY_NAMES_LITERAL))

DEFAULT_VERBOSITY = VERB_ERROR

# ============================================================================
# Hook Events (reserved names, the registry accepts any other name too)
# ============================================================================

EVT_INIT = "init"
EVT_BEFORE = "before"
EVT_AFTER = "after"
EVT_ERROR = "error"

# ============================================================================
# Exit Codes
# ============================================================================

OK = 0  # success exit code
ERR = 2  # error exit code
EXIT_INTERRUPTED = 130

HELP_COMMAND = "help"

# ============================================================================
# Command Catalog
# ============================================================================

# Floor for the help-text column width of command names
DEFAULT_NAME_MAX_LENGTH = 12

# Separator between module prefix and command name, e.g. "db:migrate"
MODULE_SEPARATOR = ":"

# ============================================================================
# Application Defaults
# ============================================================================

DEFAULT_APP_NAME = "My CLI App"
DEFAULT_APP_VERSION = "1.0.0"
DEFAULT_LOGO_STYLE = "info"

LOG_FORMATS_LITERAL = Literal["console", "json"]
ALL_LOG_FORMATS = list(get_args(LOG_FORMATS_LITERAL))
DEFAULT_LOG_FORMAT = "console"
