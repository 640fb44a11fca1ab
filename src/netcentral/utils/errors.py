# src/netcentral/utils/errors.py

"""
Exception taxonomy shared by the core and the CLI.

  - GraphInputError     : malformed edges / node ids / edge-list lines
  - ConfigurationError  : degenerate parameters (k, top_k, empty subsets, ...)

Both derive from ValueError so callers that only know about ValueError
still catch them.
"""


class NetcentralError(Exception):
    """Base class for every error raised by netcentral."""


class GraphInputError(NetcentralError, ValueError):
    """Input graph data is malformed (self-loops, bad ids, unparsable lines)."""


class ConfigurationError(NetcentralError, ValueError):
    """A parameter makes the requested computation meaningless."""
