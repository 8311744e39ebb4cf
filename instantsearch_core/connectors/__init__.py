"""
Built-in connectors.

Each module defines a ConnectorDescription and exposes a `connect_*`
function wrapping view components with it:

    InfiniteHits = connect_infinite_hits(render_infinite_hits)
    widget = InfiniteHits(context)
    widget.mount()
"""

from .hits import connect_hits
from .infinite_hits import connect_infinite_hits
from .query_rules import connect_query_rules
from .state_results import connect_state_results

__all__ = [
    "connect_hits",
    "connect_infinite_hits",
    "connect_query_rules",
    "connect_state_results",
]
