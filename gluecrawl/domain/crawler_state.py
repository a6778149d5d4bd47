"""Crawler state values reported by Glue.

Only READY is acted upon; anything else means "keep waiting".
"""

READY = "READY"
RUNNING = "RUNNING"
STOPPING = "STOPPING"


def is_terminal(state) -> bool:
    return state == READY
