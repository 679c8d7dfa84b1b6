"""Entity handle generation.

Squares and characters are linked by reference; the integer ``EntityID`` each
one carries only labels it in ``repr`` output and logs. Handles come from one
process-wide counter and are never reused, since squares live for the whole
session.
"""

from itertools import count

from grid_arcade.types import EntityID

_next_id = count()


def new_entity_id() -> EntityID:
    """Return a newly allocated unique entity ID."""
    return next(_next_id)
