from __future__ import annotations

# slots allocated by an empty ArrayOrderedSet when no capacity is given
DEFAULT_CAPACITY = 10

# a full buffer is multiplied by this factor before accepting one more element
GROWTH_FACTOR = 2
