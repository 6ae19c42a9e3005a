"""objtools — generic object inspection helpers.

Counts own properties at three visibility levels, classifies values,
and makes shallow copies, without ever mutating what it inspects.
"""

from objtools.core.copying import cp, cp_safe
from objtools.core.owncount import own_count, own_keys, take_census
from objtools.utils.constants import NOT_COUNTABLE
from objtools.version import __version__

__all__: list[str] = [
    "NOT_COUNTABLE",
    "__version__",
    "cp",
    "cp_safe",
    "own_count",
    "own_keys",
    "take_census",
]
