__title__ = 'helmsman'
__author__ = 'Helmsman contributors'
__license__ = 'MIT'
__version__ = "0.0.0"

from .faults import *
from .layouts import *
from .logs import *
from .renderer import *
from .sinks import *
from .tree import *
from .usage import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the layouts
__all__ += layouts.__all__  # type: ignore[attr-defined]
# Load the exposed API of the logs
__all__ += logs.__all__  # type: ignore[attr-defined]
# Load the exposed API of the renderer
__all__ += renderer.__all__  # type: ignore[attr-defined]
# Load the exposed API of the sinks
__all__ += sinks.__all__  # type: ignore[attr-defined]
# Load the exposed API of the tree
__all__ += tree.__all__  # type: ignore[attr-defined]
# Load the exposed API of the usage
__all__ += usage.__all__  # type: ignore[attr-defined]
