"""NodeBar: Layout and rendering of progress bars annotated with nodes"""

from .types import Node, DistributionMode, TextAlign
from .exceptions import NodeBarError, InvalidInputError, OutOfRangeProgressWarning
from .config import BarStyle, DisplayMetrics
from .layout import LayoutEngine, LayoutResult
from .icons import IconCache, FileIconLoader
from .renderer import NodeBarRenderer

__version__ = "0.1.0"
__all__ = ["Node", "DistributionMode", "TextAlign", "NodeBarError", "InvalidInputError",
           "OutOfRangeProgressWarning", "BarStyle", "DisplayMetrics", "LayoutEngine",
           "LayoutResult", "IconCache", "FileIconLoader", "NodeBarRenderer"]
