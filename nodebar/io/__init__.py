"""I/O utilities for NodeBar"""

from .readers import NodeReader, read_nodes
from .writers import GeometryWriter, write_geometry

__all__ = [
    'NodeReader', 'read_nodes',
    'GeometryWriter', 'write_geometry']
