"""Exceptions and warnings raised by NodeBar"""


class NodeBarError(Exception):
    """Base class for NodeBar errors"""


class InvalidInputError(NodeBarError, ValueError):
    """Raised when a caller passes input the engine cannot lay out"""


class OutOfRangeProgressWarning(UserWarning):
    """Progress outside [0, node count]; geometry is extrapolated"""
