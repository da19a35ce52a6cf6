"""Error types raised by lognav"""


class LogNavError(Exception):
    """Base class for all lognav errors"""


class ParseError(LogNavError):
    """A time expression could not be parsed"""


class ValidationError(LogNavError):
    """A pair of time expressions does not form a usable time range"""


class BackendError(LogNavError):
    """A call to the remote log service failed"""


class DecodeError(LogNavError):
    """A query result row is missing a required field"""


class EditorError(LogNavError):
    """The external editor could not be run or exited unsuccessfully"""
