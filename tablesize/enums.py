from enum import Enum


class ErrorKind(Enum):
    NOT_FOUND = 1      # path missing, possibly removed mid walk
    ACCESS_DENIED = 2  # path not readable
    IO_ERROR = 3       # anything else reported by the filesystem
