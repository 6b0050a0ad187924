# algorithms/errors.py
"""Typed failures raised by the matchers and the layers around them."""


class DnaMatchError(Exception):
    """Base class for every error this project raises on purpose."""


class InvalidAlphabetError(DnaMatchError, ValueError):
    def __init__(self, symbol: str, position: int, name: str = "sequence"):
        self.symbol = symbol
        self.position = position
        self.name = name
        super().__init__(
            f"{name}: a dna sequence can only contain the characters a,c,g,t "
            f"(found {symbol!r} at position {position})"
        )


class EmptyPatternError(DnaMatchError, ValueError):
    pass


class PatternLongerThanSubjectError(DnaMatchError, ValueError):
    def __init__(self, subject_len: int, pattern_len: int):
        self.subject_len = subject_len
        self.pattern_len = pattern_len
        super().__init__(
            f"the dna sequence ({subject_len}) must contain more characters "
            f"than the pattern sequence ({pattern_len})"
        )


class EmptySequenceError(DnaMatchError, ZeroDivisionError):
    pass


class TableTooLargeError(DnaMatchError, MemoryError):
    def __init__(self, rows: int, cols: int, limit: int):
        self.rows = rows
        self.cols = cols
        self.limit = limit
        super().__init__(
            f"lcss table of {rows}x{cols} cells exceeds the limit of {limit} cells"
        )


class UnknownModeError(DnaMatchError, ValueError):
    pass


class SequenceFileError(DnaMatchError, OSError):
    pass
