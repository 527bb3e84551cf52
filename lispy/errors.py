class LispyError(Exception):
    """ Base class for all host-level Lispy errors"""
    pass

class LispySyntaxError(LispyError):
    """ Raised by the reader when source text does not match the grammar"""

    def __init__(self, message: str, filename: str = "<stdin>", line: int = 1, column: int = 1):
        self.message = message
        self.filename = filename
        self.line = line
        self.column = column
        super().__init__(f"{filename}:{line}:{column}: error: {message}")

class LispyLoadError(LispyError):
    """ Raised when a prelude or library source cannot be located or read"""
