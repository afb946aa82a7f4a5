
class SableError(Exception):
    """ Base class for all Sable errors"""
    pass

class SableUnboundSymbol(SableError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""
    pass

class SableNotCallable(SableError):
    """ Raised when the head of an application is not a procedure"""

class SableArityError(SableError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class SableSyntaxError(SableError):
    """ Raised for malformed special forms and unreadable source text"""

class SableMalformedList(SableError):
    """ Raised when eval is handed a value that is not a proper list"""

class SableTypeError(SableError):
    """ Raised when a value cannot be coerced to the type an operation needs"""

class SableIOError(SableError):
    """ Raised when load cannot open a source file"""

class SableRecursionError(SableError):
    """ Raised when non-tail recursion exhausts the host stack"""
