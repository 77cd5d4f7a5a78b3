
class LisnError(Exception):
    """ Base class for all LISN errors"""
    pass

class LisnParseError(LisnError):
    """ Raised when text cannot be read as an expression"""
    pass

class LisnEvalError(LisnError):
    """ Raised when a parsed expression cannot be evaluated"""
    pass

class LisnUnrecognizedForm(LisnEvalError):
    """ Raised when the head of a form is not a known special form"""

class LisnArityError(LisnEvalError):
    """ Raised when a form has the wrong number of elements"""

class LisnTypeError(LisnEvalError):
    """ Raised when an element of a form has the wrong type"""

class LisnQuoteError(LisnEvalError):
    """ Raised when a nested form appears where a primitive is required"""

class LisnGenerationError(LisnError):
    """ Raised when a value of unsupported kind is rendered"""
