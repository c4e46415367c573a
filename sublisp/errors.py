
class SublispError(Exception):
    """ Base class for all sublisp errors"""
    pass

class MalformedExpression(SublispError):
    """ Raised when a value matches none of the recognised expression shapes"""
    pass

class NotAProcedure(SublispError):
    """ Raised when the operator of a call is neither a primitive nor a lambda-form"""
    pass

class HostLookupFailure(SublispError):
    """ Raised by the host when a free symbol has no global binding"""

class HostInvocationFailure(SublispError):
    """ Raised by the host when a native procedure fails"""

class RecursionLimitExceeded(SublispError):
    """ Raised when evaluation nests deeper than the configured maximum"""

class ArityError(SublispError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class SublispTypeError(SublispError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""

class SublispSyntaxError(SublispError):
    """ Raised when source text cannot be read"""

class IncompleteInput(SublispSyntaxError):
    """ Raised when source text ends inside an expression, string or comment"""
