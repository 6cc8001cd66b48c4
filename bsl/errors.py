

class BslError(Exception):
    """ Base class for all bsl errors"""
    pass

class BslInvariantError(BslError):
    """ Raised when the pipeline reaches a state its own passes should have ruled out"""
    pass

class BslConfigError(BslError):
    """ Raised when an environment setting cannot be interpreted"""

# Student mistakes are never raised: they are values (TokenError, ReadError,
# the parse errors, EvalError, BindingError) carried through the pipeline.
