class RouteDocError(Exception):
    """Base exception for routedoc command line errors."""
    pass

class TargetLoadError(RouteDocError):
    """Raised when a module:attribute target cannot be loaded as a document."""
    pass
