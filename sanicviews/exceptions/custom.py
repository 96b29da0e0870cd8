"""
Custom Exception Classes
Framework-specific exceptions with HTTP status codes
"""
from typing import Optional, Sequence


class FrameworkException(Exception):
    """Base exception for all framework exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class ArgumentMissingException(FrameworkException, ValueError):
    """
    Required argument was None

    Raised before any side effect so nothing is logged or emitted

    Example:
        raise ArgumentMissingException('action_context')
    """
    message = "A required argument was not provided"

    def __init__(self, argument: str, message: Optional[str] = None):
        self.argument = argument
        super().__init__(message or f"Value cannot be None. Argument: '{argument}'")


class ViewNotFoundException(FrameworkException):
    """
    View could not be located by any view engine

    Example:
        raise ViewNotFoundException('sidebar', ['home/sidebar.html', 'shared/sidebar.html'])
    """
    message = "View not found"

    def __init__(self, view_name: str, searched_locations: Sequence[str] = ()):
        self.view_name = view_name
        self.searched_locations = list(searched_locations)

        lines = [f"The view '{view_name}' was not found. The following locations were searched:"]
        lines.extend(self.searched_locations)
        super().__init__('\n'.join(lines))
