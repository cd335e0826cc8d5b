class LearningHubException(Exception):
    """Base exception for the learning hub service"""

    def __init__(self, message: str = "Learning hub error"):
        self.message = message
        super().__init__(self.message)


class ConfigurationException(LearningHubException):
    """Backend credentials or project settings are missing at startup"""

    def __init__(self, message: str = "Configuration is missing or invalid"):
        super().__init__(message)


class AuthenticationException(LearningHubException):
    """Backend identity could not be acquired"""

    def __init__(self, message: str = "Failed to authenticate"):
        super().__init__(message)


class SubscriptionException(LearningHubException):
    """A live collection listener reported a failure"""

    def __init__(self, collection: str, message: str = "Listener stopped"):
        self.collection = collection
        super().__init__(message)


class BackendWriteException(LearningHubException):
    """A create, replace or delete call was rejected by the backend"""

    def __init__(self, message: str = "Write failed"):
        super().__init__(message)


class BadRequestException(LearningHubException):
    """Exception for Bad Request (400)"""

    def __init__(self, message: str = "Bad Request"):
        super().__init__(message)


class ValidationException(BadRequestException):
    """Input rejected locally, before any backend call"""
    pass


class ResourceNotFoundException(LearningHubException):
    """Exception for Not Found (404)"""

    def __init__(self, message: str = "Resource Not Found"):
        super().__init__(message)


class AccessDeniedException(LearningHubException):
    """Exception for Forbidden (403)"""

    def __init__(self, message: str = "Access Denied"):
        super().__init__(message)


class BackendUnavailableException(LearningHubException):
    """Raised while the backend is not connected (config or auth failure)"""

    def __init__(self, message: str = "Backend unavailable", title: str = "Unavailable"):
        self.title = title
        super().__init__(message)
