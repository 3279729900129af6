"""Exception classes for the issue auto-assignment action."""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCategory(Enum):
    """Error categories for classification."""
    CONFIGURATION = "configuration"
    GITHUB_API = "github_api"
    EVENT_PAYLOAD = "event_payload"


class AutoAssignError(Exception):
    """Base exception for auto-assignment errors."""

    def __init__(self,
                 message: str,
                 category: ErrorCategory = ErrorCategory.CONFIGURATION,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.category = category
        self.context = context or {}


class ConfigurationError(AutoAssignError):
    """Raised when a required input or environment value is missing."""

    def __init__(self, message: str, setting_name: Optional[str] = None):
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            context={"setting": setting_name} if setting_name else None,
        )
        self.setting_name = setting_name
