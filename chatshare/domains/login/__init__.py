"""
Login Domain - OAuth sign-in and session token issuance.
"""

from .contracts import IdentityProvider
from .models import LoginRedirect, LoginState
from .orchestrator import LOGIN_ERROR_FLAG, LoginOrchestrator

__all__ = [
    # Contracts
    "IdentityProvider",
    # Models
    "LoginRedirect",
    "LoginState",
    # Implementations
    "LoginOrchestrator",
    "LOGIN_ERROR_FLAG",
]
