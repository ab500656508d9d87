"""
ChatShare - GitHub login, session tokens and quota-limited chat sharing.

Example:
    >>> from chatshare.domains.tokens import create_token, verify_token
    >>> token = create_token("alice", {"role": "api"}, "secret")
    >>> verify_token(token, "secret").subject
    'alice'
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
