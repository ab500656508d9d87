"""
Domains - Business logic layer.

Each domain is self-contained with:
- models.py: Pydantic data models
- contracts.py: Interfaces (Protocol classes) where collaborators are external
- Implementation files
- test_*.py beside the code
"""

__all__ = [
    "tokens",
    "login",
    "sharing",
]
