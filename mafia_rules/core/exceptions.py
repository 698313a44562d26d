"""
Exceptions raised by the rules kernel.
"""

from typing import Any, List, Optional


class MafiaRulesError(Exception):
    """Base class for rules kernel errors."""


class UnknownRoleError(MafiaRulesError, ValueError):
    """Raised when a value does not name a role in the registry."""
    
    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or f"Unknown role: {value!r}"
        super().__init__(self.message)


class RoleConfigError(MafiaRulesError):
    """Raised when a role configuration breaks the registry invariants."""
    
    def __init__(self, role_name: str, message: str = ""):
        self.role_name = role_name
        self.message = message or f"Invalid configuration for role {role_name}"
        super().__init__(self.message)


class RoleAssignmentError(MafiaRulesError):
    """Raised when a set of role assignments cannot form a legal game."""
    
    def __init__(self, violations: List[str], message: Optional[str] = None):
        self.violations = list(violations)
        self.message = message or "Invalid role assignment: " + "; ".join(self.violations)
        super().__init__(self.message)
