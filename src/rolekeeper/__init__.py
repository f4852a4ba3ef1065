"""RoleKeeper - role and permission management engine."""

__version__ = "0.1.0"
