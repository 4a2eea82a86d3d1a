"""Core enums package.

Usage:
    from campus_client.core.enums import ErrorCode, Environment
"""

from campus_client.core.enums.environment import Environment
from campus_client.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
