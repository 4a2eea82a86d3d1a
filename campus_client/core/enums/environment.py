"""Client runtime environments.

Used by Settings to pick environment-specific behavior (log rendering).

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test execution
- CI: Continuous integration
- PRODUCTION: Deployed client
"""

from enum import Enum


class Environment(str, Enum):
    """Client runtime environments."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
