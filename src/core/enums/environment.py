"""Application environment types.

Defines the runtime environments the dispatch core knows about.
Used by Settings to pick the logging renderer.

Environments:
- DEVELOPMENT: Local development, human-readable console logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Production deployment, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
