"""Deployment environment, read from ENVIRONMENT."""

from enum import Enum


class Environment(str, Enum):
    DEVELOPMENT = "development"
    # pytest runs; logs switch to JSON lines
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
