"""Test configuration and fixtures for the User Admin API."""

from tests.fixtures import *  # noqa: F401,F403
