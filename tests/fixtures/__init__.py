"""Shared test fixtures package.

Provides sample tables and helpers for all test suites. Pytest fixtures
themselves live in conftest.py; this package contains only data and helpers.
"""
