"""
Shared utilities for the cache facade.

This package aggregates common building blocks consumed by cache_facade:

- config: Facade and store configuration via pydantic-settings
- logging: Structured logging with request correlation
- metrics: Prometheus metrics helpers
- errors: Canonical error types and responses

Do not import from cache_facade into shared/.
"""
