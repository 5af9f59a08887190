# shellkit/utils/__init__.py
"""
The `utils` package holds the cross-cutting helpers shellkit is built on:
configuration loading, logging setup and flushing, and plugin discovery.
"""
