"""
The `schemas` package defines the Pydantic models passed between shellkit's
components: the parsed command line, per-command results and the final exit
status of a run. Every model is immutable once built.
"""
