"""Core Module

Submodules:
    - catalog: Species catalog store, aggregator and upstream sources
    - config: TOML configuration loading
    - exceptions: Error types raised inside the core
    - http: HTTP client with retry and rate limiting
    - logger: Package logging setup
"""
