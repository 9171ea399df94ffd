"""Configuration package for the freshness application.

- config.py: configuration dataclasses and the hierarchical loader
- service.py: facade for flat access to configuration values
"""
