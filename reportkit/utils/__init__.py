"""Utility modules for reportkit.

- logging: logging configuration for the command line and embedding apps
"""
