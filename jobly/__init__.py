"""Jobly: companies and jobs REST API."""

__version__ = "0.1.0"
