# web_i18n/__init__.py
"""
Web i18n - Display language support for generated multi-module projects.

This package contains the "web mvc language" command and the service
resolution it relies on, laid out as a Modular Monolith following
Hexagonal Architecture (Ports & Adapters).
"""

__version__ = "2.0.0"
