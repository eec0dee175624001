# web_i18n/core/__init__.py
"""
Core Domain Layer.

This package contains the command logic and the entities it works with.
It strictly follows the Hexagonal Architecture (Ports & Adapters) pattern:
- No dependencies on the CLI front end.
- No dependencies on infrastructure (manifest files, plugin discovery).
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
