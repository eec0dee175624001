# tests/__init__.py
"""
Test Suite for web-i18n.

Organization:
- `core`: Use case and domain model tests with mocked collaborators.
- `shared`: Service locator, container wiring, configuration and logging.
- `adapters`: Manifest persistence, registries and the CLI (end to end on a tmp project).
"""
