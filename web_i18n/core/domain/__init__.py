# web_i18n/core/domain/__init__.py
"""
Domain Entities and Value Objects.

This package defines the core data structures used throughout the application.
These models represent the "ubiquitous language" of the command
(e.g., LanguageSelection, ModuleReference, InstallOutcome) and are devoid of
any infrastructure logic.
"""
