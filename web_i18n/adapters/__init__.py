# web_i18n/adapters/__init__.py
"""
Infrastructure Adapters.

This package contains the concrete implementations of the Ports defined in `web_i18n.core.ports`.
These adapters connect the application to the outside world:
- `cli`: The Primary Adapter (Driving) - argparse front end.
- `persistence`: Secondary Adapter (Driven) - project.json project model.
- `installers`: Secondary Adapter (Driven) - language installation.
- `registry`: Secondary Adapter (Driven) - service registries (static, plugins).

In Hexagonal Architecture, dependencies point INWARD. These modules depend on `web_i18n.core`,
but `web_i18n.core` never imports from here.
"""
