"""
Feature modules live under this package.

Each module owns its routes/templates/models and receives its outbound
clients from the app (see create_app) rather than building them itself.
"""
