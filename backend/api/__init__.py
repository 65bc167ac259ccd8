from .api import app, create_app, get_catalog

__all__ = ["app", "create_app", "get_catalog"]
