# Settings package
from ordering.settings.app_settings import AppSettings, get_app_settings

__all__ = ["get_app_settings", "AppSettings"]
