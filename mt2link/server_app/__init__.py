from mt2link.server_app.app import create_app
from mt2link.server_app.config import ServerSettings, get_settings

__all__ = ["create_app", "ServerSettings", "get_settings"]
