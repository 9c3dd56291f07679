import uvicorn

from mt2link.server_app import create_app, ServerSettings


class DecodeServer:
    """Runs the HTTP decode service (``/decode``, ``/encode``, ``/registers``, ``/logs``) under uvicorn."""

    def __init__(self, settings: ServerSettings) -> None:
        self.settings = settings
        self.app = create_app(settings=self.settings)

    def start(self) -> None:
        uvicorn.run(self.app, host=self.settings.server_ip, port=self.settings.server_port, log_level="info")
