"""Local development server.

perch itself does not listen on sockets. ``run_dev_server`` hands the
App to pounce, imported lazily so pounce stays an optional extra
(``pip install perch[server]``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from perch.app import App


def run_dev_server(
    app: App,
    host: str,
    port: int,
    *,
    reload: bool = False,
    reload_dirs: tuple[str, ...] = (),
    log_level: str = "info",
    app_path: str | None = None,
) -> None:
    """Serve *app* on ``host:port`` with one pounce worker until interrupted.

    pounce's ``Server`` accepts the ASGI callable itself. When *app_path*
    (``"module:attribute"``) is given, pounce re-imports it after each
    reload so edits on disk are picked up; otherwise the live object is
    served as-is.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    settings = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_dirs=reload_dirs,
        log_level=log_level,
    )
    Server(settings, app, app_path=app_path).run()
