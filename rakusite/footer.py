"""HTML footer that shows the active backend and the frame rate."""

from __future__ import annotations

from html import escape

from rakusite.backend import BackendType

FOOTER_ID = "site-backend-footer"
FPS_ELEMENT_ID = "site-fps"

FOOTER_STYLE = (
    "position: fixed; bottom: 0; left: 0; right: 0; "
    "background: rgba(0,0,0,0.8); color: white; "
    "padding: 8px 16px; font-family: monospace; font-size: 12px; "
    "display: flex; justify-content: center; gap: 16px; "
    "border-top: 1px solid #333; z-index: 1000;"
)

_CURRENT_STYLE = "color: #4ade80; font-weight: bold; text-decoration: none;"
_OTHER_STYLE = "color: #94a3b8; text-decoration: none; cursor: pointer;"


def _backend_link(backend: BackendType, current: BackendType, base_url: str) -> str:
    if backend is current:
        return f'<span style="{_CURRENT_STYLE}">● {backend}</span>'
    return (
        f'<a href="{escape(base_url)}?backend={backend.value}" '
        f'style="{_OTHER_STYLE}">{backend}</a>'
    )


def render_backend_footer(current_backend: BackendType, base_url: str = "") -> str:
    """The footer element, with links that switch to the other backends."""
    links = " | ".join(
        _backend_link(backend, current_backend, base_url)
        for backend in (BackendType.DOM, BackendType.CANVAS)
    )
    inner = (
        f'<span style="color: #64748b;">Backend:</span> {links} | '
        '<span style="color: #64748b;">FPS:</span> '
        f'<span id="{FPS_ELEMENT_ID}" style="color: #4ade80; font-weight: bold;">--</span>'
    )
    return f'<div id="{FOOTER_ID}" style="{FOOTER_STYLE}">{inner}</div>'