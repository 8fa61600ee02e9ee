"""Backend selection and frame-rate tracking for the site's renderer."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Mapping, Optional
from urllib.parse import parse_qs, urlsplit

from rakusite import fps

BackendFactory = Callable[[Any], Any]


class BackendType(Enum):
    """The rendering backends that can be selected."""

    DOM = "dom"
    CANVAS = "canvas"

    @classmethod
    def default(cls) -> BackendType:
        """The backend used when nothing else is asked for."""
        return cls.CANVAS

    @classmethod
    def parse(cls, text: str) -> BackendType:
        """Parse a backend name, ignoring case.

        Raises ValueError for an unknown name.
        """
        lowered = text.lower()
        for member in cls:
            if member.value == lowered:
                return member
        raise ValueError(
            f"Invalid backend type: '{text}'. Valid options are: dom, canvas, webgl2"
        )

    def __str__(self) -> str:
        return self.value


def parse_backend_from_url(
    url: Optional[str], default: BackendType = BackendType.CANVAS
) -> BackendType:
    """Read the ``backend`` query parameter of ``url``, falling back to ``default``."""
    if not url:
        return default
    try:
        query = urlsplit(url).query
    except ValueError:
        return default
    values = parse_qs(query, keep_blank_values=True).get("backend")
    if not values:
        return default
    try:
        return BackendType.parse(values[0])
    except ValueError:
        return default


class FpsTrackingBackend:
    """Wraps a backend and records a frame after every successful flush.

    Every attribute other than ``flush`` and ``backend_type`` is taken from
    the wrapped backend.
    """

    def __init__(self, inner: Any, backend_type: BackendType) -> None:
        self._inner = inner
        self.backend_type = backend_type

    def flush(self) -> Any:
        """Flush the wrapped backend, then record a frame.

        If the wrapped flush raises, no frame is recorded.
        """
        result = self._inner.flush()
        fps.record_frame()
        return result

    def __getattr__(self, name: str) -> Any:
        inner = self.__dict__.get("_inner")
        if inner is None:
            raise AttributeError(name)
        return getattr(inner, name)


class MultiBackendBuilder:
    """Builds an FPS-tracking backend chosen from a URL or a fallback type.

    ``factories`` maps each backend type to a callable that receives the
    options set for that type (``None`` when none were set) and returns the
    backend object.
    """

    def __init__(
        self,
        default_backend: BackendType = BackendType.CANVAS,
        factories: Optional[Mapping[BackendType, BackendFactory]] = None,
    ) -> None:
        self.default_backend = default_backend
        self._factories: dict[BackendType, BackendFactory] = dict(factories or {})
        self._options: dict[BackendType, Any] = {}

    @classmethod
    def with_fallback(
        cls,
        default_backend: BackendType,
        factories: Optional[Mapping[BackendType, BackendFactory]] = None,
    ) -> MultiBackendBuilder:
        """A builder that uses ``default_backend`` when the URL names none."""
        return cls(default_backend, factories)

    def options(self, backend_type: BackendType, options: Any) -> MultiBackendBuilder:
        """Set the options passed to the factory of ``backend_type``."""
        self._options[backend_type] = options
        return self

    def build(self, url: Optional[str] = None) -> FpsTrackingBackend:
        """Create the selected backend, wrapped for FPS tracking.

        Installs a fresh FPS recorder. Raises ValueError when no factory is
        known for the selected backend; errors from the factory propagate.
        """
        backend_type = parse_backend_from_url(url, self.default_backend)
        factory = self._factories.get(backend_type)
        if factory is None:
            raise ValueError(f"No factory registered for the {backend_type} backend")
        inner = factory(self._options.get(backend_type))
        fps.init_fps_recorder()
        return FpsTrackingBackend(inner, backend_type)