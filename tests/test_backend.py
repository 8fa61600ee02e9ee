import pytest

from rakusite import fps
from rakusite.backend import (
    BackendType,
    FpsTrackingBackend,
    MultiBackendBuilder,
    parse_backend_from_url,
)


class FakeBackend:
    def __init__(self, options=None, fail=False):
        self.options = options
        self.fail = fail
        self.flushes = 0
        self.width = 80

    def flush(self):
        if self.fail:
            raise OSError("flush failed")
        self.flushes += 1
        return "flushed"

    def size(self):
        return (self.width, 24)


def _counting_clock():
    ticks = iter(range(1, 10_000))
    return lambda: float(next(ticks))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("dom", BackendType.DOM),
        ("DOM", BackendType.DOM),
        ("canvas", BackendType.CANVAS),
        ("CaNvAs", BackendType.CANVAS),
    ],
)
def test_parse_is_case_insensitive(text, expected):
    assert BackendType.parse(text) is expected


def test_parse_rejects_unknown_name():
    with pytest.raises(ValueError, match="Invalid backend type: 'webgl2'"):
        BackendType.parse("webgl2")


def test_str_round_trips_through_parse():
    for member in BackendType:
        assert BackendType.parse(str(member)) is member


def test_default_is_canvas():
    assert BackendType.default() is BackendType.CANVAS


def test_url_parameter_selects_backend():
    url = "https://example.com/page?backend=dom"
    assert parse_backend_from_url(url, BackendType.CANVAS) is BackendType.DOM


def test_url_parameter_is_case_insensitive():
    url = "https://example.com/?x=1&backend=CANVAS"
    assert parse_backend_from_url(url, BackendType.DOM) is BackendType.CANVAS


@pytest.mark.parametrize(
    "url",
    [
        None,
        "",
        "https://example.com/",
        "https://example.com/?backend=",
        "https://example.com/?backend=webgl2",
    ],
)
def test_url_falls_back_to_default(url):
    assert parse_backend_from_url(url, BackendType.DOM) is BackendType.DOM


def test_flush_records_frame_and_returns_inner_result():
    updates = []
    fps.init_fps_recorder(_counting_clock(), updates.append)
    inner = FakeBackend()
    tracked = FpsTrackingBackend(inner, BackendType.DOM)
    assert tracked.flush() == "flushed"
    assert inner.flushes == 1
    assert len(updates) == 1


def test_failed_flush_records_nothing():
    updates = []
    fps.init_fps_recorder(_counting_clock(), updates.append)
    tracked = FpsTrackingBackend(FakeBackend(fail=True), BackendType.CANVAS)
    with pytest.raises(OSError):
        tracked.flush()
    assert updates == []


def test_other_attributes_are_delegated():
    inner = FakeBackend()
    tracked = FpsTrackingBackend(inner, BackendType.CANVAS)
    assert tracked.size() == (80, 24)
    assert tracked.width == 80
    assert tracked.backend_type is BackendType.CANVAS
    with pytest.raises(AttributeError):
        tracked.missing_attribute


def test_builder_uses_fallback_and_options():
    factories = {
        BackendType.DOM: lambda opts: FakeBackend(opts),
        BackendType.CANVAS: lambda opts: FakeBackend(opts),
    }
    builder = MultiBackendBuilder.with_fallback(BackendType.DOM, factories)
    builder.options(BackendType.DOM, {"grid": "main"})
    backend = builder.build()
    assert backend.backend_type is BackendType.DOM
    assert backend.options == {"grid": "main"}


def test_builder_url_overrides_fallback():
    factories = {
        BackendType.DOM: lambda opts: FakeBackend(opts),
        BackendType.CANVAS: lambda opts: FakeBackend(opts),
    }
    builder = MultiBackendBuilder(BackendType.DOM, factories)
    backend = builder.build("https://example.com/?backend=canvas")
    assert backend.backend_type is BackendType.CANVAS
    assert backend.options is None


def test_builder_options_is_chainable():
    builder = MultiBackendBuilder()
    assert builder.options(BackendType.CANVAS, {}) is builder


def test_builder_installs_recorder():
    fps.init_fps_recorder(_counting_clock())
    builder = MultiBackendBuilder(
        BackendType.CANVAS, {BackendType.CANVAS: lambda opts: FakeBackend(opts)}
    )
    backend = builder.build()
    backend.flush()
    assert fps.current_fps() > 0.0


def test_builder_without_factory_raises():
    builder = MultiBackendBuilder(BackendType.CANVAS, {})
    with pytest.raises(ValueError):
        builder.build()