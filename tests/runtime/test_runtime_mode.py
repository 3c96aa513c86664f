import sys
from types import SimpleNamespace

import pytest

from hostinfo.runtime.mode import (
    BrowserHost,
    ProcessDescriptor,
    ProcessHost,
    RuntimeMode,
    UnknownHost,
    detect_runtime_mode,
    host_scope,
    normalize_arch,
    resolve_host,
)


@pytest.mark.parametrize("scope, expected", [
    ({"window": object(), "navigator": object()}, RuntimeMode.BROWSER),
    ({"window": object(), "navigator": object(), "process": object()}, RuntimeMode.BROWSER),
    ({"process": object()}, RuntimeMode.STANDALONE_PROCESS),
    ({"window": object(), "process": object()}, RuntimeMode.STANDALONE_PROCESS),
    ({"navigator": object(), "process": object()}, RuntimeMode.STANDALONE_PROCESS),
    ({"window": object()}, RuntimeMode.UNKNOWN),
    ({"window": None, "navigator": None, "process": None}, RuntimeMode.UNKNOWN),
    ({}, RuntimeMode.UNKNOWN),
])
def test_detect_runtime_mode(scope, expected):
    assert detect_runtime_mode(scope) is expected


def test_mode_tags():
    assert RuntimeMode.BROWSER.value == "wb"
    assert RuntimeMode.STANDALONE_PROCESS.value == "njs"
    assert RuntimeMode.UNKNOWN.value == "unknown"


def test_plain_interpreter_is_a_standalone_process(monkeypatch):
    """Without Pyodide's `js` module, the live interpreter is a standalone process."""
    monkeypatch.setitem(sys.modules, "js", None)
    scope = host_scope()
    assert "window" not in scope
    assert isinstance(scope["process"], ProcessDescriptor)
    assert scope["process"].platform == sys.platform
    assert detect_runtime_mode() is RuntimeMode.STANDALONE_PROCESS


def test_host_scope_reads_browser_globals_from_js_module(monkeypatch):
    js = SimpleNamespace(window=object(), navigator=SimpleNamespace(userAgent="Linux x86_64"))
    monkeypatch.setitem(sys.modules, "js", js)
    monkeypatch.setattr(sys, "platform", "emscripten")

    scope = host_scope()
    assert scope["window"] is js.window
    assert scope["navigator"] is js.navigator
    assert "performance" not in scope
    assert "process" not in scope
    assert detect_runtime_mode() is RuntimeMode.BROWSER


def test_detection_is_not_cached(monkeypatch):
    monkeypatch.setitem(sys.modules, "js", None)
    assert detect_runtime_mode() is RuntimeMode.STANDALONE_PROCESS

    monkeypatch.setitem(sys.modules, "js", SimpleNamespace(window=object(), navigator=object()))
    assert detect_runtime_mode() is RuntimeMode.BROWSER


@pytest.mark.parametrize("machine, expected", [
    ("x86_64", "x64"),
    ("AMD64", "x64"),
    ("i686", "ia32"),
    ("aarch64", "arm64"),
    ("arm64", "arm64"),
    ("riscv64", "riscv64"),
])
def test_normalize_arch(machine, expected):
    assert normalize_arch(machine) == expected


def test_resolve_host_selects_capability_provider(browser_scope, process_scope):
    browser = resolve_host(browser_scope)
    assert isinstance(browser, BrowserHost)
    assert browser.navigator is browser_scope["navigator"]
    assert browser.performance is browser_scope["performance"]
    assert browser.mode is RuntimeMode.BROWSER

    process = resolve_host(process_scope)
    assert isinstance(process, ProcessHost)
    assert process.process is process_scope["process"]
    assert process.mode is RuntimeMode.STANDALONE_PROCESS

    unknown = resolve_host({})
    assert isinstance(unknown, UnknownHost)
    assert unknown.mode is RuntimeMode.UNKNOWN


def test_browser_host_without_performance_global():
    host = resolve_host({"window": object(), "navigator": object()})
    assert isinstance(host, BrowserHost)
    assert host.performance is None


def _node_js_module(cpu_count=2, total_memory=2 * 1024**3):
    node_os = SimpleNamespace(cpus=lambda: [object()] * cpu_count, totalmem=lambda: total_memory)
    modules = {"os": node_os}
    return SimpleNamespace(
        process=SimpleNamespace(platform="linux", arch="x64"),
        require=lambda name: modules[name],
    )


def test_pyodide_under_node_is_a_standalone_process(monkeypatch):
    """Without window/navigator, Node's process global makes it a standalone process."""
    monkeypatch.setitem(sys.modules, "js", _node_js_module())
    monkeypatch.setattr(sys, "platform", "emscripten")

    scope = host_scope()
    assert isinstance(scope["process"], ProcessDescriptor)
    assert scope["process"].platform == "linux"
    assert scope["process"].arch == "x64"
    assert detect_runtime_mode() is RuntimeMode.STANDALONE_PROCESS


def test_pyodide_under_node_hardware_details(monkeypatch):
    from hostinfo.runtime.system import HardwareDetails, get_hardware_details

    monkeypatch.setitem(sys.modules, "js", _node_js_module(cpu_count=6))
    monkeypatch.setattr(sys, "platform", "emscripten")

    assert get_hardware_details() == HardwareDetails(
        os="Linux",
        architecture="64-bit",
        cpus=6,
        memory="2.00 GB (total)",
    )


def test_node_process_without_require_is_unknown(monkeypatch):
    js = SimpleNamespace(process=SimpleNamespace(platform="linux", arch="x64"))
    monkeypatch.setitem(sys.modules, "js", js)
    monkeypatch.setattr(sys, "platform", "emscripten")

    assert "process" not in host_scope()
    assert detect_runtime_mode() is RuntimeMode.UNKNOWN
