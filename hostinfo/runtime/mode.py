"""
Runtime mode detection.

hostinfo runs either inside a browser (a Python interpreter embedded in a web
page, such as Pyodide, where the page globals are reached through the `js`
module) or as a standalone process. Detection looks at a *host scope*: a
mapping from global names (`window`, `navigator`, `performance`, `process`)
to host objects. The default scope is built from the live interpreter on
every call; tests and embedders can pass their own.
"""
import enum
import platform
import sys
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol, Union


class RuntimeMode(str, enum.Enum):
    BROWSER = "wb"
    STANDALONE_PROCESS = "njs"
    UNKNOWN = "unknown"


# ---------------------------------------------------------------------
# Standalone process capabilities
# ---------------------------------------------------------------------

class OperatingSystem(Protocol):
    """
    Operating-system introspection used by the standalone-process probe.
    """

    def cpus(self) -> list:
        """
        One descriptor per logical CPU.
        """
        ...

    def total_memory(self) -> int:
        """
        Total physical memory in bytes.
        """
        ...


class PsutilSystem:
    """
    OperatingSystem backed by psutil.

    psutil is imported on use: it is not available inside a browser
    interpreter, and the library must still import there.
    """

    def cpus(self) -> list:
        import psutil
        # psutil has no per-CPU descriptor list; per-CPU times come one per logical CPU
        return psutil.cpu_times(percpu=True)

    def total_memory(self) -> int:
        import psutil
        return psutil.virtual_memory().total


class NodeSystem:
    """
    OperatingSystem backed by Node's `os` module, for Pyodide running under Node.
    """

    def __init__(self, require):
        self._require = require

    def cpus(self) -> list:
        return list(self._require("os").cpus())

    def total_memory(self) -> int:
        return int(self._require("os").totalmem())


# Python's machine names mapped to the process arch names used by detection
_ARCH_ALIASES = {
    "amd64": "x64",
    "x86_64": "x64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "aarch64": "arm64",
}


def normalize_arch(machine: str) -> str:
    machine = machine.lower()
    return _ARCH_ALIASES.get(machine, machine)


@dataclass
class ProcessDescriptor:
    platform: str
    arch: str
    system: OperatingSystem = field(default_factory=PsutilSystem)

    @classmethod
    def current(cls) -> "ProcessDescriptor":
        return cls(platform=sys.platform, arch=normalize_arch(platform.machine()))


# ---------------------------------------------------------------------
# Host scope
# ---------------------------------------------------------------------

BROWSER_GLOBALS = ("window", "navigator", "performance")


def host_scope() -> dict[str, Any]:
    """
    Resolve the host globals of the running interpreter.

    Browser globals come from Pyodide's `js` module when it can be imported;
    a global that is missing there (e.g. `window` inside a web worker) is
    simply left out. `process` describes the current Python process. Under
    Emscripten it is taken from Node's `process` global instead, and only
    when `require` is there to reach Node's `os` module.
    """
    scope: dict[str, Any] = {}
    try:
        import js  # Pyodide only
    except ImportError:
        js = None

    if js is not None:
        for name in BROWSER_GLOBALS:
            value = getattr(js, name, None)
            if value is not None:
                scope[name] = value

    if sys.platform != "emscripten":
        scope["process"] = ProcessDescriptor.current()
    elif js is not None:
        process = getattr(js, "process", None)
        require = getattr(js, "require", None)
        if process is not None and require is not None:
            scope["process"] = ProcessDescriptor(
                platform=str(process.platform),
                arch=str(process.arch),
                system=NodeSystem(require),
            )
    return scope


def _resolves(scope: Mapping[str, Any], name: str) -> bool:
    return scope.get(name) is not None


def detect_runtime_mode(scope: Optional[Mapping[str, Any]] = None) -> RuntimeMode:
    """
    Classify the host context. Browser detection takes priority over the
    standalone process check.
    """
    if scope is None:
        scope = host_scope()
    if _resolves(scope, "window") and _resolves(scope, "navigator"):
        return RuntimeMode.BROWSER
    if _resolves(scope, "process"):
        return RuntimeMode.STANDALONE_PROCESS
    return RuntimeMode.UNKNOWN


# ---------------------------------------------------------------------
# Capability providers
# ---------------------------------------------------------------------

@dataclass
class BrowserHost:
    navigator: Any
    performance: Any = None
    mode = RuntimeMode.BROWSER


@dataclass
class ProcessHost:
    process: ProcessDescriptor
    mode = RuntimeMode.STANDALONE_PROCESS


@dataclass
class UnknownHost:
    mode = RuntimeMode.UNKNOWN


Host = Union[BrowserHost, ProcessHost, UnknownHost]


def resolve_host(scope: Optional[Mapping[str, Any]] = None) -> Host:
    """
    Detect the runtime mode once and return the matching capability provider.
    """
    if scope is None:
        scope = host_scope()
    mode = detect_runtime_mode(scope)
    if mode is RuntimeMode.BROWSER:
        return BrowserHost(navigator=scope["navigator"], performance=scope.get("performance"))
    if mode is RuntimeMode.STANDALONE_PROCESS:
        return ProcessHost(process=scope["process"])
    return UnknownHost()
