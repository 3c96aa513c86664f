"""
Hardware detail probe.

Builds a HardwareDetails record for the detected host, leaving every value
it cannot determine unset, then backfills the unset fields with the
placeholder in a separate pass.
"""
import dataclasses
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from hostinfo.format.units import format_memory
from hostinfo.internal.constants import PLACEHOLDER
from hostinfo.internal.errors import UnrecognizedUserAgentError
from hostinfo.internal.logging import get_logger
from hostinfo.runtime.mode import BrowserHost, ProcessDescriptor, ProcessHost, resolve_host

logger = get_logger(__name__)

_OS_PATTERN = re.compile(r"windows|mac(?:intosh)?|ubuntu|debian|linux", re.IGNORECASE)
_ARCH_PATTERN = re.compile(r"x32|x64|x86_64", re.IGNORECASE)
_64_BIT_ARCHS = {"x64", "x86_64"}


@dataclass
class HardwareDetails:
    os: Optional[str] = None
    architecture: Optional[str] = None
    cpus: Union[int, str, None] = None
    memory: Optional[str] = None

    def as_dict(self) -> dict:
        return dataclasses.asdict(self)


def fill_placeholders(details: HardwareDetails) -> HardwareDetails:
    """
    Return a copy of `details` where every unset field holds the placeholder.
    """
    return dataclasses.replace(
        details,
        **{
            f.name: PLACEHOLDER
            for f in dataclasses.fields(details)
            if getattr(details, f.name) is None
        },
    )


# ---------------------------------------------------------------------
# Architecture
# ---------------------------------------------------------------------

def architecture_class(arch: str) -> str:
    return "64-bit" if arch.lower() in _64_BIT_ARCHS else "32-bit"


# ---------------------------------------------------------------------
# Browser
# ---------------------------------------------------------------------

def detect_browser_os(user_agent: str) -> str:
    """
    First OS token found in the user agent, as it is written there
    (e.g. "Windows", "Macintosh", "Linux").
    """
    match = _OS_PATTERN.search(user_agent or "")
    if match is None:
        raise UnrecognizedUserAgentError("operating system", user_agent)
    return match.group(0)


def detect_browser_architecture(user_agent: str) -> str:
    match = _ARCH_PATTERN.search(user_agent or "")
    if match is None:
        raise UnrecognizedUserAgentError("architecture", user_agent)
    return architecture_class(match.group(0))


def _probe_browser(navigator: Any, performance: Any) -> HardwareDetails:
    details = HardwareDetails()
    user_agent = getattr(navigator, "userAgent", None)

    for name, detector in (("os", detect_browser_os), ("architecture", detect_browser_architecture)):
        try:
            setattr(details, name, detector(user_agent))
        except UnrecognizedUserAgentError as e:
            logger.warning("Unrecognized user agent", detail=e.detail, user_agent=user_agent)

    details.cpus = getattr(navigator, "hardwareConcurrency", None) or None

    # performance.memory is a non-standard extension (Chromium only)
    memory = getattr(performance, "memory", None) if performance is not None else None
    if memory is not None:
        details.memory = format_memory(memory.jsHeapSizeLimit, "allocated")
    return details


# ---------------------------------------------------------------------
# Standalone process
# ---------------------------------------------------------------------

def _probe_process(process: ProcessDescriptor) -> HardwareDetails:
    platform_id = process.platform
    return HardwareDetails(
        os=platform_id[:1].upper() + platform_id[1:],
        architecture=architecture_class(process.arch),
        cpus=len(process.system.cpus()),
        memory=format_memory(process.system.total_memory(), "total"),
    )


# ---------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------

def get_hardware_details(scope: Optional[Mapping[str, Any]] = None) -> HardwareDetails:
    """
    Probe the host for OS, architecture, logical CPU count and memory.

    Every field of the returned record is either a detected value or the
    placeholder "-". An unknown host gives an all-placeholder record.
    """
    host = resolve_host(scope)
    logger.debug("Probing hardware details", mode=host.mode.value)

    if isinstance(host, BrowserHost):
        details = _probe_browser(host.navigator, host.performance)
    elif isinstance(host, ProcessHost):
        details = _probe_process(host.process)
    else:
        details = HardwareDetails()

    return fill_placeholders(details)


if __name__ == "__main__":
    for name, value in get_hardware_details().as_dict().items():
        print(f"{name}: {value}")
