"""
Network diagnostics for the weather tool.

Debug aid only: probes DNS resolution for a host, lists the local network
interfaces and dumps the resolver configuration. Every probe logs its own
failure and carries on; nothing here raises or changes a lookup's outcome.
"""

from __future__ import annotations

import asyncio
import logging
import socket
from pathlib import Path

logger = logging.getLogger(__name__)

RESOLV_CONF = Path("/etc/resolv.conf")


async def _probe_dns(host: str) -> None:
    logger.debug(f"Resolving {host}")
    loop = asyncio.get_running_loop()
    try:
        infos = await loop.getaddrinfo(host, None, proto=socket.IPPROTO_TCP)
    except OSError as e:
        logger.error(f"DNS resolution failed: {host} - {e}")
        return
    addresses = sorted({info[4][0] for info in infos})
    logger.debug(f"DNS resolution succeeded: {host} => {', '.join(addresses)}")


def _probe_interfaces() -> None:
    try:
        interfaces = socket.if_nameindex()
    except (OSError, AttributeError) as e:
        logger.error(f"Could not list network interfaces: {e}")
        return
    logger.debug("Network interfaces:")
    for index, name in interfaces:
        logger.debug(f"  {name} (index {index})")


def _probe_resolver_config() -> None:
    try:
        contents = RESOLV_CONF.read_text()
    except OSError as e:
        logger.error(f"Could not read {RESOLV_CONF}: {e}")
        return
    logger.debug(f"DNS configuration ({RESOLV_CONF}):\n{contents}")


async def diagnose_network(host: str) -> None:
    """Log DNS, interface and resolver details for ``host``."""
    logger.debug(f"--------- Network diagnostics: {host} ---------")
    await _probe_dns(host)
    _probe_interfaces()
    _probe_resolver_config()
    logger.debug("--------- Diagnostics finished ---------")
