"""
DNS check used to make sure a host exists before touching its maintenances.
"""

import socket

from loguru import logger


def host_resolves(hostname: str, resolver=socket.getaddrinfo) -> bool:
    """Return True if the hostname resolves to at least one address."""
    if not hostname:
        return False

    try:
        addresses = resolver(hostname, None)
    except (OSError, UnicodeError) as e:
        # socket.gaierror is an OSError; idna failures surface as UnicodeError
        logger.debug(f"DNS lookup for {hostname} failed: {e}")
        return False

    logger.debug(f"DNS lookup for {hostname} returned {len(addresses)} record(s)")
    return len(addresses) > 0
