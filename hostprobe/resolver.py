from __future__ import annotations

import ipaddress
import logging
import socket

from hostprobe.models import ResolvedAddress

logger = logging.getLogger(__name__)


class ResolutionError(RuntimeError):
    pass


def is_ip_literal(target: str) -> bool:
    try:
        ipaddress.ip_address(target)
        return True
    except ValueError:
        return False


def resolve(target: str) -> list[ResolvedAddress]:
    """
    Look up every address for a DNS name.
    Addresses are returned once each, in the order the resolver gave them.
    """
    try:
        infos = socket.getaddrinfo(target, None)
    except (OSError, UnicodeError) as e:
        raise ResolutionError(str(e)) from e

    seen: set[str] = set()
    addresses: list[ResolvedAddress] = []
    for _family, _type, _proto, _canon, sockaddr in infos:
        ip = str(sockaddr[0])
        if ip in seen:
            continue
        seen.add(ip)
        addresses.append(ResolvedAddress(ip=ip))

    logger.debug("Resolved %s to %d address(es)", target, len(addresses))
    return addresses
