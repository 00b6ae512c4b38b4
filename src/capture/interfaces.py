"""
Network interface listing, so the user can pick a capture interface.
"""
from typing import Dict, List


def list_interfaces() -> List[Dict]:
    """List interfaces known to Scapy with their IPv4 address, if any."""
    from scapy.all import get_if_list, get_if_addr

    interfaces = []
    for iface_name in get_if_list():
        try:
            address = get_if_addr(iface_name)
        except (OSError, ValueError):
            address = None

        interfaces.append({
            'name': iface_name,
            'ips': [address] if address and address != "0.0.0.0" else [],
        })
    return interfaces
