import socket
import ipaddress


def resolve_name(ip_addr):
    """
    Look up the DNS name of an IPv4 address.

    Returns a `(success, text)` tuple. On success `text` is the name; on
    failure it is a human readable diagnostic. Lookup failures never raise.
    """
    try:
        ipaddress.IPv4Address(ip_addr)
    except ValueError as exc:
        return False, str(exc)
    try:
        name, _ = socket.getnameinfo((ip_addr, 0), 0)
    except (socket.gaierror, socket.herror, OSError) as exc:
        return False, str(exc)
    return True, name
