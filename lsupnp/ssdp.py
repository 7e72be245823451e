import re
import socket
import select

import ifaddr

from .config import DEFAULT_CONFIG, SessionConfig
from .const import (
    DEFAULT_TIMEOUT,
    DISCOVERY_REQUEST,
    EXPECTED_STATUS,
    LOCATION_TOKEN,
    MAX_BUFFER_LEN,
    SSDP_TARGET,
    STATUS_COMPARE_LEN,
    URL_SCHEME,
)
from .errors import (
    DiscoveryError,
    LsUPnPError,
    PartialSendError,
    TransportError,
    UnexpectedResponse,
)
from .resolve import resolve_name
from .util import HostSet, _getLogger

STATE_IDLE = "idle"
STATE_SOCKET_OPEN = "socket-open"
STATE_BOUND = "bound"
STATE_PROBE_SENT = "probe-sent"
STATE_LISTENING = "listening"
STATE_CLOSED = "closed"
STATE_FAILED = "failed"

_LOCATION_RE = re.compile(re.escape(LOCATION_TOKEN), re.IGNORECASE | re.ASCII)


def ssdp_request():
    """Return the bytes of the M-SEARCH request sent to the multicast group."""
    return DISCOVERY_REQUEST


def parse_host(payload):
    """
    Extract the advertising host from one SSDP response.

    Raises `UnexpectedResponse` if the payload doesn't start with a
    "HTTP/1.1 200" status line. Otherwise returns the text between "http://"
    and the next ":" following the LOCATION header, or None if any of those
    markers is missing. IPv6 literals and URLs without a port are not
    handled.
    """
    if isinstance(payload, bytes):
        payload = payload.decode("latin-1")

    if payload[:STATUS_COMPARE_LEN] != EXPECTED_STATUS[:STATUS_COMPARE_LEN]:
        raise UnexpectedResponse("Unexpected SSDP response: %r" % payload[:40])

    match = _LOCATION_RE.search(payload)
    if match is None:
        return None

    url_start = payload.find(URL_SCHEME, match.start())
    if url_start == -1:
        return None

    host_start = url_start + len(URL_SCHEME)
    host_end = payload.find(":", host_start)
    if host_end == -1:
        return None

    return payload[host_start:host_end]


def get_addresses_ipv4():
    # Ignore localhost and IPv6 addresses
    return sorted(
        set(
            addr.ip
            for iface in ifaddr.get_adapters()
            for addr in iface.ips
            if addr.is_IPv4 and addr.ip != "127.0.0.1"
        )
    )


class DiscoverySession(object):
    """
    One M-SEARCH broadcast followed by collection of the replies.

    The session sends a single request to the SSDP multicast group and keeps
    reading replies until `config.receive_timeout` seconds pass without one.
    Every host that is seen for the first time is passed to `on_host(host,
    name)` straight away, where `name` is the resolved DNS name or None.

    >>> session = DiscoverySession(SessionConfig.create(receive_timeout=2))
    >>> for host in session.run():
    ...     print(host)
    ...
    192.168.1.1
    192.168.1.20
    """

    def __init__(self, config=DEFAULT_CONFIG, on_host=None, resolver=resolve_name):
        self.config = config
        self.on_host = on_host
        self.resolver = resolver
        self.hosts = HostSet()
        self.state = STATE_IDLE
        self.unexpected_responses = 0
        self.parse_misses = 0
        self._sock = None
        self._log = _getLogger("ssdp")

    def run(self):
        """
        Run the discovery and return the `HostSet` of discovered hosts.

        Raises a `DiscoveryError` subclass on any fatal socket failure. Hosts
        found before the failure are available on the exception's `hosts`
        attribute.
        """
        if self.state != STATE_IDLE:
            raise LsUPnPError("A discovery session can only be run once.")
        try:
            self._open()
            self._bind()
            self._send_probe()
            self._receive_loop()
        except DiscoveryError as exc:
            self.state = STATE_FAILED
            exc.hosts = self.hosts
            raise
        except Exception:
            self.state = STATE_FAILED
            raise
        finally:
            self._close()
        return self.hosts

    def _open(self):
        try:
            self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        except OSError as exc:
            raise TransportError("socket", exc)
        self.state = STATE_SOCKET_OPEN

    def _bind(self):
        port = self.config.source_port
        try:
            self._sock.bind(("", port))
        except OSError as exc:
            raise TransportError("bind", exc)
        self.state = STATE_BOUND
        if self.config.verbose:
            if port != 0:
                self._log.debug("Client bound to port %d", port)
            self._log_local_addresses()

    def _log_local_addresses(self):
        try:
            addresses = get_addresses_ipv4()
        except (OSError, ValueError) as exc:
            self._log.warning("Could not list local interfaces: %s", exc)
            return
        self._log.debug("Probing from local addresses: %s", ", ".join(addresses))

    def _send_probe(self):
        request = ssdp_request()
        try:
            sent = self._sock.sendto(request, SSDP_TARGET)
        except OSError as exc:
            raise TransportError("sendto", exc)
        if sent != len(request):
            raise PartialSendError(sent, len(request))
        self.state = STATE_PROBE_SENT
        if self.config.verbose:
            self._log.debug("Sent to %s:%d:\n%s", SSDP_TARGET[0], SSDP_TARGET[1],
                            request.decode("ascii"))

    def _receive_loop(self):
        self.state = STATE_LISTENING
        timeout = self.config.receive_timeout
        while True:
            try:
                ready = select.select([self._sock], [], [], timeout)[0]
            except OSError as exc:
                raise TransportError("select", exc)

            if not ready:
                # A full quiet period means everyone has answered.
                if self.config.verbose:
                    self._log.debug("No response for %d seconds, done", timeout)
                return

            try:
                data, address = self._sock.recvfrom(MAX_BUFFER_LEN)
            except OSError as exc:
                raise TransportError("recvfrom", exc)
            self._handle_datagram(data, address)

    def _handle_datagram(self, data, address):
        try:
            host = parse_host(data)
        except UnexpectedResponse:
            self.unexpected_responses += 1
            self._log.info("Unexpected SSDP response from %s", address[0])
            if self.config.verbose:
                self._log.debug("%s", data.decode("latin-1"))
            return

        if self.config.verbose:
            self._log.debug("Response from %s:\n%s", address[0], data.decode("latin-1"))

        if host is None:
            self.parse_misses += 1
            if self.config.verbose:
                self._log.debug("No host found in response from %s", address[0])
            return

        if not self.hosts.insert(host):
            return

        name = None
        if self.config.resolve_names:
            name = self._resolve(host)
        self.hosts.set_name(host, name)
        if self.on_host is not None:
            self.on_host(host, name)

    def _resolve(self, host):
        ok, text = self.resolver(host)
        if not ok:
            self._log.warning("getnameinfo(): %s", text)
            return None
        return text

    def _close(self):
        if self._sock is None:
            return
        sock, self._sock = self._sock, None
        try:
            sock.close()
        except OSError:
            self._log.exception("close() failed")
        if self.state != STATE_FAILED:
            self.state = STATE_CLOSED


def discover(timeout=DEFAULT_TIMEOUT, source_port=0, resolve_names=False):
    """
    Convenience method to discover UPnP hosts on the network. Returns a list
    of host strings in the order they answered.
    """
    config = SessionConfig.create(
        source_port=source_port, receive_timeout=timeout, resolve_names=resolve_names
    )
    return DiscoverySession(config).run().hosts()
