from .util import HostSet


class LsUPnPError(Exception):
    """
    Base exception class for lsupnp.
    """

    pass


class UnexpectedResponse(LsUPnPError):
    """
    Got an SSDP response whose status line isn't "HTTP/1.1 200".
    """

    pass


class DiscoveryError(LsUPnPError):
    """
    A fatal failure that ended a discovery session. `operation` names the
    call that failed and `hosts` holds whatever was discovered before it.
    """

    def __init__(self, operation, message, hosts=None):
        super(DiscoveryError, self).__init__("%s(): %s" % (operation, message))
        self.operation = operation
        self.hosts = hosts if hosts is not None else HostSet()


class TransportError(DiscoveryError):
    """
    The operating system refused a socket operation.
    """

    def __init__(self, operation, cause, hosts=None):
        super(TransportError, self).__init__(operation, str(cause), hosts=hosts)
        self.cause = cause
        self.errno = getattr(cause, "errno", None)
        self.strerror = getattr(cause, "strerror", None)


class PartialSendError(DiscoveryError):
    """
    The discovery request went out short.
    """

    def __init__(self, sent, expected, hosts=None):
        super(PartialSendError, self).__init__(
            "sendto", "only sent %d of %d bytes" % (sent, expected), hosts=hosts
        )
        self.sent = sent
        self.expected = expected
