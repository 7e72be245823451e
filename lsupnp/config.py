from collections import namedtuple

from .const import DEFAULT_TIMEOUT


_SessionConfig = namedtuple(
    "SessionConfig", ["source_port", "receive_timeout", "verbose", "resolve_names"]
)


class SessionConfig(_SessionConfig):
    """
    Immutable settings for one discovery session.

    `source_port` is the local UDP port to bind (0 lets the OS choose),
    `receive_timeout` the number of quiet seconds that ends the session,
    `verbose` turns on diagnostic logging of the traffic and `resolve_names`
    enables reverse DNS lookups of discovered hosts.
    """

    __slots__ = ()

    @classmethod
    def create(
        cls,
        source_port=0,
        receive_timeout=DEFAULT_TIMEOUT,
        verbose=False,
        resolve_names=False,
    ):
        if isinstance(source_port, bool) or not isinstance(source_port, int):
            raise ValueError("source_port must be an integer, not %r" % (source_port,))
        if not 0 <= source_port <= 65535:
            raise ValueError("source_port must be between 0 and 65535, not %d" % source_port)
        if isinstance(receive_timeout, bool) or not isinstance(receive_timeout, int):
            raise ValueError(
                "receive_timeout must be an integer, not %r" % (receive_timeout,)
            )
        if receive_timeout <= 0:
            raise ValueError("receive_timeout must be positive, not %d" % receive_timeout)
        return cls(source_port, receive_timeout, bool(verbose), bool(resolve_names))


DEFAULT_CONFIG = SessionConfig.create()
