import mock


class FakeSocket(object):
    """
    Stand-in for a UDP socket. `datagrams` is a list of `(payload, address)`
    tuples, or exceptions to raise from `recvfrom`, returned in order.
    """

    def __init__(self, datagrams=(), sent=None, bind_error=None, send_error=None,
                 close_error=None):
        self.datagrams = list(datagrams)
        self.short_send = sent
        self.bind_error = bind_error
        self.send_error = send_error
        self.close_error = close_error
        self.bound = None
        self.sent = []
        self.recv_sizes = []
        self.close_calls = 0

    def bind(self, address):
        if self.bind_error is not None:
            raise self.bind_error
        self.bound = address

    def sendto(self, data, address):
        if self.send_error is not None:
            raise self.send_error
        self.sent.append((data, address))
        if self.short_send is not None:
            return self.short_send
        return len(data)

    def recvfrom(self, bufsize):
        self.recv_sizes.append(bufsize)
        item = self.datagrams.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.close_calls += 1
        if self.close_error is not None:
            raise self.close_error


class FakeSelect(object):
    """
    Replacement for `select.select` that reports the socket readable while
    it still has datagrams queued, and a quiet timeout afterwards.
    """

    def __init__(self, sock, error=None):
        self.sock = sock
        self.error = error
        self.timeouts = []

    def __call__(self, rlist, wlist, xlist, timeout=None):
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        if self.sock.datagrams:
            return list(rlist), [], []
        return [], [], []


def patch_network(sock, select_error=None):
    """
    Patch socket creation and readiness waits in `lsupnp.ssdp`. Returns the
    two patchers and the FakeSelect.
    """
    fake_select = FakeSelect(sock, error=select_error)
    return (
        mock.patch("lsupnp.ssdp.socket.socket", return_value=sock),
        mock.patch("lsupnp.ssdp.select.select", new=fake_select),
        fake_select,
    )
