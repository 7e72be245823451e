import logging
from collections import OrderedDict


def _getLogger(name):
    """
    Retrieve a logger instance. Handlers are left to the application, so the
    library stays quiet unless the caller configures logging.
    """
    logger = logging.getLogger(name)
    return logger


class HostSet(object):
    """
    Insertion-ordered set of discovered host strings.

    Hosts are compared exactly, without case folding or any other
    normalisation. Each host may carry the name it resolved to, if any.
    """

    def __init__(self, hosts=None):
        self._hosts = OrderedDict()
        for host in hosts or ():
            self.insert(host)

    def __repr__(self):
        return "<HostSet %r>" % self.hosts()

    def __len__(self):
        return len(self._hosts)

    def __iter__(self):
        return iter(self._hosts)

    def __contains__(self, host):
        return self.contains(host)

    def contains(self, host):
        return host in self._hosts

    def insert(self, host):
        """
        Append `host` unless it is already present. Returns True if the host
        was newly added.
        """
        if self.contains(host):
            return False
        self._hosts[host] = None
        return True

    def set_name(self, host, name):
        if host not in self._hosts:
            raise KeyError(host)
        self._hosts[host] = name

    def name_of(self, host):
        return self._hosts[host]

    def hosts(self):
        return list(self._hosts)

    def items(self):
        return list(self._hosts.items())
