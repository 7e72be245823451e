# Copyright (c) 2026, the lsupnp contributors
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
This module lists the UPnP devices on the local network. It implements the
discovery half of SSDP (Simple Service Discovery Protocol): an M-SEARCH
request is sent to the SSDP multicast group and the host named in the
LOCATION header of every reply is collected.

The flow of a discovery is:

- Send one M-SEARCH request to 239.255.255.250:1900 from a UDP socket bound
  to all local interfaces.

- Read replies until a whole timeout window passes without one. SSDP has no
  end-of-replies marker, so a quiet window is taken to mean every device has
  answered.

- Take the host from the "http://<host>:<port>/..." URL in the LOCATION
  header of each "HTTP/1.1 200 OK" reply. Each host is reported once, in the
  order it first answered, optionally with its reverse DNS name.

Classes:

* DiscoverySession: run one discovery with a given SessionConfig.
* SessionConfig: immutable settings for a session.
* HostSet: ordered set of the hosts found.

The following example lists all UPnP hosts on the local network:

------------------------------------------------------------------------------
import lsupnp

for host in lsupnp.discover(timeout=3):
    print(host)
------------------------------------------------------------------------------

Useful Links:

* http://upnp.org/specs/arch/UPnP-arch-DeviceArchitecture-v1.1.pdf
"""
from lsupnp import config, const, errors, resolve, ssdp, util  # noqa: F401
from .config import SessionConfig
from .errors import (
    LsUPnPError, DiscoveryError, TransportError, PartialSendError, UnexpectedResponse)
from .resolve import resolve_name
from .ssdp import DiscoverySession, discover, parse_host
from .util import HostSet

__all__ = [
    "SessionConfig", "LsUPnPError", "DiscoveryError", "TransportError",
    "PartialSendError", "UnexpectedResponse", "resolve_name", "DiscoverySession",
    "discover", "parse_host", "HostSet",
]
