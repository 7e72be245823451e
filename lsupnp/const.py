SSDP_TARGET = ("239.255.255.250", 1900)
SSDP_MX = 3
ST_ALL = "ssdp:all"

# Datagrams longer than this are truncated by the transport.
MAX_BUFFER_LEN = 8192

DEFAULT_TIMEOUT = 5

EXPECTED_STATUS = "HTTP/1.1 200 OK"
STATUS_COMPARE_LEN = 12
LOCATION_TOKEN = "LOCATION:"
URL_SCHEME = "http://"

DISCOVERY_REQUEST = "\r\n".join(
    [
        "M-SEARCH * HTTP/1.1",
        "HOST: {}:{}".format(*SSDP_TARGET),
        'MAN: "ssdp:discover"',
        "MX: {:d}".format(SSDP_MX),
        "ST: {}".format(ST_ALL),
        "",
        "",
    ]
).encode("ascii")
