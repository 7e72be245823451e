import errno
import logging
import unittest

import mock
from click.testing import CliRunner

import lsupnp as upnp
from lsupnp import cli

from tests.const import NAS_IP, ROUTER_IP


def fake_session_class(found=(), error=None):
    """
    Build a DiscoverySession replacement that reports `found` to the output
    sink and then raises `error`, if given.
    """
    created = []

    class FakeSession(object):
        def __init__(self, config, on_host=None):
            self.config = config
            self.on_host = on_host
            created.append(self)

        def run(self):
            hosts = upnp.HostSet()
            for host, name in found:
                hosts.insert(host)
                hosts.set_name(host, name)
                self.on_host(host, name)
            if error is not None:
                error.hosts = hosts
                raise error
            return hosts

    return FakeSession, created


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        patcher = mock.patch("lsupnp.cli.logging.basicConfig")
        self.basic_config = patcher.start()
        self.addCleanup(patcher.stop)

    def invoke(self, args, found=(), error=None):
        session_class, created = fake_session_class(found, error)
        with mock.patch("lsupnp.cli.DiscoverySession", session_class):
            result = self.runner.invoke(cli.root, args)
        return result, created

    def test_defaults(self):
        result, created = self.invoke([])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(created[0].config, upnp.SessionConfig(0, 5, False, False))
        self.assertEqual(result.output, "")

    def test_flags(self):
        result, created = self.invoke(["-p", "5000", "-r", "-t", "3", "-v"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(created[0].config, upnp.SessionConfig(5000, 3, True, True))

    def test_long_flags(self):
        result, created = self.invoke(["--port", "1901", "--timeout", "2"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(created[0].config, upnp.SessionConfig(1901, 2, False, False))

    def test_negative_timeout(self):
        result, created = self.invoke(["-t", "-3"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(created[0].config.receive_timeout, 3)

    def test_zero_timeout(self):
        result, created = self.invoke(["-t", "0"])
        self.assertEqual(result.exit_code, 2)
        self.assertEqual(created, [])

    def test_port_out_of_range(self):
        result, created = self.invoke(["-p", "70000"])
        self.assertEqual(result.exit_code, 2)
        self.assertEqual(created, [])

    def test_unknown_flag(self):
        result, created = self.invoke(["-x"])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("Usage:", result.output)
        self.assertEqual(created, [])

    def test_help(self):
        result, _ = self.invoke(["--help"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Discover and list UPnP devices", result.output)
        self.assertIn("--resolve", result.output)

    def test_output_lines(self):
        result, _ = self.invoke(
            ["-r"], found=[(ROUTER_IP, "router.lan"), (NAS_IP, None)]
        )
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output, "%s\trouter.lan\n%s\n" % (ROUTER_IP, NAS_IP))

    def test_logging_levels(self):
        self.invoke([])
        self.assertEqual(self.basic_config.call_args[1]["level"], logging.WARNING)
        self.invoke(["-v"])
        self.assertEqual(self.basic_config.call_args[1]["level"], logging.DEBUG)

    def test_transport_error_exit_status(self):
        error = upnp.TransportError(
            "bind", OSError(errno.EADDRINUSE, "Address already in use")
        )
        result, _ = self.invoke(["-p", "1900"], error=error)
        self.assertEqual(result.exit_code, errno.EADDRINUSE)
        self.assertIn("bind(): ", result.output)

    def test_partial_send_exit_status(self):
        result, _ = self.invoke([], error=upnp.PartialSendError(10, 94))
        self.assertEqual(result.exit_code, 1)
        self.assertIn("sendto(): only sent 10 of 94 bytes", result.output)

    def test_partial_results_printed_before_error(self):
        error = upnp.TransportError(
            "recvfrom", OSError(errno.ECONNREFUSED, "Connection refused")
        )
        result, _ = self.invoke([], found=[(ROUTER_IP, None)], error=error)
        self.assertEqual(result.exit_code, errno.ECONNREFUSED)
        self.assertTrue(result.output.startswith(ROUTER_IP + "\n"))


class TestExitStatus(unittest.TestCase):
    def test_errno(self):
        exc = upnp.TransportError("bind", OSError(errno.EACCES, "Permission denied"))
        self.assertEqual(cli.exit_status(exc), errno.EACCES)

    def test_masked(self):
        exc = upnp.TransportError("select", OSError(256, "odd"))
        self.assertEqual(cli.exit_status(exc), 1)
        exc = upnp.TransportError("select", OSError(300, "odd"))
        self.assertEqual(cli.exit_status(exc), 300 & 0xFF)

    def test_no_errno(self):
        self.assertEqual(cli.exit_status(upnp.TransportError("select", OSError("x"))), 1)
        self.assertEqual(cli.exit_status(upnp.PartialSendError(1, 2)), 1)


class TestMain(unittest.TestCase):
    def test_help(self):
        with self.assertRaises(SystemExit) as cm:
            cli.main(["--help"])
        self.assertEqual(cm.exception.code, 0)
