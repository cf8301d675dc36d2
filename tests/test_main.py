import io
import unittest
from unittest.mock import patch

from rich.console import Console

from hostprobe.main import ConfigurationError, main, parse_args


class ParseArgsTests(unittest.TestCase):
    def test_duration_flag(self) -> None:
        config = parse_args(["-d", "3", "127.0.0.1"])
        self.assertEqual(config.target, "127.0.0.1")
        self.assertEqual(config.duration_s, 3)

    def test_default_duration(self) -> None:
        config = parse_args(["example.com"], default_duration=60)
        self.assertEqual(config.target, "example.com")
        self.assertEqual(config.duration_s, 60)

    def test_flag_without_enough_arguments_is_a_target(self) -> None:
        config = parse_args(["-d", "5"], default_duration=60)
        self.assertEqual(config.target, "-d")
        self.assertEqual(config.duration_s, 60)

    def test_non_integer_duration(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            parse_args(["-d", "ten", "example.com"])
        self.assertEqual(str(ctx.exception), "Invalid duration specified: ten")

    def test_duration_must_be_positive(self) -> None:
        with self.assertRaises(ConfigurationError):
            parse_args(["-d", "0", "example.com"])

    def test_missing_target(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            parse_args([])
        self.assertIn("Usage:", str(ctx.exception))

    def test_config_is_immutable(self) -> None:
        config = parse_args(["-d", "3", "127.0.0.1"])
        with self.assertRaises(Exception):
            config.target = "10.0.0.1"


class MainTests(unittest.TestCase):
    def setUp(self) -> None:
        self.buf = io.StringIO()
        self.console = Console(file=self.buf, width=200, color_system=None)

    def test_usage_on_missing_arguments(self) -> None:
        with patch("hostprobe.main.run_report") as run_report:
            code = main([], console=self.console)

        self.assertEqual(code, 1)
        run_report.assert_not_called()
        self.assertIn(
            "Usage: hostprobe [-d duration_in_seconds] <ip_or_dns_name>",
            self.buf.getvalue(),
        )

    def test_invalid_duration_exits_1(self) -> None:
        with patch("hostprobe.main.run_report") as run_report:
            code = main(["-d", "abc", "example.com"], console=self.console)

        self.assertEqual(code, 1)
        run_report.assert_not_called()
        self.assertIn("Invalid duration specified: abc", self.buf.getvalue())

    def test_successful_run_exits_0(self) -> None:
        with patch("hostprobe.main.run_report") as run_report:
            code = main(["-d", "3", "127.0.0.1"], console=self.console)

        self.assertEqual(code, 0)
        config = run_report.call_args.args[0]
        self.assertEqual((config.target, config.duration_s), ("127.0.0.1", 3))


if __name__ == "__main__":
    unittest.main()
