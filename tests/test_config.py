import unittest

from hostprobe.config import _parse_log_level, _parse_ports


class SettingsParsingTests(unittest.TestCase):
    def test_ports_keep_their_order(self) -> None:
        self.assertEqual(_parse_ports("22, 443,80,5432,"), (22, 443, 80, 5432))

    def test_out_of_range_ports_are_rejected(self) -> None:
        for raw in ("0", "22,70000", "-1"):
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    _parse_ports(raw)

    def test_log_level(self) -> None:
        self.assertEqual(_parse_log_level("debug"), "DEBUG")
        self.assertEqual(_parse_log_level(" info "), "INFO")
        self.assertEqual(_parse_log_level("VERBOSE"), "WARNING")
        self.assertEqual(_parse_log_level(""), "WARNING")


if __name__ == "__main__":
    unittest.main()
