#!/usr/bin/env python3
import unittest

from whistle.constants import AUTHOR_ICON_URL, AUTHOR_URL
from whistle.formatters import format_alert_payload, pick_color, render_value

RED = 0xFF0000
GREEN = 0x00FF00
PINK = 0xFFC0CB


class TestObjectAlerts(unittest.TestCase):
    def setUp(self):
        self.alert = {
            "exchange": "BINANCE",
            "ticker": "BTCUSDT",
            "close": "100",
            "open": "120",
            "event": "cross",
            "interval": "1h",
            "volume": "500",
        }

    def test_candle_summary(self):
        embed = format_alert_payload(self.alert)["embeds"][0]
        self.assertEqual(embed["author"]["name"], "Whistle: BTCUSDT cross at BINANCE")
        self.assertEqual(embed["description"], "Open: 120\nClose: 100\nInterval: 1h\nVolume: 500\n")
        self.assertEqual(embed["color"], RED)

    def test_static_links(self):
        author = format_alert_payload(self.alert)["embeds"][0]["author"]
        self.assertEqual(author["url"], AUTHOR_URL)
        self.assertEqual(author["icon_url"], AUTHOR_ICON_URL)

    def test_color_uses_string_comparison(self):
        # numericamente 100 > 99, mas "100" < "99"
        self.assertEqual(pick_color("100", "99"), RED)
        self.assertEqual(pick_color("99", "100"), GREEN)
        self.assertEqual(pick_color("120", "120"), GREEN)

    def test_empty_fields_are_green(self):
        embed = format_alert_payload({})["embeds"][0]
        self.assertEqual(embed["color"], GREEN)
        self.assertEqual(embed["author"]["name"], "Whistle:   at ")
        self.assertEqual(embed["description"], "Open: \nClose: \nInterval: \nVolume: \n")

    def test_only_close_empty_is_red(self):
        self.assertEqual(format_alert_payload({"open": "1"})["embeds"][0]["color"], RED)

    def test_non_string_fields_are_treated_as_empty(self):
        embed = format_alert_payload({"close": 100, "open": 120, "ticker": None})["embeds"][0]
        self.assertEqual(embed["color"], GREEN)
        self.assertEqual(embed["description"], "Open: \nClose: \nInterval: \nVolume: \n")

    def test_is_pure(self):
        self.assertEqual(format_alert_payload(self.alert), format_alert_payload(self.alert))


class TestTextAlerts(unittest.TestCase):
    def test_string_keeps_json_quotes(self):
        embed = format_alert_payload("simple text")["embeds"][0]
        self.assertEqual(embed["author"]["name"], "Whistle: Text Notification")
        self.assertEqual(embed["description"], 'Event: "simple text"')
        self.assertEqual(embed["color"], PINK)

    def test_scalars_and_arrays(self):
        cases = [(42, "42"), (True, "true"), (None, "null"), ([1, "a"], '[1,"a"]')]
        for value, text in cases:
            embed = format_alert_payload(value)["embeds"][0]
            self.assertEqual(embed["description"], "Event: " + text)
            self.assertEqual(embed["color"], PINK)

    def test_render_value_keeps_unicode(self):
        self.assertEqual(render_value("ação"), '"ação"')


if __name__ == '__main__':
    unittest.main()
