import unittest
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from kommissar_digest.models import (
    EventCard,
    HistoricalEvent,
    ImageFailed,
    ImageIdle,
    ImageLoading,
    ImageReady,
    ImageStatus,
    RawEvent,
    parse_year,
)


class TestParseYear(unittest.TestCase):

    def test_plain(self):
        self.assertEqual(parse_year("1917"), 1917)

    def test_int_passthrough(self):
        self.assertEqual(parse_year(1949), 1949)

    def test_decorated(self):
        self.assertEqual(parse_year(" 1917 AD"), 1917)

    def test_bc_is_negative(self):
        self.assertEqual(parse_year("44 BC"), -44)
        self.assertEqual(parse_year("300 B.C."), -300)
        self.assertEqual(parse_year("12 BCE"), -12)

    def test_no_digits(self):
        with self.assertRaises(ValueError):
            parse_year("unknown")


class TestRawEvent(unittest.TestCase):

    def test_from_payload_uses_default_date(self):
        raw = RawEvent.from_payload({"year": "1917", "text": "Revolution"}, default_date="November 7")
        self.assertEqual(raw, RawEvent(date="November 7", text="Revolution", year="1917"))

    def test_from_payload_prefers_own_date(self):
        raw = RawEvent.from_payload(
            {"date": "March 8", "year": "1917", "text": "Strike"}, default_date="November 7"
        )
        self.assertEqual(raw.date, "March 8")

    def test_from_payload_requires_text(self):
        with self.assertRaises(ValueError):
            RawEvent.from_payload({"year": "1917", "text": "  "})

    def test_from_payload_requires_parseable_year(self):
        with self.assertRaises(ValueError):
            RawEvent.from_payload({"year": "n/a", "text": "Something"})


class TestHistoricalEvent(unittest.TestCase):

    def test_from_raw(self):
        event = HistoricalEvent.from_raw(RawEvent(date="May 1", text="May Day", year="1886"))
        self.assertEqual(event, HistoricalEvent(date="May 1", description="May Day", year=1886))

    def test_share_text(self):
        event = HistoricalEvent(date="May 1", description="May Day", year=1886)
        self.assertEqual(event.share_text(), "1886: May Day\n\nShared from Kommissar's Digest")


class TestEventCard(unittest.TestCase):

    def setUp(self):
        self.card = EventCard(event=HistoricalEvent(date="May 1", description="May Day", year=1886))

    def test_starts_idle(self):
        self.assertIsInstance(self.card.state, ImageIdle)
        self.assertIs(self.card.status, ImageStatus.IDLE)

    def test_loading_then_ready(self):
        self.card.start_loading()
        self.assertIsInstance(self.card.state, ImageLoading)

        self.card.finish("data:image/png;base64,AAAA")

        self.assertEqual(self.card.state, ImageReady("data:image/png;base64,AAAA"))
        self.assertEqual(self.card.event.image_url, "data:image/png;base64,AAAA")

    def test_loading_then_error_leaves_image_absent(self):
        self.card.start_loading()
        self.card.fail("boom")

        self.assertEqual(self.card.state, ImageFailed("boom"))
        self.assertIs(self.card.status, ImageStatus.ERROR)
        self.assertIsNone(self.card.event.image_url)

    def test_retry_from_terminal_states(self):
        self.card.start_loading()
        self.card.fail("boom")
        self.card.start_loading()
        self.card.finish("data:image/png;base64,AAAA")
        self.card.start_loading()

        self.assertIs(self.card.status, ImageStatus.LOADING)

    def test_cannot_load_twice(self):
        self.card.start_loading()
        with self.assertRaises(RuntimeError):
            self.card.start_loading()

    def test_cannot_resolve_without_loading(self):
        with self.assertRaises(RuntimeError):
            self.card.finish("data:image/png;base64,AAAA")
        with self.assertRaises(RuntimeError):
            self.card.fail("boom")


if __name__ == '__main__':
    unittest.main()
