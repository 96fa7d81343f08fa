from datetime import datetime, timezone
from types import SimpleNamespace

from django.test import SimpleTestCase

from apps.events.overlap import Slot, find_overlaps, has_overlap, ranges_overlap


def at(hour: int) -> datetime:
    return datetime(2013, 3, 27, hour, 0, tzinfo=timezone.utc)


class RangesOverlapTests(SimpleTestCase):
    def test_partial_intersection(self):
        self.assertTrue(ranges_overlap(at(10), at(12), at(11), at(13)))

    def test_touching_endpoints_overlap(self):
        self.assertTrue(ranges_overlap(at(10), at(12), at(12), at(13)))
        self.assertTrue(ranges_overlap(at(12), at(13), at(10), at(12)))

    def test_disjoint_ranges(self):
        self.assertFalse(ranges_overlap(at(10), at(11), at(12), at(13)))
        self.assertFalse(ranges_overlap(at(12), at(13), at(10), at(11)))

    def test_containment(self):
        self.assertTrue(ranges_overlap(at(9), at(17), at(12), at(13)))


class HasOverlapTests(SimpleTestCase):
    def test_accepts_plain_tuples(self):
        existing = [(at(10), at(12))]

        self.assertTrue(has_overlap(at(11), at(13), existing))
        self.assertTrue(has_overlap(at(12), at(13), existing))
        self.assertFalse(has_overlap(at(13), at(14), [(at(10), at(11)), (at(15), at(16))]))

    def test_empty_store_never_overlaps(self):
        self.assertFalse(has_overlap(at(10), at(12), []))

    def test_excluding_ignores_the_event_being_edited(self):
        existing = [Slot(at(10), at(12), id=1)]

        self.assertFalse(has_overlap(at(10), at(12), existing, excluding=1))
        self.assertTrue(has_overlap(at(10), at(12), existing, excluding=2))

    def test_excluding_still_checks_other_events(self):
        existing = [Slot(at(10), at(12), id=1), Slot(at(11), at(14), id=2)]

        self.assertTrue(has_overlap(at(10), at(12), existing, excluding=1))

    def test_find_overlaps_returns_original_items(self):
        event = SimpleNamespace(pk="abc", start_date=at(10), end_date=at(12))
        other = SimpleNamespace(pk="def", start_date=at(14), end_date=at(15))

        self.assertEqual(find_overlaps(at(11), at(13), [event, other]), [event])
        self.assertEqual(find_overlaps(at(11), at(13), [event, other], excluding="abc"), [])
