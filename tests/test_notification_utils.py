"""Tests for the panel formatting helpers."""

from datetime import timedelta

from django.test import SimpleTestCase, override_settings
from django.utils import timezone
from django.utils.formats import date_format

from notifications.utils import (
    format_badge,
    format_relative_time,
    icon_for_type,
    pluralize_count,
)


class FormatBadgeTest(SimpleTestCase):

    def test_hidden_when_nothing_unread(self):
        self.assertEqual(format_badge(0), "")
        self.assertEqual(format_badge(None), "")

    def test_shows_exact_count_up_to_nine(self):
        self.assertEqual(format_badge(1), "1")
        self.assertEqual(format_badge(9), "9")

    def test_caps_above_nine(self):
        self.assertEqual(format_badge(10), "9+")
        self.assertEqual(format_badge(250), "9+")

    @override_settings(NOTIFICATION_BADGE_MAX=99)
    def test_cap_follows_settings(self):
        self.assertEqual(format_badge(42), "42")
        self.assertEqual(format_badge(100), "99+")


class FormatRelativeTimeTest(SimpleTestCase):

    def setUp(self):
        self.now = timezone.now()

    def ago(self, **delta):
        return format_relative_time(self.now - timedelta(**delta), now=self.now)

    def test_missing_timestamp(self):
        self.assertEqual(format_relative_time(None), "")

    def test_just_now(self):
        self.assertEqual(self.ago(seconds=0), "Just now")
        self.assertEqual(self.ago(seconds=59), "Just now")

    def test_minutes(self):
        self.assertEqual(self.ago(minutes=1), "1m ago")
        self.assertEqual(self.ago(minutes=59, seconds=59), "59m ago")

    def test_hours(self):
        self.assertEqual(self.ago(hours=1), "1h ago")
        self.assertEqual(self.ago(hours=23, minutes=59), "23h ago")

    def test_days(self):
        self.assertEqual(self.ago(days=1), "1d ago")
        self.assertEqual(self.ago(days=6, hours=23), "6d ago")

    def test_older_than_a_week_shows_date(self):
        then = self.now - timedelta(days=8)
        expected = date_format(timezone.localtime(then), "SHORT_DATE_FORMAT")
        self.assertEqual(format_relative_time(then, now=self.now), expected)


class IconAndPluralTest(SimpleTestCase):

    def test_icons(self):
        self.assertEqual(icon_for_type("approval"), "check-circle")
        self.assertEqual(icon_for_type("rejection"), "alert-circle")
        self.assertEqual(icon_for_type("review_request"), "info")
        self.assertEqual(icon_for_type("info"), "bell")
        self.assertEqual(icon_for_type("anything-else"), "bell")

    def test_pluralize_count(self):
        self.assertEqual(pluralize_count(1, "notification"), "1 notification")
        self.assertEqual(pluralize_count(0, "notification"), "0 notifications")
        self.assertEqual(pluralize_count(3, "read notification"), "3 read notifications")
