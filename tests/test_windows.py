"""
Tests for maintenance window calculation and the host DNS check.
"""

import socket
import time
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from mm.errors import EXIT_USAGE, ValidationError
from mm.hosts import host_resolves
from mm.windows import compute_window, format_timestamp, window_length


@pytest.fixture
def local_cet(monkeypatch):
    """Switch the process local zone to Central European time."""
    monkeypatch.setenv("TZ", "CET-1CEST,M3.5.0,M10.5.0/3")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


class TestComputeWindow:
    """Test compute_window."""

    @pytest.mark.parametrize("hours", [0.25, 1.0, 2.0, 12.5, 48.0])
    def test_end_is_start_plus_timeout(self, hours):
        """Test that the window lasts exactly the requested hours."""
        window = compute_window(hours)

        start = datetime.fromisoformat(window.start_time)
        end = datetime.fromisoformat(window.end_time)
        assert (end - start).total_seconds() == hours * 3600

    def test_fixed_start_time(self):
        """Test formatting with an explicit start time."""
        now = datetime(2024, 1, 15, 19, 30, 12, 345678, tzinfo=timezone.utc)

        window = compute_window(2.0, now=now)

        assert window.start_time == "2024-01-15T19:30:12Z"
        assert window.end_time == "2024-01-15T21:30:12Z"

    def test_keeps_utc_offset(self):
        """Test that a non-UTC offset is carried into both timestamps."""
        cet = timezone(timedelta(hours=1))
        now = datetime(2024, 3, 31, 23, 0, 0, tzinfo=cet)

        window = compute_window(1.5, now=now)

        assert window.start_time == "2024-03-31T23:00:00+01:00"
        assert window.end_time == "2024-04-01T00:30:00+01:00"

    def test_default_start_is_timezone_aware(self):
        """Test that the default start carries an offset."""
        window = compute_window(1.0)

        assert datetime.fromisoformat(window.start_time).tzinfo is not None

    def test_utc_written_as_z(self):
        """Test that a zero offset is written as Z."""
        value = datetime(2024, 1, 15, 19, 30, tzinfo=timezone.utc)

        assert format_timestamp(value) == "2024-01-15T19:30:00Z"
        assert format_timestamp(value.astimezone(timezone(timedelta(hours=-5)))) == "2024-01-15T14:30:00-05:00"

    def test_end_out_of_range(self):
        """Test a timeout whose end date cannot be represented."""
        now = datetime(2024, 1, 15, 19, 30, tzinfo=timezone.utc)

        with pytest.raises(ValidationError, match="out of range") as exc_info:
            compute_window(1e8, now=now)

        assert exc_info.value.exit_code == EXIT_USAGE

    @pytest.mark.skipif(not hasattr(time, "tzset"), reason="needs time.tzset")
    def test_local_window_across_dst_change(self, local_cet):
        """Test that each end of a local window gets its own offset."""
        window = compute_window(2.0, now=datetime(2024, 3, 31, 1, 30))

        assert window.start_time == "2024-03-31T01:30:00+01:00"
        assert window.end_time == "2024-03-31T04:30:00+02:00"

    def test_window_length_truncates_to_seconds(self):
        """Test sub-second durations are dropped."""
        assert window_length(0.5) == timedelta(seconds=1800)
        assert window_length(1.0001) == timedelta(seconds=3600)


class TestHostResolves:
    """Test host_resolves."""

    def test_host_with_records(self, resolvable):
        """Test a host with at least one address."""
        assert host_resolves("web1", resolvable) is True

    def test_host_without_records(self):
        """Test a lookup that returns nothing."""
        assert host_resolves("web1", Mock(return_value=[])) is False

    def test_lookup_failure(self, unresolvable):
        """Test a lookup that raises."""
        assert host_resolves("no-such-host", unresolvable) is False

    def test_invalid_name(self):
        """Test names the resolver cannot encode."""
        resolver = Mock(side_effect=UnicodeError("label too long"))

        assert host_resolves("a" * 300, resolver) is False

    def test_empty_hostname_skips_lookup(self):
        """Test that an empty name never reaches the resolver."""
        resolver = Mock()

        assert host_resolves("", resolver) is False
        resolver.assert_not_called()

    def test_resolver_called_with_hostname(self, resolvable):
        """Test that the lookup is made for the given host."""
        resolver = Mock(side_effect=resolvable)

        host_resolves("db1.example.com", resolver)

        resolver.assert_called_once_with("db1.example.com", None)

    def test_default_resolver_is_getaddrinfo(self):
        """Test that the stdlib resolver is used by default."""
        assert host_resolves.__defaults__[0] is socket.getaddrinfo
