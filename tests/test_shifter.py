"""
Unit tests for entry shifting and filtering.
"""

import pytest

from srtshift.entry import SubtitleEntry, TimeSpan
from srtshift.shifter import SubtitleShifter, shift_entries
from srtshift.timestamp import MAX_TIMESTAMP, parse_timestamp


def make_entry(start, end, text="line"):
    return SubtitleEntry(timespan=TimeSpan(start, end), text=text)


class TestTimeSpan:
    """Tests for the TimeSpan value type."""

    def test_add_delta(self):
        """Test that adding a delta moves both ends."""
        assert TimeSpan(1000, 2000) + 500 == TimeSpan(1500, 2500)
        assert TimeSpan(1000, 2000) + -1500 == TimeSpan(-500, 500)

    def test_duration(self):
        """Test span duration."""
        assert TimeSpan(1000, 2500).duration == 1500

    def test_entry_times(self):
        """Test entry start/end shortcuts and their documentation."""
        entry = make_entry(250, 750)

        assert (entry.start, entry.end) == (250, 750)
        assert SubtitleEntry.start.__doc__
        assert TimeSpan.duration.__doc__
        assert TimeSpan.__add__.__doc__

    def test_entry_is_immutable(self):
        """Test that entries cannot be changed in place."""
        entry = make_entry(0, 1000)
        with pytest.raises(AttributeError):
            entry.text = "changed"


class TestSubtitleShifter:
    """Tests for SubtitleShifter class."""

    @pytest.fixture
    def entries(self):
        """Two entries: 1-2s 'Hi' and 5-6s 'Bye'."""
        return [make_entry(1000, 2000, "Hi"), make_entry(5000, 6000, "Bye")]

    def test_init(self):
        """Test shifter initialization."""
        shifter = SubtitleShifter(delta=-250, end=9000)
        assert shifter.delta == -250
        assert shifter.end == 9000

    def test_shift_forward(self, entries):
        """Test shifting every entry forward."""
        result = SubtitleShifter(delta=500).shift(entries)

        assert [e.timespan for e in result] == [TimeSpan(1500, 2500), TimeSpan(5500, 6500)]
        assert [e.text for e in result] == ["Hi", "Bye"]

    def test_shift_backward(self, entries):
        """Test shifting entries backward while staying positive."""
        result = SubtitleShifter(delta=-1000).shift(entries)

        assert [e.timespan for e in result] == [TimeSpan(0, 1000), TimeSpan(4000, 5000)]

    def test_drop_negative_start(self, entries):
        """Test that entries shifted before zero are dropped."""
        shifter = SubtitleShifter(delta=-1001)
        result = shifter.shift(entries)

        assert len(result) == 1
        assert result[0].timespan == TimeSpan(3999, 4999)
        assert shifter.stats["dropped_negative"] == 1

    def test_start_at_zero_is_kept(self):
        """Test that a shifted start of exactly zero survives."""
        result = shift_entries([make_entry(1500, 3000)], -1500)

        assert result == [make_entry(0, 1500)]

    def test_end_equal_to_cutoff_is_dropped(self):
        """Test that an original end equal to the cutoff is dropped."""
        assert shift_entries([make_entry(0, 5000)], 0, end=5000) == []

    def test_end_just_before_cutoff_is_kept(self):
        """Test that an original end one millisecond before the cutoff survives."""
        assert shift_entries([make_entry(0, 4999)], 0, end=5000) == [make_entry(0, 4999)]

    def test_cutoff_uses_original_end(self):
        """Test that the cutoff ignores the shift."""
        entry = make_entry(1000, 4000)

        # Shifted end 6000 is past the cutoff, original end is not
        assert len(shift_entries([entry], 2000, end=5000)) == 1
        # Shifted end 2000 is before the cutoff, original end is not
        assert shift_entries([make_entry(3000, 5000)], -3000, end=5000) == []

    def test_both_conditions_independent(self, entries):
        """Test the negative-start and cutoff filters together."""
        shifter = SubtitleShifter(
            delta=parse_timestamp("-00:00:01,500"),
            end=parse_timestamp("00:00:05,500"),
        )
        result = shifter.shift(entries)

        assert result == []
        assert shifter.stats == {
            "input_entries": 2,
            "output_entries": 0,
            "dropped_negative": 1,
            "dropped_cutoff": 1,
        }

    def test_max_timestamp_cutoff(self, entries):
        """Test that the largest parseable cutoff keeps everything."""
        result = shift_entries(entries, 500, end=parse_timestamp(MAX_TIMESTAMP))
        assert [e.timespan for e in result] == [TimeSpan(1500, 2500), TimeSpan(5500, 6500)]

    def test_identity(self, entries):
        """Test that zero shift and no cutoff returns equal entries."""
        assert shift_entries(entries, 0) == entries

    def test_empty_input(self):
        """Test that no entries in gives no entries out."""
        shifter = SubtitleShifter(delta=1000, end=0)
        assert shifter.shift([]) == []
        assert shifter.stats["input_entries"] == 0

    def test_order_preserved(self):
        """Test that out-of-order entries are not re-sorted."""
        entries = [make_entry(5000, 6000, "b"), make_entry(1000, 2000, "a")]
        result = shift_entries(entries, 100)
        assert [e.text for e in result] == ["b", "a"]

    def test_input_untouched(self, entries):
        """Test that the input list and its entries are not modified."""
        original = list(entries)
        shift_entries(entries, 700, end=5500)
        assert entries == original

    def test_absent_text_passes_through(self):
        """Test that entries without text keep None."""
        result = shift_entries([make_entry(0, 1000, text=None)], 10)
        assert result[0].text is None

    def test_accepts_generator(self, entries):
        """Test that any iterable of entries is accepted."""
        result = shift_entries((e for e in entries), 0)
        assert len(result) == 2
