"""Tests for time-token classification and pair splitting."""

from ffcut.tokens import END_OF_MEDIA, collect_times, is_time_token, parse_block


class TestIsTimeToken:
    def test_time_tokens(self):
        for arg in ("0-130", "10-20-30", "-15", "15-", "1.5,2-3", ","):
            assert is_time_token(arg)

    def test_non_time_tokens(self):
        for arg in ("video.mp4", "ffc", "", "10-20a", "1:30"):
            assert not is_time_token(arg)


class TestParseBlock:
    def test_simple_range(self):
        assert parse_block("0-130") == [("0", "130")]

    def test_sliding_pairs(self):
        assert parse_block("10-20-30") == [("10", "20"), ("20", "30")]

    def test_open_start(self):
        assert parse_block("-15") == [("0", "15")]

    def test_open_end(self):
        assert parse_block("15-") == [("15", END_OF_MEDIA)]
        assert END_OF_MEDIA == "240000"

    def test_lone_dash(self):
        assert parse_block("-") == [("0", "240000")]

    def test_single_number_dropped(self):
        assert parse_block("15") == []

    def test_empty(self):
        assert parse_block("") == []


class TestCollectTimes:
    def test_example_args(self):
        assert collect_times(["video.mp4", "0-130", "ffc"]) == [("0", "130")]

    def test_comma_blocks_and_order(self):
        args = ["1-2,3-4", "video.mp4", "5-6"]
        assert collect_times(args) == [("1", "2"), ("3", "4"), ("5", "6")]

    def test_bad_blocks_dropped_silently(self):
        assert collect_times(["10,,20-30,40"]) == [("20", "30")]

    def test_no_times(self):
        assert collect_times(["video.mp4"]) == []
