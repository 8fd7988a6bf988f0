"""Tests for the Scanner class used directly."""

from strip_json_comments.scanner import Scanner, ScanState


class TestScannerDirect:
    def test_default_options(self) -> None:
        assert Scanner('{"a":1 // note\n}').scan() == '{"a":1        \n}'

    def test_keyword_options(self) -> None:
        assert Scanner("[1, 2,]", whitespace=False, trailing_commas=True).scan() == "[1, 2]"

    def test_starts_in_default_state(self) -> None:
        assert Scanner("/* x").state == ScanState.DEFAULT

    def test_counters(self) -> None:
        scanner = Scanner("[1, // a\n 2, /* b */]", trailing_commas=True)
        scanner.scan()
        assert scanner.comments_removed == 2
        assert scanner.trailing_commas_removed == 1


class TestFastPath:
    """Input that cannot change is returned as-is."""

    def test_no_slash_returns_source(self) -> None:
        source = '{"a": [1, 2, 3]}'
        assert Scanner(source).scan() is source

    def test_commas_without_trailing_option(self) -> None:
        source = "[1,]"
        assert Scanner(source).scan() is source

    def test_commas_with_trailing_option_are_scanned(self) -> None:
        assert Scanner("[1,]", trailing_commas=True).scan() == "[1 ]"

    def test_fast_path_counts_nothing(self) -> None:
        scanner = Scanner("[1, 2]")
        scanner.scan()
        assert scanner.comments_removed == 0
        assert scanner.trailing_commas_removed == 0
