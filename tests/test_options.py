"""Tests for StripOptions and option resolution."""

import dataclasses
import threading

import pytest

from strip_json_comments import strip
from strip_json_comments.errors import InvalidInputKindError
from strip_json_comments.options import (
    StripOptions,
    default_options_context,
    get_default_options,
    reset_default_options,
    resolve_options,
    set_default_options,
)


class TestStripOptionsDefaults:
    def test_defaults(self) -> None:
        options = StripOptions()
        assert options.whitespace is True
        assert options.trailing_commas is False

    def test_frozen(self) -> None:
        options = StripOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.whitespace = False  # type: ignore[misc]

    def test_hashable_and_comparable(self) -> None:
        assert StripOptions() == StripOptions()
        assert len({StripOptions(), StripOptions()}) == 1


class TestFromDict:
    """StripOptions.from_dict() for configuration coming from outside."""

    def test_camel_case_key(self) -> None:
        assert StripOptions.from_dict({"trailingCommas": True}).trailing_commas is True

    def test_snake_case_key(self) -> None:
        assert StripOptions.from_dict({"trailing_commas": True}).trailing_commas is True

    def test_ignores_unknown_keys(self) -> None:
        options = StripOptions.from_dict({"whitespace": False, "unknown": 1, "another": "x"})
        assert options == StripOptions(whitespace=False)

    def test_empty(self) -> None:
        assert StripOptions.from_dict({}) == StripOptions()

    def test_none_means_default(self) -> None:
        options = StripOptions.from_dict({"whitespace": None, "trailingCommas": None})
        assert options == StripOptions()

    def test_truthy_values_coerced(self) -> None:
        options = StripOptions.from_dict({"whitespace": 0, "trailingCommas": "yes"})
        assert options.whitespace is False
        assert options.trailing_commas is True


class TestResolveOptions:
    def test_none_gives_defaults(self) -> None:
        assert resolve_options(None) == StripOptions()

    def test_dataclass_passes_through(self) -> None:
        options = StripOptions(trailing_commas=True)
        assert resolve_options(options) is options

    def test_keyword_overrides(self) -> None:
        resolved = resolve_options(StripOptions(), whitespace=False, trailing_commas=True)
        assert resolved == StripOptions(whitespace=False, trailing_commas=True)

    def test_none_keywords_do_not_override(self) -> None:
        options = StripOptions(whitespace=False)
        assert resolve_options(options, whitespace=None) is options

    @pytest.mark.parametrize("bad", [42, "whitespace", ["whitespace"], True])
    def test_rejects_other_kinds(self, bad: object) -> None:
        with pytest.raises(InvalidInputKindError) as exc_info:
            resolve_options(bad)  # type: ignore[arg-type]
        assert exc_info.value.argument == "options"


class TestContextDefaults:
    """ContextVar-backed defaults for calls that pass no options."""

    def test_default_is_builtin(self) -> None:
        assert get_default_options() == StripOptions()

    def test_context_manager(self) -> None:
        with default_options_context(StripOptions(whitespace=False)):
            assert strip("1 // x") == "1 "
        assert strip("1 // x") == "1     "

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with default_options_context(StripOptions(trailing_commas=True)):
                raise RuntimeError("boom")
        assert get_default_options() == StripOptions()

    def test_mapping_falls_back_to_context_defaults(self) -> None:
        with default_options_context(StripOptions(whitespace=False)):
            assert strip("[1,] // x", {"trailingCommas": True}) == "[1] "

    def test_set_and_reset(self) -> None:
        set_default_options(StripOptions(trailing_commas=True))
        try:
            assert strip("[1,]") == "[1 ]"
        finally:
            reset_default_options()
        assert strip("[1,]") == "[1,]"

    def test_thread_defaults_do_not_leak_back(self) -> None:
        results: list[str] = []

        def strip_with_own_defaults() -> None:
            set_default_options(StripOptions(whitespace=False))
            results.append(strip("1 // x"))

        thread = threading.Thread(target=strip_with_own_defaults)
        thread.start()
        thread.join(timeout=5.0)

        assert results == ["1 "]
        assert get_default_options() == StripOptions()
