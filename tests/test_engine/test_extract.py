"""Tests for candidate extraction and the content-match cache."""

from breeze.config import BreezeConfig
from breeze.engine import builtin_extractor, extract, get_class_candidates, get_extractor


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class CountingExtractor:
    """Whitespace splitter that records how often it runs."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, content: str) -> list[str]:
        self.calls += 1
        return content.split()


def _words(content: str) -> list[str]:
    return content.split()


# ---------------------------------------------------------------------------
# Built-in extractor
# ---------------------------------------------------------------------------


class TestBuiltinExtractor:
    def test_class_attribute(self) -> None:
        tokens = extract('<div class="hover:flex md:p-4"></div>', "html")
        assert {"hover:flex", "md:p-4"} <= tokens

    def test_inner_pass_recovers_wrapped_tokens(self) -> None:
        tokens = extract("clsx(p-4)", "js")
        assert "clsx(p-4)" in tokens
        assert "p-4" in tokens

    def test_trailing_colon_excluded(self) -> None:
        tokens = extract("{ flex: true }", "js")
        assert "flex" in tokens
        assert "flex:" not in tokens

    def test_arbitrary_values_survive(self) -> None:
        assert "w-[10px]" in extract('<div class="w-[10px]">', "html")

    def test_svelte_class_directive(self) -> None:
        source = "<div class:active={on}>"
        assert "class:active={on}" in extract(source, "html")
        svelte = extract(source, "svelte")
        assert "class:active={on}" not in svelte
        assert "active={on}" in svelte


class TestGetExtractor:
    def test_extension_override(self) -> None:
        config = BreezeConfig(extractors={"md": _words}, default_extractor=str.split)
        assert get_extractor(config, "md") is _words

    def test_default_extractor(self) -> None:
        config = BreezeConfig(extractors={"md": _words}, default_extractor=str.split)
        assert get_extractor(config, "html") is str.split
        assert get_extractor(config, None) is str.split

    def test_builtin_fallback(self) -> None:
        extractor = get_extractor(BreezeConfig(), "html")
        assert set(extractor("<b class='flex'>")) == set(builtin_extractor()("<b class='flex'>"))


# ---------------------------------------------------------------------------
# Cached, per-line processing
# ---------------------------------------------------------------------------


class TestGetClassCandidates:
    def test_collects_tokens(self) -> None:
        candidates: set[str] = set()
        get_class_candidates("flex p-4\nblock", _words, {}, candidates, set())
        assert candidates == {"flex", "p-4", "block"}

    def test_cached_line_does_not_rerun_extractor(self) -> None:
        extractor = CountingExtractor()
        cache: dict[str, frozenset[str]] = {}

        first: set[str] = set()
        get_class_candidates("flex p-4\nblock", extractor, cache, first, set())
        assert extractor.calls == 2

        second: set[str] = set()
        get_class_candidates("flex p-4\nblock", extractor, cache, second, set())
        assert extractor.calls == 2
        assert second == first

    def test_cache_keyed_by_stripped_line(self) -> None:
        extractor = CountingExtractor()
        cache: dict[str, frozenset[str]] = {}
        get_class_candidates("  flex  ", extractor, cache, set(), set())
        assert set(cache) == {"flex"}
        get_class_candidates("flex", extractor, cache, set(), set())
        assert extractor.calls == 1

    def test_seen_lines_skipped_within_invocation(self) -> None:
        extractor = CountingExtractor()
        cache: dict[str, frozenset[str]] = {}
        seen: set[str] = set()
        candidates: set[str] = set()
        get_class_candidates("flex\nflex\nflex", extractor, cache, candidates, seen)
        get_class_candidates("flex", extractor, cache, candidates, seen)
        assert extractor.calls == 1
        assert seen == {"flex"}

    def test_changed_line_runs_extractor(self) -> None:
        extractor = CountingExtractor()
        cache: dict[str, frozenset[str]] = {}
        get_class_candidates("flex", extractor, cache, set(), set())
        candidates: set[str] = set()
        get_class_candidates("flex grid", extractor, cache, candidates, set())
        assert extractor.calls == 2
        assert candidates == {"flex", "grid"}
