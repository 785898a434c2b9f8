"""Tests for npm_semver.models.version_range."""

from __future__ import annotations

import pytest

from npm_semver import InvalidRange, Range, UnrenderableRange, Version


def v(raw: str) -> Version:
    return Version.parse(raw)


def assert_includes(expr: str, included: list[str], excluded: list[str]) -> None:
    r = Range.parse(expr)
    for raw in included:
        assert r.includes(v(raw)), f"{expr} should include {raw}"
    for raw in excluded:
        assert not r.includes(v(raw)), f"{expr} should exclude {raw}"


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def test_explicit_bounds() -> None:
    r = Range.from_bounds(v("0.0.0-0"), True, v("4.7.2-735.fsfs+fdsf1234"), False)
    assert r.min == v("0.0.0-0")
    assert r.min_active
    assert r.max == v("4.7.2-735.fsfs")
    assert not r.max_active
    assert not r.include_prereleases
    assert r.raw is None


def test_explicit_bounds_equal_parsed_forms() -> None:
    assert Range.from_bounds(v("1.0.0"), True, None, False) == Range.parse(">=1.0.0")
    assert Range.from_bounds(None, False, v("69.420.0"), True) == Range.parse("<69.420.0")
    assert Range.from_bounds(None, False, None, False) == Range.parse("*")
    assert Range.from_bounds(v("1.0.0"), True, v("69.420.1-0"), True) == Range.parse(
        "1.0.0 - 69.420.0"
    )


def test_active_bound_requires_version() -> None:
    with pytest.raises(InvalidRange):
        Range.from_bounds(None, True, None, False)
    with pytest.raises(InvalidRange):
        Range.from_bounds(None, False, None, True)


@pytest.mark.parametrize(
    "raw",
    [
        "1.2.3.4",
        "ewsrdtgs",
        "!1.7.9",
        "645.3547.743·$",
        "1.0.0-00",
        "01.5.4",
        "1.0.0 ",
        "1.0.0-",
        "1.0.0+",
        "~1.0.0+",
        "^1.0.0+",
        "<=1.0.0+",
        "<1.0.0+",
        ">=1.0.0+",
        ">1.0.0+",
        "=1.0.0+",
        ">=1.0.0 <2.0.0",
        "1.x.2",
        "1.2-beta",
        "1.2.3 -2.0.0",
        "1.2.3 - ",
        "^^1.0.0",
        "**",
    ],
)
def test_invalid_ranges(raw: str) -> None:
    with pytest.raises(InvalidRange):
        Range.parse(raw)


def test_non_string_range_is_invalid() -> None:
    with pytest.raises(InvalidRange):
        Range.parse(None)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Any
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("raw", ["", "*", "x", "X"])
def test_any(raw: str) -> None:
    r = Range.parse(raw)
    assert r.min is None and not r.min_active
    assert r.max is None and not r.max_active
    assert r.includes(v("0.0.0"))
    assert r.includes(v("0.6.0+fwsdfh"))
    assert not r.includes(None)


def test_any_prerelease_toggle() -> None:
    r = Range.parse("*")
    assert not r.includes(v("5.0.0-gdchgf"))
    r.include_prereleases = True
    assert r.includes(v("5.0.0-gdchgf"))
    r.include_prereleases = False
    assert not r.includes(v("5.0.0-gdchgf"))


# ---------------------------------------------------------------------------
# Comparison operators
# ---------------------------------------------------------------------------


def test_exact() -> None:
    r = Range.parse("=1.2.3")
    assert r.min == v("1.2.3")
    assert r.max == v("1.2.4-0")
    assert_includes("=1.2.3", ["1.2.3", "1.2.3+build"], ["1.2.4", "1.2.2", "1.2.3-alpha"])


def test_exact_partial_operand() -> None:
    r = Range.parse("=1.2")
    assert r.min == v("1.2.0")
    assert r.max == v("1.2.1-0")


def test_greater_or_equal() -> None:
    r = Range.parse(">=1.2.3")
    assert r.min == v("1.2.3") and r.min_active
    assert not r.max_active
    assert_includes(">=1.2.3", ["1.2.3", "5.0.0"], ["1.2.2", "1.2.4-alpha"])


def test_greater() -> None:
    r = Range.parse(">1.2.3")
    assert r.min == v("1.2.4-0")
    assert_includes(">1.2.3", ["1.2.4", "2.0.0"], ["1.2.3", "1.2.4-alpha"])


def test_less_or_equal() -> None:
    r = Range.parse("<=1.2.3")
    assert not r.min_active
    assert r.max == v("1.2.4-0")
    assert_includes("<=1.2.3", ["1.2.3", "0.0.0"], ["1.2.4", "1.2.3-alpha"])


def test_less() -> None:
    r = Range.parse("<1.2.3")
    assert r.max == v("1.2.3")
    assert_includes("<1.2.3", ["1.2.2", "0.0.0"], ["1.2.3", "1.2.3-alpha"])


def test_comparison_partial_operand() -> None:
    assert Range.parse(">=1.2").min == v("1.2.0")
    assert Range.parse("<2").max == v("2.0.0")


# ---------------------------------------------------------------------------
# Tilde
# ---------------------------------------------------------------------------


def test_tilde_full() -> None:
    r = Range.parse("~1.2.3")
    assert r.min == v("1.2.3")
    assert r.max == v("1.3.0-0")
    assert_includes("~1.2.3", ["1.2.3", "1.2.9"], ["1.3.0", "1.2.2", "1.2.5-beta"])


def test_tilde_minor() -> None:
    r = Range.parse("~1.2")
    assert r.min == v("1.2.0")
    assert r.max == v("1.3.0-0")
    assert_includes("~1.2", ["1.2.0", "1.2.99"], ["1.3.0", "1.1.9"])


def test_tilde_major() -> None:
    r = Range.parse("~1")
    assert r.min == v("1.0.0")
    assert r.max == v("2.0.0-0")
    assert_includes("~1", ["1.0.0", "1.99.0"], ["2.0.0", "0.9.9"])


def test_tilde_with_wildcards_matches_omitted_form() -> None:
    assert Range.parse("~1.2.x") == Range.parse("~1.2")
    assert Range.parse("~1.x") == Range.parse("~1")


def test_tilde_pre_release_anchor() -> None:
    assert_includes("~1.2.3-beta.2", ["1.2.3-beta.4", "1.2.3", "1.2.9"], ["1.2.4-beta.2"])


# ---------------------------------------------------------------------------
# Caret
# ---------------------------------------------------------------------------


def test_caret_major() -> None:
    r = Range.parse("^1.69.420")
    assert r.min == v("1.69.420")
    assert r.max == v("2.0.0-0")
    assert_includes(
        "^1.69.420",
        ["1.69.420", "1.635345.420", "1.69.534535"],
        [
            "1.18.1",
            "0.34.543",
            "1.69.0-pre.1",
            "1.69.999-pre.1",
            "2.0.0",
            "2.0.0-gsdfsgb",
            "2.0.0+htdfgrth",
        ],
    )


def test_caret_scenarios() -> None:
    assert_includes("^1.2.3", ["1.2.3", "1.9.0"], ["2.0.0", "1.2.2"])
    assert_includes("^0.2.3", ["0.2.3", "0.2.9"], ["0.3.0", "0.2.2"])
    assert_includes("^0.0.3", ["0.0.3"], ["0.0.4", "0.0.2", "0.1.0"])


def test_caret_zero_zero_bumps_patch() -> None:
    assert Range.parse("^0.0.3").max == v("0.0.4-0")


@pytest.mark.parametrize(
    "raw, expected_max",
    [
        ("^1.69", "2.0.0-0"),
        ("^0.1", "0.2.0-0"),
        ("^0.0", "0.1.0-0"),
        ("^1", "2.0.0-0"),
        ("^0", "1.0.0-0"),
        ("^1.x", "2.0.0-0"),
        ("^1.2.x", "2.0.0-0"),
        ("^0.1.x", "0.2.0-0"),
        ("^0.0.x", "0.1.0-0"),
        ("^0.x", "1.0.0-0"),
    ],
)
def test_caret_partial_bounds(raw: str, expected_max: str) -> None:
    assert Range.parse(raw).max == v(expected_max)


def test_caret_partial_membership() -> None:
    assert_includes("^1.69", ["1.69.420", "1.635345.420"], ["1.18.1", "2.0.0", "1.69.0-pre.1"])
    assert_includes("^1", ["1.18.1", "1.69.534535"], ["0.34.543", "2.0.0-gsdfsgb"])
    assert_includes("^0", ["0.18.1", "0.635345.420"], ["1.0.0", "0.69.999-pre.1"])


def test_caret_pre_release_anchor() -> None:
    assert_includes("^1.2.3-beta.2", ["1.2.3-beta.4", "1.2.3", "1.9.9"], ["1.2.4-beta.2", "1.2.3-beta.1"])


def test_caret_arbitrary_precision() -> None:
    r = Range.parse("^99999999999999999999.1.0")
    assert r.max == v("100000000000000000000.0.0-0")


# ---------------------------------------------------------------------------
# X-ranges and partial versions
# ---------------------------------------------------------------------------


def test_x_range_patch_wildcard() -> None:
    r = Range.parse("1.2.x")
    assert r.min == v("1.2.0")
    assert r.max == v("1.3.0-0")
    assert_includes("1.2.x", ["1.2.0", "1.2.9"], ["1.3.0", "1.1.9"])


@pytest.mark.parametrize("raw", ["1.x", "1.X", "1.*", "1.x.x", "1.X.*"])
def test_x_range_minor_wildcard(raw: str) -> None:
    r = Range.parse(raw)
    assert r.min == v("1.0.0")
    assert r.max == v("2.0.0-0")


def test_x_range_keeps_pre_release_on_min() -> None:
    r = Range.parse("1.2.x-beta")
    assert r.min == v("1.2.0-beta")
    assert r.max == v("1.3.0-0")


@pytest.mark.parametrize(
    "raw, expected_min, expected_max",
    [
        ("1", "1.0.0", "1.0.1-0"),
        ("1.2", "1.2.0", "1.2.1-0"),
        ("1.2.3", "1.2.3", "1.2.4-0"),
        ("1.2.3-alpha", "1.2.3-alpha", "1.2.3-alpha.0"),
    ],
)
def test_partial_versions(raw: str, expected_min: str, expected_max: str) -> None:
    r = Range.parse(raw)
    assert r.min == v(expected_min)
    assert r.max == v(expected_max)


def test_bare_version_equals_exact_operator() -> None:
    assert Range.parse("1.2.3") == Range.parse("=1.2.3")


def test_exact_pre_release_visibility() -> None:
    assert_includes("1.2.3-alpha", ["1.2.3-alpha"], ["1.2.3-beta", "1.2.3"])


# ---------------------------------------------------------------------------
# Hyphen ranges
# ---------------------------------------------------------------------------


def test_hyphen_range() -> None:
    r = Range.parse("1.2.3 - 2.3.4")
    assert r.min == v("1.2.3")
    assert r.max == v("2.3.5-0")
    assert_includes("1.2.3 - 2.3.4", ["1.2.3", "2.3.4", "2.0.0"], ["1.2.2", "2.3.5"])


def test_hyphen_range_partial_ends() -> None:
    r = Range.parse("1.2 - 2")
    assert r.min == v("1.2.0")
    assert r.max == v("2.0.1-0")


def test_hyphen_range_with_pre_releases() -> None:
    r = Range.parse("1.0.0-rc.1 - 1.0.0-rc.5")
    assert r.min == v("1.0.0-rc.1")
    assert r.max == v("1.0.0-rc.5.0")
    assert_includes("1.0.0-rc.1 - 1.0.0-rc.5", ["1.0.0-rc.3", "1.0.0-rc.5"], ["1.0.0-rc.6", "1.0.0"])


# ---------------------------------------------------------------------------
# Pre-release visibility
# ---------------------------------------------------------------------------


def test_pre_release_visible_through_min_anchor() -> None:
    assert_includes(">=1.2.3-alpha", ["1.2.3-beta", "1.2.3-alpha.7", "1.3.0"], ["1.2.4-alpha"])


def test_pre_release_hidden_behind_zero_anchor() -> None:
    # the "-0" max of a caret range never makes its own tuple visible
    assert not Range.parse("^1.2.3").includes(v("2.0.0-0"))
    assert not Range.parse(">1.2.3").includes(v("1.2.4-beta"))


def test_include_prereleases_skips_visibility_rule() -> None:
    r = Range.parse(">=1.2.3", include_prereleases=True)
    assert r.includes(v("1.2.4-alpha"))
    assert not r.includes(v("1.2.3-alpha"))

    flipped = Range.parse(">=1.2.3")
    assert not flipped.includes(v("1.2.4-alpha"))
    flipped.include_prereleases = True
    assert flipped.includes(v("1.2.4-alpha"))


def test_with_prereleases_copies() -> None:
    r = Range.parse("^1.0.0")
    copy = r.with_prereleases(True)
    assert copy.include_prereleases
    assert not r.include_prereleases
    assert str(copy) == "^1.0.0"
    assert copy != r


# ---------------------------------------------------------------------------
# Equality and rendering
# ---------------------------------------------------------------------------


def test_equality_ignores_raw_text() -> None:
    assert Range.parse("~1.2") == Range.parse("1.2.x")
    assert Range.parse("=1.2.3") == Range.parse("1.2.3 - 1.2.3")
    assert hash(Range.parse("~1.2")) == hash(Range.parse("1.2.x"))


def test_equality_includes_prerelease_flag() -> None:
    assert Range.parse(">=1.0.0") != Range.parse(">=1.0.0", include_prereleases=True)


def test_render_returns_raw_text() -> None:
    for raw in ["^1.2.3", ">=1.0.0", "1.2.x", "1.2.3 - 2.3.4", "*", ""]:
        assert str(Range.parse(raw)) == raw


def test_render_from_bounds() -> None:
    assert str(Range.from_bounds(v("1.0.0"), True, v("69.420.1-0"), True)) == "1.0.0 - 69.420.0"
    assert str(Range.from_bounds(v("1.0.0"), True, None, False)) == ">=1.0.0"
    assert str(Range.from_bounds(None, False, v("2.0.0"), True)) == "<2.0.0"
    assert str(Range.from_bounds(None, False, None, False)) == "*"


def test_render_unrenderable_bounds() -> None:
    with pytest.raises(UnrenderableRange):
        str(Range.from_bounds(v("1.0.0"), True, v("2.0.0-0"), True))
    with pytest.raises(UnrenderableRange):
        str(Range.from_bounds(v("1.0.0"), True, v("2.0.1"), True))
