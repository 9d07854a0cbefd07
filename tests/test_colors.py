"""Tests for palette lookup and interpolation."""
import logging
import re

import numpy as np
import pytest

from stressdomain.model.colors import (
    COLOR_SCHEMES,
    ColorScheme,
    UnknownColorSchemeError,
    get_color,
    get_scheme,
    hex_to_rgb,
    rgb_to_hex,
)

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


@pytest.mark.parametrize("name", sorted(COLOR_SCHEMES))
def test_endpoints_match_first_and_last_stop(name):
    scheme = COLOR_SCHEMES[name]
    assert get_color(0.0, name) == scheme.stops[0]
    assert get_color(1.0, name) == scheme.stops[-1]


@pytest.mark.parametrize("name", sorted(COLOR_SCHEMES))
def test_colors_are_well_formed_hex(name):
    for value in np.linspace(0.0, 1.0, 101):
        assert HEX_RE.match(get_color(float(value), name))


def test_builtin_stop_counts():
    assert len(COLOR_SCHEMES["viridis"].stops) == 10
    assert len(COLOR_SCHEMES["plasma"].stops) == 10
    assert len(COLOR_SCHEMES["inferno"].stops) == 10
    assert COLOR_SCHEMES["bw"].stops == ("#000000", "#ffffff")


def test_midpoint_rounds_half_up():
    """127.5 on the black/white ramp rounds to 128."""
    assert get_color(0.5, "bw") == "#808080"


def test_viridis_midpoint_interpolates_between_neighbouring_stops():
    # scaled = 4.5, halfway between #26828e and #1f9e89
    assert get_color(0.5, "viridis") == "#23908c"


def test_out_of_range_values_clamp_to_end_stops():
    scheme = COLOR_SCHEMES["plasma"]
    assert scheme.get_color(-0.3) == scheme.stops[0]
    assert scheme.get_color(1.7) == scheme.stops[-1]


@pytest.mark.parametrize("name", sorted(COLOR_SCHEMES))
def test_interpolation_is_continuous(name):
    eps = 1e-3
    for value in np.linspace(0.0, 1.0 - 2 * eps, 400):
        a = np.array(hex_to_rgb(get_color(float(value), name)))
        b = np.array(hex_to_rgb(get_color(float(value) + eps, name)))
        assert np.abs(a - b).max() <= 4


@pytest.mark.parametrize("name", sorted(COLOR_SCHEMES))
def test_vectorised_lookup_matches_scalar(name):
    scheme = COLOR_SCHEMES[name]
    values = np.linspace(-0.1, 1.1, 121)
    rgb = scheme.interpolate_rgb(values)
    assert rgb.shape == (121, 3)
    for value, row in zip(values, rgb):
        assert rgb_to_hex(*row) == scheme.get_color(float(value))


def test_unknown_scheme_raises_key_error():
    with pytest.raises(UnknownColorSchemeError) as exc:
        get_scheme("magma")
    assert isinstance(exc.value, KeyError)
    assert "viridis" in str(exc.value)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        COLOR_SCHEMES["custom"] = COLOR_SCHEMES["bw"]


def test_injected_registry():
    schemes = {"mono": ColorScheme("mono", ("#00ff00", "#00ff00"))}
    assert get_color(0.37, "mono", schemes) == "#00ff00"
    with pytest.raises(UnknownColorSchemeError):
        get_color(0.5, "viridis", schemes)


def test_hex_codec():
    assert hex_to_rgb("#1f9e89") == (31, 158, 137)
    assert hex_to_rgb("FDE725") == (253, 231, 37)
    assert rgb_to_hex(31, 158, 137) == "#1f9e89"


@pytest.mark.parametrize("bad", ["#12345", "#gggggg", "", "#1234567"])
def test_hex_to_rgb_rejects_malformed_colors(bad):
    with pytest.raises(ValueError):
        hex_to_rgb(bad)


def test_scheme_needs_two_valid_stops():
    with pytest.raises(ValueError):
        ColorScheme("single", ("#000000",))
    with pytest.raises(ValueError):
        ColorScheme("broken", ("#000000", "white"))


def test_plot_draws_gradient_strip(monkeypatch):
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    shown = []
    monkeypatch.setattr(plt, "show", lambda: shown.append(plt.gcf()))
    COLOR_SCHEMES["viridis"].plot(samples=32)

    assert len(shown) == 1
    ax = shown[0].axes[0]
    assert ax.get_title() == "viridis (10 stops)"
    assert ax.images[0].get_array().shape == (1, 32, 3)
    plt.close(shown[0])


@pytest.mark.parametrize("name", sorted(COLOR_SCHEMES))
def test_nan_and_infinite_values_clamp_to_end_stops(name):
    scheme = COLOR_SCHEMES[name]
    first, last = hex_to_rgb(scheme.stops[0]), hex_to_rgb(scheme.stops[-1])

    assert scheme.get_color(float("nan")) == scheme.stops[0]
    assert scheme.get_color(float("inf")) == scheme.stops[-1]
    assert scheme.get_color(float("-inf")) == scheme.stops[0]

    rgb = scheme.interpolate_rgb([np.nan, np.inf, -np.inf])
    assert [tuple(int(c) for c in row) for row in rgb] == [first, last, first]


def test_unknown_scheme_is_not_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="stressdomain"):
        with pytest.raises(UnknownColorSchemeError):
            get_scheme("magma")
    assert [r for r in caplog.records if r.name.startswith("stressdomain")] == []
