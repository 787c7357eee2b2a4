import logging

import numpy as np
import pytest
from vowelspace.engine import (
    BasicVowelSpace,
    ContinuousVowelSpace,
    DensityVowelSpace,
    FormantTrackSummary,
    VowelSpaceEngine,
    VSAMethod,
    analyze_formant_track,
)
from vowelspace.hull import ConvexHullResult, NoResult
from tests.conftest import vowel_cloud


@pytest.fixture
def track():
    f1, f2 = vowel_cloud()
    n = f1.size
    return {"time": np.arange(n) * 0.01, "F1": f1, "F2": f2, "F3": f2 + 1000.0}


# ---------------------------------------------------------
# Dispatch
# ---------------------------------------------------------

def test_basic_method_result(track):
    out = analyze_formant_track(track)
    assert isinstance(out, FormantTrackSummary)
    assert out.ok
    assert out.method is VSAMethod.BASIC
    assert isinstance(out.metrics, BasicVowelSpace)
    assert out.metrics.method is VSAMethod.BASIC
    assert out.metrics.space.n_corners == 4
    assert out.metrics.vsa > 0
    assert out.metrics.mean_norm > 0
    assert out.metrics.cv_norm == pytest.approx(out.metrics.sd_norm / out.metrics.mean_norm)


def test_density_method_result(track):
    out = analyze_formant_track(track, method="density")
    assert isinstance(out.metrics, DensityVowelSpace)
    assert isinstance(out.metrics.hull, ConvexHullResult)
    assert out.metrics.vsd == pytest.approx(out.metrics.hull.volume)


def test_continuous_method_result(track):
    out = analyze_formant_track(
        track, method=VSAMethod.CONTINUOUS, num_components=4, random_state=0
    )
    assert isinstance(out.metrics, ContinuousVowelSpace)
    assert out.metrics.cvsa > 0


def test_no_result_gives_nan_metric(track):
    out = analyze_formant_track(track, method="density", density_threshold=2.0)
    assert isinstance(out.metrics.hull, NoResult)
    assert np.isnan(out.metrics.vsd)


def test_unknown_method_rejected(track):
    with pytest.raises(ValueError):
        analyze_formant_track(track, method="spline")


def test_unexpected_basic_option_rejected(track):
    with pytest.raises(TypeError):
        analyze_formant_track(track, resolution=0.1)


def test_engine_defaults_flow_into_variants(track):
    engine = VowelSpaceEngine(
        min_corner_support=1000,
        density_options={"density_threshold": 2.0},
        continuous_options={"num_components": 4},
        random_state=0,
    )
    assert np.isnan(engine.analyze(track).metrics.vsa)
    assert isinstance(engine.analyze(track, method="density").metrics.hull, NoResult)
    assert engine.analyze(track, method="continuous").metrics.cvsa > 0


def test_analyze_arrays_returns_variant_type():
    f1, f2 = vowel_cloud()
    engine = VowelSpaceEngine()
    assert isinstance(engine.analyze_arrays(f1, f2), BasicVowelSpace)
    assert isinstance(engine.analyze_arrays(f1, f2, "density"), DensityVowelSpace)


# ---------------------------------------------------------
# Track handling
# ---------------------------------------------------------

def test_descriptive_stats(track):
    out = analyze_formant_track(track)
    assert out.n_vowels == track["F1"].size
    assert out.f1_mean == pytest.approx(np.mean(track["F1"]))
    assert out.f2_sd == pytest.approx(np.std(track["F2"], ddof=1))
    assert out.f1_range == pytest.approx(np.ptp(track["F1"]))


def test_time_range_selects_window(track):
    early = analyze_formant_track(track, time_range=(0.0, 0.995))
    late = analyze_formant_track(track, time_range=(0.995, 3.0))
    assert early.n_vowels == 100
    assert late.n_vowels == 100


def test_time_range_without_time_column_is_ignored(track, caplog):
    del track["time"]
    with caplog.at_level(logging.WARNING, logger="vowelspace.engine"):
        out = analyze_formant_track(track, time_range=(0.0, 0.5))
    assert out.n_vowels == track["F1"].size
    assert "time_range" in caplog.text


def test_invalid_samples_removed(track):
    track["F1"] = track["F1"].copy()
    track["F1"][:10] = 0.0
    track["F2"] = track["F2"].copy()
    track["F2"][10:15] = np.nan
    out = analyze_formant_track(track)
    assert out.n_vowels == track["F1"].size - 15


def test_missing_columns_raise():
    with pytest.raises(ValueError):
        analyze_formant_track({"F1": [300, 400, 500]})


def test_insufficient_data_summary():
    out = analyze_formant_track({"F1": [300, 0, 500], "F2": [1000, 1500, np.nan]})
    assert not out.ok
    assert out.error == "Insufficient data"
    assert out.n_vowels == 1
    assert out.metrics is None


def test_center_method_passed_through(track):
    out = analyze_formant_track(track, center_method="centroid")
    assert out.metrics.center.f2c == pytest.approx(np.mean(track["F2"]))
