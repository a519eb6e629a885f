import pandas as pd
import pytest

from hmpi_assessment.analyzer import (
    high_risk_samples,
    mean_concentration_by_metal,
    metal_contributions,
    processed_samples,
    quality_distribution,
    samples_to_dataframe,
    summarize_analysis,
    summary_stats,
    top_pollutants,
)
from hmpi_assessment.reference import METALS


@pytest.fixture
def mixed_batch(make_sample):
    return [
        make_sample(1, metals={m: 1.0 for m in METALS}, hpi=10.0, pli=0.5, category="excellent"),
        make_sample(2, metals={m: 99.0 for m in METALS}),
        make_sample(3, metals={m: 2.0 for m in METALS}, hpi=120.0, pli=6.0, category="unsuitable"),
        make_sample(4, metals={m: 99.0 for m in METALS}),
        make_sample(5, metals={m: 3.0 for m in METALS}, hpi=20.0, pli=0.9, category="excellent"),
    ]


def test_processed_samples_filter(mixed_batch):
    assert [s.id for s in processed_samples(mixed_batch)] == ["sample_1", "sample_3", "sample_5"]


def test_summary_stats_use_processed_samples_only(mixed_batch):
    stats = summary_stats(mixed_batch)

    assert stats["hpi"] == {"min": 10.0, "max": 120.0, "avg": pytest.approx(50.0)}
    assert stats["pli"]["min"] == 0.5
    assert stats["pli"]["max"] == 6.0
    assert stats["pli"]["avg"] == pytest.approx(7.4 / 3)


def test_summary_stats_empty_batch_raises(make_sample):
    with pytest.raises(ValueError):
        summary_stats([make_sample()])


def test_quality_distribution_first_seen_order(mixed_batch):
    distribution = quality_distribution(mixed_batch)

    assert distribution == [
        {"category": "excellent", "count": 2, "percentage": 66.7},
        {"category": "unsuitable", "count": 1, "percentage": 33.3},
    ]
    assert sum(entry["percentage"] for entry in distribution) == pytest.approx(100.0, abs=0.1)


def test_quality_distribution_empty():
    assert quality_distribution([]) == []


def test_mean_concentration_by_metal(mixed_batch):
    means = mean_concentration_by_metal(mixed_batch)

    assert list(means) == list(METALS)
    assert all(value == pytest.approx(2.0) for value in means.values())


def test_top_pollutants_descending(make_sample):
    metals = {m: 0.0 for m in METALS}
    metals.update(Fe=0.8, Zn=2.5, Cu=0.8)

    sample = make_sample(metals=metals)

    assert top_pollutants(sample) == ["Zn", "Cu"]
    assert top_pollutants(sample, k=3) == ["Zn", "Cu", "Fe"]
    assert top_pollutants(sample, k=0) == []


def test_top_pollutants_ties_keep_panel_order(make_sample):
    sample = make_sample(metals={m: 1.0 for m in METALS})

    assert top_pollutants(sample, k=4) == ["As", "Cd", "Cr", "Cu"]


def test_high_risk_samples(mixed_batch):
    assert [s.id for s in high_risk_samples(mixed_batch)] == ["sample_3"]


def test_samples_to_dataframe_flattens_results(mixed_batch):
    df = samples_to_dataframe(mixed_batch)

    assert len(df) == 5
    assert {"id", "latitude", "hpi", "quality_category", "Zn"} <= set(df.columns)
    assert df.loc[0, "quality_category"] == "excellent"
    assert pd.isna(df.loc[1, "quality_category"])
    assert samples_to_dataframe([]).empty


def test_summarize_analysis(mixed_batch):
    summary = summarize_analysis(mixed_batch)

    assert summary["sample_count"] == 3
    assert summary["summary_stats"]["hpi"]["max"] == 120.0
    assert summary["top_pollutants"]["sample_3"] == ["As", "Cd"]
    assert summary["high_risk_samples"] == ["sample_3"]


def test_summarize_analysis_empty_batch(make_sample):
    summary = summarize_analysis([make_sample()])

    assert summary == {
        "sample_count": 0,
        "summary_stats": {},
        "quality_distribution": [],
        "mean_concentration_by_metal": {},
        "metal_contributions": [],
        "top_pollutants": {},
        "high_risk_samples": [],
    }


def test_metal_contributions_pair_means_with_names(mixed_batch):
    contributions = metal_contributions(mixed_batch)

    assert [entry["metal"] for entry in contributions] == list(METALS)
    assert contributions[0] == {"metal": "As", "name": "Arsenic", "concentration": 2.0}
    assert contributions[-1]["name"] == "Zinc"


def test_metal_contributions_round_to_three_decimals(make_sample):
    metals = {m: 0.0 for m in METALS}
    metals["Pb"] = 0.012345
    sample = make_sample(metals=metals, hpi=10.0, pli=0.0, category="excellent")

    pb = next(entry for entry in metal_contributions([sample]) if entry["metal"] == "Pb")

    assert pb == {"metal": "Pb", "name": "Lead", "concentration": 0.012}


def test_has_results_drives_processed_filter(mixed_batch):
    flags = [s.has_results for s in mixed_batch]

    assert flags == [True, False, True, False, True]
    assert len(processed_samples(mixed_batch)) == sum(flags)
    assert summarize_analysis(mixed_batch)["metal_contributions"][1]["name"] == "Cadmium"
