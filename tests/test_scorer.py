"""Unit tests for freshness scoring of manual samples."""
import pytest

from freshness.categories import (
    get_analysis_category,
    get_detailed_explanation,
    get_freshness_badge_color,
    get_freshness_category,
    get_freshness_status,
    get_recommendation,
)
from freshness.models import FishParameter, FishSample
from freshness.scorer import (
    calculate_freshness,
    find_best_parameter,
    get_invalid_parameters_list,
    has_invalid_values,
    sort_samples,
)

SAMPLE = {"Mata": 8, "Insang": 7, "Lendir": 9, "Daging": 8, "Bau": 7, "Tekstur": 8}


class TestCalculateFreshness:
    """Tests for calculate_freshness."""

    def test_mean_of_all_parameters(self):
        # Act
        sample = calculate_freshness(SAMPLE)

        # Assert
        assert sample.skor == 7.83
        assert sample.kategori == "Sedang"
        assert sample.mata == 8
        assert sample.tekstur == 8

    def test_all_excluded_values_give_invalid(self):
        # Act
        sample = calculate_freshness({name: 4 for name in SAMPLE})

        # Assert
        assert sample.skor == 0
        assert sample.kategori == "Invalid"

    def test_excluded_value_does_not_count(self):
        # Act
        sample = calculate_freshness({**SAMPLE, "Mata": 4, "Insang": 4})

        # Assert
        assert sample.skor == 8.0
        assert sample.kategori == "Baik"
        assert sample.mata == 4

    def test_unset_and_out_of_range_values_are_ignored(self):
        # Act
        sample = calculate_freshness({"Mata": 9, "Insang": None, "Lendir": 0, "Daging": 12})

        # Assert
        assert sample.skor == 9.0
        assert sample.insang is None

    def test_empty_parameters(self):
        # Act
        sample = calculate_freshness(FishParameter())

        # Assert
        assert sample.skor == 0.0
        assert sample.kategori == "Invalid"

    def test_deterministic_score(self):
        # Act
        first = calculate_freshness(SAMPLE)
        second = calculate_freshness(SAMPLE)

        # Assert
        assert (first.skor, first.kategori) == (second.skor, second.kategori)
        assert first.id != second.id

    def test_keeps_given_identity(self):
        # Act
        sample = calculate_freshness(SAMPLE, fish_name="Tongkol", sample_id="abc", timestamp=1700000000000)

        # Assert
        assert sample.id == "abc"
        assert sample.timestamp == 1700000000000
        assert sample.fish_name == "Tongkol"
        assert sample.to_dict()["fishName"] == "Tongkol"

    def test_accepts_attribute_names(self):
        # Act
        sample = calculate_freshness({"mata": 9, "insang": 9})

        # Assert
        assert sample.skor == 9.0

    def test_to_dict_key_order(self):
        # Act
        data = calculate_freshness(SAMPLE).to_dict()

        # Assert
        assert list(data) == ["Mata", "Insang", "Lendir", "Daging", "Bau", "Tekstur", "Skor", "Kategori", "id", "timestamp"]

    def test_sample_is_frozen(self):
        # Arrange
        sample = calculate_freshness(SAMPLE)

        # Assert
        with pytest.raises(Exception):
            sample.skor = 9.0


class TestCategories:
    """Tests for category tables."""

    @pytest.mark.parametrize("score,expected", [
        (9.0, "Baik"),
        (8.0, "Baik"),
        (7.999, "Sedang"),
        (6.0, "Sedang"),
        (5.999, "Sedang"),
        (4.0, "Sedang"),
        (3.999, "Buruk"),
        (1.0, "Buruk"),
        (0.999, "Invalid"),
        (0, "Invalid"),
        (9.5, "Invalid"),
    ])
    def test_sample_scale_boundaries(self, score, expected):
        # Assert
        assert get_freshness_category(score) == expected

    @pytest.mark.parametrize("average,expected", [
        (8.5, "Prima"),
        (8.49, "Baik"),
        (7.0, "Baik"),
        (6.99, "Sedang"),
        (5.0, "Sedang"),
        (4.99, "Buruk"),
    ])
    def test_analysis_scale_boundaries(self, average, expected):
        # Assert
        assert get_analysis_category(average) == expected

    def test_status_mapping(self):
        # Assert
        assert get_freshness_status("Prima") == "success"
        assert get_freshness_status("Baik") == "success"
        assert get_freshness_status("Sedang") == "warning"
        assert get_freshness_status("Buruk") == "error"
        assert get_freshness_status("Invalid") == "neutral"

    def test_recommendation_default(self):
        # Assert
        assert get_recommendation("Invalid") == "Data tidak valid untuk analisis."
        assert "segera diolah" in get_recommendation("Sedang")

    def test_badge_and_explanation(self):
        # Assert
        assert get_freshness_badge_color("Baik") == "green"
        assert get_freshness_badge_color("unknown") == "gray"
        assert "pembusukan" in get_detailed_explanation("Buruk")


class TestFindBestParameter:
    """Tests for find_best_parameter."""

    def test_excluded_value_is_included_in_mean(self):
        # Arrange
        samples = [
            calculate_freshness({"Mata": 4, "Insang": 7}),
            calculate_freshness({"Mata": 8, "Insang": 7}),
        ]

        # Act
        best = find_best_parameter(samples)

        # Assert
        assert best.parameter == "Insang"
        assert best.score == 7.0

    def test_mean_with_four(self):
        # Arrange
        samples = [
            calculate_freshness({"Mata": 4, "Insang": 5}),
            calculate_freshness({"Mata": 8, "Insang": 5}),
        ]

        # Act
        best = find_best_parameter(samples)

        # Assert
        assert best.parameter == "Mata"
        assert best.score == 6.0

    def test_first_parameter_wins_ties(self):
        # Act
        best = find_best_parameter([calculate_freshness({name: 7 for name in SAMPLE})])

        # Assert
        assert best.parameter == "Mata"

    def test_empty_input(self):
        # Act
        best = find_best_parameter([])

        # Assert
        assert best.to_dict() == {"parameter": "", "score": 0.0}


class TestInvalidValues:
    """Tests for has_invalid_values and get_invalid_parameters_list."""

    @pytest.mark.parametrize("params", [
        SAMPLE,
        {**SAMPLE, "Bau": 4},
        {name: 4 for name in SAMPLE},
        {"Mata": 4, "Lendir": None},
    ])
    def test_functions_agree(self, params):
        # Arrange
        sample = calculate_freshness(params)

        # Assert
        assert has_invalid_values(sample) == (len(get_invalid_parameters_list(sample)) > 0)

    def test_lists_fields_in_order(self):
        # Arrange
        sample = calculate_freshness({**SAMPLE, "Tekstur": 4, "Insang": 4})

        # Act
        invalid = get_invalid_parameters_list(sample)

        # Assert
        assert invalid == ["Insang", "Tekstur"]

    def test_metadata_is_ignored(self):
        # Arrange
        record = {"Mata": 8, "Skor": 4, "Kategori": "Sedang", "id": 4, "timestamp": 4}

        # Assert
        assert not has_invalid_values(record)
        assert get_invalid_parameters_list(record) == []


class TestSortSamples:
    """Tests for sort_samples."""

    @pytest.fixture
    def samples(self):
        return [
            calculate_freshness({"Mata": 7}, fish_name="b", sample_id="1"),
            calculate_freshness({"Mata": 9}, fish_name="a", sample_id="2"),
            calculate_freshness({"Mata": None, "Insang": 8}, sample_id="3"),
            calculate_freshness({"Mata": 7}, fish_name="c", sample_id="4"),
        ]

    def test_ascending_puts_unset_first_and_is_stable(self, samples):
        # Act
        ordered = sort_samples(samples, "Mata")

        # Assert
        assert [s.id for s in ordered] == ["3", "1", "4", "2"]

    def test_descending(self, samples):
        # Act
        ordered = sort_samples(samples, "skor", ascending=False)

        # Assert
        assert ordered[0].id == "2"

    def test_does_not_modify_input(self, samples):
        # Arrange
        before = list(samples)

        # Act
        sort_samples(samples, "Mata")

        # Assert
        assert samples == before

    def test_unknown_field_raises(self, samples):
        # Assert
        with pytest.raises(KeyError):
            sort_samples(samples, "Warna")


def test_fish_sample_get_by_either_key():
    # Arrange
    sample = calculate_freshness(SAMPLE, fish_name="Kembung")

    # Assert
    assert isinstance(sample, FishSample)
    assert sample.get("Mata") == sample.get("mata") == 8
    assert sample.get("fishName") == "Kembung"
