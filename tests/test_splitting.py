# tests/test_splitting.py
import pytest

from id3_tree.splitting import partition_rows, calculate_information_gain, find_best_attribute
from id3_tree.utils import InvalidInputError
from tests.generated_datasets.dataset_generator_categorical import generate_categorical_label_data

# outlook, humidity, play
SMALL_WEATHER_ROWS = [
    ["sunny", "high", "no"],
    ["overcast", "high", "yes"],
    ["rainy", "normal", "yes"],
    ["sunny", "normal", "yes"],
]


def test_partition_rows_is_stable_and_keyed_by_observed_values():
    partitions = partition_rows(SMALL_WEATHER_ROWS, 0)
    assert list(partitions) == ["sunny", "overcast", "rainy"]
    assert partitions["sunny"] == [SMALL_WEATHER_ROWS[0], SMALL_WEATHER_ROWS[3]]


def test_partition_rows_does_not_copy_or_modify_rows():
    partitions = partition_rows(SMALL_WEATHER_ROWS, 1)
    assert partitions["high"][0] is SMALL_WEATHER_ROWS[0]
    assert SMALL_WEATHER_ROWS[0] == ["sunny", "high", "no"]


def test_information_gain_of_perfect_split_equals_parent_entropy():
    rows = [["a", "yes"], ["b", "no"], ["a", "yes"], ["b", "no"]]
    assert calculate_information_gain(rows, 0, 1) == pytest.approx(1.0)


def test_information_gain_of_constant_attribute_is_zero():
    rows = [["a", "yes"], ["a", "no"], ["a", "yes"]]
    assert calculate_information_gain(rows, 0, 1) == pytest.approx(0.0, abs=1e-12)


def test_small_weather_gains_tie():
    gain_outlook = calculate_information_gain(SMALL_WEATHER_ROWS, 0, 2)
    gain_humidity = calculate_information_gain(SMALL_WEATHER_ROWS, 1, 2)
    assert gain_outlook == pytest.approx(0.311278, abs=1e-6)
    assert gain_outlook == gain_humidity


def test_information_gain_is_never_negative():
    dataset = generate_categorical_label_data(num_samples=200, label_noise=0.4, seed=5)
    for size in (1, 3, 10, 50, 200):
        rows = dataset.rows[:size]
        for attribute_index in dataset.candidate_attribute_indices:
            assert calculate_information_gain(rows, attribute_index, dataset.class_index) >= -1e-9


def test_information_gain_rejects_empty_rows():
    with pytest.raises(InvalidInputError):
        calculate_information_gain([], 0, 1)


def test_find_best_attribute_prefers_highest_gain():
    rows = [
        ["x", "a", "yes"],
        ["y", "a", "yes"],
        ["x", "b", "no"],
        ["y", "b", "no"],
    ]
    best_index, best_gain = find_best_attribute(rows, [0, 1], 2)
    assert best_index == 1
    assert best_gain == pytest.approx(1.0)


def test_find_best_attribute_tie_goes_to_first_candidate():
    assert find_best_attribute(SMALL_WEATHER_ROWS, [0, 1], 2)[0] == 0
    assert find_best_attribute(SMALL_WEATHER_ROWS, [1, 0], 2)[0] == 1


def test_find_best_attribute_with_zero_gain_returns_first_candidate():
    rows = [["a", "a", "yes"], ["a", "a", "no"]]
    assert find_best_attribute(rows, [1, 0], 2)[0] == 1


def test_find_best_attribute_rejects_empty_candidates():
    with pytest.raises(InvalidInputError):
        find_best_attribute(SMALL_WEATHER_ROWS, [], 2)


def test_find_best_attribute_verbose_logs_names(capsys):
    find_best_attribute(SMALL_WEATHER_ROWS, [0, 1], 2, verbose=True, node_id_for_logs="root",
                        attribute_names=["outlook", "humidity", "play"])
    out = capsys.readouterr().out
    assert "Attribute 'outlook' gain" in out
    assert "Best attribute for Node root: 'outlook'" in out
