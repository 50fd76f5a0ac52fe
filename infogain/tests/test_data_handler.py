import pytest
import pandas as pd
import numpy as np

from infogain.data_handling import data_handler


def generate_example_data():
    example_data = pd.DataFrame({"species": ["cat", "dog", "dog", "bird", "cat", "dog", "cat", "cat"],
                                 "age": [3, 7, 1, 2, 9, 4, 6, 5],
                                 "weight": [1.0, 1.0, 1.0, 0.0, 1.0, 1.0, 2.0, 2.0]})
    return example_data


def test_check_mode():

    with pytest.raises(ValueError):
        data_handler.LabelHandler(mode="wrong")


def test_encode_label():

    example_data = generate_example_data()
    handler = data_handler.LabelHandler()
    encoder = handler.encode_label(label="species", data=example_data)

    assert list(encoder.classes_) == ["bird", "cat", "dog"]
    assert handler.num_classes == 3
    assert list(handler.get_labels("species")) == [1, 2, 2, 0, 1, 2, 1, 1]
    # original frame is untouched
    assert example_data["species"][0] == "cat"

    with pytest.raises(KeyError):
        handler.encode_label(label="missing", data=example_data)


def test_not_encoded():

    handler = data_handler.LabelHandler()
    with pytest.raises(ValueError):
        handler.num_classes
    with pytest.raises(ValueError):
        handler.node_gain(label="species")


def test_node_gain_unweighted():

    handler = data_handler.LabelHandler()
    handler.encode_label(label="species", data=generate_example_data())

    # 4 cats, 3 dogs, 1 bird
    expected = 0.5 * np.log2(0.5) + 0.375 * np.log2(0.375) + 0.125 * np.log2(0.125)
    assert handler.node_gain(label="species") == pytest.approx(expected)

    # only dogs among the young ones
    rows = (handler.data["age"] < 5) & (handler.data["species"] == 2)
    assert handler.node_gain(label="species", rows=rows) == 0.0

    # no rows at all
    assert handler.node_gain(label="species", rows=handler.data["age"] > 100) == 0.0


def test_node_gain_weighted():

    handler = data_handler.LabelHandler(mode="weighted")
    handler.encode_label(label="species", data=generate_example_data())

    # cats weigh 6, dogs 3, the bird 0
    expected = (6 / 9) * np.log2(6 / 9) + (3 / 9) * np.log2(3 / 9)
    assert handler.node_gain(label="species", weight="weight") == pytest.approx(expected)

    with pytest.raises(ValueError):
        handler.node_gain(label="species")

    bird = handler.data["species"] == 0
    assert handler.node_gain(label="species", weight="weight", rows=bird) == 0.0


def test_node_gain_checked():

    data = generate_example_data()
    data["weight"] = -1.0
    handler = data_handler.LabelHandler(mode="weighted", checked=True)
    handler.encode_label(label="species", data=data)

    with pytest.raises(ValueError):
        handler.node_gain(label="species", weight="weight")
    with pytest.raises(KeyError):
        handler.node_gain(label="species", weight="missing")


def test_gain_range():

    handler = data_handler.LabelHandler()
    handler.encode_label(label="species", data=generate_example_data())
    assert handler.gain_range() == pytest.approx(np.log2(3))
    assert -handler.gain_range() <= handler.node_gain(label="species") <= 0
