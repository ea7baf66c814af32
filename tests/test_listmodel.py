import pytest

from together.listmodel import ListModel


def _model():
    model = ListModel()
    counts, data = [], []
    model.count_listeners.append(counts.append)
    model.data_listeners.append(lambda a, b: data.append((a, b)))
    return model, counts, data


def test_append_and_get():
    model, counts, _ = _model()
    model.append({"name": "a"}).append({"name": "b"})
    assert model.row_count() == 2
    assert len(model) == 2
    assert model.get(1) == {"name": "b"}
    assert counts == [1, 2]


def test_get_returns_copy():
    model = ListModel([{"k": 1}])
    row = model.get(0)
    row["k"] = 5
    assert model.get_value(0, "k") == 1


def test_get_out_of_range():
    model = ListModel([{"k": 1}])
    with pytest.raises(IndexError):
        model.get(1)
    with pytest.raises(IndexError):
        model.get_value(-1, "k")
    with pytest.raises(IndexError):
        model.set_value(3, "k", 2)


def test_get_value_missing_field():
    model = ListModel([{"k": 1}])
    assert model.get_value(0, "other") is None


def test_set_value_existing_and_missing():
    model = ListModel([{"k": 1}])
    assert model.set_value(0, "k", 2) == 1
    assert model.get_value(0, "k") == 2
    assert model.set_value(0, "new", 3) is None
    assert model.get(0) == {"k": 2}


def test_remove_contiguous():
    model, counts, _ = _model()
    model.replace([{"i": i} for i in range(5)])
    model.remove(1, 2)
    assert [row["i"] for row in model] == [0, 3, 4]
    assert counts[-1] == 3


def test_remove_out_of_range():
    model = ListModel([{"i": 0}])
    with pytest.raises(IndexError):
        model.remove(0, 2)


def test_replace_and_update_notify_data():
    model, counts, data = _model()
    model.replace([{"i": 0}, {"i": 1}])
    model.update()
    assert data == [(0, 2), (0, 2)]
    assert counts == [2, 2]


def test_clear():
    model, counts, _ = _model()
    model.append({"x": 1})
    model.clear()
    assert model.row_count() == 0
    assert counts[-1] == 0


def test_indexing_matches_get():
    model = ListModel([{"a": 1}, {"a": 2}])
    assert model[1] == model.get(1)
    assert list(model) == [{"a": 1}, {"a": 2}]