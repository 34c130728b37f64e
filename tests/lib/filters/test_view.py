import pandas as pd

from gridfilter.lib.conditions import ConditionCollection
from gridfilter.lib.filters import ConditionCollectionFilter, TableView


def _df():
    return pd.DataFrame(
        {
            "name": ["Ana", "Bruno", "Carla", "Duarte"],
            "age": [31, 17, 45, 22],
        },
        index=[10, 11, 12, 13],
    )


def _collection(column, name, args, operation="conjunction"):
    c = ConditionCollection()
    c.add_condition(column, {"name": name, "args": args}, operation)
    return c


def test_table_view_compute_without_filters_returns_copy_and_equal():
    df = _df()
    view = TableView(df)
    result = view.compute()
    assert result.equals(df)
    assert result is not df


def test_table_view_filter_is_immutable_and_combines_filters():
    df = _df()
    view = TableView(df)
    adults = ConditionCollectionFilter(_collection("age", "gte", [18]))
    with_a = ConditionCollectionFilter(_collection("name", "contains", ["A"]))

    v1 = view.filter(adults)
    v2 = v1.filter(with_a)

    assert view.filters == ()
    assert len(v1.filters) == 1
    assert len(v2.filters) == 2
    assert v2.compute()["name"].tolist() == ["Ana", "Carla", "Duarte"]
    assert v2.row_indices() == [10, 12, 13]


def test_table_view_filter_accepts_sequence():
    view = TableView(_df()).filter(
        [
            ConditionCollectionFilter(_collection("age", "between", [20, 40])),
            ConditionCollectionFilter(_collection("name", "ends_with", ["A"])),
        ]
    )
    assert view.compute()["name"].tolist() == ["Ana"]


def test_table_view_head_and_to_csv(tmp_path):
    view = TableView(_df()).filter(ConditionCollectionFilter(_collection("age", "lt", [30])))
    assert view.head(1)["name"].tolist() == ["Bruno"]

    out = tmp_path / "out.csv"
    view.to_csv(str(out))
    written = pd.read_csv(out)
    assert written["name"].tolist() == ["Bruno", "Duarte"]
