import pandas as pd
import pytest

from gridfilter.lib.conditions import ConditionCollection
from gridfilter.lib.filters import (
    ConditionCollectionFilter,
    MissingColumnsError,
    TableView,
    infer_cell_meta,
)


def _df():
    return pd.DataFrame(
        {
            "city": ["Lisboa", "Porto", "Faro", "Lisboa"],
            "population": [545_000, 232_000, 61_000, None],
        }
    )


def test_empty_collection_keeps_all_rows():
    f = ConditionCollectionFilter(ConditionCollection())
    assert f.mask(_df()).tolist() == [True, True, True, True]


def test_mask_combines_columns_with_and():
    c = ConditionCollection()
    c.add_condition("city", {"name": "eq", "args": ["LISBOA"]}, "disjunction")
    c.add_condition("city", {"name": "eq", "args": ["porto"]}, "disjunction")
    c.add_condition("population", {"name": "gt", "args": [300_000]})

    mask = ConditionCollectionFilter(c).mask(_df())
    assert mask.dtype == bool
    assert mask.tolist() == [True, False, False, False]


def test_columns_mapping_translates_collection_ids():
    c = ConditionCollection()
    c.add_condition(0, {"name": "begins_with", "args": ["f"]})
    f = ConditionCollectionFilter(c, columns={0: "city"})
    assert f.required_columns == ("city",)
    assert f.mask(_df()).tolist() == [False, False, True, False]


def test_missing_dataframe_column_raises():
    c = ConditionCollection()
    c.add_condition("country", {"name": "eq", "args": ["pt"]})
    with pytest.raises(MissingColumnsError):
        ConditionCollectionFilter(c).mask(_df())


def test_filter_reads_collection_lazily():
    c = ConditionCollection()
    f = ConditionCollectionFilter(c)
    df = _df()
    assert f.mask(df).all()
    c.add_condition("city", {"name": "eq", "args": ["faro"]})
    assert f.mask(df).tolist() == [False, False, True, False]
    c.remove_conditions("city")
    assert f.mask(df).all()


def test_numeric_and_date_meta_are_inferred_from_dtype():
    df = _df()
    assert infer_cell_meta(df["population"]) == {"type": "numeric"}
    assert infer_cell_meta(df["city"]) == {"type": "text"}
    assert infer_cell_meta(pd.Series(pd.to_datetime(["2024-01-01"]))) == {"type": "date"}
    assert infer_cell_meta(pd.Series([True, False])) == {"type": "text"}


def test_explicit_meta_overrides_inferred():
    df = pd.DataFrame({"when": ["10/01/2024", "10/03/2024"]})
    c = ConditionCollection()
    c.add_condition("when", {"name": "between", "args": ["01/01/2024", "31/01/2024"]})
    f = ConditionCollectionFilter(c, meta={"when": {"type": "date", "date_format": "%d/%m/%Y"}})
    assert f.mask(df).tolist() == [True, False]


def test_empty_cells_match_empty_condition():
    c = ConditionCollection()
    c.add_condition("population", {"name": "empty", "args": []})
    assert ConditionCollectionFilter(c).mask(_df()).tolist() == [False, False, False, True]


def test_several_collection_filters_are_anded_by_the_view():
    df = _df()
    lisboa = ConditionCollection()
    lisboa.add_condition("city", {"name": "eq", "args": ["lisboa"]})
    big = ConditionCollection()
    big.add_condition("population", {"name": "gt", "args": [100_000]})

    view = TableView(df).filter([ConditionCollectionFilter(lisboa), ConditionCollectionFilter(big)])
    assert view.row_indices() == [0]
    assert ConditionCollectionFilter(lisboa).apply(df)["city"].tolist() == ["Lisboa", "Lisboa"]


@pytest.mark.parametrize("tz", ["UTC", "Europe/Lisbon"])
def test_timezone_aware_column_compares_with_naive_arguments(tz):
    df = pd.DataFrame({"when": pd.to_datetime(["2023-06-01", "2024-06-01"]).tz_localize(tz)})
    c = ConditionCollection()
    c.add_condition("when", {"name": "date_after", "args": ["2024-01-01"]})
    assert ConditionCollectionFilter(c).mask(df).tolist() == [False, True]
