"""Tests for the FaceDataset pipeline facade."""

import logging
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from chernoff_tlbx import FaceDataset, PipelineConfig
from chernoff_tlbx.data.views import FaceView
from chernoff_tlbx.errors import DegenerateColumnWarning, EmptyDatasetError, IndexOutOfRangeError, MalformedColumnError
from chernoff_tlbx.paging.dispatcher import RenderDispatcher
from chernoff_tlbx.plotting import FaceRenderer


class TestFaceDatasetPipeline:
    """End-to-end scenarios from raw frame to pages."""

    def test_iris_pages(self, iris_df: pd.DataFrame) -> None:
        """Test 150 iris rows split into three pages of 50."""
        pager = FaceDataset(iris_df, PipelineConfig(page_size=50)).paginate()

        assert pager.page_count == 3
        assert [(p.start, p.stop) for p in pager] == [(0, 50), (50, 100), (100, 150)]

    def test_iris_labels_and_features(self, iris_df: pd.DataFrame) -> None:
        """Test species becomes the labels and is not part of the 4 features."""
        ds = FaceDataset(iris_df)

        assert ds.labels is not None
        assert ds.labels.tolist() == iris_df["species"].tolist()
        assert ds.feature_columns == iris_df.columns.drop("species").tolist()
        assert ds.df_scaled.shape == (150, 4)

    def test_labels_follow_rows_across_pages(self, iris_df: pd.DataFrame) -> None:
        """Test each page's labels belong to that page's source rows."""
        pager = FaceDataset(iris_df).paginate(page_size=40)

        for page in pager:
            assert page.labels is not None
            assert page.labels.tolist() == iris_df.loc[page.features.index, "species"].tolist()

    def test_scaling_is_global(self, iris_df: pd.DataFrame) -> None:
        """Test pages reuse the full-dataset scale instead of their own min/max."""
        ds = FaceDataset(iris_df)
        pager = ds.paginate(page_size=50)
        first = pager.get_page(0)

        # setosa (page 0) has the smallest petals, so no page-0 petal reaches the global maximum
        assert first.features["petal length (cm)"].max() < 1.0
        assert pager.scale_params is ds.scale_params
        pd.testing.assert_frame_equal(pd.concat([p.features for p in pager]), ds.df_scaled)

    def test_scaled_values_within_range(self, mixed_df: pd.DataFrame) -> None:
        """Test all scaled features lie in [-1, 1] and hit both bounds."""
        scaled = FaceDataset(mixed_df).df_scaled

        assert ((scaled >= -1.0) & (scaled <= 1.0)).all().all()
        assert (scaled.min() == -1.0).all()
        assert (scaled.max() == 1.0).all()

    def test_constant_column(self) -> None:
        """Test a constant column scales to zeros with a warning."""
        df = pd.DataFrame({"seven": [7] * 6, "v": np.arange(6.0)})
        ds = FaceDataset(df)

        with pytest.warns(DegenerateColumnWarning):
            scaled = ds.df_scaled
        assert (scaled["seven"] == 0.0).all()

    def test_empty_dataset_paginates_to_zero_pages(self, iris_df: pd.DataFrame, caplog: pytest.LogCaptureFixture) -> None:
        """Test zero rows give page_count == 0 instead of a crash."""
        ds = FaceDataset(iris_df.iloc[0:0])

        with caplog.at_level(logging.WARNING):
            pager = ds.paginate(page_size=50)

        assert pager.page_count == 0
        assert "no rows" in caplog.text
        with pytest.raises(IndexOutOfRangeError):
            pager.get_page(0)
        with pytest.raises(EmptyDatasetError):
            _ = ds.df_scaled

    def test_labels_disabled(self, iris_df: pd.DataFrame) -> None:
        """Test extract_labels=False yields no labels but still drops textual columns."""
        ds = FaceDataset(iris_df, PipelineConfig(extract_labels=False))
        page = ds.paginate().get_page(0)

        assert ds.labels is None
        assert page.labels is None
        assert page.features.shape[1] == 4

    def test_malformed_column_surfaces(self) -> None:
        """Test invalid numeric data is reported, not turned into NaN."""
        df = pd.DataFrame({"name": ["a", "b"], "v": ["1", "x"]})
        ds = FaceDataset(df, PipelineConfig(overrides={"v": "numeric"}))

        with pytest.raises(MalformedColumnError):
            ds.paginate()

    def test_categorical_encoded_before_scaling(self, mixed_df: pd.DataFrame) -> None:
        """Test categorical codes are scaled like other features."""
        ds = FaceDataset(mixed_df)

        assert dict(ds.cleaned.category_codes["grade"]) == {"c": 1, "b": 2, "a": 3}
        # codes 1..3 map to -1, 0, 1
        assert ds.df_scaled["grade"].tolist() == [0.0, 1.0, -1.0, 1.0, 0.0, -1.0, 1.0]

    def test_source_frame_untouched(self, mixed_df: pd.DataFrame) -> None:
        """Test the pipeline never mutates the caller's frame."""
        before = mixed_df.copy()
        FaceDataset(mixed_df).paginate(page_size=2)
        pd.testing.assert_frame_equal(mixed_df, before)


class TestFaceDatasetCaching:
    """Test stages run once per dataset version."""

    def test_scaling_cached(self, iris_df: pd.DataFrame) -> None:
        """Test repeated access returns the same artifacts."""
        ds = FaceDataset(iris_df)

        assert ds.scaling is ds.scaling
        assert ds.paginate().scale_params is ds.paginate().scale_params

    def test_column_change_invalidates_cache(self, mixed_df: pd.DataFrame) -> None:
        """Test changing the source columns triggers reclassification."""
        df = mixed_df.copy()
        ds = FaceDataset(df)
        assert ds.feature_columns == ["grade", "height", "age"]

        df["weight"] = [60.0, 80.0, 70.0, 90.0, 55.0, 65.0, 75.0]

        assert ds.classification.numeric == ["height", "age", "weight"]
        assert ds.feature_columns == ["grade", "height", "age", "weight"]

    def test_row_append_invalidates_cache(self) -> None:
        """Test rows added to the source frame are picked up by later stages."""
        df = pd.DataFrame({"name": ["a", "b"], "x": [1.0, 2.0], "y": [3.0, 4.0]})
        ds = FaceDataset(df, PipelineConfig(page_size=1))
        assert ds.paginate().page_count == 2

        df.loc[2] = ["c", 3.0, 5.0]

        pager = ds.paginate()
        assert pager.page_count == 3
        assert pager.get_page(2).label_list == ["c"]
        assert ds.df_scaled["x"].tolist() == [-1.0, 0.0, 1.0]

    def test_with_df_returns_new_dataset(self, mixed_df: pd.DataFrame) -> None:
        """Test with_df keeps the config and starts fresh."""
        config = PipelineConfig(page_size=2)
        ds = FaceDataset(mixed_df, config)
        other = ds.with_df(mixed_df.iloc[:4])

        assert other is not ds
        assert other.config is config
        assert other.paginate().page_count == 2


class TestFaceDatasetViews:
    """Test view, dispatcher and loading helpers."""

    def test_view(self, mixed_df: pd.DataFrame) -> None:
        """Test the immutable view bundles the prepared data."""
        view = FaceDataset(mixed_df).view()

        assert isinstance(view, FaceView)
        assert view.feature_cols == ["grade", "height", "age"]
        assert view.pretty_by_col["height"] == "Height"
        assert view.n_rows == 7
        assert view.labels is not None
        with pytest.raises(AttributeError):
            view.labels = None  # type: ignore[misc]

    def test_make_dispatcher_with_custom_renderer(self, iris_df: pd.DataFrame) -> None:
        """Test the dispatcher renders pages of the dataset."""
        calls = []
        dispatcher = FaceDataset(iris_df).make_dispatcher(
            lambda matrix, labels: calls.append((matrix.shape, labels[0])),
            page_size=50,
        )

        assert isinstance(dispatcher, RenderDispatcher)
        dispatcher.render(2)
        assert calls == [((50, 4), "virginica")]

    def test_make_dispatcher_default_renderer(self, iris_df: pd.DataFrame) -> None:
        """Test the face renderer is used by default."""
        dispatcher = FaceDataset(iris_df).make_dispatcher()
        assert isinstance(dispatcher.renderer, FaceRenderer)

    def test_from_csv(self, tmp_path: Path, mixed_df: pd.DataFrame) -> None:
        """Test loading from CSV."""
        path = tmp_path / "people.csv"
        mixed_df.drop(columns=["grade"]).to_csv(path, index=False)

        ds = FaceDataset.from_csv(path, PipelineConfig(page_size=3))

        assert ds.classification.textual == ["name", "city"]
        assert ds.paginate().page_count == 3

    def test_rejects_non_frame(self) -> None:
        """Test only DataFrames are accepted."""
        with pytest.raises(TypeError):
            FaceDataset([[1, 2]])  # type: ignore[arg-type]
