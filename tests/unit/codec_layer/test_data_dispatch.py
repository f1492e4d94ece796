"""
Unit Tests for Response Data Shape Dispatch

Tests the precedence order used to classify an untagged ``data`` value.
"""

import pytest

from prometheus_query.codec.envelope_codec import classify_data, decode_result_data
from prometheus_query.core.config.constants import DataShape
from prometheus_query.core.exceptions import SchemaViolationError, UnrecognizedDataShapeError
from prometheus_query.models import Flags, LabelsOrValues, Series


@pytest.mark.unit
class TestClassifyData:
    """Test classify_data predicates and their order."""

    @pytest.mark.parametrize(
        "value, shape",
        [
            ({"resultType": "vector", "result": []}, DataShape.EXPRESSION),
            ({"resultType": "bogus"}, DataShape.EXPRESSION),
            ([{"job": "node"}], DataShape.SERIES),
            ([{}], DataShape.SERIES),
            (["job", "instance"], DataShape.LABELS_OR_VALUES),
            ([], DataShape.LABELS_OR_VALUES),
            ({"activeTargets": []}, DataShape.TARGETS),
            ({"droppedTargets": []}, DataShape.TARGETS),
            ({"activeAlertmanagers": []}, DataShape.ALERT_MANAGERS),
            ({"droppedAlertmanagers": []}, DataShape.ALERT_MANAGERS),
            ({"log.level": "info"}, DataShape.FLAGS),
            ({}, DataShape.FLAGS),
        ],
    )
    def test_shapes(self, value, shape):
        assert classify_data(value) is shape

    def test_expression_wins_over_targets(self):
        assert classify_data({"resultType": "scalar", "activeTargets": []}) is DataShape.EXPRESSION

    def test_targets_win_over_alertmanagers(self):
        value = {"activeTargets": [], "activeAlertmanagers": []}
        assert classify_data(value) is DataShape.TARGETS

    def test_targets_win_over_flags(self):
        # A string-only object with a targets key is never read as flags
        assert classify_data({"activeTargets": "x"}) is DataShape.TARGETS

    def test_label_set_with_result_type_is_not_series(self):
        with pytest.raises(UnrecognizedDataShapeError):
            classify_data([{"resultType": "vector"}])

    @pytest.mark.parametrize(
        "value",
        [
            None,
            True,
            42,
            1.5,
            "success",
            [1],
            ["a", {"job": "node"}],
            [{"job": 1}],
            {"log.level": 1},
            {"nested": {"a": "b"}},
        ],
    )
    def test_unrecognized(self, value):
        with pytest.raises(UnrecognizedDataShapeError):
            classify_data(value)

    def test_classification_is_deterministic(self):
        value = [{"__name__": "up"}, {"__name__": "down"}]
        assert {classify_data(value) for _ in range(10)} == {DataShape.SERIES}


@pytest.mark.unit
class TestDecodeResultData:
    """Test that the chosen shape's decoder owns the value."""

    def test_empty_array_decodes_as_labels_or_values(self):
        assert decode_result_data([]) == LabelsOrValues(values=[])

    def test_series_keeps_label_order(self):
        result = decode_result_data([{"b": "2", "a": "1"}])

        assert isinstance(result, Series)
        assert list(result.metrics[0].labels) == ["b", "a"]

    def test_empty_flags(self):
        assert decode_result_data({}) == Flags(flags={})

    def test_targets_shape_does_not_fall_through_to_flags(self):
        with pytest.raises(SchemaViolationError) as exc_info:
            decode_result_data({"activeTargets": "x"})

        assert exc_info.value.details["field"] == "activeTargets"

    def test_alertmanagers_reject_unknown_keys(self):
        with pytest.raises(SchemaViolationError) as exc_info:
            decode_result_data({"activeAlertmanagers": [], "extra": "value"})

        assert exc_info.value.details["field"] == "extra"
