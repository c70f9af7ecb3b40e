import pytest

from app.services.metrics_service import PerformanceMetrics, get_performance_metrics


def test_metrics_are_static_and_shared():
    assert get_performance_metrics() is get_performance_metrics()


def test_metrics_record():
    metrics = get_performance_metrics()
    assert metrics.labels == ("Positive", "Negative", "Neutral")
    assert len(metrics.confusion_matrix) == 3
    for value in (metrics.f1, metrics.precision, metrics.recall, metrics.accuracy):
        assert 0 <= value <= 100
    # rows are actual labels: 500 examples per class
    assert [sum(row) for row in metrics.confusion_matrix] == [500, 500, 500]


def test_metrics_are_read_only():
    with pytest.raises(AttributeError):
        get_performance_metrics().f1 = 99.0


def test_metrics_validation():
    with pytest.raises(ValueError):
        PerformanceMetrics(
            f1=120.0, precision=1.0, recall=1.0, accuracy=1.0,
            confusion_matrix=((1, 0, 0), (0, 1, 0), (0, 0, 1)),
        )
    with pytest.raises(ValueError):
        PerformanceMetrics(
            f1=1.0, precision=1.0, recall=1.0, accuracy=1.0,
            confusion_matrix=((1, 0), (0, 1)),
        )
