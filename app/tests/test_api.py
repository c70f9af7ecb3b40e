import pytest
from fastapi.testclient import TestClient

from app.api.analysis import get_sentiment_service
from app.core.config import settings
from app.main import app
from app.messages.analysis_messages import EMPTY_INPUT
from app.services.sentiment_service import SentimentService

client = TestClient(app)

SCENARIO_A = "This product is absolutely amazing! Fast shipping, great quality, and excellent customer service."
SCENARIO_B = "Terrible experience. The product broke after just one week and customer support was unhelpful."
SCENARIO_C = "The product is okay. It works as expected but nothing special."


@pytest.fixture(autouse=True)
def _fast_service():
    app.dependency_overrides[get_sentiment_service] = lambda: SentimentService(
        inference_delay=0.0
    )
    yield
    app.dependency_overrides.clear()


def _analyze(text):
    return client.post("/api/sentiment/analyze", json={"text": text})


def test_analyze_positive_review():
    response = _analyze(SCENARIO_A)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    data = body["data"]
    assert data["final_prediction"] == "Positive"
    assert 0.85 <= data["final_confidence"] <= 0.95
    assert data["baseline_prediction"] == "Positive"
    assert data["baseline_confidence"] == pytest.approx(
        data["final_confidence"] - 0.15
    )


def test_analyze_negative_and_neutral_reviews():
    negative = _analyze(SCENARIO_B).json()["data"]
    neutral = _analyze(SCENARIO_C).json()["data"]

    assert negative["final_prediction"] == "Negative"
    assert neutral["final_prediction"] == "Neutral"
    assert neutral["final_confidence"] == 0.75
    assert neutral["baseline_confidence"] == pytest.approx(0.60)


def test_analyze_response_shape():
    data = _analyze(SCENARIO_A).json()["data"]

    steps = data["preprocessing_steps"]
    assert list(steps) == [
        "original",
        "lowercase",
        "no_special_chars",
        "no_stopwords",
        "lemmatized",
    ]
    assert steps["original"] == SCENARIO_A

    tokens = [pair[0] for pair in data["highlighted_text"]]
    assert tokens == steps["lowercase"].split()
    for token, contribution in data["highlighted_text"]:
        assert -1.0 <= contribution <= 1.0


def test_analyze_is_reproducible():
    assert _analyze(SCENARIO_A).json() == _analyze(SCENARIO_A).json()


# -------------------------------------
# ❌ Empty / missing input
# -------------------------------------
@pytest.mark.parametrize("text", ["", "    "])
def test_analyze_empty_text(text):
    response = _analyze(text)
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "EMPTY_INPUT"
    assert response.json()["error"]["message"] == EMPTY_INPUT


def test_analyze_missing_text_field():
    response = client.post("/api/sentiment/analyze", json={})
    assert response.status_code == 422


# -------------------------------------
# ❌ Pipeline failure and timeout
# -------------------------------------
def test_analyze_pipeline_failure(monkeypatch):
    broken = SentimentService(inference_delay=0.0)

    def boom(*args, **kwargs):
        raise RuntimeError("malformed lexicon")

    monkeypatch.setattr(broken.scorer, "score", boom)
    app.dependency_overrides[get_sentiment_service] = lambda: broken

    response = _analyze(SCENARIO_A)
    assert response.status_code == 500
    assert response.json()["error"]["code"] == "ANALYSIS_FAILED"
    assert "internal server error" in response.text.lower()


def test_analyze_timeout(monkeypatch):
    monkeypatch.setattr(settings, "ANALYZE_TIMEOUT_SECONDS", 0.01)
    app.dependency_overrides[get_sentiment_service] = lambda: SentimentService(
        inference_delay=1.0
    )

    response = _analyze(SCENARIO_A)
    assert response.status_code == 504
    assert response.json()["error"]["code"] == "ANALYSIS_TIMEOUT"


# -------------------------------------
# Batch
# -------------------------------------
def test_batch_analysis():
    response = client.post(
        "/api/sentiment/batch", json={"texts": [SCENARIO_A, SCENARIO_B, SCENARIO_C]}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert [r["final_prediction"] for r in data["results"]] == [
        "Positive",
        "Negative",
        "Neutral",
    ]
    assert data["summary"] == {
        "total": 3,
        "overall": {"positive": 33.3, "negative": 33.3, "neutral": 33.3},
    }


def test_batch_rejects_blank_entry():
    response = client.post("/api/sentiment/batch", json={"texts": [SCENARIO_A, ""]})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "EMPTY_INPUT"
    assert response.json()["error"]["message"] == EMPTY_INPUT


def test_batch_requires_at_least_one_text():
    response = client.post("/api/sentiment/batch", json={"texts": []})
    assert response.status_code == 422


# -------------------------------------
# Samples, metrics, health
# -------------------------------------
def test_sample_reviews():
    response = client.get("/api/sentiment/samples")

    assert response.status_code == 200
    samples = response.json()["data"]["samples"]
    assert len(samples) == 5
    labels = [_analyze(s).json()["data"]["final_prediction"] for s in samples]
    assert labels == ["Positive", "Negative", "Neutral", "Positive", "Negative"]


def test_performance_metrics():
    response = client.get("/api/metrics/performance")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["f1_score"] == 89
    assert data["precision"] == 91
    assert data["recall"] == 87
    assert data["accuracy"] == 88
    assert data["confusion_matrix"] == [[450, 30, 20], [35, 440, 25], [15, 20, 465]]
    assert data["labels"] == ["Positive", "Negative", "Neutral"]


def test_health_endpoints():
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/liveness").status_code == 204
    assert client.get("/readiness").json() == {"status": "ready"}


def test_security_headers_present():
    response = client.get("/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_unknown_route_uses_error_envelope():
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "HTTP_ERROR"
