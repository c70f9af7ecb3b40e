import asyncio

import pytest

from app.core.errors import EmptyInputError, PipelineFailure
from app.core.sentiment.config import SentimentConfig
from app.core.stopword_removal.config import StopwordConfig
from app.core.stopword_removal.removal import DefaultStopwordRemover
from app.data_loader import load_sample_reviews
from app.services.preprocess import PreprocessingPipeline
from app.services.sentiment_service import SentimentService

SCENARIO_A = "This product is absolutely amazing! Fast shipping, great quality, and excellent customer service."
SCENARIO_B = "Terrible experience. The product broke after just one week and customer support was unhelpful."
SCENARIO_C = "The product is okay. It works as expected but nothing special."


def run(coro):
    return asyncio.run(coro)


def test_scenario_a_positive(service):
    result = run(service.analyze(SCENARIO_A))
    assert result.final.label == "Positive"
    assert 0.85 <= result.final.confidence <= 0.95


def test_scenario_b_negative(service):
    result = run(service.analyze(SCENARIO_B))
    assert result.final.label == "Negative"
    assert result.final.confidence == pytest.approx(0.85)


def test_scenario_c_neutral(service):
    result = run(service.analyze(SCENARIO_C))
    assert result.final.label == "Neutral"
    assert result.final.confidence == 0.75


@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
def test_scenario_d_empty_input_rejected(service, monkeypatch, text):
    calls = []
    monkeypatch.setattr(
        service.preprocessor, "normalize", lambda t: calls.append(t)
    )
    with pytest.raises(EmptyInputError):
        run(service.analyze(text))
    assert calls == []


def test_scenario_e_original_untouched(service):
    text = "  MiXeD   case!!  with\ttabs & émojis 🎉 "
    result = run(service.analyze(text))
    assert result.trace.original == text


def test_baseline_tracks_final(service):
    for text in load_sample_reviews():
        result = run(service.analyze(text))
        assert result.baseline.label == result.final.label
        assert result.baseline.confidence == pytest.approx(
            result.final.confidence - 0.15
        )


def test_highlight_order_is_lowercase_token_order(service):
    result = run(service.analyze(SCENARIO_A))
    assert [ts.token for ts in result.token_scores] == result.trace.lowercase.split()


def test_scoring_ignores_stopword_filtering():
    # scoring reads the unfiltered lowercase text, not the display stages
    custom = SentimentService(
        preprocessor=PreprocessingPipeline(
            stopwords=DefaultStopwordRemover(
                StopwordConfig(custom_stopwords=frozenset({"hate"}))
            )
        )
    )
    result = run(custom.analyze("I hate it"))
    assert "hate" not in result.trace.no_stopwords.split()
    assert result.final.label == "Negative"


def test_default_output_is_reproducible(service):
    first = run(service.analyze(SCENARIO_A))
    second = run(service.analyze(SCENARIO_A))
    assert first == second


def test_random_contributions_opt_in():
    service = SentimentService(SentimentConfig(random_contributions=True))
    result = run(service.analyze(SCENARIO_A))
    for ts in result.token_scores:
        assert -1.0 <= ts.contribution <= 1.0
    assert result.final.label == "Positive"


def test_stage_fault_becomes_pipeline_failure(service, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("lexicon exploded")

    monkeypatch.setattr(service.scorer, "score", boom)
    with pytest.raises(PipelineFailure) as exc_info:
        run(service.analyze(SCENARIO_A))
    assert exc_info.value.stage == "score"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_simulated_latency_is_a_cancellable_suspension_point():
    slow = SentimentService(inference_delay=0.5)
    with pytest.raises(asyncio.TimeoutError):
        run(asyncio.wait_for(slow.analyze(SCENARIO_A), timeout=0.01))


def test_concurrent_calls_do_not_interfere(service):
    async def both():
        return await asyncio.gather(
            service.analyze(SCENARIO_A), service.analyze(SCENARIO_B)
        )

    a, b = run(both())
    assert a == run(service.analyze(SCENARIO_A))
    assert b == run(service.analyze(SCENARIO_B))


# -------------------------------------
# Batch
# -------------------------------------
def test_analyze_many_and_summary(service):
    results = run(service.analyze_many([SCENARIO_A, SCENARIO_B, SCENARIO_C]))
    assert [r.final.label for r in results] == ["Positive", "Negative", "Neutral"]

    summary = service.summarize(results)
    assert summary.total == 3
    assert summary.overall == {"positive": 33.3, "negative": 33.3, "neutral": 33.3}


def test_analyze_many_is_all_or_nothing(service):
    with pytest.raises(EmptyInputError):
        run(service.analyze_many([SCENARIO_A, " "]))


def test_summary_of_nothing_is_zero(service):
    summary = service.summarize([])
    assert summary.total == 0
    assert summary.overall == {"positive": 0.0, "negative": 0.0, "neutral": 0.0}
