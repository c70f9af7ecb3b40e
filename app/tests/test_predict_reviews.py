import pandas as pd
import pytest

from app.predict_reviews import main, predict_frame


def test_predict_frame_adds_columns():
    df = pd.DataFrame(
        {"review": ["Great hotel!", "Very bad, TERRIBLE service", None], "rating": [5, 1, 3]}
    )
    out = predict_frame(df)

    assert out["predicted_sentiment"].tolist() == ["Positive", "Negative", "Neutral"]
    assert out["confidence"].tolist() == pytest.approx([0.85, 0.85, 0.75])
    assert "predicted_sentiment" not in df.columns


def test_predict_frame_requires_text_column():
    with pytest.raises(ValueError):
        predict_frame(pd.DataFrame({"comment": ["Nice!"]}))


def test_cli_writes_predictions(tmp_path):
    src = tmp_path / "reviews.csv"
    dst = tmp_path / "predictions.csv"
    src.write_text("review,rating\nAwesome stay,5\nWorst ever,1\n", encoding="utf-8")

    main([str(src), str(dst)])

    result = pd.read_csv(dst)
    assert result["predicted_sentiment"].tolist() == ["Positive", "Negative"]
