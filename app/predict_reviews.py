import argparse
import logging

import pandas as pd

from app.core.normalization.normalizer import DefaultTextNormalizer
from app.core.sentiment.calibrator import ConfidenceCalibrator
from app.core.sentiment.scorer import LexiconScorer

logger = logging.getLogger(__name__)


def predict_frame(df: pd.DataFrame, text_column: str = "review") -> pd.DataFrame:
    """Add predicted_sentiment and confidence columns to a copy of ``df``."""
    if text_column not in df.columns:
        raise ValueError(f"The input CSV file must contain a '{text_column}' column.")

    normalizer = DefaultTextNormalizer()
    scorer = LexiconScorer()
    calibrator = ConfidenceCalibrator()

    lowered = df[text_column].fillna("").astype(str).map(normalizer.normalize)
    out = df.copy()
    out["predicted_sentiment"] = scorer.score_series(lowered, calibrator)
    out["confidence"] = lowered.map(
        lambda t: calibrator.confidence_for(scorer.aggregate(t))
    )
    return out


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(
        description="Label every review in a CSV file with the lexicon scorer."
    )
    parser.add_argument(
        "file_input", type=str, help="Path to the CSV file containing reviews"
    )
    parser.add_argument("file_output", type=str, help="Path to save predictions")
    parser.add_argument(
        "--text-column", default="review", help="Column holding the review text"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )

    reviews_df = pd.read_csv(args.file_input)
    predictions = predict_frame(reviews_df, args.text_column)
    predictions.to_csv(args.file_output, index=False)

    logger.info(
        f"✅ {len(predictions)} predictions saved successfully at {args.file_output}"
    )


if __name__ == "__main__":
    main()
