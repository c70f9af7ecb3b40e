from __future__ import annotations
import logging

from app.core.lemmatization.base import Lemmatizer
from app.core.lemmatization.lemmatizer import PassthroughLemmatizer
from app.core.normalization.base import TextNormalizer
from app.core.normalization.normalizer import DefaultTextNormalizer
from app.core.sentiment.types import PreprocessingTrace
from app.core.special_char_removal.base import SpecialCleaner
from app.core.special_char_removal.cleaner import DefaultSpecialCleaner
from app.core.stopword_removal.base import StopwordRemover
from app.core.stopword_removal.removal import DefaultStopwordRemover
from app.core.tokenization.base import Tokenizer
from app.core.tokenization.tokenizer import DefaultTokenizer
from app.utils.telemetry import step

logger = logging.getLogger(__name__)


class PreprocessingPipeline:
    """
    Display preprocessing chain:
      1. lowercase
      2. strip everything that is not a word character or whitespace
      3. drop stopwords
      4. lemmatize

    Every stage reads only the previous stage's output. The result is a
    trace of all stages for explainability; scoring never reads stages 2-4.
    """

    def __init__(
        self,
        normalizer: TextNormalizer | None = None,
        cleaner: SpecialCleaner | None = None,
        tokenizer: Tokenizer | None = None,
        stopwords: StopwordRemover | None = None,
        lemmatizer: Lemmatizer | None = None,
    ):
        self.normalizer = normalizer or DefaultTextNormalizer()
        self.cleaner = cleaner or DefaultSpecialCleaner()
        self.tokenizer = tokenizer or DefaultTokenizer()
        self.stopwords = stopwords or DefaultStopwordRemover()
        self.lemmatizer = lemmatizer or PassthroughLemmatizer()

    def normalize(self, text: str) -> PreprocessingTrace:
        original = text or ""

        with step("preprocess.lowercase", chars=len(original)):
            lowercase = self.normalizer.normalize(original)

        with step("preprocess.special_chars"):
            no_special, removed_chars = self.cleaner.clean(lowercase)

        with step("preprocess.stopwords"):
            kept, removed_words = self.stopwords.remove(
                self.tokenizer.tokenize(no_special)
            )

        with step("preprocess.lemmatize", tokens=len(kept)):
            lemmas = self.lemmatizer.lemmatize(kept)
            if len(lemmas) > len(kept):
                raise ValueError("Lemmatizer produced more tokens than it received.")

        logger.debug(
            "Preprocessed text: %d special chars, %d stopwords removed",
            len(removed_chars),
            len(removed_words),
        )

        return PreprocessingTrace(
            original=original,
            lowercase=lowercase,
            no_special_chars=no_special,
            no_stopwords=" ".join(kept),
            lemmatized=" ".join(lemmas),
        )
