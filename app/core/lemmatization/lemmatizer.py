from __future__ import annotations
from typing import List

from app.core.lemmatization.base import Lemmatizer
from app.core.lemmatization.config import LemmatizationConfig


def _to_wn_pos(tag: str):
    # Penn tag -> WordNet POS
    if tag.startswith("J"):
        return "a"  # ADJ
    if tag.startswith("V"):
        return "v"  # VERB
    if tag.startswith("N"):
        return "n"  # NOUN
    if tag.startswith("R"):
        return "r"  # ADV
    return "n"  # default


class PassthroughLemmatizer(Lemmatizer):
    """Default stage-4 placeholder: returns the stopword-filtered tokens as-is."""

    def __init__(self, config: LemmatizationConfig | None = None):
        self.cfg = config or LemmatizationConfig()

    def lemmatize(self, tokens: List[str]) -> List[str]:
        return list(tokens)


class WordNetTokenLemmatizer(Lemmatizer):
    def __init__(self, config: LemmatizationConfig | None = None):
        self.cfg = config or LemmatizationConfig(method="wordnet")
        self._wn = None  # lazy

    def _ensure_wn(self):
        if self._wn is not None:
            return
        import nltk

        try:
            nltk.data.find("corpora/wordnet.zip")
        except LookupError:
            nltk.download("wordnet", quiet=True)
        if self.cfg.use_pos_tagging:
            try:
                nltk.data.find("taggers/averaged_perceptron_tagger_eng")
            except LookupError:
                nltk.download("averaged_perceptron_tagger_eng", quiet=True)
        from nltk.stem import WordNetLemmatizer

        self._wn = WordNetLemmatizer()

    def warm_up(self) -> None:
        self._ensure_wn()

    def lemmatize(self, tokens: List[str]) -> List[str]:
        self._ensure_wn()
        toks = list(tokens)

        if not self.cfg.use_pos_tagging:
            return [self._wn.lemmatize(t) for t in toks]

        from nltk import pos_tag

        tags = pos_tag(toks)  # [('arrived','VBD'),('rooms','NNS'),...]
        return [self._wn.lemmatize(token, _to_wn_pos(tag)) for token, tag in tags]


def lemmatizer_for(method_or_cfg: str | LemmatizationConfig) -> Lemmatizer:
    if isinstance(method_or_cfg, str):
        cfg = LemmatizationConfig(method=method_or_cfg.lower())
    else:
        cfg = method_or_cfg

    if cfg.method == "passthrough":
        return PassthroughLemmatizer(cfg)
    if cfg.method == "wordnet":
        return WordNetTokenLemmatizer(cfg)
    raise ValueError(f"Unsupported lemmatizer: {cfg.method}")
