"""Sentence segmentation with the nltk Punkt tokenizer."""

from nltk.tokenize.punkt import PunktSentenceTokenizer

from semantic_chunking.segmenters.base import Segmenter, units_from_sentences
from semantic_chunking.types import TextUnit


class NLPSentenceSegmenter(Segmenter):
    """One unit per sentence.

    The default tokenizer is an untrained Punkt instance, which needs no model
    download. A pretrained tokenizer (for example one loaded through
    ``nltk.data.load``) can be passed in for better abbreviation handling.
    """

    name = "sentence"

    def __init__(self, tokenizer: PunktSentenceTokenizer | None = None) -> None:
        self.tokenizer = tokenizer or PunktSentenceTokenizer()

    def split_sentences(self, text: str) -> list[str]:
        """Split ``text`` into stripped, non-empty sentences."""
        return [s.strip() for s in self.tokenizer.tokenize(text) if s.strip()]

    def segment(self, text: str) -> list[TextUnit]:
        return units_from_sentences(self.split_sentences(text))
