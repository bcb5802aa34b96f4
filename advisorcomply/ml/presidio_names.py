"""
NER-backed name detector, selected with NAME_DETECTOR=presidio.

Drop-in replacement for RegexNameDetector: finds PERSON entities with
Presidio's spaCy pipeline instead of the two-capitalized-words heuristic.
"""
import logging
from typing import List

from presidio_analyzer import AnalyzerEngine
from presidio_analyzer.nlp_engine import NlpEngineProvider

from advisorcomply.rules.client_privacy import NameDetector

logger = logging.getLogger("advisorcomply.ml.presidio")


class PresidioNameDetector(NameDetector):

    def __init__(self, model_name: str = "en_core_web_sm", score_threshold: float = 0.6):
        self.score_threshold = score_threshold
        provider = NlpEngineProvider(nlp_configuration={
            "nlp_engine_name": "spacy",
            "models": [{"lang_code": "en", "model_name": model_name}],
        })
        self.analyzer = AnalyzerEngine(
            nlp_engine=provider.create_engine(),
            supported_languages=["en"],
        )
        logger.info(f"Presidio name detector loaded with {model_name}")

    def find_names(self, text: str) -> List[str]:
        if not text:
            return []

        results = self.analyzer.analyze(
            text=text,
            entities=["PERSON"],
            language="en",
            score_threshold=self.score_threshold,
        )
        return [text[r.start:r.end] for r in results]
