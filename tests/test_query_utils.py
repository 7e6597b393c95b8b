"""Tests for probe extraction."""

from conftest import EINSTEIN_TEXT

from plagiasure.schemas.plagiarism_schemas import ProbeKind
from plagiasure.utils.query_utils import (
    build_probes,
    extract_academic_phrases,
    extract_capitalized_terms,
    extract_key_phrases,
    extract_sentence_probes,
    quote_probe,
    split_sentences,
    split_text_into_chunks,
)


class TestSentenceProbes:
    def test_short_fragment_excluded(self):
        probes = extract_sentence_probes("Hi. This is a sufficiently long sentence for testing purposes.", 30)
        assert probes == ["This is a sufficiently long sentence for testing purposes"]

    def test_order_preserved(self):
        text = "First sentence that is long enough here! Second sentence that is long enough too? Third."
        assert extract_sentence_probes(text, 25) == [
            "First sentence that is long enough here",
            "Second sentence that is long enough too",
        ]

    def test_threshold_is_strict(self):
        sentence = "x" * 30
        assert extract_sentence_probes(sentence + ".", 30) == []
        assert extract_sentence_probes(sentence + "y.", 30) == [sentence + "y"]

    def test_repeated_punctuation_and_empty_input(self):
        assert split_sentences("Wait... what?! Yes.") == ["Wait", "what", "Yes"]
        assert split_sentences("") == []
        assert extract_sentence_probes(None, 10) == []

    def test_quote_probe_truncates(self):
        assert quote_probe("abcdefghij", 4) == '"abcd"'


class TestAcademicPhrases:
    def test_long_sentences_truncated_and_capped(self):
        sentence = "Academic prose that keeps going well past the minimum length " * 3
        text = ". ".join([sentence] * 7)
        phrases = extract_academic_phrases(text)
        assert len(phrases) == 5
        assert all(len(p) == 100 for p in phrases)

    def test_short_sentences_ignored(self):
        assert extract_academic_phrases("Too short to cite. Also short.") == []


class TestCapitalizedTerms:
    def test_einstein(self):
        assert extract_capitalized_terms(EINSTEIN_TEXT) == ["Albert Einstein"]

    def test_capped_to_three(self):
        text = "Quantum Field Theory and General Relativity meet Standard Model Physics in Loop Quantum Gravity."
        terms = extract_capitalized_terms(text)
        assert terms == ["Quantum Field Theory", "General Relativity", "Standard Model Physics"]


class TestKeyPhrases:
    def test_proper_nouns_and_concepts(self):
        assert extract_key_phrases(EINSTEIN_TEXT) == ["Albert Einstein", "theory of"]

    def test_duplicates_dropped(self):
        text = "Marie Curie studied radiation for years. Then she met Marie Curie again in Paris city."
        assert extract_key_phrases(text) == ["Marie Curie"]


class TestChunksAndProbes:
    def test_chunks(self):
        chunks = split_text_into_chunks("a" * 2500, 1000)
        assert [len(c) for c in chunks] == [1000, 1000, 500]
        assert split_text_into_chunks("", 1000) == []

    def test_build_probes_deterministic(self):
        first = build_probes(EINSTEIN_TEXT)
        assert first == build_probes(EINSTEIN_TEXT)
        kinds = {p.kind for p in first}
        assert kinds == {
            ProbeKind.SENTENCE,
            ProbeKind.ACADEMIC_PHRASE,
            ProbeKind.CAPITALIZED_TERM,
            ProbeKind.KEY_PHRASE,
            ProbeKind.CHUNK,
        }
