"""Unit tests for the phonetic engine."""

import pytest

from phonetic_encoders.core.engine import DEFAULT_ALGORITHMS, PhoneticEngine
from phonetic_encoders.core.exceptions import PhoneticEncoderError, UnknownAlgorithmError
from phonetic_encoders.core.soundex import AMERICAN_MAPPING, Soundex


class TestPhoneticEngine:
    """Test cases for the PhoneticEngine class."""

    @pytest.fixture
    def engine(self):
        """Create an engine instance for testing."""
        return PhoneticEngine()

    def test_engine_initialization(self, engine):
        stats = engine.get_stats()
        assert stats["total_queries"] == 0
        assert stats["total_encodings"] == 0
        assert stats["empty_results"] == 0
        assert stats["average_execution_time_ms"] == 0.0
        assert stats["algorithms"] == sorted(DEFAULT_ALGORITHMS)

    def test_list_algorithms(self, engine):
        names = [info.name for info in engine.list_algorithms()]
        assert names == sorted(names)
        assert "soundex" in names
        assert "double_metaphone" in names
        assert all(info.description for info in engine.list_algorithms())

    def test_encode_single_algorithm(self, engine):
        response = engine.encode("Robert", ["soundex"])

        assert response.text == "Robert"
        assert len(response.results) == 1
        assert response.results[0].algorithm == "soundex"
        assert response.results[0].primary == "R163"
        assert response.results[0].alternates == []
        assert response.execution_time_ms >= 0

    def test_algorithm_names_are_case_insensitive(self, engine):
        assert engine.encode("Robert", ["SOUNDEX"]).results[0].primary == "R163"

    def test_encode_all(self, engine):
        response = engine.encode_all("Cardillo")
        by_algorithm = {result.algorithm: result for result in response.results}

        assert set(by_algorithm) == set(DEFAULT_ALGORITHMS)
        assert by_algorithm["double_metaphone"].primary == "KRTL"
        assert by_algorithm["double_metaphone"].alternates == ["KRT"]

    def test_encode_sorted_alternates(self, engine):
        engine.register(
            "soundex_prefixes",
            Soundex(AMERICAN_MAPPING, prefixes_enabled=True)
        )
        result = engine.encode("Smith - Wesson-WILLIAMS-LLOYD", ["soundex_prefixes"]).results[0]
        assert result.primary == "S530"
        assert result.alternates == ["L300", "W250", "W452"]

    def test_empty_result(self, engine):
        result = engine.encode("#@", ["nysiis"]).results[0]
        assert result.primary is None
        assert result.alternates == []
        assert engine.get_stats()["empty_results"] == 1

    def test_unknown_algorithm(self, engine):
        with pytest.raises(UnknownAlgorithmError):
            engine.encode("Robert", ["caverphone"])

        assert engine.get_stats()["unknown_algorithms"] == 1

    def test_unknown_algorithm_error_types(self, engine):
        with pytest.raises(KeyError):
            engine.get_encoder("caverphone")
        with pytest.raises(PhoneticEncoderError) as exc_info:
            engine.get_encoder("caverphone")
        assert exc_info.value.input == "caverphone"

    def test_encode_batch(self, engine):
        response = engine.encode_batch(["Robert", "Rupert", "#@"], "soundex")

        assert response.algorithm == "soundex"
        assert response.total == 3
        assert [result.primary for result in response.results] == ["R163", "R163", None]

    def test_encode_batch_unknown_algorithm(self, engine):
        with pytest.raises(UnknownAlgorithmError):
            engine.encode_batch(["Robert"], "caverphone")
        assert engine.get_stats()["total_encodings"] == 0

    def test_difference(self, engine):
        response = engine.difference("Smith", "Smythe", "soundex")

        assert response.first_encoding == "S530"
        assert response.second_encoding == "S530"
        assert response.difference == 4

    def test_difference_with_empty_input(self, engine):
        response = engine.difference("", "Smith", "soundex")
        assert response.first_encoding is None
        assert response.difference == 0

    def test_stats_tracking(self, engine):
        engine.encode("Robert", ["soundex", "nysiis"])
        engine.encode_batch(["Knight", "Raymond"], "nysiis")
        engine.difference("Ann", "Andrew", "soundex")

        stats = engine.get_stats()
        assert stats["total_queries"] == 3
        assert stats["total_encodings"] == 4
        assert stats["comparisons"] == 1
        assert stats["queries_by_algorithm"] == {"soundex": 2, "nysiis": 3}
        assert stats["average_execution_time_ms"] >= 0

    def test_get_stats_returns_copy(self, engine):
        engine.encode("Robert", ["soundex"])
        stats = engine.get_stats()
        stats["queries_by_algorithm"]["soundex"] = 100

        assert engine.get_stats()["queries_by_algorithm"]["soundex"] == 1

    def test_clear(self, engine):
        engine.encode("Robert")
        engine.clear()

        stats = engine.get_stats()
        assert stats["total_queries"] == 0
        assert stats["queries_by_algorithm"] == {}

    def test_custom_registry(self):
        engine = PhoneticEngine({"genealogy": Soundex.genealogy_encoder})
        assert [info.name for info in engine.list_algorithms()] == ["genealogy"]
        assert engine.encode("Lippmann").results[0].primary == "L150"

    def test_custom_registry_names_are_case_insensitive(self):
        engine = PhoneticEngine({"Genealogy": Soundex.genealogy_encoder})
        assert [info.name for info in engine.list_algorithms()] == ["genealogy"]
        assert engine.get_encoder("GENEALOGY") is Soundex.genealogy_encoder
        assert engine.encode("Lippmann", ["Genealogy"]).results[0].primary == "L150"

    def test_empty_registry(self):
        engine = PhoneticEngine({})
        assert engine.list_algorithms() == []

        with pytest.raises(UnknownAlgorithmError):
            engine.get_encoder("soundex")


class TestDefaultEncoders:
    """Properties shared by every registered encoder."""

    @pytest.fixture(params=sorted(DEFAULT_ALGORITHMS))
    def encoder(self, request):
        return DEFAULT_ALGORITHMS[request.param]

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_input_has_no_encoding(self, encoder, text):
        assert encoder.encode(text) is None

    def test_case_insensitive(self, encoder):
        assert encoder.encode("testing") == encoder.encode("TESTING")

    def test_deterministic(self, encoder):
        names = ["Ashcraft", "Gutierrez", "O'Brien", "Van Dyke", "Schmidt"]
        first = [encoder.encode(name) for name in names]
        second = [encoder.encode(name) for name in names]
        assert first == second

    def test_empty_difference(self, encoder):
        assert encoder.difference("", "") == 0
        assert encoder.difference(None, "Robert") == 0
