"""
Unit tests for column type inference
"""

from clinical_qa.config import QaConfig
from clinical_qa.stats.type_inferencer import TypeInferencer, is_date, numeric_series


class TestTypeInferencer:
    """Test cases for TypeInferencer"""

    def setup_method(self):
        """Set up test fixtures"""
        self.inferencer = TypeInferencer(QaConfig())

    def test_empty_column(self):
        """Test a column with only blanks"""
        assert self.inferencer.detect(["", "  ", None]) == "empty"
        assert self.inferencer.detect([]) == "empty"

    def test_number(self):
        """Test integers and floats"""
        assert self.inferencer.detect(["1", "2.5", "-3", "1e3"]) == "number"

    def test_number_at_threshold(self):
        """Test that exactly 80% numeric values is enough"""
        assert self.inferencer.detect(["1", "2", "3", "4", "x"]) == "number"

    def test_number_wins_over_boolean(self):
        """Test that 0/1 columns are numeric because numbers are checked first"""
        assert self.inferencer.detect(["0", "1", "1", "0"]) == "number"

    def test_blanks_are_ignored(self):
        """Test that blanks do not dilute the ratio"""
        assert self.inferencer.detect(["1", "", "2", "", ""]) == "number"

    def test_date(self):
        """Test ISO and day-first dates"""
        assert self.inferencer.detect(["2021-03-04", "15/06/2020", "2020-12-31"]) == "date"

    def test_invalid_calendar_date_is_not_a_date(self):
        """Test that pattern matches must also parse"""
        assert not is_date("2020-02-30")
        assert not is_date("2020-13-01")
        assert is_date("2020-02-29")

    def test_date_needs_pattern(self):
        """Test that parseable values without the pattern are not dates"""
        assert not is_date("March 4 2021")

    def test_boolean(self):
        """Test case-insensitive boolean tokens"""
        assert self.inferencer.detect(["Yes", "no", "TRUE", "false"]) == "boolean"

    def test_mixed(self):
        """Test columns where some but not enough values match a type"""
        assert self.inferencer.detect(["abc", "1", "def"]) == "mixed"

    def test_string(self):
        """Test free text"""
        assert self.inferencer.detect(["alice", "bob", "carol"]) == "string"

    def test_threshold_is_configurable(self):
        """Test that the threshold comes from the configuration"""
        lenient = TypeInferencer(QaConfig(type_threshold=0.5))
        strict = TypeInferencer(QaConfig(type_threshold=0.9))

        assert lenient.detect(["1", "2", "x", "y"]) == "number"
        assert strict.detect(["1", "2", "3", "4", "x"]) == "mixed"


class TestNumericSeries:
    """Test cases for numeric parsing"""

    def test_unparseable_values_become_nan(self):
        """Test coercion of non-numeric values"""
        series = numeric_series(["1", "abc", "2.5"])
        assert series.tolist()[0] == 1.0
        assert series.isna().tolist() == [False, True, False]
