"""Tests for the style checker."""

import pytest
from proofreader.errors import ConfigurationError
from proofreader.models.config import StyleSettings
from proofreader.style import StyleChecker


def reasons(suggestions):
    return [s.reason for s in suggestions]


class TestStyleRules:
    """Tests for individual style rules with default settings."""

    @pytest.fixture
    def checker(self):
        return StyleChecker()

    def test_passive_voice(self, checker):
        """Test passive voice detection."""
        suggestions = checker.analyze("The cake was eaten.")
        assert reasons(suggestions) == ['"was eaten" may be passive voice']
        assert suggestions[0].index == 9
        assert suggestions[0].offset == 9

    def test_not_a_participle(self, checker):
        """Test words ending in -ed that are not participles."""
        assert checker.analyze("It is indeed true.") == []

    def test_starts_with_so(self, checker):
        """Test 'So' at sentence start."""
        suggestions = checker.analyze("So the cat was stolen.")
        assert reasons(suggestions) == [
            '"So" adds no meaning',
            '"was stolen" may be passive voice',
        ]

    def test_there_is(self, checker):
        """Test 'There is' openers."""
        assert reasons(checker.analyze("There is a cat.")) == ['"There is" is unnecessary verbiage']

    def test_lexical_illusion(self, checker):
        """Test repeated words."""
        suggestions = checker.analyze("the the cat")
        assert reasons(suggestions) == ['"the the" is repeated']
        assert suggestions[0].span == (0, 7)

    def test_wordy(self, checker):
        """Test wordy phrases."""
        assert reasons(checker.analyze("We utilize it in order to win.")) == [
            '"utilize" is wordy or unneeded',
            '"in order to" is wordy or unneeded',
        ]

    def test_cliche(self, checker):
        """Test cliches."""
        assert reasons(checker.analyze("We are back to square one.")) == [
            '"back to square one" is a cliche'
        ]

    def test_same_span_merged(self, checker):
        """Test rules flagging the same span produce one suggestion."""
        suggestions = checker.analyze("It was extremely good.")
        assert reasons(suggestions) == ['"extremely" is a weasel word and can weaken meaning']
        assert suggestions[0].rule == "weasel"

    def test_ordered_by_position(self, checker):
        """Test suggestions come back in text order."""
        suggestions = checker.analyze("The cake was eaten. So it goes.")
        assert [s.index for s in suggestions] == [9, 20]

    def test_offsets_point_at_match(self, checker):
        """Test index/offset locate the flagged text."""
        text = "Many people were surprisingly quiet."
        for s in checker.analyze(text):
            assert text[s.index : s.index + s.offset].lower() in s.reason.lower()

    def test_blank_text(self, checker):
        """Test blank input yields nothing."""
        assert checker.analyze("") == []
        assert checker.analyze("   ") == []


class TestStyleSettings:
    """Tests for enabling and disabling rules."""

    def test_disable_rule(self):
        """Test turning a rule off."""
        assert StyleChecker({"passive": False}).analyze("The cake was eaten.") == []

    def test_write_good_option_names(self):
        """Test camelCase write-good option names."""
        checker = StyleChecker({"thereIs": False, "tooWordy": False})
        assert checker.analyze("There is a need in order to win.") == []
        assert checker.settings.there_is is False

    def test_eprime_off_by_default(self):
        """Test E-Prime is opt-in."""
        assert StyleChecker().analyze("It is fine.") == []
        assert reasons(StyleChecker({"eprime": True}).analyze("It is fine.")) == [
            "\"is\" is a form of 'to be'"
        ]

    def test_whitelist(self):
        """Test whitelisted phrases are never flagged."""
        checker = StyleChecker({"whitelist": ["very"]})
        assert checker.analyze("It is very nice.") == []

    def test_unknown_option(self):
        """Test invalid settings raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            StyleChecker({"bogus": True})

    def test_reconfigure(self):
        """Test configure replaces the active rule set."""
        checker = StyleChecker()
        checker.configure(StyleSettings(weasel=False, adverb=False))
        assert checker.analyze("It was extremely good.") == []
        assert "weasel" not in [r.name for r in checker.rules]

        checker.configure(None)
        assert len(checker.analyze("It was extremely good.")) == 1
