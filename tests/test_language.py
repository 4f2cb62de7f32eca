"""Tests for request language resolution and translation lookup."""

import pytest

from utils.language import resolve_language
from utils.translations import TRANSLATIONS, get_translation


class TestResolveLanguage:
    def test_query_parameter_wins(self):
        assert resolve_language({'lang': 'fr'}, {'language': 'en'}) == 'fr'

    def test_cookie_used_when_query_missing(self):
        assert resolve_language({}, {'language': 'fr'}) == 'fr'

    def test_cookie_used_when_query_empty(self):
        assert resolve_language({'lang': ''}, {'language': 'fr'}) == 'fr'

    def test_defaults_to_english(self):
        assert resolve_language({}, {}) == 'en'

    @pytest.mark.parametrize('value', ['de', 'FR', 'En', ' fr', 'french', '0'])
    def test_unsupported_values_coerce_to_english(self, value):
        assert resolve_language({'lang': value}, {}) == 'en'
        assert resolve_language({}, {'language': value}) == 'en'

    def test_unsupported_query_does_not_consult_cookie(self):
        assert resolve_language({'lang': 'de'}, {'language': 'fr'}) == 'en'


class TestTranslations:
    def test_every_key_has_english(self):
        for key, entry in TRANSLATIONS.items():
            assert 'en' in entry, key

    def test_lookup_in_requested_language(self):
        assert get_translation('send_message', 'fr') == 'Envoyer le Message'

    def test_missing_language_falls_back_to_english(self):
        assert get_translation('send_message', 'de') == 'Send Message'

    def test_unknown_key_returns_key(self):
        assert get_translation('no_such_key', 'fr') == 'no_such_key'

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            TRANSLATIONS['new_key'] = {'en': 'x'}
