import pytest

from wordle_app import create_app
from wordle_app.config import TestingConfig
from wordle_app.services import game_service as game_service_module
from wordle_app.services import word_service as word_service_module
from wordle_app.services.word_service import WordListError


class MissingWordListConfig(TestingConfig):
    WORD_LIST_PATH = "/nonexistent/word_database.txt"


@pytest.fixture
def fresh_services():
    word_service_module._word_provider = None
    game_service_module._game_service = None
    yield
    word_service_module._word_provider = None
    game_service_module._game_service = None


def test_missing_word_list_is_fatal(fresh_services):
    with pytest.raises(WordListError, match="not found"):
        create_app(MissingWordListConfig)
    assert game_service_module.get_game_service() is None


def test_word_length_without_words_is_fatal(fresh_services, word_file):
    class NineLetterConfig(TestingConfig):
        WORD_LIST_PATH = word_file
        WORD_LENGTH = 9

    with pytest.raises(WordListError, match="No words of length 9"):
        create_app(NineLetterConfig)
    assert game_service_module.get_game_service() is None


def test_create_app_loads_word_list(fresh_services, word_file):
    class WordFileConfig(TestingConfig):
        WORD_LIST_PATH = word_file

    app = create_app(WordFileConfig)
    assert word_service_module.get_word_provider().is_valid("apple")
    assert game_service_module.get_game_service().word_length == 5
    assert app.test_client().post("/api/new_game").status_code == 200
