import os
import random
import tempfile

import pytest

# Keep log files out of the working tree; must be set before wordle_app is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle_logs_'))

from wordle_app import create_app
from wordle_app.config import TestingConfig
from wordle_app.models.game import GameState
from wordle_app.services import game_service as game_service_module
from wordle_app.services import word_service as word_service_module
from wordle_app.services.game_service import initialize_game_service
from wordle_app.services.word_service import WordProvider, initialize_word_provider

WORDS = [
    "apple", "ample", "angle", "arise", "crane", "slate", "mount", "paper", "happy",
    "tree", "pods",
    "banana",
]


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    # Mixed case, padding and blank lines are normalized on load
    path.write_text("\n".join(WORDS[:3]) + "\n\n  ARISE \n" + "\n".join(WORDS[4:]) + "\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def words(word_file):
    return WordProvider(word_file, rng=random.Random(0))


@pytest.fixture
def game(words):
    return GameState(words, total_attempts=6, target_word="apple")


@pytest.fixture
def client(word_file):
    provider = initialize_word_provider(word_file, rng=random.Random(0))
    initialize_game_service(provider, word_length=5, total_attempts=6)
    app = create_app(TestingConfig)
    yield app.test_client()
    word_service_module._word_provider = None
    game_service_module._game_service = None


def type_word(game, word):
    for letter in word:
        game.enter_letter(letter)
