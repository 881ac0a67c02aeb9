from wordle_app.models.game import GameState, GameStatus, ValidationError
from wordle_app.models.letter import LetterPosition

from conftest import type_word


def test_new_game(game):
    assert game.status == GameStatus.IN_PROGRESS
    assert game.word_length == 5
    assert game.attempts == []
    assert game.current_attempt.word == ""
    assert game.score == 0
    assert game.streak == 0
    assert game.validation_error is None


def test_random_target_word(words):
    game = GameState(words, word_length=5, total_attempts=6)
    assert words.is_valid(game.target_word)
    assert game.word_length == 5


def test_enter_letter_is_capped_at_word_length(game):
    type_word(game, "APPLES")
    assert game.current_attempt.word == "apple"


def test_remove_letter_on_empty_attempt(game):
    for _ in range(3):
        game.remove_letter()
    assert game.current_attempt.word == ""
    assert game.attempts == []
    assert game.validation_error is None


def test_missing_characters(game):
    type_word(game, "app")
    assert game.submit_attempt() == GameStatus.IN_PROGRESS
    assert game.validation_error == ValidationError.MISSING_CHARACTERS
    assert game.attempts == []
    assert game.current_attempt.word == "app"


def test_invalid_word(game):
    type_word(game, "zzzzz")
    game.submit_attempt()
    assert game.validation_error == ValidationError.INVALID_WORD
    assert game.attempts == []
    assert game.current_attempt.word == "zzzzz"


def test_edits_clear_validation_error(game):
    type_word(game, "zzzzz")
    game.submit_attempt()
    game.remove_letter()
    assert game.validation_error is None

    game.submit_attempt()
    assert game.validation_error == ValidationError.MISSING_CHARACTERS
    game.enter_letter("z")
    assert game.validation_error is None


def test_win_on_first_attempt(game):
    type_word(game, "apple")
    assert game.submit_attempt() == GameStatus.WON
    assert game.status == GameStatus.WON
    assert game.score == 700
    assert game.streak == 1
    assert game.validation_error is None


def test_win_on_third_attempt(game):
    for word in ["crane", "slate", "apple"]:
        type_word(game, word)
        game.submit_attempt()
    assert game.status == GameStatus.WON
    assert game.score == 700 - 200
    assert game.streak == 1


def test_loss_and_next_round_resets_score(game):
    type_word(game, "apple")
    game.submit_attempt()
    game.next_round()
    game.target_word = "apple"
    assert game.score == 700
    assert game.streak == 1

    for word in ["ample", "angle", "arise", "crane", "slate", "mount"]:
        assert game.status == GameStatus.IN_PROGRESS
        type_word(game, word)
        game.submit_attempt()
    assert game.status == GameStatus.LOST
    assert game.attempts_left == 0

    game.next_round()
    assert game.score == 0
    assert game.streak == 0
    assert game.status == GameStatus.IN_PROGRESS
    assert game.attempts == []


def test_next_round_after_win_keeps_score(game):
    type_word(game, "apple")
    game.submit_attempt()
    game.next_round()
    assert game.score == 700
    assert game.streak == 1
    assert game.attempts == []
    assert game.current_attempt.word == ""
    assert game.words.is_valid(game.target_word)


def test_finished_round_ignores_input(game):
    type_word(game, "apple")
    game.submit_attempt()

    type_word(game, "crane")
    assert game.current_attempt.word == ""
    game.remove_letter()
    assert game.submit_attempt() == GameStatus.WON
    assert len(game.attempts) == 1
    assert game.score == 700


def test_letter_at(game):
    type_word(game, "paper")
    game.submit_attempt()
    type_word(game, "ap")

    first = game.letter_at(0, 0)
    assert first.value == "p"
    assert first.position == LetterPosition.PRESENT
    assert not first.in_current_attempt
    assert game.letter_at(0, 2).position == LetterPosition.CORRECT
    assert game.letter_at(0, 4).position == LetterPosition.ABSENT

    active = game.letter_at(1, 1)
    assert active.value == "p"
    assert active.position == LetterPosition.CORRECT
    assert active.in_current_attempt


def test_letter_at_out_of_range(game):
    type_word(game, "ap")
    assert game.letter_at(0, 2) is None
    assert game.letter_at(1, 0) is None
    assert game.letter_at(5, 4) is None
    assert game.letter_at(-1, 0) is None
    assert game.letter_at(0, -1) is None


def test_keyboard_position(game):
    assert game.keyboard_position("p") is None

    type_word(game, "paper")
    game.submit_attempt()
    assert game.keyboard_position("p") == LetterPosition.CORRECT
    assert game.keyboard_position("a") == LetterPosition.PRESENT
    assert game.keyboard_position("e") == LetterPosition.PRESENT
    assert game.keyboard_position("r") == LetterPosition.ABSENT
    assert game.keyboard_position("z") is None


def test_keyboard_ignores_active_attempt(game):
    type_word(game, "mount")
    assert game.keyboard_position("m") is None


def test_enter_letter_ignores_anything_but_one_character(game):
    for _ in range(5):
        game.enter_letter("")
    game.enter_letter("ap")
    game.enter_letter("ple")
    assert game.current_attempt.letters == []
    assert not game.current_attempt.is_full

    game.enter_letter("a")
    assert game.current_attempt.word == "a"
    assert game.letter_at(0, 0).value == "a"
    assert game.letter_at(0, 1) is None


def test_ignored_input_still_clears_validation_error(game):
    game.submit_attempt()
    assert game.validation_error == ValidationError.MISSING_CHARACTERS
    game.enter_letter("")
    assert game.validation_error is None


def test_next_round_clears_validation_error(game):
    type_word(game, "zzzzz")
    game.submit_attempt()
    assert game.validation_error == ValidationError.INVALID_WORD

    game.next_round()
    assert game.validation_error is None
    assert game.current_attempt.word == ""
