from wordle_app.models.attempt import Attempt


def test_append_and_word():
    attempt = Attempt(word_length=5)
    for letter in "apple":
        attempt.append_letter(letter)
    assert attempt.word == "apple"
    assert attempt.is_full


def test_append_when_full_is_ignored():
    attempt = Attempt(word_length=3)
    for letter in "abcd":
        attempt.append_letter(letter)
    assert attempt.letters == ["a", "b", "c"]


def test_remove_letter():
    attempt = Attempt(word_length=5)
    attempt.append_letter("a")
    attempt.append_letter("b")
    attempt.remove_letter()
    assert attempt.word == "a"
    attempt.remove_letter()
    attempt.remove_letter()
    assert attempt.word == ""
    assert attempt.letters == []
