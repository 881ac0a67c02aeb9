from wordle_app.utils.game_logger import game_logger


def test_response_summary_hides_answer():
    response = {
        "success": True,
        "state": {"status": "LOST", "score": 0, "streak": 0, "attempts_left": 0,
                  "validation_error": None, "rows": [], "answer": "apple"},
    }
    summary = game_logger._summarize_response(response)
    assert summary["success"]
    assert "apple" not in str(summary)
    assert summary["state"]["status"] == "LOST"
    assert summary["state"]["answer_revealed"]
    assert "rows" not in summary["state"]


def test_response_summary_of_non_dict():
    assert game_logger._summarize_response(["x"]) == {"data_type": "list"}
