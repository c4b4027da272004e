import json

import pytest

from questionforge.models import Question, SubQuestion, dump_questions, parse_questions

SAMPLE = json.dumps(
    [
        {
            "level_name": "N3",
            "category_name": "読解",
            "chapter": "第一章",
            "sentence": "本文です。",
            "prerequisites": "前提",
            "extra": "ignored",
            "sub_questions": [
                {
                    "sentence": "問い",
                    "select_answer": [{"1": "あ"}, {"2": "い"}],
                    "answer": "1",
                }
            ],
        }
    ],
    ensure_ascii=False,
)


def _question(**overrides):
    data = json.loads(SAMPLE)[0]
    data.update(overrides)
    return json.dumps([data], ensure_ascii=False)


def test_parse_fills_defaults():
    (question,) = parse_questions(SAMPLE)
    assert question.id == 0
    assert question.level_id == 0
    assert question.category_id == 0
    assert question.level_name == "N3"
    assert question.chapter == "第一章"
    (sub,) = question.sub_questions
    assert (sub.id, sub.hint_id, sub.answer_id) == (0, 0, 0)
    assert sub.select_answer == [{"1": "あ"}, {"2": "い"}]
    assert sub.answer == "1"


def test_dump_then_parse_round_trip():
    questions = [
        Question(
            level_name="N2",
            category_name="文法",
            chapter="c",
            sentence="s",
            prerequisites="p",
            sub_questions=[SubQuestion(sentence="q", select_answer=[{"a": "b"}], answer="a", id=7)],
            id=3,
            level_id=2,
            category_id=5,
        )
    ]
    assert parse_questions(dump_questions(questions)) == questions


def test_dump_field_order_and_unicode():
    text = dump_questions(parse_questions(SAMPLE))
    item = json.loads(text)[0]
    assert list(item) == [
        "id",
        "level_id",
        "level_name",
        "category_id",
        "category_name",
        "chapter",
        "sentence",
        "prerequisites",
        "sub_questions",
    ]
    assert list(item["sub_questions"][0]) == [
        "id",
        "hint_id",
        "answer_id",
        "sentence",
        "select_answer",
        "answer",
    ]
    assert "読解" in text
    assert "extra" not in item


def test_dump_is_indented():
    text = dump_questions(parse_questions(SAMPLE))
    assert text.splitlines()[1].startswith("  {")


def test_dump_empty():
    assert dump_questions([]) == "[]"


def test_to_dict_round_trip_for_sub_question():
    sub = SubQuestion(sentence="s", select_answer=[{"x": "y"}], answer="x", hint_id=4)
    assert sub.to_dict()["hint_id"] == 4
    assert sub.to_dict()["select_answer"] == [{"x": "y"}]


def test_missing_required_field():
    data = json.loads(SAMPLE)
    del data[0]["chapter"]
    with pytest.raises(ValueError, match="chapter"):
        parse_questions(json.dumps(data))


@pytest.mark.parametrize("bad", [-1, True, 1.5, "3", 2**32])
def test_bad_id_rejected(bad):
    with pytest.raises(ValueError):
        parse_questions(_question(id=bad))


def test_top_level_must_be_array():
    with pytest.raises(ValueError):
        parse_questions(json.dumps(json.loads(SAMPLE)[0]))


def test_invalid_json_rejected():
    with pytest.raises(ValueError):
        parse_questions("[{")


def test_non_string_choice_rejected():
    data = json.loads(SAMPLE)
    data[0]["sub_questions"][0]["select_answer"] = [{"1": 2}]
    with pytest.raises(ValueError):
        parse_questions(json.dumps(data))


def test_nan_rejected():
    with pytest.raises(ValueError):
        parse_questions("[NaN]")