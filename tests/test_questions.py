"""Unit tests for the question model and set builder."""

import itertools

import pytest

from aptitude_arena.errors import QuestionPoolExhaustedError
from aptitude_arena.questions import (
    MAX_ATTEMPTS_PER_QUESTION,
    OPTION_COUNT,
    Question,
    build_options,
    build_question_set,
    format_number,
    make_question,
    make_question_id,
    round_half_up,
    validate_request,
)


def _question(prompt: str) -> Question:
    return Question(
        id=f"test-{prompt}",
        question=prompt,
        options=("1", "2", "3", "4"),
        correct_answer=2,
        explanation="",
        topic="Test",
        hint="",
    )


class TestQuestion:
    """Tests for the Question dataclass."""

    def test_check_answer(self):
        question = _question("What?")
        assert question.check_answer(2) is True
        assert question.check_answer(0) is False

    def test_correct_option(self):
        assert _question("What?").correct_option == "3"

    def test_to_dict_uses_camel_case(self):
        """Serialized questions use the presentation-layer keys."""
        data = _question("What?").to_dict()
        assert data["correctAnswer"] == 2
        assert data["options"] == ["1", "2", "3", "4"]
        assert set(data) == {"id", "question", "options", "correctAnswer", "explanation", "topic", "hint"}


class TestQuestionId:
    """Tests for question id generation."""

    def test_has_prefix(self):
        assert make_question_id("perc").startswith("perc-")

    def test_ids_differ(self):
        assert make_question_id("perc") != make_question_id("perc")


class TestRounding:
    """Tests for half-up rounding and number formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (2.4, 2), (-2.5, -3), (7, 7)],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    @pytest.mark.parametrize(
        "value,digits,expected",
        [
            (12.25, 1, "12.3"),
            (3.0, 1, "3.0"),
            (150, 0, "150"),
            (149.5, 0, "150"),
            (-0.01, 1, "0.0"),
        ],
    )
    def test_format_number(self, value, digits, expected):
        assert format_number(value, digits) == expected


class TestBuildOptions:
    """Tests for option assembly."""

    def test_correct_index_points_at_correct_value(self):
        options, index = build_options("42", ["40", "44", "84"])
        assert len(options) == OPTION_COUNT
        assert options[index] == "42"
        assert sorted(options) == sorted(["42", "40", "44", "84"])

    def test_duplicate_distractors_are_perturbed(self):
        """Colliding distractors are replaced until all four options differ."""
        replacements = iter(["50", "60"])
        options, index = build_options("42", ["42", "44", "44"], perturb=lambda: next(replacements))
        assert len(set(options)) == OPTION_COUNT
        assert options[index] == "42"
        assert set(options) == {"42", "44", "50", "60"}

    def test_duplicates_without_perturb_rejected(self):
        with pytest.raises(ValueError):
            build_options("42", ["42", "44", "45"])

    def test_perturb_that_never_helps_gives_up(self):
        with pytest.raises(ValueError):
            build_options("42", ["42", "44", "45"], perturb=lambda: "42")

    def test_wrong_distractor_count_rejected(self):
        with pytest.raises(ValueError):
            build_options("42", ["40", "44"])

    def test_correct_position_varies(self):
        """The correct option does not always land in the same slot."""
        positions = {build_options("a", ["b", "c", "d"])[1] for _ in range(200)}
        assert len(positions) > 1


class TestMakeQuestion:
    """Tests for make_question."""

    def test_builds_question(self):
        question = make_question(
            prefix="test",
            prompt="What is 2 + 2?",
            correct="4",
            distractors=["3", "5", "22"],
            explanation="2 + 2 = 4",
            topic="Arithmetic",
            hint="Add them.",
        )
        assert question.id.startswith("test-")
        assert question.question == "What is 2 + 2?"
        assert question.correct_option == "4"
        assert question.topic == "Arithmetic"


class TestBuildQuestionSet:
    """Tests for the de-duplicating set builder."""

    def test_returns_requested_count_with_distinct_prompts(self):
        counter = itertools.count()
        questions = build_question_set("test", lambda level: _question(f"Q{next(counter)}"), 5)
        assert len(questions) == 5
        assert len({q.question for q in questions}) == 5

    def test_duplicates_are_skipped(self):
        prompts = iter(["A", "A", "B", "A", "C"])
        questions = build_question_set("test", lambda level: _question(next(prompts)), 3)
        assert [q.question for q in questions] == ["A", "B", "C"]

    def test_level_is_passed_to_generator(self):
        seen = []

        def generate(level):
            seen.append(level)
            return _question(f"Q{len(seen)}")

        build_question_set("test", generate, 2, level=17)
        assert seen == [17, 17]

    def test_exhausted_pool_raises(self):
        """A pool too small for the request fails after the attempt budget."""
        calls = []

        def generate(level):
            calls.append(level)
            return _question(f"Q{len(calls) % 2}")

        with pytest.raises(QuestionPoolExhaustedError) as exc_info:
            build_question_set("tiny", generate, 3)

        assert exc_info.value.category == "tiny"
        assert exc_info.value.requested == 3
        assert exc_info.value.produced == 2
        assert len(calls) == 3 * MAX_ATTEMPTS_PER_QUESTION

    @pytest.mark.parametrize("count,level", [(0, 1), (-1, 1), (5, 0)])
    def test_invalid_request_rejected(self, count, level):
        with pytest.raises(ValueError):
            build_question_set("test", lambda level: _question("Q"), count, level)

    def test_validate_request_accepts_minimums(self):
        validate_request(1, 1)
