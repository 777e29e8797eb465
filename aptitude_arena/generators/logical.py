"""
Logical reasoning question generator.

Templates: number series, coding-decoding, blood relations, direction
sense and syllogism-style deduction. Levels do not change the templates.
"""

from collections.abc import Callable

from aptitude_arena.models import Category
from aptitude_arena.questions import Question, build_question_set, make_question
from aptitude_arena.randomness import choice, random_int, shuffle

SERIES_LENGTH = 5

# Name -> term function of (start, parameter, index)
SERIES_PATTERNS: dict[str, Callable[[int, int, int], int]] = {
    "Add constant": lambda start, step, i: start + i * step,
    "Multiply constant": lambda start, factor, i: start * factor**i,
    "Square sequence": lambda start, _param, i: (start + i) ** 2,
}

CODING_WORDS = ["CAT", "DOG", "BAT", "RAT", "PIG", "COW", "HEN", "FOX", "OWL", "ANT"]

BLOOD_RELATIONS = [
    ("A is B's father. B is C's sister. What is A to C?", "Father", ["Uncle", "Brother", "Grandfather"]),
    ("M is N's mother. N is O's brother. What is M to O?", "Mother", ["Sister", "Aunt", "Grandmother"]),
    ("X is Y's brother. Y is Z's daughter. What is X to Z?", "Son", ["Brother", "Father", "Uncle"]),
    ("P is Q's son. Q is R's son. What is P to R?", "Grandson", ["Son", "Nephew", "Brother"]),
    ("D is E's sister. E is F's father. What is D to F?", "Aunt", ["Mother", "Sister", "Cousin"]),
    ("J is K's wife. K is L's father. What is J to L?", "Mother", ["Aunt", "Sister", "Grandmother"]),
]

DEDUCTIONS = [
    (
        "All roses are flowers. Some flowers are red. Which conclusion follows?",
        "Some roses may be red",
        ["All roses are red", "No roses are red", "All flowers are roses"],
    ),
    (
        "No cats are dogs. All dogs are animals. Which conclusion follows?",
        "Some animals are not cats",
        ["All animals are cats", "No animals are cats", "All cats are animals"],
    ),
    (
        "All pilots are trained. Some trained people are teachers. Which conclusion follows?",
        "Some pilots may be teachers",
        ["All pilots are teachers", "No pilots are teachers", "All teachers are pilots"],
    ),
    (
        "All squares are rectangles. All rectangles are polygons. Which conclusion follows?",
        "All squares are polygons",
        ["All polygons are squares", "No squares are polygons", "Some rectangles are not polygons"],
    ),
]

# Unit vectors (east, north) for the four walking directions
HEADINGS: dict[str, tuple[int, int]] = {
    "North": (0, 1),
    "South": (0, -1),
    "East": (1, 0),
    "West": (-1, 0),
}

COMPASS_POINTS = [
    "North",
    "North-East",
    "East",
    "South-East",
    "South",
    "South-West",
    "West",
    "North-West",
]

STARTING_POINT = "Starting point"


def _shift_word(word: str, shift: int) -> str:
    """Caesar-shift an upper-case word."""
    return "".join(chr((ord(char) - ord("A") + shift) % 26 + ord("A")) for char in word)


def compass_direction(east: int, north: int) -> str:
    """Name the compass direction of an (east, north) offset from the origin."""
    vertical = "North" if north > 0 else "South" if north < 0 else ""
    horizontal = "East" if east > 0 else "West" if east < 0 else ""
    if vertical and horizontal:
        return f"{vertical}-{horizontal}"
    return vertical or horizontal or STARTING_POINT


def generate_number_series_question(level: int = 1) -> Question:
    """Complete an arithmetic, geometric or square-number series."""
    pattern_name = choice(list(SERIES_PATTERNS))
    term = SERIES_PATTERNS[pattern_name]
    start = random_int(2, 10)
    param = random_int(2, 5)

    series = [term(start, param, i) for i in range(SERIES_LENGTH)]
    answer = series[-1]
    display = ", ".join(str(n) for n in series[:-1]) + ", ?"

    return make_question(
        prefix="series",
        prompt=f"Complete the series: {display}",
        correct=str(answer),
        distractors=[
            str(answer + random_int(5, 15)),
            str(answer - random_int(5, 15)),
            str(answer * 2),
        ],
        explanation=f"The pattern follows {pattern_name}. The next number is {answer}.",
        topic="Number Series",
        hint=(
            "Look for a consistent change from one number to the next: addition, "
            "subtraction, multiplication or squares. "
            f"The pattern name is: {pattern_name}."
        ),
        perturb=lambda: str(answer + random_int(1, 30) * choice([-1, 1])),
    )


def generate_coding_question(level: int = 1) -> Question:
    """Apply the letter shift of an example code word to a second word."""
    word = choice(CODING_WORDS)
    test_word = choice([w for w in CODING_WORDS if w != word])
    shift = random_int(1, 5)
    answer = _shift_word(test_word, shift)

    return make_question(
        prefix="coding",
        prompt=f"If {word} is coded as {_shift_word(word, shift)}, then how is {test_word} coded?",
        correct=answer,
        distractors=[
            _shift_word(test_word, shift + 1),
            _shift_word(test_word, shift - 1),
            test_word[::-1],
        ],
        explanation=(
            f"Each letter is shifted by {shift} positions forward in the alphabet. "
            f"So {test_word} becomes {answer}."
        ),
        topic="Coding-Decoding",
        hint=(
            "Each letter moves by the same number of positions in the alphabet. Count "
            "how far each letter moved in the example, then apply the same shift to "
            "the new word."
        ),
        perturb=lambda: _shift_word(test_word, shift + random_int(2, 24)),
    )


def generate_blood_relation_question(level: int = 1) -> Question:
    """Family relationship puzzles."""
    prompt, answer, wrongs = choice(BLOOD_RELATIONS)
    return make_question(
        prefix="blood",
        prompt=prompt,
        correct=answer,
        distractors=list(wrongs),
        explanation=f"Based on the relationships described, the answer is {answer}.",
        topic="Blood Relations",
        hint=(
            "Sketch a small family tree and trace each connection step by step: "
            "who is the parent, who is the sibling, and who is the child."
        ),
    )


def generate_direction_question(level: int = 1) -> Question:
    """Two walking legs; where does the walker end up relative to the start?"""
    distance1 = random_int(5, 15)
    distance2 = random_int(5, 15)
    heading1 = choice(list(HEADINGS))
    heading2 = choice([h for h in HEADINGS if h != heading1])

    east = distance1 * HEADINGS[heading1][0] + distance2 * HEADINGS[heading2][0]
    north = distance1 * HEADINGS[heading1][1] + distance2 * HEADINGS[heading2][1]
    answer = compass_direction(east, north)

    distractors = shuffle([point for point in COMPASS_POINTS if point != answer])[:3]
    if answer == STARTING_POINT:
        explanation = (
            f"After walking {heading1} and then {heading2}, the person is back at "
            f"the starting point."
        )
    else:
        explanation = (
            f"After walking {heading1} and then {heading2}, the person is {answer} "
            f"of the starting point."
        )

    return make_question(
        prefix="direction",
        prompt=(
            f"A person walks {distance1}m {heading1}, then turns and walks "
            f"{distance2}m {heading2}. In which direction is the person now from "
            f"the starting point?"
        ),
        correct=answer,
        distractors=distractors,
        explanation=explanation,
        topic="Direction Sense",
        hint=(
            "Draw the path on paper: move in the first direction, turn, move in the "
            "second direction, then look at the straight line from start to finish."
        ),
    )


def generate_logical_deduction_question(level: int = 1) -> Question:
    """Pick the conclusion that follows from two premises."""
    prompt, answer, wrongs = choice(DEDUCTIONS)
    return make_question(
        prefix="deduction",
        prompt=prompt,
        correct=answer,
        distractors=list(wrongs),
        explanation=f"The logical conclusion is: {answer}",
        topic="Logical Deduction",
        hint=(
            "Read each statement carefully and ask what must be true if both are "
            "true. Rule out options that contradict the premises or need extra "
            "assumptions."
        ),
    )


_TEMPLATES: list[Callable[[int], Question]] = [
    generate_number_series_question,
    generate_coding_question,
    generate_blood_relation_question,
    generate_direction_question,
    generate_logical_deduction_question,
]


def generate_logical_question(level: int = 1) -> Question:
    """Generate a question from a randomly chosen logical template."""
    return choice(_TEMPLATES)(level)


def generate_logical_question_set(count: int, level: int = 1) -> list[Question]:
    """Generate ``count`` logical questions with distinct prompts."""
    return build_question_set(Category.LOGICAL.value, generate_logical_question, count, level)
