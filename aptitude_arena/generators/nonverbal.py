"""
Non-verbal reasoning question generator.

Pattern completion, mirror images, figure counting and paper folding are
generated from parameters; embedded figures come from a fixed bank.
"""

from collections.abc import Callable
from math import comb

from aptitude_arena.models import Category
from aptitude_arena.questions import Question, build_question_set, make_question
from aptitude_arena.randomness import choice, random_int, shuffle

SYMBOLS = ["■", "□", "▲", "●", "◆", "★"]

# Letters that look the same when flipped left to right
SYMMETRIC_WORDS = [
    "MATH", "TOY", "WAIT", "YOU", "TAX", "HAT", "MOAT", "OATH",
    "AUTO", "WAX", "HIT", "TOMATO", "ATOM", "MAY", "WHY", "YOUTH",
]

# Words with asymmetric letters, mirrored glyph by glyph
MIRRORED_WORDS = [
    ("BOOK", "ꓘOOꓭ", ["KOOB", "BOOX", "BOKO"]),
    ("CAT", "TAƆ", ["TAC", "ACT", "CTA"]),
    ("SUN", "ИUꙄ", ["NUS", "USN", "NSU"]),
]

EMBEDDED_FIGURES = [
    ("Which simple figure is embedded in the complex pattern?", "Triangle", ["Square", "Circle", "Pentagon"]),
    ("Identify the hidden shape in the given figure:", "Rectangle", ["Triangle", "Hexagon", "Oval"]),
    ("A five-pointed star is drawn inside a pentagon. Which shape forms each point of the star?", "Triangle", ["Square", "Circle", "Trapezium"]),
    ("Two identical right triangles are joined along their longest side. Which shape do they form?", "Rectangle", ["Pentagon", "Circle", "Hexagon"]),
    ("A cube is viewed straight from the front. Which shape is seen?", "Square", ["Triangle", "Hexagon", "Circle"]),
]


def generate_pattern_question(level: int = 1) -> Question:
    """Continue a repeating cycle of symbols."""
    unit_length = random_int(2, 4)
    unit = [choice(SYMBOLS) for _ in range(unit_length)]
    while len(set(unit)) < 2:
        unit = [choice(SYMBOLS) for _ in range(unit_length)]

    shown = 2 * unit_length + random_int(0, unit_length - 1)
    sequence = [unit[i % unit_length] for i in range(shown)]
    answer = unit[shown % unit_length]

    return make_question(
        prefix="pattern",
        prompt=f"Complete the pattern: {' '.join(sequence)} ?",
        correct=answer,
        distractors=shuffle([s for s in SYMBOLS if s != answer])[:3],
        explanation=f"The pattern repeats every {unit_length} symbols, so the next symbol is {answer}.",
        topic="Pattern Completion",
        hint=(
            "Look for the group of symbols that repeats. Count how long it is before "
            "it starts again, then work out which symbol comes next in the cycle."
        ),
    )


def generate_mirror_question(level: int = 1) -> Question:
    """Mirror image of a word in a vertical mirror."""
    if random_int(0, len(SYMMETRIC_WORDS) + len(MIRRORED_WORDS) - 1) < len(MIRRORED_WORDS):
        word, answer, wrongs = choice(MIRRORED_WORDS)
        distractors = list(wrongs)
        perturb = None
    else:
        word = choice(SYMMETRIC_WORDS)
        answer = word[::-1]
        distractors = [word, word[1:] + word[0], answer[1] + answer[0] + answer[2:]]

        def perturb() -> str:
            return "".join(shuffle(word))

    return make_question(
        prefix="mirror",
        prompt=f"What is the mirror image of: {word}",
        correct=answer,
        distractors=distractors,
        explanation="In a mirror the letter order is reversed and each letter is flipped left to right.",
        topic="Mirror Images",
        hint=(
            "Imagine holding the word up to a mirror: the order of the letters reverses "
            "and each letter flips horizontally. Letters such as A, H, O and T look the "
            "same after flipping."
        ),
        perturb=perturb,
    )


def count_squares(size: int) -> int:
    """Number of squares of every size in a size x size grid."""
    return sum(k * k for k in range(1, size + 1))


def count_rectangles(rows: int, columns: int) -> int:
    """Number of rectangles (squares included) in a rows x columns grid."""
    return comb(rows + 1, 2) * comb(columns + 1, 2)


def generate_counting_question(level: int = 1) -> Question:
    """Count all squares or rectangles in a grid."""
    if random_int(0, 1):
        size = random_int(2, 6)
        answer = count_squares(size)
        prompt = f"How many squares in a {size}x{size} grid?"
        distractors = [size * size, answer + size, answer + 2 * size + 1]
    else:
        rows = random_int(1, 4)
        columns = random_int(2, 5)
        answer = count_rectangles(rows, columns)
        prompt = f"How many rectangles in a {rows}x{columns} grid?"
        distractors = [rows * columns, answer - rows * columns, answer + rows + columns]

    return make_question(
        prefix="counting",
        prompt=prompt,
        correct=str(answer),
        distractors=[str(d) for d in distractors],
        explanation=f"By systematic counting, the answer is {answer}.",
        topic="Figure Counting",
        hint=(
            "Count systematically: first the smallest figures, then figures made of two "
            "cells, then larger ones. Remember overlapping figures and the outer boundary."
        ),
        perturb=lambda: str(answer + random_int(1, 10)),
    )


def generate_folding_question(level: int = 1) -> Question:
    """Holes in a sheet that was folded and punched."""
    folds = random_int(1, 4)
    punches = random_int(1, 3)
    answer = punches * 2**folds

    fold_text = "once" if folds == 1 else "twice" if folds == 2 else f"{folds} times"
    hole_text = "a hole" if punches == 1 else f"{punches} holes"

    return make_question(
        prefix="folding",
        prompt=(
            f"A square sheet of paper is folded in half {fold_text} and {hole_text} "
            f"punched through all layers. How many holes when unfolded?"
        ),
        correct=str(answer),
        distractors=[str(punches * 2 ** (folds - 1)), str(punches * 2 ** (folds + 1)), str(punches + folds)],
        explanation=f"Each fold doubles the layers, so {punches} punch(es) become {answer} holes.",
        topic="Paper Folding",
        hint=(
            "Every fold doubles the number of layers, and a punch goes through every "
            "layer. Work out how many layers there are, then multiply by the punches."
        ),
        perturb=lambda: str(answer + random_int(1, 6)),
    )


def generate_embedded_question(level: int = 1) -> Question:
    """Find the simple shape hidden in a compound figure."""
    prompt, answer, wrongs = choice(EMBEDDED_FIGURES)
    return make_question(
        prefix="embedded",
        prompt=prompt,
        correct=answer,
        distractors=list(wrongs),
        explanation=f"The {answer} is embedded in the complex figure.",
        topic="Embedded Figures",
        hint=(
            "Trace the outline with your eyes and ignore the extra lines and decorations. "
            "The basic shape is hidden somewhere in the figure."
        ),
    )


_TEMPLATES: list[Callable[[int], Question]] = [
    generate_pattern_question,
    generate_mirror_question,
    generate_counting_question,
    generate_folding_question,
    generate_embedded_question,
]


def generate_nonverbal_question(level: int = 1) -> Question:
    """Generate a question from a randomly chosen non-verbal template."""
    return choice(_TEMPLATES)(level)


def generate_nonverbal_question_set(count: int, level: int = 1) -> list[Question]:
    """Generate ``count`` non-verbal questions with distinct prompts."""
    return build_question_set(Category.NONVERBAL.value, generate_nonverbal_question, count, level)
