"""
Verbal reasoning question generator.

All templates draw from fixed word and sentence banks; each bank entry is
(prompt material, correct answer, three wrong answers).
"""

from collections.abc import Callable

from aptitude_arena.models import Category
from aptitude_arena.questions import Question, build_question_set, make_question
from aptitude_arena.randomness import choice

SYNONYMS = [
    ("HAPPY", "Joyful", ["Sad", "Angry", "Tired"]),
    ("FAST", "Quick", ["Slow", "Lazy", "Steady"]),
    ("BRAVE", "Courageous", ["Cowardly", "Fearful", "Weak"]),
    ("SMART", "Intelligent", ["Dull", "Foolish", "Ignorant"]),
    ("ANCIENT", "Old", ["Modern", "New", "Recent"]),
    ("HUGE", "Enormous", ["Tiny", "Narrow", "Brief"]),
    ("BEGIN", "Commence", ["Finish", "Pause", "Delay"]),
    ("CALM", "Serene", ["Anxious", "Noisy", "Frantic"]),
    ("ABUNDANT", "Plentiful", ["Scarce", "Empty", "Rare"]),
    ("FRAGILE", "Delicate", ["Sturdy", "Heavy", "Rigid"]),
]

ANTONYMS = [
    ("LIGHT", "Dark", ["Bright", "Shiny", "Clear"]),
    ("HOT", "Cold", ["Warm", "Boiling", "Burning"]),
    ("TALL", "Short", ["High", "Long", "Big"]),
    ("RICH", "Poor", ["Wealthy", "Affluent", "Prosperous"]),
    ("HARD", "Soft", ["Tough", "Solid", "Firm"]),
    ("ACCEPT", "Reject", ["Receive", "Admit", "Approve"]),
    ("EXPAND", "Contract", ["Grow", "Swell", "Extend"]),
    ("GENEROUS", "Stingy", ["Kind", "Giving", "Lavish"]),
    ("VICTORY", "Defeat", ["Triumph", "Success", "Win"]),
    ("ARRIVE", "Depart", ["Reach", "Land", "Enter"]),
]

ANALOGIES = [
    ("Book : Read", "Music : Listen", ["Food : Drink", "Car : Fly", "Phone : Sleep"]),
    ("Doctor : Hospital", "Teacher : School", ["Student : Office", "Cook : Garden", "Pilot : Restaurant"]),
    ("Pen : Write", "Knife : Cut", ["Spoon : Jump", "Fork : Swim", "Plate : Run"]),
    ("Cat : Meow", "Dog : Bark", ["Fish : Fly", "Bird : Swim", "Cow : Roar"]),
    ("Bird : Nest", "Bee : Hive", ["Fish : Tree", "Horse : Burrow", "Lion : Web"]),
    ("Finger : Hand", "Toe : Foot", ["Knee : Arm", "Nail : Head", "Ear : Leg"]),
    ("Water : Thirst", "Food : Hunger", ["Bed : Noise", "Coat : Heat", "Lamp : Sound"]),
    ("Painter : Brush", "Writer : Pen", ["Singer : Hammer", "Chef : Ladder", "Pilot : Spoon"]),
]

SENTENCES = [
    ("The weather was so ___ that we decided to stay indoors.", "terrible", ["pleasant", "beautiful", "sunny"]),
    ("She was ___ by the sudden news.", "shocked", ["happy", "excited", "pleased"]),
    ("The project was ___ due to lack of funds.", "abandoned", ["started", "celebrated", "improved"]),
    ("He spoke so ___ that nobody at the back could hear him.", "softly", ["loudly", "clearly", "proudly"]),
    ("After the long hike, the children were completely ___.", "exhausted", ["energetic", "restless", "refreshed"]),
    ("The ___ witness refused to answer any questions.", "reluctant", ["eager", "willing", "talkative"]),
]

ERRORS = [
    ('Find the error: "She don\'t like coffee."', "don't should be doesn't", ["No error", "like should be likes", "coffee should be coffees"]),
    ('Find the error: "The team are playing well."', "are should be is", ["No error", "playing should be plays", "well should be good"]),
    ('Find the error: "He have finished his homework."', "have should be has", ["No error", "finished should be finish", "his should be him"]),
    ('Find the error: "Each of the boys have a bicycle."', "have should be has", ["No error", "boys should be boy", "a should be an"]),
    ('Find the error: "I am knowing the answer."', "am knowing should be know", ["No error", "the should be a", "answer should be answers"]),
]


def generate_synonym_question(level: int = 1) -> Question:
    """Word closest in meaning."""
    word, answer, wrongs = choice(SYNONYMS)
    return make_question(
        prefix="synonym",
        prompt=f"Choose the word closest in meaning to: {word}",
        correct=answer,
        distractors=list(wrongs),
        explanation=f"{answer} is a synonym of {word}.",
        topic="Synonyms",
        hint=(
            "A synonym has the same or a very similar meaning. Try each option in a "
            "sentence in place of the original word and see which one still fits."
        ),
    )


def generate_antonym_question(level: int = 1) -> Question:
    """Word opposite in meaning."""
    word, answer, wrongs = choice(ANTONYMS)
    return make_question(
        prefix="antonym",
        prompt=f"Choose the word opposite in meaning to: {word}",
        correct=answer,
        distractors=list(wrongs),
        explanation=f"{answer} is an antonym of {word}.",
        topic="Antonyms",
        hint=(
            "An antonym has the opposite meaning. Think about what the word means, "
            "then look for the option that means the reverse."
        ),
    )


def generate_analogy_question(level: int = 1) -> Question:
    """Pair that shares the relationship of the given pair."""
    pair, answer, wrongs = choice(ANALOGIES)
    return make_question(
        prefix="analogy",
        prompt=f"{pair} :: ?",
        correct=answer,
        distractors=list(wrongs),
        explanation=f"{answer} completes the analogy with the same relationship.",
        topic="Analogies",
        hint=(
            "Name the relationship in the first pair: tool and use, part and whole, "
            "worker and workplace? Then find the option with exactly the same relationship."
        ),
    )


def generate_sentence_question(level: int = 1) -> Question:
    """Fill in the blank."""
    sentence, answer, wrongs = choice(SENTENCES)
    return make_question(
        prefix="sentence",
        prompt=f"Fill in the blank: {sentence}",
        correct=answer,
        distractors=list(wrongs),
        explanation=f"{answer} best completes the sentence in context.",
        topic="Sentence Completion",
        hint=(
            "Read the whole sentence and work out its tone and meaning. The right word "
            "fits both the grammar and the logic of the rest of the sentence."
        ),
    )


def generate_error_question(level: int = 1) -> Question:
    """Spot the grammatical error."""
    prompt, answer, wrongs = choice(ERRORS)
    return make_question(
        prefix="error",
        prompt=prompt,
        correct=answer,
        distractors=list(wrongs),
        explanation=f"The error is: {answer}",
        topic="Spotting Errors",
        hint=(
            "Check subject-verb agreement, tense and word forms one part at a time. "
            "One part of the sentence will sound wrong."
        ),
    )


_TEMPLATES: list[Callable[[int], Question]] = [
    generate_synonym_question,
    generate_antonym_question,
    generate_analogy_question,
    generate_sentence_question,
    generate_error_question,
]


def generate_verbal_question(level: int = 1) -> Question:
    """Generate a question from a randomly chosen verbal template."""
    return choice(_TEMPLATES)(level)


def generate_verbal_question_set(count: int, level: int = 1) -> list[Question]:
    """Generate ``count`` verbal questions with distinct prompts."""
    return build_question_set(Category.VERBAL.value, generate_verbal_question, count, level)
