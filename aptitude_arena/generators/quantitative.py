"""
Quantitative aptitude question generator.

Templates cover percentages, ratios, profit & loss, time & work,
speed/distance/time, ages and mixtures. Unlike the other categories the
numeric ranges grow with the level, and the phrasing switches between
basic, intermediate and advanced tiers as the difficulty rises.
"""

from collections.abc import Callable

from aptitude_arena.models import Category
from aptitude_arena.questions import Question, build_question_set, format_number, make_question
from aptitude_arena.randomness import choice, random_int

# Difficulty tops out at this value (level 50 and beyond)
MAX_DIFFICULTY = 5


def get_difficulty(level: int) -> int:
    """Map a level to a difficulty tier between 0 and MAX_DIFFICULTY."""
    return min(level // 10, MAX_DIFFICULTY)


def _above(value: float, low: int, high: int) -> float:
    """A distractor a random amount above the value."""
    return value + random_int(low, high)


def _below(value: float, low: int, high: int) -> float:
    """A distractor a random amount below the value, mirrored above if it would go negative."""
    delta = random_int(low, high)
    if value - delta > 0:
        return value - delta
    return value + high + delta


def _perturber(value: float, low: int, high: int, digits: int) -> Callable[[], str]:
    """Fallback distractor source used when two options collide after formatting."""

    def perturb() -> str:
        return format_number(_below(value, low, high) if random_int(0, 1) else _above(value, low, high), digits)

    return perturb


def _numeric_question(
    prefix: str,
    prompt: str,
    answer: float,
    wrongs: list[float],
    digits: int,
    spread: tuple[int, int],
    explanation: str,
    topic: str,
    hint: str,
) -> Question:
    """Format a numeric answer and its distractors with the same precision."""
    return make_question(
        prefix=prefix,
        prompt=prompt,
        correct=format_number(answer, digits),
        distractors=[format_number(wrong, digits) for wrong in wrongs],
        explanation=explanation,
        topic=topic,
        hint=hint,
        perturb=_perturber(answer, spread[0], spread[1], digits),
    )


def generate_percentage_question(level: int = 1) -> Question:
    """Percent of a number, percentage change, or compound percentages."""
    difficulty = get_difficulty(level)
    base = random_int(200 + level * 100, 1000 + level * 200)
    percent_max = min(50 + level * 10, 90)
    percent = random_int(min(10 + level * 5, percent_max), percent_max)

    if difficulty >= 4:
        percent2 = random_int(10, 30)
        result = (base * percent / 100) * percent2 / 100
        prompt = f"What is {percent2}% of {percent}% of {base}?"
    elif difficulty >= 2:
        result = base + base * percent / 100
        prompt = f"If {base} is increased by {percent}%, what is the new value?"
    else:
        result = base * percent / 100
        prompt = f"What is {percent}% of {base}?"

    spread = (10 * (difficulty + 1), 50 * (difficulty + 1))
    answer = format_number(result)
    return _numeric_question(
        prefix="perc",
        prompt=prompt,
        answer=result,
        wrongs=[_above(result, *spread), _below(result, *spread), result * 1.5],
        digits=0,
        spread=spread,
        explanation=f"Applying the percentage formula step by step gives {answer}.",
        topic="Percentages",
        hint=(
            "To find a percentage of a number, multiply the number by the percentage "
            "and divide by a hundred. For compound percentages, work one step at a time "
            "and double-check your arithmetic."
        ),
    )


def generate_ratio_question(level: int = 1) -> Question:
    """Split a total in a two- or three-part ratio."""
    difficulty = get_difficulty(level)
    ratio_max = 8 + level // 2

    if difficulty >= 3:
        a = random_int(2, ratio_max)
        b = random_int(2, ratio_max)
        c = random_int(2, ratio_max)
        parts = a + b + c
        unit = random_int(max(1, (200 + level * 50) // parts), max(1, (800 + level * 100) // parts))
        total = parts * unit
        share = a * unit
        prompt = f"Divide {total} in the ratio {a}:{b}:{c}. What is the first share?"
    else:
        a = random_int(2, ratio_max)
        b = random_int(2, ratio_max)
        while b == a:
            b = random_int(2, ratio_max)
        parts = a + b
        unit = random_int(max(1, (100 + level * 50) // parts), max(1, (500 + level * 100) // parts))
        total = parts * unit
        share = max(a, b) * unit
        prompt = f"Divide {total} in the ratio {a}:{b}. What is the larger share?"

    return _numeric_question(
        prefix="ratio",
        prompt=prompt,
        answer=share,
        wrongs=[_above(share, 20, 60), _below(share, 20, 60), total // 2],
        digits=0,
        spread=(20, 60),
        explanation=f"One part is worth {total} / {parts} = {unit}, so the share is {share}.",
        topic="Ratios",
        hint=(
            "First add up all the ratio parts. Divide the total by this sum to get "
            "the value of one part, then multiply by the ratio number of the share you need."
        ),
    )


def generate_profit_loss_question(level: int = 1) -> Question:
    """Selling price after profit or loss, or profit percentage."""
    difficulty = get_difficulty(level)
    cost = random_int(500 + level * 200, 2000 + level * 500)

    if difficulty >= 4:
        selling = cost + random_int(100, 500)
        answer = (selling - cost) / cost * 100
        prompt = (
            f"An item cost ${cost} and was sold for ${selling}. "
            f"What is the profit percentage?"
        )
    elif difficulty >= 2:
        loss_percent = random_int(10, 30)
        answer = cost - cost * loss_percent / 100
        prompt = (
            f"An item was bought for ${cost}. If it was sold at a loss of "
            f"{loss_percent}%, what is the selling price?"
        )
    else:
        profit_percent = random_int(10 + level * 5, 40 + level * 10)
        answer = cost + cost * profit_percent / 100
        prompt = (
            f"An item was bought for ${cost}. If it was sold at a profit of "
            f"{profit_percent}%, what is the selling price?"
        )

    digits = 1 if difficulty >= 4 else 0
    spread = (1, 10) if difficulty >= 4 else (50, 200)
    return _numeric_question(
        prefix="profit",
        prompt=prompt,
        answer=answer,
        wrongs=[_above(answer, *spread), _below(answer, *spread), answer * 1.2],
        digits=digits,
        spread=spread,
        explanation=f"The answer is {format_number(answer, digits)}.",
        topic="Profit & Loss",
        hint=(
            "Profit = Selling Price - Cost Price and Loss = Cost Price - Selling Price. "
            "As a percentage: (Profit or Loss / Cost Price) x a hundred. Check whether the "
            "question is about a profit or a loss."
        ),
    )


def generate_time_work_question(level: int = 1) -> Question:
    """Two or three workers completing a job together."""
    difficulty = get_difficulty(level)
    max_days = 30 + level * 10
    min_days = max(5, 10 - level)

    if difficulty >= 3:
        days = [random_int(min_days, max_days) for _ in range(3)]
        prompt = (
            f"A can do work in {days[0]} days, B in {days[1]} days, and C in "
            f"{days[2]} days. How many days if they work together?"
        )
    else:
        days = [random_int(min_days, max_days) for _ in range(2)]
        prompt = (
            f"A can complete a work in {days[0]} days and B can complete it in "
            f"{days[1]} days. How many days will they take working together?"
        )

    answer = 1 / sum(1 / d for d in days)
    return _numeric_question(
        prefix="work",
        prompt=prompt,
        answer=answer,
        wrongs=[_above(answer, 2, 8), _below(answer, 2, 8), answer * 2],
        digits=1,
        spread=(2, 8),
        explanation=f"Working together takes {format_number(answer, 1)} days.",
        topic="Time & Work",
        hint=(
            "Add the work rates (1/time for each person) to get the combined rate, "
            "then divide 1 by the combined rate to get the total time."
        ),
    )


def generate_speed_question(level: int = 1) -> Question:
    """Time from distance and speed, speed from distance and time, or meeting time."""
    difficulty = get_difficulty(level)

    if difficulty >= 4:
        speed1 = random_int(40 + level * 5, 100 + level * 10)
        speed2 = random_int(40 + level * 5, 100 + level * 10)
        distance = random_int(200, 600)
        answer = distance / (speed1 + speed2)
        prompt = (
            f"Two cars {distance}km apart travel towards each other at {speed1}km/h "
            f"and {speed2}km/h. When will they meet?"
        )
    elif difficulty >= 2:
        distance = random_int(100 + level * 50, 500 + level * 100)
        hours = random_int(2, 8)
        answer = distance / hours
        prompt = f"A car travels {distance}km in {hours} hours. What is its speed?"
    else:
        distance = random_int(100 + level * 50, 500 + level * 100)
        speed = random_int(40 + level * 10, 100 + level * 20)
        answer = distance / speed
        prompt = f"A car travels {distance}km at {speed}km/h. How many hours does it take?"

    return _numeric_question(
        prefix="speed",
        prompt=prompt,
        answer=answer,
        wrongs=[_above(answer, 1, 5), _below(answer, 1, 5), answer * 1.5],
        digits=1,
        spread=(1, 5),
        explanation=f"The answer is {format_number(answer, 1)}.",
        topic="Speed, Distance & Time",
        hint=(
            "Speed = Distance / Time, Distance = Speed x Time, Time = Distance / Speed. "
            "When two objects move toward each other, add their speeds."
        ),
    )


def generate_age_question(level: int = 1) -> Question:
    """Past, future or current age from a reference point."""
    current_age = random_int(20 + level, 50 + level * 2)
    years_ago = random_int(5, 15)
    years_ahead = random_int(5, 15)

    prompt, answer = choice(
        [
            (
                f"A person is currently {current_age} years old. "
                f"How old were they {years_ago} years ago?",
                current_age - years_ago,
            ),
            (
                f"A person is currently {current_age} years old. "
                f"How old will they be in {years_ahead} years?",
                current_age + years_ahead,
            ),
            (
                f"{years_ago} years ago, a person was {current_age - years_ago} "
                f"years old. What is their current age?",
                current_age,
            ),
        ]
    )

    return _numeric_question(
        prefix="age",
        prompt=prompt,
        answer=answer,
        wrongs=[_above(answer, 3, 10), _below(answer, 3, 10), _above(answer, 15, 25)],
        digits=0,
        spread=(3, 10),
        explanation=f"The answer is {answer} years.",
        topic="Age Problems",
        hint=(
            "Draw a timeline if needed. Add years to find a future age and subtract "
            "years to find a past age. Given a past age, add the years back to find "
            "the current age."
        ),
    )


def generate_mixture_question(level: int = 1) -> Question:
    """Average price of two blended quantities."""
    price1 = random_int(20 + level * 5, 50 + level * 10)
    price2 = random_int(30 + level * 5, 60 + level * 10)
    quantity1 = random_int(5, 20)
    quantity2 = random_int(5, 20)

    average = (price1 * quantity1 + price2 * quantity2) / (quantity1 + quantity2)
    answer = format_number(average, 1)

    return _numeric_question(
        prefix="mixture",
        prompt=(
            f"Mix {quantity1}kg of tea at ${price1}/kg with {quantity2}kg at "
            f"${price2}/kg. What is the average price per kg?"
        ),
        answer=average,
        wrongs=[_above(average, 5, 15), _below(average, 5, 15), (price1 + price2) / 2],
        digits=1,
        spread=(5, 15),
        explanation=f"Average price = Total cost / Total quantity = {answer}.",
        topic="Mixtures",
        hint=(
            "Work out the cost of each batch (quantity x price), add the costs "
            "together and divide by the total quantity."
        ),
    )


_TEMPLATES: list[Callable[[int], Question]] = [
    generate_percentage_question,
    generate_ratio_question,
    generate_profit_loss_question,
    generate_time_work_question,
    generate_speed_question,
    generate_age_question,
    generate_mixture_question,
]


def generate_quantitative_question(level: int = 1) -> Question:
    """Generate a question from a randomly chosen quantitative template."""
    return choice(_TEMPLATES)(level)


def generate_quantitative_question_set(count: int, level: int = 1) -> list[Question]:
    """Generate ``count`` quantitative questions with distinct prompts."""
    return build_question_set(
        Category.QUANTITATIVE.value, generate_quantitative_question, count, level
    )
