"""
Data interpretation question generator.

Each question describes a small chart or table in text form. The hints
walk through the computation with the actual values.
"""

from collections.abc import Callable

from aptitude_arena.models import Category
from aptitude_arena.questions import Question, build_question_set, make_question, round_half_up
from aptitude_arena.randomness import choice, random_int

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

PRODUCTS = ["Product A", "Product B", "Product C", "Product D"]

CITIES = ["City A", "City B", "City C"]

BUDGET_AREAS = ["marketing", "research", "salaries", "operations"]


def _unique_maximum(values: list[int]) -> bool:
    return values.count(max(values)) == 1


def generate_bar_chart_question(level: int = 1) -> Question:
    """Which of four months had the highest sales?"""
    start = random_int(0, len(MONTHS) - 4)
    months = MONTHS[start:start + 4]
    values = [random_int(50, 100) for _ in months]
    while not _unique_maximum(values):
        values = [random_int(50, 100) for _ in months]

    highest = max(values)
    best_month = months[values.index(highest)]
    listing = ", ".join(f"{month}={value}" for month, value in zip(months, values))

    return make_question(
        prefix="bar",
        prompt=f"Sales data: {listing}. Which month had highest sales?",
        correct=best_month,
        distractors=[month for month in months if month != best_month],
        explanation=f"{best_month} had the highest sales with {highest} units.",
        topic="Bar Charts",
        hint=(
            f"Method: Compare all values to find the maximum\n"
            f"Values: {listing}\n"
            f"Highest: {best_month} with {highest} units\n"
            f"Answer: {best_month}"
        ),
    )


def generate_pie_chart_question(level: int = 1) -> Question:
    """Which product has the largest market share?"""
    raw = [random_int(15, 35), random_int(15, 35), random_int(15, 35), random_int(10, 25)]
    shares = [round_half_up(part / sum(raw) * 100) for part in raw]
    while not _unique_maximum(shares):
        raw = [random_int(15, 35), random_int(15, 35), random_int(15, 35), random_int(10, 25)]
        shares = [round_half_up(part / sum(raw) * 100) for part in raw]

    largest = max(shares)
    leader = PRODUCTS[shares.index(largest)]
    listing = ", ".join(f"{name[-1]}={share}%" for name, share in zip(PRODUCTS, shares))

    return make_question(
        prefix="pie",
        prompt=f"Market share: {listing}. Which has largest share?",
        correct=leader,
        distractors=[name for name in PRODUCTS if name != leader],
        explanation=f"{leader} has the largest market share at {largest}%.",
        topic="Pie Charts",
        hint=(
            f"Method: Compare percentages to find the largest\n"
            f"{listing}\n"
            f"Largest: {leader} at {largest}%\n"
            f"Answer: {leader}"
        ),
    )


def generate_line_graph_question(level: int = 1) -> Question:
    """Total change of a four-year revenue trend."""
    start_year = random_int(2015, 2021)
    years = list(range(start_year, start_year + 4))
    values = [random_int(100 + 20 * i, 200 + 20 * i) for i in range(4)]
    increase = values[3] - values[0]
    listing = ", ".join(f"{year}={value}" for year, value in zip(years, values))

    return make_question(
        prefix="line",
        prompt=(
            f"Revenue trend: {listing}. What's the total increase from "
            f"{years[0]} to {years[3]}?"
        ),
        correct=str(increase),
        distractors=[
            str(increase + random_int(10, 30)),
            str(increase - random_int(10, 30)),
            str(round_half_up(increase * 1.5)),
        ],
        explanation=f"The increase is {values[3]} - {values[0]} = {increase}.",
        topic="Line Graphs",
        hint=(
            f"Formula: Total increase = Final value - Initial value\n"
            f"{years[3]} value: {values[3]}\n"
            f"{years[0]} value: {values[0]}\n"
            f"Increase = {values[3]} - {values[0]} = {increase}\n"
            f"Answer: {increase}"
        ),
        perturb=lambda: str(increase + random_int(31, 60) * choice([-1, 1])),
    )


def generate_table_question(level: int = 1) -> Question:
    """Average of a three-row population table."""
    populations = [random_int(500, 1000) for _ in CITIES]
    total = sum(populations)
    average = round_half_up(total / len(CITIES))
    listing = ", ".join(f"{city}={population}k" for city, population in zip(CITIES, populations))

    return make_question(
        prefix="table",
        prompt=f"Population data: {listing}. What's the average population?",
        correct=str(average),
        distractors=[
            str(average + random_int(50, 100)),
            str(average - random_int(50, 100)),
            str(round_half_up(total / 2)),
        ],
        explanation=(
            f"Average = ({' + '.join(str(p) for p in populations)}) / {len(CITIES)} = {average}k."
        ),
        topic="Tables",
        hint=(
            "To find the average, add all the values together and divide by how many "
            "values there are. This is called the arithmetic mean."
        ),
        perturb=lambda: str(average + random_int(101, 200) * choice([-1, 1])),
    )


def generate_percentage_chart_question(level: int = 1) -> Question:
    """Share of a budget allocated to one area."""
    total = random_int(500, 1000)
    percentage = random_int(20, 60)
    area = choice(BUDGET_AREAS)
    value = round_half_up(total * percentage / 100)

    return make_question(
        prefix="percent",
        prompt=(
            f"If the total budget is {total} and {percentage}% is allocated to "
            f"{area}, how much is the {area} budget?"
        ),
        correct=str(value),
        distractors=[
            str(round_half_up(total * (percentage + 10) / 100)),
            str(round_half_up(total * (percentage - 10) / 100)),
            str(round_half_up(total / 2)),
        ],
        explanation=f"{area.capitalize()} budget = {percentage}% of {total} = {value}.",
        topic="Data Percentages",
        hint=(
            "To find a percentage of a value, multiply the total by the percentage and "
            "divide by 100. Think of percentage as \"per hundred\"."
        ),
        perturb=lambda: str(value + random_int(5, 50) * choice([-1, 1])),
    )


_TEMPLATES: list[Callable[[int], Question]] = [
    generate_bar_chart_question,
    generate_pie_chart_question,
    generate_line_graph_question,
    generate_table_question,
    generate_percentage_chart_question,
]


def generate_datavis_question(level: int = 1) -> Question:
    """Generate a question from a randomly chosen data interpretation template."""
    return choice(_TEMPLATES)(level)


def generate_datavis_question_set(count: int, level: int = 1) -> list[Question]:
    """Generate ``count`` data interpretation questions with distinct prompts."""
    return build_question_set(Category.DATAVIS.value, generate_datavis_question, count, level)
