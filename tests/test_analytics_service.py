"""Tests for meal analytics."""

from datetime import UTC, date, datetime

import pytest

from meal_insights.services.analytics import AnalyticsService, analyze
from meal_insights.services.errors import UpstreamFetchError
from meal_insights.services.meal_records import MealRecordService
from tests.conftest import (
    FailingMealRepository,
    InMemoryDishRepository,
    InMemoryMealRepository,
    make_dish,
    make_meal,
    utc,
)


def test_analyze_example_scenario() -> None:
    dal = make_dish("dal", name="Dal Tadka", cuisine="North Indian", calories=230)
    meals = [
        make_meal(dal, utc(2024, 1, 1, 8), meal_type="breakfast", meal_id="a"),
        make_meal(dal, utc(2024, 1, 1, 9), meal_type="breakfast", meal_id="b"),
        make_meal(dal, utc(2024, 1, 2, 19), meal_type="dinner", meal_id="c"),
    ]

    result = analyze(meals, period=2)

    assert result.total_meals == 3
    assert result.meal_type_distribution == {"breakfast": 2, "dinner": 1}
    assert result.cuisine_distribution == {"North Indian": 3}
    assert len(result.top_dishes) == 1
    assert result.top_dishes[0].dish_name == "Dal Tadka"
    assert result.top_dishes[0].count == 3
    assert result.avg_calories_per_day == 345
    assert result.nutrition_summary.total_calories == 690
    assert result.nutrition_summary.avg_calories == 230
    assert result.period == 2


def test_distribution_sums_to_total_meals() -> None:
    dishes = [make_dish(f"dish-{index}") for index in range(4)]
    meal_types = ["breakfast", "lunch", "dinner", "snack", "lunch"]
    meals = [
        make_meal(dishes[index % 4], utc(2024, 2, 1 + index), meal_type=meal_type)
        for index, meal_type in enumerate(meal_types)
    ]

    result = analyze(meals, period=7)

    assert sum(result.meal_type_distribution.values()) == len(meals)
    assert result.total_meals == len(meals)
    assert result.meal_type_distribution["lunch"] == 2


def test_empty_cuisine_is_counted_literally() -> None:
    plain = make_dish("plain", cuisine="")
    meals = [make_meal(plain, utc(2024, 1, 1)), make_meal(plain, utc(2024, 1, 2))]

    result = analyze(meals, period=30)

    assert result.cuisine_distribution == {"": 2}


def test_top_dishes_sorted_and_truncated() -> None:
    meals = []
    for index in range(12):
        dish = make_dish(f"dish-{index:02d}", name=f"Dish {index:02d}")
        for repeat in range(index % 3 + 1):
            meals.append(make_meal(dish, utc(2024, 3, 1 + repeat)))

    result = analyze(meals, period=30)

    counts = [dish.count for dish in result.top_dishes]
    assert len(result.top_dishes) == 10
    assert counts == sorted(counts, reverse=True)
    assert counts[:4] == [3, 3, 3, 3]


def test_top_dishes_ties_break_by_name() -> None:
    zucchini = make_dish("z", name="Zucchini Curry")
    aloo = make_dish("a", name="Aloo Gobi")
    meals = [make_meal(zucchini, utc(2024, 1, 1)), make_meal(aloo, utc(2024, 1, 1))]

    result = analyze(meals, period=1)

    assert [dish.dish_name for dish in result.top_dishes] == [
        "Aloo Gobi",
        "Zucchini Curry",
    ]


def test_empty_meals_average_to_zero() -> None:
    result = analyze([], period=30)

    assert result.total_meals == 0
    assert result.avg_calories_per_day == 0
    assert result.nutrition_summary.avg_calories == 0
    assert result.nutrition_summary.avg_protein == 0
    assert result.nutrition_summary.avg_carbs == 0
    assert result.nutrition_summary.avg_fat == 0
    assert result.top_dishes == []
    assert result.weekly_trend == []


def test_weekly_trend_has_one_entry_per_day() -> None:
    dal = make_dish("dal", calories=230)
    rice = make_dish("rice", calories=300)
    meals = [
        make_meal(rice, utc(2024, 1, 3, 8)),
        make_meal(dal, utc(2024, 1, 1, 8)),
        make_meal(rice, utc(2024, 1, 1, 20), meal_type="dinner"),
    ]

    result = analyze(meals, period=7)

    trend = [(day.date, day.meal_count, day.calories) for day in result.weekly_trend]
    assert trend == [
        (date(2024, 1, 1), 2, 530),
        (date(2024, 1, 3), 1, 300),
    ]


def test_service_reads_trailing_period(
    meal_repository: InMemoryMealRepository,
    dish_repository: InMemoryDishRepository,
) -> None:
    dal = make_dish("dal", calories=200)
    dish_repository.add(dal)
    meal_repository.add(make_meal(dal, utc(2024, 5, 31, 23), meal_id="inside"))
    meal_repository.add(make_meal(dal, utc(2024, 5, 1, 0), meal_id="first-day"))
    meal_repository.add(make_meal(dal, utc(2024, 4, 30, 23), meal_id="too-old"))
    service = AnalyticsService(
        MealRecordService(meal_repository, dish_repository),
        today=lambda: date(2024, 5, 31),
    )

    result = service.get_analytics("user-1", period=30)

    assert result.total_meals == 2
    _, start, end = meal_repository.calls[0]
    assert start == datetime(2024, 5, 1, tzinfo=UTC)
    assert end == datetime(2024, 6, 1, tzinfo=UTC)


def test_service_wraps_fetch_failure(
    dish_repository: InMemoryDishRepository,
) -> None:
    service = AnalyticsService(
        MealRecordService(FailingMealRepository(), dish_repository)
    )

    with pytest.raises(UpstreamFetchError, match="failed to get analytics data"):
        service.get_analytics("user-1", period=30)
