"""Serialization of engine results into camelCase JSON payloads."""

from meal_insights.domain.analytics import AnalyticsResult, DishPopularity
from meal_insights.domain.goals import ResolvedGoals
from meal_insights.domain.progress import DailyNutrition, NutritionProgress
from meal_insights.domain.recommendations import Recommendations, RecommendedDish
from meal_insights.domain.shopping import IngredientItem, ShoppingList


def serialize_analytics(result: AnalyticsResult) -> dict[str, object]:
    """Serialize analytics into the response payload."""
    summary = result.nutrition_summary
    return {
        "totalMeals": result.total_meals,
        "avgCaloriesPerDay": result.avg_calories_per_day,
        "mealTypeDistribution": result.meal_type_distribution,
        "cuisineDistribution": result.cuisine_distribution,
        "topDishes": [_serialize_popularity(dish) for dish in result.top_dishes],
        "nutritionSummary": {
            "totalCalories": summary.total_calories,
            "avgCalories": summary.avg_calories,
            "totalProtein": summary.total_protein,
            "totalCarbs": summary.total_carbs,
            "totalFat": summary.total_fat,
            "totalFiber": summary.total_fiber,
            "avgProtein": summary.avg_protein,
            "avgCarbs": summary.avg_carbs,
            "avgFat": summary.avg_fat,
        },
        "weeklyTrend": [
            {
                "date": day.date.isoformat(),
                "mealCount": day.meal_count,
                "calories": day.calories,
            }
            for day in result.weekly_trend
        ],
        "period": result.period,
    }


def serialize_goals(goals: ResolvedGoals) -> dict[str, int]:
    """Serialize resolved goals with camelCase keys."""
    return {
        "dailyCalories": goals.daily_calories,
        "protein": goals.protein,
        "carbs": goals.carbs,
        "fat": goals.fat,
        "fiber": goals.fiber,
        "sodium": goals.sodium,
    }


def serialize_progress(result: NutritionProgress) -> dict[str, object]:
    """Serialize daily progress, goals and the period summary."""
    summary = result.summary
    return {
        "period": result.period,
        "progress": [_serialize_day(day) for day in result.progress],
        "goals": serialize_goals(result.goals),
        "summary": {
            "avgCalories": summary.avg_calories,
            "avgProtein": summary.avg_protein,
            "avgCarbs": summary.avg_carbs,
            "avgFat": summary.avg_fat,
            "avgFiber": summary.avg_fiber,
            "totalDays": summary.total_days,
            "calorieGoalMet": summary.calorie_goal_met,
            "proteinGoalMet": summary.protein_goal_met,
            "goalPercentage": summary.goal_percentage,
        },
    }


def serialize_shopping_list(result: ShoppingList) -> dict[str, object]:
    """Serialize a shopping list with its date range."""
    return {
        "ingredients": [_serialize_ingredient(item) for item in result.ingredients],
        "totalItems": result.total_items,
        "dateRange": result.date_range,
    }


def serialize_recommendations(result: Recommendations) -> dict[str, object]:
    """Serialize recommended dishes and the overall reason."""
    return {
        "recommendations": [
            _serialize_recommended(dish) for dish in result.recommendations
        ],
        "reason": result.reason,
    }


def _serialize_popularity(dish: DishPopularity) -> dict[str, object]:
    return {
        "dishId": dish.dish_id,
        "dishName": dish.dish_name,
        "count": dish.count,
        "calories": dish.calories,
        "cuisine": dish.cuisine,
    }


def _serialize_day(day: DailyNutrition) -> dict[str, object]:
    return {
        "date": day.date.isoformat(),
        "calories": day.calories,
        "protein": day.protein,
        "carbs": day.carbs,
        "fat": day.fat,
        "fiber": day.fiber,
        "sodium": day.sodium,
        "mealCount": day.meal_count,
    }


def _serialize_ingredient(item: IngredientItem) -> dict[str, object]:
    return {
        "name": item.name,
        "quantity": item.quantity,
        "category": item.category,
        "count": item.count,
    }


def _serialize_recommended(dish: RecommendedDish) -> dict[str, object]:
    return {
        "dishId": dish.dish_id,
        "dishName": dish.dish_name,
        "cuisine": dish.cuisine,
        "calories": dish.calories,
        "score": dish.score,
        "reason": dish.reason,
        "image": dish.image,
        "prepTime": dish.prep_time,
        "difficulty": dish.difficulty,
    }
