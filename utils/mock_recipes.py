"""
Mock recipe builders for the offline test database.

Every field is derived from the recipe's index by cycling through small fixed
lookup tables, so the same index always produces the same record.
"""

import json
from pathlib import Path

DATABASE_VERSION = "1.0.0-test"

PROTEINS = ["chicken", "beef", "fish", "tofu", "eggs"]
VEGETABLES = ["broccoli", "carrots", "onions", "peppers", "mushrooms"]
GRAINS = ["rice", "pasta", "quinoa", "bread"]
CUISINES = ["Italian", "Asian", "Mexican", "American", "Mediterranean"]
DIFFICULTIES = ["Easy", "Medium", "Hard"]

ENVELOPE_KEYS = {
    "version": str,
    "generatedAt": str,
    "totalRecipes": int,
    "recipes": list,
    "ingredientCombinations": list,
}

RECIPE_KEYS = {
    "id": str,
    "title": str,
    "description": str,
    "ingredients": list,
    "instructions": list,
    "cookingTime": int,
    "servings": int,
    "difficulty": str,
    "cuisine": str,
    "tags": list,
}


def _pick(table: list[str], index: int) -> str:
    return table[index % len(table)]


def build_mock_recipe(index: int) -> dict:
    """Build the mock recipe for a 1-based index."""
    protein = _pick(PROTEINS, index)
    vegetable = _pick(VEGETABLES, index)
    grain = _pick(GRAINS, index)
    cuisine = _pick(CUISINES, index)
    difficulty = _pick(DIFFICULTIES, index)

    return {
        "id": f"test_recipe_{index}",
        "title": f"{cuisine} {protein} with {vegetable}",
        "description": (
            f"A delicious {difficulty.lower()} recipe featuring "
            f"{protein} and {vegetable}."
        ),
        "ingredients": [
            {"name": protein, "amount": "1", "unit": "lb"},
            {"name": vegetable, "amount": "2", "unit": "cups"},
            {"name": grain, "amount": "1", "unit": "cup"},
            {"name": "olive oil", "amount": "2", "unit": "tbsp"},
            {"name": "salt", "amount": "to taste"},
            {"name": "pepper", "amount": "to taste"},
        ],
        "instructions": [
            f"Prepare {protein} by seasoning with salt and pepper",
            "Heat olive oil in a large pan over medium heat",
            f"Cook {protein} until golden brown, about 5-7 minutes",
            f"Add {vegetable} and cook until tender, 3-5 minutes",
            f"Serve over cooked {grain}",
            "Enjoy your delicious meal!",
        ],
        "cookingTime": 20 + (index % 25),  # 20-44 minutes
        "servings": 2 + (index % 4),  # 2-5 servings
        "difficulty": difficulty,
        "cuisine": cuisine,
        "tags": ["test-recipe", difficulty.lower(), cuisine.lower()],
    }


def build_database(recipes: list[dict], generated_at: str) -> dict:
    """
    Wrap recipes in the database envelope.

    Args:
        recipes: Mock recipe records, in index order
        generated_at: ISO-8601 timestamp for the ``generatedAt`` field

    Returns:
        Envelope dict ready for JSON serialization
    """
    return {
        "version": DATABASE_VERSION,
        "generatedAt": generated_at,
        "totalRecipes": len(recipes),
        "recipes": recipes,
        "ingredientCombinations": [],
    }


def load_database(path: Path) -> dict:
    """Load a generated database file."""
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _check_types(record: dict, expected: dict[str, type], label: str) -> list[str]:
    problems = []
    for key, expected_type in expected.items():
        if key not in record:
            problems.append(f"{label}: missing '{key}'")
            continue
        value = record[key]
        # bools pass isinstance(value, int)
        if isinstance(value, bool) or not isinstance(value, expected_type):
            problems.append(
                f"{label}: '{key}' should be {expected_type.__name__}, "
                f"got {type(value).__name__}"
            )
    return problems


def _validate_recipe(recipe, position: int) -> list[str]:
    label = f"recipes[{position}]"
    if not isinstance(recipe, dict):
        return [f"{label}: expected an object"]

    problems = _check_types(recipe, RECIPE_KEYS, label)

    difficulty = recipe.get("difficulty")
    if isinstance(difficulty, str) and difficulty not in DIFFICULTIES:
        problems.append(f"{label}: unknown difficulty '{difficulty}'")

    for i, ingredient in enumerate(recipe.get("ingredients") or []):
        if not isinstance(ingredient, dict):
            problems.append(f"{label}.ingredients[{i}]: expected an object")
            continue
        for key in ("name", "amount"):
            if not isinstance(ingredient.get(key), str):
                problems.append(f"{label}.ingredients[{i}]: '{key}' should be str")
        if "unit" in ingredient and not isinstance(ingredient["unit"], str):
            problems.append(f"{label}.ingredients[{i}]: 'unit' should be str")

    for key in ("instructions", "tags"):
        values = recipe.get(key)
        if isinstance(values, list) and not all(isinstance(v, str) for v in values):
            problems.append(f"{label}: '{key}' should only contain strings")

    return problems


def validate_database(database) -> list[str]:
    """
    Check that a loaded database has the expected type shape.

    Only structure is checked, not whether the recipes make sense.

    Args:
        database: Parsed JSON content of a database file

    Returns:
        List of problem descriptions (empty if the database is valid)
    """
    if not isinstance(database, dict):
        return ["database: expected an object"]

    problems = _check_types(database, ENVELOPE_KEYS, "database")

    recipes = database.get("recipes")
    if not isinstance(recipes, list):
        return problems

    total = database.get("totalRecipes")
    if isinstance(total, int) and total != len(recipes):
        problems.append(
            f"database: totalRecipes is {total} but there are {len(recipes)} recipes"
        )

    for position, recipe in enumerate(recipes):
        problems.extend(_validate_recipe(recipe, position))

    return problems
