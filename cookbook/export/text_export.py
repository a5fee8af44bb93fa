"""Share a recipe as plain text or Cookbook JSON."""

from __future__ import annotations

from cookbook.models.recipe_schema import RecipeRecord


def create_text(recipe: RecipeRecord) -> str:
    parts = ["☛ " + recipe.name + "\n", recipe.description + "\n\n"]
    for ingredient in recipe.ingredients:
        parts.append("•" + ingredient + "\n")
    parts.append("\n")
    for counter, instruction in enumerate(recipe.instructions, start=1):
        parts.append(f"{counter}. {instruction}\n")
    return "".join(parts)


def create_json(recipe: RecipeRecord, indent: int | None = 2) -> str:
    """Serialize with the Cookbook key names (recipeIngredient, url, ...)."""
    return recipe.model_dump_json(by_alias=True, indent=indent)
