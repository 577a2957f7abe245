from __future__ import annotations

import pytest
from datetime import datetime, timezone

from pydantic import ValidationError

from mela_recipes.domain.models import Recipe, RecipeFormat


def create_test_recipe(**overrides) -> Recipe:
    fields = {
        "id": "example.com/pancakes",
        "date": datetime(2021, 1, 1, tzinfo=timezone.utc),
        "title": "Pancakes",
    }
    fields.update(overrides)
    return Recipe(**fields)


class TestRecipeFormat:
    def test_format_values(self) -> None:
        assert RecipeFormat.SINGLE.value == ".melarecipe"
        assert RecipeFormat.COLLECTION.value == ".melarecipes"

    def test_format_is_string_enum(self) -> None:
        assert isinstance(RecipeFormat.SINGLE, str)
        assert RecipeFormat(".melarecipes") is RecipeFormat.COLLECTION


class TestRecipe:
    def test_defaults(self) -> None:
        recipe = create_test_recipe()

        assert recipe.images == ()
        assert recipe.categories == ()
        assert recipe.wantToCook is False
        assert recipe.favorite is False
        assert recipe.yield_ is None
        assert recipe.notes is None

    def test_yield_by_alias_and_by_name(self) -> None:
        by_name = create_test_recipe(yield_="4 servings")
        by_alias = Recipe.model_validate(
            {"id": "x", "date": "2021-01-01T00:00:00Z", "yield": "4 servings"}
        )

        assert by_name.yield_ == "4 servings"
        assert by_alias.yield_ == "4 servings"

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            create_test_recipe(id="")

    def test_recipe_is_frozen(self) -> None:
        recipe = create_test_recipe()

        with pytest.raises(ValidationError):
            recipe.title = "Waffles"

    def test_sequences_are_immutable(self) -> None:
        recipe = create_test_recipe(images=["cover.jpg"], categories=["Breakfast"])

        assert recipe.images == ("cover.jpg",)
        assert recipe.categories == ("Breakfast",)
        with pytest.raises(AttributeError):
            recipe.images.append("other.jpg")
        with pytest.raises(TypeError):
            recipe.categories[0] = "Dinner"

    def test_equality_by_contents(self) -> None:
        assert create_test_recipe() == create_test_recipe()
        assert create_test_recipe() != create_test_recipe(title="Waffles")
