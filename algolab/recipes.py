"""A small recipe book and its interactive menu."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Recipe:
    """A named recipe; the most recently added ingredient is listed first."""

    name: str
    instructions: str
    ingredients: list[str] = field(default_factory=list)

    def add_ingredient(self, name: str) -> None:
        """Add an ingredient at the front of the list."""
        self.ingredients.insert(0, name)


class RecipeAssistant:
    """A collection of recipes; the most recently added comes first."""

    def __init__(self) -> None:
        self._recipes: list[Recipe] = []

    def add_recipe(self, name: str, instructions: str) -> Recipe:
        """Create a recipe, put it first, and return it."""
        recipe = Recipe(name, instructions)
        self._recipes.insert(0, recipe)
        return recipe

    def find(self, name: str) -> Optional[Recipe]:
        """The most recently added recipe called ``name``, or ``None``."""
        return next((recipe for recipe in self._recipes if recipe.name == name), None)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(list(self._recipes))

    def __len__(self) -> int:
        return len(self._recipes)


_MENU = """
Menu:
1. Add Recipe
2. Search Recipe
3. List Recipes
4. Quit
Select an option (1/2/3/4): """


def _read_line() -> Optional[str]:
    line = sys.stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _ingredient_line(recipe: Recipe) -> str:
    return "Ingredients: " + "".join(f"{name}, " for name in recipe.ingredients)


def _add(assistant: RecipeAssistant) -> bool:
    print("\nEnter Recipe Name: ", end="")
    name = _read_line()
    if name is None:
        return False
    print("Enter Instructions: ", end="")
    instructions = _read_line()
    if instructions is None:
        return False
    recipe = assistant.add_recipe(name, instructions)
    print("\nEnter Ingredients (enter 'done' to finish adding ingredients):")
    while True:
        ingredient = _read_line()
        if ingredient is None:
            return False
        if ingredient == "done":
            break
        recipe.add_ingredient(ingredient)
    print("Recipe added successfully!")
    return True


def _search(assistant: RecipeAssistant) -> bool:
    print("\nEnter Recipe Name to Search: ", end="")
    name = _read_line()
    if name is None:
        return False
    recipe = assistant.find(name)
    if recipe is None:
        print(f"\nRecipe for {name} not found.")
    else:
        print(f"\nRecipe for {recipe.name}:")
        print(_ingredient_line(recipe))
        print(f"Instructions: {recipe.instructions}")
    return True


def _list(assistant: RecipeAssistant) -> None:
    print("\nAvailable recipes:")
    for recipe in assistant:
        print(f"Name: {recipe.name}")
        print(_ingredient_line(recipe))
        print(f"Instructions: {recipe.instructions}")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the recipe menu on standard input until Quit or end of input."""
    assistant = RecipeAssistant()
    while True:
        print(_MENU, end="")
        line = _read_line()
        if line is None:
            return 0
        choice = _leading_int(line)
        if choice == 1:
            if not _add(assistant):
                return 0
        elif choice == 2:
            if not _search(assistant):
                return 0
        elif choice == 3:
            _list(assistant)
        elif choice == 4:
            print("\nGoodbye!")
            return 0
        else:
            print("\nInvalid choice. Please select a valid option.")


if __name__ == "__main__":
    sys.exit(main())