from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List


# Nutrition keys used by the Cookbook recipe schema, with display labels.
NUTRITION_LABELS: Dict[str, str] = {
    "calories": "Calories",
    "carbohydrateContent": "Carbohydrate content",
    "cholesterolContent": "Cholesterol content",
    "fatContent": "Fat content",
    "saturatedFatContent": "Saturated fat content",
    "unsaturatedFatContent": "Unsaturated fat content",
    "transFatContent": "Trans fat content",
    "fiberContent": "Fiber content",
    "proteinContent": "Protein content",
    "sodiumContent": "Sodium content",
    "sugarContent": "Sugar content",
}


class RecipeRecord(BaseModel):
    """Normalized recipe as produced by the extractor.

    Field aliases are the Cookbook JSON keys, so ``model_dump(by_alias=True)``
    yields a payload the recipe server understands.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    category: str = Field(default="", alias="recipeCategory")
    keywords: str = ""
    description: str = ""
    date_created: str = Field(default="", alias="dateCreated")
    date_modified: str = Field(default="", alias="dateModified")
    image_url: str = Field(default="", alias="imageUrl")
    source_url: str = Field(default="", alias="url")
    prep_time: str = Field(default="", alias="prepTime")
    cook_time: str = Field(default="", alias="cookTime")
    total_time: str = Field(default="", alias="totalTime")
    recipe_yield: int = Field(default=0, alias="recipeYield")
    ingredients: List[str] = Field(default_factory=list, alias="recipeIngredient")
    instructions: List[str] = Field(default_factory=list, alias="recipeInstructions")
    tools: List[str] = Field(default_factory=list, alias="tool")
    nutrition: Dict[str, str] = Field(default_factory=dict)

    def keyword_list(self) -> List[str]:
        if self.keywords == "":
            return []
        return self.keywords.split(",")

    def set_keywords(self, keywords: List[str]) -> None:
        """Store `keywords` comma joined. An empty list keeps the current keywords."""
        if keywords:
            self.keywords = ",".join(keywords)
