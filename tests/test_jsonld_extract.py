import json

from cookbook.ingest.jsonld import extract
from cookbook.models.errors import ExtractionError
from cookbook.models.recipe_schema import RecipeRecord


def _page(*blocks: str, extra: str = "") -> str:
    scripts = "".join(f'<script type="application/ld+json">{b}</script>' for b in blocks)
    return f"<html><head><title>t</title>{extra}{scripts}</head><body><p>hi</p></body></html>"


def test_minimal_recipe_defaults_everything_else():
    html = _page(json.dumps({
        "@type": "Recipe",
        "name": "Soup",
        "recipeIngredient": ["2 cups broth"],
        "recipeYield": 4,
    }))
    record, error = extract(html)
    assert error is None
    assert record == RecipeRecord(name="Soup", ingredients=["2 cups broth"], recipe_yield=4)
    assert record.keywords == ""
    assert record.instructions == []
    assert record.nutrition == {}


def test_type_list_containing_recipe_qualifies():
    record, error = extract(_page(json.dumps({"@type": ["Recipe", "NewsArticle"], "name": "X"})))
    assert error is None
    assert record.name == "X"


def test_all_fields_mapped():
    data = {
        "@context": "https://schema.org",
        "@type": "Recipe",
        "name": "Pancakes",
        "recipeCategory": "Breakfast",
        "keywords": ["sweet", "quick"],
        "description": "Fluffy.",
        "dateCreated": "2024-01-01T10:00:00+0000",
        "dateModified": "2024-02-01T10:00:00+0000",
        "imageUrl": "https://example.com/p.jpg",
        "url": "https://example.com/pancakes",
        "prepTime": "PT10M",
        "cookTime": "PT20M",
        "totalTime": "PT30M",
        "recipeInstructions": ["Mix.", "Fry."],
        "recipeYield": 2,
        "recipeIngredient": ["200 g flour", "2 eggs"],
        "tool": ["pan"],
        "nutrition": {"calories": "300 kcal", "fatContent": "10 g"},
    }
    record, error = extract(_page(json.dumps(data)))
    assert error is None
    assert record.name == "Pancakes"
    assert record.category == "Breakfast"
    assert record.keywords == "sweet,quick"
    assert record.keyword_list() == ["sweet", "quick"]
    assert record.description == "Fluffy."
    assert record.date_created == "2024-01-01T10:00:00+0000"
    assert record.date_modified == "2024-02-01T10:00:00+0000"
    assert record.image_url == "https://example.com/p.jpg"
    assert record.source_url == "https://example.com/pancakes"
    assert (record.prep_time, record.cook_time, record.total_time) == ("PT10M", "PT20M", "PT30M")
    assert record.instructions == ["Mix.", "Fry."]
    assert record.recipe_yield == 2
    assert record.ingredients == ["200 g flour", "2 eggs"]
    assert record.tools == ["pan"]
    assert record.nutrition == {"calories": "300 kcal", "fatContent": "10 g"}


def test_no_jsonld_script_is_not_supported():
    html = "<html><head><script>var x = 1;</script></head><body>Recipe</body></html>"
    assert extract(html) == (None, ExtractionError.WEBSITE_NOT_SUPPORTED)


def test_no_script_at_all_is_not_supported():
    assert extract("<html><body><h1>Soup</h1></body></html>") == (
        None,
        ExtractionError.WEBSITE_NOT_SUPPORTED,
    )


def test_invalid_json_only_is_not_supported():
    html = _page('{"@type": "Recipe", "name": ')
    assert extract(html) == (None, ExtractionError.WEBSITE_NOT_SUPPORTED)


def test_invalid_block_is_skipped_for_later_valid_one():
    html = _page("{not json", json.dumps({"@type": "Recipe", "name": "Later"}))
    record, error = extract(html)
    assert error is None
    assert record.name == "Later"


def test_type_attribute_must_match_exactly():
    html = '<script type="application/LD+JSON">{"@type": "Recipe", "name": "A"}</script>'
    assert extract(html) == (None, ExtractionError.WEBSITE_NOT_SUPPORTED)


def test_non_recipe_objects_are_not_supported():
    html = _page(json.dumps({"@type": "Organization", "name": "Acme"}))
    assert extract(html) == (None, ExtractionError.WEBSITE_NOT_SUPPORTED)


def test_first_recipe_in_document_order_wins():
    html = _page(
        json.dumps({"@type": "WebSite", "name": "site"}),
        json.dumps([{"@type": "Person"}, {"@type": "Recipe", "name": "First"}]),
        json.dumps({"@type": "Recipe", "name": "Second"}),
    )
    record, _ = extract(html)
    assert record.name == "First"


def test_recipe_inside_graph():
    data = {
        "@context": "https://schema.org",
        "@graph": [
            {"@type": "WebPage", "name": "page"},
            {"@type": "Recipe", "name": "Graph stew", "recipeInstructions": [
                {"@type": "HowToStep", "text": "Chop."},
                {"@type": "HowToStep", "name": "no text"},
                {"@type": "HowToStep", "text": "Simmer."},
            ]},
        ],
    }
    record, error = extract(_page(json.dumps(data)))
    assert error is None
    assert record.name == "Graph stew"
    assert record.instructions == ["Chop.", "Simmer."]


def test_missing_name_defaults_to_new_recipe():
    record, _ = extract(_page(json.dumps({"@type": "Recipe", "name": 12})))
    assert record.name == "New Recipe"


def test_free_text_yield_defaults_to_zero():
    record, _ = extract(_page(json.dumps({"@type": "Recipe", "recipeYield": "4 servings"})))
    assert record.recipe_yield == 0


def test_image_object_is_not_handled():
    data = {"@type": "Recipe", "image": {"@type": "ImageObject", "url": "https://e.com/i.jpg"}}
    record, _ = extract(_page(json.dumps(data)))
    assert record.image_url == ""


def test_plain_image_string_is_used():
    record, _ = extract(_page(json.dumps({"@type": "Recipe", "image": "https://e.com/i.jpg"})))
    assert record.image_url == "https://e.com/i.jpg"


def test_deeply_nested_json_is_skipped():
    body = "[" * 100000 + "]" * 100000
    assert extract(_page(body)) == (None, ExtractionError.WEBSITE_NOT_SUPPORTED)


def test_deeply_nested_block_does_not_hide_later_recipe():
    html = _page("[" * 100000 + "]" * 100000, json.dumps({"@type": "Recipe", "name": "Still here"}))
    record, error = extract(html)
    assert error is None
    assert record.name == "Still here"
