import sys
import pathlib
from dotenv import load_dotenv

# Load .env so DECIMAL_SEPARATOR, USER_AGENT and other env-vars are available
load_dotenv()

# Ensure project root is on sys.path so the `cookbook` package can be imported
ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from cookbook.orchestrate.run import url_to_recipe
from cookbook.export.text_export import create_json

url = sys.argv[1] if len(sys.argv) > 1 else "https://www.allrecipes.com/recipe/234620/mascarpone-mashed-potatoes/"
servings = float(sys.argv[2]) if len(sys.argv) > 2 else None
result = url_to_recipe(url, servings=servings)
print("--- orchestrator result ---")
if result.ok:
    print(create_json(result.record))
    if result.unscaled:
        print("unscaled lines:", result.unscaled)
else:
    print(f"{result.error.title}: {result.error.description}")
