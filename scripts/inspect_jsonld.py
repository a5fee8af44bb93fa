from cookbook.ingest.fetch import fetch_url
from cookbook.ingest.jsonld import iter_jsonld_blocks, is_recipe
import json, sys
url = sys.argv[1] if len(sys.argv)>1 else 'https://downshiftology.com/recipes/chicken-piccata/'
html, _ = fetch_url(url)
blocks = list(iter_jsonld_blocks(html))
print('Found', len(blocks), 'JSON-LD blocks')
for i,b in enumerate(blocks[:10]):
    objs = b if isinstance(b, list) else [b]
    recipe = any(isinstance(o, dict) and is_recipe(o) for o in objs)
    print('--- block', i, '(Recipe)' if recipe else '')
    print(json.dumps(b, indent=2)[:1000])
