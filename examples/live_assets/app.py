"""Live Assets — stylesheets rebuilt from Sass whenever they change.

Demonstrates:
- AssetCompiler in front of StaticFiles
- Environment overrides for the source/artifact roots
- compress=True for minified output

Edit ``assets/css/site.sass`` and reload ``/css/site.css``: the artifact
is rebuilt on the first request after the source changes.

Run (any ASGI server)::

    pip install kiln[sass]
    uvicorn app:app --reload
"""

import os
from pathlib import Path

from kiln import App, AssetCompiler, StaticFiles

HERE = Path(__file__).parent
ASSETS_DIR = HERE / "assets"
PUBLIC_DIR = Path(os.environ.get("KILN_COMPILER_DEST", HERE / "public"))

app = App()

app.add_middleware(
    AssetCompiler(
        src=ASSETS_DIR,
        dest=PUBLIC_DIR,
        enable=["sass", "coffeescript"],
        compress=True,
    )
)
app.add_middleware(StaticFiles(directory=PUBLIC_DIR, prefix="/"))


@app.route("/health")
def health():
    return "ok"
