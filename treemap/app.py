import logging
import os
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from treemap.errors import InvalidOperation
from treemap.indexing import BinarySearchTreeMap

logger = logging.getLogger(__name__)

DEFAULT_HOST = os.environ.get("TREEMAP_HOST", "127.0.0.1")
DEFAULT_PORT = int(os.environ.get("TREEMAP_PORT", "5000"))
DEFAULT_SEED = os.environ.get("TREEMAP_SEED", "")


def ok(data=None, **extra):
    payload = {"ok": True}
    if data is not None:
        payload["data"] = data
    payload.update(extra)
    return jsonify(payload)

def err(message: str, status: int = 400, **extra):
    payload = {"ok": False, "error": message}
    payload.update(extra)
    return jsonify(payload), status

def parse_key(raw: str) -> Optional[int]:
    """Keys travel as path segments; only integers are accepted."""
    try:
        return int(raw.strip())
    except ValueError:
        return None

def parse_seed(seed: str) -> Dict[int, str]:
    """Parse "k=v,k=v" into a dict, skipping malformed pairs."""
    pairs: Dict[int, str] = {}
    for item in seed.split(","):
        key_raw, sep, value = item.partition("=")
        if not sep:
            continue
        key = parse_key(key_raw)
        if key is None:
            print(f"[warm_start] Skipping malformed seed key: {key_raw!r}")
            continue
        pairs[key] = value.strip()
    return pairs


def warm_start(tree: BinarySearchTreeMap, seed: str = DEFAULT_SEED) -> int:
    """Load seed entries into tree; returns how many were inserted."""
    pairs = parse_seed(seed or "")
    if not pairs:
        print("[warm_start] No seed entries provided.")
        return 0

    inserted = 0
    for key, value in pairs.items():
        if tree.put(key, value) is None:
            inserted += 1
    print(f"[warm_start] Loaded {inserted} entries, map size is {len(tree)}")
    return inserted


def create_app(tree: Optional[BinarySearchTreeMap] = None) -> Flask:
    app = Flask(__name__)
    store = tree if tree is not None else BinarySearchTreeMap()

    @app.get("/api/status")
    def api_status():
        return ok({"size": store.size(), "is_empty": store.is_empty()})

    @app.get("/api/map")
    def api_render():
        return ok({"rendered": store.to_string()})

    @app.get("/api/map/<key>")
    def api_get(key: str):
        k = parse_key(key)
        if k is None:
            return err("key must be an integer")

        value = store.get(k)
        if value is None:
            return err("key not found", 404)
        return ok({"key": k, "value": value})

    @app.put("/api/map/<key>")
    def api_put(key: str):
        k = parse_key(key)
        if k is None:
            return err("key must be an integer")

        data: Any = request.get_json(silent=True) or {}
        if not isinstance(data, dict) or "value" not in data:
            return err("JSON body with a 'value' field required")

        previous = store.put(k, str(data["value"]))
        return ok({"key": k, "previous": previous, "inserted": previous is None})

    @app.delete("/api/map/<key>")
    def api_remove(key: str):
        k = parse_key(key)
        if k is None:
            return err("key must be an integer")

        try:
            removed = store.remove(k)
        except InvalidOperation as e:
            logger.warning("Rejected removal of key %s: %s", k, e)
            return err(str(e), 409)
        if removed is None:
            return err("key not found", 404)
        return ok({"key": k, "value": removed})

    app.config["TREE"] = store
    return app


app = create_app()

if __name__ == "__main__":
    warm_start(app.config["TREE"])
    app.run(host=DEFAULT_HOST, port=DEFAULT_PORT, debug=True, use_reloader=False)
