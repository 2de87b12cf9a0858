"""Built-in default configuration for nodescout."""

from __future__ import annotations

DEFAULT_CONFIG_DICT = {
    "search": {
        "manifest_name": "package.json",
        "lockfiles": ["package-lock.json", "yarn.lock"],
        "modules_dir": "node_modules",
        "workspaces_key": "workspaces",
    },
    "cli": {
        "plain": False,
        "max_items": None,
        "debug": False,
    },
}
