"""Sample `brew info --json=v2` documents for parsing tests."""

import json


def brew_info_json(
    name: str,
    *,
    tap: str | None = "homebrew/core",
    bottle_tags: list[str] | None = None,
) -> str:
    """Render a minimal `brew info --json=v2 --formula NAME` document.

    Args:
        name: Formula name
        tap: Tap the formula belongs to
        bottle_tags: Tags with a stable bottle file. None means no bottle block.
    """
    formula: dict[str, object] = {
        "name": name,
        "full_name": name if tap in (None, "homebrew/core") else f"{tap}/{name}",
        "tap": tap,
        "versions": {"stable": "1.0", "bottle": bottle_tags is not None},
        "bottle": {},
    }
    if bottle_tags is not None:
        formula["bottle"] = {
            "stable": {
                "rebuild": 0,
                "root_url": "https://ghcr.io/v2/homebrew/core",
                "files": {
                    tag: {
                        "cellar": ":any",
                        "url": f"https://ghcr.io/v2/homebrew/core/{name}/blobs/sha256:{tag}",
                        "sha256": "0" * 64,
                    }
                    for tag in bottle_tags
                },
            }
        }
    return json.dumps({"formulae": [formula], "casks": []})
