"""Loading of slab policy documents.

Policy files may be YAML or JSON; JSON is read through the YAML parser.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent.parent


def load_yaml(path: Path | str) -> Any:
    """Parse a YAML or JSON policy document.

    An empty file parses to an empty dict.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the content is not valid YAML.
    """
    text = Path(path).read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    return {} if data is None else data


def load_package_yaml(relative_path: str) -> Any:
    """Load a document shipped inside the package, e.g. ``"taxes/tables/slab_policy.yaml"``."""
    return load_yaml(PACKAGE_ROOT / relative_path)
