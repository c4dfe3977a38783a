# Apache Software License 2.0
#
# Copyright (c) ZenML GmbH 2025. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""YAML configuration for the predictor.

A config is read from ``src/configs``. ``<prefix>_<environment>.yaml`` is
appended to ``common.yaml`` before parsing, so environment files can merge
the anchors declared there (``<<: *server``). String values may reference
other keys as ``${section.key}`` or environment variables as ``${NAME}``.
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

CONFIG_DIR = Path(__file__).parent.parent / "configs"
COMMON_FILE = "common.yaml"

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")
_loaded: Dict[Tuple[str, str, Optional[str]], Dict[str, Any]] = {}


def lookup(cfg: Dict[str, Any], key_path: str, default: Any = None) -> Any:
    """Walk a dot-separated key path through a nested dict."""
    node: Any = cfg
    for part in key_path.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node


def interpolate(value: Any, cfg: Dict[str, Any]) -> Any:
    """Resolve ``${...}`` placeholders in every string of ``value``.

    Unresolvable placeholders are left as written.
    """

    def resolve(match: "re.Match") -> str:
        name = match.group(1)
        if "." not in name and name in os.environ:
            return os.environ[name]
        found = lookup(cfg, name, default=match)
        return match.group(0) if found is match else str(found)

    if isinstance(value, str):
        return _PLACEHOLDER.sub(resolve, value)
    if isinstance(value, dict):
        return {key: interpolate(item, cfg) for key, item in value.items()}
    if isinstance(value, list):
        return [interpolate(item, cfg) for item in value]
    return value


def _read(config_dir: Path, fname: str) -> Dict[str, Any]:
    path = config_dir / fname
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    text = path.read_text()
    common = config_dir / COMMON_FILE
    if fname != COMMON_FILE and common.exists():
        text = common.read_text() + "\n" + text
    return yaml.safe_load(text) or {}


def get_config(
    prefix: str = "common",
    environment: Optional[str] = None,
    force_reload: bool = False,
    config_dir: Optional[Path] = None,
) -> Dict[str, Any]:
    """Load a config file, merged with common.yaml and interpolated.

    Args:
        prefix: File prefix, e.g. ``serve``.
        environment: Environment suffix, e.g. ``production``. Without one,
            ``<prefix>.yaml`` is read.
        force_reload: Re-read the files even if a cached copy exists.
        config_dir: Directory holding the YAML files.

    Returns:
        The resolved configuration.

    Raises:
        FileNotFoundError: If the requested file does not exist.
    """
    config_dir = Path(config_dir or CONFIG_DIR)
    key = (str(config_dir), prefix, environment)
    if force_reload or key not in _loaded:
        fname = f"{prefix}_{environment}.yaml" if environment else f"{prefix}.yaml"
        raw = _read(config_dir, fname)
        _loaded[key] = interpolate(raw, raw)
    return _loaded[key]


def get_config_value(
    key_path: str,
    prefix: str = "common",
    environment: Optional[str] = None,
    default: Any = None,
    config_dir: Optional[Path] = None,
) -> Any:
    """Read one dotted key, e.g. ``server.port``, from a config."""
    cfg = get_config(prefix, environment, config_dir=config_dir)
    return lookup(cfg, key_path, default)


def clear_cache() -> None:
    """Forget every loaded configuration."""
    _loaded.clear()
