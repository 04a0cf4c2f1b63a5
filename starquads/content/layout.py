from __future__ import annotations

import logging
import pathlib
from typing import Any, Dict, List, Optional, Union

import yaml

from starquads.config import PanelConfig
from starquads.patterns.modes import StarMode
from starquads.patterns.star import RenderRequest
from starquads.scene import default_requests

log = logging.getLogger(__name__)

DEFAULT_LAYOUT_PATH = pathlib.Path(__file__).resolve().parent / "quadrants.yaml"

REQUIRED_KEYS = ("column", "row", "lines", "twist", "mode")


class LayoutError(Exception):
    """Raised when the quadrant layout file cannot be turned into requests."""


def _request_from_entry(cfg: PanelConfig, index: int, entry: Dict[str, Any]) -> RenderRequest:
    if not isinstance(entry, dict):
        raise LayoutError(f"quadrant #{index}: expected a mapping, got {type(entry).__name__}")
    missing = [k for k in REQUIRED_KEYS if k not in entry]
    if missing:
        raise LayoutError(f"quadrant #{index}: missing keys {', '.join(missing)}")
    try:
        column = int(entry["column"])
        row = int(entry["row"])
        lines = int(entry["lines"])
        twist = int(entry["twist"])
        mode = StarMode.parse(entry["mode"])
        if column not in (0, 1) or row not in (0, 1):
            raise LayoutError(f"quadrant #{index}: column and row must be 0 or 1, got ({column}, {row})")
        return RenderRequest(
            offset_x=column * cfg.quadrant_size,
            offset_y=row * cfg.quadrant_size,
            line_count=lines * cfg.num_lines,
            twist_factor=twist,
            mode=mode,
        )
    except (TypeError, ValueError) as e:
        raise LayoutError(f"quadrant #{index}: {e}") from e


def load_layout(cfg: PanelConfig, path: Optional[Union[str, pathlib.Path]] = None) -> List[RenderRequest]:
    """
    Read the quadrant layout and build one RenderRequest per entry.

    `lines` in the file is a multiple of cfg.num_lines and column/row pick
    the quadrant. Falls back to the built-in layout if the file is absent.
    """
    layout_path = pathlib.Path(path) if path is not None else DEFAULT_LAYOUT_PATH
    if not layout_path.exists():
        log.info("No layout file at %s; using built-in quadrants.", layout_path)
        return default_requests(cfg)
    with layout_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise LayoutError(f"{layout_path}: {e}") from e
    entries = data.get("quadrants") if isinstance(data, dict) else None
    if not isinstance(entries, list) or not entries:
        raise LayoutError(f"{layout_path}: expected a non-empty 'quadrants' list")
    requests = [_request_from_entry(cfg, i, entry) for i, entry in enumerate(entries)]
    log.debug("Loaded %d quadrants from %s", len(requests), layout_path)
    return requests
