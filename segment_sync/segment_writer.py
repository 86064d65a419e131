"""
Writes the segment summary consumed by the dashboard
"""

import json
from pathlib import Path
from typing import Any, Dict, Union


def write_segment(record: Dict[str, Any], dest: Union[str, Path]) -> Path:
    """Overwrite `dest` with the record as indented JSON, creating parent dirs."""
    dest = Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(json.dumps(record, indent=2), encoding="utf-8")
    return dest
