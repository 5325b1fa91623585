import hashlib
import json
import logging
import os
import secrets
from datetime import datetime, timezone
from pathlib import Path
from tempfile import NamedTemporaryFile

from .models import RenderedDocument

logger = logging.getLogger(__name__)


def make_timestamp() -> str:
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
    return f"{timestamp}_{os.getpid()}_{secrets.token_hex(3)}"


def ensure_runs_dir(path: str = "runs") -> None:
    Path(path).mkdir(parents=True, exist_ok=True)


def _atomic_write(path: Path, content: str) -> None:
    with NamedTemporaryFile("w", encoding="utf-8", dir=path.parent, delete=False) as tmp_file:
        tmp_file.write(content)
        tmp_path = Path(tmp_file.name)
    os.replace(tmp_path, path)


def render_metadata(document: RenderedDocument) -> dict:
    return {
        "template_id": document.template_id,
        "placeholders": sorted(document.values),
        "value_lengths": {name: len(value) for name, value in sorted(document.values.items())},
        "sha256": hashlib.sha256(document.text.encode("utf-8")).hexdigest(),
        "chars": len(document.text),
    }


def save_render(document: RenderedDocument, runs_dir: str = "runs") -> dict[str, str]:
    ensure_runs_dir(runs_dir)
    ts = make_timestamp()

    prompt_path = Path(runs_dir) / f"prompt_{document.template_id}_{ts}.md"
    meta_path = Path(runs_dir) / f"prompt_{document.template_id}_{ts}.json"

    _atomic_write(prompt_path, document.text)
    _atomic_write(
        meta_path,
        json.dumps(render_metadata(document), separators=(",", ":"), sort_keys=True, ensure_ascii=False),
    )
    logger.info("Saved rendered prompt to %s", prompt_path, extra={"path": str(prompt_path)})

    return {
        "prompt_path": str(prompt_path),
        "meta_path": str(meta_path),
    }
