"""File operation utilities."""
from pathlib import Path


def atomic_write_text(content: str, target_path: Path) -> None:
    """Write a report atomically so readers never see a partial file.

    Args:
        content: Text to write
        target_path: Target file path

    Raises:
        OSError: If the write or the replace fails
    """
    # Same directory as target so the replace stays on one filesystem
    tmp_path = target_path.with_name(target_path.name + ".tmp")

    try:
        with tmp_path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)

        tmp_path.replace(target_path)
    except Exception:
        if tmp_path.exists():
            tmp_path.unlink()
        raise
