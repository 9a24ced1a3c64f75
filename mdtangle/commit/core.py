# mdtangle/commit/core.py
import contextlib
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple, Union

from ..errors.path import PathViolation


log = logging.getLogger(__name__)


@dataclass
class Output:
    """A tangled file slated for writing."""
    path: str
    content: str


@dataclass
class WriteSummary:
    """Outcome of a write_outputs call."""

    success: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    dry_run: bool = False
    # Map output path -> error string (when failed)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def attempted(self) -> int:
        return len(self.success) + len(self.failed)


def _normalized_path(base_real: str, rel_path: str, confine: bool) -> str:
    """
    Join and normalize an output path against base_real.
    Raises PathViolation if confine is set and the result escapes base_real.
    """
    if os.path.isabs(rel_path):
        target_path = rel_path
    else:
        target_path = os.path.join(base_real, *rel_path.split("/"))
    resolved = os.path.abspath(target_path)
    if confine and os.path.commonpath([base_real, resolved]) != base_real:
        raise PathViolation(f"Output path '{rel_path}' resolves outside '{base_real}'")
    return resolved


def _backup_path(dest: str, backup_ext: str) -> str:
    ext = backup_ext if backup_ext.startswith(".") else "." + backup_ext
    return dest + ext


def _as_outputs(outputs: Union[Mapping[str, str], List[Output]]) -> List[Output]:
    if isinstance(outputs, Mapping):
        return [Output(path=p, content=c) for p, c in outputs.items()]
    return list(outputs)


def write_outputs(
    base_path: str,
    outputs: Union[Mapping[str, str], List[Output]],
    *,
    atomic: bool = False,
    dry_run: bool = False,
    backup_ext: Optional[str] = None,
    confine: bool = True,
    encoding: str = "utf-8",
) -> WriteSummary:
    """
    Write tangled files below base_path, one at a time.

    A failure on one file is recorded in the summary and does not stop the
    others. Content is written byte-for-byte (no newline translation).

    Args:
        base_path: Directory relative output paths are resolved against.
        outputs: Mapping of output path -> text, or a list of Output.
        atomic: If True, write each file to a same-directory tempfile and
                promote it with os.replace(), so a reader never sees a
                half-written file.
        dry_run: If True, validate and report only; nothing is written.
        backup_ext: Optional extension (".bak" or "bak") used to keep a copy
                    of a file that is about to be overwritten.
        confine: If True, reject paths resolving outside base_path.
        encoding: Text encoding of the written files.

    Returns:
        WriteSummary listing written and failed paths.
    """
    summary = WriteSummary(dry_run=dry_run)
    base_real = os.path.realpath(base_path)

    normalized: List[Tuple[Output, str]] = []
    for out in _as_outputs(outputs):
        try:
            normalized.append((out, _normalized_path(base_real, out.path, confine)))
        except Exception as e:
            log.info("Skipping %s: %s", out.path, e)
            summary.failed.append(out.path)
            summary.errors[out.path] = str(e)

    if dry_run:
        for out, resolved in normalized:
            try:
                # Closest existing ancestor must be writable for makedirs to succeed.
                probe = os.path.dirname(resolved)
                while not os.path.exists(probe) and os.path.dirname(probe) != probe:
                    probe = os.path.dirname(probe)
                if not os.path.isdir(probe):
                    raise NotADirectoryError(f"'{probe}' is not a directory")
                if not os.access(probe, os.W_OK):
                    raise PermissionError(f"No write permission for directory '{probe}'")
                if os.path.isdir(resolved):
                    raise IsADirectoryError(f"'{out.path}' is a directory")
                summary.success.append(f"DRY RUN: Would write {out.path} ({len(out.content)} chars)")
            except Exception as e:
                summary.failed.append(out.path)
                summary.errors[out.path] = str(e)
        return summary

    for out, resolved in normalized:
        tmp = None
        try:
            dirpath = os.path.dirname(resolved)
            os.makedirs(dirpath, exist_ok=True)
            if backup_ext and os.path.isfile(resolved):
                shutil.copy2(resolved, _backup_path(resolved, backup_ext))
            if atomic:
                fd, tmp = tempfile.mkstemp(prefix=".mdtangle-", suffix=".tmp", dir=dirpath)
                with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
                    f.write(out.content)
                os.replace(tmp, resolved)  # atomic within a filesystem
                tmp = None
            else:
                with open(resolved, "w", encoding=encoding, newline="") as f:
                    f.write(out.content)
            summary.success.append(out.path)
            log.debug("Wrote %s", resolved)
        except Exception as e:
            log.info("Could not write %s: %s", out.path, e)
            summary.failed.append(out.path)
            summary.errors[out.path] = str(e)
        finally:
            if tmp is not None:
                with contextlib.suppress(OSError):
                    os.remove(tmp)

    return summary
