"""Clip path SVG markup and unique id generation."""
import html
import itertools
import threading
from typing import NamedTuple

from clippath.config import ClipPathConfig
from clippath.constants import ID_PREFIX, VIEWPORT_SIZE, PREVIEW_SIZE, PREVIEW_FILL
from clippath.star import shape_path


class IdSource:
    """Mints unique clip path ids: '<prefix>-0', '<prefix>-1', ...

    Pass one instance to every caller that shares an id namespace (one SVG
    document, one page). next_id() is safe to call from several threads.
    """

    def __init__(self, prefix: str = ID_PREFIX):
        self.prefix = prefix
        self._counter = itertools.count()
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            n = next(self._counter)
        return f"{self.prefix}-{n}"


class ClipPath(NamedTuple):
    clip_id: str
    path_d: str
    svg: str      # zero-size <svg> holding the <clipPath> definition
    style: str    # value for the CSS clip-path property


def clip_path_style(clip_id: str) -> str:
    return f"url(#{clip_id})"


def _clip_path_defs(path_d: str, clip_id: str, indent: str = "  ") -> list[str]:
    return [
        f'{indent}<defs>',
        f'{indent}  <clipPath id="{html.escape(clip_id)}" clipPathUnits="objectBoundingBox">',
        f'{indent}    <path fill="#FFFFFF" stroke="#000000" d="{path_d}"/>',
        f'{indent}  </clipPath>',
        f'{indent}</defs>',
    ]


def render_clip_path_svg(path_d: str, clip_id: str, viewport_size: float = VIEWPORT_SIZE) -> str:
    """Zero-size SVG element defining a clip path, ready to append to a host element."""
    v2 = viewport_size/2
    out = [f'<svg xmlns="http://www.w3.org/2000/svg" width="0" height="0"'
           f' viewBox="{-v2:g} {-v2:g} {viewport_size:g} {viewport_size:g}">']
    out.extend(_clip_path_defs(path_d, clip_id))
    out.append('</svg>')
    return "\n".join(out)


def build_clip_path(config: ClipPathConfig, ids: IdSource | str) -> ClipPath:
    """Clip path for *config*; *ids* is an IdSource or an explicit unique id.

    Pure strings only: applying them to a rendering surface is up to the caller.
    """
    clip_id = ids if isinstance(ids, str) else ids.next_id()
    path_d = shape_path(config)
    return ClipPath(clip_id, path_d, render_clip_path_svg(path_d, clip_id), clip_path_style(clip_id))


def render_preview_svg(clip: ClipPath, size: int = PREVIEW_SIZE, fill: str = PREVIEW_FILL) -> str:
    """Standalone SVG document showing the clip path applied to a filled square."""
    out = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}"'
           f' viewBox="0 0 {size} {size}">']
    out.extend(_clip_path_defs(clip.path_d, clip.clip_id))
    out.append(f'  <rect x="0" y="0" width="{size}" height="{size}"'
               f' fill="{html.escape(fill)}" clip-path="{html.escape(clip.style)}"/>')
    out.append('</svg>')
    return "\n".join(out)
